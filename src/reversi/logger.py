"""
Logging utilities for Reversi.
"""
import os
import logging
from datetime import datetime
from typing import Dict, Any, Optional

from .config import Config


class Logger:
    """Configures console/file logging and records per-move metrics."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)
        level = logging.DEBUG if config.logging.verbose else getattr(
            logging, config.logging.log_level.upper(), logging.WARNING)

        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        self.handlers = []

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        self.console.setFormatter(formatter)
        self.handlers.append(self.console)

        # Set up file logging
        self.log_file = None
        if config.logging.log_to_file:
            os.makedirs(self.run_dir, exist_ok=True)
            self.log_file = os.path.join(self.run_dir, 'game.log')
            file_handler = logging.FileHandler(self.log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            self.handlers.append(file_handler)

        # Configure root logger
        self.logger = logging.getLogger()
        self.logger.setLevel(level)
        for handler in self.handlers:
            self.logger.addHandler(handler)

        if self.log_file is not None:
            self.save_config()

    def save_config(self):
        """Save the configuration next to the log file."""
        self.config.save(os.path.join(self.run_dir, 'config.json'))

    def log_metrics(self, metrics: Dict[str, Any], step: int):
        """
        Log metrics at INFO level.

        Args:
            metrics: Dictionary of metrics to log
            step: Current move number
        """
        log_str = f"Move {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {name}={value:.4f}"
            else:
                log_str += f" {name}={value}"
        self.logger.info(log_str)

    def close(self):
        """Detach and close the handlers this logger installed."""
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
