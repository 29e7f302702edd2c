"""
Configuration parameters for Reversi.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any
import json


@dataclass
class DisplayConfig:
    """Configuration for the text board renderer."""
    black_symbol: str = "b"
    white_symbol: str = "w"
    empty_symbol: str = " "
    legal_move_symbol: str = "*"
    show_legal_moves: bool = False
    show_coordinates: bool = True


@dataclass
class ArenaConfig:
    """Configuration for the console game loop."""
    prompt: str = "{player} to move (x y): "
    quit_command: str = "q"


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    log_dir: str = "logs"
    log_level: str = "WARNING"
    log_to_file: bool = False
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Reversi"
    display: DisplayConfig = field(default_factory=DisplayConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Reversi'),
            display=DisplayConfig(**config_dict.get('display', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
