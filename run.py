"""
Main script to play Reversi at the console.
"""
import os
import argparse

from reversi.config import Config, get_default_config
from reversi.logger import setup_logger
from reversi.arena import Arena


def main():
    """Play one game with the specified configuration."""
    parser = argparse.ArgumentParser(description='Play Reversi at the console')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Override the configured log level (e.g. DEBUG, INFO)')
    parser.add_argument('--show-moves', action='store_true',
                        help='Mark legal moves on the board')
    args = parser.parse_args()

    # Load configuration
    if os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        config = get_default_config()

    if args.log_level:
        config.logging.log_level = args.log_level
    if args.show_moves:
        config.display.show_legal_moves = True

    game_logger = setup_logger(config)
    try:
        arena = Arena(config, game_logger=game_logger)
        game = arena.play()
    except KeyboardInterrupt:
        print("\nGame interrupted.")
        return
    finally:
        game_logger.close()

    black, white = game.get_score()
    print(f"\nFinal score - Black: {black}, White: {white}")


if __name__ == "__main__":
    main()
