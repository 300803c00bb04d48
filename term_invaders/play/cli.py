"""
Term Invaders - command-line entry point.

Usage:
    term-invaders                         # Play Space Invaders
    term-invaders --tick-ms 60            # Faster ticks
    term-invaders --config my.yaml        # Use a single config file
"""
import argparse
import logging
import queue
import sys
from typing import List, Optional

from ..games import GameRegistry
from ..utils.config_loader import Config, load_config, load_game_config
from ..utils.logger import setup_logging
from ..visualization.terminal_display import TerminalGameDisplay
from .driver import MatchDriver, MatchResult
from .terminal_input import InputCommand, KeyReader, TerminalSetupError, raw_terminal

logger = logging.getLogger(__name__)

DEFAULT_GAME = "space_invaders"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="term-invaders",
        description="Term Invaders - defend against the invader formation in your terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Controls:
  A / Left arrow    Move left
  D / Right arrow   Move right
  SPACE             Shoot
  Q / Ctrl-C        Quit
"""
    )

    parser.add_argument(
        "-g", "--game",
        type=str,
        default=DEFAULT_GAME,
        choices=[m.id for m in GameRegistry.list_games()],
        help=f"Game to play (default: {DEFAULT_GAME})"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config file (default: config/default.yaml merged with config/games/<game>.yaml)"
    )
    parser.add_argument(
        "--tick-ms",
        type=int,
        default=None,
        help="Milliseconds between ticks (overrides config)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)"
    )

    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> Config:
    """Load config for the chosen game and apply command line overrides."""
    config = load_config(args.config) if args.config else load_game_config(args.game)

    if args.tick_ms is not None:
        config.play.tick_ms = args.tick_ms
    if args.log_level is not None:
        config.logging.level = args.log_level

    return config


def _stdin_fd() -> int:
    try:
        return sys.stdin.fileno()
    except (OSError, ValueError) as e:
        raise TerminalSetupError(f"stdin is not a terminal: {e}") from e


def play(game_id: str, config: Config) -> MatchResult:
    """
    Run one match on the controlling terminal.

    Raises:
        TerminalSetupError: The terminal could not be put into raw mode
    """
    game = GameRegistry.create_game(game_id)
    metadata = game.get_metadata()
    renderer = GameRegistry.create_renderer(
        game_id,
        width=game.width,
        height=game.height,
        display=config.display,
        controls=metadata.controls,
    )
    commands: "queue.Queue[InputCommand]" = queue.Queue()

    fd = _stdin_fd()
    with raw_terminal(fd):
        KeyReader(fd, commands).start()
        with TerminalGameDisplay(metadata.name) as display:
            driver = MatchDriver(
                game,
                renderer,
                display,
                commands,
                tick_interval=config.play.tick_ms / 1000.0,
                end_delay=config.play.end_delay,
            )
            logger.info("Starting %s (tick %d ms)", metadata.name, config.play.tick_ms)
            return driver.run()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    config = resolve_config(args)
    setup_logging(config.logging)

    try:
        result = play(args.game, config)
    except TerminalSetupError as e:
        logger.error("Terminal setup failed: %s", e)
        print(f"term-invaders: {e}", file=sys.stderr)
        return 1

    logger.info(
        "Finished: phase=%s score=%d ticks=%d quit=%s",
        result.phase, result.score, result.ticks, result.quit,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
