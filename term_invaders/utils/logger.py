"""
Logging setup.

While a match is on screen the terminal belongs to the live display, so by
default records go to a log file. An empty log_file sends them to stderr
through rich instead.
"""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config_loader import LoggingConfig

ROOT_LOGGER = "term_invaders"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def setup_logging(config: Optional[LoggingConfig] = None) -> logging.Logger:
    """
    Configure the package logger. Calling it again replaces the handler.

    Args:
        config: Logging settings (defaults to LoggingConfig())

    Returns:
        The configured package logger
    """
    config = config or LoggingConfig()
    logger = logging.getLogger(ROOT_LOGGER)

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler: logging.Handler
    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))

    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    logger.propagate = False
    return logger
