from .config_loader import Config, load_config, load_game_config
from .logger import setup_logging

__all__ = [
    "Config",
    "load_config",
    "load_game_config",
    "setup_logging",
]
