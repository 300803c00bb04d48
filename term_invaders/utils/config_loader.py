"""
Configuration Loader - Load and validate configuration from YAML.

Supports hierarchical configuration:
- config/default.yaml - Global settings
- config/games/{game_id}.yaml - Per-game settings

Game-specific settings override defaults. Only presentation, driver timing
and logging are configurable; match layout is fixed by the game itself.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any, Dict
from dataclasses import dataclass, field, asdict
from copy import deepcopy

logger = logging.getLogger(__name__)


@dataclass
class PlayConfig:
    """Driver timing."""
    tick_ms: int = 80          # Interval between engine ticks
    end_delay: float = 2.0     # Seconds to show the final screen before exit


@dataclass
class DisplayConfig:
    """Glyphs and rich styles used by the terminal renderer."""
    border_horizontal: str = "-"
    border_vertical: str = "|"
    invader_glyph: str = "W"
    player_glyph: str = "A"
    player_shot_glyph: str = "|"
    invader_shot_glyph: str = "v"
    invader_color: str = "green"
    player_color: str = "cyan"
    player_shot_color: str = "yellow"
    invader_shot_color: str = "red"
    hud_color: str = "yellow"
    win_color: str = "green"
    lose_color: str = "red"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: str = "logs/term_invaders.log"  # Empty string logs to stderr


@dataclass
class Config:
    """Complete application configuration."""
    play: PlayConfig = field(default_factory=PlayConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_SECTIONS = {
    'play': PlayConfig,
    'display': DisplayConfig,
    'logging': LoggingConfig,
}


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _build_config(data: Dict) -> Config:
    """Build a Config from parsed YAML, section by section."""
    config = Config()
    for section, cls in _SECTIONS.items():
        if section in data:
            setattr(config, section, _dict_to_dataclass(data[section], cls))
    return config


def _log_base_dir(config_dir: Path) -> Path:
    """Project root above config_dir, or ~/.term_invaders when there is none."""
    if config_dir.is_dir():
        return config_dir.resolve().parent
    return Path.home() / ".term_invaders"


def _anchor_log_file(config: Config, base_dir: Path) -> Config:
    """Resolve a relative log_file against base_dir."""
    log_file = config.logging.log_file
    if log_file and not Path(log_file).is_absolute():
        config.logging.log_file = str(base_dir / log_file)
    return config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a single YAML file.

    A relative log_file is taken relative to the file's directory, or to
    the project root when reading the default config/default.yaml.

    Args:
        config_path: Path to config file (defaults to config/default.yaml)

    Returns:
        Config object with all settings
    """
    if config_path is None:
        config_dir = _find_config_dir()
        config_path = str(config_dir / "default.yaml")
        base_dir = _log_base_dir(config_dir)
    else:
        base_dir = Path(config_path).resolve().parent

    if not Path(config_path).exists():
        logger.info("No config file found at %s, using defaults", config_path)
        return _anchor_log_file(Config(), base_dir)

    data = _load_yaml_file(Path(config_path))

    if not data:
        return _anchor_log_file(Config(), base_dir)

    return _anchor_log_file(_build_config(data), base_dir)


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries, with override values taking precedence.

    Args:
        base: Base dictionary
        override: Dictionary with values to override

    Returns:
        Merged dictionary
    """
    result = deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)

    return result


def _find_config_dir() -> Path:
    """Find the config directory."""
    possible_paths = [
        Path("config"),
        Path(__file__).parent.parent.parent / "config",
    ]

    for path in possible_paths:
        if path.exists() and path.is_dir():
            return path

    # Fallback to project root config folder
    return Path(__file__).parent.parent.parent / "config"


def _load_yaml_file(path: Path) -> Dict:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    return data if data else {}


def load_game_config(game_id: str, config_dir: Optional[Path] = None) -> Config:
    """
    Load configuration for a specific game.

    Merges default settings with game-specific settings.
    Game settings override defaults.
    A relative log_file is taken relative to the project root holding
    config_dir.

    Args:
        game_id: The game identifier (e.g., "space_invaders")
        config_dir: Directory holding default.yaml and games/ (searched if None)

    Returns:
        Config object with merged settings
    """
    if config_dir is None:
        config_dir = _find_config_dir()

    default_data = _load_yaml_file(config_dir / "default.yaml")
    game_data = _load_yaml_file(config_dir / "games" / f"{game_id}.yaml")

    # Merge configs (game overrides default)
    merged_data = _deep_merge(default_data, game_data)

    if not merged_data:
        logger.info("No config found for game '%s', using defaults", game_id)
        return _anchor_log_file(Config(), _log_base_dir(config_dir))

    return _anchor_log_file(_build_config(merged_data), _log_base_dir(config_dir))
