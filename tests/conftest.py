"""
Pytest configuration and fixtures for Term Invaders tests.
"""

import io
import queue
import sys
from pathlib import Path

import pytest
from rich.console import Console


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def game():
    """A fresh match with the default layout."""
    from term_invaders.games.space_invaders.game import SpaceInvadersGame

    return SpaceInvadersGame()


@pytest.fixture
def renderer():
    """A renderer sized for the default playfield."""
    from term_invaders.games.space_invaders.renderer import SpaceInvadersRenderer

    return SpaceInvadersRenderer(width=40, height=20, controls="Controls: test")


@pytest.fixture
def first_shooter(monkeypatch):
    """Make invader fire selection deterministic: always the first candidate."""
    import random

    monkeypatch.setattr(random, "choice", lambda seq: seq[0])


@pytest.fixture
def memory_console():
    """A console that renders into memory instead of the terminal."""
    return Console(file=io.StringIO(), width=80, force_terminal=False, color_system=None)


@pytest.fixture
def command_queue():
    return queue.Queue()


@pytest.fixture
def config_dir(tmp_path):
    """A config directory with default and per-game YAML files."""
    games_dir = tmp_path / "games"
    games_dir.mkdir()

    (tmp_path / "default.yaml").write_text(
        "play:\n"
        "  tick_ms: 100\n"
        "  end_delay: 1.5\n"
        "display:\n"
        "  hud_color: white\n"
        "  invader_glyph: M\n"
        "logging:\n"
        "  level: DEBUG\n"
        "  log_file: ''\n"
    )
    (games_dir / "space_invaders.yaml").write_text(
        "play:\n"
        "  tick_ms: 50\n"
        "display:\n"
        "  invader_glyph: W\n"
        "  unknown_key: ignored\n"
    )

    return tmp_path
