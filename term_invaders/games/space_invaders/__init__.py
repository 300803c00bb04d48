"""
Space Invaders game module for Term Invaders.

This module auto-registers the Space Invaders game when imported.
"""

from ..registry import GameRegistry
from .game import SpaceInvadersGame, MatchPhase, Command, Player, Invader, Projectile
from .renderer import SpaceInvadersRenderer
from .config import SpaceInvadersConfig

# Auto-register Space Invaders game when this module is imported
GameRegistry.register(
    game_class=SpaceInvadersGame,
    renderer_class=SpaceInvadersRenderer,
)

__all__ = [
    "SpaceInvadersGame",
    "SpaceInvadersRenderer",
    "SpaceInvadersConfig",
    "MatchPhase",
    "Command",
    "Player",
    "Invader",
    "Projectile",
]
