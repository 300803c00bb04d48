"""
Space Invaders match constants.
"""

from dataclasses import dataclass


@dataclass
class SpaceInvadersConfig:
    """Fixed layout and cadence of a match."""

    # Playfield (character cells, border included)
    width: int = 40
    height: int = 20

    # Player
    player_start_lives: int = 3

    # Invader formation
    invader_rows: int = 3
    invader_cols: int = 8
    invader_spacing_x: int = 4
    invader_spacing_y: int = 2
    formation_origin_x: int = 3
    formation_origin_y: int = 2
    invader_steps: int = 15  # Ticks between formation moves

    # Scoring
    points_per_invader: int = 10
