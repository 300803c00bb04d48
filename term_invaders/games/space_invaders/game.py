"""
Space Invaders Game Core - Pure game logic implementing GameInterface.
Fixed-step tick model on an integer character grid.
"""

from dataclasses import dataclass
from typing import List, Tuple, Optional, Dict, Any
from enum import IntEnum
import logging
import random

from ...core.game_interface import GameInterface, GameMetadata
from .config import SpaceInvadersConfig

logger = logging.getLogger(__name__)

Position = Tuple[int, int]

UP = -1
DOWN = 1


class MatchPhase(IntEnum):
    """Lifecycle of a match. WON and LOST are terminal."""
    PLAYING = 0
    WON = 1
    LOST = 2


class Command(IntEnum):
    """Player commands understood by the engine."""
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    SHOOT = 2


@dataclass
class Player:
    """The player's ship."""
    x: int
    y: int
    lives: int = 3

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "lives": self.lives}


@dataclass
class Invader:
    """A single cell of the invader formation."""
    x: int
    y: int
    active: bool = True

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "active": self.active}


@dataclass
class Projectile:
    """A shot fired by the player (UP) or by an invader (DOWN)."""
    x: int = 0
    y: int = 0
    active: bool = False
    direction: int = UP

    @property
    def position(self) -> Position:
        return (self.x, self.y)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "active": self.active,
            "direction": self.direction,
        }


class SpaceInvadersGame(GameInterface):
    """
    Core Space Invaders match logic implementing GameInterface.

    The player moves along the bottom row and fires upward at a grid of
    invaders marching side to side. The formation drops one row and
    reverses whenever any invader would touch a side border. Each side
    may have at most one projectile in flight.

    All mutation goes through move_left(), move_right(), shoot() and
    advance(); none of them can fail. Out-of-range moves are clamped and
    a second shot while one is in flight is ignored.
    """

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return metadata about Space Invaders game."""
        return GameMetadata(
            name="Space Invaders",
            id="space_invaders",
            description="Destroy the invader formation before it reaches your ship",
            version="1.0.0",
            controls="Controls: A/D or arrow keys to move, SPACE to shoot, Q to quit",
        )

    def __init__(self, config: Optional[SpaceInvadersConfig] = None):
        """
        Initialize the game.

        Args:
            config: Optional layout constants (defaults to SpaceInvadersConfig())
        """
        self.config = config or SpaceInvadersConfig()
        self.width = self.config.width
        self.height = self.config.height
        self.invader_rows = self.config.invader_rows
        self.invader_cols = self.config.invader_cols
        self.invader_steps = self.config.invader_steps

        # Game state (initialized in reset)
        self.player: Player = Player(0, 0)
        self.invaders: List[List[Invader]] = []
        self.invader_direction: int = 1
        self.player_projectile: Projectile = Projectile(direction=UP)
        self.invader_projectile: Projectile = Projectile(direction=DOWN)
        self.score: int = 0
        self.tick: int = 0
        self.phase: MatchPhase = MatchPhase.PLAYING

        self.reset()

    @property
    def input_bindings(self) -> Dict[str, int]:
        return {
            "LEFT": Command.MOVE_LEFT,
            "RIGHT": Command.MOVE_RIGHT,
            "SHOOT": Command.SHOOT,
        }

    @property
    def is_over(self) -> bool:
        return self.phase != MatchPhase.PLAYING

    @property
    def lives(self) -> int:
        return self.player.lives

    def reset(self) -> Dict[str, Any]:
        """
        Reset game state and return initial state.

        Returns:
            Dictionary containing the initial game state
        """
        self.player = Player(
            x=self.width // 2,
            y=self.height - 2,
            lives=self.config.player_start_lives,
        )
        self.score = 0
        self.tick = 0
        self.phase = MatchPhase.PLAYING

        self._create_invaders()

        self.player_projectile = Projectile(direction=UP)
        self.invader_projectile = Projectile(direction=DOWN)

        return self.get_state()

    def _create_invaders(self) -> None:
        """Create the invader formation."""
        self.invaders = []
        for row in range(self.invader_rows):
            invader_row: List[Invader] = []
            for col in range(self.invader_cols):
                x = self.config.formation_origin_x + col * self.config.invader_spacing_x
                y = self.config.formation_origin_y + row * self.config.invader_spacing_y
                invader_row.append(Invader(x=x, y=y))
            self.invaders.append(invader_row)

        self.invader_direction = 1

    def _active_invaders(self) -> List[Invader]:
        return [inv for row in self.invaders for inv in row if inv.active]

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def move_left(self) -> None:
        """Move the player one column left, stopping at the border."""
        if self.player.x > 1:
            self.player.x -= 1

    def move_right(self) -> None:
        """Move the player one column right, stopping at the border."""
        if self.player.x < self.width - 2:
            self.player.x += 1

    def shoot(self) -> None:
        """Fire from just above the ship unless a player shot is in flight."""
        if self.player_projectile.active:
            return
        self.player_projectile = Projectile(
            x=self.player.x,
            y=self.player.y - 1,
            active=True,
            direction=UP,
        )

    def apply(self, command: int) -> None:
        """
        Apply a player command.

        Move commands are not gated on the match phase; only advance() is.

        Args:
            command: A Command value
        """
        if command == Command.MOVE_LEFT:
            self.move_left()
        elif command == Command.MOVE_RIGHT:
            self.move_right()
        elif command == Command.SHOOT:
            self.shoot()

    def is_valid_command(self, command: int) -> bool:
        """Check if a command is valid."""
        return command in {c.value for c in Command}

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def advance(self) -> Dict[str, Any]:
        """
        Advance the match by one tick.

        Does nothing once the match is won or lost.

        Returns:
            Game state after the tick
        """
        if self.phase != MatchPhase.PLAYING:
            return self.get_state()

        self.tick += 1

        self.move_player_projectile()
        self.move_invader_projectile()

        if self.tick % self.invader_steps == 0:
            self.advance_formation()
            self.invader_fire()

        self.resolve_collisions()
        self.evaluate_outcome()

        return self.get_state()

    def move_player_projectile(self) -> None:
        """Move the player shot up one row; it expires past the top border."""
        proj = self.player_projectile
        if not proj.active:
            return
        proj.y += proj.direction
        if proj.y < 1:
            proj.active = False

    def move_invader_projectile(self) -> None:
        """Move the invader shot down one row; it expires on the bottom border."""
        proj = self.invader_projectile
        if not proj.active:
            return
        proj.y += proj.direction
        if proj.y >= self.height - 1:
            proj.active = False

    def advance_formation(self) -> None:
        """March the formation one column, or drop a row and reverse at an edge.

        The decision is made for the whole formation: if a single invader
        would reach a side border, no invader moves sideways this step.
        """
        alive_invaders = self._active_invaders()

        hit_edge = any(
            inv.x + self.invader_direction <= 0
            or inv.x + self.invader_direction >= self.width - 1
            for inv in alive_invaders
        )

        if hit_edge:
            self.invader_direction = -self.invader_direction
            for inv in alive_invaders:
                inv.y += 1
        else:
            for inv in alive_invaders:
                inv.x += self.invader_direction

    def invader_fire(self) -> None:
        """A random active invader fires, if no invader shot is in flight."""
        if self.invader_projectile.active:
            return

        shooters = self._active_invaders()
        if not shooters:
            return

        shooter = random.choice(shooters)
        self.invader_projectile = Projectile(
            x=shooter.x,
            y=shooter.y + 1,
            active=True,
            direction=DOWN,
        )

    def resolve_collisions(self) -> None:
        """Check both shots against their targets (exact cell match)."""
        proj = self.player_projectile
        if proj.active:
            for inv in self._active_invaders():
                if inv.position == proj.position:
                    inv.active = False
                    proj.active = False
                    self.score += self.config.points_per_invader
                    break

        enemy = self.invader_projectile
        if enemy.active and enemy.position == self.player.position:
            enemy.active = False
            self.player.lives -= 1
            logger.debug("Player hit, %d lives left", self.player.lives)

    def evaluate_outcome(self) -> MatchPhase:
        """
        Settle the match phase.

        Running out of lives wins over a breach, which wins over a
        cleared formation.

        Returns:
            The phase after evaluation
        """
        if self.phase != MatchPhase.PLAYING:
            return self.phase

        if self.player.lives <= 0:
            self._end(MatchPhase.LOST, "no lives left")
        elif any(inv.y >= self.player.y for inv in self._active_invaders()):
            self._end(MatchPhase.LOST, "invaders breached the defense line")
        elif self.active_invader_count() == 0:
            self._end(MatchPhase.WON, "formation destroyed")

        return self.phase

    def _end(self, phase: MatchPhase, reason: str) -> None:
        self.phase = phase
        logger.info(
            "Match %s at tick %d (%s), score %d",
            phase.name.lower(), self.tick, reason, self.score,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def active_invader_count(self) -> int:
        """Count living invaders."""
        return sum(1 for row in self.invaders for inv in row if inv.active)

    def get_state(self) -> Dict[str, Any]:
        """Get current game state for rendering."""
        return {
            "player": self.player.to_dict(),
            "invaders": [[inv.to_dict() for inv in row] for row in self.invaders],
            "invader_direction": self.invader_direction,
            "player_projectile": self.player_projectile.to_dict(),
            "invader_projectile": self.invader_projectile.to_dict(),
            "score": self.score,
            "lives": self.player.lives,
            "phase": self.phase.name,
            "tick": self.tick,
            "width": self.width,
            "height": self.height,
            "invaders_alive": self.active_invader_count(),
            "total_invaders": self.invader_rows * self.invader_cols,
        }

    def get_score(self) -> int:
        """Get current game score."""
        return self.score
