"""
Abstract game interface for Term Invaders.

All games must implement GameInterface and provide GameMetadata.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Space Invaders")
    id: str                             # Unique identifier (e.g., "space_invaders")
    description: str                    # Brief description for the HUD and --help
    version: str = "1.0.0"              # Game version
    controls: str = ""                  # One-line controls hint


class GameInterface(ABC):
    """
    Abstract base class for all games in Term Invaders.

    Games handle the core logic, rules, and state management. They never
    touch the terminal: a driver feeds them commands and ticks, and a
    renderer draws the snapshot returned by get_state().
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Reset the game to initial state.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def apply(self, command: int) -> None:
        """
        Apply a player command (game-specific encoding).

        Args:
            command: The command to apply
        """
        pass

    @abstractmethod
    def advance(self) -> Dict[str, Any]:
        """
        Advance the simulation by one tick.

        Returns:
            Game state dictionary after the tick
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state needed for rendering
        """
        pass

    @abstractmethod
    def is_valid_command(self, command: int) -> bool:
        """
        Check if a command is known to this game.

        Args:
            command: The command to check

        Returns:
            True if command is valid, False otherwise
        """
        pass

    @property
    @abstractmethod
    def input_bindings(self) -> Dict[str, int]:
        """
        Map driver actions onto this game's commands.

        Keys are action names the input layer produces ("LEFT", "RIGHT",
        "SHOOT"); actions a game has no use for are simply left out.

        Returns:
            Dictionary of action name to game command
        """
        pass

    @property
    @abstractmethod
    def is_over(self) -> bool:
        """Whether the match has reached a terminal phase."""
        pass

    def get_score(self) -> int:
        """
        Get the current score.

        Returns:
            Current game score
        """
        return 0
