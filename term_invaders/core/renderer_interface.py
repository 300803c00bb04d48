"""
Abstract renderer interface for Term Invaders.

All game renderers must implement this interface for visualization.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Tuple

from rich.console import RenderableType


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers turn a game state snapshot into a rich renderable. They
    never mutate the game.
    """

    @abstractmethod
    def render(self, game_state: Dict[str, Any]) -> RenderableType:
        """
        Render the game state.

        Args:
            game_state: Dictionary containing game state from get_state()

        Returns:
            A rich renderable for the terminal display
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (columns, lines) in terminal cells
        """
        pass
