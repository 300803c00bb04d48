"""
Game registry for Term Invaders.

Maps a game id to its game and renderer classes. Games register themselves
when their module is imported.
"""

from typing import Dict, Type, List, Any
from ..core.game_interface import GameInterface, GameMetadata
from ..core.renderer_interface import RendererInterface


class GameRegistry:
    """Registered games, keyed by GameMetadata.id."""

    _games: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def register(
        cls,
        game_class: Type[GameInterface],
        renderer_class: Type[RendererInterface],
    ) -> None:
        """
        Register a game under the id from its metadata.

        Args:
            game_class: The game implementation class
            renderer_class: The renderer class
        """
        metadata = game_class.get_metadata()
        cls._games[metadata.id] = {
            'game_class': game_class,
            'renderer_class': renderer_class,
            'metadata': metadata,
        }

    @classmethod
    def list_games(cls) -> List[GameMetadata]:
        """List all registered games."""
        return [g['metadata'] for g in cls._games.values()]

    @classmethod
    def _require(cls, game_id: str) -> Dict[str, Any]:
        game_data = cls._games.get(game_id)
        if not game_data:
            raise ValueError(f"Unknown game: {game_id}")
        return game_data

    @classmethod
    def create_game(cls, game_id: str, **kwargs) -> GameInterface:
        """
        Create a game instance.

        Raises:
            ValueError: If game is not registered
        """
        return cls._require(game_id)['game_class'](**kwargs)

    @classmethod
    def create_renderer(cls, game_id: str, **kwargs) -> RendererInterface:
        """
        Create a renderer instance for a game.

        Raises:
            ValueError: If game is not registered
        """
        return cls._require(game_id)['renderer_class'](**kwargs)
