"""
Space Invaders Game Renderer - rich-based terminal visualization implementing RendererInterface.
Bordered character grid with a one-line HUD.
"""

from typing import Dict, Any, Tuple, List, Optional

from rich.text import Text

from ...core.renderer_interface import RendererInterface
from ...utils.config_loader import DisplayConfig

# Grid cell: (glyph, style); style None means default terminal colors
Cell = Tuple[str, Optional[str]]


class SpaceInvadersRenderer(RendererInterface):
    """
    Renders Space Invaders as text, implementing RendererInterface.

    The playfield border occupies the outer ring of cells; entities are
    drawn only strictly inside it. Later layers overwrite earlier ones:
    invaders, then the player, then the player shot, then the invader shot.
    """

    def __init__(
        self,
        width: int = 40,
        height: int = 20,
        display: Optional[DisplayConfig] = None,
        controls: str = "",
    ):
        """
        Initialize the renderer.

        Args:
            width: Playfield width in cells
            height: Playfield height in cells
            display: Glyphs and colors (defaults to DisplayConfig())
            controls: Help line shown while the match is in progress
        """
        self.width = width
        self.height = height
        self.display = display or DisplayConfig()
        self.controls = controls

    def get_preferred_size(self) -> Tuple[int, int]:
        """HUD line, the grid, a blank line and the footer."""
        return (self.width, self.height + 3)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 < x < self.width - 1 and 0 < y < self.height - 1

    def build_grid(self, game_state: Dict[str, Any]) -> List[List[Cell]]:
        """Lay out border and entities on a height x width grid."""
        d = self.display
        grid: List[List[Cell]] = [
            [(" ", None) for _ in range(self.width)] for _ in range(self.height)
        ]

        for x in range(self.width):
            grid[0][x] = (d.border_horizontal, None)
            grid[self.height - 1][x] = (d.border_horizontal, None)
        for y in range(self.height):
            grid[y][0] = (d.border_vertical, None)
            grid[y][self.width - 1] = (d.border_vertical, None)

        def put(entity: Dict[str, Any], glyph: str, style: str) -> None:
            if self._in_bounds(entity["x"], entity["y"]):
                grid[entity["y"]][entity["x"]] = (glyph, style)

        for row in game_state["invaders"]:
            for inv in row:
                if inv["active"]:
                    put(inv, d.invader_glyph, d.invader_color)

        put(game_state["player"], d.player_glyph, d.player_color)

        if game_state["player_projectile"]["active"]:
            put(game_state["player_projectile"], d.player_shot_glyph, d.player_shot_color)
        if game_state["invader_projectile"]["active"]:
            put(game_state["invader_projectile"], d.invader_shot_glyph, d.invader_shot_color)

        return grid

    def render_plain(self, game_state: Dict[str, Any]) -> List[str]:
        """Grid rows as plain strings, without styling."""
        return ["".join(glyph for glyph, _ in row) for row in self.build_grid(game_state)]

    def render(self, game_state: Dict[str, Any]) -> Text:
        """Render HUD, playfield and footer into a single Text."""
        d = self.display
        text = Text()

        lives = f"{d.player_glyph} " * max(0, game_state["lives"])
        text.append(f"Score: {game_state['score']}  Lives: {lives}", style=d.hud_color)
        text.append("\n")

        for row in self.build_grid(game_state):
            for glyph, style in row:
                text.append(glyph, style=style)
            text.append("\n")

        phase = game_state["phase"]
        if phase == "WON":
            text.append("\n*** YOU WIN! ***", style=d.win_color)
        elif phase == "LOST":
            text.append("\n*** GAME OVER ***", style=d.lose_color)
        else:
            text.append("\n" + self.controls)

        return text
