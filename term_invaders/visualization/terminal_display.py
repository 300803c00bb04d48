"""
Terminal Game Display - Rich-based in-place terminal screen for a match.

Redraws the whole frame in place on every update without scrolling.
"""

from typing import Optional

from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.text import Text


class TerminalGameDisplay:
    """
    Rich-based terminal display for a running match.

    The driver calls update() after every engine call; nothing is redrawn
    in between, so auto refresh is off.
    """

    def __init__(self, game_name: str = "Game", console: Optional[Console] = None):
        """
        Initialize the terminal display.

        Args:
            game_name: Name shown in the header line
            console: Console to draw on (a terminal console if None)
        """
        self.game_name = game_name
        # Force UTF-8 encoding for Windows compatibility
        self.console = console or Console(force_terminal=True, legacy_windows=False, markup=False)
        self.live: Optional[Live] = None
        self.frames_drawn = 0

    def start(self, renderable: Optional[RenderableType] = None):
        """Start the live display."""
        self.live = Live(
            self._build_display(renderable),
            console=self.console,
            auto_refresh=False,
            transient=False,
        )
        self.live.start(refresh=True)

    def stop(self):
        """Stop the live display."""
        if self.live:
            self.live.stop()
            self.live = None

    def update(self, renderable: RenderableType):
        """Replace the frame and redraw immediately."""
        self.frames_drawn += 1
        if self.live:
            self.live.update(self._build_display(renderable), refresh=True)

    def _build_display(self, renderable: Optional[RenderableType]) -> RenderableType:
        header = Text(self.game_name, style="bold cyan")
        if renderable is None:
            return header
        return Group(header, renderable)

    def __enter__(self) -> "TerminalGameDisplay":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
