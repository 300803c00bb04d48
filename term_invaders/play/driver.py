"""
Match driver - feeds ticks and player commands into a game and redraws.

Two event sources fan into one sequential call path: a fixed-interval
timer and a queue filled by the key reader thread. The game only ever
sees calls from the thread running MatchDriver.run().
"""
import logging
import queue
import time
from dataclasses import dataclass
from typing import Callable, Union

from ..core.game_interface import GameInterface
from ..core.renderer_interface import RendererInterface
from ..visualization.terminal_display import TerminalGameDisplay
from .terminal_input import InputCommand

logger = logging.getLogger(__name__)


class Tick:
    """Marker event produced by the timer source."""

    def __repr__(self) -> str:
        return "TICK"


TICK = Tick()

Event = Union[Tick, InputCommand]

@dataclass
class MatchResult:
    """How a run ended."""
    phase: str
    score: int
    ticks: int
    quit: bool = False


class TickTimer:
    """Fixed-interval deadline. Missed ticks are dropped, not replayed."""

    def __init__(self, interval: float, clock: Callable[[], float] = time.monotonic):
        self.interval = interval
        self.clock = clock
        self.deadline = clock() + interval

    def remaining(self) -> float:
        return max(0.0, self.deadline - self.clock())

    def expired(self) -> bool:
        return self.clock() >= self.deadline

    def rearm(self) -> None:
        now = self.clock()
        self.deadline += self.interval
        if self.deadline <= now:
            self.deadline = now + self.interval


class MatchDriver:
    """
    Runs one match: waits for the next event, calls into the game, redraws.

    Quit is handled here and never reaches the game. Once the game reports
    a terminal phase the final frame stays up for end_delay seconds.
    """

    def __init__(
        self,
        game: GameInterface,
        renderer: RendererInterface,
        display: TerminalGameDisplay,
        commands: "queue.Queue[InputCommand]",
        tick_interval: float = 0.08,
        end_delay: float = 2.0,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            game: The game to drive
            renderer: Turns game state into a renderable
            display: Live terminal display
            commands: Queue of decoded input commands
            tick_interval: Seconds between ticks
            end_delay: Seconds to keep the final frame on screen
            clock: Monotonic clock (injectable for tests)
            sleep: Sleep function (injectable for tests)
        """
        self.game = game
        self.renderer = renderer
        self.display = display
        self.commands = commands
        self.tick_interval = tick_interval
        self.end_delay = end_delay
        self.clock = clock
        self.sleep = sleep
        self.quit_requested = False

    def render(self) -> None:
        self.display.update(self.renderer.render(self.game.get_state()))

    def next_event(self, timer: TickTimer) -> Event:
        """Block until a command arrives or the tick deadline passes."""
        if timer.expired():
            return TICK
        try:
            return self.commands.get(timeout=timer.remaining())
        except queue.Empty:
            return TICK

    def dispatch(self, event: Event) -> bool:
        """
        Route one event into the game and redraw.

        Returns:
            False if the run should stop (quit or match over)
        """
        if event is TICK:
            self.game.advance()
        elif event is InputCommand.QUIT:
            logger.info("Quit requested")
            self.quit_requested = True
            return False
        else:
            command = self.game.input_bindings.get(event.name)  # type: ignore[union-attr]
            if command is None:
                return True
            self.game.apply(command)

        self.render()
        return not self.game.is_over

    def run(self) -> MatchResult:
        """Play until quit or the end of the match."""
        self.render()
        timer = TickTimer(self.tick_interval, self.clock)

        while True:
            event = self.next_event(timer)
            if event is TICK:
                timer.rearm()
            if not self.dispatch(event):
                break

        if self.game.is_over and not self.quit_requested:
            self.sleep(self.end_delay)

        state = self.game.get_state()
        return MatchResult(
            phase=state["phase"],
            score=self.game.get_score(),
            ticks=state["tick"],
            quit=self.quit_requested,
        )
