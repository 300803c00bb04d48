"""
Tests for the match driver: event dispatch, tick timing and run loop.
"""

import pytest

from term_invaders.games.space_invaders.game import MatchPhase, Projectile, UP
from term_invaders.play.driver import MatchDriver, TickTimer, TICK
from term_invaders.play.terminal_input import InputCommand
from term_invaders.visualization.terminal_display import TerminalGameDisplay


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def make_driver(game, renderer, memory_console, command_queue, sleeps):
    def _make(tick_interval=1.0, clock=None):
        display = TerminalGameDisplay("Space Invaders", console=memory_console)
        return MatchDriver(
            game,
            renderer,
            display,
            command_queue,
            tick_interval=tick_interval,
            end_delay=2.0,
            clock=clock or FakeClock(),
            sleep=sleeps.append,
        )
    return _make


class TestTickTimer:
    """Tests for the fixed-interval deadline."""

    def test_remaining_counts_down(self):
        """Test remaining time shrinks as the clock advances."""
        clock = FakeClock()
        timer = TickTimer(0.08, clock)

        assert timer.remaining() == pytest.approx(0.08)
        clock.now = 0.05
        assert timer.remaining() == pytest.approx(0.03)
        assert timer.expired() is False

    def test_expires_at_deadline(self):
        """Test the timer expires once the deadline is reached."""
        clock = FakeClock()
        timer = TickTimer(0.08, clock)

        clock.now = 0.08
        assert timer.expired() is True
        assert timer.remaining() == 0.0

    def test_rearm_keeps_cadence(self):
        """Test rearming schedules the next tick one interval later."""
        clock = FakeClock()
        timer = TickTimer(0.08, clock)

        clock.now = 0.09
        timer.rearm()

        assert timer.deadline == pytest.approx(0.16)

    def test_rearm_drops_missed_ticks(self):
        """Test a long stall does not cause a burst of catch-up ticks."""
        clock = FakeClock()
        timer = TickTimer(0.08, clock)

        clock.now = 1.0
        timer.rearm()

        assert timer.deadline == pytest.approx(1.08)


class TestDispatch:
    """Tests for routing single events into the game."""

    def test_tick_advances_game(self, game, make_driver):
        """Test a timer event advances the match and redraws."""
        driver = make_driver()

        assert driver.dispatch(TICK) is True
        assert game.tick == 1
        assert driver.display.frames_drawn == 1

    @pytest.mark.parametrize("command,expected_x", [
        (InputCommand.LEFT, 19),
        (InputCommand.RIGHT, 21),
    ])
    def test_move_commands(self, game, make_driver, command, expected_x):
        """Test move commands reach the game without advancing time."""
        driver = make_driver()

        assert driver.dispatch(command) is True
        assert game.player.x == expected_x
        assert game.tick == 0

    def test_shoot_command(self, game, make_driver):
        """Test the shoot command fires."""
        driver = make_driver()

        driver.dispatch(InputCommand.SHOOT)

        assert game.player_projectile.active is True

    def test_quit_never_reaches_game(self, game, make_driver):
        """Test quit stops the run and leaves the match untouched."""
        driver = make_driver()

        assert driver.dispatch(InputCommand.QUIT) is False
        assert driver.quit_requested is True
        assert game.phase == MatchPhase.PLAYING
        assert driver.display.frames_drawn == 0

    def test_stops_when_match_ends(self, game, make_driver):
        """Test the run stops after the tick that ends the match."""
        driver = make_driver()
        game.player.lives = 0

        assert driver.dispatch(TICK) is False
        assert game.phase == MatchPhase.LOST


class TestRun:
    """Tests for the full dispatch loop."""

    def test_quit_ends_run(self, game, make_driver, command_queue, sleeps):
        """Test a queued quit ends the run immediately without the end pause."""
        command_queue.put(InputCommand.QUIT)
        driver = make_driver()

        result = driver.run()

        assert result.quit is True
        assert result.phase == "PLAYING"
        assert result.ticks == 0
        assert sleeps == []

    def test_commands_processed_in_order(self, game, make_driver, command_queue):
        """Test queued commands are applied before the tick deadline."""
        for command in (InputCommand.LEFT, InputCommand.LEFT, InputCommand.SHOOT, InputCommand.QUIT):
            command_queue.put(command)
        driver = make_driver()

        driver.run()

        assert game.player.x == 18
        assert game.player_projectile.position == (18, 17)
        assert game.tick == 0
        # Initial frame plus one per applied command
        assert driver.display.frames_drawn == 4

    def test_loss_pauses_then_returns(self, game, make_driver, sleeps):
        """Test the final frame stays up for end_delay after a loss."""
        game.player.lives = 0
        driver = make_driver(tick_interval=0.0)

        result = driver.run()

        assert result.phase == "LOST"
        assert result.ticks == 1
        assert result.quit is False
        assert sleeps == [2.0]

    def test_win_reports_score(self, game, make_driver, sleeps):
        """Test a winning tick ends the run with the final score."""
        for row in game.invaders:
            for inv in row:
                inv.active = False
        target = game.invaders[0][0]
        target.active = True
        game.player_projectile = Projectile(x=target.x, y=target.y + 1, active=True, direction=UP)
        driver = make_driver(tick_interval=0.0)

        result = driver.run()

        assert result.phase == "WON"
        assert result.score == 10
        assert sleeps == [2.0]

    def test_overdue_tick_beats_pending_commands(self, game, make_driver, command_queue):
        """Test an expired deadline is served before queued input."""
        command_queue.put(InputCommand.LEFT)
        clock = FakeClock()
        driver = make_driver(tick_interval=0.5, clock=clock)
        timer = TickTimer(0.5, clock)

        clock.now = 0.6
        assert driver.next_event(timer) is TICK
        assert driver.next_event(TickTimer(0.5, clock)) is InputCommand.LEFT


class TestInputBindings:
    """Tests for routing actions through the game's own bindings."""

    def test_unbound_action_ignored(self, renderer, memory_console, command_queue, sleeps):
        """Test an action the game does not bind is dropped without a redraw."""
        from term_invaders.games.space_invaders.game import Command, SpaceInvadersGame

        class ShootOnlyGame(SpaceInvadersGame):
            @property
            def input_bindings(self):
                return {"SHOOT": Command.SHOOT}

        game = ShootOnlyGame()
        driver = MatchDriver(
            game,
            renderer,
            TerminalGameDisplay("Shoot Only", console=memory_console),
            command_queue,
            clock=FakeClock(),
            sleep=sleeps.append,
        )

        assert driver.dispatch(InputCommand.LEFT) is True
        assert game.player.x == 20
        assert driver.display.frames_drawn == 0

        driver.dispatch(InputCommand.SHOOT)
        assert game.player_projectile.active is True

    def test_bound_command_comes_from_game(self, game, make_driver, monkeypatch):
        """Test the driver applies whatever command the game binds to an action."""
        from term_invaders.games.space_invaders.game import Command

        applied = []
        monkeypatch.setattr(type(game), "input_bindings", property(lambda self: {"RIGHT": Command.SHOOT}))
        monkeypatch.setattr(game, "apply", applied.append)
        driver = make_driver()

        driver.dispatch(InputCommand.RIGHT)

        assert applied == [Command.SHOOT]
