from __future__ import annotations

import random

from space_explorer.adapters.generation import OfflineGenerationBackend
from space_explorer.dispatcher import CommandDispatcher
from space_explorer.game_state import new_game
from space_explorer.session import GameSession, is_quit
from space_explorer.world_content import WorldContentGenerator


def _session() -> GameSession:
    rng = random.Random(5)
    dispatcher = CommandDispatcher(WorldContentGenerator(OfflineGenerationBackend(), rng=rng), rng=rng)
    return GameSession(dispatcher, new_game("Ripley"))


class ScriptedInput:
    def __init__(self, *lines: str) -> None:
        self.lines = list(lines)

    def __call__(self) -> str:
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


def test_is_quit_ignores_case_and_surrounding_whitespace() -> None:
    assert is_quit("quit")
    assert is_quit("  QUIT \n")
    assert not is_quit("quit now")
    assert not is_quit("")


def test_play_turn_threads_state_between_turns() -> None:
    session = _session()
    initial = session.state

    session.play_turn("scan")
    outcome = session.play_turn("jump Vega")

    assert not outcome.finished
    assert outcome.state is session.state
    assert session.state.player.fuel == 900
    assert "Sol" in session.state.discovered_systems
    assert session.turns == 2
    assert initial.player.fuel == 1000


def test_quit_finishes_without_dispatching() -> None:
    session = _session()
    before = session.state

    outcome = session.play_turn("Quit")

    assert outcome.finished
    assert session.state is before
    assert session.turns == 0


def test_run_renders_banner_and_stops_on_quit() -> None:
    session = _session()
    written: list[str] = []

    final = session.run(ScriptedInput("status", "fly", "quit", "scan"), written.append)

    assert final.latest_message == "Unknown command: fly. Type 'help' for available commands."
    assert final.current_system is None
    assert "Beginning your space exploration journey..." in written
    assert "Location: Sol at [0 0 0]" in written
    assert "Fuel: 1000" in written
    assert "Current Status:" in written


def test_run_stops_at_end_of_input() -> None:
    session = _session()

    final = session.run(ScriptedInput("scan"), lambda line: None)

    assert final.current_system is not None
    assert session.turns == 1
