"""Turn cycle driving the command state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from space_explorer import display
from space_explorer.dispatcher import CommandDispatcher
from space_explorer.game_state import GameState
from space_explorer.interpreter import parse

QUIT_COMMAND = "quit"


def is_quit(raw_input: str) -> bool:
    return raw_input.strip().lower() == QUIT_COMMAND


@dataclass(frozen=True, slots=True)
class TurnOutcome:
    state: GameState
    output: tuple[str, ...] = ()
    finished: bool = False


class GameSession:
    """Threads the game state through one turn after another."""

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        state: GameState,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._state = state
        self._turns = 0
        self._logger = logger or logging.getLogger("space_explorer.session")

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def turns(self) -> int:
        return self._turns

    def play_turn(self, raw_input: str) -> TurnOutcome:
        if is_quit(raw_input):
            return TurnOutcome(state=self._state, finished=True)

        result = self._dispatcher.dispatch(self._state, parse(raw_input))
        self._state = result.state
        self._turns += 1
        return TurnOutcome(state=result.state, output=result.output)

    def run(self, read_line: Callable[[], str], write: Callable[[str], None]) -> GameState:
        """Loop until the player quits or input runs out; returns the final state."""
        self._logger.info("session_started", extra={"player": self._state.player.name})
        while True:
            for line in display.turn_banner(self._state):
                write(line)
            try:
                raw_input = read_line()
            except EOFError:
                break

            outcome = self.play_turn(raw_input)
            if outcome.finished:
                break
            for line in outcome.output:
                write(line)

        self._logger.info("session_finished", extra={"turns": self._turns})
        return self._state
