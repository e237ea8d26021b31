"""Free-text command parsing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CommandRequest:
    command: str
    args: tuple[str, ...] = ()

    @property
    def first_arg(self) -> str | None:
        return self.args[0] if self.args else None


def parse(raw_input: str) -> CommandRequest:
    tokens = raw_input.lower().split()
    if not tokens:
        return CommandRequest(command="")
    return CommandRequest(command=tokens[0], args=tuple(tokens[1:]))
