"""Command dispatch table that drives the game state machine."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Protocol

from space_explorer import display
from space_explorer.game_state import GameState, Location
from space_explorer.interpreter import CommandRequest
from space_explorer.world_content import UNKNOWN_SYSTEM, WorldContentGenerator

JUMP_FUEL_COST = 100
COORDINATE_RANGE = 100


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Successor state plus the lines a handler wants shown to the player."""

    state: GameState
    output: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DispatchContext:
    generator: WorldContentGenerator
    rng: random.Random


class CommandHandler(Protocol):
    def __call__(self, state: GameState, request: CommandRequest, context: DispatchContext) -> CommandResult: ...


def handle_scan(state: GameState, request: CommandRequest, context: DispatchContext) -> CommandResult:
    location = state.player.location
    system_name = location.system or UNKNOWN_SYSTEM
    system = context.generator.generate_system(system_name, location.coordinates)
    next_state = state.with_system(system).log("System scan complete.")
    return CommandResult(next_state, (f"Scanning system {system_name} ...", "", *display.system_report(system)))


def handle_jump(state: GameState, request: CommandRequest, context: DispatchContext) -> CommandResult:
    if state.player.fuel < JUMP_FUEL_COST:
        return CommandResult(state.log("Not enough fuel!"))

    destination = request.first_arg or UNKNOWN_SYSTEM
    coordinates = tuple(context.rng.randrange(COORDINATE_RANGE) for _ in range(3))
    next_state = state.travel(Location(system=destination, coordinates=coordinates), JUMP_FUEL_COST)
    return CommandResult(
        next_state.log(f"Jumped to system {destination}"),
        (f"Initiating jump sequence to {destination} ...", "Jump complete!"),
    )


def handle_explore(state: GameState, request: CommandRequest, context: DispatchContext) -> CommandResult:
    # Generated catalog names often contain spaces ("Lyra IV").
    planet_name = " ".join(request.args)
    if not planet_name:
        return CommandResult(state.log("Please specify a planet to explore."))

    system = state.current_system
    planet = system.find_planet(planet_name) if system is not None else None
    if system is None or planet is None:
        return CommandResult(state.log("Planet not found in current system."))

    generated_name = context.generator.generate_planet_name(planet.type or "uncharted", system.name)
    details = context.generator.generate_planet_details(planet, system.name, generated_name=generated_name)
    next_state = state.with_planet(details).log(f"Explored planet {planet.name}")
    return CommandResult(next_state, tuple(display.planet_report(details)))


def handle_status(state: GameState, request: CommandRequest, context: DispatchContext) -> CommandResult:
    return CommandResult(state, tuple(display.status_report(state)))


def handle_help(state: GameState, request: CommandRequest, context: DispatchContext) -> CommandResult:
    return CommandResult(state, tuple(display.help_text()))


def handle_unknown(state: GameState, request: CommandRequest, context: DispatchContext) -> CommandResult:
    return CommandResult(state.log(f"Unknown command: {request.command}. Type 'help' for available commands."))


DEFAULT_HANDLERS: dict[str, CommandHandler] = {
    "scan": handle_scan,
    "jump": handle_jump,
    "explore": handle_explore,
    "status": handle_status,
    "help": handle_help,
}


class CommandDispatcher:
    """Open table mapping command names to handlers; unknown names get a default."""

    def __init__(
        self,
        generator: WorldContentGenerator,
        *,
        rng: random.Random | None = None,
        handlers: dict[str, CommandHandler] | None = None,
        default_handler: CommandHandler = handle_unknown,
        logger: logging.Logger | None = None,
    ) -> None:
        self._context = DispatchContext(generator=generator, rng=rng or random.Random())
        self._handlers: dict[str, CommandHandler] = dict(DEFAULT_HANDLERS if handlers is None else handlers)
        self._default_handler = default_handler
        self._logger = logger or logging.getLogger("space_explorer.dispatcher")

    @property
    def commands(self) -> list[str]:
        return sorted(self._handlers)

    def register(self, command: str, handler: CommandHandler) -> None:
        self._handlers[command.lower()] = handler

    def dispatch(self, state: GameState, request: CommandRequest) -> CommandResult:
        handler = self._handlers.get(request.command, self._default_handler)
        self._logger.debug("command_dispatched", extra={"command": request.command, "arg_count": len(request.args)})
        try:
            return handler(state, request, self._context)
        except Exception as exc:  # noqa: BLE001 - a failing handler must not end the game.
            self._logger.exception("command_failed", extra={"command": request.command})
            return CommandResult(state.log(f"Command {request.command} failed: {type(exc).__name__}: {exc}"))
