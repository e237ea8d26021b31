from __future__ import annotations

import random
from dataclasses import replace

from space_explorer.adapters.generation import GenerationResult, OfflineGenerationBackend
from space_explorer.dispatcher import CommandDispatcher, CommandResult
from space_explorer.game_state import Location, new_game
from space_explorer.interpreter import parse
from space_explorer.models import PlanetSummary, SystemContent
from space_explorer.world_content import WorldContentGenerator


class NamingBackend:
    """Answers every prompt with the same planet name; JSON requests fail to parse."""

    def __init__(self, reply: str = "Aurelia") -> None:
        self.reply = reply
        self.prompts: list[str] = []

    def generate(self, prompt: str) -> GenerationResult:
        self.prompts.append(prompt)
        return GenerationResult(text=self.reply)


def _dispatcher(backend=None, seed: int = 11) -> CommandDispatcher:
    rng = random.Random(seed)
    generator = WorldContentGenerator(backend or OfflineGenerationBackend(), rng=rng)
    return CommandDispatcher(generator, rng=rng)


def _run(dispatcher: CommandDispatcher, state, raw: str) -> CommandResult:
    return dispatcher.dispatch(state, parse(raw))


VEGA = SystemContent(
    name="Vega",
    planets=[PlanetSummary(name="Lyra IV", type="Ice World"), PlanetSummary(name="Halcyon", type="Ocean")],
)


def test_new_game_defaults() -> None:
    state = new_game("Ripley")

    assert state.player.name == "Ripley"
    assert state.player.location == Location(system="Sol", coordinates=(0, 0, 0))
    assert state.player.fuel == 1000
    assert state.player.health == 100
    assert state.current_system is None and state.current_planet is None
    assert state.discovered_systems == frozenset()


def test_scan_with_failing_backend_still_produces_system() -> None:
    dispatcher = _dispatcher()
    before = new_game("Ripley")

    result = _run(dispatcher, before, "scan")

    system = result.state.current_system
    assert system is not None
    assert system.name == "Sol"
    assert len(system.planets) >= 1
    assert "Sol" in result.state.discovered_systems
    assert result.state.latest_message == "System scan complete."
    assert "=== System Report ===" in result.output
    assert before.current_system is None


def test_jump_consumes_fuel_and_teleports() -> None:
    dispatcher = _dispatcher()
    state = _run(dispatcher, new_game(), "scan").state

    result = _run(dispatcher, state, "jump Vega")

    player = result.state.player
    assert player.fuel == 900
    assert player.location.system == "vega"
    assert all(0 <= value < 100 for value in player.location.coordinates)
    assert result.state.current_planet is None
    assert result.state.latest_message == "Jumped to system vega"


def test_jump_without_destination_goes_to_unknown_system() -> None:
    result = _run(_dispatcher(), new_game(), "jump")

    assert result.state.player.location.system == "Unknown System"


def test_jump_is_rejected_when_fuel_is_low() -> None:
    state = new_game()
    state = replace(state, player=replace(state.player, fuel=99))

    result = _run(_dispatcher(), state, "jump Vega")

    assert result.state.player == state.player
    assert result.state.current_planet == state.current_planet
    assert result.state.message_log == (*state.message_log, "Not enough fuel!")


def test_ten_jumps_drain_the_tank_and_the_eleventh_fails() -> None:
    dispatcher = _dispatcher()
    state = new_game()

    for _ in range(10):
        state = _run(dispatcher, state, "jump Vega").state
        assert state.latest_message == "Jumped to system vega"

    assert state.player.fuel == 0
    state = _run(dispatcher, state, "jump Vega").state
    assert state.latest_message == "Not enough fuel!"
    assert state.player.fuel == 0


def test_explore_requires_argument() -> None:
    state = replace(new_game(), current_system=VEGA)

    result = _run(_dispatcher(), state, "explore")

    assert result.state.latest_message == "Please specify a planet to explore."
    assert result.state.current_planet is None


def test_explore_unknown_planet_leaves_state_unchanged() -> None:
    state = replace(new_game(), current_system=VEGA)

    result = _run(_dispatcher(), state, "explore Tatooine")

    assert result.state.latest_message == "Planet not found in current system."
    assert replace(result.state, message_log=state.message_log) == state


def test_explore_without_scanned_system_reports_not_found() -> None:
    result = _run(_dispatcher(), new_game(), "explore Earth")

    assert result.state.latest_message == "Planet not found in current system."


def test_explore_matches_case_insensitively_and_sets_planet() -> None:
    backend = NamingBackend("Aurelia!")
    state = replace(new_game(), current_system=VEGA)

    result = _run(_dispatcher(backend), state, "explore HALCYON")

    planet = result.state.current_planet
    assert planet is not None
    assert planet.name == "Halcyon"
    assert planet.generated_name == "Aurelia"
    assert result.state.latest_message == "Explored planet Halcyon"
    assert "a Ocean planet in the Vega system" in backend.prompts[0]
    assert "Planet: Halcyon" in result.output


def test_explore_with_failing_backend_still_sets_planet() -> None:
    state = replace(new_game(), current_system=VEGA)

    result = _run(_dispatcher(), state, "explore halcyon")

    assert result.state.current_planet is not None
    assert result.state.current_planet.generated_name == ""


def test_jump_clears_current_planet() -> None:
    dispatcher = _dispatcher()
    state = replace(new_game(), current_system=VEGA)
    state = _run(dispatcher, state, "explore halcyon").state
    assert state.current_planet is not None

    state = _run(dispatcher, state, "jump Deneb").state

    assert state.current_planet is None


def test_status_and_help_do_not_change_state() -> None:
    dispatcher = _dispatcher()
    state = new_game("Ripley")

    status = _run(dispatcher, state, "status")
    help_result = _run(dispatcher, state, "help")

    assert status.state == state
    assert help_result.state == state
    assert "Fuel: 1000" in status.output
    assert "Discovered Systems: 0" in status.output
    assert any(line.strip().startswith("jump <system>") for line in help_result.output)


def test_unknown_command_only_appends_log() -> None:
    state = new_game()

    result = _run(_dispatcher(), state, "fly to the moon")

    assert result.state.player == state.player
    assert result.state.current_system == state.current_system
    assert result.state.current_planet == state.current_planet
    assert len(result.state.message_log) == len(state.message_log) + 1
    assert "Unknown command" in result.state.latest_message
    assert result.state.latest_message == "Unknown command: fly. Type 'help' for available commands."


def test_empty_input_routes_to_unknown_handler() -> None:
    result = _run(_dispatcher(), new_game(), "   ")

    assert result.state.latest_message == "Unknown command: . Type 'help' for available commands."


def test_registered_handler_extends_the_table() -> None:
    dispatcher = _dispatcher()

    def refuel(state, request, context):
        return CommandResult(replace(state, player=replace(state.player, fuel=1000)).log("Refueled."))

    dispatcher.register("Refuel", refuel)
    state = _run(dispatcher, new_game(), "jump Vega").state
    state = _run(dispatcher, state, "refuel").state

    assert "refuel" in dispatcher.commands
    assert state.player.fuel == 1000
    assert state.latest_message == "Refueled."


def test_failing_handler_is_contained() -> None:
    dispatcher = _dispatcher()

    def broken(state, request, context):
        raise RuntimeError("boom")

    dispatcher.register("warp", broken)
    state = new_game()

    result = dispatcher.dispatch(state, parse("warp"))

    assert result.state.player == state.player
    assert "RuntimeError" in result.state.latest_message


def test_explore_accepts_multi_word_planet_names() -> None:
    state = replace(new_game(), current_system=VEGA)

    partial = _run(_dispatcher(), state, "explore lyra")
    full = _run(_dispatcher(), state, "explore Lyra IV")

    assert partial.state.current_planet is None
    assert full.state.current_planet is not None
    assert full.state.current_planet.name == "Lyra IV"


def test_scan_survives_deeply_nested_model_reply() -> None:
    result = _run(_dispatcher(NamingBackend("[" * 100_000)), new_game(), "scan")

    assert result.state.current_system is not None
    assert result.state.current_system.name == "Sol"
    assert result.state.latest_message == "System scan complete."
