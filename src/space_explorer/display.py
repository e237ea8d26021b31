"""Plain-text reports shown to the player.

Content fields may be empty because they come from a language model, so each
section is only rendered when there is something to show.
"""

from __future__ import annotations

from space_explorer.game_state import GameState
from space_explorer.models import PlanetContent, SystemContent
from space_explorer.world_content import format_coordinates

COMMAND_HELP: tuple[tuple[str, str], ...] = (
    ("scan", "Scan current star system"),
    ("explore <planet>", "Explore a specific planet"),
    ("jump <system>", "Jump to another star system"),
    ("status", "Display current status"),
    ("help", "Show this help message"),
    ("quit", "Exit game"),
)

SEPARATOR = "-" * 40


def system_report(system: SystemContent) -> list[str]:
    lines = ["=== System Report ===", f"System Name: {system.name or 'Unknown'}"]

    if system.stars:
        lines.extend(["", "Stars:"])
        lines.extend(f"- {star.type or 'Unknown'} ({star.color or 'unknown color'})" for star in system.stars)

    if system.planets:
        lines.extend(["", "Planets:"])
        for planet in system.planets:
            lines.append(f"- {planet.name or 'Unnamed'}")
            lines.append(f"  Type: {planet.type or 'Unknown'}")
            if planet.description:
                lines.append(f"  Description: {planet.description}")
            if planet.resources:
                lines.append(f"  Resources: {', '.join(planet.resources)}")

    if system.features:
        lines.extend(["", "Notable Features:"])
        lines.extend(f"- {feature}" for feature in system.features)

    if system.dangers:
        lines.extend(["", "Potential Dangers:"])
        lines.extend(f"- {danger}" for danger in system.dangers)
    return lines


def planet_report(planet: PlanetContent) -> list[str]:
    lines = [f"Planet: {planet.name}"]
    if planet.generated_name:
        lines.append(f"Known Locally As: {planet.generated_name}")
    lines.append(f"Terrain: {planet.terrain or 'Unknown'}")
    lines.append(f"Atmosphere: {planet.atmosphere or 'Unknown'}")
    lines.append(f"Notable Locations: {', '.join(planet.locations) or 'None recorded'}")
    lines.append(f"Phenomena: {', '.join(planet.phenomena) or 'None recorded'}")
    return lines


def status_report(state: GameState) -> list[str]:
    player = state.player
    return [
        "Current Status:",
        f"Location: {player.location.system}",
        f"Coordinates: {format_coordinates(player.location.coordinates)}",
        f"Fuel: {player.fuel}",
        f"Health: {player.health}",
        f"Discovered Systems: {len(state.discovered_systems)}",
    ]


def help_text() -> list[str]:
    return ["Available Commands:", *(f"  {usage} - {summary}" for usage, summary in COMMAND_HELP)]


def turn_banner(state: GameState) -> list[str]:
    location = state.player.location
    lines = [SEPARATOR]
    if state.latest_message:
        lines.append(state.latest_message)
    lines.extend(
        [
            "",
            f"Location: {location.system} at {format_coordinates(location.coordinates)}",
            f"Fuel: {state.player.fuel}",
            "",
            "What would you like to do? (Type 'help' for commands)",
        ]
    )
    return lines
