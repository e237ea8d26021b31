"""Immutable game state values and the transitions that produce successors."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from space_explorer.models import PlanetContent, SystemContent

STARTING_SYSTEM = "Sol"
STARTING_FUEL = 1000
STARTING_HEALTH = 100
OPENING_MESSAGE = "Beginning your space exploration journey..."

Coordinates = tuple[int, int, int]


@dataclass(frozen=True, slots=True)
class Location:
    system: str
    coordinates: Coordinates = (0, 0, 0)


@dataclass(frozen=True, slots=True)
class Player:
    name: str
    location: Location
    inventory: tuple[str, ...] = ()
    health: int = STARTING_HEALTH
    fuel: int = STARTING_FUEL

    def __post_init__(self) -> None:
        if self.fuel < 0:
            raise ValueError(f"fuel must not be negative, got {self.fuel}")


@dataclass(frozen=True, slots=True)
class GameState:
    player: Player
    discovered_systems: frozenset[str] = field(default_factory=frozenset)
    current_system: SystemContent | None = None
    current_planet: PlanetContent | None = None
    message_log: tuple[str, ...] = ()

    @property
    def latest_message(self) -> str | None:
        return self.message_log[-1] if self.message_log else None

    def log(self, message: str) -> GameState:
        return replace(self, message_log=(*self.message_log, message))

    def with_system(self, system: SystemContent) -> GameState:
        return replace(
            self,
            current_system=system,
            discovered_systems=self.discovered_systems | {system.name},
        )

    def with_planet(self, planet: PlanetContent) -> GameState:
        if self.current_system is None or self.current_system.find_planet(planet.name) is None:
            raise ValueError(f"Planet {planet.name!r} is not part of the current system")
        return replace(self, current_planet=planet)

    def travel(self, location: Location, fuel_cost: int) -> GameState:
        player = replace(self.player, location=location, fuel=self.player.fuel - fuel_cost)
        return replace(self, player=player, current_planet=None)


def new_game(player_name: str = "") -> GameState:
    player = Player(name=player_name, location=Location(system=STARTING_SYSTEM, coordinates=(0, 0, 0)))
    return GameState(player=player).log(OPENING_MESSAGE)
