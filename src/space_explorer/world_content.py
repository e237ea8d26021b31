"""Procedural world content backed by a language model.

Each operation follows the same pattern: build a prompt, call the generation
backend, recover structured data from the reply, and synthesize a fallback
when any step fails. Callers always get a usable object back.
"""

from __future__ import annotations

import logging
import random
import re
from typing import Any, Sequence

from pydantic import ValidationError

from space_explorer.adapters.generation import GenerationBackend
from space_explorer.extraction import extract_json
from space_explorer.models import PlanetContent, PlanetSummary, Star, SystemContent

UNKNOWN_SYSTEM = "Unknown System"

SYSTEM_PROMPT_TEMPLATE = """Generate a rich description of a star system in a space exploration game.
System Name: {system_name}
Coordinates: {coordinates}

Rules:
1. Each planet should have a unique, creative name
2. Include varied planet types (terrestrial, gas giants, ice worlds, etc.)
3. Add interesting resources and phenomena
4. Include potential dangers or mysteries

Respond ONLY with JSON in exactly this format:
{{
  "name": "string",
  "stars": [
    {{
      "type": "string",
      "color": "string"
    }}
  ],
  "planets": [
    {{
      "name": "string",
      "type": "string",
      "description": "string",
      "resources": ["string"]
    }}
  ],
  "features": ["string"],
  "dangers": ["string"]
}}"""

PLANET_NAME_PROMPT_TEMPLATE = (
    "Generate a single unique and interesting name for a {planet_type} planet in the {system_name} system. "
    "The name should reflect the planet's characteristics. Respond with only the name, no explanation."
)

PLANET_DETAILS_PROMPT_TEMPLATE = """Describe the surface of the planet {planet_name} in the {system_name} system.
Planet Type: {planet_type}
Known Description: {description}

Respond ONLY with JSON in exactly this format:
{{
  "terrain": "string",
  "atmosphere": "string",
  "locations": ["string"],
  "phenomena": ["string"]
}}"""

STAR_COLORS = ("Yellow", "Orange", "Red", "Blue", "White")
PLANET_TYPES = ("Rocky", "Gas Giant", "Ice World", "Desert", "Ocean")
PLANET_NAME_PREFIXES = ("Nova", "Alpha", "Beta", "Gamma")
RESOURCES = ("Minerals", "Water Ice", "Rare Gases", "Precious Metals", "Energy Crystals")
FALLBACK_FEATURES = ("Unusual energy readings", "Asteroid field")
FALLBACK_DANGERS = ("Unknown anomalies", "Solar radiation")

_TERRAIN_BY_TYPE: dict[str, tuple[str, str]] = {
    "rocky": ("Cratered basalt plains", "Thin carbon dioxide haze"),
    "gas giant": ("Endless banded cloud decks", "Crushing hydrogen and helium"),
    "ice world": ("Fractured glaciers over a buried ocean", "Frigid nitrogen wisps"),
    "desert": ("Wind-carved dunes and salt flats", "Dry and dusty"),
    "ocean": ("A single planet-wide sea dotted with atolls", "Humid and oxygen-rich"),
}
_DEFAULT_TERRAIN = ("Uncharted terrain", "Unknown composition")
FALLBACK_LOCATIONS = ("Abandoned survey outpost", "Collapsed lava tube", "Crystal canyon", "Ancient impact basin")
FALLBACK_PHENOMENA = ("Auroral storms", "Magnetic anomalies", "Seismic tremors", "Bioluminescent mists")

_NAME_NOISE = re.compile(r"[^\w\s-]", re.ASCII)


def format_coordinates(coordinates: Sequence[int]) -> str:
    return "[" + " ".join(str(value) for value in coordinates) + "]"


def fallback_system(system_name: str | None, rng: random.Random | None = None) -> SystemContent:
    """Randomly populated system with a fixed, complete shape."""
    rng = rng or random.Random()
    planet_type = rng.choice(PLANET_TYPES)
    planet = PlanetSummary(
        name=f"{rng.choice(PLANET_NAME_PREFIXES)}-{rng.randrange(1000):03d}",
        type=planet_type,
        description=f"A mysterious {planet_type.lower()} world",
        resources=[rng.choice(RESOURCES)],
    )
    return SystemContent(
        name=system_name or UNKNOWN_SYSTEM,
        stars=[Star(type="Main Sequence", color=rng.choice(STAR_COLORS))],
        planets=[planet],
        features=list(FALLBACK_FEATURES),
        dangers=list(FALLBACK_DANGERS),
    )


def fallback_planet_details(
    planet: PlanetSummary,
    generated_name: str = "",
    rng: random.Random | None = None,
) -> PlanetContent:
    rng = rng or random.Random()
    terrain, atmosphere = _TERRAIN_BY_TYPE.get(planet.type.lower(), _DEFAULT_TERRAIN)
    return PlanetContent(
        name=planet.name,
        type=planet.type,
        generated_name=generated_name,
        terrain=terrain,
        atmosphere=atmosphere,
        locations=[rng.choice(FALLBACK_LOCATIONS)],
        phenomena=[rng.choice(FALLBACK_PHENOMENA)],
    )


def clean_planet_name(text: str) -> str:
    return _NAME_NOISE.sub("", text.strip())


class WorldContentGenerator:
    """Turns backend text into world content, falling back when it cannot."""

    def __init__(
        self,
        backend: GenerationBackend,
        *,
        rng: random.Random | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._backend = backend
        self._rng = rng or random.Random()
        self._logger = logger or logging.getLogger("space_explorer.world_content")

    def generate_system(self, system_name: str, coordinates: Sequence[int]) -> SystemContent:
        prompt = SYSTEM_PROMPT_TEMPLATE.format(system_name=system_name, coordinates=format_coordinates(coordinates))
        payload = self._request_json(prompt, kind="system")
        if payload is not None:
            try:
                system = SystemContent.model_validate(payload)
            except ValidationError as exc:
                self._logger.warning("system_payload_rejected", extra={"system": system_name, "errors": exc.error_count()})
            else:
                if not system.name:
                    system = system.model_copy(update={"name": system_name or UNKNOWN_SYSTEM})
                return system

        self._logger.info("system_fallback_used", extra={"system": system_name})
        return fallback_system(system_name, self._rng)

    def generate_planet_name(self, planet_type: str, system_name: str) -> str:
        """Return a cleaned creative name, or ``""`` when generation failed."""
        prompt = PLANET_NAME_PROMPT_TEMPLATE.format(planet_type=planet_type, system_name=system_name)
        result = self._backend.generate(prompt)
        if not result.ok:
            return ""
        return clean_planet_name(result.text or "")

    def generate_planet_details(
        self,
        planet: PlanetSummary,
        system_name: str,
        *,
        generated_name: str = "",
    ) -> PlanetContent:
        prompt = PLANET_DETAILS_PROMPT_TEMPLATE.format(
            planet_name=planet.name,
            system_name=system_name,
            planet_type=planet.type or "unknown",
            description=planet.description or "none",
        )
        payload = self._request_json(prompt, kind="planet")
        if payload is not None:
            payload = {**payload, "name": planet.name, "type": planet.type, "generated_name": generated_name}
            try:
                return PlanetContent.model_validate(payload)
            except ValidationError as exc:
                self._logger.warning("planet_payload_rejected", extra={"planet": planet.name, "errors": exc.error_count()})

        self._logger.info("planet_fallback_used", extra={"planet": planet.name})
        return fallback_planet_details(planet, generated_name, self._rng)

    def _request_json(self, prompt: str, *, kind: str) -> dict[str, Any] | None:
        result = self._backend.generate(prompt)
        if not result.ok:
            return None
        payload = extract_json(result.text)
        if payload is None:
            self._logger.warning("content_unparseable", extra={"kind": kind})
        return payload
