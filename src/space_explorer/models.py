"""World content shapes returned by the content generator.

Every field has a default: payloads come from a language model and any key may
be missing.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _Content(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # JSON nulls fall back to field defaults.
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Star(_Content):
    type: str = ""
    color: str = ""


class PlanetSummary(_Content):
    name: str = ""
    type: str = ""
    description: str = ""
    resources: list[str] = Field(default_factory=list)


class SystemContent(_Content):
    name: str = ""
    stars: list[Star] = Field(default_factory=list)
    planets: list[PlanetSummary] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)
    dangers: list[str] = Field(default_factory=list)

    def find_planet(self, planet_name: str) -> PlanetSummary | None:
        wanted = planet_name.lower()
        for planet in self.planets:
            if planet.name.lower() == wanted:
                return planet
        return None


class PlanetContent(_Content):
    name: str = ""
    type: str = ""
    generated_name: str = ""
    terrain: str = ""
    atmosphere: str = ""
    locations: list[str] = Field(default_factory=list)
    phenomena: list[str] = Field(default_factory=list)
