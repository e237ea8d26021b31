"""Turn-based space exploration with language-model generated worlds."""

from .adapters import GenerationBackend, GenerationResult, OfflineGenerationBackend, OllamaGenerationClient
from .dispatcher import CommandDispatcher, CommandResult
from .extraction import extract_json
from .game_state import GameState, Location, Player, new_game
from .interpreter import CommandRequest, parse
from .models import PlanetContent, PlanetSummary, Star, SystemContent
from .session import GameSession, TurnOutcome
from .world_content import WorldContentGenerator, fallback_system

__all__ = [
    "CommandDispatcher",
    "CommandRequest",
    "CommandResult",
    "GameSession",
    "GameState",
    "GenerationBackend",
    "GenerationResult",
    "Location",
    "OfflineGenerationBackend",
    "OllamaGenerationClient",
    "PlanetContent",
    "PlanetSummary",
    "Player",
    "Star",
    "SystemContent",
    "TurnOutcome",
    "WorldContentGenerator",
    "extract_json",
    "fallback_system",
    "new_game",
    "parse",
]
