"""Generation backend adapters (e.g., Ollama integration)."""

from .generation import ClosableGenerationBackend, GenerationBackend, GenerationResult, OfflineGenerationBackend
from .ollama import DEFAULT_SYSTEM_INSTRUCTION, OllamaGenerationClient

__all__ = [
    "ClosableGenerationBackend",
    "DEFAULT_SYSTEM_INSTRUCTION",
    "GenerationBackend",
    "GenerationResult",
    "OfflineGenerationBackend",
    "OllamaGenerationClient",
]
