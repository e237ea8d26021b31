"""Boundary for text generation backends."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of one generation call: either text or a diagnostic error."""

    text: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None


class GenerationBackend(Protocol):
    """Interface to a language model that turns prompts into free text."""

    def generate(self, prompt: str) -> GenerationResult:
        """Return generated text, or a failed result. Must never raise."""


class ClosableGenerationBackend(GenerationBackend, Protocol):
    def close(self) -> None:
        """Release transport resources held by the backend."""


class OfflineGenerationBackend:
    """Backend used when no model is reachable; every call fails."""

    def generate(self, prompt: str) -> GenerationResult:
        return GenerationResult(error="generation backend disabled")

    def close(self) -> None:
        """Nothing to release."""
