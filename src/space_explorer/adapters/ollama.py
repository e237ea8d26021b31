"""Ollama HTTP generation client.

Requests go to the ``/generate`` endpoint of a locally running Ollama server.
Every failure, whether an HTTP error status, a network fault or an undecodable
body, is reported through :class:`GenerationResult` instead of an exception so
callers can fall back to synthesized content.
"""

from __future__ import annotations

import logging

import requests

from space_explorer.adapters.generation import GenerationResult

DEFAULT_BASE_URL = "http://localhost:11434/api"
DEFAULT_MODEL = "mistral"
DEFAULT_SYSTEM_INSTRUCTION = (
    "You are a creative sci-fi writer specializing in generating unique and interesting space content."
)


class OllamaGenerationClient:
    """Single-shot, non-streaming client for Ollama's generate API."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        timeout_seconds: float | None = None,
        system_instruction: str = DEFAULT_SYSTEM_INSTRUCTION,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature
        self.timeout_seconds = timeout_seconds
        self.system_instruction = system_instruction
        self._session = session or requests.Session()
        self._logger = logger or logging.getLogger("space_explorer.adapters.ollama")

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/generate"

    def generate(self, prompt: str) -> GenerationResult:
        payload = {
            "model": self.model,
            "prompt": prompt,
            "system": self.system_instruction,
            "temperature": self.temperature,
            "stream": False,
        }
        try:
            response = self._session.post(self.endpoint, json=payload, timeout=self.timeout_seconds)
        except requests.RequestException as exc:
            return self._failed(f"Failed contacting Ollama: {type(exc).__name__}: {exc}")

        if response.status_code != 200:
            return self._failed(f"API error: {response.status_code}")

        try:
            body = response.json()
        except ValueError as exc:
            return self._failed(f"Undecodable Ollama response: {exc}")

        text = body.get("response") if isinstance(body, dict) else None
        if not isinstance(text, str):
            return self._failed("Ollama response has no text")

        self._logger.debug("generation_succeeded", extra={"model": self.model, "chars": len(text)})
        return GenerationResult(text=text)

    def close(self) -> None:
        """Release the pooled HTTP connections."""
        self._session.close()

    def __enter__(self) -> OllamaGenerationClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _failed(self, message: str) -> GenerationResult:
        self._logger.warning("generation_failed", extra={"model": self.model, "endpoint": self.endpoint, "error": message})
        return GenerationResult(error=message)
