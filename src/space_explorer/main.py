"""CLI startup entrypoint for Space Explorer."""

from __future__ import annotations

import random

import typer
from rich import print
from rich.console import Console

from space_explorer.adapters import ClosableGenerationBackend, OfflineGenerationBackend, OllamaGenerationClient
from space_explorer.config import settings
from space_explorer.dispatcher import CommandDispatcher
from space_explorer.game_state import new_game
from space_explorer.session import GameSession
from space_explorer.telemetry import configure_logging
from space_explorer.world_content import WorldContentGenerator

app = typer.Typer(help="Space Explorer: a language-model generated space exploration game")

SAMPLE_PLANET_TYPES = ("desert", "ice", "ocean", "jungle", "volcanic")


def _build_backend(offline: bool = False) -> ClosableGenerationBackend:
    if offline or settings.offline:
        return OfflineGenerationBackend()
    return OllamaGenerationClient(
        base_url=settings.ollama_base_url,
        model=settings.model,
        temperature=settings.temperature,
        timeout_seconds=settings.request_timeout_seconds,
    )


@app.callback()
def _configure() -> None:
    configure_logging(settings.log_level)


@app.command()
def config() -> None:
    """Show runtime backend configuration."""
    print(
        {
            "app_name": settings.app_name,
            "ollama_base_url": settings.ollama_base_url,
            "model": settings.model,
            "temperature": settings.temperature,
            "request_timeout_seconds": settings.request_timeout_seconds,
            "offline": settings.offline,
        }
    )


@app.command()
def play(
    name: str = typer.Option(None, help="Explorer name; prompted for when omitted"),
    offline: bool = typer.Option(False, help="Skip the model and use fallback content only"),
) -> None:
    """Start an interactive exploration session."""
    console = Console(highlight=False)
    console.print("\nWelcome to Space Explorer!", style="bold")
    if name is None:
        name = typer.prompt("What is your name, explorer?", default="", show_default=False)

    console.print(f"\nGreetings, {name}!", markup=False)
    console.print("You start your journey in the Sol system.")
    console.print("Type 'help' to see available commands.")

    rng = random.Random()
    backend = _build_backend(offline)
    session = GameSession(CommandDispatcher(WorldContentGenerator(backend, rng=rng), rng=rng), new_game(name))

    def _write(line: str) -> None:
        console.print(line, markup=False)

    try:
        final_state = session.run(read_line=input, write=_write)
    except KeyboardInterrupt:
        final_state = session.state
    finally:
        backend.close()

    console.print(
        f"\nSafe travels, {final_state.player.name or 'explorer'}. "
        f"Systems discovered: {len(final_state.discovered_systems)}.",
        markup=False,
    )


@app.command("sample-content")
def sample_content(offline: bool = typer.Option(False, help="Skip the model and use fallback content only")) -> None:
    """Generate sample planet names and a full system description."""
    backend = _build_backend(offline)
    generator = WorldContentGenerator(backend)
    try:
        names = {
            planet_type: generator.generate_planet_name(planet_type, "Test System") or None
            for planet_type in SAMPLE_PLANET_TYPES
        }
        system = generator.generate_system("Nova Centauri", (2, 3, 1))
    finally:
        backend.close()
    print(
        {
            "planet_names": names,
            "system": system.name,
            "planets": [f"{planet.name} ({planet.type}): {planet.description}" for planet in system.planets],
        }
    )


if __name__ == "__main__":
    app()
