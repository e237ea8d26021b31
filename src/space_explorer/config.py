"""Runtime configuration for Space Explorer."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="SPACE_EXPLORER_", env_file=".env", extra="ignore")

    app_name: str = "space-explorer"
    log_level: str = "WARNING"
    ollama_base_url: str = Field(
        default="http://localhost:11434/api",
        description="Base URL of the Ollama API used for world content generation.",
    )
    model: str = "mistral"
    temperature: float = 0.7
    request_timeout_seconds: float | None = Field(
        default=None,
        description="Per-request timeout; unset leaves the transport default in place.",
    )
    offline: bool = False


settings = Settings()
