"""Application settings loaded from environment variables."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _env_file() -> str | None:
    if os.getenv("PYTEST_CURRENT_TEST"):
        return None
    return ".env"


class Settings(BaseSettings):
    """chatrelay configuration. All values come from environment variables."""

    # Model provider (GitHub Models / Azure inference endpoint)
    github_token: str = Field(default="")
    llm_endpoint: str = Field(default="https://models.inference.ai.azure.com")
    default_model: str = Field(default="gpt-4o")
    max_output_tokens: int = Field(default=1000)

    # HTTP server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    max_body_bytes: int = Field(default=50 * 1024 * 1024)

    # Storage: "sqlite", "json" or "memory"
    storage_backend: str = Field(default="sqlite")
    database_path: Path = Field(default=Path("data/chat.db"))
    data_dir: Path = Field(default=Path("data"))

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(env_file=_env_file(), env_file_encoding="utf-8")

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        if os.getenv("PYTEST_CURRENT_TEST"):
            return (init_settings,)
        return (init_settings, env_settings, dotenv_settings, file_secret_settings)


settings = Settings()
