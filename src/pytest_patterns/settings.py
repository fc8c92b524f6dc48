"""
pytest_patterns.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the API, the CLI and the test fixtures.
- Offer a cached settings instance for dependency injection.
- Surface invalid environment values as `ConfigurationError`.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from pytest_patterns.errors import ConfigurationError


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="PATTERNS_", case_sensitive=False)

    # `test` and `dev` create tables on startup; `prod` expects them to exist.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "pytest-patterns"
    log_level: str = "INFO"
    log_json: bool = False

    api_host: str = "127.0.0.1"
    api_port: int = 8080

    database_url: str = "sqlite+aiosqlite:///./patterns.db"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"invalid settings: {exc}") from exc


# --- Module Notes -----------------------------------------------------------
# lru_cache does not cache exceptions, so fixing the environment and calling
# get_settings() again picks up the corrected values.
