"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings only configure the shell (API, logging); core/ never reads them
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    service_name: str = "testing-techniques-api"

    # Guard for factorial/fibonacci requests — both are O(n) on big ints
    max_sequence_index: int = Field(5000, ge=0)

    # Guard for primality requests — trial division costs ~sqrt(n)/3 steps
    max_prime_candidate: int = Field(10**12, ge=2)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
