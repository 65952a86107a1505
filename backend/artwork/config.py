"""NPC Artwork configuration — Pydantic BaseSettings loaded from .env."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings; runtime toggles are only startup defaults."""

    app_name: str = "NPC Artwork"
    debug: bool = False
    log_level: str = "INFO"

    # Network
    host: str = "127.0.0.1"
    port: int = 8010
    api_prefix: str = "/api"
    cors_origins: list[str] = [
        "http://localhost:30000",  # Default host web port
    ]

    # Host data root (local token listing happens below it)
    data_dir: str = "./data"

    # Module settings — startup values, host may change them at runtime
    replace_artwork: bool = False
    token_path_location: str = ""  # Empty = local mode
    system_id: str = "dnd5e"

    # Remote existence probe
    probe_timeout_seconds: float = 5.0

    # Periodic local re-listing, 0 = disabled
    local_refresh_interval_seconds: int = 0

    model_config = SettingsConfigDict(
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        env_prefix="ARTWORK_",
        extra="ignore",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, value: list[str] | str) -> list[str]:
        if isinstance(value, str) and not value.startswith("["):
            return [o.strip() for o in value.split(",") if o.strip()]
        if isinstance(value, list):
            return value
        return ["http://localhost:30000"]

    @field_validator("token_path_location", mode="before")
    @classmethod
    def _none_location_is_empty(cls, value: str | None) -> str:
        return value or ""

    @model_validator(mode="after")
    def _resolve_paths(self) -> "Settings":
        """Ensure the data root is absolute."""
        base = Path(__file__).resolve().parent.parent  # backend/
        if not Path(self.data_dir).is_absolute():
            self.data_dir = str(base / self.data_dir)
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
