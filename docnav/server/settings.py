from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv(override=False)


DEFAULT_CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173"]


def _parse_origins(value: object) -> List[str]:
    if value is None:
        return list(DEFAULT_CORS_ORIGINS)
    if isinstance(value, str):
        if not value.strip():
            return list(DEFAULT_CORS_ORIGINS)
        return [origin.strip() for origin in value.split(",") if origin.strip()]
    return list(value)  # type: ignore[call-overload]


def _parse_ttl(value: object) -> int | None:
    try:
        ttl = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError):
        return None
    return ttl if ttl > 0 else None


class Settings(BaseModel):
    """Runtime configuration for the documentation server."""

    docs_dir: Path | None = Field(
        default_factory=lambda: Path(os.environ["DOCS_DIR"]) if os.getenv("DOCS_DIR") else None
    )
    docs_pattern: str | None = Field(default_factory=lambda: os.getenv("DOCS_PATTERN") or None)
    nav_folders_file: Path | None = Field(
        default_factory=lambda: Path(os.environ["NAV_FOLDERS_FILE"]) if os.getenv("NAV_FOLDERS_FILE") else None
    )
    cors_origins: List[str] = Field(default_factory=lambda: _parse_origins(os.getenv("CORS_ORIGINS")))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    session_ttl_seconds: int | None = Field(
        default_factory=lambda: _parse_ttl(os.getenv("SESSION_TTL_SECONDS", "3600"))
    )

    model_config = {
        "frozen": True,
    }

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> List[str]:
        return _parse_origins(value)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unsupported LOG_LEVEL: {value}")
        return level

    @field_validator("session_ttl_seconds", mode="before")
    @classmethod
    def _normalize_ttl(cls, value: object) -> int | None:
        return _parse_ttl(value)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance for FastAPI dependency injection."""

    return Settings()


__all__ = ["DEFAULT_CORS_ORIGINS", "Settings", "get_settings"]
