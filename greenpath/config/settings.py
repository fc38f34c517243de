"""Environment-driven runtime settings."""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, Field

from greenpath.domain.constants import DEFAULT_START_XP, MAX_XP

_TRUTHY = {"1", "true", "yes", "on"}


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def _is_configured(value: str | None) -> bool:
    return bool(value and value.strip())


def resolve_catalog_path() -> Optional[str]:
    raw = os.getenv("GREENPATH_CATALOG_PATH")
    return raw.strip() if _is_configured(raw) else None


def resolve_start_xp() -> int:
    raw = os.getenv("GREENPATH_START_XP", "").strip()
    if not raw:
        return DEFAULT_START_XP
    try:
        val = int(raw)
    except ValueError:
        return DEFAULT_START_XP
    return val if 0 <= val <= MAX_XP else DEFAULT_START_XP


def log_events_enabled() -> bool:
    return _is_enabled(os.getenv("GREENPATH_LOG_EVENTS"))


class Settings(BaseModel):
    catalog_path: Optional[str] = Field(default=None)
    start_xp: int = Field(default=DEFAULT_START_XP, ge=0, le=MAX_XP)
    log_events: bool = Field(default=False)


def load_settings() -> Settings:
    return Settings(
        catalog_path=resolve_catalog_path(),
        start_xp=resolve_start_xp(),
        log_events=log_events_enabled(),
    )


__all__ = ["Settings", "load_settings"]
