"""Application configuration for equiptrack."""

from __future__ import annotations

import dataclasses
import os
from pathlib import Path
from typing import Any

from equiptrack.db.session import DEFAULT_DB_PATH
from equiptrack.store.entries import ENTRIES_KEY
from equiptrack.store.settings import FUEL_PRICE_KEY

DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
)


def _env_list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
    if value is None:
        return default
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclasses.dataclass(frozen=True)
class AppConfig:
    """Runtime configuration.

    Attributes:
        db_path: SQLite database file holding the key-value slots.
        log_level: Logging level name used by the CLI.
        cors_origins: Origins allowed to call the HTTP API.
        entries_key: Slot name for the entry list.
        fuel_price_key: Slot name for the fuel price.
    """

    db_path: Path = DEFAULT_DB_PATH
    log_level: str = "INFO"
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    entries_key: str = ENTRIES_KEY
    fuel_price_key: str = FUEL_PRICE_KEY

    @classmethod
    def from_env(cls, **overrides: Any) -> AppConfig:
        """Create configuration from environment variables.

        Reads ``EQUIPTRACK_DB_PATH``, ``EQUIPTRACK_LOG_LEVEL`` and
        ``EQUIPTRACK_CORS_ORIGINS`` (comma separated). Explicit keyword
        arguments override environment values; None overrides are ignored.

        Returns:
            Populated configuration.
        """
        env = os.environ
        values: dict[str, Any] = {}

        db_path = env.get("EQUIPTRACK_DB_PATH")
        if db_path:
            values["db_path"] = Path(db_path)
        log_level = env.get("EQUIPTRACK_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level.upper()
        values["cors_origins"] = _env_list(
            env.get("EQUIPTRACK_CORS_ORIGINS"), DEFAULT_CORS_ORIGINS
        )

        values.update({k: v for k, v in overrides.items() if v is not None})
        if "db_path" in values:
            values["db_path"] = Path(values["db_path"])
        return cls(**values)
