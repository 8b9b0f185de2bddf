"""FastAPI application factory.

The application shell owns the entry store and the slot storage; routes
get them through dependencies and pass plain values to the aggregation
and codec layers.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from equiptrack.config import AppConfig
from equiptrack.store.entries import EntryStore
from equiptrack.store.slots import SlotStorage

logger = logging.getLogger(__name__)


def get_entry_store(request: Request) -> EntryStore:
    """Dependency returning the application's entry store."""
    return request.app.state.entry_store


def get_slot_storage(request: Request) -> SlotStorage:
    """Dependency returning the application's slot storage."""
    return request.app.state.slot_storage


def get_config(request: Request) -> AppConfig:
    """Dependency returning the application's configuration."""
    return request.app.state.config


def create_app(
    config: AppConfig | None = None,
    *,
    storage: SlotStorage | None = None,
) -> FastAPI:
    """Create FastAPI application.

    Loads the entry store once; later requests work on the in-memory
    list, and every mutation writes the full list back.

    Args:
        config: Configuration; read from the environment when omitted.
        storage: Slot storage to use instead of opening config.db_path.

    Returns:
        Configured FastAPI application.
    """
    if config is None:
        config = AppConfig.from_env()
    if storage is None:
        storage = SlotStorage.from_path(config.db_path)

    entry_store = EntryStore(storage, key=config.entries_key)
    entry_store.load()
    logger.info(f"Entry store ready with {len(entry_store)} entries")

    app = FastAPI(
        title="equiptrack API",
        description="Equipment fuel and usage tracker",
        version="0.1.0",
    )
    app.state.config = config
    app.state.slot_storage = storage
    app.state.entry_store = entry_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routes
    from equiptrack.api.routes import csv_transfer, entries, reports, settings

    # csv_transfer first: its fixed paths must win over /entries/{entry_id}
    app.include_router(csv_transfer.router, prefix="/api")
    app.include_router(entries.router, prefix="/api")
    app.include_router(reports.router, prefix="/api")
    app.include_router(settings.router, prefix="/api")

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app
