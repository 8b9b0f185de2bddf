"""SQLite engines and session factories, one pair per database file.

The slot store opens a short session per read or write, so a single
shared connection per file is enough.
"""

from __future__ import annotations

from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from equiptrack.db.schema import Base

DEFAULT_DB_PATH = Path("data/equiptrack.db")

# resolved path -> factory; the engine is the factory's bind
_factories: dict[str, sessionmaker] = {}


def _resolve(db_path: Path | None) -> Path:
    return Path(db_path if db_path is not None else DEFAULT_DB_PATH)


def get_session_factory(db_path: Path | None = None) -> sessionmaker:
    """Session factory for the slot database at db_path.

    The first call for a file creates its parent directory and engine;
    later calls return the same factory.
    """
    path = _resolve(db_path)
    key = str(path.resolve())
    factory = _factories.get(key)
    if factory is None:
        path.parent.mkdir(parents=True, exist_ok=True)
        # sync FastAPI routes run in a threadpool
        engine = create_engine(
            f"sqlite:///{path}",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        factory = _factories[key] = sessionmaker(bind=engine)
    return factory


def get_engine(db_path: Path | None = None) -> Engine:
    """Engine behind get_session_factory(db_path)."""
    return get_session_factory(db_path).kw["bind"]


def init_db(db_path: Path | None = None) -> None:
    """Create the kv_slots table if it does not exist yet."""
    Base.metadata.create_all(get_engine(db_path))
