"""Shared pytest fixtures for equiptrack tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from equiptrack.api.app import create_app
from equiptrack.config import AppConfig
from equiptrack.db.schema import Base
from equiptrack.models.domain import EquipmentEntry
from equiptrack.store.entries import EntryStore
from equiptrack.store.slots import SlotStorage


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture
def session(engine):
    """Create a database session for testing."""
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def storage(engine):
    """Slot storage over the in-memory database."""
    return SlotStorage(sessionmaker(bind=engine))


@pytest.fixture
def store(storage):
    """Empty, loaded entry store."""
    entry_store = EntryStore(storage)
    entry_store.load()
    return entry_store


def make_entry(entry_id="e-1", **fields) -> EquipmentEntry:
    """Build an entry with sensible defaults for tests."""
    defaults = {
        "equipamento": "104119",
        "modelo": "Ch570",
        "unidade": "Usina Norte",
    }
    defaults.update(fields)
    return EquipmentEntry(id=entry_id, **defaults)


@pytest.fixture
def client(storage, tmp_path):
    """Test client for an app backed by the in-memory storage."""
    config = AppConfig(db_path=tmp_path / "unused.db")
    return TestClient(create_app(config, storage=storage))


class FailingStorage:
    """Slot storage whose reads and/or writes raise OperationalError."""

    def __init__(self, fail_reads=True, fail_writes=True):
        self.fail_reads = fail_reads
        self.fail_writes = fail_writes
        self.slots = {}

    def read(self, key):
        if self.fail_reads:
            raise OperationalError("SELECT value FROM kv_slots", {}, Exception("disk I/O error"))
        return self.slots.get(key)

    def write(self, key, value):
        if self.fail_writes:
            raise OperationalError("UPDATE kv_slots", {}, Exception("database is locked"))
        self.slots[key] = value
