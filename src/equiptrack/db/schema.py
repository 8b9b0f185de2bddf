"""Database schema for equiptrack.

All durable state lives in named key-value slots: one slot holds the
JSON-encoded entry list, another the fuel price setting.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class KeyValueSlot(Base):
    """A named slot holding one text value.

    Writes replace the whole value; there is no partial update.
    """

    __tablename__ = "kv_slots"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
