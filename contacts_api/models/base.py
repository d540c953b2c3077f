from datetime import datetime, timezone

from sqlalchemy import BigInteger
from sqlalchemy.dialects import sqlite
from sqlmodel import Field, SQLModel

# BIGINT on PostgreSQL; SQLite only autoincrements an INTEGER PRIMARY KEY
ID_TYPE = BigInteger().with_variant(sqlite.INTEGER(), "sqlite")
MAX_DB_INTEGER = 2**63 - 1


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored in the timezone-less DateTime columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampedModel(SQLModel):
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(default_factory=utcnow, nullable=False)


class IntIDModel(SQLModel):
    id: int | None = Field(default=None, primary_key=True, sa_type=ID_TYPE)
