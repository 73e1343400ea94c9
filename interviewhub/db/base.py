"""
Shared DB base / session factory.
SessionLocal, engine and Base are defined once in interviewhub.db.session.
"""
from datetime import datetime, timezone

from sqlalchemy import BigInteger, Integer

from interviewhub.db.session import engine, SessionLocal, Base

# sqlite only autoincrements INTEGER primary keys
BigIntPK = BigInteger().with_variant(Integer, "sqlite")


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


__all__ = ["engine", "SessionLocal", "Base", "BigIntPK", "utcnow", "as_naive_utc"]
