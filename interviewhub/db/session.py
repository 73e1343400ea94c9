# interviewhub/db/session.py
# SQLAlchemy setup. The URL comes from DATABASE_URL.

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from interviewhub.config import settings

DATABASE_URL = settings.database_url

if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL is not set")

if DATABASE_URL.startswith("sqlite"):
    # local dev / tests: one file, shared across threads
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
    )
else:
    engine = create_engine(
        DATABASE_URL,
        pool_pre_ping=True,                    # detect dropped connections
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()
