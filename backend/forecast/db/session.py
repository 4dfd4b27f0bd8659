# backend/forecast/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from backend.forecast.core.config import DATABASE_URL, SQL_ECHO


def build_engine(url: str = DATABASE_URL, echo: bool = SQL_ECHO):
    """Create an engine; SQLite URLs get the options needed across request threads."""
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=echo, connect_args=connect_args)


# Process-wide engine, created once at import and disposed on app shutdown
engine = build_engine()

# autocommit=False: every operation commits explicitly
# autoflush=False: objects are not flushed before queries
# expire_on_commit=False: returned rows stay readable after commit
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

# Base class for declarative models
Base = declarative_base()


# Dependency that hands each request its own session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
