"""
Database configuration and session management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("lenslocked.database")

# Create SQLAlchemy Base
Base = declarative_base()

# Create engine
engine = create_engine(settings.database_url, echo=settings.db_echo, future=True)

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True)


def init_database(bind=None):
    """Create any missing tables (auto-migrate)."""
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("database_migrated tables=%s", sorted(Base.metadata.tables))


def destructive_reset(bind=None):
    """Drop and recreate every table. Development and tests only."""
    bind = bind or engine
    if settings.is_production():
        raise RuntimeError("destructive_reset refused in production")
    Base.metadata.drop_all(bind=bind)
    logger.warning("database_dropped tables=%s", sorted(Base.metadata.tables))
    init_database(bind)


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
