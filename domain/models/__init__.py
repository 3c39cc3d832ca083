"""
Domain models package - SQLAlchemy ORM models and value objects.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    destructive_reset,
    get_db_session,
)
from domain.models.user import User
from domain.models.gallery import Gallery
from domain.models.image import Image

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "destructive_reset",
    "get_db_session",
    # Models
    "User",
    "Gallery",
    "Image",
]
