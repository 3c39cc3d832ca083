"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.user_repository import UserRepository
from repositories.gallery_repository import GalleryRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "GalleryRepository",
]
