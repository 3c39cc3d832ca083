"""
Domain mappers package.
Handles transformation between ORM models and DTOs (Data Transfer Objects).
"""

from domain.mappers.user_mapper import UserMapper
from domain.mappers.gallery_mapper import GalleryMapper

__all__ = ["UserMapper", "GalleryMapper"]
