"""Services package - Business logic layer"""

from services.user_service import UserService
from services.gallery_service import GalleryService
from services.image_service import ImageService
from services.container import (
    Services,
    build_services,
    build_user_service,
    build_gallery_service,
)

__all__ = [
    "UserService",
    "GalleryService",
    "ImageService",
    "Services",
    "build_services",
    "build_user_service",
    "build_gallery_service",
]
