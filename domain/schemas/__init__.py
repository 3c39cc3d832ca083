"""
Domain schemas package - Pydantic models for request and response bodies.
"""

from domain.schemas.user_schemas import SignupForm, LoginForm, UserResponse
from domain.schemas.gallery_schemas import GalleryForm, GalleryResponse, ImageResponse

__all__ = [
    # User schemas
    "SignupForm",
    "LoginForm",
    "UserResponse",
    # Gallery schemas
    "GalleryForm",
    "GalleryResponse",
    "ImageResponse",
]
