"""
Validators package - ordered validation pipelines in front of the repositories.
"""

from validators.base import run_validators, id_greater_than
from validators.user_validator import UserValidator, normalize_email
from validators.gallery_validator import GalleryValidator

__all__ = [
    "run_validators",
    "id_greater_than",
    "UserValidator",
    "normalize_email",
    "GalleryValidator",
]
