"""
Composition root: assembles Repository -> Validator -> Service per entity.
"""

from dataclasses import dataclass

from sqlalchemy.orm import Session

from app.config import Settings
from core.hashing import KeyedHasher
from repositories.gallery_repository import GalleryRepository
from repositories.user_repository import UserRepository
from services.gallery_service import GalleryService
from services.image_service import ImageService
from services.user_service import UserService
from validators.gallery_validator import GalleryValidator
from validators.user_validator import UserValidator


@dataclass
class Services:
    user: UserService
    gallery: GalleryService
    image: ImageService


def build_user_service(
    db: Session, pepper: str, hmac_key: str, bcrypt_rounds: int
) -> UserService:
    validator = UserValidator(
        UserRepository(db), KeyedHasher(hmac_key), pepper, bcrypt_rounds
    )
    return UserService(validator, pepper)


def build_gallery_service(db: Session) -> GalleryService:
    return GalleryService(GalleryValidator(GalleryRepository(db)))


def build_services(db: Session, settings: Settings) -> Services:
    """Wire every service against one database session"""
    return Services(
        user=build_user_service(
            db, settings.pepper, settings.hmac_key, settings.bcrypt_rounds
        ),
        gallery=build_gallery_service(db),
        image=ImageService(settings.images_dir),
    )
