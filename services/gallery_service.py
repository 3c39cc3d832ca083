"""Gallery Service"""

import logging
from typing import List

from domain.models import Gallery
from validators.gallery_validator import GalleryValidator

logger = logging.getLogger("lenslocked.galleries")


class GalleryService:
    """Business logic for galleries; all writes are validated first."""

    def __init__(self, validator: GalleryValidator):
        self.validator = validator

    def by_id(self, gallery_id: int) -> Gallery:
        return self.validator.by_id(gallery_id)

    def by_user_id(self, user_id: int) -> List[Gallery]:
        galleries = self.validator.by_user_id(user_id)
        logger.info("galleries_listed user_id=%s count=%d", user_id, len(galleries))
        return galleries

    def create(self, gallery: Gallery) -> Gallery:
        gallery = self.validator.create(gallery)
        logger.info("gallery_created gallery_id=%s user_id=%s", gallery.id, gallery.user_id)
        return gallery

    def update(self, gallery: Gallery) -> Gallery:
        gallery = self.validator.update(gallery)
        logger.info("gallery_updated gallery_id=%s", gallery.id)
        return gallery

    def delete(self, gallery: Gallery) -> None:
        self.validator.delete(gallery)
        logger.info("gallery_deleted gallery_id=%s", gallery.id)
