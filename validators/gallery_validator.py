"""
Gallery validation layer.
"""

from typing import List

from app.exceptions import InvalidIDError, OwnerIDRequiredError, TitleRequiredError
from domain.models import Gallery
from repositories.gallery_repository import GalleryRepository
from validators.base import id_greater_than, run_validators


class GalleryValidator:
    """Checks galleries before handing them to GalleryRepository."""

    def __init__(self, repo: GalleryRepository):
        self.repo = repo

    def by_id(self, gallery_id: int) -> Gallery:
        return self.repo.by_id(gallery_id)

    def by_user_id(self, user_id: int) -> List[Gallery]:
        return self.repo.by_user_id(user_id)

    def create(self, gallery: Gallery) -> Gallery:
        run_validators(gallery, self.user_id_required, self.title_required)
        return self.repo.create(gallery)

    def update(self, gallery: Gallery) -> Gallery:
        try:
            run_validators(gallery, self.user_id_required, self.title_required)
        except Exception:
            # Keep the rejected edit out of the next commit
            self.repo.discard(gallery)
            raise
        return self.repo.update(gallery)

    def delete(self, gallery: Gallery) -> None:
        run_validators(gallery, id_greater_than(0, InvalidIDError))
        self.repo.delete(gallery)

    def user_id_required(self, gallery: Gallery) -> None:
        if not gallery.user_id or gallery.user_id <= 0:
            raise OwnerIDRequiredError()

    def title_required(self, gallery: Gallery) -> None:
        if not gallery.title:
            raise TitleRequiredError()
