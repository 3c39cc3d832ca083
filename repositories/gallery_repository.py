"""
Gallery Repository - Data access layer for galleries
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Gallery


class GalleryRepository(BaseRepository[Gallery]):
    """Repository for gallery data access"""

    def __init__(self, db: Session):
        super().__init__(db, Gallery)

    def by_user_id(self, user_id: int) -> List[Gallery]:
        """Get all galleries owned by a user"""
        return self._query().filter(Gallery.user_id == user_id).all()
