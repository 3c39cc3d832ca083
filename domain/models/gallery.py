"""
Gallery model.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP
from sqlalchemy.orm import reconstructor
from sqlalchemy.sql import func

from domain.models.database import Base


class Gallery(Base):
    """A titled container of images owned by one user.

    ``user_id`` is indexed but carries no foreign key; deleting a user does
    not cascade to their galleries.
    """

    __tablename__ = "galleries"

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )
    deleted_at = Column(TIMESTAMP(timezone=True), index=True)

    title = Column(Text, nullable=False)
    user_id = Column(Integer, nullable=False, index=True)

    def __init__(self, **kwargs):
        images = kwargs.pop("images", None)
        super().__init__(**kwargs)
        self.images = list(images or [])

    @reconstructor
    def _init_on_load(self):
        # Filled per request from the image store, never persisted
        self.images = []

    def images_split_n(self, n: int):
        """Deal images round-robin into ``n`` columns for display."""
        columns = [[] for _ in range(n)]
        for i, image in enumerate(self.images):
            columns[i % n].append(image)
        return columns

    def __repr__(self) -> str:
        return f"<Gallery id={self.id} title={self.title!r} user_id={self.user_id}>"
