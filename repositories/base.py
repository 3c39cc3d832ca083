"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.
"""

from datetime import datetime, timezone
from typing import Generic, TypeVar, Type
from sqlalchemy.orm import Session, Query
from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError
from abc import ABC

from app.exceptions import NotFoundError

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing common CRUD operations.

    Rows are soft deleted: ``delete`` stamps ``deleted_at`` and every query
    built through ``_query`` ignores stamped rows. Store failures roll the
    session back and propagate unchanged.
    """

    def __init__(self, db: Session, model: Type[ModelType]):
        self.db = db
        self.model = model

    def _query(self) -> Query:
        return self.db.query(self.model).filter(self.model.deleted_at.is_(None))

    @staticmethod
    def _first(query: Query):
        """
        Return the first row of ``query``.

        Raises:
            NotFoundError: when the query matches nothing
        """
        entity = query.first()
        if entity is None:
            raise NotFoundError()
        return entity

    def by_id(self, entity_id: int) -> ModelType:
        """Get entity by ID or raise NotFoundError"""
        return self._first(self._query().filter(self.model.id == entity_id))

    def create(self, entity: ModelType) -> ModelType:
        """Insert a new entity; its ID is assigned by the database"""
        try:
            self.db.add(entity)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(entity)
        return entity

    def update(self, entity: ModelType) -> ModelType:
        """Save every column of an existing entity"""
        try:
            if inspect(entity).transient:
                # Built by hand with a known ID; match the row by primary key
                entity = self.db.merge(entity)
            else:
                self.db.add(entity)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(entity)
        return entity

    def discard(self, entity: ModelType) -> None:
        """
        Stop tracking an entity whose pending changes were rejected.

        The in-memory values stay on the object, but a later commit on this
        session no longer writes them. A valid ``update`` re-attaches it.
        """
        if inspect(entity).persistent:
            self.db.expunge(entity)

    def delete(self, entity: ModelType) -> None:
        """Soft delete the row whose ID matches ``entity.id``"""
        try:
            self.db.query(self.model).filter(self.model.id == entity.id).update(
                {self.model.deleted_at: datetime.now(timezone.utc)},
                synchronize_session=False,
            )
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
