"""
User Repository - Data access layer for user accounts
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import User
from app.exceptions import InvalidAgeError


class UserRepository(BaseRepository[User]):
    """Repository for user data access.

    Single-row lookups raise NotFoundError when nothing matches; any other
    exception means the store itself failed.
    """

    def __init__(self, db: Session):
        super().__init__(db, User)

    def by_email(self, email: str) -> User:
        """Get user by (already normalized) email"""
        return self._first(self._query().filter(User.email == email))

    def by_remember(self, remember_hash: str) -> User:
        """Get user by remember token hash. Expects the token to be hashed already."""
        return self._first(self._query().filter(User.remember_hash == remember_hash))

    def by_age(self, age: int) -> User:
        """Get the first user of the given age"""
        if not age:
            raise InvalidAgeError()
        return self._first(self._query().filter(User.age == age))

    def by_age_range(self, min_age: int, max_age: int) -> List[User]:
        """Get all users whose age is between min_age and max_age inclusive"""
        return self._query().filter(User.age.between(min_age, max_age)).all()
