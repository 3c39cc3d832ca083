"""
User domain mappers.
Handles transformation between ORM models and DTOs for user accounts.
"""

from domain.models import User
from domain.schemas.user_schemas import UserResponse


class UserMapper:
    """Mapper for user-related transformations."""

    @staticmethod
    def to_response(user: User) -> UserResponse:
        """
        Convert a User ORM model to a UserResponse DTO.

        Password and remember hashes are never part of the response.
        """
        return UserResponse(
            id=user.id,
            name=user.name or "",
            age=user.age or 0,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
