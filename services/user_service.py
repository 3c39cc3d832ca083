"""User Service - authentication and remember-token sessions"""

import logging
from typing import List

from app.exceptions import InvalidPasswordError
from core.passwords import verify_password
from core.tokens import remember_token
from domain.models import User
from validators.user_validator import UserValidator

logger = logging.getLogger("lenslocked.users")


class UserService:
    """Business logic for user accounts.

    Every store operation goes through UserValidator; this class adds
    password authentication and session token issuance on top of it.
    """

    def __init__(self, validator: UserValidator, pepper: str):
        self.validator = validator
        self.pepper = pepper

    def by_id(self, user_id: int) -> User:
        return self.validator.by_id(user_id)

    def by_email(self, email: str) -> User:
        return self.validator.by_email(email)

    def by_remember(self, token: str) -> User:
        return self.validator.by_remember(token)

    def by_age(self, age: int) -> User:
        return self.validator.by_age(age)

    def by_age_range(self, min_age: int, max_age: int) -> List[User]:
        return self.validator.by_age_range(min_age, max_age)

    def create(self, user: User) -> User:
        user = self.validator.create(user)
        logger.info("user_created user_id=%s email=%s", user.id, user.email)
        return user

    def update(self, user: User) -> User:
        user = self.validator.update(user)
        logger.info("user_updated user_id=%s", user.id)
        return user

    def delete(self, user: User) -> None:
        self.validator.delete(user)
        logger.info("user_deleted user_id=%s", user.id)

    def authenticate(self, email: str, password: str) -> User:
        """
        Verify an email and password pair.

        Raises:
            NotFoundError: no user has this email
            InvalidPasswordError: the password does not match

        Any other failure (store errors, a malformed stored hash) propagates.
        """
        user = self.by_email(email)
        if not verify_password(user.password_hash, password, self.pepper):
            logger.info("authentication_failed user_id=%s", user.id)
            raise InvalidPasswordError()
        logger.info("authenticated user_id=%s", user.id)
        return user

    def sign_in(self, user: User) -> str:
        """Return the plaintext remember token to store in the session cookie.

        A user loaded from the store carries no plaintext token, so a new one
        is generated and its hash persisted first.
        """
        if not user.remember:
            user.remember = remember_token()
            self.update(user)
        return user.remember

    def rotate_remember(self, user: User) -> User:
        """Replace the user's remember token so existing cookies stop working."""
        user.remember = remember_token()
        return self.update(user)
