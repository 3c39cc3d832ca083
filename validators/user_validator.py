"""
User validation layer.

UserValidator exposes the same interface as UserRepository and runs the
ordered checks for each operation before delegating to it.
"""

import logging
import re
from typing import List

from app.exceptions import (
    EmailInvalidError,
    EmailRequiredError,
    EmailTakenError,
    InvalidIDError,
    NotFoundError,
    PasswordRequiredError,
    PasswordTooShortError,
    RememberRequiredError,
    TokenTooShortError,
)
from core.hashing import KeyedHasher
from core.passwords import DEFAULT_ROUNDS, hash_password
from core.tokens import REMEMBER_TOKEN_BYTES, decoded_length, remember_token
from domain.models import User
from repositories.user_repository import UserRepository
from validators.base import id_greater_than, run_validators

logger = logging.getLogger("lenslocked.validators.users")

EMAIL_REGEX = re.compile(r"^[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,16}$")
MIN_PASSWORD_LENGTH = 8


def normalize_email(email: str) -> str:
    return (email or "").lower().strip()


class UserValidator:
    def __init__(
        self,
        repo: UserRepository,
        hasher: KeyedHasher,
        pepper: str,
        bcrypt_rounds: int = DEFAULT_ROUNDS,
    ):
        self.repo = repo
        self.hasher = hasher
        self.pepper = pepper
        self.bcrypt_rounds = bcrypt_rounds

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def by_id(self, user_id: int) -> User:
        return self.repo.by_id(user_id)

    def by_email(self, email: str) -> User:
        """Look up a user by email, normalized the same way it was stored."""
        user = run_validators(User(email=email), self.normalize_email)
        return self.repo.by_email(user.email)

    def by_remember(self, token: str) -> User:
        """Look up a user by plaintext remember token; only its hash is queried."""
        user = run_validators(User(remember=token), self.hmac_remember)
        if not user.remember_hash:
            raise NotFoundError()
        return self.repo.by_remember(user.remember_hash)

    def by_age(self, age: int) -> User:
        return self.repo.by_age(age)

    def by_age_range(self, min_age: int, max_age: int) -> List[User]:
        return self.repo.by_age_range(min_age, max_age)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def create(self, user: User) -> User:
        """Hash the password, issue a remember token if unset, validate email."""
        run_validators(
            user,
            self.password_required,
            self.password_min_length,
            self.bcrypt_password,
            self.password_hash_required,
            self.set_remember_if_unset,
            self.remember_min_bytes,
            self.hmac_remember,
            self.remember_hash_required,
            self.normalize_email,
            self.require_email,
            self.email_format,
            self.email_not_taken,
        )
        return self.repo.create(user)

    def update(self, user: User) -> User:
        """Same checks as create, except a new password is optional."""
        try:
            run_validators(
                user,
                self.password_min_length,
                self.bcrypt_password,
                self.password_hash_required,
                self.remember_min_bytes,
                self.hmac_remember,
                self.remember_hash_required,
                self.normalize_email,
                self.require_email,
                self.email_format,
                self.email_not_taken,
            )
        except Exception:
            # Earlier steps already changed mapped columns
            self.repo.discard(user)
            raise
        return self.repo.update(user)

    def delete(self, user: User) -> None:
        run_validators(user, id_greater_than(0, InvalidIDError))
        self.repo.delete(user)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def password_required(self, user: User) -> None:
        if not user.password:
            raise PasswordRequiredError()

    def password_min_length(self, user: User) -> None:
        if not user.password:
            return
        if len(user.password) < MIN_PASSWORD_LENGTH:
            raise PasswordTooShortError()

    def bcrypt_password(self, user: User) -> None:
        # No new password means the stored hash stays as it is
        if not user.password:
            return
        user.password_hash = hash_password(
            user.password, self.pepper, self.bcrypt_rounds
        )
        user.password = ""

    def password_hash_required(self, user: User) -> None:
        if not user.password_hash:
            raise PasswordRequiredError()

    def set_remember_if_unset(self, user: User) -> None:
        if user.remember:
            return
        user.remember = remember_token()

    def remember_min_bytes(self, user: User) -> None:
        if not user.remember:
            return
        if decoded_length(user.remember) < REMEMBER_TOKEN_BYTES:
            raise TokenTooShortError()

    def hmac_remember(self, user: User) -> None:
        if not user.remember:
            return
        user.remember_hash = self.hasher.hash(user.remember)

    def remember_hash_required(self, user: User) -> None:
        if not user.remember_hash:
            raise RememberRequiredError()

    def normalize_email(self, user: User) -> None:
        user.email = normalize_email(user.email)

    def require_email(self, user: User) -> None:
        if not user.email:
            raise EmailRequiredError()

    def email_format(self, user: User) -> None:
        if not EMAIL_REGEX.match(user.email):
            raise EmailInvalidError()

    def email_not_taken(self, user: User) -> None:
        """Reject an email that belongs to a different user ID.

        Advisory only: the unique index is what finally settles a race.
        """
        try:
            # The pending edit must not be flushed before this lookup
            with self.repo.db.no_autoflush:
                existing = self.by_email(user.email)
        except NotFoundError:
            return
        if existing.id != user.id:
            logger.info("email_taken email=%s owner_id=%s", user.email, existing.id)
            raise EmailTakenError()
