"""
App package - Application configuration and the error taxonomy.
Contains settings, exceptions, and foundational application code.
"""

from app.config import settings
from app.exceptions import (
    ModelError,
    PublicError,
    PrivateError,
    NotFoundError,
    InvalidAgeError,
    InvalidPasswordError,
    EmailRequiredError,
    EmailInvalidError,
    EmailTakenError,
    PasswordTooShortError,
    PasswordRequiredError,
    RememberRequiredError,
    TitleRequiredError,
    TokenTooShortError,
    OwnerIDRequiredError,
    InvalidIDError,
    RandomSourceError,
    EncodingError,
    public_message,
)

__all__ = [
    "settings",
    "ModelError",
    "PublicError",
    "PrivateError",
    "NotFoundError",
    "InvalidAgeError",
    "InvalidPasswordError",
    "EmailRequiredError",
    "EmailInvalidError",
    "EmailTakenError",
    "PasswordTooShortError",
    "PasswordRequiredError",
    "RememberRequiredError",
    "TitleRequiredError",
    "TokenTooShortError",
    "OwnerIDRequiredError",
    "InvalidIDError",
    "RandomSourceError",
    "EncodingError",
    "public_message",
]
