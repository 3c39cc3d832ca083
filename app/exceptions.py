import logging
from typing import Any, Optional

logger = logging.getLogger("lenslocked.errors")

# Prefix marking where an error message was raised; never shown to users.
ERROR_PREFIX = "models: "

GENERIC_MESSAGE = (
    "Something went wrong. Please try again, or contact us if the problem persists."
)


class ModelError(Exception):
    """Base class for every named failure of the data-access layer.

    Attributes:
        message: developer-facing message, prefixed with ``models: ``
        code: machine-readable error kind
        http_status: suggested HTTP status code for handlers
    """

    code = "MODEL_ERROR"
    default_message = ERROR_PREFIX + "Unknown error"
    http_status = 500

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        return payload

    def __str__(self) -> str:
        return self.message


class PublicError(ModelError):
    """An error whose message is safe to show to an end user."""

    http_status = 400

    def public(self) -> str:
        """Format the message for display.

        The ``models: `` prefix is dropped, every word lowercased, the first
        word capitalised and a period appended.
        """
        text = self.message.replace(ERROR_PREFIX, "", 1).rstrip(".")
        words = [w.lower() for w in text.split(" ")]
        words[0] = words[0].capitalize()
        return " ".join(words) + "."

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.public()}


class PrivateError(ModelError):
    """An error that is logged but replaced by a generic message for users."""

    def to_dict(self) -> dict:
        return {"code": "INTERNAL_SERVER_ERROR", "message": GENERIC_MESSAGE}


# ---------------------------------------------------------------------------
# Public errors
# ---------------------------------------------------------------------------


class NotFoundError(PublicError):
    code = "NOT_FOUND"
    default_message = ERROR_PREFIX + "Resource not found"
    http_status = 404


class InvalidAgeError(PublicError):
    code = "INVALID_AGE"
    default_message = ERROR_PREFIX + "Age received must be more than 0"


class InvalidPasswordError(PublicError):
    code = "INVALID_PASSWORD"
    default_message = ERROR_PREFIX + "Incorrect password provided"
    http_status = 401


class EmailRequiredError(PublicError):
    code = "EMAIL_REQUIRED"
    default_message = ERROR_PREFIX + "Email address is required"


class EmailInvalidError(PublicError):
    code = "EMAIL_INVALID"
    default_message = ERROR_PREFIX + "Email is not valid"


class EmailTakenError(PublicError):
    code = "EMAIL_TAKEN"
    default_message = ERROR_PREFIX + "Email address is already taken"
    http_status = 409


class PasswordTooShortError(PublicError):
    code = "PASSWORD_TOO_SHORT"
    default_message = ERROR_PREFIX + "Password must be at least 8 characters long"


class PasswordRequiredError(PublicError):
    code = "PASSWORD_REQUIRED"
    default_message = ERROR_PREFIX + "Password is required"


class RememberRequiredError(PublicError):
    code = "REMEMBER_REQUIRED"
    default_message = ERROR_PREFIX + "Remember token is required"


class TitleRequiredError(PublicError):
    code = "TITLE_REQUIRED"
    default_message = ERROR_PREFIX + "Title is required"


# ---------------------------------------------------------------------------
# Private errors
# ---------------------------------------------------------------------------


class TokenTooShortError(PrivateError):
    code = "TOKEN_TOO_SHORT"
    default_message = (
        ERROR_PREFIX + "Number of bytes for remember token must be at least 32 bytes"
    )


class OwnerIDRequiredError(PrivateError):
    code = "OWNER_ID_REQUIRED"
    default_message = ERROR_PREFIX + "User ID is required"


class InvalidIDError(PrivateError):
    code = "INVALID_ID"
    default_message = ERROR_PREFIX + "ID received must be greater than 0"


class RandomSourceError(PrivateError):
    code = "RANDOM_SOURCE_UNAVAILABLE"
    default_message = ERROR_PREFIX + "Secure random source is unavailable"


class EncodingError(PrivateError):
    code = "ENCODING_ERROR"
    default_message = ERROR_PREFIX + "Token is not valid URL-safe base64"


def public_message(exc: BaseException) -> str:
    """Return the text an end user may see for ``exc``.

    Anything that is not a PublicError is logged with full detail first.
    """
    if isinstance(exc, PublicError):
        return exc.public()
    logger.error("private_error type=%s detail=%s", type(exc).__name__, exc)
    return GENERIC_MESSAGE
