"""
Secure random tokens used as remember (session) tokens.
"""

import base64
import re
import secrets

from app.exceptions import EncodingError, RandomSourceError

REMEMBER_TOKEN_BYTES = 32

URLSAFE_TOKEN = re.compile(r"^[A-Za-z0-9_\-]*={0,2}$")


def random_bytes(n: int) -> bytes:
    """Return ``n`` bytes from the operating system CSPRNG."""
    try:
        return secrets.token_bytes(n)
    except (NotImplementedError, OSError) as exc:
        raise RandomSourceError() from exc


def generate_token(n_bytes: int = REMEMBER_TOKEN_BYTES) -> str:
    """Return ``n_bytes`` random bytes as unpadded URL-safe base64."""
    raw = random_bytes(n_bytes)
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def decoded_length(token: str) -> int:
    """Number of bytes encoded by a URL-safe base64 ``token``.

    Padded and unpadded tokens are both accepted; anything outside the
    URL-safe alphabet raises EncodingError.
    """
    if not URLSAFE_TOKEN.match(token):
        raise EncodingError()
    try:
        data = token.rstrip("=").encode("ascii")
        data += b"=" * (-len(data) % 4)
        return len(base64.urlsafe_b64decode(data))
    except ValueError as exc:
        raise EncodingError() from exc


def remember_token() -> str:
    return generate_token(REMEMBER_TOKEN_BYTES)
