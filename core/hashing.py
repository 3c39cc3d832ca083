"""
Keyed hashing of remember tokens.

Only the HMAC of a remember token is stored, so a leaked ``users`` table
cannot be replayed as session cookies without the server key.
"""

import base64
import hashlib
import hmac


class KeyedHasher:
    """HMAC-SHA-256 bound to a server-side secret key."""

    def __init__(self, key: str):
        if isinstance(key, str):
            key = key.encode("utf-8")
        self._key = key

    def hash(self, value: str) -> str:
        """Return the URL-safe base64 digest of ``value``."""
        digest = hmac.new(self._key, value.encode("utf-8"), hashlib.sha256).digest()
        return base64.urlsafe_b64encode(digest).decode("ascii")
