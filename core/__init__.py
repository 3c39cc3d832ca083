"""
Core package - Cryptographic primitives shared by the data-access layer.
"""

from core.tokens import (
    REMEMBER_TOKEN_BYTES,
    random_bytes,
    generate_token,
    decoded_length,
    remember_token,
)
from core.hashing import KeyedHasher
from core.passwords import hash_password, verify_password

__all__ = [
    "REMEMBER_TOKEN_BYTES",
    "random_bytes",
    "generate_token",
    "decoded_length",
    "remember_token",
    "KeyedHasher",
    "hash_password",
    "verify_password",
]
