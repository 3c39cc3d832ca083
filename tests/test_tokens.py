"""
Tests for remember token generation and the keyed hasher.

Covers:
- Token length and alphabet
- Strict decoding of malformed tokens
- Failure of the secure random source
- HMAC determinism and key separation
"""

import base64
import hashlib
import hmac
import re
import secrets

import pytest

from app.exceptions import EncodingError, PrivateError, RandomSourceError
from core.hashing import KeyedHasher
from core.tokens import (
    REMEMBER_TOKEN_BYTES,
    decoded_length,
    generate_token,
    random_bytes,
    remember_token,
)

URLSAFE = re.compile(r"^[A-Za-z0-9_\-]+$")


# =============================================================================
# TOKEN GENERATOR
# =============================================================================


@pytest.mark.parametrize("n", [1, 16, 31, 32, 33, 64])
def test_generated_token_decodes_to_requested_length(n):
    for _ in range(25):
        assert decoded_length(generate_token(n)) == n


def test_remember_token_is_urlsafe_and_unpadded():
    token = remember_token()

    assert URLSAFE.match(token)
    assert "=" not in token
    # 32 bytes encode to 43 unpadded characters
    assert len(token) == 43
    assert decoded_length(token) == REMEMBER_TOKEN_BYTES


def test_tokens_do_not_repeat():
    tokens = {remember_token() for _ in range(200)}
    assert len(tokens) == 200


def test_decoded_length_accepts_padded_tokens():
    padded = base64.urlsafe_b64encode(b"x" * 31).decode("ascii")
    assert padded.endswith("=")
    assert decoded_length(padded) == 31


@pytest.mark.parametrize("token", ["not base64!", "abc$def", "ab+/cd", "a"])
def test_decoded_length_rejects_malformed_tokens(token):
    with pytest.raises(EncodingError):
        decoded_length(token)


def test_random_source_failure_is_reported(monkeypatch):
    """
    Verifies:
    - An unavailable random source raises RandomSourceError
    - No weaker generator is substituted
    """

    def unavailable(n):
        raise NotImplementedError("no entropy")

    monkeypatch.setattr(secrets, "token_bytes", unavailable)

    with pytest.raises(RandomSourceError) as exc_info:
        random_bytes(32)
    assert isinstance(exc_info.value, PrivateError)

    with pytest.raises(RandomSourceError):
        generate_token()


# =============================================================================
# KEYED HASHER
# =============================================================================


def test_hash_is_deterministic_for_one_key():
    hasher = KeyedHasher("secret-hmac-key")
    token = remember_token()

    assert hasher.hash(token) == hasher.hash(token)
    assert KeyedHasher("secret-hmac-key").hash(token) == hasher.hash(token)


def test_hash_matches_hmac_sha256():
    expected = base64.urlsafe_b64encode(
        hmac.new(b"key", b"value", hashlib.sha256).digest()
    ).decode("ascii")

    assert KeyedHasher("key").hash("value") == expected


def test_different_keys_give_unrelated_hashes():
    token = remember_token()
    assert KeyedHasher("key-one").hash(token) != KeyedHasher("key-two").hash(token)


def test_different_inputs_give_different_hashes():
    hasher = KeyedHasher("key")
    assert hasher.hash("alpha") != hasher.hash("beta")


def test_hash_does_not_contain_plaintext():
    hasher = KeyedHasher("key")
    token = remember_token()
    assert token not in hasher.hash(token)
