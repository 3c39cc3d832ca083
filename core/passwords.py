"""
Password hashing (bcrypt) with a server-side pepper.
"""

import bcrypt

DEFAULT_ROUNDS = 12


def hash_password(password: str, pepper: str, rounds: int = DEFAULT_ROUNDS) -> str:
    peppered = (password + pepper).encode("utf-8")
    return bcrypt.hashpw(peppered, bcrypt.gensalt(rounds=rounds)).decode("ascii")


def verify_password(password_hash: str, password: str, pepper: str) -> bool:
    """Constant-time check of ``password`` against a stored bcrypt hash.

    Returns False on mismatch. A malformed stored hash raises ValueError.
    """
    peppered = (password + pepper).encode("utf-8")
    return bcrypt.checkpw(peppered, password_hash.encode("ascii"))
