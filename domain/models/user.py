"""
User account model.
"""

from sqlalchemy import Column, Integer, Text, TIMESTAMP
from sqlalchemy.sql import func

from domain.models.database import Base


class User(Base):
    """User account.

    ``password`` and ``remember`` are plaintext values that only live for the
    duration of a request; the table stores their hashes.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())
    updated_at = Column(
        TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()
    )
    deleted_at = Column(TIMESTAMP(timezone=True), index=True)

    name = Column(Text, nullable=False, default="")
    age = Column(Integer, nullable=False, default=0)
    email = Column(Text, nullable=False, unique=True)
    password_hash = Column(Text, nullable=False)
    remember_hash = Column(Text, nullable=False, unique=True)

    # Not mapped
    password = ""
    remember = ""

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"
