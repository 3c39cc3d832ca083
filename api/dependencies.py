"""
API dependencies for dependency injection
"""

import logging
from typing import Generator, Optional
from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import ModelError
from domain.models import User, get_db_session
from services.container import Services, build_services

logger = logging.getLogger("lenslocked.api.auth")


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def get_services(db: Session = Depends(get_db)) -> Services:
    """Request-scoped services sharing one database session."""
    return build_services(db, settings)


def current_user_optional(
    request: Request, services: Services = Depends(get_services)
) -> Optional[User]:
    """
    Resolve the remember_token cookie to a user.

    A missing, malformed or unknown token means an anonymous request. Store
    failures still propagate.
    """
    token = request.cookies.get(settings.remember_cookie_name)
    if not token:
        return None
    try:
        user = services.user.by_remember(token)
    except ModelError as exc:
        logger.debug("remember_lookup_failed reason=%s", exc.code)
        return None
    request.state.user = user
    return user


def require_user(user: Optional[User] = Depends(current_user_optional)) -> User:
    """Reject anonymous requests with 401."""
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Sign in required"
        )
    return user
