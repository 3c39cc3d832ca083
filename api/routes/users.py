"""User sign up, sign in and sign out routes"""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
import logging

from api.dependencies import get_services, require_user
from app.config import settings
from app.exceptions import EmailTakenError, NotFoundError
from domain.mappers import UserMapper
from domain.models import User
from domain.schemas.user_schemas import LoginForm, SignupForm, UserResponse
from services.container import Services

router = APIRouter(tags=["Users"])
logger = logging.getLogger("lenslocked.api.users")


def set_remember_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.remember_cookie_name,
        value=token,
        httponly=True,
        secure=settings.is_production(),
        samesite="lax",
    )


@router.post("/signup", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def signup(form: SignupForm, response: Response, services: Services = Depends(get_services)):
    """Create an account and sign it in"""
    user = User(name=form.name, email=form.email, age=form.age, password=form.password)
    try:
        services.user.create(user)
    except IntegrityError as exc:
        # Lost a race with a concurrent signup for the same email
        logger.warning("signup_conflict email=%s", user.email)
        raise EmailTakenError() from exc

    set_remember_cookie(response, services.user.sign_in(user))
    return UserMapper.to_response(user)


@router.post("/login", response_model=UserResponse)
def login(form: LoginForm, response: Response, services: Services = Depends(get_services)):
    """Check credentials and issue a session cookie"""
    try:
        user = services.user.authenticate(form.email, form.password)
    except NotFoundError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email address."
        )

    set_remember_cookie(response, services.user.sign_in(user))
    return UserMapper.to_response(user)


@router.post("/logout")
def logout(
    response: Response,
    user: User = Depends(require_user),
    services: Services = Depends(get_services),
):
    """Clear the session cookie and rotate the remember token"""
    response.delete_cookie(settings.remember_cookie_name, httponly=True)
    services.user.rotate_remember(user)
    return {"status": "ok"}


@router.get("/me", response_model=UserResponse)
def me(user: User = Depends(require_user)):
    """Return the signed in user"""
    return UserMapper.to_response(user)
