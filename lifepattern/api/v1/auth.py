"""Auth: register, login, me, forgot-password, profile update."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from lifepattern.api.deps import get_current_user
from lifepattern.config import settings
from lifepattern.core.auth import create_access_token, hash_password, verify_password
from lifepattern.db.session import get_db
from lifepattern.models.user import User
from lifepattern.schemas.user import (
    ForgotPasswordBody,
    LoginBody,
    RegisterBody,
    TokenResponse,
    UpdateProfileRequest,
    UserOut,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])

ACCESS_TOKEN_EXPIRE_SECONDS = settings.access_token_expire_minutes * 60


def _user_out(user: User) -> UserOut:
    return UserOut(id=str(user.id), email=user.email, name=user.name)


def _token_response(user: User) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(user.id, user.email),
        expires_in=ACCESS_TOKEN_EXPIRE_SECONDS,
        user=_user_out(user),
    )


@router.post(
    "/register",
    response_model=TokenResponse,
    status_code=201,
    summary="Register a new user",
    responses={400: {"description": "Email already exists"}},
)
async def register(
    session: Annotated[AsyncSession, Depends(get_db)],
    body: RegisterBody,
) -> TokenResponse:
    email = body.email.strip().lower()
    r = await session.execute(select(User).where(User.email == email))
    if r.scalar_one_or_none() is not None:
        raise HTTPException(status_code=400, detail="Email already exists")
    try:
        user = User(email=email, name=body.name.strip(), password_hash=hash_password(body.password))
        session.add(user)
        await session.flush()
        await session.refresh(user)
    except IntegrityError as e:
        logger.warning("Register IntegrityError: %s", e)
        raise HTTPException(status_code=400, detail="Email already exists") from e
    await session.commit()
    logger.info("Registered user %s", user.id)
    return _token_response(user)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with email and password",
    responses={401: {"description": "Invalid email or password"}},
)
async def login(
    session: Annotated[AsyncSession, Depends(get_db)],
    body: LoginBody,
) -> TokenResponse:
    email = (body.email or "").strip().lower()
    password = body.password or ""
    if not email or not password:
        raise HTTPException(status_code=401, detail="Email and password required")
    r = await session.execute(select(User).where(User.email == email))
    user = r.scalar_one_or_none()
    if not user or not user.password_hash:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    if not verify_password(password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return _token_response(user)


@router.get(
    "/me",
    response_model=UserOut,
    summary="Get current authenticated user",
    responses={401: {"description": "Not authenticated or invalid token"}},
)
async def me(user: Annotated[User, Depends(get_current_user)]) -> UserOut:
    return _user_out(user)


@router.post(
    "/forgot-password",
    summary="Request a password reset",
)
async def forgot_password(
    session: Annotated[AsyncSession, Depends(get_db)],
    body: ForgotPasswordBody,
) -> dict:
    """Always answers the same way so callers cannot probe which emails are registered."""
    email = body.email.strip().lower()
    r = await session.execute(select(User.id).where(User.email == email))
    user_id = r.scalar_one_or_none()
    if user_id is not None:
        # No mail transport configured; the request is only logged.
        logger.info("Password reset requested for user %s", user_id)
    return {"message": "If the email exists, a password reset link has been sent"}


@router.put(
    "/profile",
    response_model=UserOut,
    summary="Update name and email of the current user",
    responses={
        400: {"description": "Email already exists"},
        401: {"description": "Not authenticated"},
    },
)
async def update_profile(
    session: Annotated[AsyncSession, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
    body: UpdateProfileRequest,
) -> UserOut:
    new_email = body.email.strip().lower()
    if new_email != user.email:
        r = await session.execute(select(User.id).where(User.email == new_email))
        if r.scalar_one_or_none() is not None:
            raise HTTPException(status_code=400, detail="Email already exists")
        user.email = new_email
    user.name = body.name.strip()
    await session.commit()
    return _user_out(user)
