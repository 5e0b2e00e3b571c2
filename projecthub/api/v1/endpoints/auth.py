"""
Authentication Endpoints Module

This module provides login and logout. The system supports both JWT bearer token
authentication and HTTP-only cookie-based authentication for browser clients.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status, Response
from datetime import timedelta
from projecthub.api import deps
from projecthub.core.security import verify_password, create_access_token
from projecthub.core.config import settings
from projecthub.schemas.auth import Token, LoginRequest
from projecthub.services.store import EntityStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=Token)
def login(
    response: Response,
    credentials: LoginRequest,
    store: EntityStore = Depends(deps.get_store),
):
    """
    Authenticate a user and issue an access token.

    Email, password and role must all match the same user. The token is also
    set as an HTTP-only cookie for browser clients.

    Returns:
        Token: Object containing the access_token and token_type

    Raises:
        HTTPException 401: If credentials are invalid
    """
    user = store.find_user_by_email(credentials.email)

    # Verify user exists, password is correct and the role matches
    if (
        not user
        or not verify_password(credentials.password, user.password)
        or user.role != credentials.role
    ):
        logger.info("Failed login for %s", credentials.email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email, password or role",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Generate JWT access token with configurable expiration
    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        subject=user.email, expires_delta=access_token_expires
    )

    # Set HTTP-only cookie for browser-based authentication
    response.set_cookie(
        key="access_token",
        value=f"Bearer {access_token}",
        httponly=True,  # Cannot be accessed via JavaScript
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,  # Convert minutes to seconds
        samesite="lax"  # CSRF protection
    )
    logger.info("User %s logged in", user.id, extra={"user_id": user.id})

    return {"access_token": access_token, "token_type": "bearer"}


@router.get("/logout")
def logout(response: Response):
    """
    Log out the current user by clearing their authentication cookie.

    API clients can simply discard their token.
    """
    response.delete_cookie("access_token")
    return {"detail": "Logged out"}
