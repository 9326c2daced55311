"""
User profile and development sign-in routes.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response

from recordbook.auth import Claims, get_claims, issue_token
from recordbook.config import Settings
from recordbook.dependencies import get_app_settings, get_repositories
from recordbook.errors import NotFoundError, StoreError
from recordbook.records import User, new_id
from recordbook.repositories import Repositories
from recordbook.schemas import (
    SignInPayload,
    SignUpPayload,
    SignUpResponse,
    TokenResponse,
    UpdateUserPayload,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["User"])


def _require_dev_signin(settings: Settings) -> None:
    if not settings.dev_signin_enabled:
        raise NotFoundError()


@router.get("/user", response_model=UserResponse)
def get_user_profile(
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    """
    Return the caller's profile, creating it from the token claims the
    first time the user is seen.
    """
    try:
        user = repos.users.get(claims.id, claims.id)
    except StoreError as exc:
        if exc.status_code != 404:
            raise
        logger.info("Creating profile for new user %s", claims.id)
        user = repos.users.upsert(
            User.create(claims.id, email=claims.email, first_name=claims.first_name)
        )
    return UserResponse(user=user)


@router.put("/user", status_code=204)
def update_user_profile(
    payload: UpdateUserPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    user = repos.users.get(claims.id, claims.id)
    # Empty fields leave the stored value untouched.
    changes = {key: value for key, value in payload.model_dump().items() if value}
    repos.users.upsert(user.revise(**changes))
    return Response(status_code=204)


@router.post("/signin", response_model=TokenResponse)
def signin(
    payload: SignInPayload,
    settings: Settings = Depends(get_app_settings),
    repos: Repositories = Depends(get_repositories),
):
    _require_dev_signin(settings)
    user = repos.users.get(payload.id, payload.id)
    return TokenResponse(access_token=issue_token(user.id, user.first_name, settings))


@router.post("/signup", response_model=SignUpResponse, status_code=201)
def signup(
    payload: SignUpPayload,
    settings: Settings = Depends(get_app_settings),
    repos: Repositories = Depends(get_repositories),
):
    _require_dev_signin(settings)
    user = User.create(new_id(), **payload.model_dump())
    repos.users.upsert(user)
    return SignUpResponse(
        user=user, access_token=issue_token(user.id, user.first_name, settings)
    )


@router.post("/signout", status_code=204)
def signout(claims: Claims = Depends(get_claims)):
    # Tokens are stateless; the client discards its copy.
    return Response(status_code=204)
