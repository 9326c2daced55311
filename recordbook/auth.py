"""
Bearer token decoding and issuing.

The caller's identity is always taken from an `Authorization: Bearer <JWT>`
header. Tokens carry `id` and `first_name` claims; Auth0-issued tokens
without `id` are accepted through their `sub` claim.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from fastapi import Depends, Request
from jose import JWTError, jwt

from recordbook.config import Settings
from recordbook.dependencies import get_app_settings
from recordbook.errors import ERR_BAD_TOKEN, ERR_NO_TOKEN, AuthError


@dataclass(frozen=True)
class Claims:
    id: str
    first_name: str = ""
    email: str = ""


def decode_token(token: str, settings: Settings) -> Claims:
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            audience=settings.jwt_audience,
            issuer=settings.jwt_issuer,
            options={"verify_aud": settings.jwt_audience is not None},
        )
    except JWTError as exc:
        raise AuthError(ERR_BAD_TOKEN) from exc

    user_id = payload.get("id") or payload.get("sub")
    if not user_id:
        raise AuthError(ERR_BAD_TOKEN)
    return Claims(
        id=str(user_id),
        first_name=payload.get("first_name") or payload.get("nickname") or "",
        email=payload.get("email") or "",
    )


def issue_token(user_id: str, first_name: str, settings: Settings) -> str:
    expires = datetime.now(timezone.utc) + timedelta(minutes=settings.token_ttl_minutes)
    claims = {"id": user_id, "first_name": first_name, "exp": expires}
    if settings.jwt_audience:
        claims["aud"] = settings.jwt_audience
    if settings.jwt_issuer:
        claims["iss"] = settings.jwt_issuer
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def get_claims(
    request: Request, settings: Settings = Depends(get_app_settings)
) -> Claims:
    """FastAPI dependency resolving the caller, or failing with 401."""
    header = request.headers.get("Authorization")
    if not header:
        raise AuthError(ERR_NO_TOKEN)
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise AuthError(ERR_BAD_TOKEN)
    return decode_token(token.strip(), settings)
