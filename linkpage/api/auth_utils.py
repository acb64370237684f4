"""
Owner access tokens.

The identity provider signs owner tokens with the shared secret; the "sub"
claim carries the owner id. Dashboard routes only read tokens.
"""

import os
from datetime import UTC, datetime, timedelta
from typing import Any, cast
from uuid import UUID

from jose import jwt

from linkpage.domain.entities import Owner

SECRET_KEY = os.environ.get("LINKPAGE_SECRET_KEY", "dev-secret-unsafe")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24


def create_access_token(
    data: dict[str, Any],
    expires_delta: timedelta | None = None,
    now_utc: datetime | None = None,
) -> str:
    """
    Sign a token for the given claims. Used by tests and local tooling.

    Args:
        data: Claims to encode ("sub" is the owner id; "email" and "name" optional)
        expires_delta: Lifetime override
        now_utc: Issue time, defaults to datetime.now(UTC)
    """
    current_time = now_utc if now_utc is not None else datetime.now(UTC)
    lifetime = expires_delta or timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)

    claims = {**data, "exp": current_time + lifetime}
    encoded: str = jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)
    return encoded


def token_for_owner(owner: Owner, expires_delta: timedelta | None = None) -> str:
    claims: dict[str, Any] = {"sub": str(owner.id)}
    if owner.email:
        claims["email"] = owner.email
    if owner.display_name:
        claims["name"] = owner.display_name
    return create_access_token(claims, expires_delta=expires_delta)


def decode_access_token(token: str) -> dict[str, Any] | None:
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        return cast(dict[str, Any], payload)
    except jwt.JWTError:
        return None


def owner_from_claims(payload: dict[str, Any]) -> Owner | None:
    """Build the owner from decoded claims, or None when "sub" is not a UUID."""
    subject = payload.get("sub")
    if not isinstance(subject, str):
        return None
    try:
        owner_id = UUID(subject)
    except ValueError:
        return None
    return Owner(id=owner_id, email=payload.get("email"), display_name=payload.get("name"))
