"""
Authorization context for request handlers.

Every request resolves to exactly one of three contexts:

- ``Anonymous``: no bearer token, or one that fails verification
- ``AuthenticatedUser``: a valid token for a regular account
- ``AuthenticatedAdmin``: a valid token whose ``is_admin`` claim is set

Handlers never inspect the raw header. They depend on ``require_user`` or
``require_admin`` and receive the context object, so a rejected request is
answered before the handler (and therefore the database) is reached.
"""
from dataclasses import dataclass
from typing import Optional, Union

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from .jwt_handler import verify_access_token

# Defines the expected header format (Bearer <token>)
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/users/login", auto_error=False)


@dataclass(frozen=True)
class Anonymous:
    # Why verification failed; None when no token was sent at all
    reason: Optional[str] = None

    is_authenticated = False
    is_admin = False


@dataclass(frozen=True)
class AuthenticatedUser:
    user_id: int
    name: str
    email: str

    is_authenticated = True
    is_admin = False


@dataclass(frozen=True)
class AuthenticatedAdmin(AuthenticatedUser):
    is_admin = True


AuthContext = Union[Anonymous, AuthenticatedUser, AuthenticatedAdmin]


def context_from_claims(payload: dict) -> AuthContext:
    """Builds the context for a verified token payload."""
    sub = payload.get("sub")
    if sub is None:
        return Anonymous(reason="Invalid Token")
    try:
        user_id = int(sub)
    except (TypeError, ValueError):
        return Anonymous(reason="Invalid Token")

    cls = AuthenticatedAdmin if payload.get("is_admin") else AuthenticatedUser
    return cls(
        user_id=user_id,
        name=payload.get("name", ""),
        email=payload.get("email", ""),
    )


async def get_auth_context(token: Optional[str] = Depends(oauth2_scheme)) -> AuthContext:
    if not token:
        return Anonymous()

    payload = verify_access_token(token)
    if payload is None:
        return Anonymous(reason="Invalid Token")

    return context_from_claims(payload)


async def require_user(
    context: AuthContext = Depends(get_auth_context),
) -> AuthenticatedUser:
    """Dependency that rejects anonymous callers with 401."""
    if not context.is_authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=context.reason or "No Token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return context


async def require_admin(
    context: AuthenticatedUser = Depends(require_user),
) -> AuthenticatedAdmin:
    """Dependency that additionally rejects non-admin callers with 401."""
    if not context.is_admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Admin Token",
        )
    return context

