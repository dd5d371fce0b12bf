"""Caller identity dependencies: optional bearer auth, required auth, admin only."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.dtos.identity import CallerIdentity
from app.domain.enums import UserRole
from app.domain.exceptions import AuthenticationException, AuthorizationException
from app.infrastructure.security.jwt import verify_token
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_http_bearer = HTTPBearer(auto_error=False)


async def get_caller_identity_optional(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> CallerIdentity | None:
    """Return the caller from the JWT if present and valid; else None (anonymous)."""
    if not credentials:
        return None
    try:
        payload = verify_token(credentials.credentials)
        role = UserRole(payload.get("role", UserRole.CUSTOMER.value))
    except ValueError as e:
        logger.debug("Ignoring invalid bearer token: %s", e)
        return None
    return CallerIdentity(user_id=str(payload["sub"]), role=role)


async def get_current_identity(
    identity: Annotated[CallerIdentity | None, Depends(get_caller_identity_optional)],
) -> CallerIdentity:
    """Return the caller; raise 401 if the token is missing or invalid."""
    if identity is None:
        raise AuthenticationException()
    return identity


async def require_admin(
    identity: Annotated[CallerIdentity, Depends(get_current_identity)],
) -> CallerIdentity:
    """Return the caller if admin; raise 403 otherwise."""
    if not identity.is_admin:
        raise AuthorizationException("search_dictionary", "rebuild")
    return identity
