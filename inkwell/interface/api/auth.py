"""Bearer token handling for routes."""

from fastapi import HTTPException, status

from inkwell.domain.model import Identity
from inkwell.domain.service import JWTService


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def optional_identity(
    jwt_service: JWTService, authorization: str | None
) -> Identity | None:
    """Resolve the caller's identity, or None for anonymous callers."""
    return jwt_service.get_identity_from_token(bearer_token(authorization))


def require_identity(jwt_service: JWTService, authorization: str | None) -> Identity:
    """Resolve the caller's identity or reject the request.

    Raises:
        HTTPException: 401 if the token is missing, expired, or invalid
    """
    identity = optional_identity(jwt_service, authorization)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return identity
