"""HS256 bearer tokens.

Tokens carry the account id in ``sub`` along with its role and, optionally,
its email. They are minted by the platform's login flow (or
``scripts/issue_token.py``) and only verified here.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from inkwell.config import AuthSettings


class TokenPayload(BaseModel):
    """Verified token claims."""

    sub: str
    role: str = "user"
    email: str | None = None
    iat: datetime | None = None
    exp: datetime


class JWTError(Exception):
    """Token is malformed, badly signed, or expired."""


def create_token(
    account_id: str, role: str, email: str | None, settings: AuthSettings
) -> str:
    """Sign a token valid for ``settings.jwt_expiry_days``."""
    now = datetime.now(timezone.utc)
    claims = {
        "sub": account_id,
        "role": role,
        "email": email,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry and return the claims.

    Raises:
        JWTError: If the token cannot be trusted
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}")
    return TokenPayload(**claims)
