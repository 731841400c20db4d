"""JWT token domain service."""

from uuid import UUID

import logfire

from inkwell.config import AuthSettings
from inkwell.domain.model import Identity
from inkwell.domain.value import AccountId, Role
from inkwell.util.jwt import TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for bearer token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, account_id: AccountId, role: Role = Role.USER, email: str | None = None
    ) -> str:
        """Create a bearer token for an account.

        Args:
            account_id: Account ID
            role: Account role
            email: Account email (optional)

        Returns:
            JWT token string
        """
        with logfire.span(
            "jwt_service.create_token", account_id=str(account_id), role=role.value
        ):
            token = create_token(str(account_id), role.value, email, self.auth_settings)
            logfire.info("JWT token created", account_id=str(account_id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", account_id=payload.sub)
                return payload
            except Exception as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_identity_from_token(self, token: str | None) -> Identity | None:
        """Resolve the request identity from a bearer token without raising.

        A missing, expired, or malformed token means the caller is anonymous.

        Args:
            token: JWT token string (optional)

        Returns:
            Identity if the token is valid, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return Identity(
                account_id=AccountId(UUID(payload.sub)),
                role=Role(payload.role),
                email=payload.email,
            )
        except Exception as e:
            logfire.debug(
                "Bearer token rejected, treating caller as anonymous", error=str(e)
            )
            return None
