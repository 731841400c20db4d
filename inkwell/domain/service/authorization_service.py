"""Authorization domain service."""

import logfire

from inkwell.config import AuthSettings
from inkwell.domain.error import NotAuthorizedError
from inkwell.domain.model import Identity

from .base import Service


class AuthorizationService(Service):
    """Decides which identities may moderate comments."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize authorization service.

        Args:
            auth_settings: Authentication settings with the moderator roles
        """
        self.auth_settings = auth_settings

    def is_moderator(self, identity: Identity | None) -> bool:
        """Check whether an identity may moderate comments."""
        return identity is not None and identity.has_role(
            self.auth_settings.moderator_roles
        )

    def require_moderator(self, identity: Identity, action: str) -> None:
        """Ensure an identity may perform a moderation action.

        Args:
            identity: Identity of the caller
            action: Name of the action, for the error message

        Raises:
            NotAuthorizedError: If the identity is not a moderator
        """
        if not self.is_moderator(identity):
            logfire.warn(
                "Moderation attempt by non-moderator",
                account_id=str(identity.account_id),
                role=identity.role.value,
                action=action,
            )
            raise NotAuthorizedError(action, str(identity.account_id))
