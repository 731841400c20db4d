"""Request identity.

The identity is resolved from the bearer token of each request and passed
explicitly into use cases. It is never cached between requests.
"""

from typing import Optional

from inkwell.domain.model.common import DomainModel
from inkwell.domain.value import AccountId, Role


class Identity(DomainModel):
    """Authenticated account making the current request."""

    account_id: AccountId
    role: Role = Role.USER
    email: Optional[str] = None

    def has_role(self, roles: list[Role]) -> bool:
        """Check whether this identity holds one of the given roles."""
        return self.role in roles
