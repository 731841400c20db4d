#!/usr/bin/env python3
"""Mint a bearer token for an account.

Usage:
    python scripts/issue_token.py <account-uuid> [--role admin] [--email a@b.c]

The token is signed with AUTH__JWT_SECRET from the environment, so it is
accepted by any instance sharing that secret.
"""

import argparse
import sys
from uuid import UUID

import logfire

from inkwell.config import Settings
from inkwell.domain.service import JWTService
from inkwell.domain.value import AccountId, Role
from inkwell.util.observability import configure_logfire


def main() -> int:
    """Print a signed token for the given account."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("account_id", type=UUID, help="Account UUID")
    parser.add_argument(
        "--role", choices=[r.value for r in Role], default=Role.USER.value
    )
    parser.add_argument("--email", default=None)
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    if settings.auth.jwt_secret == "CHANGE_ME_IN_PRODUCTION":
        logfire.warn("Issuing token with the default JWT secret")

    jwt_service = JWTService(auth_settings=settings.auth)
    token = jwt_service.create_token(
        AccountId(args.account_id), role=Role(args.role), email=args.email
    )
    print(token)
    return 0


if __name__ == "__main__":
    sys.exit(main())
