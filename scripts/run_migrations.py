#!/usr/bin/env python3
"""Apply the comment schema migrations.

Usage:
    python scripts/run_migrations.py [revision]

Upgrades to ``head`` unless a revision is given. Failures are reported to
Logfire and re-raised so a deploy never starts against a half-migrated schema.
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from inkwell.config import Settings
from inkwell.util.observability import configure_logfire


def main() -> int:
    """Upgrade the database to the requested revision."""
    parser = argparse.ArgumentParser(description="Apply comment schema migrations")
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument("--config", default="alembic.ini", help="Alembic config file")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    alembic_cfg = Config(args.config)
    heads = ScriptDirectory.from_config(alembic_cfg).get_heads()

    with logfire.span(
        "run_migrations",
        target=args.revision,
        heads=heads,
        environment=settings.environment,
    ):
        try:
            command.upgrade(alembic_cfg, args.revision)
        except Exception as e:
            logfire.error(
                "Comment schema migration failed",
                target=args.revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

        logfire.info("Comment schema is up to date", target=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
