#!/usr/bin/env python3
"""Serve the comments API with uvicorn.

Logging and Logfire are configured before the app module is imported, so
errors raised while building the app and its container are captured too.
"""

import sys

import logfire
import uvicorn

from inkwell.config import Settings
from inkwell.util.logging import setup_logging
from inkwell.util.observability import configure_logfire


def main() -> int:
    """Run the API server until it is stopped."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Starting comments API",
        environment=settings.environment,
        git_sha=settings.git_sha,
        host=settings.api.host,
        port=settings.api.port,
    )

    try:
        uvicorn.run(
            "inkwell.interface.api.app:app",
            host=settings.api.host,
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
    except Exception as e:
        logfire.error(
            "Comments API failed to start",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
