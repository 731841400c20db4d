"""Logfire setup for the comments service.

Services trace their work with spans named after the operation and log
structured events inside them:

    with logfire.span("moderation_service.delete", comment_id=str(comment_id)):
        logfire.info("Comment deleted", removed=removed)

Comment authors' email addresses and bearer tokens are scrubbed from every
exported attribute.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from inkwell.config import Settings

SERVICE_NAME = "inkwell-comments"
SERVICE_VERSION = "0.1.0"

# Matched against attribute names in addition to logfire's defaults
SCRUB_PATTERNS = ["author_email", "authorization", "bearer"]


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process, before the app is imported."""
    observability = settings.observability

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        token=observability.logfire_token,
        send_to_logfire=observability.should_send,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        git_sha=settings.git_sha,
        send_to_logfire=observability.should_send,
    )


def _request_attributes(request, attributes: dict) -> dict:
    # Tag request spans with the post being read or the comment being moderated
    extra = {}
    post_ref = request.query_params.get("post") or request.path_params.get("post")
    if post_ref:
        extra["post_ref"] = post_ref
    comment_id = request.path_params.get("comment_id")
    if comment_id:
        extra["comment_id"] = comment_id
    return {**attributes, **extra}


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request. Headers are never captured, they carry tokens."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls="/health",
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement sent to the comment store."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
