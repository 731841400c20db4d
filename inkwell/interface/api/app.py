"""FastAPI application for the comments service."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inkwell.config import Settings
from inkwell.interface.api.routes import comments, health, moderation
from inkwell.interface.error import register_error_handlers
from inkwell.util.di.container import create_container, setup_di
from inkwell.util.observability import SERVICE_VERSION, instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Disposes the engine and its pooled connections
    await app.state.dishka_container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the app around a DI container.

    Logfire must already be configured: ``scripts/start_app.py`` does it in
    production and ``tests/conftest.py`` in tests.

    Args:
        container: Container to resolve dependencies from. Tests pass one
            with in-memory persistence; the production one is built otherwise.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Inkwell Comments API",
        description="Nested comments and moderation for the Inkwell blog",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    # The blog frontend embeds the comment widget and the moderation pages
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())
    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(moderation.router)

    return app_instance


# Imported by uvicorn, after start_app.py has configured Logfire
app = create_app()
