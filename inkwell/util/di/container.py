"""Production container and its FastAPI hookup."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from inkwell.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with every production provider.

    Nothing connects until the first request resolves a repository.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Resolve ``FromDishka`` route parameters from ``container``."""
    setup_dishka(container, app)
