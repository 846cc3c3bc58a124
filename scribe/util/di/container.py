"""Production container and its FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from scribe.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Container with every component on its production implementation.

    Settings come from the environment when ProdConfigProvider first runs.
    """
    providers = [get_provider(base)() for base in PROVIDERS]
    # FastapiProvider exposes the Request to REQUEST-scoped factories
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so DishkaRoute endpoints can resolve FromDishka."""
    setup_dishka(container, app)
