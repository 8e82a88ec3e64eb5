"""Production container and its FastAPI integration."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from hive.util.di import build_providers


def create_container() -> AsyncContainer:
    """Container with every production implementation.

    Settings come from the environment when first resolved.
    """
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve `FromDishka[...]` route parameters from `container`.

    The WebSocket endpoint reads the same container from
    `app.state.dishka_container`.
    """
    setup_dishka(container, app)
