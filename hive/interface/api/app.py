"""FastAPI application factory."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hive.config import Settings
from hive.interface.api.handlers import register_exception_handlers
from hive.interface.api.routes import (
    activities,
    auth,
    health,
    invitations,
    messages,
    projects,
    realtime,
    tasks,
    users,
)
from hive.util.di.container import create_container, setup_di
from hive.util.observability import instrument_fastapi

ROUTERS = (
    health.router,
    auth.router,
    projects.router,
    tasks.router,
    messages.router,
    users.router,
    activities.router,
    invitations.router,
    realtime.router,
)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the API.

    Logfire must already be configured (`scripts/start_app.py` does it).

    Args:
        container: DI container to serve from; the production container if
            omitted. Tests pass one with in-memory storage.
    """
    settings = Settings()

    app = FastAPI(
        title="Hive API",
        description="Team projects, tasks, chat and invitations",
        version="0.1.0",
    )
    instrument_fastapi(app)

    # Browsers send the identity token as a bearer header, never as a cookie
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.frontend.allowed_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept"],
        max_age=600,
    )

    setup_di(app, container or create_container())
    register_exception_handlers(app, settings)
    for router in ROUTERS:
        app.include_router(router)

    return app


# Module-level instance for `uvicorn hive.interface.api.app:app`
app = create_app()
