"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scribe.config import Settings
from scribe.domain.service import JWTService
from scribe.interface.api.errors import register_error_handlers
from scribe.interface.api.gate import AuthenticationGate
from scribe.interface.api.routes import (
    auth,
    comments,
    health,
    posts,
    reactions,
    users,
)
from scribe.util.di.container import create_container, setup_di
from scribe.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the FastAPI application.

    Logfire must already be configured (scripts/start_app.py, tests/conftest.py).

    Args:
        container: DI container to serve requests from; the production
            container is built when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Scribe API",
        description="Blog backend with posts, comments, replies and reactions",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    # Middleware added last runs first: CORS answers pre-flight before the gate
    app_instance.add_middleware(
        AuthenticationGate, jwt_service=JWTService(auth_settings=settings.auth)
    )
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    # Comment routes precede reaction routes: PATCH /comments/{id}/replies/{rid}
    # would otherwise be read as a reaction of kind "replies"
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(reactions.router)

    return app_instance


# Imported by uvicorn as scribe.interface.api.app:app
app = create_app()
