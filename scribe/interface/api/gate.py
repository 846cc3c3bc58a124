"""Request authentication gate.

Runs in front of every route. Routes registered with ``openapi_extra=PUBLIC``
are open; every other route, and any path that matches no route, needs an
``Authorization: Bearer <token>`` header carrying a valid token. The caller's
Identity is stored on ``request.state.identity`` and handed to handlers
through the ``CurrentIdentity`` dependency.
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.routing import APIRoute
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.routing import BaseRoute, Match

from scribe.domain.error import AuthenticationError, CredentialFailure
from scribe.domain.service import JWTService
from scribe.domain.value import Identity
from scribe.interface.api.errors import error_response
from scribe.util.logging import get_logger

logger = get_logger(__name__)

ACCESS_KEY = "x-access"

# Pass as ``openapi_extra`` when registering a route that needs no token
PUBLIC = {ACCESS_KEY: "public"}


def framework_paths(app) -> set[str]:
    """Documentation routes FastAPI registers itself."""
    paths = (
        app.openapi_url,
        app.docs_url,
        app.redoc_url,
        app.swagger_ui_oauth2_redirect_url,
    )
    return {path for path in paths if path}


def find_route(routes, scope) -> BaseRoute | None:
    """First route that fully matches ``scope``, looking inside included routers."""
    for route in routes:
        if isinstance(route, APIRoute):
            match, _ = route.matches(scope)
            if match == Match.FULL:
                return route
        elif isinstance(getattr(route, "routes", None), list):
            found = find_route(route.routes, scope)
            if found is not None:
                return found
        else:
            match, _ = route.matches(scope)
            if match == Match.FULL:
                return route
    return None


def _slash_variant(path: str) -> str | None:
    if path == "/":
        return None
    return path.rstrip("/") if path.endswith("/") else f"{path}/"


def is_public(request: Request) -> bool:
    """Whether the request resolves to a route declared public.

    Only APIRoutes carrying the PUBLIC marker and FastAPI's documentation
    routes are public; anything unrecognised needs a token. HEAD is checked
    as GET, and a path that only matches with its trailing slash toggled is
    checked against that route so the router can redirect it.
    """
    app = request.app
    if request.url.path in framework_paths(app):
        return True

    scope = dict(request.scope)
    if scope["method"] == "HEAD":
        scope["method"] = "GET"

    route = find_route(app.router.routes, scope)
    if route is None:
        variant = _slash_variant(scope["path"])
        if variant is None:
            return False
        route = find_route(app.router.routes, {**scope, "path": variant})

    if not isinstance(route, APIRoute):
        return False
    extra = route.openapi_extra or {}
    return extra.get(ACCESS_KEY) == "public"


def parse_bearer(header: str | None) -> str:
    """Extract the token from an Authorization header.

    Raises:
        AuthenticationError: ``missing_credential`` without a header,
            ``invalid_credential`` for any other scheme or an empty token
    """
    if header is None:
        raise AuthenticationError(
            CredentialFailure.MISSING, "Authorization header is required"
        )
    scheme, _, token = header.strip().partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise AuthenticationError(
            CredentialFailure.INVALID, "Authorization header must be 'Bearer <token>'"
        )
    return token


class AuthenticationGate(BaseHTTPMiddleware):
    """Admits, identifies or rejects each request before routing."""

    def __init__(self, app, jwt_service: JWTService) -> None:
        super().__init__(app)
        self.jwt_service = jwt_service

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # CORS pre-flight never carries credentials
        if request.method == "OPTIONS" or is_public(request):
            return await call_next(request)

        try:
            token = parse_bearer(request.headers.get("authorization"))
            identity = self.jwt_service.identify(token)
        except AuthenticationError as e:
            logger.info(
                f"Rejected {request.method} {request.url.path}: {e.kind.value}"
            )
            # Exception handlers do not see errors raised in middleware
            return error_response(401, e.kind.value, str(e))

        request.state.identity = identity
        return await call_next(request)


def get_identity(request: Request) -> Identity:
    """Identity published by the gate for this request."""
    identity = getattr(request.state, "identity", None)
    if identity is None:
        raise AuthenticationError(
            CredentialFailure.MISSING, "Authentication required"
        )
    return identity


CurrentIdentity = Annotated[Identity, Depends(get_identity)]
