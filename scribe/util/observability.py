"""Logfire setup for the API process and the migration script.

Services, repositories and the reaction ledger emit spans and events straight
through ``logfire``; this module only decides where they go and hooks the
framework integrations in.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from scribe.config import ObservabilitySettings, Settings

# Span attributes matching these are replaced before export
SCRUBBED_FIELDS = ["recovery_code", "jwt_secret", "smtp_password"]


def should_send(observability: ObservabilitySettings) -> bool:
    """An explicit flag wins; otherwise send only when a token is configured."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Set OBSERVABILITY__LOGFIRE_TOKEN to export to Logfire, or force the
    choice with OBSERVABILITY__SEND_TO_LOGFIRE.
    """
    send_to_logfire = should_send(settings.observability)

    logfire.configure(
        service_name="scribe-api",
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SCRUBBED_FIELDS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    result = {**attributes, "path": request.url.path}
    identity = getattr(request.state, "identity", None)
    if identity is not None:
        result["user_id"] = str(identity.user_id)
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request except health probes.

    Headers are never captured, so bearer tokens stay out of the traces.
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        excluded_urls="/health",
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace the statements issued through the engine."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
