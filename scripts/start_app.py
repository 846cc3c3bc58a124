#!/usr/bin/env python3
"""Run the Scribe API under uvicorn.

Logfire is configured before the app is imported, so import-time failures
(bad settings, missing modules) are reported too.
"""

import sys

import logfire
import uvicorn

from scribe.config import Settings
from scribe.util.logging import setup_logging
from scribe.util.observability import configure_logfire


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info("Starting Scribe API", host=settings.host, port=settings.port)
    try:
        uvicorn.run(
            "scribe.interface.api.app:app",
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            proxy_headers=True,
        )
    except Exception:
        logfire.exception("Scribe API failed to start")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
