#!/usr/bin/env python3
"""Apply Alembic migrations up to head, reporting failures to Logfire."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from scribe.config import Settings
from scribe.util.logging import setup_logging
from scribe.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main() -> int:
    """Upgrade the schema to the latest revision."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        with logfire.span("migrations.upgrade", environment=settings.environment):
            command.upgrade(Config(str(ALEMBIC_INI)), "head")

        logfire.info("Database migrations completed successfully")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
