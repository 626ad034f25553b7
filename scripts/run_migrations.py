#!/usr/bin/env python3
"""Apply pending Alembic migrations before the API starts."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from penpixel.config import Settings
from penpixel.util.logging import setup_logging
from penpixel.util.observability import configure_logfire

ALEMBIC_INI = "alembic.ini"


def main() -> int:
    """Upgrade the schema to head, reporting failures to Logfire."""
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    with logfire.span("migrations.upgrade", target="head"):
        try:
            command.upgrade(Config(ALEMBIC_INI), "head")
        except Exception as e:
            logfire.error(
                "Schema upgrade failed",
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

    logfire.info("Schema is up to date")
    return 0


if __name__ == "__main__":
    sys.exit(main())
