#!/usr/bin/env python3
"""Apply database migrations, reporting failures to Logfire."""

import sys
import logfire
from alembic import command
from alembic.config import Config

from showcase.config import Settings
from showcase.util.logging import setup_logging
from showcase.util.observability import configure_logfire


def main(revision: str = "head") -> int:
    """Upgrade the database to `revision`."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting database migrations", revision=revision)

        # Database URL is taken from Settings in migrations/env.py
        alembic_cfg = Config("alembic.ini")
        command.upgrade(alembic_cfg, revision)

        logfire.info("Database migrations completed successfully", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails and doesn't start with a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
