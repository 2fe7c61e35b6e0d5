#!/usr/bin/env python3
"""Start the showcase API, reporting startup errors to Logfire."""

import sys
import logfire
import uvicorn

from showcase.config import Settings, check_settings
from showcase.util.error import ConfigurationError
from showcase.util.logging import setup_logging
from showcase.util.observability import configure_logfire


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Logging and Logfire first so import-time errors in the app are captured
    setup_logging(settings)
    configure_logfire(settings)

    try:
        check_settings(settings)
    except ConfigurationError as e:
        logfire.error("Refusing to start", error=str(e))
        raise

    try:
        logfire.info(
            "Starting showcase API",
            environment=settings.environment,
            git_sha=settings.git_sha,
        )

        # Importing the app configures Logfire again (no-op)
        uvicorn.run(
            "showcase.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )

        return 0

    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
