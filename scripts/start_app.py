#!/usr/bin/env python3
"""Start the API with Logfire configured before the app is built."""

import sys

import logfire
import uvicorn

from depot.config import Settings
from depot.util.logging import setup_logging
from depot.util.observability import configure_logfire


def main() -> int:
    """Start the application and report startup failures to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        logfire.info("Starting Depot API", environment=settings.environment)

        uvicorn.run(
            "depot.interface.api.app:create_app",
            factory=True,
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
        raise


if __name__ == "__main__":
    sys.exit(main())
