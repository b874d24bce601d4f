"""Logging configuration."""

import logging
import sys

from account_dal.config.settings import get_settings


def setup_logging() -> None:
    """Configure logging for the store and the console tester."""
    settings = get_settings()
    level = getattr(logging, settings.log_level.upper())

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Store failures are logged at ERROR, transfers at INFO
    logging.getLogger("account_dal").setLevel(level)

    # Statement logging only when SQL echo is requested
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.echo_sql else logging.WARNING
    )
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
