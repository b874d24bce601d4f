"""
Unit tests for logging configuration.

Tests cover:
- Package logger level follows settings
- SQL statement logging follows echo_sql
"""

import logging

import pytest

from account_dal.config.logging_config import setup_logging
from account_dal.config.settings import Settings, set_settings, reset_settings


@pytest.fixture(autouse=True)
def restore_loggers():
    names = ["account_dal", "sqlalchemy.engine", "sqlalchemy.pool"]
    levels = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in levels.items():
        logging.getLogger(name).setLevel(level)
    reset_settings()


def test_package_logger_follows_log_level():
    set_settings(Settings(log_level="debug", echo_sql=False))

    setup_logging()

    assert logging.getLogger("account_dal").level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING


def test_echo_sql_enables_statement_logging():
    set_settings(Settings(log_level="WARNING", echo_sql=True))

    setup_logging()

    assert logging.getLogger("account_dal").level == logging.WARNING
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
