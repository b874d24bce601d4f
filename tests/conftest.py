"""
Pytest configuration and fixtures for account store tests.

This module provides:
- File-backed SQLite database fixtures (one fresh file per test)
- Store fixtures
- A factory for tagged test accounts with cleanup
"""

from decimal import Decimal
from typing import Callable

import pytest

from account_dal.config.settings import reset_settings
from account_dal.domain.models import Account
from account_dal.repositories.sqlalchemy import (
    SqlAlchemyAccountStore,
    init_db,
    drop_db,
)

TEST_TAG = "[TESTDATA]"


# =============================================================================
# DATABASE FIXTURES
# =============================================================================


@pytest.fixture(scope="function")
def database_url(tmp_path) -> str:
    """URL of a SQLite file private to the test."""
    reset_settings()
    return f"sqlite:///{tmp_path / 'accounts.db'}"


# =============================================================================
# STORE FIXTURES
# =============================================================================


@pytest.fixture
def account_store(database_url) -> SqlAlchemyAccountStore:
    """Provide an AccountStore over a freshly provisioned schema."""
    store = SqlAlchemyAccountStore(database_url)
    init_db(store.engine)
    yield store
    drop_db(store.engine)
    store.engine.dispose()


@pytest.fixture
def account_factory(account_store) -> Callable[..., Account]:
    """
    Insert accounts whose names carry the test tag.

    Everything tagged is deleted again after the test, including rows a
    failing test never got around to cleaning up.
    """

    def _create(name: str = "Test Account", balance: Decimal = Decimal("42")) -> Account:
        account = Account(name=f"{TEST_TAG} {name}", balance=balance)
        account_store.insert(account)
        return account

    yield _create

    for account in account_store.find_by_partial_name(TEST_TAG):
        account_store.delete(account.id)
