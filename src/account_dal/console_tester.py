#!/usr/bin/env python3
"""Console demonstration of the account store.

Runs every store operation once, in order, against the configured database.
Run with: python -m account_dal.console_tester
"""

import sys
import logging
from decimal import Decimal

from account_dal.config.logging_config import setup_logging
from account_dal.config.settings import get_settings
from account_dal.domain.models import Account
from account_dal.repositories.protocols import AccountStore
from account_dal.repositories.sqlalchemy import SqlAlchemyAccountStore, init_db


def insert_account(store: AccountStore) -> None:
    account = Account(name="My account", balance=Decimal("42"))
    print("Inserting new account")
    store.insert(account)
    print(f"New account inserted. New id was: {account.id}")


def retrieve_account(store: AccountStore) -> None:
    print()
    print("Retrieving account")
    account = Account(name="My account", balance=Decimal("42"))
    store.insert(account)
    retrieved = store.get(account.id)
    print(f"Newly created account retrieved again: {retrieved}")


def update_account(store: AccountStore) -> None:
    print()
    print("Updating new account")
    account = Account(name="My account", balance=Decimal("42"))
    store.insert(account)
    account.name = "New, improved name"
    store.update(account)
    print(f"Updated account from database: {store.get(account.id)}")


def delete_account(store: AccountStore) -> None:
    print()
    print("Deleting new account")
    account = Account(name="My account", balance=Decimal("42"))
    store.insert(account)
    store.delete(account.id)
    if store.get(account.id) is None:
        print("Account was deleted from database.")


def insert_source_and_destination(store: AccountStore) -> None:
    for label in ("Source", "Destination"):
        print()
        account = Account(name=f"{label} account", balance=Decimal("100"))
        print(f"Inserting {label.lower()} account: {account}.")
        store.insert(account)
        print(f"{label} account inserted. New id was: {account.id}")


def move_funds(store: AccountStore) -> None:
    print()
    source = Account(name="Source account", balance=Decimal("100"))
    destination = Account(name="Destination account", balance=Decimal("100"))
    store.insert(source)
    store.insert(destination)
    amount = Decimal("50")
    print(f"Moving {amount} from {source.name} to {destination.name}")
    store.transfer_funds(source.id, destination.id, amount)


def find_accounts(store: AccountStore) -> None:
    print()
    print("Finding accounts:")
    for account in store.find_by_partial_name("account"):
        print(account)


def delete_all_accounts(store: AccountStore) -> None:
    print()
    print("Deleting all accounts")
    for account in store.get_all():
        store.delete(account.id)
    if len(store.get_all()) == 0:
        print("All accounts were deleted from database.")


def run(store: AccountStore) -> None:
    """Exercise the store operations in sequence."""
    insert_account(store)
    retrieve_account(store)
    update_account(store)
    delete_account(store)
    insert_source_and_destination(store)
    move_funds(store)
    find_accounts(store)
    delete_all_accounts(store)


def main() -> None:
    """Provision the schema and run the demonstration."""
    setup_logging()
    logger = logging.getLogger(__name__)
    settings = get_settings()

    logger.info(f"Starting {settings.app_name} console tester")

    try:
        store = SqlAlchemyAccountStore(
            settings.get_database_url(),
            echo=settings.echo_sql,
        )
        init_db(store.engine)
        run(store)

    except Exception as e:
        logger.exception(f"Console tester error: {e}")
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
