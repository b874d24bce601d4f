"""SQLAlchemy implementation of AccountStore."""

import logging
from decimal import Decimal
from typing import Iterable, Optional, Union

from sqlalchemy import Engine, literal
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from account_dal.core.exceptions import StorageError, TransferError, RollbackError
from account_dal.domain.models import Account, to_storable_money
from account_dal.repositories.sqlalchemy.database import build_engine
from account_dal.repositories.sqlalchemy.orm_models import AccountORM

logger = logging.getLogger(__name__)


class SqlAlchemyAccountStore:
    """
    SQLAlchemy-backed account store.

    Every public method opens its own session on a fresh connection and
    closes it before returning, so one instance can be shared by threads.
    """

    def __init__(self, database_url: Union[str, URL], echo: bool = False):
        self._engine = build_engine(database_url, echo=echo)
        self._session_factory = sessionmaker(
            bind=self._engine,
            autoflush=False,
            expire_on_commit=False,
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    def insert(self, account: Account) -> int:
        """
        Persist a new account and assign the generated id back onto it.

        Raises ValidationError if the balance does not fit NUMERIC(18, 2).
        """
        balance = to_storable_money(account.balance)
        try:
            with self._session_factory() as session:
                orm_account = AccountORM(name=account.name, balance=balance)
                session.add(orm_account)
                session.commit()
                account.id = orm_account.id
        except SQLAlchemyError as exc:
            logger.error(f"Insert of account '{account.name}' failed: {exc}")
            raise StorageError("insert account", exc, name=account.name) from exc
        logger.debug(f"Inserted account {account.id}")
        return account.id

    def get(self, account_id: int) -> Optional[Account]:
        """Retrieve account by id."""
        try:
            with self._session_factory() as session:
                orm_account = session.get(AccountORM, account_id)
                return self._to_domain(orm_account) if orm_account else None
        except SQLAlchemyError as exc:
            raise StorageError("find account", exc, account_id=account_id) from exc

    def get_all(self) -> list[Account]:
        """List all accounts in table order."""
        try:
            with self._session_factory() as session:
                return self._to_domain_list(session.query(AccountORM).all())
        except SQLAlchemyError as exc:
            raise StorageError("read all accounts", exc) from exc

    def update(self, account: Account) -> bool:
        """Overwrite name and balance of the account with the same id."""
        balance = to_storable_money(account.balance)
        try:
            with self._session_factory() as session:
                updated = session.query(AccountORM).filter(
                    AccountORM.id == account.id
                ).update(
                    {AccountORM.name: account.name, AccountORM.balance: balance},
                    synchronize_session=False,
                )
                session.commit()
        except SQLAlchemyError as exc:
            logger.error(f"Update of account {account.id} failed: {exc}")
            raise StorageError("update account", exc, account_id=account.id) from exc
        logger.debug(f"Updated account {account.id}: {updated} row(s)")
        return updated == 1

    def delete(self, account_id: int) -> bool:
        """Delete an account (hard delete)."""
        try:
            with self._session_factory() as session:
                deleted = session.query(AccountORM).filter(
                    AccountORM.id == account_id
                ).delete(synchronize_session=False)
                session.commit()
        except SQLAlchemyError as exc:
            logger.error(f"Delete of account {account_id} failed: {exc}")
            raise StorageError("delete account", exc, account_id=account_id) from exc
        logger.debug(f"Deleted account {account_id}: {deleted} row(s)")
        return deleted == 1

    def find_by_partial_name(self, fragment: str) -> list[Account]:
        """List accounts whose name contains the fragment; % and _ match literally."""
        try:
            with self._session_factory() as session:
                orm_accounts = session.query(AccountORM).filter(
                    AccountORM.name.contains(fragment, autoescape=True)
                ).all()
                return self._to_domain_list(orm_accounts)
        except SQLAlchemyError as exc:
            raise StorageError(
                "find accounts by partial name", exc, fragment=fragment
            ) from exc

    def transfer_funds(
        self,
        source_id: int,
        destination_id: int,
        amount: Decimal,
    ) -> None:
        """
        Move amount from the source account to the destination account.

        Both balance updates run in one transaction. If either fails the
        transaction is rolled back and TransferError is raised; if the
        rollback fails too, RollbackError is raised instead.

        Neither id is checked for existence and amount is not checked for
        sign, so an unknown id commits as a zero-row update.
        An amount with sub-cent digits or outside NUMERIC(18, 2) raises
        ValidationError before any statement runs.
        """
        amount = to_storable_money(amount)
        # Typed like the column so the amount is stored the same way
        amount_param = literal(amount, AccountORM.__table__.c.balance.type)

        with self._session_factory() as session:
            try:
                debited = session.query(AccountORM).filter(
                    AccountORM.id == source_id
                ).update(
                    {AccountORM.balance: AccountORM.balance - amount_param},
                    synchronize_session=False,
                )
                credited = session.query(AccountORM).filter(
                    AccountORM.id == destination_id
                ).update(
                    {AccountORM.balance: AccountORM.balance + amount_param},
                    synchronize_session=False,
                )
                session.commit()
            except SQLAlchemyError as exc:
                logger.error(
                    f"Transfer of {amount} from {source_id} to {destination_id} failed: {exc}"
                )
                try:
                    session.rollback()
                except SQLAlchemyError as rollback_exc:
                    logger.critical(
                        f"Rollback of transfer {source_id} -> {destination_id} failed, "
                        f"balances must be reconciled: {rollback_exc}"
                    )
                    raise RollbackError(
                        amount, source_id, destination_id, exc, rollback_exc
                    ) from rollback_exc
                raise TransferError(amount, source_id, destination_id, exc) from exc

        if debited != 1 or credited != 1:
            logger.warning(
                f"Transfer {source_id} -> {destination_id} matched "
                f"{debited}/{credited} row(s)"
            )
        logger.info(f"Moved {amount} from account {source_id} to account {destination_id}")

    @staticmethod
    def _to_domain(orm: AccountORM) -> Account:
        """Convert ORM model to domain model."""
        return Account(
            id=orm.id,
            name=orm.name,
            balance=orm.balance,
        )

    @classmethod
    def _to_domain_list(cls, orms: Iterable[AccountORM]) -> list[Account]:
        """Convert ORM rows to a materialized list of domain models."""
        return [cls._to_domain(orm) for orm in orms]
