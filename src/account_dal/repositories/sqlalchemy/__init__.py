"""SQLAlchemy repository implementations."""

from account_dal.repositories.sqlalchemy.database import (
    build_engine,
    init_db,
    drop_db,
    Base,
)
from account_dal.repositories.sqlalchemy.account_store import SqlAlchemyAccountStore

__all__ = [
    "build_engine",
    "init_db",
    "drop_db",
    "Base",
    "SqlAlchemyAccountStore",
]
