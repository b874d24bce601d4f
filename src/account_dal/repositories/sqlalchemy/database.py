"""Database engine construction and schema management."""

from typing import Union

from sqlalchemy import create_engine, Engine
from sqlalchemy.engine import URL, make_url
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

Base = declarative_base()


def build_engine(database_url: Union[str, URL], echo: bool = False) -> Engine:
    """
    Create an engine that opens a fresh DBAPI connection per checkout.

    NullPool closes the connection when the session using it is closed, so
    no connection outlives the operation that acquired it.
    """
    url = make_url(database_url)
    connect_args = {}
    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False  # SQLite-specific
    return create_engine(
        url,
        connect_args=connect_args,
        poolclass=NullPool,
        echo=echo,
    )


def init_db(engine: Engine) -> None:
    """Create the Account table if it does not exist."""
    from account_dal.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_db(engine: Engine) -> None:
    """Drop the Account table."""
    from account_dal.repositories.sqlalchemy import orm_models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
