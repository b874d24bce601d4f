"""SQLAlchemy ORM model definitions."""

from sqlalchemy import Column, Integer, String

from account_dal.repositories.sqlalchemy.database import Base
from account_dal.repositories.sqlalchemy.types import money_type


class AccountORM(Base):
    """SQLAlchemy model for Account."""

    __tablename__ = "Account"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    balance = Column(money_type(), nullable=False)
