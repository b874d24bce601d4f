"""Repository layer - data access abstractions and implementations."""

from account_dal.repositories.protocols import AccountStore

__all__ = ["AccountStore"]
