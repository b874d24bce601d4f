"""Repository protocols (interfaces)."""

from account_dal.repositories.protocols.account_store import AccountStore

__all__ = ["AccountStore"]
