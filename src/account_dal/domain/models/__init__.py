"""Domain models package."""

from account_dal.domain.models.account import Account, to_money, to_storable_money

__all__ = ["Account", "to_money", "to_storable_money"]
