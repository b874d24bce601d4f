"""Domain layer - business entities."""

from account_dal.domain.models import Account

__all__ = ["Account"]
