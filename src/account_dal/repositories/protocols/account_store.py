"""Account store protocol."""

from decimal import Decimal
from typing import Protocol, Optional

from account_dal.domain.models import Account


class AccountStore(Protocol):
    """CRUD and transfer access to the Account table."""

    def insert(self, account: Account) -> int:
        """Persist a new account and return its generated id."""
        ...

    def get(self, account_id: int) -> Optional[Account]:
        """Retrieve account by id, or None if it does not exist."""
        ...

    def get_all(self) -> list[Account]:
        """List all accounts."""
        ...

    def update(self, account: Account) -> bool:
        """Replace name and balance of an existing account. Returns whether it was found."""
        ...

    def delete(self, account_id: int) -> bool:
        """Delete an account. Returns whether it was found."""
        ...

    def find_by_partial_name(self, fragment: str) -> list[Account]:
        """List accounts whose name contains the fragment."""
        ...

    def transfer_funds(
        self,
        source_id: int,
        destination_id: int,
        amount: Decimal,
    ) -> None:
        """Move an amount from one account to another atomically."""
        ...
