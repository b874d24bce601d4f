"""Account domain model."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from account_dal.core.exceptions import ValidationError

# Balances are stored as NUMERIC(18, 2)
MONEY_SCALE = 2
MONEY_PRECISION = 18
CENT = Decimal(1).scaleb(-MONEY_SCALE)
MONEY_LIMIT = Decimal(10) ** (MONEY_PRECISION - MONEY_SCALE)


def to_money(value) -> Decimal:
    """
    Convert a value to an exact Decimal with at most two decimal places.

    Values with sub-cent digits are rejected rather than rounded.
    """
    if not isinstance(value, Decimal):
        try:
            # str() keeps floats like 0.1 from dragging in binary noise
            value = Decimal(str(value))
        except InvalidOperation as exc:
            raise ValidationError(f"Not a monetary amount: {value!r}") from exc
    if not value.is_finite():
        raise ValidationError(f"Not a monetary amount: {value}")
    if value != value.quantize(CENT):
        raise ValidationError(f"Amount {value} has more than {MONEY_SCALE} decimal places")
    return value


def to_storable_money(value) -> Decimal:
    """Like to_money, but also enforce the NUMERIC(18, 2) range."""
    value = to_money(value)
    if abs(value) >= MONEY_LIMIT:
        raise ValidationError(f"Amount {value} exceeds {MONEY_PRECISION} digits")
    return value


@dataclass
class Account:
    """
    A named monetary balance.

    The id stays 0 until the account is inserted; the store assigns it.
    """

    name: str
    balance: Decimal = Decimal("0")
    id: int = 0

    def __post_init__(self) -> None:
        self.balance = to_money(self.balance)

    def __str__(self) -> str:
        return f"Account {{ Id={self.id}, Name='{self.name}', Balance={self.balance} }}"
