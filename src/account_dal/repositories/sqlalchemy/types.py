"""Column types."""

from decimal import Decimal

from sqlalchemy import BigInteger, Numeric
from sqlalchemy.types import TypeDecorator

from account_dal.domain.models.account import MONEY_PRECISION, MONEY_SCALE


class MinorUnits(TypeDecorator):
    """
    Decimal money stored as an integer count of minor units (cents).

    SQLite has no exact decimal type; integers keep both storage and
    balance arithmetic in SQL exact.
    """

    impl = BigInteger
    cache_ok = True

    def __init__(self, scale: int = MONEY_SCALE):
        super().__init__()
        self.scale = scale

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if not isinstance(value, Decimal):
            value = Decimal(str(value))
        minor = value.scaleb(self.scale)
        if minor != minor.to_integral_value():
            raise ValueError(f"{value} has more than {self.scale} decimal places")
        return int(minor)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value).scaleb(-self.scale)


def money_type() -> Numeric:
    """NUMERIC(18, 2), with an exact integer representation on SQLite."""
    return Numeric(precision=MONEY_PRECISION, scale=MONEY_SCALE).with_variant(
        MinorUnits(), "sqlite"
    )
