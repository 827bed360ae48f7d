"""
Domain Entity: Transaction
Represents a single normalized bank transaction
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Transaction:
    """Bank transaction entity

    Positive amounts are inflows (credits), negative amounts are outflows (debits).
    """

    amount: Decimal
    category: Optional[str] = None
    description: Optional[str] = None
    date: Optional[str] = None

    @property
    def is_credit(self) -> bool:
        return self.amount > 0

    @property
    def is_debit(self) -> bool:
        return self.amount < 0

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Transaction":
        """
        Build a transaction from a caller-supplied record without normalizing it

        Args:
            record: Mapping with a numeric ``amount`` and optional
                ``category``, ``description`` and ``date`` strings

        Returns:
            Transaction carrying the record's fields as-is

        Raises:
            TypeError: If the record is not transaction-shaped
            ValueError: If the amount is not a finite number
        """
        if not isinstance(record, Mapping):
            raise TypeError(f"expected an object, got {type(record).__name__}")
        if "amount" not in record:
            raise TypeError("missing required field 'amount'")

        amount = to_decimal(record["amount"])

        fields = {}
        for name in ("category", "description", "date"):
            value = record.get(name)
            if value is not None and not isinstance(value, str):
                raise TypeError(f"field '{name}' must be a string")
            fields[name] = value

        return cls(amount=amount, **fields)

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "amount": float(self.amount),
            "category": self.category,
            "description": self.description,
            "date": self.date,
        }


def to_decimal(value: Any) -> Decimal:
    """Convert a JSON-style number to Decimal, going through str() for floats"""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeError(f"field 'amount' must be a number, got {type(value).__name__}")

    amount = value if isinstance(value, Decimal) else Decimal(str(value))
    if not amount.is_finite():
        raise ValueError(f"field 'amount' must be finite, got {value!r}")
    return amount
