"""
Currency amount parsing
"""

import re
from decimal import Decimal, InvalidOperation


# Grouped ("1,234,567.89") or plain ("1234567.89") amounts, up to two decimals
AMOUNT_PATTERN = r"(?:\d{1,3}(?:,\d{3})+|\d+)(?:\.\d{1,2})?"
AMOUNT_RE = re.compile(rf"^{AMOUNT_PATTERN}$")


def is_amount(token: str) -> bool:
    return bool(AMOUNT_RE.match(token))


def parse_amount(amount_str: str) -> Decimal:
    """
    Convert an amount string to Decimal.

    Args:
        amount_str: Amount as printed on a statement, thousands separators allowed

    Returns:
        Amount as Decimal

    Raises:
        ValueError: If the string is not a plain decimal amount
    """
    cleaned = amount_str.strip().replace(",", "")

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {amount_str!r}") from None

    if not amount.is_finite():
        raise ValueError(f"Invalid amount: {amount_str!r}")
    return amount
