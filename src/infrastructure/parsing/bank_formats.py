"""
Single-line bank statement grammars

Each bank prints one transaction per line as DATE DESCRIPTION AMOUNT MARKER,
with its own date notation, optional currency token and credit/debit
vocabulary. Every grammar is a pattern plus a validator; the registry order
is the dispatch order.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Pattern

from config import settings
from domain.entities.transaction import Transaction
from infrastructure.parsing.amounts import AMOUNT_PATTERN, parse_amount
from infrastructure.parsing.categorizer import categorize
from infrastructure.parsing.dates import normalize_date


CURRENCY = rf"(?:{re.escape(settings.CURRENCY_CODE)}|{re.escape(settings.CURRENCY_SYMBOL)})"
ENDS_WITH_CURRENCY_RE = re.compile(rf"(?:^|\s){CURRENCY}$", re.I)

DATE_ABBR_YY = r"\d{2}-[A-Za-z]{3}-\d{2}"
DATE_ABBR_YYYY = r"\d{2}-[A-Za-z]{3}-\d{4}"
DATE_SLASH = r"\d{2}/\d{2}/\d{4}"


@dataclass(frozen=True)
class LineMatch:
    """Fields captured from one statement line"""

    date: str
    description: str
    amount: str
    marker: str


def _no_trailing_currency(match: LineMatch) -> bool:
    # Leaves "... NGN 1,000.00 CR" to the grammars that expect a currency token
    return not ENDS_WITH_CURRENCY_RE.search(match.description)


def _always(match: LineMatch) -> bool:
    return True


@dataclass(frozen=True)
class BankLineFormat:
    """Grammar for one bank's single-line transaction layout"""

    code: str
    name: str
    pattern: Pattern
    credit_markers: frozenset[str]
    debit_markers: frozenset[str]
    validator: Callable[[LineMatch], bool] = _always

    def match(self, line: str) -> Optional[LineMatch]:
        """Return the captured fields if the line fits this grammar"""
        m = self.pattern.match(line)
        if not m:
            return None

        captured = LineMatch(
            date=m.group("date"),
            description=m.group("description").strip(),
            amount=m.group("amount"),
            marker=m.group("marker").upper()
        )
        if not captured.description or not self.validator(captured):
            return None
        return captured

    def to_transaction(self, captured: LineMatch) -> Transaction:
        """
        Build a transaction from a matched line.

        Raises:
            ValueError: If the date or amount cannot be normalized
        """
        amount = parse_amount(captured.amount)
        if captured.marker in self.debit_markers:
            amount = -amount

        return Transaction(
            date=normalize_date(captured.date),
            description=captured.description,
            category=categorize(captured.description),
            amount=amount
        )


def _line_pattern(date: str, currency: bool, markers: str) -> Pattern:
    currency_part = rf"{CURRENCY}\s*" if currency else ""
    return re.compile(
        rf"^(?P<date>{date})\s+(?P<description>.*?)\s+{currency_part}"
        rf"(?P<amount>{AMOUNT_PATTERN})\s*(?P<marker>{markers})$",
        re.I
    )


CR_DR = frozenset({"CR"}), frozenset({"DR"})
C_D = frozenset({"C"}), frozenset({"D"})


BANK_LINE_FORMATS: list[BankLineFormat] = [
    BankLineFormat(
        code="ACCESS",
        name="Access Bank",
        pattern=_line_pattern(DATE_ABBR_YYYY, currency=True, markers="CR|DR"),
        credit_markers=CR_DR[0],
        debit_markers=CR_DR[1],
    ),
    BankLineFormat(
        code="UBA",
        name="United Bank for Africa",
        pattern=_line_pattern(DATE_SLASH, currency=True, markers="C|D"),
        credit_markers=C_D[0],
        debit_markers=C_D[1],
    ),
    BankLineFormat(
        code="ZENITH",
        name="Zenith Bank",
        pattern=_line_pattern(DATE_ABBR_YYYY, currency=False, markers="CR|DR"),
        credit_markers=CR_DR[0],
        debit_markers=CR_DR[1],
        validator=_no_trailing_currency,
    ),
    BankLineFormat(
        code="FIRSTBANK",
        name="First Bank",
        pattern=_line_pattern(DATE_SLASH, currency=False, markers="CR|DR"),
        credit_markers=CR_DR[0],
        debit_markers=CR_DR[1],
        validator=_no_trailing_currency,
    ),
    # GTB lines carry a two-digit year and may or may not print the currency
    BankLineFormat(
        code="GTB",
        name="Guaranty Trust Bank",
        pattern=re.compile(
            rf"^(?P<date>{DATE_ABBR_YY})\s+(?P<description>.*?)\s+(?:{CURRENCY}\s*)?"
            rf"(?P<amount>{AMOUNT_PATTERN})\s+(?P<marker>CR|DR)$",
            re.I
        ),
        credit_markers=CR_DR[0],
        debit_markers=CR_DR[1],
    ),
]


def get_line_format(bank_code: str) -> BankLineFormat:
    """
    Get the single-line grammar for a bank.

    Raises:
        ValueError: If bank code is not supported
    """
    code = bank_code.upper()
    for line_format in BANK_LINE_FORMATS:
        if line_format.code == code:
            return line_format

    supported = ", ".join(f.code for f in BANK_LINE_FORMATS)
    raise ValueError(f"Unsupported bank: {bank_code}. Supported banks: {supported}")


def match_line(line: str) -> Optional[tuple[BankLineFormat, LineMatch]]:
    """Find the first grammar that accepts the line"""
    for line_format in BANK_LINE_FORMATS:
        captured = line_format.match(line)
        if captured is not None:
            return line_format, captured
    return None
