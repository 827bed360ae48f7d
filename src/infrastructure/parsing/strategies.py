"""
Parsing strategies

Each strategy takes the raw input and returns a ParseOutcome. None of them
raise to say "not my format"; the engine walks them in STRATEGIES order.
"""

import json
import logging
import re
from decimal import Decimal
from typing import Any, Callable, Mapping, NamedTuple, Sequence

from config import settings
from domain.entities.transaction import Transaction
from infrastructure.parsing.amounts import AMOUNT_PATTERN, parse_amount
from infrastructure.parsing.bank_detector import BankDetector, UNKNOWN_BANK
from infrastructure.parsing.bank_formats import match_line
from infrastructure.parsing.ledger_formats import get_ledger_layout, is_boilerplate
from infrastructure.parsing.outcome import ParseOutcome

logger = logging.getLogger(__name__)


SIMPLE_LINE_RE = re.compile(
    rf"^(?P<date>\d{{4}}-\d{{2}}-\d{{2}}):\s*(?P<category>[^-]+?)\s*-\s*"
    rf"(?P<description>[^,]+?),\s*{re.escape(settings.CURRENCY_SYMBOL)}\s*"
    rf"(?P<amount>{AMOUNT_PATTERN})$"
)


def _text_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def _records_to_transactions(records: Sequence[Any]) -> ParseOutcome:
    transactions = []
    for index, record in enumerate(records):
        if isinstance(record, Transaction):
            transactions.append(record)
            continue
        try:
            transactions.append(Transaction.from_record(record))
        except (TypeError, ValueError) as e:
            return ParseOutcome.malformed(f"Invalid transaction at index {index}: {e}")
    return ParseOutcome.matched(transactions)


def parse_structured(raw: Any) -> ParseOutcome:
    """Already-structured records pass through as-is"""
    if isinstance(raw, (str, bytes, bytearray, Mapping)) or not isinstance(raw, Sequence):
        return ParseOutcome.not_matched()
    return _records_to_transactions(raw)


def parse_json_array(raw: Any) -> ParseOutcome:
    """A JSON-encoded array of transaction records"""
    if not isinstance(raw, str):
        return ParseOutcome.not_matched()

    try:
        parsed = json.loads(raw, parse_float=Decimal)
    except ValueError:
        return ParseOutcome.not_matched()

    if not isinstance(parsed, list):
        return ParseOutcome.not_matched("JSON value is not an array")
    return _records_to_transactions(parsed)


def parse_simple_delimited(raw: Any) -> ParseOutcome:
    """
    Lines of the form ``YYYY-MM-DD: Category - Description, ₦Amount``.

    All non-empty lines must match; a partial match is malformed.
    """
    if not isinstance(raw, str):
        return ParseOutcome.not_matched()

    lines = _text_lines(raw)
    matches = [SIMPLE_LINE_RE.match(line) for line in lines]
    if not any(matches):
        return ParseOutcome.not_matched()

    transactions = []
    for line, m in zip(lines, matches):
        if m is None:
            return ParseOutcome.malformed(f"Invalid line format: {line}")

        amount = parse_amount(m.group("amount"))
        if amount == 0:
            continue
        transactions.append(Transaction(
            date=m.group("date"),
            category=m.group("category").strip(),
            description=m.group("description").strip(),
            amount=amount
        ))

    return ParseOutcome.matched(transactions)


def parse_bank_lines(raw: Any) -> ParseOutcome:
    """One transaction per line in any registered bank grammar; other lines are skipped"""
    if not isinstance(raw, str):
        return ParseOutcome.not_matched()

    transactions = []
    matched_lines = 0
    for line in _text_lines(raw):
        found = match_line(line)
        if found is None:
            continue

        line_format, captured = found
        try:
            transaction = line_format.to_transaction(captured)
        except ValueError as e:
            logger.debug(f"[bank_lines] {line_format.code} rejected {line!r}: {e}")
            continue

        matched_lines += 1
        if transaction.amount != 0:
            transactions.append(transaction)

    if matched_lines == 0:
        return ParseOutcome.not_matched()
    return ParseOutcome.matched(transactions)


def parse_ledger(raw: Any) -> ParseOutcome:
    """Fixed-column ledger statement of a recognized bank"""
    if not isinstance(raw, str):
        return ParseOutcome.not_matched()

    lines = [line.expandtabs() for line in raw.splitlines()]
    bank = BankDetector.detect_bank(lines)
    if bank == UNKNOWN_BANK:
        return ParseOutcome.not_matched()
    layout = get_ledger_layout(bank)

    positions = None
    transactions = []
    unrecognized = 0
    for line in lines:
        if not line.strip():
            continue

        header_positions = layout.column_positions(line)
        if header_positions is not None:
            positions = header_positions
            continue
        if positions is None or is_boilerplate(line):
            continue

        try:
            row = layout.parse_row(line, positions)
            transaction = layout.to_transaction(row) if row else None
        except ValueError as e:
            logger.debug(f"[ledger] {bank} rejected {line.strip()!r}: {e}")
            transaction = None

        if transaction is None:
            unrecognized += 1
        elif transaction.amount != 0:
            transactions.append(transaction)

    if positions is None:
        return ParseOutcome.not_matched(f"{bank} statement without a column header")
    if not transactions and unrecognized:
        return ParseOutcome.not_matched(f"{bank} statement rows not recognized")
    return ParseOutcome.matched(transactions)


class Strategy(NamedTuple):
    name: str
    parse: Callable[[Any], ParseOutcome]


STRATEGIES: list[Strategy] = [
    Strategy("structured", parse_structured),
    Strategy("json_array", parse_json_array),
    Strategy("simple_delimited", parse_simple_delimited),
    Strategy("bank_lines", parse_bank_lines),
    Strategy("ledger", parse_ledger),
]
