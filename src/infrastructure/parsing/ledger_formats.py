"""
Multi-column ledger statement layouts

A ledger statement carries a bank header, a column-header line
(Date / Description / Debit / Credit / Balance or the bank's wording) and
then one row per transaction. When the row lines up with a column header
whose labels stand apart, money cells are assigned by where their text sits
under the labels. Otherwise cells are read from the right: the last one is
the running balance, the ones before it debit, then credit.
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Pattern

from domain.entities.transaction import Transaction
from infrastructure.parsing.amounts import is_amount, parse_amount
from infrastructure.parsing.categorizer import categorize
from infrastructure.parsing.dates import normalize_date

logger = logging.getLogger(__name__)


MONEY_COLUMNS = ("debit", "credit", "balance")

# Placeholder printed in an empty money cell
EMPTY_CELL = "-"

# Money labels closer than this share no usable column boundary
MIN_COLUMN_GAP = 2

BOILERPLATE_RE = re.compile(r"^(?:-{2,}|={2,})|opening balance|closing balance", re.I)

DATE_ABBR = r"\d{2}-[A-Za-z]{3}-\d{2}(?:\d{2})?"


def is_money_cell(token: str) -> bool:
    return token == EMPTY_CELL or is_amount(token)


def columns_separated(positions: dict[str, tuple[int, int]]) -> bool:
    """True if every pair of neighbouring money labels is at least MIN_COLUMN_GAP apart"""
    spans = sorted(positions.values())
    return all(nxt[0] - prev[1] >= MIN_COLUMN_GAP for prev, nxt in zip(spans, spans[1:]))


@dataclass(frozen=True)
class LedgerRow:
    """A row split into its date, description and money cells"""

    date: str
    description: str
    cells: dict[str, Decimal]

    @property
    def amount(self) -> Decimal:
        return self.cells.get("credit", Decimal("0")) - self.cells.get("debit", Decimal("0"))


@dataclass(frozen=True)
class LedgerLayout:
    """Column layout of one bank's ledger statement"""

    code: str
    name: str
    header: Pattern
    column_header: Pattern  # named groups: debit, credit, balance
    row_prefix: Pattern     # named group: date

    def column_positions(self, header_line: str) -> Optional[dict[str, tuple[int, int]]]:
        """Character spans of the money-column labels, or None if not a column header"""
        m = self.column_header.search(header_line)
        if not m:
            return None
        return {column: m.span(column) for column in MONEY_COLUMNS}

    def parse_row(
        self,
        line: str,
        positions: dict[str, tuple[int, int]]
    ) -> Optional[LedgerRow]:
        """
        Split a row into cells.

        Args:
            line: Raw row text, leading whitespace preserved
            positions: Money-column spans from the column header

        Returns:
            LedgerRow, or None if the line is not a transaction row
        """
        prefix = self.row_prefix.match(line)
        if not prefix:
            return None

        tokens = list(re.finditer(r"\S+", line[prefix.end():]))
        offset = prefix.end()

        # Trailing run of money cells, at most one per money column
        trailing = []
        for token in reversed(tokens):
            if len(trailing) == len(MONEY_COLUMNS) or not is_money_cell(token.group()):
                break
            trailing.insert(0, (token.start() + offset, token.end() + offset, token.group()))
        if not trailing:
            return None

        cells = None
        money = trailing
        if columns_separated(positions):
            money_start = min(start for start, _ in positions.values())
            positioned = [t for t in trailing if t[1] > money_start]
            if positioned:
                cells = self._assign_by_position(positioned, positions)
                money = positioned

        if cells is None:
            logger.debug(f"[ledger] row not aligned with column header: {line.strip()!r}")
            cells = self._assign_from_right(trailing)
            money = trailing

        description = line[prefix.end():money[0][0]].strip()
        if not description:
            return None

        return LedgerRow(date=prefix.group("date"), description=description, cells=cells)

    @staticmethod
    def _assign_by_position(
        tokens: list[tuple[int, int, str]],
        positions: dict[str, tuple[int, int]]
    ) -> Optional[dict[str, Decimal]]:
        """
        Match each token to the money label nearest its center.

        Returns None when two tokens claim one column or the last token does
        not sit under the balance label.
        """
        cells: dict[str, Decimal] = {}
        claimed: list[str] = []
        for start, end, text in tokens:
            center = (start + end) / 2
            column = min(
                positions,
                key=lambda c: abs(center - (positions[c][0] + positions[c][1]) / 2)
            )
            if column in claimed:
                return None
            claimed.append(column)
            if text != EMPTY_CELL:
                cells[column] = parse_amount(text)

        if claimed[-1] != "balance":
            return None
        return cells

    @staticmethod
    def _assign_from_right(tokens: list[tuple[int, int, str]]) -> dict[str, Decimal]:
        """The last cell is the balance; cells before it are debit, then credit"""
        texts = [text for _, _, text in tokens]
        columns = MONEY_COLUMNS[:len(texts) - 1] + ("balance",)
        return {
            column: parse_amount(text)
            for column, text in zip(columns, texts)
            if text != EMPTY_CELL
        }

    def to_transaction(self, row: LedgerRow) -> Transaction:
        return Transaction(
            date=normalize_date(row.date),
            description=row.description,
            category=categorize(row.description),
            amount=row.amount
        )


LEDGER_LAYOUTS: list[LedgerLayout] = [
    LedgerLayout(
        code="GTB",
        name="Guaranty Trust Bank",
        header=re.compile(r"Guaranty Trust Bank PLC", re.I),
        column_header=re.compile(
            r"Date\s+Description\s+(?P<debit>Debit\(N\))\s+(?P<credit>Credit\(N\))"
            r"\s+(?P<balance>Balance\(N\))",
            re.I
        ),
        row_prefix=re.compile(rf"^\s*(?P<date>{DATE_ABBR})\s+"),
    ),
    LedgerLayout(
        code="ZENITH",
        name="Zenith Bank",
        header=re.compile(r"Zenith Bank PLC", re.I),
        column_header=re.compile(
            r"Date\s+Value Date\s+Description\s+(?P<debit>Withdrawals)\s+"
            r"(?P<credit>Deposits)\s+(?P<balance>Balance)",
            re.I
        ),
        row_prefix=re.compile(rf"^\s*(?P<date>{DATE_ABBR})\s+{DATE_ABBR}\s+"),
    ),
    LedgerLayout(
        code="ACCESS",
        name="Access Bank",
        header=re.compile(r"Access Bank PLC", re.I),
        column_header=re.compile(
            r"Date\s+Narration\s+(?P<debit>Debit)\s+(?P<credit>Credit)\s+(?P<balance>Balance)",
            re.I
        ),
        row_prefix=re.compile(rf"^\s*(?P<date>{DATE_ABBR})\s+"),
    ),
    LedgerLayout(
        code="UBA",
        name="United Bank for Africa",
        header=re.compile(r"United Bank for Africa PLC", re.I),
        column_header=re.compile(
            r"Date\s+Description\s+(?P<debit>Dr\s*\(₦\))\s+(?P<credit>Cr\s*\(₦\))"
            r"\s+(?P<balance>Balance\s*\(₦\))",
            re.I
        ),
        row_prefix=re.compile(rf"^\s*(?P<date>{DATE_ABBR})\s+"),
    ),
]


def get_ledger_layout(bank_code: str) -> Optional[LedgerLayout]:
    code = bank_code.upper()
    for layout in LEDGER_LAYOUTS:
        if layout.code == code:
            return layout
    return None


def is_boilerplate(line: str) -> bool:
    """Separator rules and opening/closing balance lines"""
    return bool(BOILERPLATE_RE.search(line.strip()))
