"""
Statement parsing: normalization helpers, bank grammars and the strategy engine
"""
from .amounts import parse_amount
from .dates import StatementDateParser, normalize_date
from .categorizer import KeywordCategorizer, categorize, CATEGORY_KEYWORDS
from .bank_formats import BANK_LINE_FORMATS, BankLineFormat, get_line_format
from .ledger_formats import LEDGER_LAYOUTS, LedgerLayout, get_ledger_layout
from .bank_detector import BankDetector
from .outcome import ParseOutcome
from .strategies import STRATEGIES, Strategy
from .statement_parser import RegexStatementParser


def list_supported_banks() -> dict:
    """
    Get supported bank codes per statement style.

    Returns:
        Dictionary with "single_line" and "ledger" code lists
    """
    return {
        "single_line": [f.code for f in BANK_LINE_FORMATS],
        "ledger": [layout.code for layout in LEDGER_LAYOUTS],
    }


__all__ = [
    "parse_amount",
    "StatementDateParser",
    "normalize_date",
    "KeywordCategorizer",
    "categorize",
    "CATEGORY_KEYWORDS",
    "BANK_LINE_FORMATS",
    "BankLineFormat",
    "get_line_format",
    "LEDGER_LAYOUTS",
    "LedgerLayout",
    "get_ledger_layout",
    "BankDetector",
    "ParseOutcome",
    "STRATEGIES",
    "Strategy",
    "RegexStatementParser",
    "list_supported_banks",
]
