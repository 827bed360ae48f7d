"""
Pytest configuration and shared fixtures.
"""
import sys
from decimal import Decimal
from pathlib import Path
from typing import List

import pytest

# Add src to path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from domain.entities.transaction import Transaction  # noqa: E402
from tests.helpers import ledger_header, ledger_line  # noqa: E402


@pytest.fixture
def simple_statement() -> str:
    """Statement in the simple delimited format."""
    return (
        "2025-10-01: Salary - Monthly salary, ₦50000\n"
        "2025-10-05: Groceries - Shoprite, ₦5000"
    )


@pytest.fixture
def gtb_lines_statement() -> str:
    """Single-line CR/DR statement."""
    return (
        "01-Nov-25 SALARY PAYMENT 500,000.00 CR\n"
        "05-Nov-25 POS SHOPRITE LEKKI 15,000.00 DR"
    )


@pytest.fixture
def gtb_ledger_statement() -> str:
    """Multi-column GTB statement with boilerplate and a zero row."""
    return "\n".join([
        "Guaranty Trust Bank PLC",
        "Customer Statement - November 2025",
        ledger_header(),
        "-" * 78,
        ledger_line("", "Opening Balance", balance="100,000.00"),
        ledger_line("01-Nov-25", "SALARY PAYMENT", credit="500,000.00", balance="600,000.00"),
        ledger_line("05-Nov-25", "POS SHOPRITE LEKKI", debit="15,000.00", balance="585,000.00"),
        ledger_line("07-Nov-25", "CHARGE REVERSAL", debit="0.00", balance="585,000.00"),
        ledger_line("09-Nov-25", "DSTV SUBSCRIPTION", debit="12,500.00", balance="572,500.00"),
        ledger_line("", "Closing Balance", balance="572,500.00"),
    ])


@pytest.fixture
def sample_transactions() -> List[Transaction]:
    """Monthly transactions with caller-supplied categories."""
    rows = [
        (50000, "Salary", "Monthly salary", "2025-10-01"),
        (-5000, "Groceries", "Shoprite", "2025-10-05"),
        (-15000, "Rent", "Apartment rent", "2025-10-01"),
        (-3000, "Transportation", "Uber rides", "2025-10-10"),
        (-2000, "Groceries", "Market shopping", "2025-10-15"),
        (-8000, "Entertainment", "Cinema & dinner", "2025-10-20"),
        (5000, "Freelance", "Side project", "2025-10-25"),
        (-4000, "Utilities", "Electricity & water", "2025-10-28"),
    ]
    return [
        Transaction(amount=Decimal(amount), category=category, description=description, date=date)
        for amount, category, description, date in rows
    ]
