"""
Tests for date, amount and category helpers
"""
from datetime import datetime
from decimal import Decimal

import pytest

from infrastructure.parsing.amounts import is_amount, parse_amount
from infrastructure.parsing.categorizer import (
    CATEGORY_KEYWORDS,
    DEFAULT_CATEGORY,
    KeywordCategorizer,
    categorize,
)
from infrastructure.parsing.dates import StatementDateParser, normalize_date


class TestStatementDateParser:
    """Test statement date normalization"""

    @pytest.mark.parametrize("raw, expected", [
        ("01-Nov-25", "2025-11-01"),
        ("01-NOV-2025", "2025-11-01"),
        ("1-nov-25", "2025-11-01"),
        ("02/11/2024", "2024-11-02"),
        ("2025-10-01", "2025-10-01"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_date(raw) == expected

    def test_normalize_is_idempotent(self):
        once = normalize_date("15-Jan-24")
        assert normalize_date(once) == once

    def test_two_digit_year(self):
        assert StatementDateParser.normalize_year("25") == 2025
        assert StatementDateParser.normalize_year("1999") == 1999

    @pytest.mark.parametrize("raw", ["01-Foo-25", "31-Feb-25", "32/01/2025", "tomorrow", ""])
    def test_invalid_dates(self, raw):
        with pytest.raises(ValueError):
            normalize_date(raw)

    def test_parse_flexible(self):
        """Falls back to free-form parsing for caller-supplied dates"""
        assert StatementDateParser.parse_flexible("01/10/2025") == datetime(2025, 10, 1)
        assert StatementDateParser.parse_flexible("Oct 5, 2025") == datetime(2025, 10, 5)

    @pytest.mark.parametrize("raw", [None, "", "not a date"])
    def test_parse_flexible_unreadable(self, raw):
        assert StatementDateParser.parse_flexible(raw) is None


class TestAmounts:
    """Test amount parsing"""

    @pytest.mark.parametrize("raw, expected", [
        ("1,234,567.89", Decimal("1234567.89")),
        ("500", Decimal("500")),
        ("15,000.00", Decimal("15000.00")),
        ("0.5", Decimal("0.5")),
    ])
    def test_parse_amount(self, raw, expected):
        assert parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["abc", "", "NaN", "Infinity"])
    def test_parse_amount_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_amount(raw)

    @pytest.mark.parametrize("token, expected", [
        ("15,000.00", True),
        ("1234.5", True),
        ("1,23", False),
        ("12.345", False),
        ("CR", False),
    ])
    def test_is_amount(self, token, expected):
        assert is_amount(token) is expected


class TestCategorizer:
    """Test keyword categorization"""

    @pytest.mark.parametrize("description, expected", [
        ("SALARY PAYMENT", "Salary"),
        ("ATM WITHDRAWAL", "ATM"),
        ("TRANSFER FROM JOHN", "Transfer"),
        ("DSTV SUBSCRIPTION", "Bills"),
        ("Shoprite Lekki", "Food"),
        ("JUMIA ORDER", "Shopping"),
        ("Bolt ride", "Transport"),
        ("MTN data bundle", "Airtime"),
        ("NETFLIX", "Entertainment"),
        ("CITY PHARMACY", "Health"),
        ("SMS ALERT CHARGE", "Bank Charges"),
    ])
    def test_categorize(self, description, expected):
        assert categorize(description) == expected

    def test_first_category_in_table_order_wins(self):
        """'pos' is listed under ATM, before Transfer and Food keywords"""
        assert categorize("POS SHOPRITE LEKKI") == "ATM"
        assert categorize("POS TRANSFER TO JOHN") == "ATM"

    def test_keywords_match_inside_words(self):
        assert categorize("CASH DEPOSIT") == "ATM"

    @pytest.mark.parametrize("description", [None, "", "random text"])
    def test_default_category(self, description):
        assert categorize(description) == DEFAULT_CATEGORY

    def test_custom_table(self):
        categorizer = KeywordCategorizer([("Rent", ["LANDLORD"])], default="Misc")
        assert categorizer.categorize("paid landlord") == "Rent"
        assert categorizer.categorize("anything else") == "Misc"
        assert categorizer.categories == ["Rent"]

    def test_default_table_order(self):
        categories = [category for category, _ in CATEGORY_KEYWORDS]
        assert categories[:3] == ["Salary", "ATM", "Transfer"]
        assert categories[-1] == "Bank Charges"
