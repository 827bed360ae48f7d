"""
Unit tests for AnalyzeStatementUseCase.

Tests the use case with mocked dependencies to verify:
1. Parser output is handed to the analyzer unchanged
2. Parse errors propagate to the caller
3. The trend variant fills in spending_trend
"""
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from application.use_cases.analyze_statement import AnalyzeStatementUseCase
from domain.entities.analysis_result import AnalysisResult
from domain.entities.transaction import Transaction
from domain.enums import SpendingTrend
from domain.exceptions import StatementParseError
from infrastructure.analysis.financial_analyzer import StandardFinancialAnalyzer
from infrastructure.parsing.statement_parser import RegexStatementParser


class TestAnalyzeStatementUseCase:
    """Test AnalyzeStatementUseCase with mocked ports."""

    @pytest.fixture
    def transactions(self):
        return [Transaction(amount=Decimal("100"), category="Salary")]

    @pytest.fixture
    def mock_parser(self, transactions):
        """Mock statement parser."""
        parser = MagicMock()
        parser.parse.return_value = transactions
        return parser

    @pytest.fixture
    def mock_analyzer(self):
        """Mock financial analyzer."""
        analyzer = MagicMock()
        analyzer.analyze.return_value = AnalysisResult(
            total_income=Decimal("100"),
            total_expenses=Decimal("0"),
            net_balance=Decimal("100"),
            top_categories=[],
            summary="Financial Summary:"
        )
        analyzer.spending_trend.return_value = SpendingTrend.STABLE
        return analyzer

    @pytest.fixture
    def use_case(self, mock_parser, mock_analyzer):
        return AnalyzeStatementUseCase(
            statement_parser=mock_parser,
            financial_analyzer=mock_analyzer
        )

    def test_execute(self, use_case, mock_parser, mock_analyzer, transactions):
        """Parsed transactions go straight to the analyzer."""
        result = use_case.execute("raw statement", top_n=3)

        mock_parser.parse.assert_called_once_with("raw statement")
        mock_analyzer.analyze.assert_called_once_with(transactions, top_n=3)
        assert result.total_income == Decimal("100")
        assert result.spending_trend is None

    def test_execute_with_trend(self, use_case, mock_analyzer, transactions):
        result = use_case.execute_with_trend("raw statement")

        mock_analyzer.spending_trend.assert_called_once_with(transactions)
        assert result.spending_trend == SpendingTrend.STABLE
        assert result.summary == "Financial Summary:"

    def test_parse_only(self, use_case, mock_analyzer, transactions):
        assert use_case.parse("raw statement") == transactions
        mock_analyzer.analyze.assert_not_called()

    def test_parse_error_propagates(self, use_case, mock_parser, mock_analyzer):
        mock_parser.parse.side_effect = StatementParseError("bad input")

        with pytest.raises(StatementParseError, match="Failed to parse bank statement: bad input"):
            use_case.execute("garbage")
        mock_analyzer.analyze.assert_not_called()


class TestAnalyzeStatementWiring:
    """Test the use case with the real adapters."""

    @pytest.fixture
    def use_case(self):
        return AnalyzeStatementUseCase(
            statement_parser=RegexStatementParser(),
            financial_analyzer=StandardFinancialAnalyzer(top_n=5, currency_symbol="₦")
        )

    def test_simple_statement(self, use_case, simple_statement):
        result = use_case.execute(simple_statement)

        # simple-format amounts carry no sign
        assert result.total_income == Decimal("55000")
        assert result.total_expenses == Decimal("0")
        assert result.top_categories == []

    def test_gtb_ledger_statement(self, use_case, gtb_ledger_statement):
        result = use_case.execute_with_trend(gtb_ledger_statement)

        assert result.total_income == Decimal("500000.00")
        assert result.total_expenses == Decimal("27500.00")
        assert [c.category for c in result.top_categories] == ["ATM", "Bills"]
        assert result.spending_trend == SpendingTrend.DECREASING

    def test_gtb_lines_statement(self, use_case, gtb_lines_statement):
        result = use_case.execute(gtb_lines_statement)
        assert result.net_balance == Decimal("485000.00")

    def test_json_records(self, use_case):
        result = use_case.execute('[{"amount": 200}, {"amount": -50.25, "category": "Food"}]')
        assert result.net_balance == Decimal("149.75")
