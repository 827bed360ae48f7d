"""
Application Use Case: Analyze Bank Statement
Orchestrates parser and analyzer to process a statement
"""

import logging
from typing import Optional

from application.ports.statement_parser import IStatementParser, StatementInput
from application.ports.financial_analyzer import IFinancialAnalyzer
from domain.entities.analysis_result import AnalysisResult
from domain.entities.transaction import Transaction

logger = logging.getLogger(__name__)


class AnalyzeStatementUseCase:
    """Use case for analyzing bank statements"""

    def __init__(
        self,
        statement_parser: IStatementParser,
        financial_analyzer: IFinancialAnalyzer
    ):
        """Initialize use case with dependencies"""

        self.statement_parser = statement_parser
        self.financial_analyzer = financial_analyzer

    def parse(self, raw: StatementInput) -> list[Transaction]:
        """Normalize raw input without analyzing it"""
        return self.statement_parser.parse(raw)

    def execute(self, raw: StatementInput, top_n: Optional[int] = None) -> AnalysisResult:
        """
        Execute statement analysis workflow

        Args:
            raw: Transaction records, JSON text, or statement text
            top_n: Number of expense categories to rank

        Returns:
            AnalysisResult entity

        Raises:
            StatementParseError: If the input is in no supported format
        """

        # 1. Parse into transactions
        transactions = self.statement_parser.parse(raw)
        logger.debug(f"[analyze] parsed_tx={len(transactions)}")

        # 2. Aggregate
        return self.financial_analyzer.analyze(transactions, top_n=top_n)

    def execute_with_trend(
        self,
        raw: StatementInput,
        top_n: Optional[int] = None
    ) -> AnalysisResult:
        """Same as execute, with the spending trend filled in"""

        transactions = self.statement_parser.parse(raw)
        result = self.financial_analyzer.analyze(transactions, top_n=top_n)
        trend = self.financial_analyzer.spending_trend(transactions)

        return AnalysisResult(
            total_income=result.total_income,
            total_expenses=result.total_expenses,
            net_balance=result.net_balance,
            top_categories=result.top_categories,
            summary=result.summary,
            spending_trend=trend
        )
