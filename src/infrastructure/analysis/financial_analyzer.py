"""
Infrastructure Adapter: Standard Financial Analyzer
Implements IFinancialAnalyzer with income/expense aggregation and category ranking
"""

import logging
from decimal import Decimal
from typing import Optional, Sequence

from application.ports.financial_analyzer import IFinancialAnalyzer
from config import settings
from domain.entities.analysis_result import AnalysisResult, CategoryTotal
from domain.entities.transaction import Transaction
from domain.enums import SpendingTrend
from infrastructure.analysis.report import compose_summary
from infrastructure.parsing.dates import StatementDateParser

logger = logging.getLogger(__name__)


class StandardFinancialAnalyzer(IFinancialAnalyzer):
    """Aggregates a transaction sequence into an AnalysisResult"""

    UNCATEGORIZED = "Uncategorized"

    # Relative change (%) between halves that counts as a trend
    TREND_THRESHOLD = Decimal("10")

    def __init__(self, top_n: Optional[int] = None, currency_symbol: Optional[str] = None):
        self.top_n = settings.TOP_CATEGORIES_LIMIT if top_n is None else top_n
        self.currency_symbol = currency_symbol

    def analyze(
        self,
        transactions: Sequence[Transaction],
        top_n: Optional[int] = None
    ) -> AnalysisResult:
        """
        Analyze transactions

        Args:
            transactions: Normalized transactions (may be empty)
            top_n: Number of expense categories to keep; analyzer default if None

        Returns:
            AnalysisResult with aggregates and narrative summary
        """
        top_n = self.top_n if top_n is None else top_n
        if top_n < 0:
            raise ValueError(f"top_n must be non-negative, got {top_n}")

        income = self.calculate_income(transactions)
        expenses = self.calculate_expenses(transactions)
        net_balance = income - expenses
        top_categories = self.top_spending_categories(transactions, top_n)

        logger.debug(
            f"[analyze] tx={len(transactions)} income={income} "
            f"expenses={expenses} categories={len(top_categories)}"
        )

        summary = compose_summary(
            income, expenses, net_balance, top_categories, symbol=self.currency_symbol
        )

        return AnalysisResult(
            total_income=income,
            total_expenses=expenses,
            net_balance=net_balance,
            top_categories=top_categories,
            summary=summary
        )

    @staticmethod
    def calculate_income(transactions: Sequence[Transaction]) -> Decimal:
        """Sum of positive amounts"""
        return sum((t.amount for t in transactions if t.is_credit), Decimal("0"))

    @staticmethod
    def calculate_expenses(transactions: Sequence[Transaction]) -> Decimal:
        """Sum of absolute negative amounts"""
        return sum((-t.amount for t in transactions if t.is_debit), Decimal("0"))

    def top_spending_categories(
        self,
        transactions: Sequence[Transaction],
        top_n: int
    ) -> list[CategoryTotal]:
        """
        Group expenses by category and rank them

        Ties keep the order in which categories were first seen.
        """
        totals: dict[str, Decimal] = {}
        for t in transactions:
            if not t.is_debit:
                continue
            category = t.category or self.UNCATEGORIZED
            totals[category] = totals.get(category, Decimal("0")) - t.amount

        ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)
        return [CategoryTotal(category=c, total=total) for c, total in ranked[:top_n]]

    def spending_trend(self, transactions: Sequence[Transaction]) -> SpendingTrend:
        """
        Compare spend in the earlier and later half of dated expenses

        Returns:
            INCREASING above +10%, DECREASING below -10%, otherwise STABLE
        """
        dated = []
        for t in transactions:
            if not t.is_debit:
                continue
            when = StatementDateParser.parse_flexible(t.date)
            if when is not None:
                dated.append((when.replace(tzinfo=None), t))

        if len(dated) < 2:
            return SpendingTrend.STABLE

        dated.sort(key=lambda pair: pair[0])
        midpoint = len(dated) // 2
        first_half = sum((-t.amount for _, t in dated[:midpoint]), Decimal("0"))
        second_half = sum((-t.amount for _, t in dated[midpoint:]), Decimal("0"))

        difference = (second_half - first_half) / first_half * 100

        if difference > self.TREND_THRESHOLD:
            return SpendingTrend.INCREASING
        if difference < -self.TREND_THRESHOLD:
            return SpendingTrend.DECREASING
        return SpendingTrend.STABLE
