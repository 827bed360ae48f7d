"""
Port: Financial Analyzer Interface
Defines contract for aggregate metrics over a transaction sequence
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from domain.entities.transaction import Transaction
from domain.entities.analysis_result import AnalysisResult
from domain.enums import SpendingTrend


class IFinancialAnalyzer(ABC):
    """Interface for financial analysis"""

    @abstractmethod
    def analyze(
        self,
        transactions: Sequence[Transaction],
        top_n: Optional[int] = None
    ) -> AnalysisResult:
        """
        Compute income, expenses, balance, top categories and a narrative summary

        Args:
            transactions: Normalized transactions, possibly empty
            top_n: Number of expense categories to keep (analyzer default if None)

        Returns:
            AnalysisResult entity
        """
        pass

    @abstractmethod
    def spending_trend(self, transactions: Sequence[Transaction]) -> SpendingTrend:
        """Classify dated expenses as increasing, decreasing or stable"""
        pass
