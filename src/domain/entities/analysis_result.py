"""
Domain Entity: Analysis Result
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

from ..enums import SpendingTrend


@dataclass(frozen=True)
class CategoryTotal:
    """Summed absolute spend for one expense category"""

    category: str
    total: Decimal

    def to_dict(self) -> dict:
        return {"category": self.category, "total": float(self.total)}


@dataclass(frozen=True)
class AnalysisResult:
    """Result of one analysis run over a transaction sequence"""

    total_income: Decimal
    total_expenses: Decimal
    net_balance: Decimal
    top_categories: list[CategoryTotal] = field(default_factory=list)
    summary: str = ""
    spending_trend: Optional[SpendingTrend] = None

    def to_dict(self) -> dict:
        """Convert to the analyzer tool's output shape"""
        return {
            "totalIncome": float(self.total_income),
            "totalExpenses": float(self.total_expenses),
            "netBalance": float(self.net_balance),
            "topCategories": [c.to_dict() for c in self.top_categories],
            "summary": self.summary,
        }
