"""Spending Trend Enumeration

Direction of expense totals between the earlier and later half of a period.
"""

from enum import Enum


class SpendingTrend(str, Enum):
    """Spending trend classification

    INCREASING: later half spent more than 10% above the earlier half
    DECREASING: later half spent more than 10% below the earlier half
    STABLE: anything in between, or too few dated expenses to compare
    """

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"

    def __str__(self) -> str:
        return self.value
