from .spending_trend import SpendingTrend
from .parse_status import ParseStatus

__all__ = ["SpendingTrend", "ParseStatus"]
