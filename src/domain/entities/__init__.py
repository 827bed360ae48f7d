from .transaction import Transaction
from .analysis_result import AnalysisResult, CategoryTotal

__all__ = [
    "Transaction",
    "AnalysisResult",
    "CategoryTotal",
]
