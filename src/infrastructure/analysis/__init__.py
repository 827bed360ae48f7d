from .financial_analyzer import StandardFinancialAnalyzer
from .report import compose_summary, format_currency

__all__ = ["StandardFinancialAnalyzer", "compose_summary", "format_currency"]
