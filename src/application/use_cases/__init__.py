from .analyze_statement import AnalyzeStatementUseCase

__all__ = ["AnalyzeStatementUseCase"]
