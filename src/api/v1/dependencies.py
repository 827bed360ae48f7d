"""
API Dependencies: Dependency Injection Container
"""

from functools import lru_cache

from application.ports.agent import IAgent
from application.ports.financial_analyzer import IFinancialAnalyzer
from application.ports.statement_parser import IStatementParser
from application.use_cases.analyze_statement import AnalyzeStatementUseCase
from config import settings
from infrastructure.agents.statement_agent import StatementAgent
from infrastructure.analysis.financial_analyzer import StandardFinancialAnalyzer
from infrastructure.parsing.statement_parser import RegexStatementParser


@lru_cache()
def get_statement_parser() -> IStatementParser:
    """Get statement parser implementation"""
    return RegexStatementParser()


@lru_cache()
def get_financial_analyzer() -> IFinancialAnalyzer:
    """Get financial analyzer implementation"""
    return StandardFinancialAnalyzer(top_n=settings.TOP_CATEGORIES_LIMIT)


def get_analyze_use_case() -> AnalyzeStatementUseCase:
    """Get analyze statement use case with injected dependencies"""
    return AnalyzeStatementUseCase(
        statement_parser=get_statement_parser(),
        financial_analyzer=get_financial_analyzer()
    )


@lru_cache()
def get_agent_registry() -> dict[str, IAgent]:
    """Agents reachable through the envelope route, by id"""
    return {
        settings.DEFAULT_AGENT_ID: StatementAgent(get_analyze_use_case()),
    }
