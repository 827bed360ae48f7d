from .statement_parser import IStatementParser
from .financial_analyzer import IFinancialAnalyzer
from .agent import IAgent, AgentMessage, AgentResponse

__all__ = [
    "IStatementParser",
    "IFinancialAnalyzer",
    "IAgent",
    "AgentMessage",
    "AgentResponse",
]
