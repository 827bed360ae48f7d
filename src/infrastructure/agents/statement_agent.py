"""
Infrastructure Adapter: Statement Agent
Deterministic agent that answers with the statement analysis tool's report
"""

import logging
from typing import Optional

from application.ports.agent import AgentMessage, AgentResponse, IAgent
from application.use_cases.analyze_statement import AnalyzeStatementUseCase

logger = logging.getLogger(__name__)


class StatementAgent(IAgent):
    """
    Analyzes the latest user message as a bank statement.

    The message content goes to the analysis tool unchanged (statement text,
    JSON array or the simple delimited format).
    """

    name = "BankStatementAgent"

    def __init__(self, use_case: AnalyzeStatementUseCase, top_n: Optional[int] = None):
        self.use_case = use_case
        self.top_n = top_n

    def generate(self, messages: list[AgentMessage]) -> AgentResponse:
        content = self._latest_user_content(messages)
        if not content.strip():
            return AgentResponse(
                text="Please send your bank statement as text or a JSON array of transactions."
            )

        result = self.use_case.execute(content, top_n=self.top_n)
        logger.info(f"[agent] analyzed statement, categories={len(result.top_categories)}")

        return AgentResponse(text=result.summary, tool_results=[result.to_dict()])

    @staticmethod
    def _latest_user_content(messages: list[AgentMessage]) -> str:
        for message in reversed(messages):
            if message.role == "user":
                return message.content
        return ""
