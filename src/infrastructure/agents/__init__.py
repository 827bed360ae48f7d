from .statement_agent import StatementAgent

__all__ = ["StatementAgent"]
