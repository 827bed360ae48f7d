"""
Port: Statement Parser Interface
Defines contract for turning raw statement input into transactions
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence, Union

from domain.entities.transaction import Transaction


StatementInput = Union[str, Sequence[Union[Transaction, Mapping[str, Any]]]]


class IStatementParser(ABC):
    """Interface for statement parsing"""

    @abstractmethod
    def parse(self, raw: StatementInput) -> list[Transaction]:
        """
        Normalize raw input into an ordered list of transactions

        Args:
            raw: Pre-structured transaction records, JSON text, or statement text

        Returns:
            Transactions in input order

        Raises:
            StatementParseError: If no supported format is recognized
        """
        pass
