"""
Result type returned by every parsing strategy
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from domain.entities.transaction import Transaction
from domain.enums import ParseStatus


@dataclass(frozen=True)
class ParseOutcome:
    """What one strategy made of the input"""

    status: ParseStatus
    transactions: tuple[Transaction, ...] = ()
    reason: Optional[str] = None

    @classmethod
    def matched(cls, transactions: Iterable[Transaction]) -> "ParseOutcome":
        return cls(ParseStatus.MATCHED, tuple(transactions))

    @classmethod
    def not_matched(cls, reason: Optional[str] = None) -> "ParseOutcome":
        return cls(ParseStatus.NOT_MATCHED, reason=reason)

    @classmethod
    def malformed(cls, reason: str) -> "ParseOutcome":
        return cls(ParseStatus.MALFORMED, reason=reason)

    @property
    def is_matched(self) -> bool:
        return self.status is ParseStatus.MATCHED
