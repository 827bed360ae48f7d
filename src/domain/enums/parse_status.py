"""Parse Status Enumeration"""

from enum import Enum


class ParseStatus(str, Enum):
    """Outcome of a single parsing strategy

    MATCHED: the strategy applies; its transactions (possibly none) are the result
    NOT_MATCHED: the input is not in this strategy's format
    MALFORMED: the input looks like this format but a line violates it
    """

    MATCHED = "matched"
    NOT_MATCHED = "not_matched"
    MALFORMED = "malformed"

    def __str__(self) -> str:
        return self.value
