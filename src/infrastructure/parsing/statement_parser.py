"""
Infrastructure Adapter: Regex Statement Parser
Implements IStatementParser by trying each parsing strategy in order
"""

import logging
from typing import Optional, Sequence

from application.ports.statement_parser import IStatementParser, StatementInput
from domain.entities.transaction import Transaction
from domain.enums import ParseStatus
from domain.exceptions import StatementParseError
from infrastructure.parsing.strategies import STRATEGIES, Strategy

logger = logging.getLogger(__name__)


UNRECOGNIZED_FORMAT = (
    "Could not parse bank statement. "
    "Please ensure it matches one of the supported formats."
)


class RegexStatementParser(IStatementParser):
    """
    Statement parser over an ordered list of strategies.

    The first strategy that reports MATCHED wins, even with no transactions
    (a statement holding only headers and balance lines). MALFORMED and
    NOT_MATCHED both fall through to the next strategy; the last malformed
    reason becomes the error cause if nothing matches.
    """

    def __init__(self, strategies: Optional[Sequence[Strategy]] = None):
        self.strategies = list(strategies) if strategies is not None else list(STRATEGIES)

    def parse(self, raw: StatementInput) -> list[Transaction]:
        cause = None

        for strategy in self.strategies:
            outcome = strategy.parse(raw)
            logger.debug(
                f"[parse] strategy={strategy.name} status={outcome.status} "
                f"count={len(outcome.transactions)}"
            )

            if outcome.is_matched:
                logger.info(
                    f"[parse] parsed {len(outcome.transactions)} transactions "
                    f"with {strategy.name}"
                )
                return list(outcome.transactions)

            if outcome.status is ParseStatus.MALFORMED:
                cause = outcome.reason

        logger.warning(f"[parse] unrecognized statement format ({cause or 'no strategy matched'})")
        raise StatementParseError(cause or UNRECOGNIZED_FORMAT)
