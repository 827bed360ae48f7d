"""
Bank Statement Format Detector

Detects the issuing bank from statement text to route to the correct ledger layout
"""

import logging
from typing import Iterable

from infrastructure.parsing.ledger_formats import LEDGER_LAYOUTS

logger = logging.getLogger(__name__)


UNKNOWN_BANK = "UNKNOWN"


class BankDetector:
    """Detect bank from statement header literals"""

    @staticmethod
    def detect_bank(lines: Iterable[str]) -> str:
        """
        Detect bank from statement lines

        Layouts are checked in registry order and the first bank whose
        header literal appears on any line wins.

        Returns:
            "GTB" | "ZENITH" | "ACCESS" | "UBA" | "UNKNOWN"
        """
        lines = list(lines)

        for layout in LEDGER_LAYOUTS:
            if any(layout.header.search(line) for line in lines):
                return layout.code

        logger.debug("[BANK_DETECT] no bank header found")
        return UNKNOWN_BANK
