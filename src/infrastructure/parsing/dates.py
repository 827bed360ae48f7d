"""
Statement date parsing utilities
Normalizes the calendar notations found on bank statements to YYYY-MM-DD
"""

import re
from datetime import date, datetime
from typing import Optional

from dateutil import parser as dateutil_parser


class StatementDateParser:
    """
    Parser for statement dates.

    Supported notations:
        DD-MMM-YY / DD-MMM-YYYY   (01-Nov-25, 01-NOV-2025)
        DD/MM/YYYY                (02/11/2024)
        YYYY-MM-DD                (already normalized)
    """

    MONTHS = {
        "JAN": 1, "FEB": 2, "MAR": 3, "APR": 4, "MAY": 5, "JUN": 6,
        "JUL": 7, "AUG": 8, "SEP": 9, "OCT": 10, "NOV": 11, "DEC": 12
    }

    DAY_MONTH_ABBR_RE = re.compile(r"^(\d{1,2})-([A-Za-z]{3})-(\d{2}|\d{4})$")
    DAY_MONTH_YEAR_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
    ISO_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")

    @staticmethod
    def normalize_year(year: str) -> int:
        """Two-digit years are taken to be in the 2000s"""
        value = int(year)
        if len(year) == 2:
            return 2000 + value
        return value

    @classmethod
    def parse(cls, date_str: str) -> date:
        """
        Parse a statement date.

        Args:
            date_str: Date in one of the supported notations

        Returns:
            date object

        Raises:
            ValueError: If the notation is unsupported or the date does not exist
        """
        text = date_str.strip()

        match = cls.DAY_MONTH_ABBR_RE.match(text)
        if match:
            day, month_abbr, year = match.groups()
            month = cls.MONTHS.get(month_abbr.upper())
            if month is None:
                raise ValueError(f"Unknown month abbreviation: {month_abbr}")
            return date(cls.normalize_year(year), month, int(day))

        match = cls.DAY_MONTH_YEAR_RE.match(text)
        if match:
            day, month, year = match.groups()
            return date(int(year), int(month), int(day))

        match = cls.ISO_RE.match(text)
        if match:
            year, month, day = match.groups()
            return date(int(year), int(month), int(day))

        raise ValueError(f"Unsupported date format: {date_str!r}")

    @classmethod
    def normalize(cls, date_str: str) -> str:
        """Parse a statement date and return it as YYYY-MM-DD"""
        return cls.parse(date_str).strftime("%Y-%m-%d")

    @classmethod
    def parse_flexible(cls, date_str: Optional[str]) -> Optional[datetime]:
        """
        Best-effort parse of a caller-supplied date, used for ordering only.

        Returns:
            datetime object or None if the string cannot be read as a date
        """
        if not date_str or not isinstance(date_str, str):
            return None

        try:
            parsed = cls.parse(date_str)
            return datetime(parsed.year, parsed.month, parsed.day)
        except ValueError:
            pass

        # Try dateutil as fallback
        try:
            return dateutil_parser.parse(date_str, dayfirst=True)
        except (ValueError, OverflowError):
            return None


def normalize_date(date_str: str) -> str:
    """
    Convenience function to normalize a statement date.

    Args:
        date_str: Date in a supported notation

    Returns:
        Date in ISO format (YYYY-MM-DD)
    """
    return StatementDateParser.normalize(date_str)
