"""
Domain exceptions
"""

PARSE_ERROR_PREFIX = "Failed to parse bank statement: "


class StatementParseError(ValueError):
    """Raised when no parsing strategy recognizes the statement"""

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"{PARSE_ERROR_PREFIX}{cause}")
