"""
Keyword-based transaction categorization
"""

from typing import Optional, Sequence


DEFAULT_CATEGORY = "Others"

# Scanned top to bottom; the first category with a keyword contained in the
# lower-cased description wins, so order decides overlaps: ATM sits before
# Transfer and Food, making "pos shoprite" and "pos transfer" both ATM.
CATEGORY_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("Salary", ("salary", "payroll", "wages", "payment for")),
    ("ATM", ("atm", "pos", "withdrawal")),
    ("Transfer", ("transfer", "trf", "xfer", "fip")),
    ("Bills", ("dstv", "gotv", "electricity", "phcn", "water", "utility", "bill")),
    ("Food", ("restaurant", "food", "cafe", "dining", "shoprite", "spar")),
    ("Shopping", ("mall", "store", "market", "shop", "jumia", "konga")),
    ("Transport", ("uber", "bolt", "taxi", "fare", "transport")),
    ("Airtime", ("airtime", "data", "mtn", "glo", "airtel", "9mobile")),
    ("Entertainment", ("cinema", "movie", "game", "netflix", "bet9ja", "betting")),
    ("Health", ("hospital", "pharmacy", "medical", "drug", "clinic")),
    ("Bank Charges", ("charge", "fee", "commission", "vat")),
]


class KeywordCategorizer:
    """Assigns a category to a description from an ordered keyword table"""

    def __init__(
        self,
        table: Optional[Sequence[tuple[str, Sequence[str]]]] = None,
        default: str = DEFAULT_CATEGORY
    ):
        self.table = [
            (category, tuple(k.lower() for k in keywords))
            for category, keywords in (table if table is not None else CATEGORY_KEYWORDS)
        ]
        self.default = default

    def categorize(self, description: Optional[str]) -> str:
        """
        Categorize a transaction description.

        Args:
            description: Free-text description

        Returns:
            Category name, or the default when nothing matches
        """
        if not description:
            return self.default

        description_lower = description.lower()
        for category, keywords in self.table:
            if any(keyword in description_lower for keyword in keywords):
                return category

        return self.default

    @property
    def categories(self) -> list[str]:
        return [category for category, _ in self.table]


_default_categorizer = KeywordCategorizer()


def categorize(description: Optional[str]) -> str:
    """Categorize with the built-in keyword table"""
    return _default_categorizer.categorize(description)
