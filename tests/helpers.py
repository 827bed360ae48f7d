"""
Builders for fixed-column ledger text used across tests.
"""


def ledger_line(date: str, description: str, debit: str = "", credit: str = "",
                balance: str = "") -> str:
    """Fixed-column ledger row lined up under ledger_header()."""
    return f"{date:<12}{description:<28}{debit:>10}{credit:>14}{balance:>14}"


def ledger_header(debit: str = "Debit(N)", credit: str = "Credit(N)",
                  balance: str = "Balance(N)", description: str = "Description") -> str:
    return f"{'Date':<12}{description:<28}{debit:>10}{credit:>14}{balance:>14}"
