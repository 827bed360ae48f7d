"""
Narrative financial report

Presentation only: amounts are rounded here for display and never fed back
into the aggregates.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence

from config import settings
from domain.entities.analysis_result import CategoryTotal


CENTS = Decimal("0.01")
TENTHS = Decimal("0.1")

HEALTHY_SAVINGS_RATE = Decimal("20")
MODERATE_SAVINGS_RATE = Decimal("10")
MANAGED_EXPENSE_RATIO = Decimal("0.5")
MODERATE_EXPENSE_RATIO = Decimal("0.7")


def format_currency(amount: Decimal, symbol: Optional[str] = None) -> str:
    """
    Format an amount as grouped currency with two decimals.

    Example:
        format_currency(Decimal("-1234.5")) -> "-₦1,234.50"
    """
    symbol = settings.CURRENCY_SYMBOL if symbol is None else symbol
    rounded = Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{abs(rounded):,.2f}"


def round_percentage(value: Decimal) -> Decimal:
    return value.quantize(TENTHS, rounding=ROUND_HALF_UP)


def savings_health(savings_rate: Decimal) -> str:
    if savings_rate >= HEALTHY_SAVINGS_RATE:
        return "healthy"
    if savings_rate >= MODERATE_SAVINGS_RATE:
        return "moderate"
    return "low"


def expense_health(expense_ratio: Decimal) -> str:
    if expense_ratio <= MANAGED_EXPENSE_RATIO:
        return "well-managed"
    if expense_ratio <= MODERATE_EXPENSE_RATIO:
        return "moderate"
    return "high"


def compose_summary(
    total_income: Decimal,
    total_expenses: Decimal,
    net_balance: Decimal,
    top_categories: Sequence[CategoryTotal],
    symbol: Optional[str] = None
) -> str:
    """
    Build the multi-section report: metrics, spending breakdown,
    health assessment and recommendations.

    Args:
        total_income: Sum of inflows
        total_expenses: Sum of absolute outflows
        net_balance: Income minus expenses
        top_categories: Ranked expense categories
        symbol: Currency symbol (settings default if None)

    Returns:
        Report text
    """
    def money(amount: Decimal) -> str:
        return format_currency(amount, symbol)

    if total_income > 0:
        savings_rate = round_percentage(net_balance / total_income * 100)
        expense_ratio = total_expenses / total_income
    else:
        savings_rate = Decimal("0.0")
        expense_ratio = None

    lines = [
        "Financial Summary:",
        f"• Total Income: {money(total_income)}",
        f"• Total Expenses: {money(total_expenses)}",
        f"• Net Balance: {money(net_balance)}",
        f"• Savings Rate: {savings_rate}%",
    ]

    if top_categories and total_expenses > 0:
        lines += ["", "Spending Breakdown:"]
        for item in top_categories:
            share = round_percentage(item.total / total_expenses * 100)
            lines.append(f"• {item.category}: {money(item.total)} ({share}% of expenses)")

    lines += [
        "",
        "Financial Health Assessment:",
        f"• Your savings rate is {savings_health(savings_rate)} ({savings_rate}% of income)",
    ]
    if expense_ratio is not None:
        lines.append(
            f"• Your expense ratio is {expense_health(expense_ratio)} "
            f"({round_percentage(expense_ratio * 100)}% of income)"
        )
    if net_balance >= 0:
        lines.append(f"• You're maintaining a positive balance of {money(net_balance)}")
    else:
        lines.append(f"• Warning: You're in a deficit of {money(abs(net_balance))}")

    lines += ["", "Recommendations:"]
    if savings_rate < HEALTHY_SAVINGS_RATE:
        lines.append("• Consider increasing your savings rate to at least 20% of income")
    else:
        lines.append("• Great job maintaining a healthy savings rate!")

    if expense_ratio is not None:
        if expense_ratio > MODERATE_EXPENSE_RATIO:
            advice = "• Look for ways to reduce expenses in your top spending categories"
            if top_categories:
                advice += f", starting with {top_categories[0].category}"
            lines.append(advice)
        else:
            lines.append("• Keep maintaining your current expense management")

    return "\n".join(lines)
