"""Read-side aggregation of wallet expenses."""

from collections.abc import Iterable
from datetime import timezone
from decimal import Decimal

from src.domain.models import (
    CategoryTotal,
    Expense,
    ExpenseCategory,
    MonthlyTotal,
)


def totals_by_category(expenses: Iterable[Expense]) -> list[CategoryTotal]:
    """Sum expense amounts per category, largest total first."""
    totals: dict[ExpenseCategory, Decimal] = {}
    for expense in expenses:
        totals[expense.category] = (
            totals.get(expense.category, Decimal("0.00")) + expense.amount
        )
    order = list(ExpenseCategory)
    return [
        CategoryTotal(category=category, amount=amount)
        for category, amount in sorted(
            totals.items(),
            key=lambda item: (-item[1], order.index(item[0])),
        )
    ]


def month_key(expense: Expense) -> str:
    """Return the ``YYYY-MM`` key of an expense date in UTC."""
    moment = expense.date
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m")


def totals_by_month(expenses: Iterable[Expense]) -> list[MonthlyTotal]:
    """Sum expense amounts per calendar month, oldest month first."""
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        key = month_key(expense)
        totals[key] = totals.get(key, Decimal("0.00")) + expense.amount
    return [
        MonthlyTotal(month=month, amount=amount)
        for month, amount in sorted(totals.items())
    ]


__all__ = ["totals_by_category", "month_key", "totals_by_month"]
