"""Tests for category and monthly expense aggregation."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal
from types import MappingProxyType

from src.domain.models import (
    CategoryTotal,
    Expense,
    ExpenseCategory,
    MonthlyTotal,
    SplitPolicy,
)
from src.domain.services import totals_by_category, totals_by_month


def _expense(amount: str, category: ExpenseCategory, date: datetime):
    return Expense(
        expense_id=f"{category.name}-{amount}",
        amount=Decimal(amount),
        description="",
        category=category,
        payer_id="a",
        participant_ids=("a",),
        policy=SplitPolicy.EQUAL,
        split_table=MappingProxyType({}),
        date=date,
        created_at=date,
        updated_at=date,
    )


def test_totals_by_category_sorted_by_amount() -> None:
    when = datetime(2024, 1, 10, tzinfo=timezone.utc)
    expenses = [
        _expense("20.00", ExpenseCategory.GROCERIES, when),
        _expense("900.00", ExpenseCategory.RENT, when),
        _expense("35.50", ExpenseCategory.GROCERIES, when),
    ]

    assert totals_by_category(expenses) == [
        CategoryTotal(ExpenseCategory.RENT, Decimal("900.00")),
        CategoryTotal(ExpenseCategory.GROCERIES, Decimal("55.50")),
    ]


def test_totals_by_month_uses_utc_calendar_months() -> None:
    """A late-evening local expense belongs to the UTC month."""
    plus_two = timezone(timedelta(hours=2))
    expenses = [
        _expense("10.00", ExpenseCategory.OTHER, datetime(2024, 2, 1, 1, 0, tzinfo=plus_two)),
        _expense("5.00", ExpenseCategory.OTHER, datetime(2024, 1, 3, tzinfo=timezone.utc)),
        _expense("7.25", ExpenseCategory.UTILITIES, datetime(2024, 2, 20, tzinfo=timezone.utc)),
    ]

    assert totals_by_month(expenses) == [
        MonthlyTotal("2024-01", Decimal("15.00")),
        MonthlyTotal("2024-02", Decimal("7.25")),
    ]
