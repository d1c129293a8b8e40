"""Read-side projections over a wallet's expenses."""

from dataclasses import dataclass
from decimal import Decimal

from src.domain.models.enums import ExpenseCategory


@dataclass(frozen=True)
class CategoryTotal:
    """Sum of expense amounts for one category."""

    category: ExpenseCategory
    amount: Decimal


@dataclass(frozen=True)
class MonthlyTotal:
    """Sum of expense amounts for one calendar month (``YYYY-MM``)."""

    month: str
    amount: Decimal


@dataclass(frozen=True)
class WalletAnalytics:
    """Spending overview of a wallet.

    Attributes:
        wallet_id: Wallet the figures belong to.
        currency_code: Ledger currency tag.
        total_spent: Sum of every expense, settled or not.
        unsettled_amount: Sum of expenses not marked settled.
        active_member_count: Number of active members.
        by_category: Totals per category, largest first.
        by_month: Totals per calendar month, oldest first.
    """

    wallet_id: str
    currency_code: str
    total_spent: Decimal
    unsettled_amount: Decimal
    active_member_count: int
    by_category: list[CategoryTotal]
    by_month: list[MonthlyTotal]


__all__ = ["CategoryTotal", "MonthlyTotal", "WalletAnalytics"]
