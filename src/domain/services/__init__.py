"""Domain services package."""

from .aggregation import month_key, totals_by_category, totals_by_month
from .debts import (
    DebtMatrix,
    compute_debt_matrix,
    minimize_transfers,
    net_balances,
    refresh_member_balances,
    simplify_debts,
)
from .expenses import add_expense, settle_expense
from .members import add_member, deactivate_member
from .settlements import add_settlement, confirm_settlement
from .splits import allocate_equal_shares, amount_for_member, expense_shares

__all__ = [
    "month_key",
    "totals_by_category",
    "totals_by_month",
    "DebtMatrix",
    "compute_debt_matrix",
    "minimize_transfers",
    "net_balances",
    "refresh_member_balances",
    "simplify_debts",
    "add_expense",
    "settle_expense",
    "add_member",
    "deactivate_member",
    "add_settlement",
    "confirm_settlement",
    "allocate_equal_shares",
    "amount_for_member",
    "expense_shares",
]
