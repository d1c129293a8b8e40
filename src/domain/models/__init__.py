"""Domain models package."""

from .analytics import CategoryTotal, MonthlyTotal, WalletAnalytics
from .enums import ExpenseCategory, MemberStatus, PaymentMethod, SplitPolicy
from .ledger import DebtEntry, Expense, Member, Settlement, Wallet

__all__ = [
    "CategoryTotal",
    "MonthlyTotal",
    "WalletAnalytics",
    "ExpenseCategory",
    "MemberStatus",
    "PaymentMethod",
    "SplitPolicy",
    "DebtEntry",
    "Expense",
    "Member",
    "Settlement",
    "Wallet",
]
