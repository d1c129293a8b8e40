"""Domain package for shared wallet rules and core models."""

from .constants import DEBT_EPSILON, DEFAULT_CURRENCY
from .errors import (
    ExpenseNotFoundError,
    InvalidLedgerInputError,
    LedgerNotFoundError,
    MemberNotFoundError,
    SettlementNotFoundError,
    WalletError,
    WalletNotFoundError,
    WalletPersistenceError,
)
from .models import (
    CategoryTotal,
    DebtEntry,
    Expense,
    ExpenseCategory,
    Member,
    MemberStatus,
    MonthlyTotal,
    PaymentMethod,
    Settlement,
    SplitPolicy,
    Wallet,
    WalletAnalytics,
)

__all__ = [
    "DEBT_EPSILON",
    "DEFAULT_CURRENCY",
    "ExpenseNotFoundError",
    "InvalidLedgerInputError",
    "LedgerNotFoundError",
    "MemberNotFoundError",
    "SettlementNotFoundError",
    "WalletError",
    "WalletNotFoundError",
    "WalletPersistenceError",
    "CategoryTotal",
    "DebtEntry",
    "Expense",
    "ExpenseCategory",
    "Member",
    "MemberStatus",
    "MonthlyTotal",
    "PaymentMethod",
    "Settlement",
    "SplitPolicy",
    "Wallet",
    "WalletAnalytics",
]
