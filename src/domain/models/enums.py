"""Closed enumerations shared by the wallet ledger models."""

from enum import Enum


class MemberStatus(str, Enum):
    """Lifecycle state of a wallet member.

    Members are never removed from a wallet; leaving a wallet moves them to
    INACTIVE so historical expenses and settlements keep resolving.
    """

    ACTIVE = "active"
    INACTIVE = "inactive"


class SplitPolicy(str, Enum):
    """How an expense amount is shared between its participants."""

    EQUAL = "Equal Split"
    CUSTOM = "Custom Split"
    PERCENTAGE = "Percentage Split"

    @property
    def description(self) -> str:
        return {
            SplitPolicy.EQUAL: "Split equally among all members",
            SplitPolicy.CUSTOM: "Custom amounts for each member",
            SplitPolicy.PERCENTAGE: "Split by percentage",
        }[self]

    @property
    def requires_split_table(self) -> bool:
        return self is not SplitPolicy.EQUAL


class ExpenseCategory(str, Enum):
    """Expense categories shared with the rest of the application."""

    RENT = "Rent"
    GROCERIES = "Groceries"
    ENTERTAINMENT = "Entertainment"
    UTILITIES = "Utilities"
    TRANSPORTATION = "Transportation"
    SUBSCRIPTIONS = "Subscriptions"
    INSURANCE = "Insurance"
    OTHER = "Other"


class PaymentMethod(str, Enum):
    """How a settlement payment was made."""

    CASH = "Cash"
    VENMO = "Venmo"
    PAYPAL = "PayPal"
    ZELLE = "Zelle"
    BANK_TRANSFER = "Bank Transfer"
    OTHER = "Other"


__all__ = ["MemberStatus", "SplitPolicy", "ExpenseCategory", "PaymentMethod"]
