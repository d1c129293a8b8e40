"""Domain models for shared wallets.

Records inside a wallet (members, expenses, settlements) are immutable
dataclasses. State transitions replace a record inside the owning
``Wallet``, which is the only mutable object of the model.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from types import MappingProxyType

from src.domain.constants import DEFAULT_CURRENCY
from src.domain.models.enums import (
    ExpenseCategory,
    MemberStatus,
    PaymentMethod,
    SplitPolicy,
)


@dataclass(frozen=True)
class Member:
    """Participant of a wallet.

    Attributes:
        member_id: Identifier, unique within the wallet.
        name: Display name.
        contact: Contact handle (usually an email address).
        joined_at: UTC timestamp of when the member joined.
        status: Lifecycle state; inactive members keep their history.
        total_owed: Derived sum this member owes others.
        total_owed_to: Derived sum others owe this member.
    """

    member_id: str
    name: str
    contact: str
    joined_at: datetime
    status: MemberStatus = MemberStatus.ACTIVE
    total_owed: Decimal = Decimal("0")
    total_owed_to: Decimal = Decimal("0")

    @property
    def is_active(self) -> bool:
        return self.status is MemberStatus.ACTIVE

    @property
    def net_balance(self) -> Decimal:
        """Return what others owe this member minus what it owes them."""
        return self.total_owed_to - self.total_owed


@dataclass(frozen=True)
class Expense:
    """Shared cost recorded in a wallet ledger.

    ``split_table`` holds absolute amounts for CUSTOM expenses and fractions
    between 0 and 1 for PERCENTAGE expenses. It is empty for EQUAL expenses.
    """

    expense_id: str
    amount: Decimal
    description: str
    category: ExpenseCategory
    payer_id: str
    participant_ids: tuple[str, ...]
    policy: SplitPolicy
    date: datetime
    created_at: datetime
    updated_at: datetime
    split_table: Mapping[str, Decimal] = field(
        default_factory=lambda: MappingProxyType({})
    )
    is_settled: bool = False


@dataclass(frozen=True)
class Settlement:
    """Payment between two members intended to reduce a debt."""

    settlement_id: str
    from_member_id: str
    to_member_id: str
    amount: Decimal
    method: PaymentMethod
    date: datetime
    note: str | None = None
    is_confirmed: bool = False


@dataclass(frozen=True)
class DebtEntry:
    """Directed amount one member owes another."""

    from_member_id: str
    to_member_id: str
    amount: Decimal


@dataclass
class Wallet:
    """Group ledger owning its members, expenses and settlements."""

    wallet_id: str
    name: str
    created_by_member_id: str
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    members: list[Member] = field(default_factory=list)
    expenses: list[Expense] = field(default_factory=list)
    settlements: list[Settlement] = field(default_factory=list)
    total_spent: Decimal = Decimal("0.00")
    currency: str = DEFAULT_CURRENCY
    is_active: bool = True

    def member(self, member_id: str) -> Member | None:
        """Return the member with the given id, active or not."""
        for member in self.members:
            if member.member_id == member_id:
                return member
        return None

    def expense(self, expense_id: str) -> Expense | None:
        for expense in self.expenses:
            if expense.expense_id == expense_id:
                return expense
        return None

    def settlement(self, settlement_id: str) -> Settlement | None:
        for settlement in self.settlements:
            if settlement.settlement_id == settlement_id:
                return settlement
        return None

    @property
    def member_ids(self) -> list[str]:
        return [member.member_id for member in self.members]

    @property
    def active_member_count(self) -> int:
        return sum(1 for member in self.members if member.is_active)

    @property
    def unsettled_amount(self) -> Decimal:
        return sum(
            (
                expense.amount
                for expense in self.expenses
                if not expense.is_settled
            ),
            Decimal("0.00"),
        )


__all__ = ["Member", "Expense", "Settlement", "DebtEntry", "Wallet"]
