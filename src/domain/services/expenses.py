"""Expense ledger operations on a wallet."""

from collections.abc import Iterable, Mapping
from dataclasses import replace
from datetime import datetime
from logging import Logger
from types import MappingProxyType

from src.domain.errors import ExpenseNotFoundError
from src.domain.models import Expense, ExpenseCategory, SplitPolicy, Wallet
from src.domain.services.debts import refresh_member_balances
from src.domain.services.validation import (
    coerce_choice,
    ensure_wallet_active,
    require_member,
    validate_participants,
    validate_positive_amount,
    validate_split_table,
    warn_on_split_mismatch,
)


def add_expense(
    wallet: Wallet,
    expense_id: str,
    amount,
    description: str,
    category: ExpenseCategory | str,
    payer_id: str,
    participant_ids: Iterable[str],
    policy: SplitPolicy | str = SplitPolicy.EQUAL,
    split_table: Mapping[str, object] | None = None,
    *,
    now: datetime,
    logger: Logger,
    date: datetime | None = None,
) -> Expense:
    """Record a shared expense and recompute member balances.

    The payer does not have to be one of the participants. For CUSTOM and
    PERCENTAGE policies the split table must cover every participant;
    entries for other ids are ignored.

    Args:
        wallet: Wallet receiving the expense.
        expense_id: Identifier of the new expense.
        amount: Positive expense amount.
        description: Free-text description.
        category: Expense category (enum member, value or name).
        payer_id: Member who paid.
        participant_ids: Members sharing the cost.
        policy: Split policy (enum member, value or name).
        split_table: Amounts (CUSTOM) or fractions (PERCENTAGE) per member.
        now: Timestamp used for ``created_at`` and ``updated_at``.
        logger: Logger used for split mismatch warnings.
        date: Day the cost was incurred, defaults to ``now``.

    Returns:
        Expense: The recorded expense.

    Raises:
        InvalidLedgerInputError: If any input is rejected.
        MemberNotFoundError: If the payer or a participant is unknown.
    """
    ensure_wallet_active(wallet)
    resolved_amount = validate_positive_amount(amount)
    resolved_category = coerce_choice(ExpenseCategory, category, "category")
    resolved_policy = coerce_choice(SplitPolicy, policy, "split policy")
    require_member(wallet, payer_id, active=True)
    participants = validate_participants(wallet, participant_ids)
    table = validate_split_table(resolved_policy, participants, split_table)
    warn_on_split_mismatch(resolved_policy, resolved_amount, table, logger)

    expense = Expense(
        expense_id=expense_id,
        amount=resolved_amount,
        description=(description or "").strip(),
        category=resolved_category,
        payer_id=payer_id,
        participant_ids=participants,
        policy=resolved_policy,
        split_table=MappingProxyType(table),
        date=date or now,
        created_at=now,
        updated_at=now,
    )
    wallet.expenses.append(expense)
    wallet.total_spent += resolved_amount
    refresh_member_balances(wallet)
    return expense


def settle_expense(
    wallet: Wallet,
    expense_id: str,
    *,
    now: datetime,
) -> Expense:
    """Mark an expense settled so it stops contributing debts.

    ``total_spent`` still includes the expense. Settling twice is a no-op.

    Raises:
        ExpenseNotFoundError: If the id is unknown in this wallet.
    """
    ensure_wallet_active(wallet)
    current = wallet.expense(expense_id)
    if current is None:
        raise ExpenseNotFoundError(expense_id, wallet.wallet_id)
    if not current.is_settled:
        settled = replace(current, is_settled=True, updated_at=now)
        wallet.expenses = [
            settled if expense.expense_id == expense_id else expense
            for expense in wallet.expenses
        ]
    refresh_member_balances(wallet)
    return wallet.expense(expense_id)


__all__ = ["add_expense", "settle_expense"]
