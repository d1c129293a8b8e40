"""Per-member share resolution for expenses."""

from decimal import Decimal

from src.domain.models import Expense, SplitPolicy
from src.utils.decimal_utils import CENT, quantize_money


def allocate_equal_shares(
    amount: Decimal,
    participant_ids: tuple[str, ...],
) -> dict[str, Decimal]:
    """Split ``amount`` equally using largest-remainder allocation.

    Every participant gets the same number of cents; leftover cents go one
    each to the first participants in order, so shares always add up to the
    amount.

    Args:
        amount: Expense amount, already rounded to cents.
        participant_ids: Ordered participant ids.

    Returns:
        dict[str, Decimal]: Share per participant id.
    """
    if not participant_ids:
        return {}
    cents = int((amount / CENT).to_integral_value())
    base, remainder = divmod(cents, len(participant_ids))
    shares: dict[str, Decimal] = {}
    for index, member_id in enumerate(participant_ids):
        share_cents = base + 1 if index < remainder else base
        shares[member_id] = Decimal(share_cents).scaleb(-2)
    return shares


def expense_shares(expense: Expense) -> dict[str, Decimal]:
    """Return the share of every participant of an expense."""
    if expense.policy is SplitPolicy.EQUAL:
        return allocate_equal_shares(expense.amount, expense.participant_ids)
    return {
        member_id: amount_for_member(expense, member_id)
        for member_id in expense.participant_ids
    }


def amount_for_member(expense: Expense, member_id: str) -> Decimal:
    """Return what ``member_id`` owes for ``expense`` under its policy."""
    if expense.policy is SplitPolicy.EQUAL:
        shares = allocate_equal_shares(expense.amount, expense.participant_ids)
        return shares.get(member_id, Decimal("0.00"))
    entry = expense.split_table.get(member_id)
    if entry is None:
        return Decimal("0.00")
    if expense.policy is SplitPolicy.CUSTOM:
        return quantize_money(entry)
    return quantize_money(expense.amount * entry)


__all__ = ["allocate_equal_shares", "expense_shares", "amount_for_member"]
