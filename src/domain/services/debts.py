"""Debt resolution for shared wallets.

The debt matrix is always derived from scratch: unsettled expenses add
``debt[participant][payer]``, confirmed settlements subtract from
``debt[payer][payee]``. Each directed pair is tracked independently, so an
overpaid pair goes negative instead of flipping direction.
"""

from dataclasses import replace
from decimal import Decimal

from src.domain.constants import DEBT_EPSILON
from src.domain.models import DebtEntry, Wallet
from src.domain.services.splits import expense_shares

DebtMatrix = dict[str, dict[str, Decimal]]

ZERO = Decimal("0.00")


def compute_debt_matrix(wallet: Wallet) -> DebtMatrix:
    """Build the pairwise debt matrix of a wallet.

    Args:
        wallet: Wallet whose ledger and settlement log are read.

    Returns:
        DebtMatrix: ``matrix[debtor][creditor]`` amounts for every ordered
        pair of members.
    """
    member_ids = wallet.member_ids
    matrix: DebtMatrix = {
        debtor: {
            creditor: ZERO for creditor in member_ids if creditor != debtor
        }
        for debtor in member_ids
    }

    for expense in wallet.expenses:
        if expense.is_settled:
            continue
        payer = expense.payer_id
        for member_id, share in expense_shares(expense).items():
            if member_id == payer:
                continue
            row = matrix.setdefault(member_id, {})
            row[payer] = row.get(payer, ZERO) + share

    for settlement in wallet.settlements:
        if not settlement.is_confirmed:
            continue
        row = matrix.setdefault(settlement.from_member_id, {})
        row[settlement.to_member_id] = (
            row.get(settlement.to_member_id, ZERO) - settlement.amount
        )

    return matrix


def refresh_member_balances(wallet: Wallet) -> DebtMatrix:
    """Recompute ``total_owed`` and ``total_owed_to`` for every member.

    Returns:
        DebtMatrix: The matrix the balances were projected from.
    """
    matrix = compute_debt_matrix(wallet)
    wallet.members = [
        replace(
            member,
            total_owed=sum(
                matrix.get(member.member_id, {}).values(), ZERO
            ),
            total_owed_to=sum(
                (row.get(member.member_id, ZERO) for row in matrix.values()),
                ZERO,
            ),
        )
        for member in wallet.members
    ]
    return matrix


def simplify_debts(
    wallet: Wallet,
    matrix: DebtMatrix | None = None,
) -> list[DebtEntry]:
    """Read out positive pairwise debts, largest first.

    This is a direct read-out of the matrix: opposite directions and cycles
    between members are not netted against each other.
    """
    resolved = matrix if matrix is not None else compute_debt_matrix(wallet)
    entries = [
        DebtEntry(
            from_member_id=debtor,
            to_member_id=creditor,
            amount=amount,
        )
        for debtor, row in resolved.items()
        for creditor, amount in row.items()
        if amount > DEBT_EPSILON
    ]
    return sorted(entries, key=lambda entry: entry.amount, reverse=True)


def net_balances(
    wallet: Wallet,
    matrix: DebtMatrix | None = None,
) -> dict[str, Decimal]:
    """Return owed-to minus owed for every member id in the matrix."""
    resolved = matrix if matrix is not None else compute_debt_matrix(wallet)
    balances: dict[str, Decimal] = {member_id: ZERO for member_id in resolved}
    for debtor, row in resolved.items():
        for creditor, amount in row.items():
            balances[debtor] = balances.get(debtor, ZERO) - amount
            balances[creditor] = balances.get(creditor, ZERO) + amount
    return balances


def minimize_transfers(
    wallet: Wallet,
    matrix: DebtMatrix | None = None,
) -> list[DebtEntry]:
    """Settle net balances with as few transfers as the greedy match allows.

    Largest debtors are matched with largest creditors until one side runs
    out. Unlike ``simplify_debts`` this collapses cycles between members.
    """
    balances = net_balances(wallet, matrix)
    debtors = [
        [member_id, -amount]
        for member_id, amount in balances.items()
        if amount < -DEBT_EPSILON
    ]
    creditors = [
        [member_id, amount]
        for member_id, amount in balances.items()
        if amount > DEBT_EPSILON
    ]
    debtors.sort(key=lambda item: item[1], reverse=True)
    creditors.sort(key=lambda item: item[1], reverse=True)

    transfers: list[DebtEntry] = []
    i = 0
    j = 0
    while i < len(debtors) and j < len(creditors):
        debtor = debtors[i]
        creditor = creditors[j]
        amount = min(debtor[1], creditor[1])
        transfers.append(
            DebtEntry(
                from_member_id=debtor[0],
                to_member_id=creditor[0],
                amount=amount,
            )
        )
        debtor[1] -= amount
        creditor[1] -= amount
        if debtor[1] <= 0:
            i += 1
        if creditor[1] <= 0:
            j += 1
    return transfers


__all__ = [
    "DebtMatrix",
    "compute_debt_matrix",
    "refresh_member_balances",
    "simplify_debts",
    "net_balances",
    "minimize_transfers",
]
