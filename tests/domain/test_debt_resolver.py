"""Tests for debt matrix derivation and simplification."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models import (
    DebtEntry,
    ExpenseCategory,
    PaymentMethod,
    SplitPolicy,
    Wallet,
)
from src.domain.services import (
    add_expense,
    add_member,
    add_settlement,
    compute_debt_matrix,
    confirm_settlement,
    deactivate_member,
    minimize_transfers,
    settle_expense,
    simplify_debts,
)

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


def _wallet(*names: str) -> Wallet:
    """Create a wallet whose member ids are the lowercased names."""
    wallet = Wallet(
        wallet_id="w1",
        name="Flat",
        created_by_member_id=names[0].lower(),
        created_at=NOW,
        updated_at=NOW,
    )
    for name in names:
        add_member(
            wallet,
            name.lower(),
            name,
            f"{name.lower()}@example.com",
            joined_at=NOW,
        )
    return wallet


def _expense(wallet, expense_id, amount, payer, participants, **kwargs):
    return add_expense(
        wallet,
        expense_id,
        Decimal(amount),
        "Shared cost",
        ExpenseCategory.OTHER,
        payer,
        participants,
        now=NOW,
        logger=MagicMock(),
        **kwargs,
    )


def _settle(wallet, settlement_id, from_id, to_id, amount, confirm=True):
    add_settlement(
        wallet,
        settlement_id,
        from_id,
        to_id,
        Decimal(amount),
        PaymentMethod.VENMO,
        now=NOW,
    )
    if confirm:
        confirm_settlement(wallet, settlement_id)


def _assert_conserved(wallet: Wallet) -> None:
    owed = sum(member.total_owed for member in wallet.members)
    owed_to = sum(member.total_owed_to for member in wallet.members)
    assert owed == owed_to


def test_end_to_end_equal_split_and_settlement() -> None:
    """A confirmed payment from B clears B's edge and leaves C's."""
    wallet = _wallet("A", "B", "C")
    _expense(wallet, "e1", "120.00", "a", ["a", "b", "c"])

    matrix = compute_debt_matrix(wallet)
    assert matrix["b"]["a"] == Decimal("40.00")
    assert matrix["c"]["a"] == Decimal("40.00")

    _settle(wallet, "s1", "b", "a", "40.00")

    assert simplify_debts(wallet) == [
        DebtEntry(from_member_id="c", to_member_id="a", amount=Decimal("40.00"))
    ]
    assert wallet.member("a").total_owed_to == Decimal("40.00")
    assert wallet.member("a").net_balance == Decimal("40.00")
    assert wallet.member("c").total_owed == Decimal("40.00")
    _assert_conserved(wallet)


def test_unconfirmed_settlement_does_not_change_debts() -> None:
    wallet = _wallet("A", "B")
    _expense(wallet, "e1", "50.00", "a", ["a", "b"])

    _settle(wallet, "s1", "b", "a", "25.00", confirm=False)

    assert compute_debt_matrix(wallet)["b"]["a"] == Decimal("25.00")
    assert wallet.member("b").total_owed == Decimal("25.00")


def test_confirming_twice_matches_confirming_once() -> None:
    """Confirmation should be idempotent."""
    wallet = _wallet("A", "B")
    _expense(wallet, "e1", "80.00", "a", ["a", "b"])
    _settle(wallet, "s1", "b", "a", "15.00")
    once = compute_debt_matrix(wallet)

    confirm_settlement(wallet, "s1")

    assert compute_debt_matrix(wallet) == once
    assert once["b"]["a"] == Decimal("25.00")


def test_overpayment_drives_pair_negative_without_flipping() -> None:
    """Each directed pair is tracked on its own."""
    wallet = _wallet("A", "B")
    _expense(wallet, "e1", "30.00", "a", ["a", "b"])
    _settle(wallet, "s1", "b", "a", "20.00")

    matrix = compute_debt_matrix(wallet)

    assert matrix["b"]["a"] == Decimal("-5.00")
    assert matrix["a"]["b"] == Decimal("0.00")
    assert simplify_debts(wallet) == []
    assert wallet.member("b").total_owed == Decimal("-5.00")
    _assert_conserved(wallet)


def test_opposite_directions_are_reported_separately() -> None:
    wallet = _wallet("A", "B")
    _expense(wallet, "e1", "60.00", "a", ["a", "b"])
    _expense(wallet, "e2", "20.00", "b", ["a", "b"])

    assert simplify_debts(wallet) == [
        DebtEntry("b", "a", Decimal("30.00")),
        DebtEntry("a", "b", Decimal("10.00")),
    ]


def test_deactivated_member_keeps_outstanding_debt() -> None:
    """Leaving a wallet should not erase what the member still owes."""
    wallet = _wallet("A", "B", "C")
    _expense(wallet, "e1", "90.00", "a", ["a", "b", "c"])

    deactivate_member(wallet, "c")

    member = wallet.member("c")
    assert member is not None
    assert member.is_active is False
    assert DebtEntry("c", "a", Decimal("30.00")) in simplify_debts(wallet)
    assert member.total_owed == Decimal("30.00")


def test_settled_expense_stops_contributing() -> None:
    """Settled expenses leave the matrix but stay in total_spent."""
    wallet = _wallet("A", "B", "C")
    _expense(wallet, "e1", "120.00", "a", ["a", "b", "c"])

    settle_expense(wallet, "e1", now=NOW)

    assert simplify_debts(wallet) == []
    assert wallet.total_spent == Decimal("120.00")
    assert wallet.unsettled_amount == Decimal("0.00")
    assert all(member.total_owed == 0 for member in wallet.members)


def test_custom_split_mismatch_is_accepted() -> None:
    """Entries summing below the amount are charged as listed."""
    wallet = _wallet("A", "B", "C")
    logger = MagicMock()

    add_expense(
        wallet,
        "e1",
        Decimal("100.00"),
        "Dinner",
        ExpenseCategory.ENTERTAINMENT,
        "a",
        ["b", "c"],
        SplitPolicy.CUSTOM,
        {"b": "10.00", "c": "20.00"},
        now=NOW,
        logger=logger,
    )

    matrix = compute_debt_matrix(wallet)
    assert matrix["b"]["a"] == Decimal("10.00")
    assert matrix["c"]["a"] == Decimal("20.00")
    assert wallet.total_spent == Decimal("100.00")
    logger.warning.assert_called_once()


def test_payer_outside_participants_is_owed_every_share() -> None:
    wallet = _wallet("A", "B", "C")
    _expense(wallet, "e1", "50.00", "a", ["b", "c"])

    assert wallet.member("a").total_owed_to == Decimal("50.00")
    assert wallet.member("a").total_owed == Decimal("0.00")


def test_conservation_holds_across_mixed_operations() -> None:
    wallet = _wallet("A", "B", "C", "D")
    _expense(wallet, "e1", "100.00", "a", ["a", "b", "c"])
    _expense(
        wallet,
        "e2",
        "75.50",
        "b",
        ["a", "c", "d"],
        policy=SplitPolicy.PERCENTAGE,
        split_table={"a": "0.2", "c": "0.3", "d": "0.5"},
    )
    _settle(wallet, "s1", "c", "a", "12.34")
    _settle(wallet, "s2", "d", "b", "50.00", confirm=False)
    _expense(wallet, "e3", "9.99", "d", ["a", "b", "c", "d"])

    _assert_conserved(wallet)


def test_minimize_transfers_collapses_cycles() -> None:
    """A -> B -> C -> A cycles need no transfer once netted."""
    wallet = _wallet("A", "B", "C")
    _expense(wallet, "e1", "10.00", "a", ["b"])
    _expense(wallet, "e2", "10.00", "b", ["c"])
    _expense(wallet, "e3", "10.00", "c", ["a"])

    assert len(simplify_debts(wallet)) == 3
    assert minimize_transfers(wallet) == []


def test_minimize_transfers_matches_largest_balances() -> None:
    wallet = _wallet("A", "B", "C")
    _expense(wallet, "e1", "90.00", "a", ["a", "b", "c"])
    _expense(wallet, "e2", "30.00", "b", ["b", "c"])

    transfers = minimize_transfers(wallet)

    assert transfers == [
        DebtEntry("c", "a", Decimal("45.00")),
        DebtEntry("b", "a", Decimal("15.00")),
    ]
