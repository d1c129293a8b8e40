"""Settlement log operations on a wallet."""

from dataclasses import replace
from datetime import datetime

from src.domain.errors import SettlementNotFoundError
from src.domain.models import PaymentMethod, Settlement, Wallet
from src.domain.services.debts import refresh_member_balances
from src.domain.services.validation import (
    coerce_choice,
    ensure_wallet_active,
    validate_positive_amount,
    validate_settlement_parties,
)


def add_settlement(
    wallet: Wallet,
    settlement_id: str,
    from_member_id: str,
    to_member_id: str,
    amount,
    method: PaymentMethod | str = PaymentMethod.CASH,
    note: str | None = None,
    *,
    now: datetime,
) -> Settlement:
    """Record an unconfirmed payment between two members.

    Inactive members may still settle their outstanding balances.
    Unconfirmed settlements do not change the debt matrix.
    """
    ensure_wallet_active(wallet)
    validate_settlement_parties(wallet, from_member_id, to_member_id)
    resolved_amount = validate_positive_amount(amount)
    resolved_method = coerce_choice(PaymentMethod, method, "payment method")
    cleaned_note = note.strip() if note else None

    settlement = Settlement(
        settlement_id=settlement_id,
        from_member_id=from_member_id,
        to_member_id=to_member_id,
        amount=resolved_amount,
        method=resolved_method,
        date=now,
        note=cleaned_note or None,
    )
    wallet.settlements.append(settlement)
    refresh_member_balances(wallet)
    return settlement


def confirm_settlement(wallet: Wallet, settlement_id: str) -> Settlement:
    """Confirm a settlement so it is netted into the debt matrix.

    Confirming an already confirmed settlement changes nothing.
    """
    ensure_wallet_active(wallet)
    current = wallet.settlement(settlement_id)
    if current is None:
        raise SettlementNotFoundError(settlement_id, wallet.wallet_id)
    if not current.is_confirmed:
        confirmed = replace(current, is_confirmed=True)
        wallet.settlements = [
            confirmed if item.settlement_id == settlement_id else item
            for item in wallet.settlements
        ]
    refresh_member_balances(wallet)
    return wallet.settlement(settlement_id)


__all__ = ["add_settlement", "confirm_settlement"]
