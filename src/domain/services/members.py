"""Member registry operations on a wallet."""

from dataclasses import replace
from datetime import datetime

from src.domain.errors import InvalidLedgerInputError
from src.domain.models import Member, MemberStatus, Wallet
from src.domain.services.debts import refresh_member_balances
from src.domain.services.validation import ensure_wallet_active, require_member


def add_member(
    wallet: Wallet,
    member_id: str,
    name: str,
    contact: str,
    *,
    joined_at: datetime,
) -> Member:
    """Append a new active member with zeroed balances.

    Contact handles may repeat; identifiers come from the identity
    collaborator and only need to be unique within the wallet.

    Raises:
        InvalidLedgerInputError: If the wallet is inactive, the name is
            blank or the id is already taken.
    """
    ensure_wallet_active(wallet)
    cleaned_name = (name or "").strip()
    if not cleaned_name:
        raise InvalidLedgerInputError("A member needs a non-empty name")
    if wallet.member(member_id) is not None:
        raise InvalidLedgerInputError(
            f"Member id {member_id} already exists in wallet {wallet.wallet_id}"
        )
    member = Member(
        member_id=member_id,
        name=cleaned_name,
        contact=(contact or "").strip(),
        joined_at=joined_at,
    )
    wallet.members.append(member)
    refresh_member_balances(wallet)
    return wallet.member(member_id)


def deactivate_member(wallet: Wallet, member_id: str) -> Member:
    """Mark a member inactive without touching its history.

    Prior expenses and settlements keep the member id, so any outstanding
    balance stays visible after the recompute.
    """
    ensure_wallet_active(wallet)
    require_member(wallet, member_id)
    wallet.members = [
        replace(member, status=MemberStatus.INACTIVE)
        if member.member_id == member_id
        else member
        for member in wallet.members
    ]
    refresh_member_balances(wallet)
    return wallet.member(member_id)


__all__ = ["add_member", "deactivate_member"]
