"""Domain validation helpers.

Validators raise ``InvalidLedgerInputError`` before any wallet state is
touched, so a rejected call never leaves a partial mutation behind.
"""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from enum import Enum
from logging import Logger
from typing import TypeVar

from src.domain.constants import PERCENTAGE_TOTAL
from src.domain.errors import InvalidLedgerInputError, MemberNotFoundError
from src.domain.models import Member, SplitPolicy, Wallet
from src.utils.decimal_utils import coerce_decimal, quantize_money

EnumT = TypeVar("EnumT", bound=Enum)


def ensure_wallet_active(wallet: Wallet) -> None:
    """Reject mutations on a deactivated wallet."""
    if not wallet.is_active:
        raise InvalidLedgerInputError(
            f"Wallet {wallet.wallet_id} is inactive and cannot be modified"
        )


def require_member(
    wallet: Wallet,
    member_id: str,
    *,
    active: bool = False,
) -> Member:
    """Return a wallet member, optionally requiring it to be active.

    Raises:
        MemberNotFoundError: If the id is unknown in this wallet.
        InvalidLedgerInputError: If ``active`` is set and the member left.
    """
    member = wallet.member(member_id)
    if member is None:
        raise MemberNotFoundError(member_id, wallet.wallet_id)
    if active and not member.is_active:
        raise InvalidLedgerInputError(
            f"Member {member_id} is inactive in wallet {wallet.wallet_id}"
        )
    return member


def validate_positive_amount(value, label: str = "amount") -> Decimal:
    """Return ``value`` rounded to cents, rejecting non-positive amounts."""
    try:
        amount = quantize_money(value)
    except ValueError as exc:
        raise InvalidLedgerInputError(f"Invalid {label}: {value!r}") from exc
    if amount <= 0:
        raise InvalidLedgerInputError(
            f"The {label} must be positive, got {value!r}"
        )
    return amount


def coerce_choice(enum_cls: type[EnumT], value, label: str) -> EnumT:
    """Resolve an enum member from itself, its value or its name."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        pass
    if isinstance(value, str) and value.upper() in enum_cls.__members__:
        return enum_cls[value.upper()]
    allowed = ", ".join(str(item.value) for item in enum_cls)
    raise InvalidLedgerInputError(
        f"Unsupported {label}: {value!r}. Expected one of: {allowed}"
    )


def validate_participants(
    wallet: Wallet,
    participant_ids: Iterable[str],
) -> tuple[str, ...]:
    """Return participant ids once checked against the wallet roster."""
    participants = tuple(participant_ids)
    if not participants:
        raise InvalidLedgerInputError(
            "An expense needs at least one participant"
        )
    if len(set(participants)) != len(participants):
        raise InvalidLedgerInputError(
            f"Duplicate participants in {list(participants)}"
        )
    for member_id in participants:
        require_member(wallet, member_id, active=True)
    return participants


def validate_split_table(
    policy: SplitPolicy,
    participant_ids: tuple[str, ...],
    split_table: Mapping[str, object] | None,
) -> dict[str, Decimal]:
    """Normalize the split table of an expense.

    Entries for ids outside ``participant_ids`` are dropped. CUSTOM entries
    are rounded to cents and must not be negative; PERCENTAGE entries are
    fractions between 0 and 1.

    Returns:
        dict[str, Decimal]: Table keyed by participant id, empty for EQUAL.
    """
    if not policy.requires_split_table:
        return {}
    table = split_table or {}
    missing = [pid for pid in participant_ids if pid not in table]
    if missing:
        raise InvalidLedgerInputError(
            f"{policy.value} is missing split entries for {missing}"
        )
    normalized: dict[str, Decimal] = {}
    for member_id in participant_ids:
        raw = table[member_id]
        try:
            if policy is SplitPolicy.CUSTOM:
                value = quantize_money(raw)
            else:
                value = coerce_decimal(raw)
        except ValueError as exc:
            raise InvalidLedgerInputError(
                f"Invalid split entry for {member_id}: {raw!r}"
            ) from exc
        if value < 0:
            raise InvalidLedgerInputError(
                f"Split entry for {member_id} cannot be negative: {raw!r}"
            )
        if policy is SplitPolicy.PERCENTAGE and value > PERCENTAGE_TOTAL:
            raise InvalidLedgerInputError(
                f"Percentage for {member_id} must be between 0 and 1: {raw!r}"
            )
        normalized[member_id] = value
    return normalized


def warn_on_split_mismatch(
    policy: SplitPolicy,
    amount: Decimal,
    split_table: Mapping[str, Decimal],
    logger: Logger,
) -> None:
    """Warn when a split table does not cover the expense exactly.

    Mismatches are accepted; each member is charged its own entry only.

    Args:
        policy: Split policy of the expense.
        amount: Expense amount.
        split_table: Normalized split table.
        logger: Logger used for warnings.
    """
    total = sum(split_table.values(), Decimal("0"))
    if policy is SplitPolicy.CUSTOM and total != amount:
        logger.warning(
            f"Custom split entries sum to {total} for an expense of {amount}"
        )
    if policy is SplitPolicy.PERCENTAGE and total != PERCENTAGE_TOTAL:
        logger.warning(
            f"Percentage split entries sum to {total} instead of 1"
        )


def validate_settlement_parties(
    wallet: Wallet,
    from_member_id: str,
    to_member_id: str,
) -> None:
    """Check both sides of a settlement exist and differ."""
    if from_member_id == to_member_id:
        raise InvalidLedgerInputError(
            f"A settlement needs two different members, got {from_member_id}"
        )
    require_member(wallet, from_member_id)
    require_member(wallet, to_member_id)


__all__ = [
    "ensure_wallet_active",
    "require_member",
    "validate_positive_amount",
    "coerce_choice",
    "validate_participants",
    "validate_split_table",
    "warn_on_split_mismatch",
    "validate_settlement_parties",
]
