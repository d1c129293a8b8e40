"""Record encoding of wallets for the persistence collaborators.

Wallets are stored as JSON-compatible records mirroring the domain model:
amounts and split entries as decimal strings, enums by value, timestamps as
ISO-8601 strings in UTC.
"""

from datetime import datetime, timezone
from decimal import Decimal
from types import MappingProxyType
from typing import Any

from src.domain.errors import WalletPersistenceError
from src.domain.models import (
    Expense,
    ExpenseCategory,
    Member,
    MemberStatus,
    PaymentMethod,
    Settlement,
    SplitPolicy,
    Wallet,
)
from src.utils.decimal_utils import coerce_decimal


RECORD_VERSION = 1


def encode_datetime(value: datetime) -> str:
    """Return an ISO-8601 UTC string; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def decode_datetime(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def wallet_to_record(wallet: Wallet) -> dict[str, Any]:
    """Encode a wallet and all of its records.

    Args:
        wallet: Wallet to encode.

    Returns:
        dict[str, Any]: JSON-compatible record.
    """
    return {
        "version": RECORD_VERSION,
        "id": wallet.wallet_id,
        "name": wallet.name,
        "description": wallet.description,
        "created_by_member_id": wallet.created_by_member_id,
        "created_at": encode_datetime(wallet.created_at),
        "updated_at": encode_datetime(wallet.updated_at),
        "is_active": wallet.is_active,
        "total_spent": str(wallet.total_spent),
        "currency": wallet.currency,
        "members": [_member_to_record(member) for member in wallet.members],
        "expenses": [
            _expense_to_record(expense) for expense in wallet.expenses
        ],
        "settlements": [
            _settlement_to_record(settlement)
            for settlement in wallet.settlements
        ],
    }


def wallet_from_record(record: dict[str, Any]) -> Wallet:
    """Decode a wallet record produced by ``wallet_to_record``.

    Raises:
        WalletPersistenceError: If the record is malformed.
    """
    try:
        version = record.get("version", RECORD_VERSION)
        if version != RECORD_VERSION:
            raise ValueError(f"unsupported record version {version}")
        return Wallet(
            wallet_id=record["id"],
            name=record["name"],
            description=record.get("description"),
            created_by_member_id=record["created_by_member_id"],
            created_at=decode_datetime(record["created_at"]),
            updated_at=decode_datetime(record["updated_at"]),
            is_active=bool(record.get("is_active", True)),
            total_spent=coerce_decimal(record["total_spent"]),
            currency=record["currency"],
            members=[_member_from_record(item) for item in record["members"]],
            expenses=[
                _expense_from_record(item) for item in record["expenses"]
            ],
            settlements=[
                _settlement_from_record(item)
                for item in record["settlements"]
            ],
        )
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise WalletPersistenceError(
            f"Malformed wallet record: {exc!r}"
        ) from exc


def _member_to_record(member: Member) -> dict[str, Any]:
    return {
        "id": member.member_id,
        "name": member.name,
        "contact": member.contact,
        "joined_at": encode_datetime(member.joined_at),
        "status": member.status.value,
        "total_owed": str(member.total_owed),
        "total_owed_to": str(member.total_owed_to),
    }


def _member_from_record(record: dict[str, Any]) -> Member:
    return Member(
        member_id=record["id"],
        name=record["name"],
        contact=record.get("contact", ""),
        joined_at=decode_datetime(record["joined_at"]),
        status=MemberStatus(record.get("status", MemberStatus.ACTIVE.value)),
        total_owed=coerce_decimal(record.get("total_owed", "0")),
        total_owed_to=coerce_decimal(record.get("total_owed_to", "0")),
    )


def _expense_to_record(expense: Expense) -> dict[str, Any]:
    return {
        "id": expense.expense_id,
        "amount": str(expense.amount),
        "description": expense.description,
        "category": expense.category.value,
        "payer_id": expense.payer_id,
        "participant_ids": list(expense.participant_ids),
        "policy": expense.policy.value,
        "split_table": {
            member_id: str(value)
            for member_id, value in expense.split_table.items()
        },
        "date": encode_datetime(expense.date),
        "is_settled": expense.is_settled,
        "created_at": encode_datetime(expense.created_at),
        "updated_at": encode_datetime(expense.updated_at),
    }


def _expense_from_record(record: dict[str, Any]) -> Expense:
    return Expense(
        expense_id=record["id"],
        amount=coerce_decimal(record["amount"]),
        description=record.get("description", ""),
        category=ExpenseCategory(record["category"]),
        payer_id=record["payer_id"],
        participant_ids=tuple(record["participant_ids"]),
        policy=SplitPolicy(record["policy"]),
        split_table=MappingProxyType(
            {
                member_id: coerce_decimal(value)
                for member_id, value in record.get("split_table", {}).items()
            }
        ),
        date=decode_datetime(record["date"]),
        is_settled=bool(record.get("is_settled", False)),
        created_at=decode_datetime(record["created_at"]),
        updated_at=decode_datetime(record["updated_at"]),
    )


def _settlement_to_record(settlement: Settlement) -> dict[str, Any]:
    return {
        "id": settlement.settlement_id,
        "from_member_id": settlement.from_member_id,
        "to_member_id": settlement.to_member_id,
        "amount": str(settlement.amount),
        "method": settlement.method.value,
        "date": encode_datetime(settlement.date),
        "note": settlement.note,
        "is_confirmed": settlement.is_confirmed,
    }


def _settlement_from_record(record: dict[str, Any]) -> Settlement:
    return Settlement(
        settlement_id=record["id"],
        from_member_id=record["from_member_id"],
        to_member_id=record["to_member_id"],
        amount=coerce_decimal(record["amount"]),
        method=PaymentMethod(record["method"]),
        date=decode_datetime(record["date"]),
        note=record.get("note"),
        is_confirmed=bool(record.get("is_confirmed", False)),
    )


__all__ = [
    "RECORD_VERSION",
    "encode_datetime",
    "decode_datetime",
    "wallet_to_record",
    "wallet_from_record",
]
