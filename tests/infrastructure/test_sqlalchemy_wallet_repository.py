"""Tests for the SqlAlchemyWalletRepository against in-memory SQLite."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError

from src.domain.errors import WalletPersistenceError
from src.domain.models import ExpenseCategory, Wallet
from src.domain.services import add_expense, add_member
from src.infrastructure.sqlalchemy_wallet_repository import (
    SqlAlchemyWalletRepository,
)

NOW = datetime(2024, 8, 1, tzinfo=timezone.utc)


def _db_port():
    db_port = MagicMock()
    db_port.get_wallet_engine.return_value = create_engine("sqlite://")
    return db_port


def _wallet(wallet_id: str) -> Wallet:
    wallet = Wallet(
        wallet_id=wallet_id,
        name="Club",
        created_by_member_id="a",
        created_at=NOW,
        updated_at=NOW,
    )
    add_member(wallet, "a", "Ana", "", joined_at=NOW)
    add_member(wallet, "b", "Ben", "", joined_at=NOW)
    return wallet


def test_save_then_load_returns_equal_wallet() -> None:
    repository = SqlAlchemyWalletRepository(_db_port(), logger=MagicMock())
    wallet = _wallet("w1")

    repository.save(wallet)

    assert repository.load("w1") == wallet
    assert repository.load("missing") is None


def test_save_upserts_existing_rows() -> None:
    repository = SqlAlchemyWalletRepository(_db_port(), logger=MagicMock())
    wallet = _wallet("w1")
    repository.save(wallet)

    add_expense(
        wallet,
        "e1",
        "44.00",
        "Court booking",
        ExpenseCategory.ENTERTAINMENT,
        "a",
        ["a", "b"],
        now=NOW,
        logger=MagicMock(),
    )
    repository.save(wallet)
    repository.save(_wallet("w0"))

    assert repository.list_wallet_ids() == ["w0", "w1"]
    assert repository.load("w1").total_spent == Decimal("44.00")


def test_database_errors_become_persistence_errors() -> None:
    engine = MagicMock()
    engine.begin.side_effect = OperationalError(
        "CREATE TABLE",
        {},
        Exception("database is locked"),
    )
    db_port = MagicMock()
    db_port.get_wallet_engine.return_value = engine
    repository = SqlAlchemyWalletRepository(db_port, logger=MagicMock())

    with pytest.raises(WalletPersistenceError, match="Cannot save wallet w1"):
        repository.save(_wallet("w1"))


def test_missing_database_configuration_becomes_persistence_error() -> None:
    db_port = MagicMock()
    db_port.get_wallet_engine.side_effect = RuntimeError(
        "Missing environment variable: WALLET_DB_URL"
    )
    repository = SqlAlchemyWalletRepository(db_port, logger=MagicMock())

    with pytest.raises(WalletPersistenceError, match="WALLET_DB_URL"):
        repository.save(_wallet("w1"))
    with pytest.raises(WalletPersistenceError):
        repository.load("w1")
    with pytest.raises(WalletPersistenceError):
        repository.list_wallet_ids()
