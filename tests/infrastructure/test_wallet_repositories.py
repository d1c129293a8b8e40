"""Tests for the in-memory and JSON file wallet repositories."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.errors import WalletPersistenceError
from src.domain.models import Wallet
from src.domain.services import add_member
from src.infrastructure.wallet_repositories import (
    InMemoryWalletRepository,
    JsonFileWalletRepository,
)

NOW = datetime(2024, 2, 29, tzinfo=timezone.utc)


def _wallet(wallet_id: str = "w1") -> Wallet:
    wallet = Wallet(
        wallet_id=wallet_id,
        name="Flat",
        created_by_member_id="a",
        created_at=NOW,
        updated_at=NOW,
        total_spent=Decimal("12.50"),
    )
    add_member(wallet, "a", "Ana", "ana@example.com", joined_at=NOW)
    return wallet


def test_in_memory_repository_returns_detached_copies() -> None:
    repository = InMemoryWalletRepository()
    wallet = _wallet()

    repository.save(wallet)
    wallet.name = "Renamed after save"
    loaded = repository.load("w1")

    assert loaded.name == "Flat"
    assert loaded is not wallet
    assert repository.load("unknown") is None
    assert repository.list_wallet_ids() == ["w1"]


def test_json_repository_round_trips_files(tmp_path) -> None:
    repository = JsonFileWalletRepository(tmp_path / "wallets", logger=MagicMock())

    repository.save(_wallet("w2"))
    repository.save(_wallet("w1"))

    assert repository.list_wallet_ids() == ["w1", "w2"]
    assert repository.load("w1") == _wallet("w1")
    assert repository.load("w3") is None
    assert not list((tmp_path / "wallets").glob("*.tmp"))


def test_json_repository_lists_nothing_before_first_save(tmp_path) -> None:
    repository = JsonFileWalletRepository(tmp_path / "missing", logger=MagicMock())

    assert repository.list_wallet_ids() == []


def test_json_repository_wraps_corrupt_files(tmp_path) -> None:
    (tmp_path / "w1.json").write_text("{not json", encoding="utf-8")
    repository = JsonFileWalletRepository(tmp_path, logger=MagicMock())

    with pytest.raises(WalletPersistenceError):
        repository.load("w1")


def test_json_repository_rejects_path_like_ids(tmp_path) -> None:
    repository = JsonFileWalletRepository(tmp_path, logger=MagicMock())

    with pytest.raises(WalletPersistenceError):
        repository.save(_wallet("../escape"))


def test_json_repository_wraps_write_errors(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    repository = JsonFileWalletRepository(blocker / "wallets", logger=MagicMock())

    with pytest.raises(WalletPersistenceError):
        repository.save(_wallet())
