"""Tests for the show_wallet_cli adapter."""

from unittest.mock import MagicMock

from src.adapters import show_wallet_cli
from src.application.use_cases.get_wallet_analytics import (
    GetWalletAnalyticsUseCase,
)
from src.application.use_cases.manage_shared_wallets import (
    SharedWalletService,
)
from src.application.use_cases.seed_sample_wallet import (
    SeedSampleWalletUseCase,
)
from src.infrastructure.wallet_repositories import InMemoryWalletRepository


def _wire(monkeypatch, service, fake_logger):
    monkeypatch.setattr(show_wallet_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        show_wallet_cli,
        "build_wallet_service",
        lambda: service,
    )
    monkeypatch.setattr(
        show_wallet_cli,
        "build_wallet_analytics_use_case",
        lambda svc: GetWalletAnalyticsUseCase(svc, logger=MagicMock()),
    )


def _service() -> SharedWalletService:
    return SharedWalletService(
        repository=InMemoryWalletRepository(),
        notifier=MagicMock(),
        logger=MagicMock(),
    )


def test_main_prints_balances_and_debts(monkeypatch, capsys):
    """The CLI should list members and the simplified debts."""
    service = _service()
    wallet = SeedSampleWalletUseCase(service).execute().wallet
    monkeypatch.setenv("WALLET_ID", wallet.wallet_id)
    _wire(monkeypatch, service, MagicMock())

    show_wallet_cli.main()

    out = capsys.readouterr().out
    assert "Apartment Expenses (active, 3 members)" in out
    assert "Total spent: $180.00, unsettled: $180.00" in out
    assert "  You: owes $20.00, is owed $80.00" in out
    assert "Alex owes You $40.00" in out
    assert "Jordan owes Alex $20.00" in out


def test_main_reports_no_debts(monkeypatch, capsys):
    service = _service()
    wallet = service.create_wallet("Empty", "Sam", "sam@example.com")
    monkeypatch.setenv("WALLET_ID", wallet.wallet_id)
    _wire(monkeypatch, service, MagicMock())

    show_wallet_cli.main()

    assert "No debts found!" in capsys.readouterr().out


def test_main_logs_unknown_wallet(monkeypatch, capsys):
    fake_logger = MagicMock()
    monkeypatch.setenv("WALLET_ID", "missing")
    _wire(monkeypatch, _service(), fake_logger)

    show_wallet_cli.main()

    fake_logger.error.assert_called_once()
    assert capsys.readouterr().out == ""


def test_main_requires_wallet_id(monkeypatch, capsys):
    fake_logger = MagicMock()
    monkeypatch.delenv("WALLET_ID", raising=False)
    _wire(monkeypatch, _service(), fake_logger)

    show_wallet_cli.main()

    fake_logger.warning.assert_called_once()
    assert capsys.readouterr().out == ""
