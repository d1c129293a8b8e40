"""Port for durable wallet storage."""

from typing import Protocol

from src.domain.models import Wallet


class WalletReaderPort(Protocol):
    """Port exposing the current in-memory state of wallets."""

    def get_wallet(self, wallet_id: str) -> Wallet:
        """Return the wallet or raise WalletNotFoundError."""


class WalletRepositoryPort(Protocol):
    """Port exposing wallet snapshots keyed by wallet id.

    Implementations raise ``WalletPersistenceError`` when the underlying
    store fails.
    """

    def load(self, wallet_id: str) -> Wallet | None:
        """Return the stored wallet, or None when the id is unknown."""

    def save(self, wallet: Wallet) -> None:
        """Store the full snapshot of a wallet, replacing any previous one."""

    def list_wallet_ids(self) -> list[str]:
        """Return the ids of every stored wallet."""


__all__ = ["WalletReaderPort", "WalletRepositoryPort"]
