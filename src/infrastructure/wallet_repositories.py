"""In-memory and JSON file adapters for wallet storage."""

import json
from pathlib import Path
import re

from src.application.ports.wallet_repository import WalletRepositoryPort
from src.domain.errors import WalletPersistenceError
from src.domain.models import Wallet
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.wallet_records import (
    wallet_from_record,
    wallet_to_record,
)


_SAFE_WALLET_ID = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.-]*$")


class InMemoryWalletRepository(WalletRepositoryPort):
    """Wallet store keeping encoded records in a dictionary.

    Records are copied through the record encoding, so stored snapshots do
    not share objects with live wallets.
    """

    def __init__(self) -> None:
        self._records: dict[str, dict] = {}

    def load(self, wallet_id: str) -> Wallet | None:
        record = self._records.get(wallet_id)
        if record is None:
            return None
        return wallet_from_record(record)

    def save(self, wallet: Wallet) -> None:
        self._records[wallet.wallet_id] = wallet_to_record(wallet)

    def list_wallet_ids(self) -> list[str]:
        return list(self._records)


class JsonFileWalletRepository(WalletRepositoryPort):
    """Wallet store writing one JSON document per wallet id."""

    def __init__(self, directory: Path | str, logger=None) -> None:
        """Initialize the store.

        Args:
            directory: Directory holding ``<wallet_id>.json`` files.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._directory = Path(directory)
        self._logger = logger or get_app_logger()

    def load(self, wallet_id: str) -> Wallet | None:
        """Return the wallet stored on disk, if any.

        Raises:
            WalletPersistenceError: If the file cannot be read or decoded.
        """
        path = self._path_for(wallet_id)
        if not path.exists():
            return None
        try:
            record = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise WalletPersistenceError(
                f"Cannot read wallet file {path}: {exc}"
            ) from exc
        return wallet_from_record(record)

    def save(self, wallet: Wallet) -> None:
        """Write the wallet atomically through a temporary file.

        Raises:
            WalletPersistenceError: If the file cannot be written.
        """
        path = self._path_for(wallet.wallet_id)
        payload = json.dumps(wallet_to_record(wallet), indent=2)
        tmp_path = self._directory / f"{wallet.wallet_id}.json.tmp"
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(payload, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as exc:
            raise WalletPersistenceError(
                f"Cannot write wallet file {path}: {exc}"
            ) from exc
        self._logger.debug(f"Saved wallet {wallet.wallet_id} to {path}")

    def list_wallet_ids(self) -> list[str]:
        if not self._directory.exists():
            return []
        return sorted(path.stem for path in self._directory.glob("*.json"))

    def _path_for(self, wallet_id: str) -> Path:
        if not _SAFE_WALLET_ID.match(wallet_id):
            raise WalletPersistenceError(
                f"Wallet id cannot be used as a file name: {wallet_id!r}"
            )
        return self._directory / f"{wallet_id}.json"


__all__ = ["InMemoryWalletRepository", "JsonFileWalletRepository"]
