"""Wallet store backed by a SQL database through SQLAlchemy.

Each wallet is one row of ``shared_wallets`` keyed by ``wallet_id``; the
full record is kept as JSON text in ``payload`` and upserted on every save.
"""

import json

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.wallet_repository import WalletRepositoryPort
from src.domain.errors import WalletPersistenceError
from src.domain.models import Wallet
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.wallet_records import (
    encode_datetime,
    wallet_from_record,
    wallet_to_record,
)


CREATE_SHARED_WALLETS_SQL = """
CREATE TABLE IF NOT EXISTS shared_wallets (
    wallet_id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    is_active BOOLEAN NOT NULL,
    updated_at TEXT NOT NULL,
    payload TEXT NOT NULL
)
"""

UPSERT_WALLET_SQL = text(
    """
    INSERT INTO shared_wallets (
        wallet_id,
        name,
        is_active,
        updated_at,
        payload
    )
    VALUES (
        :wallet_id,
        :name,
        :is_active,
        :updated_at,
        :payload
    )
    ON CONFLICT (wallet_id) DO UPDATE SET
        name = excluded.name,
        is_active = excluded.is_active,
        updated_at = excluded.updated_at,
        payload = excluded.payload
    """
)

SELECT_WALLET_SQL = text(
    """
    SELECT payload
    FROM shared_wallets
    WHERE wallet_id = :wallet_id
    """
)

SELECT_WALLET_IDS_SQL = text(
    """
    SELECT wallet_id
    FROM shared_wallets
    ORDER BY wallet_id
    """
)


class SqlAlchemyWalletRepository(WalletRepositoryPort):
    """Wallet repository storing JSON snapshots in a SQL table."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the wallet engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._prepared = False

    def load(self, wallet_id: str) -> Wallet | None:
        """Return the stored wallet, or None if the id is unknown.

        Raises:
            WalletPersistenceError: If the query or the decoding fails.
        """
        try:
            self._ensure_table()
            engine = self._engine()
            with engine.connect() as conn:
                row = conn.execute(
                    SELECT_WALLET_SQL,
                    {"wallet_id": wallet_id},
                ).first()
        except SQLAlchemyError as exc:
            raise WalletPersistenceError(
                f"Cannot load wallet {wallet_id}: {exc}"
            ) from exc
        if row is None:
            return None
        try:
            record = json.loads(row.payload)
        except json.JSONDecodeError as exc:
            raise WalletPersistenceError(
                f"Stored payload of wallet {wallet_id} is not JSON"
            ) from exc
        return wallet_from_record(record)

    def save(self, wallet: Wallet) -> None:
        """Upsert the wallet snapshot.

        Raises:
            WalletPersistenceError: If the statement fails.
        """
        params = {
            "wallet_id": wallet.wallet_id,
            "name": wallet.name,
            "is_active": wallet.is_active,
            "updated_at": encode_datetime(wallet.updated_at),
            "payload": json.dumps(wallet_to_record(wallet)),
        }
        try:
            self._ensure_table()
            engine = self._engine()
            with engine.begin() as conn:
                conn.execute(UPSERT_WALLET_SQL, params)
        except SQLAlchemyError as exc:
            raise WalletPersistenceError(
                f"Cannot save wallet {wallet.wallet_id}: {exc}"
            ) from exc
        self._logger.debug(f"Saved wallet {wallet.wallet_id} to shared_wallets")

    def list_wallet_ids(self) -> list[str]:
        try:
            self._ensure_table()
            engine = self._engine()
            with engine.connect() as conn:
                rows = conn.execute(SELECT_WALLET_IDS_SQL).all()
        except SQLAlchemyError as exc:
            raise WalletPersistenceError(
                f"Cannot list wallets: {exc}"
            ) from exc
        return [row.wallet_id for row in rows]

    def _engine(self):
        """Return the wallet engine, wrapping configuration failures.

        Raises:
            WalletPersistenceError: If the engine cannot be created.
        """
        try:
            return self._db_port.get_wallet_engine()
        except (RuntimeError, SQLAlchemyError) as exc:
            raise WalletPersistenceError(
                f"Wallet database is unavailable: {exc}"
            ) from exc

    def _ensure_table(self) -> None:

        """Create the shared_wallets table once per repository."""
        if self._prepared:
            return
        engine = self._engine()
        with engine.begin() as conn:
            conn.exec_driver_sql(CREATE_SHARED_WALLETS_SQL)
        self._prepared = True


__all__ = ["SqlAlchemyWalletRepository"]
