"""Factory helpers to select the wallet storage backend."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.wallet_repository import WalletRepositoryPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import SUPPORTED_BACKENDS, WalletStoreSettings
from src.infrastructure.sqlalchemy_wallet_repository import (
    SqlAlchemyWalletRepository,
)
from src.infrastructure.wallet_repositories import (
    InMemoryWalletRepository,
    JsonFileWalletRepository,
)


def create_wallet_repository(
    db_port: DatabaseEnginePort | None = None,
    logger=None,
    settings: WalletStoreSettings | None = None,
) -> WalletRepositoryPort:
    """Return a wallet repository implementation based on configuration.

    Args:
        db_port: Optional port providing the wallet engine (SQL backend).
        logger: Optional logger compatible with logging.Logger-like API.
        settings: Optional settings, read from the environment by default.

    Returns:
        WalletRepositoryPort: Concrete repository implementation.

    Raises:
        RuntimeError: If the JSON backend has no store path.
        ValueError: If the backend is not supported.
    """
    resolved_logger = logger or get_app_logger()
    resolved_settings = settings or WalletStoreSettings.from_env()
    backend = resolved_settings.backend

    if backend == "memory":
        resolved_logger.warning(
            "Using the in-memory wallet store; wallets are lost on exit"
        )
        return InMemoryWalletRepository()

    if backend == "json":
        if resolved_settings.store_path is None:
            raise RuntimeError("JSON wallet store requires WALLET_STORE_PATH.")
        return JsonFileWalletRepository(
            resolved_settings.store_path,
            logger=resolved_logger,
        )

    if backend == "sqlalchemy":
        return SqlAlchemyWalletRepository(
            db_port or SqlAlchemyDatabaseEngineAdapter(),
            logger=resolved_logger,
        )

    raise ValueError(
        "Unsupported wallet store backend: "
        f"{backend}. Expected one of {', '.join(SUPPORTED_BACKENDS)}."
    )


__all__ = ["create_wallet_repository"]
