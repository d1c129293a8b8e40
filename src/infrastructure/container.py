"""Composition root for wiring infrastructure adapters."""

from src.application.ports.activity import (
    ActivityNotifierPort,
    IdGeneratorPort,
)
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.wallet_repository import WalletRepositoryPort
from src.application.use_cases.get_wallet_analytics import (
    GetWalletAnalyticsUseCase,
)
from src.application.use_cases.manage_shared_wallets import (
    SharedWalletService,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.identity import UuidIdGenerator
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.notifications import UsageLogActivityNotifier
from src.infrastructure.settings import WalletStoreSettings
from src.infrastructure.wallet_repository_factory import (
    create_wallet_repository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_wallet_repository(
    db_port: DatabaseEnginePort | None = None,
) -> WalletRepositoryPort:
    """Return the configured wallet repository."""
    settings = WalletStoreSettings.from_env()
    resolved_db = db_port
    if settings.backend == "sqlalchemy":
        resolved_db = db_port or build_database_adapter()
    return create_wallet_repository(
        resolved_db,
        logger=get_app_logger(),
        settings=settings,
    )


def build_id_generator() -> IdGeneratorPort:
    """Return the identifier generator."""
    return UuidIdGenerator()


def build_activity_notifier() -> ActivityNotifierPort:
    """Return the activity notifier."""
    return UsageLogActivityNotifier()


def build_wallet_service(
    repository: WalletRepositoryPort | None = None,
) -> SharedWalletService:
    """Return the wallet service wired to the configured adapters."""
    return SharedWalletService(
        repository=repository or build_wallet_repository(),
        id_generator=build_id_generator(),
        notifier=build_activity_notifier(),
        logger=get_app_logger(),
    )


def build_wallet_analytics_use_case(
    service: SharedWalletService,
) -> GetWalletAnalyticsUseCase:
    """Return the analytics use case reading from the wallet service."""
    return GetWalletAnalyticsUseCase(service, logger=get_app_logger())


__all__ = [
    "build_database_adapter",
    "build_wallet_repository",
    "build_id_generator",
    "build_activity_notifier",
    "build_wallet_service",
    "build_wallet_analytics_use_case",
]
