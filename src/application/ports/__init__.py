"""Application ports package."""

from .activity import ActivityNotifierPort, IdGeneratorPort
from .database import DatabaseEnginePort
from .wallet_repository import WalletReaderPort, WalletRepositoryPort

__all__ = [
    "ActivityNotifierPort",
    "IdGeneratorPort",
    "DatabaseEnginePort",
    "WalletReaderPort",
    "WalletRepositoryPort",
]
