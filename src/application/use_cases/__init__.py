"""Application use cases package."""

from .get_wallet_analytics import GetWalletAnalyticsUseCase, WalletAnalytics
from .manage_shared_wallets import SharedWalletService, format_amount
from .seed_sample_wallet import SampleWalletResult, SeedSampleWalletUseCase

__all__ = [
    "GetWalletAnalyticsUseCase",
    "WalletAnalytics",
    "SharedWalletService",
    "format_amount",
    "SampleWalletResult",
    "SeedSampleWalletUseCase",
]
