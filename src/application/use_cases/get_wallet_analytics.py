"""Use case to summarize the spending of a shared wallet."""

from src.application.ports.wallet_repository import WalletReaderPort
from src.domain.models import WalletAnalytics
from src.domain.services import totals_by_category, totals_by_month
from src.infrastructure.logging.logger import get_app_logger


class GetWalletAnalyticsUseCase:
    """Compute category and monthly spending totals for a wallet."""

    def __init__(self, wallets: WalletReaderPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            wallets: Port returning the current state of a wallet.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._wallets = wallets
        self._logger = logger or get_app_logger()

    def execute(self, wallet_id: str) -> WalletAnalytics:
        """Return spending totals for the wallet.

        Args:
            wallet_id: Identifier of the wallet to summarize.

        Returns:
            WalletAnalytics: Totals by category and by month, plus the
            overall and unsettled amounts.
        """
        wallet = self._wallets.get_wallet(wallet_id)
        by_category = totals_by_category(wallet.expenses)
        by_month = totals_by_month(wallet.expenses)
        self._logger.info(
            f"Computed analytics for wallet {wallet_id}: "
            f"{len(wallet.expenses)} expenses, {len(by_month)} months"
        )
        return WalletAnalytics(
            wallet_id=wallet.wallet_id,
            currency_code=wallet.currency,
            total_spent=wallet.total_spent,
            unsettled_amount=wallet.unsettled_amount,
            active_member_count=wallet.active_member_count,
            by_category=by_category,
            by_month=by_month,
        )


__all__ = ["GetWalletAnalyticsUseCase", "WalletAnalytics"]
