"""CLI adapter printing balances and debts of a stored wallet."""

import os

from src.application.use_cases.manage_shared_wallets import format_amount
from src.domain.errors import WalletError
from src.infrastructure.container import (
    build_wallet_analytics_use_case,
    build_wallet_service,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print member balances and simplified debts for ``WALLET_ID``."""
    logger = get_app_logger()
    wallet_id = os.getenv("WALLET_ID")
    if not wallet_id:
        logger.warning("WALLET_ID is required to show a wallet.")
        return

    service = build_wallet_service()
    try:
        wallet = service.get_wallet(wallet_id)
    except WalletError as exc:
        logger.error(str(exc))
        return

    analytics = build_wallet_analytics_use_case(service).execute(wallet_id)
    currency = wallet.currency
    status = "active" if wallet.is_active else "inactive"

    print(f"{wallet.name} ({status}, {analytics.active_member_count} members)")
    print(
        f"Total spent: {format_amount(analytics.total_spent, currency)}, "
        f"unsettled: {format_amount(analytics.unsettled_amount, currency)}"
    )
    for member in wallet.members:
        marker = "" if member.is_active else " [left]"
        print(
            f"  {member.name}{marker}: "
            f"owes {format_amount(member.total_owed, currency)}, "
            f"is owed {format_amount(member.total_owed_to, currency)}"
        )

    debts = service.get_simplified_debts(wallet_id)
    if not debts:
        print("No debts found!")
        return
    for debt in debts:
        debtor = wallet.member(debt.from_member_id)
        creditor = wallet.member(debt.to_member_id)
        print(
            f"{debtor.name} owes {creditor.name} "
            f"{format_amount(debt.amount, currency)}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
