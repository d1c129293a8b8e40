"""CLI adapter seeding the demo wallet into the configured store.

This module wires the SeedSampleWalletUseCase to the configured wallet
repository and prints the id of the created wallet.
"""

from src.application.use_cases.seed_sample_wallet import (
    SeedSampleWalletUseCase,
)
from src.infrastructure.container import build_wallet_service
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Seed the "Apartment Expenses" demo wallet."""
    logger = get_app_logger()
    service = build_wallet_service()
    result = SeedSampleWalletUseCase(service).execute()

    unsaved = service.flush()
    if unsaved:
        logger.error(f"Demo wallet could not be saved: {unsaved}")
        return

    wallet = result.wallet
    print(f"Seeded wallet '{wallet.name}' with id {wallet.wallet_id}")


if __name__ == "__main__":  # pragma: no cover
    main()
