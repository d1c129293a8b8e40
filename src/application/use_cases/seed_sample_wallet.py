"""Use case seeding the demo wallet shown to first-time users."""

from dataclasses import dataclass
from decimal import Decimal

from src.application.use_cases.manage_shared_wallets import SharedWalletService
from src.domain.models import ExpenseCategory, Wallet


@dataclass(frozen=True)
class SampleWalletResult:
    """Result of seeding the demo wallet.

    Attributes:
        wallet: Seeded wallet.
        member_ids: Member ids keyed by display name.
    """

    wallet: Wallet
    member_ids: dict[str, str]


class SeedSampleWalletUseCase:
    """Create the "Apartment Expenses" demo wallet."""

    def __init__(self, service: SharedWalletService) -> None:
        self._service = service

    def execute(self) -> SampleWalletResult:
        """Create three roommates and two equally split expenses."""
        wallet = self._service.create_wallet(
            name="Apartment Expenses",
            description="Shared expenses for our apartment",
            founder_name="You",
            founder_contact="you@example.com",
        )
        you = wallet.created_by_member_id
        alex = self._service.add_member(
            wallet.wallet_id,
            "Alex",
            "alex@example.com",
        ).member_id
        jordan = self._service.add_member(
            wallet.wallet_id,
            "Jordan",
            "jordan@example.com",
        ).member_id
        everyone = [you, alex, jordan]

        self._service.add_expense(
            wallet.wallet_id,
            Decimal("120.00"),
            "Grocery shopping",
            ExpenseCategory.GROCERIES,
            payer_id=you,
            participant_ids=everyone,
        )
        self._service.add_expense(
            wallet.wallet_id,
            Decimal("60.00"),
            "Pizza night",
            ExpenseCategory.ENTERTAINMENT,
            payer_id=alex,
            participant_ids=everyone,
        )
        return SampleWalletResult(
            wallet=wallet,
            member_ids={"You": you, "Alex": alex, "Jordan": jordan},
        )


__all__ = ["SeedSampleWalletUseCase", "SampleWalletResult"]
