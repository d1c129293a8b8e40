"""Coordinating service owning every shared wallet of the application.

Wallets are kept in memory keyed by wallet id. Each mutating call:

* validates its input and applies the change through the domain services,
  which recompute member balances from scratch;
* stamps ``updated_at`` and saves the full snapshot through the repository;
* publishes a human-readable activity message.

Validation failures leave the wallet untouched. Persistence failures are
logged and do not roll back the in-memory change; the wallet stays queued
and is saved again on its next mutation or on ``flush``.

The service expects a single writer: callers serialize access to it.
"""

from collections.abc import Callable, Iterable, Mapping
from datetime import datetime, timezone
from decimal import Decimal

from src.application.ports.activity import (
    ActivityNotifierPort,
    IdGeneratorPort,
)
from src.application.ports.wallet_repository import WalletRepositoryPort
from src.domain.constants import DEFAULT_CURRENCY
from src.domain.errors import (
    InvalidLedgerInputError,
    WalletError,
    WalletNotFoundError,
    WalletPersistenceError,
)
from src.domain.models import (
    CategoryTotal,
    DebtEntry,
    Expense,
    ExpenseCategory,
    Member,
    MonthlyTotal,
    PaymentMethod,
    Settlement,
    SplitPolicy,
    Wallet,
)
from src.domain.services import (
    DebtMatrix,
    add_expense,
    add_member,
    add_settlement,
    compute_debt_matrix,
    confirm_settlement,
    deactivate_member,
    minimize_transfers,
    refresh_member_balances,
    settle_expense,
    simplify_debts,
    totals_by_category,
    totals_by_month,
)
from src.infrastructure.identity import UuidIdGenerator
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.notifications import UsageLogActivityNotifier


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_amount(amount: Decimal, currency: str) -> str:
    """Render an amount for activity messages."""
    if currency == "USD":
        return f"${amount:.2f}"
    return f"{amount:.2f} {currency}"


class SharedWalletService:
    """Own shared wallets and apply ledger mutations to them."""

    def __init__(
        self,
        repository: WalletRepositoryPort,
        id_generator: IdGeneratorPort | None = None,
        notifier: ActivityNotifierPort | None = None,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            repository: Port storing wallet snapshots.
            id_generator: Optional identifier generator, UUID4 by default.
            notifier: Optional activity notifier, usage log by default.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current UTC datetime.
        """
        self._repository = repository
        self._id_generator = id_generator or UuidIdGenerator()
        self._notifier = notifier or UsageLogActivityNotifier()
        self._logger = logger or get_app_logger()
        self._clock = clock or _utc_now
        self._wallets: dict[str, Wallet] = {}
        self._unsaved: set[str] = set()

    def create_wallet(
        self,
        name: str,
        founder_name: str,
        founder_contact: str,
        description: str | None = None,
        currency: str = DEFAULT_CURRENCY,
    ) -> Wallet:
        """Create a wallet with exactly one founding member.

        Returns:
            Wallet: The new wallet, already registered and saved.
        """
        cleaned_name = (name or "").strip()
        if not cleaned_name:
            raise InvalidLedgerInputError("A wallet needs a non-empty name")
        cleaned_currency = (currency or "").strip().upper()
        if not cleaned_currency:
            raise InvalidLedgerInputError("A wallet needs a currency code")

        now = self._clock()
        wallet_id = self._id_generator.new_id("wallet")
        founder_id = self._id_generator.new_id("member")
        wallet = Wallet(
            wallet_id=wallet_id,
            name=cleaned_name,
            description=description.strip() if description else None,
            created_by_member_id=founder_id,
            created_at=now,
            updated_at=now,
            currency=cleaned_currency,
        )
        founder = add_member(
            wallet,
            founder_id,
            founder_name,
            founder_contact,
            joined_at=now,
        )
        self._wallets[wallet_id] = wallet
        self._logger.info(
            f"Created wallet {wallet_id} '{wallet.name}' "
            f"founded by {founder.member_id}"
        )
        self._commit(wallet, f"{founder.name} created {wallet.name}")
        return wallet

    def get_wallet(self, wallet_id: str) -> Wallet:
        """Return a wallet, restoring it from the repository on first use.

        Raises:
            WalletNotFoundError: If neither memory nor the store has it.
        """
        wallet = self._wallets.get(wallet_id)
        if wallet is not None:
            return wallet
        wallet = self._repository.load(wallet_id)
        if wallet is None:
            raise WalletNotFoundError(wallet_id)
        refresh_member_balances(wallet)
        self._wallets[wallet_id] = wallet
        self._logger.info(f"Restored wallet {wallet_id} from storage")
        return wallet

    def list_wallets(self) -> list[Wallet]:
        """Return every known wallet, loaded or stored."""
        wallet_ids = list(self._wallets)
        for wallet_id in self._repository.list_wallet_ids():
            if wallet_id not in self._wallets:
                wallet_ids.append(wallet_id)
        return [self.get_wallet(wallet_id) for wallet_id in wallet_ids]

    def deactivate_wallet(self, wallet_id: str) -> Wallet:
        """Soft-deactivate a wallet; it stays readable but frozen."""
        wallet = self.get_wallet(wallet_id)
        if wallet.is_active:
            wallet.is_active = False
            self._commit(wallet, f"{wallet.name} was archived")
        return wallet

    def add_member(self, wallet_id: str, name: str, contact: str) -> Member:
        wallet = self.get_wallet(wallet_id)
        member_id = self._id_generator.new_id("member")
        member = self._apply(
            wallet,
            "add_member",
            lambda: add_member(
                wallet,
                member_id,
                name,
                contact,
                joined_at=self._clock(),
            ),
        )
        self._commit(wallet, f"{member.name} joined the wallet")
        return member

    def deactivate_member(self, wallet_id: str, member_id: str) -> Member:
        wallet = self.get_wallet(wallet_id)
        member = self._apply(
            wallet,
            "deactivate_member",
            lambda: deactivate_member(wallet, member_id),
        )
        self._commit(wallet, f"{member.name} left the wallet")
        return member

    def add_expense(
        self,
        wallet_id: str,
        amount,
        description: str,
        category: ExpenseCategory | str,
        payer_id: str,
        participant_ids: Iterable[str],
        policy: SplitPolicy | str = SplitPolicy.EQUAL,
        split_table: Mapping[str, object] | None = None,
        date: datetime | None = None,
    ) -> Expense:
        """Record a shared expense in a wallet.

        Returns:
            Expense: The recorded expense.
        """
        wallet = self.get_wallet(wallet_id)
        expense_id = self._id_generator.new_id("expense")
        expense = self._apply(
            wallet,
            "add_expense",
            lambda: add_expense(
                wallet,
                expense_id,
                amount,
                description,
                category,
                payer_id,
                participant_ids,
                policy,
                split_table,
                now=self._clock(),
                logger=self._logger,
                date=date,
            ),
        )
        payer = wallet.member(payer_id)
        self._commit(
            wallet,
            f"{payer.name} added a "
            f"{format_amount(expense.amount, wallet.currency)} expense",
        )
        return expense

    def settle_expense(self, wallet_id: str, expense_id: str) -> Expense:
        wallet = self.get_wallet(wallet_id)
        expense = self._apply(
            wallet,
            "settle_expense",
            lambda: settle_expense(wallet, expense_id, now=self._clock()),
        )
        self._commit(wallet, f"Expense '{expense.description}' settled")
        return expense

    def add_settlement(
        self,
        wallet_id: str,
        from_member_id: str,
        to_member_id: str,
        amount,
        method: PaymentMethod | str = PaymentMethod.CASH,
        note: str | None = None,
    ) -> Settlement:
        """Record an unconfirmed payment between two members."""
        wallet = self.get_wallet(wallet_id)
        settlement_id = self._id_generator.new_id("settlement")
        settlement = self._apply(
            wallet,
            "add_settlement",
            lambda: add_settlement(
                wallet,
                settlement_id,
                from_member_id,
                to_member_id,
                amount,
                method,
                note,
                now=self._clock(),
            ),
        )
        payer = wallet.member(from_member_id)
        payee = wallet.member(to_member_id)
        self._commit(
            wallet,
            f"{payer.name} paid {payee.name} "
            f"{format_amount(settlement.amount, wallet.currency)}",
        )
        return settlement

    def confirm_settlement(
        self,
        wallet_id: str,
        settlement_id: str,
    ) -> Settlement:
        wallet = self.get_wallet(wallet_id)
        settlement = self._apply(
            wallet,
            "confirm_settlement",
            lambda: confirm_settlement(wallet, settlement_id),
        )
        self._commit(wallet, "Payment confirmed")
        return settlement

    def member(self, wallet_id: str, member_id: str) -> Member | None:
        return self.get_wallet(wallet_id).member(member_id)

    def get_debt_matrix(self, wallet_id: str) -> DebtMatrix:
        return compute_debt_matrix(self.get_wallet(wallet_id))

    def get_simplified_debts(self, wallet_id: str) -> list[DebtEntry]:
        """Return positive pairwise debts, largest first."""
        return simplify_debts(self.get_wallet(wallet_id))

    def get_minimal_transfers(self, wallet_id: str) -> list[DebtEntry]:
        """Return a greedy fewest-transfers plan over net balances."""
        return minimize_transfers(self.get_wallet(wallet_id))

    def get_expenses_by_category(
        self,
        wallet_id: str,
    ) -> list[CategoryTotal]:
        return totals_by_category(self.get_wallet(wallet_id).expenses)

    def get_monthly_spending(self, wallet_id: str) -> list[MonthlyTotal]:
        return totals_by_month(self.get_wallet(wallet_id).expenses)

    @property
    def unsaved_wallet_ids(self) -> list[str]:
        return sorted(self._unsaved)

    def flush(self) -> list[str]:
        """Retry saving wallets whose last save failed.

        Returns:
            list[str]: Ids of wallets that are still unsaved.
        """
        for wallet_id in sorted(self._unsaved):
            self._persist(self._wallets[wallet_id])
        return self.unsaved_wallet_ids

    def _apply(self, wallet: Wallet, operation: str, mutation):
        try:
            return mutation()
        except WalletError as exc:
            self._logger.warning(
                f"Rejected {operation} on wallet {wallet.wallet_id}: {exc}"
            )
            raise

    def _commit(self, wallet: Wallet, message: str) -> None:
        wallet.updated_at = self._clock()
        self._persist(wallet)
        self._notifier.publish(wallet.wallet_id, message)

    def _persist(self, wallet: Wallet) -> None:
        try:
            self._repository.save(wallet)
        except WalletPersistenceError as exc:
            self._unsaved.add(wallet.wallet_id)
            self._logger.error(
                f"Failed to save wallet {wallet.wallet_id}: {exc}"
            )
            return
        self._unsaved.discard(wallet.wallet_id)


__all__ = ["SharedWalletService", "format_amount"]
