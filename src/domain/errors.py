"""Domain exceptions raised by the shared wallet ledger."""


class WalletError(Exception):
    """Base class for shared wallet ledger errors."""


class InvalidLedgerInputError(WalletError, ValueError):
    """Raised when a mutating call is rejected by validation."""


class LedgerNotFoundError(WalletError, LookupError):
    """Raised when an identifier does not resolve inside its scope."""

    kind = "Record"

    def __init__(self, identifier: str, scope: str | None = None) -> None:
        self.identifier = identifier
        self.scope = scope
        message = f"{self.kind} not found: {identifier}"
        if scope:
            message = f"{message} (wallet {scope})"
        super().__init__(message)


class WalletNotFoundError(LedgerNotFoundError):
    kind = "Wallet"


class MemberNotFoundError(LedgerNotFoundError):
    kind = "Member"


class ExpenseNotFoundError(LedgerNotFoundError):
    kind = "Expense"


class SettlementNotFoundError(LedgerNotFoundError):
    kind = "Settlement"


class WalletPersistenceError(WalletError, RuntimeError):
    """Raised by wallet repositories when the store cannot be used."""


__all__ = [
    "WalletError",
    "InvalidLedgerInputError",
    "LedgerNotFoundError",
    "WalletNotFoundError",
    "MemberNotFoundError",
    "ExpenseNotFoundError",
    "SettlementNotFoundError",
    "WalletPersistenceError",
]
