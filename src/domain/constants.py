"""Domain constants for the shared wallet ledger."""

from decimal import Decimal

DEFAULT_CURRENCY = "USD"

# Pairwise debts at or below this amount are treated as settled noise.
DEBT_EPSILON = Decimal("0.01")

PERCENTAGE_TOTAL = Decimal("1")


__all__ = ["DEFAULT_CURRENCY", "DEBT_EPSILON", "PERCENTAGE_TOTAL"]
