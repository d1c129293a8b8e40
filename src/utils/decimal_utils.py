"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from callers or stored records.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, bool):
        raise ValueError(f"Not a numeric amount: {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"Not a numeric amount: {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Not a finite amount: {value!r}")
    return result


def quantize_money(value) -> Decimal:
    """Round a value to the ledger minor unit (cents), half-up.

    Raises:
        ValueError: If the value is not a finite number or has too many
            digits to be expressed in cents.
    """
    amount = coerce_decimal(value)
    try:
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Amount out of range: {value!r}") from exc


__all__ = ["CENT", "coerce_decimal", "quantize_money"]
