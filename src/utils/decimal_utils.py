"""Helpers for Decimal and date normalization."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_decimal_input(raw: str) -> Decimal | None:
    """Parse a user-entered amount such as ``12,50`` or ``1234.5``.

    Args:
        raw: Text typed in a form field.

    Returns:
        Decimal | None: Parsed value, or None when the text is not a number.
    """
    cleaned = (raw or "").strip().replace(" ", "")
    if not cleaned:
        return None
    if "," in cleaned and "." in cleaned:
        # the separator appearing last is the decimal one
        if cleaned.rfind(",") > cleaned.rfind("."):
            cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    else:
        cleaned = cleaned.replace(",", ".")
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def coerce_date(value) -> date | None:
    """Normalize date-like values returned by database drivers.

    Args:
        value: ``date``, ``datetime`` or ISO ``YYYY-MM-DD`` string.

    Returns:
        date | None: Calendar date without time.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


__all__ = ["coerce_decimal", "parse_decimal_input", "coerce_date"]
