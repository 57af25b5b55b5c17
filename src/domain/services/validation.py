"""Domain validation helpers."""

from decimal import Decimal

from src.domain.errors import ValidationError
from src.utils.decimal_utils import parse_decimal_input


CENT = Decimal("0.01")
# NUMERIC(12, 2) column
MAX_POSTING_VALUE = Decimal("10000000000")


def parse_posting_value(raw: str) -> Decimal:
    """Parse and validate the amount of a posting or fee.

    Args:
        raw: Amount typed by the user (``12,50`` or ``12.50``).

    Returns:
        Decimal: Non-negative amount.

    Raises:
        ValidationError: If the text is not a number, is negative, has more
            than two decimal places or does not fit the amount column.
    """
    value = parse_decimal_input(raw)
    if value is None:
        raise ValidationError("Invalid value")
    if value < 0:
        raise ValidationError(
            "Value must not be negative; the account group sets the sign"
        )
    if value >= MAX_POSTING_VALUE:
        raise ValidationError("Value is too large")
    if value != value.quantize(CENT):
        raise ValidationError("Value must have at most two decimal places")
    return value.quantize(CENT)


def require_text(value: str | None, field_name: str) -> str:
    """Return the trimmed text or raise when blank.

    Args:
        value: Raw text.
        field_name: Field label used in the error message.

    Raises:
        ValidationError: If the text is empty or whitespace only.
    """
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field_name} is required")
    return cleaned


__all__ = ["parse_posting_value", "require_text"]
