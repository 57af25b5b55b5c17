"""Domain normalization helpers."""

from datetime import date


def normalize_optional_text(value: str | None) -> str | None:
    """Trim free text and turn blank values into None.

    Args:
        value: Raw text from a form or repository.

    Returns:
        str | None: Cleaned text.
    """
    if not value:
        return None
    cleaned = value.strip()
    return cleaned or None


def first_day_of_month(value: date | None) -> date | None:
    """Normalize a reference month to its first day.

    Args:
        value: Any date within the month.

    Returns:
        date | None: First day of that month.
    """
    if value is None:
        return None
    return value.replace(day=1)


__all__ = ["normalize_optional_text", "first_day_of_month"]
