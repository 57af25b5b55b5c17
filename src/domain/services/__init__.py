"""Domain services package."""

from .ledger import (
    compute_account_breakdown,
    compute_opening_balance,
    compute_summary,
    list_beneficiaries,
    matches_filter,
    select_window,
)
from .nicknames import resolve_nickname
from .normalization import first_day_of_month, normalize_optional_text
from .validation import parse_posting_value, require_text

__all__ = [
    "compute_account_breakdown",
    "compute_opening_balance",
    "compute_summary",
    "list_beneficiaries",
    "matches_filter",
    "select_window",
    "resolve_nickname",
    "first_day_of_month",
    "normalize_optional_text",
    "parse_posting_value",
    "require_text",
]
