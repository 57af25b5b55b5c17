"""Domain policies package."""

from .authorization import ensure_admin

__all__ = ["ensure_admin"]
