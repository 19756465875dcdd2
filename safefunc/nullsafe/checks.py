"""Null checks over several values or suppliers."""

from typing import Any, Optional

from ..core.types import Supplier
from .access import get


def all_null(*values: Any) -> bool:
    """Check if all values are None (True for no values)."""
    for value in values:
        if value is not None:
            return False
    return True


def all_not_null(*values: Any) -> bool:
    """Check if no value is None (True for no values)."""
    for value in values:
        if value is None:
            return False
    return True


def any_null(*values: Any) -> bool:
    """Check if at least one value is None."""
    return not all_not_null(*values)


def any_not_null(*values: Any) -> bool:
    """Check if at least one value is not None."""
    return not all_null(*values)


def all_null_of(*suppliers: Optional[Supplier[Any]]) -> bool:
    """Check if all suppliers gave None.

    Each supplier is evaluated with get() semantics, so a supplier that is
    None or raises counts as giving None.

    Args:
        *suppliers: Suppliers of values

    Returns:
        True if every supplier gave None (True for no suppliers)
    """
    for supplier in suppliers:
        if get(supplier) is not None:
            return False
    return True


def all_not_null_of(*suppliers: Optional[Supplier[Any]]) -> bool:
    """Check if every supplier gave a value other than None."""
    for supplier in suppliers:
        if get(supplier) is None:
            return False
    return True


def any_null_of(*suppliers: Optional[Supplier[Any]]) -> bool:
    """Check if at least one supplier gave None, was None, or raised."""
    return not all_not_null_of(*suppliers)


def any_not_null_of(*suppliers: Optional[Supplier[Any]]) -> bool:
    """Check if at least one supplier gave a value other than None."""
    return not all_null_of(*suppliers)
