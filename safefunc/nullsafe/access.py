"""Null-safe evaluation of single suppliers.

Typical use is:

    city = get(lambda: order.customer.address.city, "unknown")

instead of

    if order and order.customer and order.customer.address:
        city = order.customer.address.city

Every function here is built on recover(), so a failure raised while
evaluating a supplier never escapes.
"""

import logging
from typing import Any, Optional

from ..core.types import S, Supplier, Condition

logger = logging.getLogger('safefunc')


def recover(supplier: Optional[Supplier[S]], fallback: Any = None) -> Any:
    """Evaluate a supplier, mapping any raised exception to a fallback.

    Args:
        supplier: Zero-argument callable (None counts as absent)
        fallback: Value returned when supplier is None or raises

    Returns:
        The supplier's result (including None) or fallback
    """
    if supplier is None:
        return fallback
    try:
        return supplier()
    except Exception as e:
        # Arguments are formatted only when the record is emitted
        logger.debug("Suppressed %s from %r: %s", type(e).__name__, supplier, e)
        return fallback


def get(supplier: Optional[Supplier[S]], default: Optional[S] = None) -> Optional[S]:
    """Return the value given by supplier or a default.

    Args:
        supplier: Supplier of a value
        default: Returned if supplier is None, raises or gives None

    Returns:
        The supplier's value, or default
    """
    result = recover(supplier)
    return default if result is None else result


def get_if(supplier: Optional[Supplier[S]], condition: Condition[S]) -> Optional[S]:
    """Return the value given by supplier if condition is met, else None.

    A condition that raises counts as not met.
    """
    result = recover(supplier)
    if result is None:
        return None
    if not recover(lambda: bool(condition(result)), False):
        return None
    return result


def is_null(supplier: Optional[Supplier[S]]) -> bool:
    """Check if the supplier is None, raises, or gives None."""
    return recover(supplier) is None


def is_equal(expected: S, supplier: Optional[Supplier[S]]) -> bool:
    """Check if supplier's value equals expected.

    Equality is evaluated as ``expected == result``. An expected value of
    None never matches, since a None result is treated as a failure.

    Args:
        expected: Expected value
        supplier: Supplier of a value

    Returns:
        True only if supplier gave a value equal to expected
    """
    result = recover(supplier)
    if expected is None or result is None:
        return False
    return recover(lambda: bool(expected == result), False)


def is_true(supplier: Optional[Supplier[Any]]) -> bool:
    """Return True only if supplier gave a truthy value."""
    result = recover(supplier)
    return result is not None and recover(lambda: bool(result), False)


def is_false(supplier: Optional[Supplier[Any]]) -> bool:
    """Return True only if supplier gave a falsy value other than None.

    This is not the complement of is_true(): both return False when the
    supplier is None or raises.
    """
    result = recover(supplier)
    return result is not None and recover(lambda: not result, False)
