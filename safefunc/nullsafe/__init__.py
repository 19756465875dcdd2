"""Null-safe access package for evaluating possibly-failing expressions."""

from .access import (
    recover,
    get,
    get_if,
    is_null,
    is_equal,
    is_true,
    is_false,
)

from .checks import (
    all_null,
    all_not_null,
    any_null,
    any_not_null,
    all_null_of,
    all_not_null_of,
    any_null_of,
    any_not_null_of,
)

__all__ = [
    # Single supplier
    'recover',
    'get',
    'get_if',
    'is_null',
    'is_equal',
    'is_true',
    'is_false',
    # Values
    'all_null',
    'all_not_null',
    'any_null',
    'any_not_null',
    # Suppliers
    'all_null_of',
    'all_not_null_of',
    'any_null_of',
    'any_not_null_of',
]
