"""Shared type aliases for suppliers and conditions."""

from typing import Callable, TypeVar

S = TypeVar('S')
T = TypeVar('T')

# Zero-argument callable producing a value; may raise
Supplier = Callable[[], S]

# Plain one-argument boolean function (a "function reference")
Condition = Callable[[T], bool]
