"""Core package for safefunc."""

from .types import (
    S,
    T,
    Supplier,
    Condition,
)

from .logger import setup_logging, get_logger

__all__ = [
    # Types
    'S',
    'T',
    'Supplier',
    'Condition',
    # Logging
    'setup_logging',
    'get_logger',
]
