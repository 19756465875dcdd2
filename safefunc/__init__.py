"""safefunc - null-safe access and composable predicates."""

__version__ = "1.0.0"

from .config import Config
from .core import setup_logging, get_logger
from .nullsafe import (
    recover,
    get,
    get_if,
    is_null,
    is_equal,
    is_true,
    is_false,
    all_null,
    all_not_null,
    any_null,
    any_not_null,
    all_null_of,
    all_not_null_of,
    any_null_of,
    any_not_null_of,
)
from .predicates import (
    Predicate,
    EmptyPredicatesError,
    p_true,
    p_false,
    predicate,
    not_,
    and_,
    all_,
    or_,
    nand,
    nor,
    none,
    xand,
    xor,
    cond,
)

__all__ = [
    'Config',
    'setup_logging',
    'get_logger',
    # Null-safe access
    'recover',
    'get',
    'get_if',
    'is_null',
    'is_equal',
    'is_true',
    'is_false',
    'all_null',
    'all_not_null',
    'any_null',
    'any_not_null',
    'all_null_of',
    'all_not_null_of',
    'any_null_of',
    'any_not_null_of',
    # Predicates
    'Predicate',
    'EmptyPredicatesError',
    'p_true',
    'p_false',
    'predicate',
    'not_',
    'and_',
    'all_',
    'or_',
    'nand',
    'nor',
    'none',
    'xand',
    'xor',
    'cond',
]
