"""Predicates package for composable boolean conditions."""

from .base import (
    Predicate,
    PredicateLike,
    EmptyPredicatesError,
    FunctionPredicate,
    AllOf,
    AnyOf,
    Not,
    Xand,
    Xor,
    Implies,
    AlwaysTrue,
    AlwaysFalse,
)

from .algebra import (
    Combinator,
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
    fold,
    check_predicates_count,
)

__all__ = [
    # Base
    'Predicate',
    'PredicateLike',
    'EmptyPredicatesError',
    'FunctionPredicate',
    'AllOf',
    'AnyOf',
    'Not',
    'Xand',
    'Xor',
    'Implies',
    'AlwaysTrue',
    'AlwaysFalse',
    # Algebra
    'Combinator',
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
    'fold',
    'check_predicates_count',
]
