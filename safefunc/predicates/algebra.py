"""Logical algebra over predicates.

Logical operations: NOT, AND, OR, NAND, NOR, XAND, XOR, COND

Aliases: ALL (=AND), NONE (=NOR)

Variadic forms (one or more predicates): AND, OR, NAND, NOR, ALL, NONE

Every function accepts Predicate instances or plain one-argument functions,
and returns a new Predicate. Inputs are never modified.
"""

import logging
from functools import reduce
from typing import Any, Callable

from ..core.types import T
from .base import (
    Predicate,
    PredicateLike,
    EmptyPredicatesError,
    AllOf,
    AnyOf,
    Not,
    Xand,
    Xor,
    Implies,
    AlwaysTrue,
    AlwaysFalse,
    lift,
)

logger = logging.getLogger('safefunc')

Combinator = Callable[[Predicate[T], Predicate[T]], Predicate[T]]


def p_true() -> Predicate[Any]:
    """Predicate that is always true - useful in tests."""
    return AlwaysTrue()


def p_false() -> Predicate[Any]:
    """Predicate that is always false - useful in tests."""
    return AlwaysFalse()


def predicate(p: PredicateLike[T]) -> Predicate[T]:
    """Turn a plain function into a Predicate.

    A Predicate is returned unchanged. Use this to get negate(), and_(),
    or_() and the operators on a bare function.

    Args:
        p: Predicate or one-argument function

    Returns:
        Predicate

    Raises:
        TypeError: If p is not callable
    """
    return lift(p)


def not_(p: PredicateLike[T]) -> Predicate[T]:
    """Logical negation - NOT."""
    return Not(lift(p))


def xand(p1: PredicateLike[T], p2: PredicateLike[T]) -> Predicate[T]:
    """Exclusive conjunction - XAND.

    Passes when both pass or both fail; equivalent to
    or_(and_(p1, p2), nor(p1, p2)).
    """
    return Xand(lift(p1), lift(p2))


def xor(p1: PredicateLike[T], p2: PredicateLike[T]) -> Predicate[T]:
    """Exclusive disjunction - XOR.

    Passes when exactly one passes; equivalent to
    or_(and_(p1, not_(p2)), and_(not_(p1), p2)).
    """
    return Xor(lift(p1), lift(p2))


def cond(p: PredicateLike[T], q: PredicateLike[T]) -> Predicate[T]:
    """Logical implication - COND (if p then q), i.e. or_(not_(p), q)."""
    return Implies(lift(p), lift(q))


def check_predicates_count(count: int) -> None:
    """Raise if there are no predicates to fold.

    Raises:
        EmptyPredicatesError: If count is 0
    """
    if count == 0:
        raise EmptyPredicatesError("At least one predicate is required")


def fold(func: Combinator, *predicates: PredicateLike[T]) -> Predicate[T]:
    """Left-fold predicates with a binary combinator.

    Args:
        func: Combinator applied as func(accumulated, next)
        *predicates: One or more predicates, folded in order

    Returns:
        The lone predicate (lifted) for a single input, else the fold

    Raises:
        EmptyPredicatesError: If no predicates are given
    """
    check_predicates_count(len(predicates))
    lifted = [lift(p) for p in predicates]
    logger.debug("Folding %d predicate(s) with %s", len(lifted), getattr(func, '__name__', func))
    return reduce(func, lifted)


def _and2(p1: Predicate[T], p2: Predicate[T]) -> Predicate[T]:
    return AllOf(p1, p2)


def _or2(p1: Predicate[T], p2: Predicate[T]) -> Predicate[T]:
    return AnyOf(p1, p2)


def and_(*predicates: PredicateLike[T]) -> Predicate[T]:
    """Logical conjunction - AND (=ALL)."""
    return fold(_and2, *predicates)


def or_(*predicates: PredicateLike[T]) -> Predicate[T]:
    """Logical disjunction - OR."""
    return fold(_or2, *predicates)


def nand(*predicates: PredicateLike[T]) -> Predicate[T]:
    """Logical NAND - negation of the AND of all predicates."""
    return Not(and_(*predicates))


def nor(*predicates: PredicateLike[T]) -> Predicate[T]:
    """Logical NOR (=NONE) - negation of the OR of all predicates."""
    return Not(or_(*predicates))


def all_(*predicates: PredicateLike[T]) -> Predicate[T]:
    """Logical AND (=ALL)."""
    return and_(*predicates)


def none(*predicates: PredicateLike[T]) -> Predicate[T]:
    """Logical NOR (=NONE)."""
    return nor(*predicates)
