"""Base classes and combinators for predicates."""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, Tuple, Union

from ..core.types import T


class EmptyPredicatesError(ValueError):
    """Raised when a variadic combinator is given no predicates."""


class Predicate(ABC, Generic[T]):
    """Base class for boolean conditions over a value.

    Predicates are composable conditions that can be combined using
    operators (&, |, ^, ~), the chainable methods negate(), and_() and
    or_(), or the free functions in predicates.algebra.

    A predicate is callable, so it can be passed directly to filter().
    """

    @abstractmethod
    def check(self, value: T) -> Tuple[bool, str]:
        """Check if the predicate passes.

        Args:
            value: Value to test

        Returns:
            (passes, reason) - bool indicating if predicate passes and explanation
        """
        pass

    def test(self, value: T) -> bool:
        """Evaluate the predicate, discarding the reason."""
        passes, _ = self.check(value)
        return passes

    def __call__(self, value: T) -> bool:
        return self.test(value)

    def negate(self) -> 'Not[T]':
        """Negate this predicate."""
        return Not(self)

    def and_(self, other: 'PredicateLike[T]') -> 'AllOf[T]':
        """Combine with another predicate using AND logic."""
        return AllOf(self, lift(other))

    def or_(self, other: 'PredicateLike[T]') -> 'AnyOf[T]':
        """Combine with another predicate using OR logic."""
        return AnyOf(self, lift(other))

    def __and__(self, other: 'PredicateLike[T]') -> 'AllOf[T]':
        """Combine predicates with AND logic."""
        return self.and_(other)

    def __or__(self, other: 'PredicateLike[T]') -> 'AnyOf[T]':
        """Combine predicates with OR logic."""
        return self.or_(other)

    def __xor__(self, other: 'PredicateLike[T]') -> 'Xor[T]':
        """Combine predicates with XOR logic."""
        return Xor(self, lift(other))

    def __rand__(self, other: 'PredicateLike[T]') -> 'AllOf[T]':
        return AllOf(lift(other), self)

    def __ror__(self, other: 'PredicateLike[T]') -> 'AnyOf[T]':
        return AnyOf(lift(other), self)

    def __rxor__(self, other: 'PredicateLike[T]') -> 'Xor[T]':
        return Xor(lift(other), self)

    def __invert__(self) -> 'Not[T]':
        """Negate a predicate."""
        return self.negate()


PredicateLike = Union[Predicate[T], Callable[[T], Any]]


def lift(p: 'PredicateLike[T]') -> Predicate[T]:
    """Return p if it is a Predicate, else wrap the callable in one.

    Raises:
        TypeError: If p is neither a Predicate nor callable
    """
    if isinstance(p, Predicate):
        return p
    if callable(p):
        return FunctionPredicate(p)
    raise TypeError(f"Expected a predicate or callable, got {type(p).__name__}")


class FunctionPredicate(Predicate[T]):
    """Predicate backed by a plain boolean function."""

    def __init__(self, func: Callable[[T], Any]):
        """Initialize with the function to call.

        Args:
            func: One-argument function returning a truthy/falsy value
        """
        self.func = func
        self.name = getattr(func, '__name__', None) or type(func).__name__

    def check(self, value: T) -> Tuple[bool, str]:
        if self.func(value):
            return True, f"{self.name} passed"
        return False, f"{self.name} failed"


class AllOf(Predicate[T]):
    """Combinator: all predicates must pass (AND logic)."""

    def __init__(self, *predicates: Predicate[T]):
        """Initialize with predicates.

        Args:
            *predicates: Predicates that must all pass
        """
        self.predicates: List[Predicate[T]] = []
        for p in predicates:
            # Flatten nested AllOf
            if isinstance(p, AllOf):
                self.predicates.extend(p.predicates)
            else:
                self.predicates.append(p)

    def check(self, value: T) -> Tuple[bool, str]:
        """Check if all predicates pass."""
        for predicate in self.predicates:
            passes, reason = predicate.check(value)
            if not passes:
                return False, reason
        return True, "All conditions met"


class AnyOf(Predicate[T]):
    """Combinator: at least one predicate must pass (OR logic)."""

    def __init__(self, *predicates: Predicate[T]):
        """Initialize with predicates.

        Args:
            *predicates: Predicates where at least one must pass
        """
        self.predicates: List[Predicate[T]] = []
        for p in predicates:
            # Flatten nested AnyOf
            if isinstance(p, AnyOf):
                self.predicates.extend(p.predicates)
            else:
                self.predicates.append(p)

    def check(self, value: T) -> Tuple[bool, str]:
        """Check if any predicate passes."""
        reasons = []
        for predicate in self.predicates:
            passes, reason = predicate.check(value)
            if passes:
                return True, reason
            reasons.append(reason)
        return False, "; ".join(reasons)


class Not(Predicate[T]):
    """Combinator: negate a predicate."""

    def __init__(self, predicate: Predicate[T]):
        """Initialize with predicate to negate.

        Args:
            predicate: Predicate to negate
        """
        self.predicate = predicate

    def check(self, value: T) -> Tuple[bool, str]:
        """Check if predicate fails (negation)."""
        passes, reason = self.predicate.check(value)
        return not passes, f"Not: {reason}"


class Xand(Predicate[T]):
    """Combinator: both predicates pass or both fail (equivalence)."""

    def __init__(self, left: Predicate[T], right: Predicate[T]):
        self.left = left
        self.right = right

    def check(self, value: T) -> Tuple[bool, str]:
        left_passes, left_reason = self.left.check(value)
        right_passes, right_reason = self.right.check(value)
        return left_passes == right_passes, f"{left_reason}; {right_reason}"


class Xor(Predicate[T]):
    """Combinator: exactly one of two predicates passes."""

    def __init__(self, left: Predicate[T], right: Predicate[T]):
        self.left = left
        self.right = right

    def check(self, value: T) -> Tuple[bool, str]:
        left_passes, left_reason = self.left.check(value)
        right_passes, right_reason = self.right.check(value)
        return left_passes != right_passes, f"{left_reason}; {right_reason}"


class Implies(Predicate[T]):
    """Combinator: if condition passes then consequence must pass."""

    def __init__(self, condition: Predicate[T], consequence: Predicate[T]):
        self.condition = condition
        self.consequence = consequence

    def check(self, value: T) -> Tuple[bool, str]:
        passes, reason = self.condition.check(value)
        if not passes:
            return True, f"Not: {reason}"
        return self.consequence.check(value)


class AlwaysTrue(Predicate[Any]):
    """Predicate that always passes."""

    def check(self, value: Any) -> Tuple[bool, str]:
        return True, "Always passes"


class AlwaysFalse(Predicate[Any]):
    """Predicate that always fails."""

    def __init__(self, reason: str = "Always fails"):
        self.reason = reason

    def check(self, value: Any) -> Tuple[bool, str]:
        return False, self.reason
