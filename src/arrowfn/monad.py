"""
Applicative and monadic containers.

    identity(f) * identity(g) % x    == f(g(x))
    just(10) % safe_div_by(2) * str  == Just('5.0')
    right(10) % validate % store     stops at the first Left
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from arrowfn.fun import spread

A = TypeVar('A')  # Success type
B = TypeVar('B')
C = TypeVar('C')
E = TypeVar('E')  # Error type
F = TypeVar('F')


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                        Identity                          ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


@dataclass(frozen=True)
class Identity(Generic[A]):
    """A value in a trivial applicative context.

    When the held value is a function, ``*`` composes (right to left, like
    ``Fun``) and ``%`` applies it.
    """

    value: A

    def fmap(self, g: Identity[Callable[..., Any]]) -> Identity[Callable[..., Any]]:
        f = self.value
        h = g.value

        def composed(*args: Any) -> Any:
            return f(*spread(h(*args)))

        return Identity(composed)

    def apply(self, *args: Any) -> Any:
        return self.value(*args)

    def __mul__(self, g: Identity[Callable[..., Any]]) -> Identity[Callable[..., Any]]:
        if not isinstance(g, Identity):
            return NotImplemented
        return self.fmap(g)

    def __mod__(self, x: Any) -> Any:
        return self.apply(x)


Pure = Identity


def identity(value: A) -> Identity[A]:
    return Identity(value)


pure = identity


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                          Maybe                           ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class Maybe(ABC, Generic[A]):
    """Either ``Just(value)`` or ``Nothing()``."""

    @classmethod
    def pure(cls, value: A) -> Maybe[A]:
        return Just(value)

    @abstractmethod
    def is_just(self) -> bool:
        raise NotImplementedError

    def is_nothing(self) -> bool:
        return not self.is_just()

    @abstractmethod
    def fmap(self, f: Callable[[A], C]) -> Maybe[C]:
        raise NotImplementedError

    @abstractmethod
    def bind(self, f: Callable[[A], Maybe[C]]) -> Maybe[C]:
        raise NotImplementedError

    @abstractmethod
    def or_else(self, default: C) -> A | C:
        raise NotImplementedError

    @abstractmethod
    def ap(self: Maybe[Callable[[B], C]], other: Maybe[B]) -> Maybe[C]:
        raise NotImplementedError

    def __mul__(self, f: Callable[[A], C]) -> Maybe[C]:
        return self.fmap(f)

    def __mod__(self, f: Callable[[A], Maybe[C]]) -> Maybe[C]:
        return self.bind(f)


@dataclass(frozen=True)
class Just(Maybe[A]):
    value: A

    def is_just(self) -> bool:
        return True

    def fmap(self, f: Callable[[A], C]) -> Maybe[C]:
        return Just(f(self.value))

    def bind(self, f: Callable[[A], Maybe[C]]) -> Maybe[C]:
        return f(self.value)

    def or_else(self, default: C) -> A:
        return self.value

    def ap(self: Just[Callable[[B], C]], other: Maybe[B]) -> Maybe[C]:
        return other.fmap(self.value)


@dataclass(frozen=True)
class Nothing(Maybe[Any]):
    def is_just(self) -> bool:
        return False

    def fmap(self, f: Callable[[Any], C]) -> Maybe[C]:
        return self  # No transformation on Nothing

    def bind(self, f: Callable[[Any], Maybe[C]]) -> Maybe[C]:
        return self

    def or_else(self, default: C) -> C:
        return default

    def ap(self, other: Maybe[Any]) -> Maybe[Any]:
        return self


def just(value: A) -> Maybe[A]:
    return Just(value)


def nothing() -> Maybe[Any]:
    return Nothing()


def from_optional(value: A | None) -> Maybe[A]:
    return Nothing() if value is None else Just(value)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                         Either                           ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


class Either(ABC, Generic[E, A]):
    """Either ``Right(value)`` (success) or ``Left(error)`` (failure).

    A ``bind`` chain keeps the first ``Left`` it meets; later steps are
    never called.
    """

    @classmethod
    def pure(cls, value: A) -> Either[E, A]:
        return Right(value)

    @abstractmethod
    def is_right(self) -> bool:
        raise NotImplementedError

    def is_left(self) -> bool:
        return not self.is_right()

    @abstractmethod
    def fmap(self, f: Callable[[A], C]) -> Either[E, C]:
        raise NotImplementedError

    @abstractmethod
    def bind(self, f: Callable[[A], Either[E, C]]) -> Either[E, C]:
        raise NotImplementedError

    @abstractmethod
    def map_left(self, f: Callable[[E], F]) -> Either[F, A]:
        raise NotImplementedError

    @abstractmethod
    def or_else(self, default: C) -> A | C:
        raise NotImplementedError

    @abstractmethod
    def ap(self: Either[E, Callable[[B], C]], other: Either[E, B]) -> Either[E, C]:
        raise NotImplementedError

    def __mul__(self, f: Callable[[A], C]) -> Either[E, C]:
        return self.fmap(f)

    def __mod__(self, f: Callable[[A], Either[E, C]]) -> Either[E, C]:
        return self.bind(f)


@dataclass(frozen=True)
class Left(Either[E, Any]):
    error: E

    def is_right(self) -> bool:
        return False

    def fmap(self, f: Callable[[Any], C]) -> Either[E, C]:
        return self  # No transformation on Left

    def bind(self, f: Callable[[Any], Either[E, C]]) -> Either[E, C]:
        return self

    def map_left(self, f: Callable[[E], F]) -> Either[F, Any]:
        return Left(f(self.error))

    def or_else(self, default: C) -> C:
        return default

    def ap(self, other: Either[E, Any]) -> Either[E, Any]:
        return self


@dataclass(frozen=True)
class Right(Either[Any, A]):
    value: A

    def is_right(self) -> bool:
        return True

    def fmap(self, f: Callable[[A], C]) -> Either[Any, C]:
        return Right(f(self.value))

    def bind(self, f: Callable[[A], Either[E, C]]) -> Either[E, C]:
        return f(self.value)

    def map_left(self, f: Callable[[Any], F]) -> Either[F, A]:
        return self

    def or_else(self, default: C) -> A:
        return self.value

    def ap(self: Right[Callable[[B], C]], other: Either[E, B]) -> Either[E, C]:
        return other.fmap(self.value)


def right(value: A) -> Either[Any, A]:
    return Right(value)


def left(error: E) -> Either[E, Any]:
    return Left(error)


def try_call(f: Callable[..., A], *args: Any, **kwargs: Any) -> Either[Exception, A]:
    """Run ``f`` and capture an ``Exception`` as ``Left`` instead of raising."""
    try:
        return Right(f(*args, **kwargs))
    except Exception as e:
        return Left(e)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                       Applicative                        ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def lift_a2(f: Callable[[A], Callable[[B], C]], a, b):
    """Apply a curried binary ``f`` inside two Maybe or Either values."""
    return a.fmap(f).ap(b)
