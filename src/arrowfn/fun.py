"""
Function wrappers with operator based composition.

    fun(f) * fun(g) % x          == f(g(x))
    x | arrow(f) >> arrow(g)     == g(f(x))

A stage returning a plain ``tuple`` hands its items to the next stage as
separate positional arguments, so multiple values flow through a chain:

    split = lambda x: (x, x * 2)
    add_both = lambda a, b: a + b
    fun(add_both) * fun(split) % 5          # 15
    5 | arrow(split) >> arrow(add_both)     # 15
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')


def spread(result: Any) -> tuple:
    """Arguments for the next stage: a plain tuple is several values."""
    return result if type(result) is tuple else (result,)


def unwrap(f: Fun | Arrow | Callable) -> Callable:
    if isinstance(f, (Fun, Arrow)):
        return f.raw
    if callable(f):
        return f
    raise TypeError(f'Expected a function or a wrapper, got {type(f).__name__}')


def _is_composable(f: object) -> bool:
    return isinstance(f, (Fun, Arrow)) or callable(f)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                   Fun (right to left)                    ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


@dataclass(frozen=True)
class Fun(Generic[A, B]):
    """The wrapper of a function from A to B, composed mathematically.

    ``fun(f).compose(fun(g))`` and ``fun(f) * fun(g)`` both mean ``f . g``.
    """

    raw: Callable[..., B]

    def compose(self, g: Fun[C, A] | Callable[..., A]) -> Fun[C, B]:
        f_raw = self.raw
        g_raw = unwrap(g)

        def composed(*args: Any) -> B:
            return f_raw(*spread(g_raw(*args)))

        return Fun(composed)

    def apply(self, *args: Any) -> B:
        return self.raw(*args)

    def __mul__(self, g: Fun[C, A] | Callable[..., A]) -> Fun[C, B]:
        if not _is_composable(g):
            return NotImplemented
        return self.compose(g)

    def __mod__(self, x: A) -> B:
        return self.apply(x)

    def __call__(self, *args: Any) -> B:
        return self.apply(*args)


def fun(f: Callable[..., B]) -> Fun[Any, B]:
    return Fun(f)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                  Arrow (left to right)                   ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


@dataclass(frozen=True)
class Arrow(Generic[A, B]):
    """Same as Fun, but composed in pipeline order.

    ``arrow(f).compose_to(arrow(g))`` and ``arrow(f) >> arrow(g)`` both
    mean "f, then g". The value goes on the left when applying:

        x | arrow(f) >> arrow(g)
    """

    raw: Callable[..., B]

    def compose_to(self, g: Arrow[B, C] | Callable[..., C]) -> Arrow[A, C]:
        f_raw = self.raw
        g_raw = unwrap(g)

        def composed(*args: Any) -> C:
            return g_raw(*spread(f_raw(*args)))

        return Arrow(composed)

    to = compose_to

    def apply(self, *args: Any) -> B:
        return self.raw(*args)

    def __rshift__(self, g: Arrow[B, C] | Callable[..., C]) -> Arrow[A, C]:
        if not _is_composable(g):
            return NotImplemented
        return self.compose_to(g)

    # numpy arrays defer to __ror__ instead of mapping f over their items
    __array_ufunc__ = None

    # x | arrow(f) only lands here when type(x) has no __or__ for an Arrow
    def __ror__(self, x: A) -> B:
        return self.apply(x)

    def __call__(self, *args: Any) -> B:
        return self.apply(*args)


def arrow(f: Callable[..., B]) -> Arrow[Any, B]:
    return Arrow(f)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                     Wrapped values                       ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


@dataclass(frozen=True)
class Value(Generic[A]):
    value: A

    def apply_final(self, f: Fun[A, B] | Arrow[A, B] | Callable[[A], B]) -> B:
        return unwrap(f)(self.value)

    def __mod__(self, f: Fun[A, B] | Arrow[A, B] | Callable[[A], B]) -> B:
        if not _is_composable(f):
            return NotImplemented
        return self.apply_final(f)


def wrap(value: A) -> Value[A]:
    """``wrap(x) % (fun(f) * fun(g))`` reads left to right as "x into f . g"."""
    return Value(value)
