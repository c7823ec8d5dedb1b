#
#  _____                 _   _                   _
# |  ___|   _ _ __   ___| |_(_) ___  _ __   __ _| |
# | |_ | | | | '_ \ / __| __| |/ _ \| '_ \ / _` | |
# |  _|| |_| | | | | (__| |_| | (_) | | | | (_| | |
# |_|   \__,_|_| |_|\___|\__|_|\___/|_| |_|\__,_|_|
#

"""
Currying, partial application and composition of plain functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from inspect import Parameter, signature
from typing import Any, Callable, Mapping, TypeVar

from arrowfn.errors import ArityError
from arrowfn.fun import Arrow, Fun, unwrap

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')

POSITIONAL = (Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD)


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                       Composition                        ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def passthrough(*args: Any) -> Any:
    return args[0] if len(args) == 1 else args


def compose(*fns: Callable | Fun | Arrow) -> Fun:
    """compose(f, g, h)(x) == f(g(h(x)))"""
    if not fns:
        return Fun(passthrough)
    first, *rest = fns
    return reduce(Fun.compose, rest, Fun(unwrap(first)))


def pipe(*fns: Callable | Fun | Arrow) -> Arrow:
    """pipe(f, g, h)(x) == h(g(f(x)))"""
    if not fns:
        return Arrow(passthrough)
    first, *rest = fns
    return reduce(Arrow.compose_to, rest, Arrow(unwrap(first)))


def swap(f: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """Swaps the first and the second argument of a function."""

    def swapped(b: B, a: A) -> C:
        return f(a, b)

    return swapped


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                   Fixed arity currying                   ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def _curry(f: Callable, n: int, collected: tuple = ()) -> Callable:
    def step(arg):
        args = (*collected, arg)
        if len(args) == n:
            return f(*args)
        return _curry(f, n, args)

    return step


def curry2(f): return _curry(f, 2)
def curry3(f): return _curry(f, 3)
def curry4(f): return _curry(f, 4)
def curry5(f): return _curry(f, 5)
def curry6(f): return _curry(f, 6)
def curry7(f): return _curry(f, 7)
def curry8(f): return _curry(f, 8)


curry = curry2


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                   Partial application                    ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def required_names(f: Callable) -> tuple[str, ...]:
    """Names of the required positional parameters of ``f``, in order."""
    try:
        params = signature(unwrap(f)).parameters.values()
    except (TypeError, ValueError) as e:
        raise ArityError(f) from e

    required = [p for p in params if p.kind in POSITIONAL and p.default is p.empty]
    variadic = any(p.kind is Parameter.VAR_POSITIONAL for p in params)
    if not required and variadic:
        raise ArityError(
            f,
            'The function appears to use only variadic parameters (*args).\n'
            "Please pass the 'arity' argument explicitly.",
        )
    return tuple(p.name for p in required)


def arity_of(f: Callable) -> int:
    """Number of required positional parameters of ``f``."""
    return len(required_names(f))


@dataclass(frozen=True, eq=False)
class Partial:
    """A function waiting for the rest of its positional arguments.

    Every call returns a new ``Partial`` so earlier ones stay reusable.
    A keyword naming a required parameter (from ``names``) counts towards
    ``arity`` once every parameter before it is filled positionally.
    """

    func: Callable
    arity: int
    args: tuple = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)
    names: tuple[str, ...] = ()

    def filled(self, args: tuple, kwargs: Mapping[str, Any]) -> int:
        return len(args) + sum(1 for name in self.names[len(args):] if name in kwargs)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        collected = self.args + args
        merged = {**self.kwargs, **kwargs}
        if self.filled(collected, merged) >= self.arity:
            return self.func(*collected, **merged)
        return Partial(self.func, self.arity, collected, merged, self.names)

    @property
    def remaining(self) -> int:
        return max(self.arity - self.filled(self.args, self.kwargs), 0)


def partial(f: Callable, arity: int | None = None) -> Partial:
    """Make ``f`` accept its arguments one at a time, several at once, or
    all at once:

        add3 = partial(lambda a, b, c: a + b + c)
        add3(1)(2)(3) == add3(1, 2)(3) == add3(1, 2, 3) == 6

    Without ``arity`` the count of required positional parameters is read
    from the signature; builtins without one and ``*args``-only functions
    raise ``ArityError`` here, before any argument is supplied.

    Parameters with a default are not required: for ``def f(a, b, c=10)``
    the call happens after two arguments, so ``c`` can only be given in the
    same batch as ``b`` or by keyword. Pass ``arity=3`` to wait for it.

    Keywords are forwarded on the final call. One naming a required
    parameter counts towards the arity, so ``partial(f)(1, b=2)`` calls
    ``f(1, b=2)``; with an explicit ``arity`` keywords never count.
    """
    if arity is None:
        names = required_names(f)
        return Partial(f, len(names), names=names)
    if arity < 0:
        raise ArityError(f, f'arity must not be negative, got {arity}')
    return Partial(f, arity)
