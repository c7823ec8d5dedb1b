"""
List helpers that read well inside a pipeline:

    [1, 2, 3] | arrow(partial(swap(lists.map))(double)) >> arrow(lists.sum)

Every helper returns a new list and leaves its input alone.
"""

from __future__ import annotations

import builtins
import functools
import math
from functools import cmp_to_key
from itertools import chain
from typing import Callable, Hashable, Iterable, Sequence, TypeVar

from arrowfn.errors import EmptyListError

A = TypeVar('A')
B = TypeVar('B')
K = TypeVar('K', bound=Hashable)


def map(xs: Iterable[A], f: Callable[[A], B]) -> list[B]:
    return [f(x) for x in xs]


def filter(xs: Iterable[A], pred: Callable[[A], bool]) -> list[A]:
    return [x for x in xs if pred(x)]


def flat_map(xs: Iterable[A], f: Callable[[A], Iterable[B]]) -> list[B]:
    return list(chain.from_iterable(f(x) for x in xs))


concat_map = flat_map


def foldl(xs: Iterable[A], f: Callable[[B, A], B], init: B) -> B:
    return functools.reduce(f, xs, init)


reduce = foldl


def foldr(xs: Sequence[A], f: Callable[[A, B], B], init: B) -> B:
    acc = init
    for x in reversed(xs):
        acc = f(x, acc)
    return acc


def foldl1(xs: Sequence[A], f: Callable[[A, A], A]) -> A:
    if not xs:
        raise EmptyListError('foldl1')
    return functools.reduce(f, xs[1:], xs[0])


def foldr1(xs: Sequence[A], f: Callable[[A, A], A]) -> A:
    if not xs:
        raise EmptyListError('foldr1')
    return foldr(xs[:-1], f, xs[-1])


def flatten(xss: Iterable[Iterable[A]]) -> list[A]:
    """One level only."""
    return list(chain.from_iterable(xss))


def join(xs: Iterable[str], sep: str = '') -> str:
    return sep.join(xs)


def sum(xs: Iterable[A]) -> A:
    return builtins.sum(xs)


def product(xs: Iterable[A]) -> A:
    return math.prod(xs)


def length(xs: Sequence) -> int:
    return len(xs)


def is_empty(xs: Sequence) -> bool:
    return len(xs) == 0


def head(xs: Sequence[A]) -> A | None:
    return xs[0] if xs else None


def tail(xs: Sequence[A]) -> list[A]:
    return list(xs[1:])


def last(xs: Sequence[A]) -> A | None:
    return xs[-1] if xs else None


def init(xs: Sequence[A]) -> list[A]:
    return list(xs[:-1])


def reverse(xs: Sequence[A]) -> list[A]:
    return list(reversed(xs))


def maximum(xs: Sequence[A]) -> A:
    if not xs:
        raise EmptyListError('maximum')
    return max(xs)


def minimum(xs: Sequence[A]) -> A:
    if not xs:
        raise EmptyListError('minimum')
    return min(xs)


def sort(xs: Iterable[A]) -> list[A]:
    return sorted(xs)


def sort_by(xs: Iterable[A], key: Callable[[A], object]) -> list[A]:
    return sorted(xs, key=key)


def sort_with(xs: Iterable[A], less: Callable[[A, A], bool]) -> list[A]:
    """Sort with a "less than" predicate instead of a key."""

    def cmp(a: A, b: A) -> int:
        if less(a, b):
            return -1
        return 1 if less(b, a) else 0

    return sorted(xs, key=cmp_to_key(cmp))


def unique(xs: Iterable[K]) -> list[K]:
    # dict keeps insertion order, so the first occurrence wins
    return list(dict.fromkeys(xs))


def group_by(xs: Iterable[A], f: Callable[[A], K]) -> dict[K, list[A]]:
    groups: dict[K, list[A]] = {}
    for x in xs:
        groups.setdefault(f(x), []).append(x)
    return groups


def find(xs: Iterable[A], pred: Callable[[A], bool]) -> A | None:
    return next((x for x in xs if pred(x)), None)
