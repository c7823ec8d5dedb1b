"""Function wrappers, monads and currying with operator based composition."""

from arrowfn.errors import ArityError, ArrowfnError, EmptyListError
from arrowfn.fn import (
    Partial,
    compose,
    curry,
    curry2,
    curry3,
    curry4,
    curry5,
    curry6,
    curry7,
    curry8,
    partial,
    pipe,
    swap,
)
from arrowfn.fun import Arrow, Fun, Value, arrow, fun, wrap
from arrowfn.monad import (
    Either,
    Identity,
    Just,
    Left,
    Maybe,
    Nothing,
    Pure,
    Right,
    from_optional,
    identity,
    just,
    left,
    lift_a2,
    nothing,
    pure,
    right,
    try_call,
)

__version__ = '0.1.0'
