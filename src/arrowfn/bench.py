#!/usr/bin/env python3
#
#  ____                  _
# | __ )  ___ _ __   ___| |__
# |  _ \ / _ \ '_ \ / __| '_ \
# | |_) |  __/ | | | (__| | | |
# |____/ \___|_| |_|\___|_| |_|
#

"""Benchmark curry and partial against direct function calls"""

from __future__ import annotations

import argparse
import gc
import os
import sys
import time
from enum import IntEnum
from typing import Callable, NamedTuple, NoReturn, Sequence

from arrowfn.fn import curry2, curry3, curry4, curry5, curry6, curry7, curry8, partial


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                          Config                          ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


DEFAULT_ITERATIONS = 100_000
ITERATIONS_ENV = 'ARROWFN_BENCH_ITERATIONS'
DEFAULT_ARITIES = (2, 3, 4, 5)

CURRIES = {
    2: curry2,
    3: curry3,
    4: curry4,
    5: curry5,
    6: curry6,
    7: curry7,
    8: curry8,
}


class ExitCode(IntEnum):
    INVALID_ITERATIONS = 1


class Timing(NamedTuple):
    name: str
    seconds: float


# ┏━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┓
# ┃                   Core Implementation                    ┃
# ┗━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━┛


def bail(message: str, code: ExitCode) -> NoReturn:
    print(message, file=sys.stderr)
    raise SystemExit(code.value)


def add(*args: int) -> int:
    return sum(args)


def one_at_a_time(f: Callable, args: range):
    for arg in args:
        f = f(arg)
    return f


def variants(arity: int) -> dict[str, Callable[[int], object]]:
    curried = CURRIES[arity](add)
    # add is variadic so the arity has to be given
    partially = partial(add, arity)

    def args(i: int) -> range:
        return range(i, i + arity)

    return {
        'direct': lambda i: add(*args(i)),
        f'curry{arity}': lambda i: one_at_a_time(curried, args(i)),
        'partial': lambda i: one_at_a_time(partially, args(i)),
        'partial (all at once)': lambda i: partially(*args(i)),
    }


def benchmark(call: Callable[[int], object], iterations: int) -> float:
    gc.collect()
    start = time.perf_counter()
    for i in range(iterations):
        call(i)
    return time.perf_counter() - start


def run(arity: int, iterations: int) -> list[Timing]:
    return [
        Timing(name, benchmark(call, iterations))
        for name, call in variants(arity).items()
    ]


def report(arity: int, timings: Sequence[Timing]) -> str:
    baseline, *rest = timings
    lines = [f'=== {arity}-argument function ===']
    lines += [f'  {t.name:<24}: {t.seconds:.6f} seconds' for t in timings]
    lines.append(f'  Overhead vs {baseline.name}:')
    for t in rest:
        ratio = t.seconds / baseline.seconds if baseline.seconds else float('inf')
        lines.append(f'    {t.name:<22}: {ratio:.2f}x slower')
    return '\n'.join(lines)


def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f'{value!r} is not an integer')
    if number <= 0:
        raise argparse.ArgumentTypeError(f'{value!r} must be positive')
    return number


def default_iterations() -> int:
    value = os.getenv(ITERATIONS_ENV)
    if value is None:
        return DEFAULT_ITERATIONS
    try:
        return positive_int(value)
    except argparse.ArgumentTypeError as e:
        bail(f'ERROR: {ITERATIONS_ENV}: {e}', ExitCode.INVALID_ITERATIONS)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog='arrowfn-bench',
        description='Compare curry and partial against direct calls',
    )
    parser.add_argument(
        '-n',
        '--iterations',
        type=positive_int,
        help=f'calls per variant (default: ${ITERATIONS_ENV} or {DEFAULT_ITERATIONS})',
    )
    parser.add_argument(
        '-a',
        '--arity',
        type=int,
        action='append',
        choices=sorted(CURRIES),
        help='function arity to benchmark, repeatable (default: 2 3 4 5)',
    )
    args = parser.parse_args(argv)

    iterations = args.iterations or default_iterations()
    arities = args.arity or DEFAULT_ARITIES

    print(f'Running benchmarks with {iterations} iterations...\n')
    for arity in arities:
        print(report(arity, run(arity, iterations)), end='\n\n')

    return 0


if __name__ == '__main__':
    raise SystemExit(main())
