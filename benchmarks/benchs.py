"""Benchmarks for the optres combinators against hand-written Python."""

from typing import Final

import optres as opt

from ._registery import Implementation, Runs, bench

TEST_VALUE: Final[int] = 42
CHAIN_THRESHOLD: Final[int] = 5

# Large dataset with mixed None/values (realistic scenario)
NULLABLE_DATA: Final = [x if x % 3 != 0 else None for x in range(100)]
INT_DATA_LARGE: Final = list(range(100))

OPTRES = Implementation.OPTRES
PLAIN = Implementation.PLAIN


def _parse(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


# Instantiation
# ------------------------------------------------------------


@bench("Instantiation", "Some(value)", OPTRES)
def some_direct() -> object:
    return opt.Some(TEST_VALUE)


@bench("Instantiation", "Some(value)", PLAIN)
def some_direct_plain() -> object:
    return TEST_VALUE


@bench("Instantiation", "Option.wrap(nullable)", OPTRES, Runs.NORMAL)
def wrap_nullable() -> object:
    return [opt.Option.wrap(x) for x in NULLABLE_DATA]


@bench("Instantiation", "Option.wrap(nullable)", PLAIN, Runs.NORMAL)
def wrap_nullable_plain() -> object:
    return [x if x is not None else None for x in NULLABLE_DATA]


# Combinators
# ------------------------------------------------------------


@bench("Combinators", "map chain", OPTRES)
def map_chain() -> object:
    return opt.Some(TEST_VALUE).map(lambda x: x + 1).map(lambda x: x * 2)


@bench("Combinators", "map chain", PLAIN)
def map_chain_plain() -> object:
    value: int | None = TEST_VALUE
    if value is not None:
        value = (value + 1) * 2
    return value


@bench("Combinators", "and_then / filter", OPTRES)
def and_then_filter() -> object:
    return (
        opt.Some(TEST_VALUE)
        .filter(lambda x: x > CHAIN_THRESHOLD)
        .and_then(lambda x: opt.Some(x - CHAIN_THRESHOLD))
        .unwrap_or(0)
    )


@bench("Combinators", "and_then / filter", PLAIN)
def and_then_filter_plain() -> object:
    value = TEST_VALUE
    if value > CHAIN_THRESHOLD:
        return value - CHAIN_THRESHOLD
    return 0


@bench("Combinators", "match", OPTRES)
def match_arms() -> object:
    return opt.Ok(TEST_VALUE).match(ok=lambda v: v, err=lambda _: 0)


@bench("Combinators", "match", PLAIN)
def match_arms_plain() -> object:
    ok, value = True, TEST_VALUE
    return value if ok else 0


# Collect
# ------------------------------------------------------------


@bench("Collect", "Option.collect(100)", OPTRES, Runs.EXPENSIVE)
def collect_options() -> object:
    return opt.Option.collect(opt.Some(x) for x in INT_DATA_LARGE)


@bench("Collect", "Option.collect(100)", PLAIN, Runs.EXPENSIVE)
def collect_options_plain() -> object:
    values: list[int] = []
    for x in INT_DATA_LARGE:
        if x is None:
            return None
        values.append(x)
    return values


# Errors
# ------------------------------------------------------------


@bench("Errors", "Result.wrap(int)", OPTRES, Runs.NORMAL)
def wrap_parse() -> object:
    return [opt.Result.wrap(int, s).ok() for s in ("1", "x", "3")]


@bench("Errors", "Result.wrap(int)", PLAIN, Runs.NORMAL)
def wrap_parse_plain() -> object:
    return [_parse(s) for s in ("1", "x", "3")]
