import statistics
import timeit
from collections.abc import Callable, Iterable
from enum import IntEnum, StrEnum, auto
from functools import wraps
from typing import Final, NamedTuple, Self

import cytoolz as cz
from rich.console import Console

type BenchFn = Callable[[], object]

CONSOLE: Final = Console()


class Runs(IntEnum):
    """Cost category for benchmarks, determining iteration counts."""

    CHEAP = 5_000
    NORMAL = 2_500
    EXPENSIVE = 500


class Implementation(StrEnum):
    """Implementation type for benchmarks."""

    OPTRES = auto()
    PLAIN = auto()


class BenchmarkMetadata(NamedTuple):
    """Metadata for a benchmark function."""

    category: str
    name: str
    cost: Runs
    implementation: Implementation


class BenchmarkPair(NamedTuple):
    """The two implementations of the same operation."""

    meta: BenchmarkMetadata
    optres_fn: BenchFn
    plain_fn: BenchFn


class BenchmarkResult(NamedTuple):
    """Result of a single benchmark comparison."""

    category: str
    name: str
    optres_median: float
    plain_median: float

    @property
    def overhead(self) -> float:
        """How many times slower the optres version is."""
        if not self.plain_median:
            return float("inf")
        return self.optres_median / self.plain_median


class Stats(NamedTuple):
    """Statistical summary of benchmark results."""

    median: float
    mean: float
    stddev: float
    q1: float
    q3: float

    @classmethod
    def from_times(cls, times: list[float]) -> Self:
        """Compute stats from a list of times."""
        ordered = sorted(times)
        return cls(
            statistics.median(ordered),
            statistics.mean(ordered),
            statistics.stdev(ordered) if len(ordered) > 1 else 0.0,
            ordered[len(ordered) // 4],
            ordered[3 * len(ordered) // 4],
        )


# Registry of benchmark functions with their metadata
BENCHMARK_REGISTRY: dict[BenchFn, BenchmarkMetadata] = {}


def bench(
    category: str,
    name: str,
    implementation: Implementation,
    cost: Runs = Runs.CHEAP,
) -> Callable[[BenchFn], BenchFn]:
    """Decorator to register a benchmark function with its metadata.

    Args:
        category (str): The category of the benchmark (e.g., "Instantiation").
        name (str): The name of the benchmark (e.g., "Some(value)").
        implementation (Implementation): Whether the function uses optres or plain Python.
        cost (Runs): The cost category, defaults to CHEAP.

    Returns:
        Callable: The decorated function.

    Examples:
    ```python
    @bench("Instantiation", "Some(value)", Implementation.OPTRES)
    def bench_some_direct() -> object:
        return opt.Some(TEST_VALUE)
    ```
    """

    def decorator(func: BenchFn) -> BenchFn:
        @wraps(func)
        def wrapper() -> object:
            return func()

        BENCHMARK_REGISTRY[wrapper] = BenchmarkMetadata(
            category=category, name=name, cost=cost, implementation=implementation
        )
        return wrapper

    return decorator


def pair_benchmarks(
    registry: dict[BenchFn, BenchmarkMetadata],
    category: str | None = None,
) -> list[BenchmarkPair]:
    """Pair optres and plain implementations registered under the same category and name.

    Entries missing one of the two implementations are skipped with a warning.
    """
    groups: dict[tuple[str, str], list[BenchFn]] = cz.itertoolz.groupby(
        lambda fn: (registry[fn].category, registry[fn].name),
        (fn for fn, meta in registry.items() if category in (None, meta.category)),
    )
    pairs: list[BenchmarkPair] = []
    for (cat, name), funcs in groups.items():
        impls = {registry[fn].implementation: fn for fn in funcs}
        if Implementation.OPTRES not in impls or Implementation.PLAIN not in impls:
            CONSOLE.print(
                f"[yellow]Warning: Skipping {cat}/{name} - missing implementation[/yellow]"
            )
            continue
        optres_fn = impls[Implementation.OPTRES]
        pairs.append(
            BenchmarkPair(registry[optres_fn], optres_fn, impls[Implementation.PLAIN])
        )
    return pairs


def _time(fn: BenchFn, runs: int, calls: int) -> list[float]:
    return [timeit.timeit(fn, number=calls) for _ in range(runs)]


def bench_one(pair: BenchmarkPair, scale: int = 1) -> BenchmarkResult:
    """Time both implementations of a pair and compare their medians.

    Args:
        pair (BenchmarkPair): The benchmark to run.
        scale (int): Divisor applied to the iteration counts, to shorten a run.

    Returns:
        BenchmarkResult: Median timings of both implementations.
    """
    runs = max(1, pair.meta.cost.value // scale)
    calls = max(1, runs // 10)
    return BenchmarkResult(
        category=pair.meta.category,
        name=pair.meta.name,
        optres_median=Stats.from_times(_time(pair.optres_fn, runs, calls)).median,
        plain_median=Stats.from_times(_time(pair.plain_fn, runs, calls)).median,
    )


def categories(registry: Iterable[BenchmarkMetadata]) -> list[str]:
    """Sorted, distinct categories of the registered benchmarks."""
    return sorted(cz.itertoolz.unique(meta.category for meta in registry))
