"""Tests for the benchmark registry and CLI."""

import pytest
from typer.testing import CliRunner

import optres as opt
from benchmarks import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from benchmarks.__main__ import app
from benchmarks._registery import (
    BENCHMARK_REGISTRY,
    BenchFn,
    BenchmarkMetadata,
    BenchmarkPair,
    BenchmarkResult,
    Implementation,
    Runs,
    Stats,
    bench_one,
    categories,
    pair_benchmarks,
)

runner = CliRunner()


def _meta(category: str, name: str, implementation: Implementation) -> BenchmarkMetadata:
    return BenchmarkMetadata(category, name, Runs.CHEAP, implementation)


def test_stats_from_times() -> None:
    """Stats summarize a list of timings."""
    stats = Stats.from_times([4.0, 1.0, 3.0, 2.0])
    assert stats.median == 2.5
    assert stats.mean == 2.5
    assert stats.q1 == 2.0
    assert stats.q3 == 4.0
    assert stats.stddev > 0


def test_stats_single_time() -> None:
    """A single timing has no spread."""
    assert Stats.from_times([1.0]).stddev == 0.0


def test_registered_pairs_are_complete() -> None:
    """Every registered optres benchmark has a plain counterpart."""
    pairs = pair_benchmarks(BENCHMARK_REGISTRY)
    optres_count = sum(
        meta.implementation is Implementation.OPTRES
        for meta in BENCHMARK_REGISTRY.values()
    )
    assert len(pairs) == optres_count > 0


def _to_plain(value: object) -> object:
    match value:
        case opt.Some(inner) | opt.Ok(inner):
            return _to_plain(inner)
        case opt.NoneOption() | opt.Err():
            return None
        case list():
            return [_to_plain(item) for item in value]
        case _:
            return value


@pytest.mark.parametrize(
    "pair",
    pair_benchmarks(BENCHMARK_REGISTRY),
    ids=lambda pair: f"{pair.meta.category}/{pair.meta.name}",
)
def test_registered_benchmarks_agree(pair: BenchmarkPair) -> None:
    """Both implementations of a pair compute equivalent results."""
    assert _to_plain(pair.optres_fn()) == pair.plain_fn()


def test_pair_skips_incomplete() -> None:
    """Benchmarks without a plain counterpart are skipped."""

    def _lone() -> object:
        return None

    def _optres() -> object:
        return 1

    def _plain() -> object:
        return 1

    registry: dict[BenchFn, BenchmarkMetadata] = {
        _lone: _meta("A", "lone", Implementation.OPTRES),
        _optres: _meta("B", "pair", Implementation.OPTRES),
        _plain: _meta("B", "pair", Implementation.PLAIN),
    }
    pairs = pair_benchmarks(registry)
    assert len(pairs) == 1
    assert pairs[0].optres_fn is _optres
    assert pairs[0].plain_fn is _plain
    assert pair_benchmarks(registry, category="A") == []


def test_categories() -> None:
    """Categories are distinct and sorted."""
    metas = [
        _meta("b", "x", Implementation.OPTRES),
        _meta("a", "y", Implementation.PLAIN),
        _meta("b", "z", Implementation.PLAIN),
    ]
    assert categories(metas) == ["a", "b"]


def test_bench_one() -> None:
    """A pair is timed on both sides."""
    pair = pair_benchmarks(BENCHMARK_REGISTRY, category="Instantiation")[0]
    result = bench_one(pair, scale=Runs.CHEAP.value)
    assert result.category == "Instantiation"
    assert result.optres_median >= 0
    assert result.plain_median >= 0


@pytest.mark.parametrize(
    ("optres_median", "plain_median", "expected"),
    [(2.0, 1.0, 2.0), (1.0, 0.0, float("inf"))],
)
def test_overhead(optres_median: float, plain_median: float, expected: float) -> None:
    """Overhead is the ratio of the medians."""
    assert BenchmarkResult("c", "n", optres_median, plain_median).overhead == expected


def test_cli_list() -> None:
    """The list command shows every category."""
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    for category in ("Instantiation", "Combinators", "Collect", "Errors"):
        assert category in result.output


def test_cli_all_category() -> None:
    """The all command runs a filtered, scaled-down set of benchmarks."""
    result = runner.invoke(
        app, ["all", "--scale", str(Runs.CHEAP.value), "--category", "Combinators"]
    )
    assert result.exit_code == 0
    assert "Median overhead" in result.output


def test_cli_all_unknown_category() -> None:
    """An empty selection exits with an error."""
    result = runner.invoke(app, ["all", "--category", "nope"])
    assert result.exit_code == 1
    assert "No benchmarks to run!" in result.output
