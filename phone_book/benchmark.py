from dataclasses import dataclass

import numpy as np

from .strategies import STRATEGIES, SearchStrategy, create_strategy
from .timing import format_duration, measure_time
from .utils import Comparator, natural_order

SEARCH_PHASE = "searching"


@dataclass(frozen=True)
class StrategyResult:
    """Outcome of one strategy run: match count and ordered (phase, ms) timings."""
    strategy_name: str
    matches_found: int
    total_queries: int
    phase_timings: tuple[tuple[str, float], ...] = ()

    @property
    def total_ms(self) -> float:
        return sum(ms for _, ms in self.phase_timings)

    def phase_ms(self, phase: str) -> float:
        for name, ms in self.phase_timings:
            if name == phase:
                return ms
        return 0.0


def run_strategy(strategy: SearchStrategy, entries: list[str], queries: list[str]) -> StrategyResult:
    """
    Builds the strategy's structure from the raw entries and runs every query
    against it, timing each phase. Errors from key extraction propagate.
    """
    phase_timings = []
    if strategy.build_phase is None:
        strategy.build(entries)
    else:
        _, build_ms = measure_time(lambda: strategy.build(entries))
        phase_timings.append((strategy.build_phase, build_ms))

    found, search_ms = measure_time(lambda: strategy.count_found(queries))
    phase_timings.append((SEARCH_PHASE, search_ms))

    return StrategyResult(strategy.name, found, len(queries), tuple(phase_timings))


def run_benchmark(entries: list[str], queries: list[str], strategies: list[str] = None,
                  cmp: Comparator = natural_order, progress_callback=None) -> list[StrategyResult]:
    """
    Runs each selected strategy in turn, in registry order by default.
    A fresh strategy instance is built for every run so timings stay independent.
    `progress_callback(strategy_name, index, total)` is called before each strategy starts.
    """
    keys = list(STRATEGIES) if strategies is None else list(strategies)
    results = []
    for i, key in enumerate(keys):
        strategy = create_strategy(key, cmp)
        if progress_callback is not None:
            progress_callback(strategy.name, i, len(keys))
        results.append(run_strategy(strategy, entries, queries))
    return results


def summarize_runs(runs: list[list[StrategyResult]]) -> list[StrategyResult]:
    """
    Averages phase timings over repeated benchmark runs.
    Every run must cover the same strategies in the same order; match counts
    are taken from the first run.
    """
    if not runs:
        return []

    summary = []
    for results in zip(*runs):
        first = results[0]
        phases = [name for name, _ in first.phase_timings]
        averaged = tuple((name, float(np.mean([r.phase_ms(name) for r in results]))) for name in phases)
        summary.append(StrategyResult(first.strategy_name, first.matches_found, first.total_queries, averaged))
    return summary


def format_result(result: StrategyResult) -> list[str]:
    """Renders a result as the report lines printed after each strategy."""
    lines = [
        f"Found {result.matches_found} / {result.total_queries} entries. "
        f"Time taken: {format_duration(result.total_ms)}"
    ]
    if len(result.phase_timings) > 1:
        for phase, ms in result.phase_timings:
            lines.append(f"{phase.capitalize()} time: {format_duration(ms)}")
    return lines
