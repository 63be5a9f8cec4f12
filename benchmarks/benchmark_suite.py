"""
lazyrange Benchmark Suite
=========================

Compares lazy views against the eager list-comprehension equivalent.

Every benchmark is a pair (baseline, lazy) computing the same result:
  - baseline: plain Python building intermediate lists
  - lazy: the same chain expressed as a lazyrange pipeline

Views pay for bidirectional cursors and per-step sentinel checks, so the
interesting numbers are the ones where ``take_n`` short-circuits a long
source, and the cost of ``len()``/indexing on adaptor views, which is
linear by design.

Usage:
    python -m benchmarks.benchmark_suite
"""

import statistics
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List

from tabulate import tabulate

from lazyrange import enumerate_, filter_, map_, take_n, to_list, zip_
from lazyrange.utils.helpers import benchmark, format_ns, format_speedup

ITERATIONS = 20
WARMUP = 3


@dataclass
class BenchmarkResult:
    """Result of a single benchmark pair."""
    name: str
    baseline_times_ns: List[int] = field(default_factory=list)
    lazy_times_ns: List[int] = field(default_factory=list)
    correct: bool = True

    @property
    def baseline_median_ns(self) -> float:
        return statistics.median(self.baseline_times_ns) if self.baseline_times_ns else 0

    @property
    def lazy_median_ns(self) -> float:
        return statistics.median(self.lazy_times_ns) if self.lazy_times_ns else 0


def _is_even(x):
    return x % 2 == 0


def _square(x):
    return x * x


class PipelineBenchmarks:
    """Pairs of eager and lazy implementations."""

    @staticmethod
    def filter_map_baseline(data):
        return [x * x for x in data if x % 2 == 0]

    @staticmethod
    def filter_map_lazy(data):
        return data | filter_(_is_even) | map_(_square) | to_list

    @staticmethod
    def short_circuit_baseline(data):
        return [x * x for x in data if x % 2 == 0][:10]

    @staticmethod
    def short_circuit_lazy(data):
        return data | filter_(_is_even) | map_(_square) | take_n(10) | to_list

    @staticmethod
    def zip_baseline(data):
        return list(zip(data, reversed(data)))

    @staticmethod
    def zip_lazy(data):
        return zip_(data, data[::-1]) | to_list

    @staticmethod
    def enumerate_baseline(data):
        return list(enumerate(data))

    @staticmethod
    def enumerate_lazy(data):
        return enumerate_(data) | to_list

    @staticmethod
    def indexed_back_baseline(data):
        return [x for x in data if x % 2 == 0][-1]

    @staticmethod
    def indexed_back_lazy(data):
        return (data | filter_(_is_even)).back()


def get_all_benchmarks(size: int = 10_000) -> Dict[str, Dict[str, Any]]:
    """Return benchmark pairs keyed by name."""
    data = list(range(size))
    suite = PipelineBenchmarks
    return {
        'filter_map': {
            'baseline': suite.filter_map_baseline,
            'lazy': suite.filter_map_lazy,
            'args': (data,),
        },
        'short_circuit_take': {
            'baseline': suite.short_circuit_baseline,
            'lazy': suite.short_circuit_lazy,
            'args': (data,),
        },
        'zip': {
            'baseline': suite.zip_baseline,
            'lazy': suite.zip_lazy,
            'args': (data,),
        },
        'enumerate': {
            'baseline': suite.enumerate_baseline,
            'lazy': suite.enumerate_lazy,
            'args': (data,),
        },
        'filtered_back': {
            'baseline': suite.indexed_back_baseline,
            'lazy': suite.indexed_back_lazy,
            'args': (data,),
        },
    }


def time_function(func: Callable, args: tuple, iterations: int, warmup: int) -> List[int]:
    timed = benchmark(func, iterations=iterations, warmup=warmup)
    timed(*args)
    return timed.__benchmark_results__['times_ns']


def run_benchmarks(size: int = 10_000, iterations: int = ITERATIONS, warmup: int = WARMUP) -> List[BenchmarkResult]:
    results = []
    for name, entry in get_all_benchmarks(size).items():
        baseline, lazy, args = entry['baseline'], entry['lazy'], entry['args']
        result = BenchmarkResult(name=name)
        result.correct = baseline(*args) == lazy(*args)
        result.baseline_times_ns = time_function(baseline, args, iterations, warmup)
        result.lazy_times_ns = time_function(lazy, args, iterations, warmup)
        results.append(result)
    return results


def format_report(results: List[BenchmarkResult]) -> str:
    rows = [
        [
            r.name,
            format_ns(r.baseline_median_ns),
            format_ns(r.lazy_median_ns),
            format_speedup(r.baseline_median_ns, r.lazy_median_ns),
            "yes" if r.correct else "NO",
        ]
        for r in results
    ]
    return tabulate(rows, headers=["benchmark", "eager", "lazy", "lazy vs eager", "same result"])


if __name__ == '__main__':
    print(format_report(run_benchmarks()))
