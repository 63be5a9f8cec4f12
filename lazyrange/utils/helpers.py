"""Utility helpers for lazyrange."""

import time
import functools
from typing import Any, Callable, Union


def invoke(function: Union[Callable, str], *args: Any, **kwargs: Any) -> Any:
    """
    Call ``function`` with ``args``, accepting member references.

    A member reference is an attribute name given as a string. The first
    positional argument is the receiver: a method attribute is called with
    the remaining arguments, a data attribute is returned as is.

        >>> invoke(len, [1, 2])
        2
        >>> invoke("upper", "abc")
        'ABC'
        >>> invoke("real", 3 + 4j)
        3.0
    """
    if isinstance(function, str):
        if not args:
            raise TypeError(f"member reference {function!r} needs a receiver")
        receiver, *rest = args
        member = getattr(receiver, function)
        if callable(member):
            return member(*rest, **kwargs)
        if rest or kwargs:
            raise TypeError(f"data member {function!r} takes no arguments")
        return member
    return function(*args, **kwargs)


class Timer:
    """High-resolution timer for benchmarking."""

    def __init__(self):
        self.start_ns = 0
        self.end_ns = 0

    def __enter__(self):
        self.start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, *exc):
        self.end_ns = time.perf_counter_ns()

    @property
    def elapsed_ns(self) -> int:
        return self.end_ns - self.start_ns

    @property
    def elapsed_us(self) -> float:
        return self.elapsed_ns / 1000.0

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1_000_000.0


def benchmark(func: Callable = None, *, iterations: int = 100, warmup: int = 10):
    """
    Decorator that runs a function ``warmup + iterations`` times per call
    and returns the last result.

    Usage:
        @benchmark(iterations=1000)
        def drain_pipeline():
            ...

    Per-iteration timings of the last call, in run order, are stored on
    ``wrapper.__benchmark_results__['times_ns']`` together with summary
    statistics.
    """
    if func is None:
        return lambda f: benchmark(f, iterations=iterations, warmup=warmup)
    if iterations < 1:
        raise ValueError(f"benchmark needs at least one iteration, got {iterations}")

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        for _ in range(warmup):
            func(*args, **kwargs)

        times_ns = []
        for _ in range(iterations):
            with Timer() as t:
                result = func(*args, **kwargs)
            times_ns.append(t.elapsed_ns)

        ordered = sorted(times_ns)
        wrapper.__benchmark_results__ = {
            'times_ns': times_ns,
            'median_ns': ordered[len(ordered) // 2],
            'min_ns': ordered[0],
            'max_ns': ordered[-1],
            'iterations': iterations,
        }
        return result

    return wrapper


def format_ns(ns: float) -> str:
    """Format nanoseconds into a human-readable string."""
    if ns < 1_000:
        return f"{ns:.0f} ns"
    elif ns < 1_000_000:
        return f"{ns / 1_000:.1f} µs"
    elif ns < 1_000_000_000:
        return f"{ns / 1_000_000:.2f} ms"
    else:
        return f"{ns / 1_000_000_000:.3f} s"


def format_speedup(baseline_ns: float, candidate_ns: float) -> str:
    """Format the ratio between a baseline and a candidate timing."""
    if candidate_ns <= 0:
        return "∞x"
    ratio = baseline_ns / candidate_ns
    if ratio >= 1:
        return f"{ratio:.2f}x faster"
    else:
        return f"{1/ratio:.2f}x slower"
