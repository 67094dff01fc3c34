"""A small timing harness reporting per-iteration microseconds."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional


def format_number(x: float) -> str:
    """Format ``x`` with just enough decimals to show at least three digits."""
    y = abs(x)
    if y == 0.0 or math.isnan(y):
        return f"{x:.0f}"
    digits = 0
    while y < 100.0:
        y *= 10.0
        digits += 1
    return f"{x:.{digits}f}"


@dataclass(frozen=True)
class BenchResult:
    """Minimum, average and maximum time per iteration, in microseconds."""

    name: str
    min_us: float
    avg_us: float
    max_us: float

    def __str__(self) -> str:
        return (
            f"{self.name}: min {format_number(self.min_us)}"
            f"us / avg {format_number(self.avg_us)}"
            f"us / max {format_number(self.max_us)}us"
        )


def run_benchmark(
    name: str,
    benchmark: Callable[[Any], Any],
    setup: Optional[Callable[[Any], Any]],
    teardown: Optional[Callable[[Any], Any]],
    data: Any,
    count: int,
    iterations: int,
) -> BenchResult:
    """Time ``benchmark(data)`` ``count`` times, print and return the summary.

    ``setup`` and ``teardown`` run around each timed call when given; they are
    not timed.  Times are divided by ``iterations``, the number of operations
    one call of ``benchmark`` performs.
    """
    if count < 1:
        raise ValueError("count must be at least 1")
    if iterations < 1:
        raise ValueError("iterations must be at least 1")

    timings = []
    for _ in range(count):
        if setup is not None:
            setup(data)
        begin = time.perf_counter()
        benchmark(data)
        timings.append(time.perf_counter() - begin)
        if teardown is not None:
            teardown(data)

    scale = 1_000_000.0 / iterations
    result = BenchResult(
        name=name,
        min_us=min(timings) * scale,
        avg_us=sum(timings) / count * scale,
        max_us=max(timings) * scale,
    )
    print(result)
    return result