"""
Timing Harness
===============

Repeated-trial timing for hash computations.

A single run of a microsecond-scale digest is dominated by timer
quantisation, so every computation is executed a fixed number of times
(default 10, no warm-up discarded) and the mean of the raw tick counts
is converted to milliseconds.  Outputs are deterministic per input for
the digest family and Argon2id, so the last run's output is returned as
representative; BCrypt draws a fresh salt per run and its last output
is as valid as any other.

The tick source is :func:`time.perf_counter_ns`, a monotonic
high-resolution counter with a fixed frequency of 10^9 ticks/second.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from shared.logger import BenchLogger

NS_PER_SECOND = 1_000_000_000


@dataclass(frozen=True, slots=True)
class TimingMeasurement:
    """Output and timing of one repeated-trial measurement.

    Attributes:
        output: Output of the last run.
        average_ms: Mean duration in milliseconds, rounded.
        samples: Raw elapsed ticks per run, in execution order.
        frequency: Ticks per second of the clock that produced *samples*.
    """

    output: str
    average_ms: float
    samples: tuple[int, ...]
    frequency: int = NS_PER_SECOND

    def _as_ms(self) -> np.ndarray:
        return np.asarray(self.samples, dtype=np.float64) * 1000.0 / self.frequency

    @property
    def min_ms(self) -> float:
        return float(self._as_ms().min())

    @property
    def max_ms(self) -> float:
        return float(self._as_ms().max())

    @property
    def stdev_ms(self) -> float:
        """Population standard deviation of the per-run durations."""
        return float(self._as_ms().std())


class TimingHarness:
    """Run a computation repeatedly and average its duration.

    Usage::

        harness = TimingHarness()
        measurement = harness.measure(lambda: compute_digest(kind, data))
        measurement.average_ms    # e.g. 0.002

    Args:
        iterations: Number of sequential runs per measurement.
        decimals: Fractional digits kept in the averaged milliseconds.
        clock: Tick source returning an integer counter.
        frequency: Ticks per second of *clock*.
        logger: Optional logger for per-measurement debug lines.
    """

    def __init__(
        self,
        iterations: int = 10,
        decimals: int = 3,
        clock: Callable[[], int] = time.perf_counter_ns,
        frequency: int = NS_PER_SECOND,
        logger: Optional[BenchLogger] = None,
    ) -> None:
        if iterations < 1:
            raise ValueError("iterations must be at least 1")
        self.iterations = iterations
        self.decimals = decimals
        self._clock = clock
        self._frequency = frequency
        self._logger = logger

    def measure(self, computation: Callable[[], str]) -> TimingMeasurement:
        """Execute *computation* ``iterations`` times and average the ticks."""
        samples: list[int] = []
        output = ""
        for _ in range(self.iterations):
            start = self._clock()
            output = computation()
            samples.append(self._clock() - start)

        average_ms = self.to_ms(float(np.mean(samples)))
        if self._logger is not None:
            self._logger.debug(
                "Measured %d runs: avg %.3f ms", self.iterations, average_ms
            )
        return TimingMeasurement(
            output=output,
            average_ms=average_ms,
            samples=tuple(samples),
            frequency=self._frequency,
        )

    def to_ms(self, ticks: float) -> float:
        """Convert a tick count to rounded milliseconds."""
        return round(ticks * 1000.0 / self._frequency, self.decimals)

    def start(self) -> int:
        """Current tick count, for timing a single path with :meth:`elapsed_ms`."""
        return self._clock()

    def elapsed_ms(self, start: int) -> float:
        return self.to_ms(self._clock() - start)
