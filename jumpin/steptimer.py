"""Frame timing with fixed or variable time steps."""

from __future__ import annotations

import time
from typing import Callable

TICKS_PER_SECOND = 10_000_000
"""Canonical tick rate: time is counted in units of 100 nanoseconds."""

_UINT64 = 1 << 64


def ticks_to_seconds(ticks: int) -> float:
    """Convert canonical ticks to seconds."""
    return ticks / TICKS_PER_SECOND


def seconds_to_ticks(seconds: float) -> int:
    """Convert seconds to canonical ticks, truncating."""
    return int(seconds * TICKS_PER_SECOND)


class StepTimer:
    """Timer that drives update callbacks at a fixed or variable rate.

    ``clock`` returns a monotonically increasing integer count and
    ``frequency`` is the number of such counts per second.
    """

    def __init__(
        self,
        clock: Callable[[], int] = time.perf_counter_ns,
        frequency: int = 1_000_000_000,
    ) -> None:
        if frequency <= 0:
            raise ValueError("clock frequency must be positive")
        self._clock = clock
        self._frequency = frequency
        self._last_time = clock()
        # Deltas are clamped to a tenth of a second.
        self._max_delta = frequency // 10

        self._elapsed_ticks = 0
        self._total_ticks = 0
        self._left_over_ticks = 0

        self._frame_count = 0
        self._frames_per_second = 0
        self._frames_this_second = 0
        self._second_counter = 0

        self.fixed_time_step = False
        self._target_elapsed_ticks = TICKS_PER_SECOND // 60

    @property
    def elapsed_ticks(self) -> int:
        """Ticks elapsed during the last update."""
        return self._elapsed_ticks

    @property
    def elapsed_seconds(self) -> float:
        """Seconds elapsed during the last update."""
        return ticks_to_seconds(self._elapsed_ticks)

    @property
    def total_ticks(self) -> int:
        """Ticks accumulated over all updates."""
        return self._total_ticks

    @property
    def total_seconds(self) -> float:
        """Seconds accumulated over all updates."""
        return ticks_to_seconds(self._total_ticks)

    @property
    def frame_count(self) -> int:
        """Number of updates performed so far."""
        return self._frame_count

    @property
    def frames_per_second(self) -> int:
        """Updates counted during the most recently completed second."""
        return self._frames_per_second

    @property
    def target_elapsed_ticks(self) -> int:
        """Step length used in fixed time step mode, in ticks."""
        return self._target_elapsed_ticks

    @target_elapsed_ticks.setter
    def target_elapsed_ticks(self, ticks: int) -> None:
        if ticks <= 0:
            raise ValueError("target elapsed ticks must be positive")
        self._target_elapsed_ticks = int(ticks)

    @property
    def target_elapsed_seconds(self) -> float:
        """Step length used in fixed time step mode, in seconds."""
        return ticks_to_seconds(self._target_elapsed_ticks)

    @target_elapsed_seconds.setter
    def target_elapsed_seconds(self, seconds: float) -> None:
        self.target_elapsed_ticks = seconds_to_ticks(seconds)

    def reset_elapsed_time(self) -> None:
        """Forget time spent since the last tick, avoiding catch-up updates."""
        self._last_time = self._clock()
        self._left_over_ticks = 0
        self._frames_per_second = 0
        self._frames_this_second = 0
        self._second_counter = 0

    def tick(self, update: Callable[[], object]) -> None:
        """Advance the clock and call ``update`` as many times as due."""
        now = self._clock()
        delta = (now - self._last_time) % _UINT64
        self._last_time = now
        self._second_counter = (self._second_counter + delta) % _UINT64

        delta = min(delta, self._max_delta)
        delta = delta * TICKS_PER_SECOND // self._frequency

        last_frame_count = self._frame_count

        if self.fixed_time_step:
            # Snap tiny deviations from the target to avoid drift.
            if abs(delta - self._target_elapsed_ticks) < TICKS_PER_SECOND // 4000:
                delta = self._target_elapsed_ticks

            self._left_over_ticks += delta
            while self._left_over_ticks >= self._target_elapsed_ticks:
                self._elapsed_ticks = self._target_elapsed_ticks
                self._total_ticks += self._target_elapsed_ticks
                self._left_over_ticks -= self._target_elapsed_ticks
                self._frame_count += 1
                update()
        else:
            self._elapsed_ticks = delta
            self._total_ticks += delta
            self._left_over_ticks = 0
            self._frame_count += 1
            update()

        if self._frame_count != last_frame_count:
            self._frames_this_second += 1

        if self._second_counter >= self._frequency:
            self._frames_per_second = self._frames_this_second
            self._frames_this_second = 0
            self._second_counter %= self._frequency