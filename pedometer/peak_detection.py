"""Step detection on the falling edge of acceleration-magnitude peaks."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from .filter import N_SIZE

VAR_THRESHOLD = 50000
DELTA_MEAN_THRESHOLD = 2700
COOLDOWN_SAMPLES = 30
STEP_COUNT_INCREMENT = 1
MIN_SAMPLES = 3 * N_SIZE


class MagnitudeStats(Protocol):
    current: int
    mean: int
    scaled_variance: int


class PeakDetector:
    """Counts a step when the magnitude falls from above mean+delta to the mean."""

    def __init__(self, window: MagnitudeStats, on_step: Callable[[int], None]) -> None:
        self.window = window
        self.on_step = on_step
        self._samples_taken = 0
        self._samples_since_step = COOLDOWN_SAMPLES
        self._prev_mag = 0

    def execute(self) -> bool:
        """Examine the newest sample; return True if a step was counted."""
        current = self.window.current

        # Let the mean and variance settle before counting.
        if self._samples_taken < MIN_SAMPLES:
            self._samples_taken += 1
            self._prev_mag = current
            return False

        if self._samples_since_step < COOLDOWN_SAMPLES:
            self._samples_since_step += 1
            self._prev_mag = current
            return False

        variance = self.window.scaled_variance
        mean = self.window.mean
        mean_threshold = (mean + DELTA_MEAN_THRESHOLD) % (1 << 32)

        stepped = (
            self._prev_mag > mean_threshold
            and current <= mean
            and variance > VAR_THRESHOLD
        )
        if stepped:
            self.on_step(STEP_COUNT_INCREMENT)
            self._samples_since_step = 0

        self._prev_mag = current
        return stepped