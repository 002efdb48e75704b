"""Fixed-point low-pass filtering and a sliding magnitude window."""

from __future__ import annotations

from collections.abc import Sequence

N_SIZE = 64
ALPHA_SHIFT = 3
VAR_SCALING = 23

_U32 = 1 << 32
_U64 = 1 << 64


def _to_int16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value >= 0x8000 else value


def iir_filter(previous: Sequence[int], sample: Sequence[int]) -> tuple[int, ...]:
    """Apply y += (x - y) >> ALPHA_SHIFT to each axis and return the new outputs."""
    if len(previous) != len(sample):
        raise ValueError("previous and sample must have the same number of axes")
    return tuple(
        _to_int16(prev + ((new - prev) >> ALPHA_SHIFT))
        for prev, new in zip(previous, sample)
    )


class MagnitudeWindow:
    """Running sum, mean and scaled spread of the last N_SIZE magnitudes."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Empty the window, filling it with zeros."""
        self._buffer = [0] * N_SIZE
        self._index = 0
        self.sum = 0
        self._sum_of_sq = 0
        self.mean = 0
        self.scaled_variance = 0

    def update(self, magnitude: int) -> None:
        """Replace the oldest reading with a new one and refresh the statistics."""
        if not isinstance(magnitude, int) or not 0 <= magnitude < _U32:
            raise ValueError(f"magnitude must be an unsigned 32-bit value: {magnitude!r}")
        oldest = self._buffer[self._index]
        self.sum = (self.sum - oldest + magnitude) % _U32
        self._sum_of_sq = (self._sum_of_sq - oldest * oldest + magnitude * magnitude) % _U64
        self._buffer[self._index] = magnitude
        self._index = (self._index + 1) % N_SIZE

        self.mean = self.sum // N_SIZE
        mean_sq = self.mean * self.mean
        self.scaled_variance = (((self._sum_of_sq - mean_sq) % _U64) >> VAR_SCALING) % _U32

    @property
    def current(self) -> int:
        """Most recently added reading."""
        return self._buffer[(self._index - 1) % N_SIZE]

    @property
    def readings(self) -> list[int]:
        """Readings in the window, oldest first."""
        return self._buffer[self._index:] + self._buffer[: self._index]