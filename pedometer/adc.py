"""Latest conversions of the three analogue channels."""

from __future__ import annotations

from collections.abc import Sequence

NUM_CHANNELS = 3
_U16_MAX = 0xFFFF

# Conversion order of the scan sequence.
POTENTIOMETER_INDEX = 0
JOYSTICK_Y_INDEX = 1
JOYSTICK_X_INDEX = 2


class AdcReadings:
    """Holds one scan of the potentiometer and joystick channels."""

    def __init__(self) -> None:
        self._samples: tuple[int, ...] = (0,) * NUM_CHANNELS

    def store(self, samples: Sequence[int]) -> None:
        """Record a completed scan: potentiometer, joystick Y, joystick X."""
        values = tuple(samples)
        if len(values) != NUM_CHANNELS:
            raise ValueError(
                f"expected {NUM_CHANNELS} samples, got {len(values)}"
            )
        for value in values:
            if not isinstance(value, int) or not 0 <= value <= _U16_MAX:
                raise ValueError(f"sample out of range: {value!r}")
        self._samples = values

    def joystick(self) -> tuple[int, int]:
        """Return the raw joystick readings as (x, y)."""
        return self._samples[JOYSTICK_X_INDEX], self._samples[JOYSTICK_Y_INDEX]

    def potentiometer(self) -> int:
        """Return the raw potentiometer reading."""
        return self._samples[POTENTIOMETER_INDEX]