"""Duty-cycle control of a timer's PWM output channel."""

from __future__ import annotations

from dataclasses import dataclass

_U8 = 1 << 8
_U32 = 1 << 32


@dataclass
class PwmChannel:
    """A PWM channel described by its timer's auto-reload and its compare value."""

    reload: int
    compare: int = 0

    def __post_init__(self) -> None:
        for name in ("reload", "compare"):
            value = getattr(self, name)
            if not isinstance(value, int) or not 0 <= value < _U32:
                raise ValueError(f"{name} must be an unsigned 32-bit value: {value!r}")

    def set_duty_cycle(self, duty: int) -> None:
        """Set the compare value for a duty cycle given in percent."""
        if not isinstance(duty, int) or not 0 <= duty < _U8:
            raise ValueError(f"duty must be an unsigned 8-bit value: {duty!r}")
        self.compare = (duty * (self.reload // 100)) % _U32

    def duty_cycle(self) -> int:
        """Return the duty cycle in percent; zero when the reload value is zero."""
        if self.reload == 0:
            return 0
        return (((self.compare * 100) % _U32) // self.reload) % _U8