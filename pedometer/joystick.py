"""Joystick displacement as a percentage and its direction."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

REST_X = 2100
REST_Y = 2200
MAX_X = 3950  # fully left
MAX_Y = 4000  # fully down
MIN_X = 290  # fully right
MIN_Y = 260  # fully up
MAX_PERCENT = 100
REST_BUFFER = 2
SCALE_10 = 10

_U16_MAX = 0xFFFF


class Direction(IntEnum):
    """Direction of displacement on one axis."""

    REST = 0
    X_LEFT = 1
    X_RIGHT = 2
    Y_UP = 3
    Y_DOWN = 4


@dataclass(frozen=True)
class JoystickPosition:
    """Percentage displacement and direction on both axes."""

    x_percentage: int = 0
    y_percentage: int = 0
    x_direction: Direction = Direction.REST
    y_direction: Direction = Direction.REST

    def y_scaled(self) -> int:
        """Vertical displacement in tenths, squared."""
        tenths = self.y_percentage // SCALE_10
        return (tenths * tenths) & _U16_MAX


def _check_raw(value: int) -> int:
    if not isinstance(value, int) or not 0 <= value <= _U16_MAX:
        raise ValueError(f"raw ADC value out of range: {value!r}")
    return value


def _axis_percentage(raw: int, rest: int, high: int, low: int) -> int:
    if raw > rest:
        return ((raw - rest) * 100 // (high - rest)) & _U16_MAX
    return ((rest - raw) * 100 // (rest - low)) & _U16_MAX


def raw_adc_to_percentage(x_raw: int, y_raw: int) -> tuple[int, int]:
    """Convert raw readings to unclamped displacement from rest, in percent."""
    x_raw = _check_raw(x_raw)
    y_raw = _check_raw(y_raw)
    return (
        _axis_percentage(x_raw, REST_X, MAX_X, MIN_X),
        _axis_percentage(y_raw, REST_Y, MAX_Y, MIN_Y),
    )


def clamp_percentage(value: int, direction: Direction) -> tuple[int, Direction]:
    """Limit a percentage to 100 and treat tiny displacements as rest."""
    if value > MAX_PERCENT:
        value = MAX_PERCENT
    if value < REST_BUFFER:
        return 0, Direction.REST
    return value, direction


def calc_position(x_raw: int, y_raw: int) -> JoystickPosition:
    """Work out the joystick position from one pair of raw readings."""
    x_direction = Direction.X_LEFT if x_raw > REST_X else Direction.X_RIGHT
    y_direction = Direction.Y_DOWN if y_raw > REST_Y else Direction.Y_UP
    x_pct, y_pct = raw_adc_to_percentage(x_raw, y_raw)
    x_pct, x_direction = clamp_percentage(x_pct, x_direction)
    y_pct, y_direction = clamp_percentage(y_pct, y_direction)
    return JoystickPosition(x_pct, y_pct, x_direction, y_direction)