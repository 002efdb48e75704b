"""Mapping of the potentiometer reading onto a step goal."""

from __future__ import annotations

MIN_ROTARY_VAL = 100
MAX_ROTARY_VAL = 4000

MIN_GOAL = 500
MAX_GOAL = 15000
NUM_GOAL_INCREMENTS = 400

RANGE_ROTARY = MAX_ROTARY_VAL - MIN_ROTARY_VAL
STEP_SIZE = (MAX_GOAL - MIN_GOAL) // NUM_GOAL_INCREMENTS

_U16_MAX = 0xFFFF


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


def read_goal(potentiometer_adc: int) -> int:
    """Return the step goal selected by a raw potentiometer reading.

    Readings well below the usable range wrap the 16-bit increment index
    and therefore select the maximum goal.
    """
    if not isinstance(potentiometer_adc, int) or not 0 <= potentiometer_adc <= _U16_MAX:
        raise ValueError(f"potentiometer reading out of range: {potentiometer_adc!r}")
    index = _trunc_div(
        (potentiometer_adc - MIN_ROTARY_VAL) * NUM_GOAL_INCREMENTS, RANGE_ROTARY
    ) & _U16_MAX
    goal = MIN_GOAL + index * STEP_SIZE
    return max(MIN_GOAL, min(goal, MAX_GOAL))