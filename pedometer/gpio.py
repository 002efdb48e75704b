"""Simulated general-purpose I/O bank with the board's pin assignments."""

from __future__ import annotations

from enum import Enum, IntEnum

PINS_PER_PORT = 16


class PinState(IntEnum):
    """Logic level of a single pin."""

    RESET = 0
    SET = 1

    def inverted(self) -> "PinState":
        return PinState.SET if self is PinState.RESET else PinState.RESET


class Port(Enum):
    """GPIO ports present on the board."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    F = "F"


# Board pin assignments as (port, pin number) pairs.
SW1 = (Port.C, 11)
RGB_DS4 = (Port.C, 12)
SW4 = (Port.C, 13)
RGB_DS1 = (Port.F, 3)
SW2 = (Port.C, 1)
RGB_DS2 = (Port.C, 2)
POTENTIOMETER = (Port.A, 1)
LD1 = (Port.A, 5)
JOYSTICK_X = (Port.C, 4)
JOYSTICK_Y = (Port.C, 5)
JOYSTICK_CLICK = (Port.B, 1)
RGB_DS3 = (Port.C, 6)
NUCLEO_LD2 = (Port.C, 9)
BUZZER = (Port.D, 0)
RGB_GREEN = (Port.D, 2)
RGB_RED = (Port.D, 3)
RGB_BLUE = (Port.D, 4)
SW3 = (Port.C, 10)

# Outputs driven low at start-up.
_OUTPUTS = (RGB_DS4, RGB_DS2, NUCLEO_LD2, RGB_DS1, LD1, RGB_GREEN, RGB_RED, RGB_BLUE)
# Inputs with pull-down resistors idle low; with pull-ups they idle high.
_PULL_DOWN_INPUTS = (SW1, SW2, JOYSTICK_CLICK)
_PULL_UP_INPUTS = (SW4, SW3)


def _check(port: Port, pin: int) -> tuple[Port, int]:
    if not isinstance(port, Port):
        raise TypeError(f"not a GPIO port: {port!r}")
    if not isinstance(pin, int) or not 0 <= pin < PINS_PER_PORT:
        raise ValueError(f"pin number out of range: {pin!r}")
    return port, pin


class GpioBank:
    """Pin levels of every port, configured as the board comes out of reset."""

    def __init__(self) -> None:
        self._levels: dict[tuple[Port, int], PinState] = {}
        for key in _OUTPUTS + _PULL_DOWN_INPUTS:
            self._levels[key] = PinState.RESET
        for key in _PULL_UP_INPUTS:
            self._levels[key] = PinState.SET

    def read(self, port: Port, pin: int) -> PinState:
        """Return the level of a pin; unconfigured pins read low."""
        return self._levels.get(_check(port, pin), PinState.RESET)

    def write(self, port: Port, pin: int, state: PinState | int | bool) -> None:
        """Drive a pin to the given level."""
        self._levels[_check(port, pin)] = PinState(int(state))

    def toggle(self, port: Port, pin: int) -> PinState:
        """Invert a pin and return its new level."""
        new_state = self.read(port, pin).inverted()
        self._levels[(port, pin)] = new_state
        return new_state