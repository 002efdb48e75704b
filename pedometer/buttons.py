"""Debounced push buttons and joystick-click gesture detection."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from . import gpio
from .gpio import GpioBank, PinState, Port

MAX_DOUBLE_TAP_TIME_MS = 300
JOYSTICK_DEBOUNCE_MS = 100
JOYSTICK_MIN_HOLD_MS = 1000
# Consecutive polls a new level must be seen for before it is accepted.
NUM_BUT_POLLS = 3

_U32 = 1 << 32


class ButtonName(IntEnum):
    """Buttons on the board."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    JOYSTICK_CLICK = 4


class ButtonState(IntEnum):
    """Logical change reported for a button."""

    RELEASED = 0
    PUSHED = 1
    NO_CHANGE = 2


class JoystickEvent(IntEnum):
    """Outcome of a joystick click."""

    NONE = 0
    SHORT_PRESS = 1
    LONG_PRESS = 2


@dataclass
class _Button:
    port: Port
    pin: int
    normal_state: PinState
    state: PinState = PinState.RESET
    new_state_count: int = 0
    has_changed: bool = False

    def reset(self) -> None:
        self.state = self.normal_state
        self.new_state_count = 0
        self.has_changed = False


# Pin and idle level of each button.
_LAYOUT: dict[ButtonName, tuple[tuple[Port, int], PinState]] = {
    ButtonName.UP: (gpio.SW1, PinState.RESET),
    ButtonName.DOWN: (gpio.SW2, PinState.RESET),
    ButtonName.LEFT: (gpio.SW4, PinState.SET),
    ButtonName.RIGHT: (gpio.SW3, PinState.RESET),
    ButtonName.JOYSTICK_CLICK: (gpio.JOYSTICK_CLICK, PinState.SET),
}


def _elapsed(now: int, since: int) -> int:
    return (now - since) % _U32


class Buttons:
    """Polls the buttons through a GPIO bank, timing gestures with a millisecond clock."""

    def __init__(self, gpio: GpioBank, clock: Callable[[], int]) -> None:
        self.gpio = gpio
        self.clock = clock
        self._buttons = {
            name: _Button(port, pin, normal)
            for name, ((port, pin), normal) in _LAYOUT.items()
        }
        # Joystick hold tracking.
        self._pressed = False
        self._last_tick = 0
        self._press_tick = 0
        # Double-push tracking.
        self._last_push_time = 0
        self._push_pending = False
        self.reset()

    def _now(self) -> int:
        now = self.clock()
        if not isinstance(now, int):
            raise TypeError(f"clock must return an integer tick count: {now!r}")
        return now % _U32

    def reset(self) -> None:
        """Return every button to its idle state with no pending change."""
        for button in self._buttons.values():
            button.reset()

    def update(self) -> None:
        """Poll every button once and accept levels that have stayed put long enough."""
        for button in self._buttons.values():
            raw = self.gpio.read(button.port, button.pin)
            if raw != button.state:
                button.new_state_count += 1
                if button.new_state_count >= NUM_BUT_POLLS:
                    button.state = raw
                    button.has_changed = True
                    button.new_state_count = 0
            else:
                button.new_state_count = 0

    def check_button(self, name: ButtonName | int) -> ButtonState:
        """Report a change since the last call, clearing it, or NO_CHANGE."""
        button = self._buttons[ButtonName(name)]
        if not button.has_changed:
            return ButtonState.NO_CHANGE
        button.has_changed = False
        if button.state == button.normal_state:
            return ButtonState.RELEASED
        return ButtonState.PUSHED

    def check_hold(self) -> JoystickEvent:
        """Classify a completed joystick click as a short or long press."""
        click = self._buttons[ButtonName.JOYSTICK_CLICK]
        current = self.gpio.read(click.port, click.pin)
        now = self._now()

        expected = PinState.SET if self._pressed else PinState.RESET
        if _elapsed(now, self._last_tick) < JOYSTICK_DEBOUNCE_MS and current != expected:
            return JoystickEvent.NONE

        if current != self.gpio.read(click.port, click.pin):
            self._last_tick = now

        if not self._pressed:
            if current == PinState.SET:
                self._press_tick = now
                self._pressed = True
        elif current == PinState.RESET:
            held = _elapsed(now, self._press_tick)
            self._pressed = False
            if held >= JOYSTICK_MIN_HOLD_MS:
                return JoystickEvent.LONG_PRESS
            return JoystickEvent.SHORT_PRESS
        return JoystickEvent.NONE

    def check_double_push(self) -> bool:
        """Return True when DOWN is pushed twice within the double-tap time."""
        now = self._now()
        if self.check_button(ButtonName.DOWN) == ButtonState.PUSHED:
            if (
                self._push_pending
                and _elapsed(now, self._last_push_time) <= MAX_DOUBLE_TAP_TIME_MS
            ):
                self._push_pending = False
                return True
            self._push_pending = True
            self._last_push_time = now
        elif (
            self._push_pending
            and _elapsed(now, self._last_push_time) > MAX_DOUBLE_TAP_TIME_MS
        ):
            self._push_pending = False
        return False