"""Direction LEDs and the colour channels of the RGB LED."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

from . import gpio
from .gpio import GpioBank, PinState, Port

logger = logging.getLogger(__name__)


class Led(IntEnum):
    """Direction LEDs."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3


class Colour(IntEnum):
    """Colour channels of the RGB LED."""

    RED = 0
    GREEN = 1
    BLUE = 2


@dataclass(frozen=True)
class _Output:
    port: Port
    pin: int
    active_high: bool

    @property
    def on_level(self) -> PinState:
        return PinState.SET if self.active_high else PinState.RESET

    @property
    def off_level(self) -> PinState:
        return self.on_level.inverted()


_LEDS = {
    Led.LEFT: _Output(*gpio.RGB_DS1, active_high=False),
    Led.DOWN: _Output(*gpio.RGB_DS2, active_high=False),
    Led.UP: _Output(*gpio.RGB_DS3, active_high=False),
    Led.RIGHT: _Output(*gpio.RGB_DS4, active_high=False),
}

_COLOURS = {
    Colour.RED: _Output(*gpio.RGB_RED, active_high=True),
    Colour.GREEN: _Output(*gpio.RGB_GREEN, active_high=True),
    Colour.BLUE: _Output(*gpio.RGB_BLUE, active_high=True),
}


class RgbBoard:
    """Switches the LEDs through a GPIO bank, honouring each output's polarity."""

    def __init__(self, gpio: GpioBank) -> None:
        self.gpio = gpio

    def _drive(self, output: _Output, level: PinState) -> None:
        self.gpio.write(output.port, output.pin, level)

    def led_on(self, led: Led | int) -> None:
        """Light a direction LED."""
        output = _LEDS[Led(led)]
        self._drive(output, output.on_level)

    def led_off(self, led: Led | int) -> None:
        """Extinguish a direction LED."""
        led = Led(led)
        logger.debug("Turning OFF LED index %d", led)
        output = _LEDS[led]
        self._drive(output, output.off_level)

    def led_toggle(self, led: Led | int) -> PinState:
        """Invert a direction LED's pin and return its new level."""
        output = _LEDS[Led(led)]
        return self.gpio.toggle(output.port, output.pin)

    def colour_on(self, colour: Colour | int) -> None:
        """Turn a colour channel on."""
        output = _COLOURS[Colour(colour)]
        self._drive(output, output.on_level)

    def colour_off(self, colour: Colour | int) -> None:
        """Turn a colour channel off."""
        output = _COLOURS[Colour(colour)]
        self._drive(output, output.off_level)

    def colour_toggle(self, colour: Colour | int) -> PinState:
        """Invert a colour channel's pin and return its new level."""
        output = _COLOURS[Colour(colour)]
        return self.gpio.toggle(output.port, output.pin)

    def all_leds_on(self) -> None:
        """Light every direction LED in turn."""
        for led in Led:
            self.led_on(led)

    def all_leds_off(self) -> None:
        """Extinguish every direction LED in turn."""
        for led in Led:
            self.led_off(led)

    def all_colours_on(self) -> None:
        """Turn every colour channel on in turn."""
        for colour in Colour:
            self.colour_on(colour)

    def all_colours_off(self) -> None:
        """Turn every colour channel off in turn."""
        for colour in Colour:
            self.colour_off(colour)