import pytest

from pedometer import gpio
from pedometer.gpio import GpioBank, PinState
from pedometer.rgb import Colour, Led, RgbBoard

LED_PINS = {
    Led.LEFT: gpio.RGB_DS1,
    Led.DOWN: gpio.RGB_DS2,
    Led.UP: gpio.RGB_DS3,
    Led.RIGHT: gpio.RGB_DS4,
}

COLOUR_PINS = {
    Colour.RED: gpio.RGB_RED,
    Colour.GREEN: gpio.RGB_GREEN,
    Colour.BLUE: gpio.RGB_BLUE,
}


@pytest.fixture
def board():
    return RgbBoard(GpioBank())


@pytest.mark.parametrize("led", list(Led))
def test_leds_are_active_low(board, led):
    board.led_off(led)
    assert board.gpio.read(*LED_PINS[led]) == PinState.SET
    board.led_on(led)
    assert board.gpio.read(*LED_PINS[led]) == PinState.RESET


@pytest.mark.parametrize("colour", list(Colour))
def test_colours_are_active_high(board, colour):
    board.colour_on(colour)
    assert board.gpio.read(*COLOUR_PINS[colour]) == PinState.SET
    board.colour_off(colour)
    assert board.gpio.read(*COLOUR_PINS[colour]) == PinState.RESET


def test_led_off_leaves_others_alone(board):
    board.all_leds_on()
    board.led_off(Led.UP)
    levels = {led: board.gpio.read(*pin) for led, pin in LED_PINS.items()}
    assert levels == {
        Led.LEFT: PinState.RESET,
        Led.DOWN: PinState.RESET,
        Led.UP: PinState.SET,
        Led.RIGHT: PinState.RESET,
    }


def test_led_toggle_round_trip(board):
    before = board.gpio.read(*LED_PINS[Led.RIGHT])
    after = board.led_toggle(Led.RIGHT)
    assert after == before.inverted()
    assert board.gpio.read(*LED_PINS[Led.RIGHT]) == after
    assert board.led_toggle(Led.RIGHT) == before


def test_colour_toggle_round_trip(board):
    board.colour_off(Colour.GREEN)
    assert board.colour_toggle(Colour.GREEN) == PinState.SET
    assert board.colour_toggle(Colour.GREEN) == PinState.RESET


def test_all_leds(board):
    board.all_leds_off()
    assert {board.gpio.read(*pin) for pin in LED_PINS.values()} == {PinState.SET}
    board.all_leds_on()
    assert {board.gpio.read(*pin) for pin in LED_PINS.values()} == {PinState.RESET}


def test_all_colours(board):
    board.all_colours_on()
    assert {board.gpio.read(*pin) for pin in COLOUR_PINS.values()} == {PinState.SET}
    board.all_colours_off()
    assert {board.gpio.read(*pin) for pin in COLOUR_PINS.values()} == {PinState.RESET}


def test_leds_and_colours_independent(board):
    board.all_colours_on()
    board.all_leds_off()
    assert {board.gpio.read(*pin) for pin in COLOUR_PINS.values()} == {PinState.SET}


def test_accepts_integer_index(board):
    board.led_off(int(Led.DOWN))
    assert board.gpio.read(*LED_PINS[Led.DOWN]) == PinState.SET


def test_unknown_led_rejected(board):
    with pytest.raises(ValueError):
        board.led_on(len(Led))


def test_unknown_colour_rejected(board):
    with pytest.raises(ValueError):
        board.colour_off(len(Colour))