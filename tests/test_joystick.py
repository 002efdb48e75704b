import pytest

from pedometer.joystick import (
    MAX_X,
    MAX_Y,
    MIN_X,
    MIN_Y,
    REST_X,
    REST_Y,
    Direction,
    JoystickPosition,
    calc_position,
    clamp_percentage,
    raw_adc_to_percentage,
)


def test_rest_position():
    pos = calc_position(REST_X, REST_Y)
    assert pos == JoystickPosition(0, 0, Direction.REST, Direction.REST)


def test_full_left_and_down():
    pos = calc_position(MAX_X, MAX_Y)
    assert pos.x_percentage == 100
    assert pos.y_percentage == 100
    assert pos.x_direction is Direction.X_LEFT
    assert pos.y_direction is Direction.Y_DOWN


def test_full_right_and_up():
    pos = calc_position(MIN_X, MIN_Y)
    assert pos.x_percentage == 100
    assert pos.y_percentage == 100
    assert pos.x_direction is Direction.X_RIGHT
    assert pos.y_direction is Direction.Y_UP


def test_extremes_map_to_full_scale():
    assert raw_adc_to_percentage(MAX_X, MAX_Y) == (100, 100)
    assert raw_adc_to_percentage(MIN_X, MIN_Y) == (100, 100)
    assert raw_adc_to_percentage(REST_X, REST_Y) == (0, 0)


def test_beyond_range_is_clamped():
    x_pct, y_pct = raw_adc_to_percentage(4095, 0)
    assert x_pct > 100
    pos = calc_position(4095, 0)
    assert pos.x_percentage == 100
    assert pos.y_percentage == 100


def test_clamp_limits_to_hundred():
    assert clamp_percentage(150, Direction.X_LEFT) == (100, Direction.X_LEFT)


def test_clamp_small_value_means_rest():
    assert clamp_percentage(1, Direction.Y_UP) == (0, Direction.REST)
    assert clamp_percentage(0, Direction.X_RIGHT) == (0, Direction.REST)


def test_clamp_keeps_value_in_range():
    assert clamp_percentage(2, Direction.Y_UP) == (2, Direction.Y_UP)
    assert clamp_percentage(100, Direction.Y_DOWN) == (100, Direction.Y_DOWN)


def test_y_scaled():
    assert JoystickPosition(y_percentage=100).y_scaled() == 100
    assert JoystickPosition(y_percentage=9).y_scaled() == 0
    assert JoystickPosition(y_percentage=57).y_scaled() == 25


@pytest.mark.parametrize("x_raw,y_raw", [(-1, 0), (0, 65536), (1.0, 0)])
def test_rejects_invalid_raw(x_raw, y_raw):
    with pytest.raises(ValueError):
        raw_adc_to_percentage(x_raw, y_raw)