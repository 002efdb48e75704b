import pytest

from pedometer.pwm import PwmChannel


@pytest.mark.parametrize("duty", range(0, 101))
def test_round_trip_with_exact_reload(duty):
    channel = PwmChannel(reload=1000)
    channel.set_duty_cycle(duty)
    assert channel.duty_cycle() == duty


def test_compare_follows_duty():
    channel = PwmChannel(reload=1000)
    channel.set_duty_cycle(50)
    assert channel.compare == 500


def test_zero_reload_reads_zero():
    channel = PwmChannel(reload=0, compare=123)
    assert channel.duty_cycle() == 0
    channel.set_duty_cycle(80)
    assert channel.compare == 0


def test_duty_never_exceeds_request():
    channel = PwmChannel(reload=999)
    for duty in range(0, 101):
        channel.set_duty_cycle(duty)
        assert channel.duty_cycle() <= duty


def test_full_duty_with_exact_reload():
    channel = PwmChannel(reload=200)
    channel.set_duty_cycle(100)
    assert channel.compare == channel.reload
    assert channel.duty_cycle() == 100


@pytest.mark.parametrize("duty", [-1, 256, 2.5])
def test_rejects_invalid_duty(duty):
    channel = PwmChannel(reload=1000)
    with pytest.raises(ValueError):
        channel.set_duty_cycle(duty)


def test_rejects_invalid_reload():
    with pytest.raises(ValueError):
        PwmChannel(reload=-5)