import pytest

from arkanoid import config
from arkanoid.powerups import PowerType, PowerUp


def test_int_becomes_power_type():
    assert PowerUp(3).type is PowerType.CATCH_BALL


def test_unknown_power_type_is_rejected():
    with pytest.raises(ValueError):
        PowerUp(9)


def test_place_sets_position():
    power_up = PowerUp(PowerType.LASER)
    power_up.place(40.0, 75.0)
    assert (power_up.x, power_up.y) == (40.0, 75.0)


def test_update_falls_straight_down():
    power_up = PowerUp(PowerType.PLAYER)
    power_up.place(40.0, 75.0)
    power_up.update()
    assert power_up.x == 40.0
    assert power_up.y == pytest.approx(75.0 + config.PU_DEFAULT_SPEED)


def test_update_keeps_falling():
    power_up = PowerUp(PowerType.SLOW_DOWN)
    previous = power_up.y
    for _ in range(5):
        power_up.update()
        assert power_up.y > previous
        previous = power_up.y


def test_destroy_clears_type():
    power_up = PowerUp(PowerType.INTERRUPTION)
    power_up.destroy()
    assert power_up.type is PowerType.NONE


def test_every_real_power_has_a_letter():
    real = {
        int(PowerUp(int(kind)).type)
        for kind in PowerType
        if kind is not PowerType.NONE
    }
    assert set(config.POWER_UP_LETTERS) == real