"""Tests for the delay/sound timer."""

from chip8vm import Timer


def test_default():
    timer = Timer.create()
    assert not timer.is_active()
    assert timer.current_value() == 0


def test_tick_when_value_is_zero():
    timer = Timer.create().tick()
    assert not timer.is_active()
    assert timer.current_value() == 0


def test_tick_when_value_is_non_zero():
    timer = Timer.create().set_value(2)

    timer = timer.tick()
    assert timer.is_active()
    assert timer.current_value() == 1

    timer = timer.tick()
    assert not timer.is_active()
    assert timer.current_value() == 0


def test_set_value_is_8_bit():
    timer = Timer.create().set_value(255)
    assert timer.current_value() == 255
    assert timer.tick().current_value() == 254
