import pytest

from orbitcam.mouse import DOUBLE_CLICK_TIME, ButtonAction, Mouse


def test_press_records_position_and_mods():
    mouse = Mouse()
    mouse.record_move(12.5, 40.0)
    mouse.record_button(1, ButtonAction.PRESS, 4, now=10.0)
    assert mouse.is_pressed[1] is True
    assert mouse.last_click_x[1] == 12.5
    assert mouse.last_click_y[1] == 40.0
    assert mouse.last_click_time[1] == 10.0
    assert mouse.mods[1] == 4
    assert mouse.is_pressed[0] is False


def test_release_clears_pressed():
    mouse = Mouse()
    mouse.record_button(0, ButtonAction.PRESS, 0, now=5.0)
    mouse.record_button(0, ButtonAction.RELEASE, 0, now=5.1)
    assert mouse.is_pressed[0] is False
    assert mouse.last_click_time[0] == 5.0


def test_double_click_detection():
    mouse = Mouse()
    mouse.record_button(0, ButtonAction.PRESS, 0, now=10.0)
    assert mouse.is_double_click[0] is False
    mouse.record_button(0, ButtonAction.RELEASE, 0, now=10.05)
    mouse.record_button(0, ButtonAction.PRESS, 0, now=10.0 + DOUBLE_CLICK_TIME / 2)
    assert mouse.is_double_click[0] is True
    mouse.record_button(0, ButtonAction.PRESS, 0, now=20.0)
    assert mouse.is_double_click[0] is False


def test_double_click_is_per_button():
    mouse = Mouse()
    mouse.record_button(0, ButtonAction.PRESS, 0, now=10.0)
    mouse.record_button(2, ButtonAction.PRESS, 0, now=10.1)
    assert mouse.is_double_click[2] is False


def test_default_clock_used():
    mouse = Mouse()
    mouse.record_button(2, ButtonAction.PRESS, 0)
    mouse.record_button(2, ButtonAction.PRESS, 0)
    assert mouse.is_double_click[2] is True
    assert mouse.last_click_time[2] > 0


def test_move_updates_position():
    mouse = Mouse()
    mouse.record_move(3.0, 7.0)
    assert (mouse.x, mouse.y) == (3.0, 7.0)


@pytest.mark.parametrize("button", [-1, 3])
def test_invalid_button_raises(button):
    with pytest.raises(ValueError):
        Mouse().record_button(button, ButtonAction.PRESS, 0, now=1.0)


def test_unknown_action_ignored():
    mouse = Mouse()
    mouse.record_button(0, 2, 0, now=1.0)
    assert mouse.is_pressed == [False, False, False]
    assert mouse.last_click_time[0] == 0.0