import numpy as np
import pytest

from wfengine.input import (
    BUTTON_LEFT,
    BUTTON_RIGHT,
    KEY_A,
    KEY_D,
    KEY_SPACE,
    NUM_MOUSE_BUTTONS,
    EventType,
    Input,
    InputEvent,
)


def key_down(key):
    return InputEvent(EventType.KEY_DOWN, key=key)


def key_up(key):
    return InputEvent(EventType.KEY_UP, key=key)


def test_initial_state_has_no_keys():
    inp = Input()
    assert not inp.is_any_key_pressed()
    assert not inp.is_any_key_held()
    assert inp.pressed_keys() == []


def test_press_hold_release_cycle():
    inp = Input()
    inp.process_event(key_down(KEY_A))
    assert inp.is_key_pressed(KEY_A)
    assert not inp.is_key_held(KEY_A)
    assert inp.is_any_key_pressed()

    inp.refresh()
    assert not inp.is_key_pressed(KEY_A)
    assert inp.is_key_held(KEY_A)
    assert inp.held_keys() == [KEY_A]

    inp.process_event(key_up(KEY_A))
    assert inp.is_key_released(KEY_A)
    assert inp.released_keys() == [KEY_A]

    inp.refresh()
    assert not inp.is_key_released(KEY_A)
    assert not inp.is_any_key_held()


def test_pressed_keys_in_code_order():
    inp = Input()
    inp.process_event(key_down(KEY_SPACE))
    inp.process_event(key_down(KEY_D))
    inp.process_event(key_down(KEY_A))
    assert inp.pressed_keys() == sorted([KEY_A, KEY_D, KEY_SPACE])


def test_mouse_motion_accumulates_delta_and_resets():
    inp = Input()
    inp.process_event(InputEvent(EventType.MOUSE_MOTION, x=10.0, y=20.0, dx=1.0, dy=2.0))
    np.testing.assert_allclose(inp.mouse_delta(), [1.0, 2.0])
    inp.process_event(InputEvent(EventType.MOUSE_MOTION, x=13.0, y=24.0, dx=3.0, dy=4.0))
    np.testing.assert_allclose(inp.mouse_position(), [13.0, 24.0])
    np.testing.assert_allclose(inp.mouse_delta(), [1.0 + 3.0, 2.0 + 4.0])
    inp.refresh()
    np.testing.assert_allclose(inp.mouse_delta(), [0.0, 0.0])
    np.testing.assert_allclose(inp.mouse_position(), [13.0, 24.0])


def test_mouse_wheel_resets_each_frame():
    inp = Input()
    inp.process_event(InputEvent(EventType.MOUSE_WHEEL, x=0.0, y=1.0))
    np.testing.assert_allclose(inp.mouse_wheel(), [0.0, 1.0])
    inp.refresh()
    np.testing.assert_allclose(inp.mouse_wheel(), [0.0, 0.0])


def test_mouse_buttons():
    inp = Input()
    inp.process_event(InputEvent(EventType.MOUSE_BUTTON_DOWN, button=BUTTON_LEFT))
    assert inp.is_mouse_button_pressed(BUTTON_LEFT)
    assert not inp.is_mouse_button_pressed(BUTTON_RIGHT)
    inp.refresh()
    assert inp.is_mouse_button_held(BUTTON_LEFT)
    inp.process_event(InputEvent(EventType.MOUSE_BUTTON_UP, button=BUTTON_LEFT))
    assert inp.is_mouse_button_released(BUTTON_LEFT)
    assert not inp.is_mouse_button_held(BUTTON_LEFT)


def test_out_of_range_button_raises():
    inp = Input()
    with pytest.raises(IndexError):
        inp.is_mouse_button_pressed(NUM_MOUSE_BUTTONS)
    with pytest.raises(IndexError):
        inp.process_event(InputEvent(EventType.MOUSE_BUTTON_DOWN, button=-1))


def test_returned_vectors_are_copies():
    inp = Input()
    pos = inp.mouse_position()
    pos[0] = 99.0
    np.testing.assert_allclose(inp.mouse_position(), [0.0, 0.0])