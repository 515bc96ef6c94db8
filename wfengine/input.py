"""Keyboard and mouse state tracked across frames."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np

NUM_KEYS = 512
NUM_MOUSE_BUTTONS = 10

# Key codes (USB HID scancodes)
KEY_ESCAPE = 41
KEY_SHIFT_LEFT = 225
KEY_SHIFT_RIGHT = 229
KEY_ALT_LEFT = 226
KEY_ALT_RIGHT = 230
KEY_CTRL_LEFT = 224
KEY_CTRL_RIGHT = 228
KEY_CTRL_RETURN = 40

KEY_A, KEY_B, KEY_C, KEY_D, KEY_E, KEY_F, KEY_G = range(4, 11)
KEY_H, KEY_I, KEY_J, KEY_K, KEY_L, KEY_M, KEY_N = range(11, 18)
KEY_O, KEY_P, KEY_Q, KEY_R, KEY_S, KEY_T, KEY_U = range(18, 25)
KEY_V, KEY_W, KEY_X, KEY_Y, KEY_Z = range(25, 30)

KEY_1, KEY_2, KEY_3, KEY_4, KEY_5, KEY_6, KEY_7, KEY_8, KEY_9 = range(30, 39)
KEY_0 = 39

KEY_KP1, KEY_KP2, KEY_KP3, KEY_KP4, KEY_KP5, KEY_KP6, KEY_KP7, KEY_KP8, KEY_KP9 = range(89, 98)
KEY_KP0 = 98

KEY_RIGHT = 79
KEY_LEFT = 80
KEY_DOWN = 81
KEY_UP = 82

KEY_F1, KEY_F2, KEY_F3, KEY_F4, KEY_F5, KEY_F6 = range(58, 64)
KEY_F7, KEY_F8, KEY_F9, KEY_F10, KEY_F11, KEY_F12 = range(64, 70)

KEY_SPACE = 44
KEY_BACKSPACE = 42
KEY_DELETE = 76
KEY_TAB = 43
KEY_CAPS = 57

BUTTON_LEFT = 1
BUTTON_MIDDLE = 2
BUTTON_RIGHT = 3


class EventType(Enum):
    KEY_DOWN = auto()
    KEY_UP = auto()
    MOUSE_MOTION = auto()
    MOUSE_BUTTON_DOWN = auto()
    MOUSE_BUTTON_UP = auto()
    MOUSE_WHEEL = auto()


@dataclass(frozen=True)
class InputEvent:
    """A raw input event.

    Motion events carry the cursor position in ``x``/``y`` and the movement in
    ``dx``/``dy``; wheel events carry the scroll amounts in ``x``/``y``.
    """

    type: EventType
    key: int = 0
    repeat: bool = False
    button: int = 0
    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0


@dataclass
class _State:
    keys: list[bool] = field(default_factory=lambda: [False] * NUM_KEYS)
    repeat: list[bool] = field(default_factory=lambda: [False] * NUM_KEYS)
    buttons: list[bool] = field(default_factory=lambda: [False] * NUM_MOUSE_BUTTONS)
    position: np.ndarray = field(default_factory=lambda: np.zeros(2))
    delta: np.ndarray = field(default_factory=lambda: np.zeros(2))
    wheel: np.ndarray = field(default_factory=lambda: np.zeros(2))

    def copy(self) -> _State:
        return _State(
            list(self.keys),
            list(self.repeat),
            list(self.buttons),
            self.position.copy(),
            self.delta.copy(),
            self.wheel.copy(),
        )

    def refresh(self) -> None:
        # held keys persist; key-up events clear them
        self.repeat = [False] * NUM_KEYS
        self.delta = np.zeros(2)
        self.wheel = np.zeros(2)


def _check(index: int, limit: int, what: str) -> int:
    if not 0 <= index < limit:
        raise IndexError(f"{what} {index} out of range 0..{limit - 1}")
    return index


class Input:
    """Compares this frame's input state with the last to find presses and releases."""

    def __init__(self) -> None:
        self._current = _State()
        self._previous = _State()
        self.refresh()

    def refresh(self) -> None:
        """Start a new frame."""
        self._previous = self._current.copy()
        self._current.refresh()

    def process_event(self, event: InputEvent) -> None:
        cur = self._current
        kind = event.type
        if kind is EventType.KEY_DOWN:
            key = _check(event.key, NUM_KEYS, "key")
            cur.keys[key] = True
            cur.repeat[key] = event.repeat
        elif kind is EventType.KEY_UP:
            key = _check(event.key, NUM_KEYS, "key")
            cur.keys[key] = False
            cur.repeat[key] = False
        elif kind is EventType.MOUSE_MOTION:
            cur.position = np.array([event.x, event.y], dtype=float)
            cur.delta = cur.delta + np.array([event.dx, event.dy], dtype=float)
        elif kind is EventType.MOUSE_BUTTON_DOWN:
            cur.buttons[_check(event.button, NUM_MOUSE_BUTTONS, "button")] = True
        elif kind is EventType.MOUSE_BUTTON_UP:
            cur.buttons[_check(event.button, NUM_MOUSE_BUTTONS, "button")] = False
        elif kind is EventType.MOUSE_WHEEL:
            cur.wheel = cur.wheel + np.array([event.x, event.y], dtype=float)

    def is_any_key_pressed(self) -> bool:
        return bool(self.pressed_keys())

    def is_any_key_held(self) -> bool:
        return bool(self.held_keys())

    def is_key_pressed(self, key: int) -> bool:
        key = _check(key, NUM_KEYS, "key")
        return self._current.keys[key] and not self._previous.keys[key]

    def is_key_released(self, key: int) -> bool:
        key = _check(key, NUM_KEYS, "key")
        return not self._current.keys[key] and self._previous.keys[key]

    def is_key_held(self, key: int) -> bool:
        key = _check(key, NUM_KEYS, "key")
        return self._current.keys[key] and self._previous.keys[key]

    def pressed_keys(self) -> list[int]:
        return [k for k, (c, p) in enumerate(zip(self._current.keys, self._previous.keys)) if c and not p]

    def released_keys(self) -> list[int]:
        return [k for k, (c, p) in enumerate(zip(self._current.keys, self._previous.keys)) if p and not c]

    def held_keys(self) -> list[int]:
        return [k for k, (c, p) in enumerate(zip(self._current.keys, self._previous.keys)) if c and p]

    def is_mouse_button_pressed(self, button: int) -> bool:
        button = _check(button, NUM_MOUSE_BUTTONS, "button")
        return self._current.buttons[button] and not self._previous.buttons[button]

    def is_mouse_button_released(self, button: int) -> bool:
        button = _check(button, NUM_MOUSE_BUTTONS, "button")
        return not self._current.buttons[button] and self._previous.buttons[button]

    def is_mouse_button_held(self, button: int) -> bool:
        button = _check(button, NUM_MOUSE_BUTTONS, "button")
        return self._current.buttons[button] and self._previous.buttons[button]

    def mouse_position(self) -> np.ndarray:
        return self._current.position.copy()

    def mouse_wheel(self) -> np.ndarray:
        return self._current.wheel.copy()

    def mouse_delta(self) -> np.ndarray:
        return self._current.delta.copy()