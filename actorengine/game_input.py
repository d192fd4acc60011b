"""Keyboard, mouse and text input state for one frame."""

from __future__ import annotations

import operator
from dataclasses import dataclass, replace
from enum import IntEnum


class Key(IntEnum):
    """Keyboard keys, numbered by their virtual-key codes."""

    BACKSPACE = 0x08
    TAB = 0x09
    RETURN = 0x0D
    SHIFT = 0x10
    CTRL = 0x11
    ALT = 0x12
    PAUSE = 0x13
    CAPS_LOCK = 0x14
    ESC = 0x1B
    SPACE = 0x20
    PAGE_UP = 0x21
    PAGE_DOWN = 0x22
    END = 0x23
    HOME = 0x24
    ARROW_LEFT = 0x25
    ARROW_UP = 0x26
    ARROW_RIGHT = 0x27
    ARROW_DOWN = 0x28
    PRINT = 0x2A
    PRINT_SCREEN = 0x2C
    INSERT = 0x2D
    DELETE = 0x2E
    HELP = 0x2F
    NO0 = 0x30
    NO1 = 0x31
    NO2 = 0x32
    NO3 = 0x33
    NO4 = 0x34
    NO5 = 0x35
    NO6 = 0x36
    NO7 = 0x37
    NO8 = 0x38
    NO9 = 0x39
    A = ord("A")
    B = ord("B")
    C = ord("C")
    D = ord("D")
    E = ord("E")
    F = ord("F")
    G = ord("G")
    H = ord("H")
    I = ord("I")  # noqa: E741
    J = ord("J")
    K = ord("K")
    L = ord("L")
    M = ord("M")
    N = ord("N")
    O = ord("O")  # noqa: E741
    P = ord("P")
    Q = ord("Q")
    R = ord("R")
    S = ord("S")
    T = ord("T")
    U = ord("U")
    V = ord("V")
    W = ord("W")
    X = ord("X")
    Y = ord("Y")
    Z = ord("Z")
    LWIN = 0x5B
    RWIN = 0x5C
    NUM0 = 0x60
    NUM1 = 0x61
    NUM2 = 0x62
    NUM3 = 0x63
    NUM4 = 0x64
    NUM5 = 0x65
    NUM6 = 0x66
    NUM7 = 0x67
    NUM8 = 0x68
    NUM9 = 0x69
    NUM_MULTIPLY = 0x6A
    NUM_ADD = 0x6B
    NUM_SEPARATOR = 0x6C
    NUM_SUBTRACT = 0x6D
    NUM_DECIMAL = 0x6E
    NUM_DIVIDE = 0x6F
    F1 = 0x70
    F2 = 0x71
    F3 = 0x72
    F4 = 0x73
    F5 = 0x74
    F6 = 0x75
    F7 = 0x76
    F8 = 0x77
    F9 = 0x78
    F10 = 0x79
    F11 = 0x7A
    F12 = 0x7B
    F13 = 0x7C
    F14 = 0x7D
    F15 = 0x7E
    F16 = 0x7F
    F17 = 0x80
    F18 = 0x81
    F19 = 0x82
    F20 = 0x83
    F21 = 0x84
    F22 = 0x85
    F23 = 0x86
    F24 = 0x87
    NUM_LOCK = 0x90
    SCROLL_LOCK = 0x91
    LSHIFT = 0xA0
    RSHIFT = 0xA1
    LCTRL = 0xA2
    RCTRL = 0xA3
    LALT = 0xA4
    RALT = 0xA5


class MouseButton(IntEnum):
    """Mouse buttons and modifier flags reported with mouse messages."""

    LEFT_BUTTON = 0x0001
    RIGHT_BUTTON = 0x0002
    SHIFT = 0x0004
    CONTROL = 0x0008
    MIDDLE_BUTTON = 0x0010
    X_BUTTON1 = 0x0020
    X_BUTTON2 = 0x0040


KEY_COUNT = 255
MOUSE_BUTTON_COUNT = len(MouseButton)
STATES_SIZE = KEY_COUNT + MOUSE_BUTTON_COUNT


@dataclass
class Mouse:
    """Cursor position and wheel delta."""

    x: int = 0
    y: int = 0
    delta: int = 0


def _key_index(key: int) -> int:
    index = operator.index(key)
    if not 0 <= index < KEY_COUNT:
        raise IndexError(f"key index {index} is outside 0..{KEY_COUNT - 1}")
    return index


class GameInput:
    """Pressed state of every key and mouse button, plus mouse and text input."""

    def __init__(self) -> None:
        self._keys = [False] * KEY_COUNT
        self._buttons = dict.fromkeys(MouseButton, False)
        self.mouse = Mouse()
        self.text = 0

    def __getitem__(self, key: Key | MouseButton | int) -> bool:
        if isinstance(key, MouseButton):
            return self._buttons[key]
        return self._keys[_key_index(key)]

    def __setitem__(self, key: Key | MouseButton | int, pressed: bool) -> None:
        if isinstance(key, MouseButton):
            self._buttons[key] = bool(pressed)
        else:
            self._keys[_key_index(key)] = bool(pressed)

    def copy(self) -> GameInput:
        """An independent snapshot of this input state."""
        snapshot = GameInput()
        snapshot._keys = list(self._keys)
        snapshot._buttons = dict(self._buttons)
        snapshot.mouse = replace(self.mouse)
        snapshot.text = self.text
        return snapshot

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameInput):
            return NotImplemented
        return (
            self._keys == other._keys
            and self._buttons == other._buttons
            and self.mouse == other.mouse
            and self.text == other.text
        )

    __hash__ = None  # type: ignore[assignment]