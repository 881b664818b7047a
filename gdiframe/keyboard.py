"""Per-frame keyboard state tracking: tap, hold and away."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Iterable


class Key(IntEnum):
    """Keys the engine tracks."""

    LEFT = 0
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    Q = auto()
    W = auto()
    E = auto()
    R = auto()
    T = auto()
    Y = auto()
    U = auto()
    I = auto()  # noqa: E741
    O = auto()  # noqa: E741
    P = auto()
    A = auto()
    S = auto()
    D = auto()
    F = auto()
    G = auto()
    Z = auto()
    X = auto()
    C = auto()
    V = auto()
    B = auto()
    ALT = auto()
    CTRL = auto()
    LSHIFT = auto()
    SPACE = auto()
    ENTER = auto()
    ESC = auto()


class KeyState(Enum):
    """State of a key within the current frame."""

    NONE = auto()  # not pressed now nor in the previous frame
    TAP = auto()  # pressed this frame
    HOLD = auto()  # held down since a previous frame
    AWAY = auto()  # released this frame


@dataclass
class _KeyInfo:
    state: KeyState = KeyState.NONE
    prev_push: bool = False


class KeyManager:
    """Turns the set of currently pressed keys into per-frame key states."""

    def __init__(self) -> None:
        self._keys = {key: _KeyInfo() for key in Key}

    def update(self, pressed: Iterable[Key], focused: bool = True) -> None:
        """Advance one frame given the keys currently held down."""
        if not focused:
            # Losing focus releases every key at once.
            for info in self._keys.values():
                info.prev_push = False
                info.state = KeyState.NONE
            return

        down = set(pressed)
        for key, info in self._keys.items():
            if key in down:
                info.state = KeyState.HOLD if info.prev_push else KeyState.TAP
                info.prev_push = True
            else:
                info.state = KeyState.AWAY if info.prev_push else KeyState.NONE
                info.prev_push = False

    def state(self, key: Key) -> KeyState:
        return self._keys[key].state

    def is_tap(self, key: Key) -> bool:
        return self.state(key) is KeyState.TAP

    def is_hold(self, key: Key) -> bool:
        return self.state(key) is KeyState.HOLD

    def is_away(self, key: Key) -> bool:
        return self.state(key) is KeyState.AWAY