"""Logical 16-key hex keypad and the input capability the interpreter reads."""

from typing import Iterable, Optional, Protocol, runtime_checkable

import numpy as np

from chip8vm.constants import NUM_KEYS
from chip8vm.errors import InvalidKeyError


@runtime_checkable
class Input(Protocol):
    """What the interpreter needs to know about the keypad."""

    def is_key_down(self, key: int) -> bool:
        ...

    def last_key_down(self) -> Optional[int]:
        """Key reported for the blocking read (FX0A), or None."""
        ...


def check_key(key: int) -> int:
    key = int(key)
    if not 0 <= key < NUM_KEYS:
        raise InvalidKeyError(key)
    return key


class Keypad:
    """Key state updated by the host between cycles.

    ``last_key_down`` reports the most recently pressed key that is still
    held, falling back to the lowest held key.
    """

    def __init__(self, pressed: Iterable[int] = ()):
        self.keys = np.zeros(NUM_KEYS, dtype=np.bool_)
        self._last_pressed = None
        for key in pressed:
            self.press(key)

    def press(self, key: int) -> None:
        key = check_key(key)
        self.keys[key] = True
        self._last_pressed = key

    def release(self, key: int) -> None:
        key = check_key(key)
        self.keys[key] = False
        if self._last_pressed == key:
            self._last_pressed = None

    def release_all(self) -> None:
        self.keys[:] = False
        self._last_pressed = None

    def is_key_down(self, key: int) -> bool:
        return bool(self.keys[check_key(key)])

    def last_key_down(self) -> Optional[int]:
        if self._last_pressed is not None:
            return self._last_pressed
        held = np.flatnonzero(self.keys)
        return int(held[0]) if held.size else None

    def __repr__(self):
        held = " ".join(f"{k:X}" for k in np.flatnonzero(self.keys))
        return f"Keypad([{held}])"


class _NoInput:
    """Keypad with nothing pressed, ever."""

    def is_key_down(self, key: int) -> bool:
        check_key(key)
        return False

    def last_key_down(self) -> Optional[int]:
        return None


NO_INPUT = _NoInput()
