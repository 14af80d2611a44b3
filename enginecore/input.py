"""Keyboard and gamepad state with press and trigger queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

KEY_COUNT = 256
_PRESSED = 0x80
_WORD_MAX = 0xFFFF
_SHORT_MIN = -32768
_SHORT_MAX = 32767


def _check_word(name: str, value: int) -> None:
    if not 0 <= value <= _WORD_MAX:
        raise ValueError(f"{name} must be between 0 and {_WORD_MAX}, got {value}")


@dataclass(frozen=True)
class ControllerState:
    """A snapshot of a gamepad: button bit mask and stick positions."""

    buttons: int = 0
    left_stick_x: int = 0
    left_stick_y: int = 0
    right_stick_x: int = 0
    right_stick_y: int = 0

    def __post_init__(self) -> None:
        _check_word("buttons", self.buttons)
        for name in ("left_stick_x", "left_stick_y", "right_stick_x", "right_stick_y"):
            value = getattr(self, name)
            if not _SHORT_MIN <= value <= _SHORT_MAX:
                raise ValueError(
                    f"{name} must be between {_SHORT_MIN} and {_SHORT_MAX}, got {value}"
                )


class InputState:
    """Holds the current and previous frame's keyboard and gamepad state."""

    def __init__(self) -> None:
        self._keys = bytes(KEY_COUNT)
        self._previous_keys = bytes(KEY_COUNT)
        self._controller = ControllerState()
        self._previous_controller = ControllerState()
        self.vibration: Tuple[int, int] = (0, 0)

    def update(self, keys: bytes, controller: Optional[ControllerState] = None) -> None:
        """Start a new frame with a 256-byte key table and a gamepad snapshot.

        A missing controller reads as all buttons released and sticks centred.
        """
        keys = bytes(keys)
        if len(keys) != KEY_COUNT:
            raise ValueError(f"key table must hold {KEY_COUNT} bytes, got {len(keys)}")
        self._previous_keys, self._keys = self._keys, keys
        self._previous_controller = self._controller
        self._controller = controller if controller is not None else ControllerState()

    def push_key(self, key: int) -> bool:
        """True while the key is held down."""
        return bool(self._keys[key] & _PRESSED)

    def trigger_key(self, key: int) -> bool:
        """True only on the frame the key went down."""
        return not (self._previous_keys[key] & _PRESSED) and bool(self._keys[key] & _PRESSED)

    def push_button(self, button: int) -> bool:
        """True while any of the given button bits is held."""
        return bool(self._controller.buttons & button)

    def trigger_button(self, button: int) -> bool:
        """True only on the frame the button went down."""
        return not (self._previous_controller.buttons & button) and bool(
            self._controller.buttons & button
        )

    def left_stick_x(self) -> int:
        """Horizontal position of the left stick."""
        return self._controller.left_stick_x

    def left_stick_y(self) -> int:
        """Vertical position of the left stick."""
        return self._controller.left_stick_y

    def right_stick_x(self) -> int:
        """Horizontal position of the right stick."""
        return self._controller.right_stick_x

    def right_stick_y(self) -> int:
        """Vertical position of the right stick."""
        return self._controller.right_stick_y

    def set_vibration(self, left_motor: int, right_motor: int) -> None:
        """Request motor speeds for the gamepad's left and right motors."""
        _check_word("left_motor", left_motor)
        _check_word("right_motor", right_motor)
        self.vibration = (left_motor, right_motor)