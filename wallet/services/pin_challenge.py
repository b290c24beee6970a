"""
Transaction PIN challenge.

Finite-state buffer behind the numeric pad. Collects digits one event
at a time; on the 4th digit the PIN is handed to the caller and the
buffer resets so the same challenge can be reused.
"""

from collections.abc import Callable
from enum import StrEnum

from loguru import logger

from wallet.config.business_constants import PIN_LENGTH


# Numeric pad order ("" is an empty cell, "delete" removes a digit)
KEYPAD_LAYOUT = ("1", "2", "3", "4", "5", "6", "7", "8", "9", "", "0", "delete")


class PinChallengeState(StrEnum):
    """Buffer fill states."""

    EMPTY = "empty"
    PARTIAL = "partial"
    COMPLETE = "complete"


class PinChallenge:
    """Four-digit PIN entry buffer."""

    def __init__(
        self, on_complete: Callable[[str], None] | None = None
    ) -> None:
        """
        Initialize PIN challenge.

        Args:
            on_complete: Called with the 4-digit PIN when entry completes
        """
        self.on_complete = on_complete
        self.disabled = False
        self._digits: list[str] = []

    @property
    def state(self) -> PinChallengeState:
        """Current buffer state."""
        if not self._digits:
            return PinChallengeState.EMPTY
        if len(self._digits) < PIN_LENGTH:
            return PinChallengeState.PARTIAL
        return PinChallengeState.COMPLETE

    @property
    def length(self) -> int:
        """Number of digits entered."""
        return len(self._digits)

    @property
    def indicators(self) -> tuple[bool, ...]:
        """Filled/unfilled flag per PIN position."""
        return tuple(i < len(self._digits) for i in range(PIN_LENGTH))

    def press_digit(self, digit: str) -> str | None:
        """
        Append a digit.

        Ignored while disabled or when the buffer is already full.

        Args:
            digit: Single character "0"-"9"

        Returns:
            The completed PIN if this digit completed it, else None

        Raises:
            ValueError: If digit is not a single decimal digit
        """
        if len(digit) != 1 or digit not in "0123456789":
            raise ValueError(f"Invalid PIN digit: {digit!r}")

        if self.disabled or len(self._digits) >= PIN_LENGTH:
            return None

        self._digits.append(digit)
        if len(self._digits) < PIN_LENGTH:
            return None

        # Buffer stays COMPLETE while the callback runs, then resets
        pin = "".join(self._digits)
        logger.debug("PIN entry complete")
        try:
            if self.on_complete is not None:
                self.on_complete(pin)
        finally:
            self._digits.clear()
        return pin

    def delete(self) -> None:
        """Remove the last digit (no-op when empty or disabled)."""
        if self.disabled or not self._digits:
            return
        self._digits.pop()

    def clear(self) -> None:
        """Discard all entered digits."""
        self._digits.clear()

    def press(self, key: str) -> str | None:
        """
        Handle a keypad cell press.

        Args:
            key: Value from KEYPAD_LAYOUT

        Returns:
            The completed PIN if the press completed it, else None
        """
        if key == "delete":
            self.delete()
            return None
        if key == "":
            return None
        return self.press_digit(key)
