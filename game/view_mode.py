"""
View modes and the rules for moving between them.

    UNINITIALIZED ──► SCALE | DISTANCE | CREDITS
    SCALE | DISTANCE | CREDITS ──► UNINITIALIZED

There is no direct jump between the three content views; the menu is always
in between. Nothing changes until the session is ready.
"""

from __future__ import annotations
from enum import Enum
from typing import Callable, Optional


class ViewMode(Enum):
    UNINITIALIZED = "UNINITIALIZED"
    SCALE = "SCALE"
    DISTANCE = "DISTANCE"
    CREDITS = "CREDITS"


class InvalidViewModeError(RuntimeError):
    """A value outside ViewMode reached the state machine (a bug, not user input)"""


def check_mode(mode) -> ViewMode:
    if not isinstance(mode, ViewMode):
        raise InvalidViewModeError(f"unknown view mode: {mode!r}")
    return mode


class ViewModeMachine:
    """
    Holds the current ViewMode.

    Transitions happen only through request(); invalid ones are reported
    and ignored, out-of-range values raise InvalidViewModeError.
    """

    def __init__(self, is_ready: Optional[Callable[[], bool]] = None):
        """
        Args:
            is_ready: Session readiness predicate; requests are refused
                      while it returns False (default: always ready)
        """
        self._mode = ViewMode.UNINITIALIZED
        self._is_ready = is_ready or (lambda: True)

    @property
    def mode(self) -> ViewMode:
        return check_mode(self._mode)

    def can_transition(self, target: ViewMode) -> bool:
        current = self.mode
        target = check_mode(target)
        if current is ViewMode.UNINITIALIZED:
            return target is not ViewMode.UNINITIALIZED
        return target is ViewMode.UNINITIALIZED

    def request(self, target) -> bool:
        """
        Ask for a mode change.

        Returns:
            True if the mode changed
        """
        target = check_mode(target)
        current = self.mode

        if not self._is_ready():
            print(f"Warning: view change to {target.value} ignored, session still initializing")
            return False
        if target is current:
            return False
        if not self.can_transition(target):
            print(f"Warning: no transition {current.value} -> {target.value}, go back to the menu first")
            return False

        self._mode = target
        print(f"Switched to view: {target.value}")
        return True
