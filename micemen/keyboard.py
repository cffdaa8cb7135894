"""Keyboard input mapped to game actions."""

from __future__ import annotations

import contextlib
from typing import Any

import blessed

from .types import Action


class InputError(Exception):
    """Raised when keyboard input cannot be set up or read."""


_KEY_ACTIONS = {
    "KEY_LEFT": Action.MOVE_LEFT,
    "KEY_RIGHT": Action.MOVE_RIGHT,
    "KEY_UP": Action.MOVE_COLUMN_UP,
    "KEY_DOWN": Action.MOVE_COLUMN_DOWN,
}

_CHAR_ACTIONS = {
    "\x03": Action.QUIT,
    "q": Action.QUIT,
    "Q": Action.QUIT,
    "\x1b": Action.QUIT,
    "a": Action.MOVE_LEFT,
    "A": Action.MOVE_LEFT,
    "d": Action.MOVE_RIGHT,
    "D": Action.MOVE_RIGHT,
    "w": Action.MOVE_COLUMN_UP,
    "W": Action.MOVE_COLUMN_UP,
    "s": Action.MOVE_COLUMN_DOWN,
    "S": Action.MOVE_COLUMN_DOWN,
    "h": Action.MOVE_LEFT,
    "l": Action.MOVE_RIGHT,
    "k": Action.MOVE_COLUMN_UP,
    "j": Action.MOVE_COLUMN_DOWN,
}


def key_to_action(char: str, key_name: str | None) -> Action:
    """Map a keypress (its text and optional special-key name) to an action."""
    if key_name in _KEY_ACTIONS:
        return _KEY_ACTIONS[key_name]
    return _CHAR_ACTIONS.get(char, Action.NONE)


class KeyboardHandler:
    """Reads single keypresses from the terminal in cbreak mode."""

    def __init__(self, terminal: Any = None) -> None:
        self._terminal = terminal
        self._mode: contextlib.ExitStack | None = None

    @property
    def initialized(self) -> bool:
        return self._mode is not None

    def initialize(self) -> None:
        """Put the terminal into cbreak mode; a no-op when already done."""
        if self._mode is not None:
            return
        if self._terminal is None:
            self._terminal = blessed.Terminal()
        if not self._terminal.is_a_tty:
            raise InputError("input is not a terminal")
        mode = contextlib.ExitStack()
        try:
            mode.enter_context(self._terminal.cbreak())
        except OSError as exc:
            raise InputError(str(exc)) from exc
        self._mode = mode

    def next_action(self) -> Action:
        """Wait for a keypress and return the action it stands for."""
        self.initialize()
        try:
            key = self._terminal.inkey()
        except KeyboardInterrupt:
            return Action.QUIT
        except OSError as exc:
            raise InputError(str(exc)) from exc
        return key_to_action(str(key), getattr(key, "name", None))

    def close(self) -> None:
        """Restore the terminal mode."""
        if self._mode is not None:
            self._mode.close()
            self._mode = None

    def __enter__(self) -> KeyboardHandler:
        self.initialize()
        return self

    def __exit__(self, *args: object) -> None:
        self.close()