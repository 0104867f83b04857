"""
Curses keyboard input and line output for the interactive runtime.
"""

import curses

from hexapod.runtime.intent import Intent

NO_KEY = -1

KEY_INTENTS = {
    curses.KEY_UP: Intent.UP,
    curses.KEY_DOWN: Intent.DOWN,
    curses.KEY_LEFT: Intent.LEFT,
    curses.KEY_RIGHT: Intent.RIGHT,
}


class CursesKeySource:
    """Arrow keys from a curses window, mapped to intents."""

    def __init__(self, stdscr):
        self._stdscr = stdscr
        self._stdscr.keypad(True)

    def discard_pending(self) -> None:
        """Drop every key pressed while a gait cycle was running."""
        self._stdscr.nodelay(True)
        try:
            while self._stdscr.getch() != NO_KEY:
                pass
        finally:
            self._stdscr.nodelay(False)

    def read_intent(self) -> Intent:
        key = self._stdscr.getch()
        return KEY_INTENTS.get(key, Intent.OTHER)

    def wait_for_key(self) -> None:
        self._stdscr.getch()


class CursesDisplay:
    """Scrolling status lines on a curses window."""

    def __init__(self, stdscr):
        self._stdscr = stdscr
        self._stdscr.scrollok(True)
        self._stdscr.idlok(True)

    def show(self, line: str) -> None:
        self._stdscr.addstr(line + "\n")
        self._stdscr.refresh()
