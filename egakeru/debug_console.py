"""An in-game console: scrolling output lines plus a one-line command entry."""

from __future__ import annotations

from typing import Callable, Optional

from egakeru.keys import Key

_SHIFTED_DIGITS = {
    Key.KEY_0: ")",
    Key.KEY_1: "!",
    Key.KEY_2: '"',
    Key.KEY_3: "#",
    Key.KEY_4: "$",
    Key.KEY_5: "%",
    Key.KEY_6: "^",
    Key.KEY_7: "&",
    Key.KEY_8: "*",
    Key.KEY_9: "(",
}


def key_to_char(key: int, shift_held: bool) -> Optional[str]:
    """Return the character typed by ``key``, or None if it types nothing."""
    code = int(key)
    if Key.A <= code <= Key.Z:
        return chr(code) if shift_held else chr(code + 32)
    if Key.KEY_0 <= code <= Key.KEY_9:
        return _SHIFTED_DIGITS[Key(code)] if shift_held else chr(code)
    if code == Key.SPACE:
        return " "
    if code == Key.MINUS:
        return "_" if shift_held else "-"
    if code == Key.EQUAL:
        return "+" if shift_held else "="
    return None


class DebugConsole:
    """Collects written lines, shows a window of them, and edits a command line."""

    line_display_count = 10

    def __init__(self, execute: Optional[Callable[[str], object]] = None) -> None:
        self._execute = execute
        self._lines: list[str] = []
        self._history: list[str] = []
        self._entry = ""
        self._text = ""
        self._line_offset = 0
        self._is_dirty = False
        self._is_visible = False

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    @property
    def entry(self) -> str:
        return self._entry

    @property
    def line_offset(self) -> int:
        return self._line_offset

    @property
    def is_visible(self) -> bool:
        return self._is_visible

    @property
    def is_dirty(self) -> bool:
        return self._is_dirty

    def write(self, message: str) -> bool:
        """Append ``message``, one console line per newline-separated part."""
        if "\n" in message:
            parts = message.split("\n")
            if parts[-1] == "":
                parts.pop()
            self._lines.extend(parts)
        else:
            self._lines.append(message)
        self._is_dirty = True
        return True

    def display_text(self) -> str:
        """Return the visible window of lines, each ended by a newline."""
        if self._is_dirty:
            line_count = len(self._lines)
            shown = min(self.line_display_count, max(line_count, self.line_display_count))
            first = max(line_count - shown - self._line_offset, 0)
            rows = (
                self._lines[i] if i < line_count else ""
                for i in range(first, first + shown)
            )
            self._text = "".join(row + "\n" for row in rows)
            self._is_dirty = False
        return self._text

    def handle_key(self, key: int, shift_held: bool) -> bool:
        """Edit the entry line for a key press; never consumes the event."""
        if not self._is_visible:
            return False
        code = int(key)
        if code == Key.ENTER:
            if self._entry:
                command = self._entry
                self._history.append(command)
                if self._execute is not None:
                    self._execute(command)
                self._entry = ""
        elif code == Key.BACKSPACE:
            self._entry = self._entry[:-1]
        else:
            char = key_to_char(code, shift_held)
            if char is not None:
                self._entry += char
        return False

    def _scrollable(self) -> bool:
        self._is_dirty = True
        if len(self._lines) <= self.line_display_count:
            self._line_offset = 0
            return False
        return True

    def move_up(self) -> None:
        """Scroll one line towards older output."""
        if self._scrollable():
            limit = len(self._lines) - self.line_display_count
            self._line_offset = min(self._line_offset + 1, limit)

    def move_down(self) -> None:
        """Scroll one line towards newer output."""
        if self._scrollable():
            self._line_offset = max(self._line_offset - 1, 0)

    def move_to_top(self) -> None:
        """Scroll to the oldest output."""
        if self._scrollable():
            self._line_offset = len(self._lines) - self.line_display_count

    def move_to_bottom(self) -> None:
        """Scroll to the newest output."""
        if self._scrollable():
            self._line_offset = 0

    def toggle_visibility(self) -> bool:
        """Show or hide the console; returns the new visibility."""
        self._is_visible = not self._is_visible
        return self._is_visible