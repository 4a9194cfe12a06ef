"""Line-oriented text buffer used by the editor."""

from __future__ import annotations

from collections.abc import Iterable


class TextBuffer:
    """A list of text lines plus a flag recording unsaved changes.

    Edits at positions outside the buffer are ignored.
    """

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self.lines: list[str] = [""] if lines is None else list(lines)
        self.dirty = False

    def __repr__(self) -> str:
        return f"TextBuffer(lines={self.lines!r}, dirty={self.dirty!r})"

    def _valid(self, line: int, col: int) -> bool:
        if not 0 <= line < len(self.lines):
            return False
        return 0 <= col <= len(self.lines[line])

    def insert_char(self, line: int, col: int, ch: str) -> None:
        """Insert ``ch`` before column ``col`` of ``line``."""
        if not self._valid(line, col):
            return
        text = self.lines[line]
        self.lines[line] = text[:col] + ch + text[col:]
        self.dirty = True

    def delete_char(self, line: int, col: int) -> None:
        """Delete the character left of ``col``.

        At column 0 the line is joined onto the previous one; at the very
        start of the buffer nothing happens.
        """
        if not self._valid(line, col):
            return
        if col == 0:
            if line == 0:
                return
            self.merge_line(line - 1)
            self.dirty = True
            return
        text = self.lines[line]
        self.lines[line] = text[: col - 1] + text[col:]
        self.dirty = True

    def insert_newline(self, line: int, col: int) -> None:
        """Split ``line`` at ``col``; a column past the end splits at the end."""
        if not 0 <= line < len(self.lines):
            return
        if col < 0:
            raise IndexError(f"column {col} out of range")
        current = self.lines[line]
        col = min(col, len(current))
        self.lines[line : line + 1] = [current[:col], current[col:]]
        self.dirty = True

    def merge_line(self, line: int) -> None:
        """Append the line after ``line`` onto it and remove that line."""
        if line < 0 or line + 1 >= len(self.lines):
            return
        self.lines[line : line + 2] = [self.lines[line] + self.lines[line + 1]]
        self.dirty = True

    def get_line(self, line: int) -> str:
        """Return the text of ``line``, or an empty string when out of range."""
        if 0 <= line < len(self.lines):
            return self.lines[line]
        return ""

    def line_count(self) -> int:
        """Number of lines in the buffer."""
        return len(self.lines)