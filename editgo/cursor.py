"""Cursor movement over a line-oriented buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class LineSource(Protocol):
    """What the cursor needs to know about a buffer."""

    def get_line(self, line: int) -> str: ...

    def line_count(self) -> int: ...


@dataclass
class Cursor:
    """A column (``x``) and line (``y``) position in a buffer."""

    x: int = 0
    y: int = 0

    def position(self) -> tuple[int, int]:
        """Return ``(x, y)``."""
        return self.x, self.y

    def set_position(self, x: int, y: int, buffer: LineSource) -> None:
        """Move to ``(x, y)`` and clamp into the buffer."""
        self.x = x
        self.y = y
        self.clamp(buffer)

    def clamp(self, buffer: LineSource) -> None:
        """Bring the cursor back inside the buffer's lines and columns."""
        if self.y < 0:
            self.y = 0
        elif self.y >= buffer.line_count():
            self.y = buffer.line_count() - 1
        line_len = len(buffer.get_line(self.y))
        if self.x < 0:
            self.x = 0
        elif self.x > line_len:
            self.x = line_len

    def move_left(self, buffer: LineSource) -> None:
        """Step left, wrapping to the end of the previous line."""
        if self.x > 0:
            self.x -= 1
        elif self.y > 0:
            self.y -= 1
            self.x = len(buffer.get_line(self.y))

    def move_right(self, buffer: LineSource) -> None:
        """Step right, wrapping to the start of the next line."""
        if self.x < len(buffer.get_line(self.y)):
            self.x += 1
        elif self.y < buffer.line_count() - 1:
            self.y += 1
            self.x = 0

    def move_up(self, buffer: LineSource) -> None:
        """Go up a line, keeping the column within that line."""
        if self.y > 0:
            self.y -= 1
            self.x = min(self.x, len(buffer.get_line(self.y)))

    def move_down(self, buffer: LineSource) -> None:
        """Go down a line, keeping the column within that line."""
        if self.y < buffer.line_count() - 1:
            self.y += 1
            self.x = min(self.x, len(buffer.get_line(self.y)))