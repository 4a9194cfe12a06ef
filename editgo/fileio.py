"""Loading and saving a text buffer to disk."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from editgo.buffer import TextBuffer


class NoFilePathError(ValueError):
    """Raised when saving a buffer that has no file path."""


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    parts = text.split("\n")
    if text.endswith("\n"):
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


@dataclass
class FileManager:
    """A buffer together with the file it is stored in."""

    file_path: str = ""
    buffer: TextBuffer = field(default_factory=TextBuffer)

    @classmethod
    def open(cls, file_path: str) -> FileManager:
        """Read ``file_path`` into a new buffer; an empty file gives one empty line."""
        text = Path(file_path).read_text(encoding="utf-8", errors="replace")
        lines = _split_lines(text) or [""]
        return cls(file_path=file_path, buffer=TextBuffer(lines))

    @classmethod
    def empty(cls) -> FileManager:
        """A new, unnamed buffer with one empty line."""
        return cls()

    def is_new(self) -> bool:
        """True when the buffer has never been given a file path."""
        return self.file_path == ""

    def save(self) -> None:
        """Write the buffer to its file path."""
        if not self.file_path:
            raise NoFilePathError("file path is empty")
        self.save_as(self.file_path)

    def save_as(self, file_path: str) -> None:
        """Write the buffer to ``file_path``, creating missing directories."""
        os.makedirs(os.path.dirname(file_path) or ".", mode=0o755, exist_ok=True)
        with open(file_path, "w", encoding="utf-8", newline="") as handle:
            for line in self.buffer.lines:
                handle.write(line + "\n")
        self.file_path = file_path
        self.buffer.dirty = False