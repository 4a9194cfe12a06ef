"""Snapshot-based undo and redo for a text buffer."""

from __future__ import annotations

from dataclasses import dataclass, field

from editgo.buffer import TextBuffer


@dataclass(frozen=True)
class EditState:
    """An immutable snapshot of a buffer's lines."""

    lines: tuple[str, ...]

    @classmethod
    def of(cls, buffer: TextBuffer) -> EditState:
        return cls(tuple(buffer.lines))


@dataclass
class UndoManager:
    """Undo and redo stacks of buffer snapshots."""

    _undo_stack: list[EditState] = field(default_factory=list)
    _redo_stack: list[EditState] = field(default_factory=list)

    def push(self, buffer: TextBuffer) -> None:
        """Record the buffer's current state; this clears the redo history."""
        self._undo_stack.append(EditState.of(buffer))
        self._redo_stack.clear()

    def undo(self, buffer: TextBuffer) -> bool:
        """Restore the last recorded state. Returns False if there was none."""
        if not self._undo_stack:
            return False
        state = self._undo_stack.pop()
        self._redo_stack.append(EditState.of(buffer))
        buffer.lines = list(state.lines)
        buffer.dirty = True
        return True

    def redo(self, buffer: TextBuffer) -> bool:
        """Reapply the last undone state. Returns False if there was none."""
        if not self._redo_stack:
            return False
        state = self._redo_stack.pop()
        self._undo_stack.append(EditState.of(buffer))
        buffer.lines = list(state.lines)
        buffer.dirty = True
        return True

    def undo_depth(self) -> int:
        """Number of states available to undo."""
        return len(self._undo_stack)

    def redo_depth(self) -> int:
        """Number of states available to redo."""
        return len(self._redo_stack)