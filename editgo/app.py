"""The editor model, its key handling and the terminal main loop."""

from __future__ import annotations

import enum
import logging
import sys
from dataclasses import dataclass

from editgo.autosave import AutoSave
from editgo.buffer import TextBuffer
from editgo.cursor import Cursor
from editgo.fileio import FileManager, NoFilePathError
from editgo.render import (
    render_buffer,
    render_help_bar,
    render_status_bar,
    render_status_message,
)
from editgo.undo import UndoManager

log = logging.getLogger(__name__)


class Key(enum.Enum):
    """Keys the editor reacts to."""

    RUNES = "runes"
    BACKSPACE = "backspace"
    ENTER = "enter"
    CTRL_Q = "ctrl+q"
    CTRL_C = "ctrl+c"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    CTRL_Z = "ctrl+z"
    CTRL_Y = "ctrl+y"
    CTRL_S = "ctrl+s"


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``text`` holds the typed characters for ``Key.RUNES``."""

    key: Key
    text: str = ""


_SEQUENCE_NAMES = {
    "KEY_UP": Key.UP,
    "KEY_DOWN": Key.DOWN,
    "KEY_LEFT": Key.LEFT,
    "KEY_RIGHT": Key.RIGHT,
    "KEY_ENTER": Key.ENTER,
    "KEY_BACKSPACE": Key.BACKSPACE,
    "KEY_DELETE": Key.BACKSPACE,
}

_CONTROL_CHARS = {
    "\x03": Key.CTRL_C,
    "\x11": Key.CTRL_Q,
    "\x13": Key.CTRL_S,
    "\x19": Key.CTRL_Y,
    "\x1a": Key.CTRL_Z,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
}


def translate_key(keystroke: str) -> KeyEvent | None:
    """Turn a terminal keystroke into a key event, or None if it means nothing here."""
    text = str(keystroke)
    if text in _CONTROL_CHARS:
        return KeyEvent(_CONTROL_CHARS[text])
    name = getattr(keystroke, "name", None)
    if name in _SEQUENCE_NAMES:
        return KeyEvent(_SEQUENCE_NAMES[name])
    if getattr(keystroke, "is_sequence", False):
        return None
    if len(text) == 1 and text.isprintable():
        return KeyEvent(Key.RUNES, text)
    return None


class Model:
    """Editor state: the file, its buffer, the cursor and undo history."""

    def __init__(self, file_path: str = "", autosave_interval: float = 5.0) -> None:
        self.file = FileManager.open(file_path) if file_path else FileManager.empty()
        self.cursor = Cursor(0, 0)
        self.undo_stack = UndoManager()
        self.auto_saver = AutoSave(self.file, autosave_interval)
        self.auto_saver.start()
        self.status_message = ""

    @property
    def buffer(self) -> TextBuffer:
        return self.file.buffer

    def update(self, event: KeyEvent) -> bool:
        """Apply a key press. Returns False when the editor should quit."""
        buffer, cursor = self.buffer, self.cursor
        key = event.key
        if key is Key.RUNES:
            if len(event.text) == 1:
                self.undo_stack.push(buffer)
                buffer.insert_char(cursor.y, cursor.x, event.text)
                cursor.move_right(buffer)
        elif key is Key.BACKSPACE:
            if cursor.x == 0 and cursor.y == 0:
                return True
            self.undo_stack.push(buffer)
            if cursor.x > 0:
                buffer.delete_char(cursor.y, cursor.x)
                cursor.move_left(buffer)
            else:
                prev_len = len(buffer.get_line(cursor.y - 1))
                buffer.merge_line(cursor.y - 1)
                cursor.y -= 1
                cursor.x = prev_len
        elif key is Key.ENTER:
            self.undo_stack.push(buffer)
            buffer.insert_newline(cursor.y, cursor.x)
            cursor.y += 1
            cursor.x = 0
        elif key in (Key.CTRL_Q, Key.CTRL_C):
            self.auto_saver.stop()
            return False
        elif key is Key.UP:
            cursor.move_up(buffer)
        elif key is Key.DOWN:
            cursor.move_down(buffer)
        elif key is Key.LEFT:
            cursor.move_left(buffer)
        elif key is Key.RIGHT:
            cursor.move_right(buffer)
        elif key is Key.CTRL_Z:
            self.undo_stack.undo(buffer)
            cursor.clamp(buffer)
        elif key is Key.CTRL_Y:
            self.undo_stack.redo(buffer)
            cursor.clamp(buffer)
        elif key is Key.CTRL_S:
            if not self.file.file_path:
                return True
            try:
                self.file.save()
            except (OSError, NoFilePathError) as exc:
                self.status_message = f"Error: {exc}"
            else:
                self.status_message = f"Saved to: {self.file.file_path}"
        return True

    def view(self, height: int) -> str:
        """The whole screen for a terminal ``height`` rows tall."""
        return (
            render_status_bar(self.file.file_path, self.buffer.dirty, self.cursor.x, self.cursor.y)
            + "\n"
            + render_buffer(self.buffer.lines, self.cursor.x, self.cursor.y, height)
            + "\n"
            + render_help_bar()
            + "\n"
            + render_status_message(self.status_message)
        )

    def close(self) -> None:
        """Stop background saving."""
        self.auto_saver.stop()


def run(model: Model) -> None:
    """Drive ``model`` from the terminal until the user quits."""
    import blessed

    term = blessed.Terminal()
    try:
        with term.fullscreen(), term.raw(), term.hidden_cursor():
            while True:
                screen = model.view(term.height).replace("\n", "\r\n")
                sys.stdout.write(term.home + term.clear + screen)
                sys.stdout.flush()
                event = translate_key(term.inkey())
                if event is not None and not model.update(event):
                    break
    finally:
        model.close()


def main(argv: list[str] | None = None) -> int:
    """Open the file named on the command line, or an empty buffer, and edit it."""
    args = sys.argv[1:] if argv is None else argv
    try:
        handler = logging.FileHandler("editor.log", mode="a", encoding="utf-8")
    except OSError as exc:
        print("Could not open log file:", exc)
        return 1
    logging.basicConfig(level=logging.INFO, handlers=[handler])
    model = Model(args[0] if args else "")
    run(model)
    return 0


if __name__ == "__main__":
    sys.exit(main())