"""Text rendering of the editor screen: status bar, buffer view and help bar."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

_RESET = "\x1b[0m"


@dataclass(frozen=True)
class KeyHelp:
    """A key binding and what it does."""

    key: str
    action: str


HELP_KEYS: tuple[KeyHelp, ...] = (
    KeyHelp("←/→/↑/↓", "Move"),
    KeyHelp("Enter", "New Line"),
    KeyHelp("Backspace", "Delete"),
    KeyHelp("Ctrl+S", "Save"),
    KeyHelp("Ctrl+Z", "Undo"),
    KeyHelp("Ctrl+Y", "Redo"),
    KeyHelp("Ctrl+Q", "Quit"),
)


def _rgb(hex_color: str) -> tuple[int, int, int]:
    value = hex_color.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


@dataclass(frozen=True)
class _Style:
    foreground: str | None = None
    background: str | None = None
    bold: bool = False
    italic: bool = False
    padding: int = 0
    width: int | None = None

    def _codes(self) -> list[str]:
        codes: list[str] = []
        if self.bold:
            codes.append("1")
        if self.italic:
            codes.append("3")
        if self.foreground:
            codes.append("38;2;{};{};{}".format(*_rgb(self.foreground)))
        if self.background:
            codes.append("48;2;{};{};{}".format(*_rgb(self.background)))
        return codes

    def render(self, text: str) -> str:
        pad = " " * self.padding
        body = pad + text + pad
        if self.width is not None:
            body = body.ljust(self.width)
        codes = self._codes()
        if not codes:
            return body
        return f"\x1b[{';'.join(codes)}m{body}{_RESET}"


_STATUS_BAR_STYLE = _Style(foreground="#f8f8f2", background="#44475a", padding=1)
_HELP_BAR_STYLE = _Style(foreground="#bd93f9", background="#282a36", padding=1, italic=True)
_CURSOR_CHAR_STYLE = _Style(foreground="#282a36", background="#f8f8f2", bold=True)
_STATUS_MSG_STYLE = _Style(foreground="#00FF00", background="#1A1A1A", padding=1, width=100)


def render_status_message(msg: str) -> str:
    """The status line, or an empty string when there is no message."""
    if not msg:
        return ""
    return _STATUS_MSG_STYLE.render("Status: " + msg)


def render_help_bar() -> str:
    """The bar listing the editor's key bindings."""
    help_text = " Ctrl+S Save | Ctrl+O Open | Ctrl+Z Undo | Ctrl+Y Redo | Ctrl+C Quit "
    return _HELP_BAR_STYLE.render(help_text)


def render_status_bar(file_path: str, is_dirty: bool, cursor_x: int, cursor_y: int) -> str:
    """The bar showing the file name, unsaved flag and 1-based cursor position."""
    dirty_flag = "✱" if is_dirty else ""
    name = file_path or "[No Name]"
    status = f" {name} {dirty_flag} | Ln {cursor_y + 1}, Col {cursor_x + 1} "
    return _STATUS_BAR_STYLE.render(status)


def render_buffer(lines: Sequence[str], cursor_x: int, cursor_y: int, height: int) -> str:
    """The visible text for a terminal ``height`` rows tall, cursor highlighted.

    Five rows are kept for the bars; every row ends with a newline.
    """
    rows: list[str] = []
    for y in range(height - 5):
        if y >= len(lines):
            rows.append("")
            continue
        text = lines[y]
        if y != cursor_y:
            rows.append(text)
            continue
        before = text[:cursor_x]
        if cursor_x < len(text):
            cursor_char, after = text[cursor_x], text[cursor_x + 1 :]
        else:
            cursor_char, after = " ", ""
        rows.append(before + _CURSOR_CHAR_STYLE.render(cursor_char) + after)
    return "".join(row + "\n" for row in rows)