# editgo

A small text editor for the terminal. It opens a file, or starts with an
empty, unnamed buffer. You can type, move around and keep an undo/redo
history. It also autosaves every five seconds while the buffer has unsaved
changes, as long as the file has a name.

## Installing

```
pip install .
```

## Running

```
editgo notes.txt
```

Run `editgo` with no argument to start with an empty buffer. An unnamed
buffer is never autosaved, and Ctrl+S does nothing for it.

Log messages, such as autosave results, are appended to `editor.log` in the
current directory. If that file cannot be opened, `editgo` prints the error
and exits with status 1.

## Keys

| Key            | Action                                                    |
|----------------|-----------------------------------------------------------|
| Arrow keys     | Move the cursor                                           |
| Enter          | Split the line at the cursor                              |
| Backspace      | Delete the character before the cursor, or join the lines |
| Ctrl+S         | Save to the file's path                                   |
| Ctrl+Z         | Undo                                                      |
| Ctrl+Y         | Redo                                                      |
| Ctrl+Q, Ctrl+C | Quit                                                      |

The top bar shows:

- the file name, or `[No Name]` for an unnamed buffer;
- a `✱` when there are unsaved changes;
- the cursor's line and column, counted from 1.

After Ctrl+S, a status line below the help bar shows `Saved to: <path>` or
the error.

## What it does not do

- **No Save As prompt.** There is no prompt to name an unnamed buffer.
- **No Ctrl+O command.** The help bar lists `Ctrl+O Open`, but no key opens
  another file.
- **No scrolling.** The view always shows the first lines of the buffer that
  fit on the screen. Lines below that are not displayed.

## Using it from Python

The editing pieces work without a terminal:

```python
from editgo.buffer import TextBuffer
from editgo.cursor import Cursor
from editgo.undo import UndoManager

buf = TextBuffer()
history = UndoManager()

history.push(buf)
buf.insert_char(0, 0, "H")
buf.insert_char(0, 1, "i")
buf.insert_newline(0, 1)
print(buf.line_count())      # 2

history.undo(buf)
print(buf.lines)             # ['']

cursor = Cursor()
cursor.set_position(10, 5, buf)   # clamped into the buffer
print(cursor.position())          # (0, 0)
```

Edits at positions outside the buffer are ignored. `UndoManager.undo` and
`UndoManager.redo` return `False` when there is nothing to undo or redo.
`undo_depth()` and `redo_depth()` report how many states are stored.

`editgo.fileio.FileManager` handles files:

```python
from editgo.fileio import FileManager

fm = FileManager.open("notes.txt")
fm.buffer.insert_char(0, 0, "#")
fm.save()
```

- `FileManager.empty()` gives an unnamed buffer.
- Saving a buffer that has no path raises `NoFilePathError`.
- `save_as(path)` writes the buffer to `path` and keeps `path` as the file's
  path from then on. Missing parent directories are created.
- Every line is written with a trailing newline.

`editgo.autosave.AutoSave(file_manager, interval)` saves the file manager in
a background thread every `interval` seconds while the buffer is dirty. It
does not start when the file manager has no path. Use it as a context
manager to stop it on exit.

`editgo.app.Model` holds the whole editor state:

- `update(event)` takes a `KeyEvent` and returns `False` on quit.
- `view(height)` renders the screen for a terminal of `height` rows.
- `translate_key` turns a terminal keystroke into a `KeyEvent`.
- `run(model)` drives a model from the terminal until the user quits.

## Tests

```
pip install .[test]
pytest
```