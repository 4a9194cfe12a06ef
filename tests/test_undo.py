from editgo.buffer import TextBuffer
from editgo.undo import EditState, UndoManager


def test_push():
    um = UndoManager()
    um.push(TextBuffer(["one", "two"]))
    assert um.undo_depth() == 1
    assert um.redo_depth() == 0


def test_undo_redo():
    um = UndoManager()
    buf = TextBuffer(["line1"])
    um.push(buf)
    buf.lines[0] = "changed"

    assert um.undo(buf) is True
    assert buf.lines == ["line1"]

    assert um.redo(buf) is True
    assert buf.lines == ["changed"]


def test_empty_undo_redo_change_nothing():
    um = UndoManager()
    buf = TextBuffer(["initial"])
    assert um.undo(buf) is False
    assert um.redo(buf) is False
    assert buf.lines == ["initial"]
    assert buf.dirty is False


def test_redo_after_two_edits():
    um = UndoManager()
    buf = TextBuffer(["original"])
    um.push(buf)
    buf.lines[0] = "edited"
    um.push(buf)
    buf.lines[0] = "final"

    um.undo(buf)
    assert buf.lines == ["edited"]
    um.redo(buf)
    assert buf.lines == ["final"]


def test_snapshot_is_independent_of_later_edits():
    um = UndoManager()
    buf = TextBuffer(["ab"])
    um.push(buf)
    buf.insert_char(0, 2, "c")
    buf.insert_newline(0, 1)
    um.undo(buf)
    assert buf.lines == ["ab"]


def test_push_clears_redo():
    um = UndoManager()
    buf = TextBuffer(["a"])
    um.push(buf)
    buf.lines[0] = "b"
    um.undo(buf)
    assert um.redo_depth() == 1
    um.push(buf)
    assert um.redo_depth() == 0
    assert um.undo_depth() == 1


def test_undo_marks_buffer_dirty():
    um = UndoManager()
    buf = TextBuffer(["a"])
    um.push(buf)
    buf.dirty = False
    um.undo(buf)
    assert buf.dirty is True


def test_edit_state_of_copies_lines():
    buf = TextBuffer(["x", "y"])
    state = EditState.of(buf)
    buf.lines.append("z")
    assert state.lines == ("x", "y")