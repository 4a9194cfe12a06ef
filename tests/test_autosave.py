import time

from editgo.autosave import AutoSave
from editgo.fileio import FileManager


def _wait_for(predicate, timeout=3.0):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(0.01)
    return predicate()


def test_does_not_start_for_empty_path(tmp_path):
    fm = FileManager.empty()
    fm.buffer.lines = ["unsaved"]
    fm.buffer.dirty = True
    auto = AutoSave(fm, 0.05)
    auto.start()
    time.sleep(0.2)
    auto.stop()
    assert fm.buffer.dirty is True
    assert fm.file_path == ""
    assert list(tmp_path.iterdir()) == []


def test_saves_when_dirty(tmp_path):
    path = tmp_path / "autosave_test.txt"
    fm = FileManager.empty()
    fm.file_path = str(path)
    fm.buffer.lines = ["first"]
    fm.buffer.dirty = True

    auto = AutoSave(fm, 0.05)
    auto.start()
    saved = _wait_for(lambda: not fm.buffer.dirty)
    auto.stop()

    assert saved is True
    assert path.read_text(encoding="utf-8").strip() == "first"


def test_stop_prevents_saving(tmp_path):
    path = tmp_path / "stop_test.txt"
    fm = FileManager.empty()
    fm.file_path = str(path)
    fm.buffer.lines = ["stop test"]
    fm.buffer.dirty = True

    auto = AutoSave(fm, 0.1)
    auto.start()
    auto.stop()
    time.sleep(0.2)

    assert fm.buffer.dirty is True
    assert not path.exists()


def test_clean_buffer_is_not_written(tmp_path):
    path = tmp_path / "clean.txt"
    fm = FileManager.empty()
    fm.file_path = str(path)
    fm.buffer.lines = ["clean"]

    with AutoSave(fm, 0.05):
        time.sleep(0.2)

    assert not path.exists()


def test_context_manager_saves_and_stops(tmp_path):
    path = tmp_path / "ctx.txt"
    fm = FileManager.empty()
    fm.file_path = str(path)
    fm.buffer.lines = ["one", "two"]
    fm.buffer.dirty = True

    with AutoSave(fm, 0.05) as auto:
        assert auto.file_manager is fm
        saved = _wait_for(lambda: not fm.buffer.dirty)

    assert saved is True
    assert path.read_text(encoding="utf-8") == "one\ntwo\n"

    fm.buffer.insert_char(0, 0, "x")
    time.sleep(0.2)
    assert fm.buffer.dirty is True
    assert path.read_text(encoding="utf-8") == "one\ntwo\n"