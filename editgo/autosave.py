"""Periodic background saving of a dirty buffer."""

from __future__ import annotations

import logging
import threading

from editgo.fileio import FileManager, NoFilePathError

log = logging.getLogger(__name__)


class AutoSave:
    """Saves the file manager's buffer every ``interval`` seconds while it is dirty.

    Saving only starts when the file manager has a file path.
    """

    def __init__(self, file_manager: FileManager, interval: float = 5.0) -> None:
        self.file_manager = file_manager
        self.interval = interval
        self._quit = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Start the background saver, unless there is no file path."""
        if not self.file_manager.file_path:
            log.info("auto save file not exist")
            return
        if self._thread is not None and self._thread.is_alive():
            return
        self._thread = threading.Thread(target=self._run, name="autosave", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        log.info("auto save file started")
        while not self._quit.wait(self.interval):
            if not self.file_manager.buffer.dirty:
                continue
            try:
                self.file_manager.save()
            except (OSError, NoFilePathError) as exc:
                log.error("auto save file err: %s", exc)
            else:
                log.info("auto save file done")
        log.info("auto save file quit")

    def stop(self) -> None:
        """Stop the background saver and wait for it to finish."""
        self._quit.set()
        if self._thread is not None:
            self._thread.join()

    def __enter__(self) -> AutoSave:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()