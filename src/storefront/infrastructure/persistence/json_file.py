"""A JSON document on disk holding a list of records.

Every repository keeps one such file. Writes go to a temp file in the
same directory and are moved into place with ``os.replace``, so a
reader never sees a half-written file and a failed write leaves the old
contents intact.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator


class JsonFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._ensure_file()

    @property
    def path(self) -> Path:
        return self._file_path

    def load(self) -> list[dict]:
        with self._lock:
            return json.loads(self._file_path.read_text(encoding="utf-8"))

    def write(self, records: list[dict]) -> None:
        payload = json.dumps(records, indent=2) + "\n"
        with self._lock:
            fd, tmp_name = tempfile.mkstemp(
                dir=self._file_path.parent, prefix=f".{self._file_path.name}."
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(payload)
                os.replace(tmp_name, self._file_path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise

    @contextmanager
    def transaction(self) -> Iterator[list[dict]]:
        """Hold the lock across a read-modify-write cycle.

        The yielded list is written back if the block exits cleanly.
        """
        with self._lock:
            records = self.load()
            yield records
            self.write(records)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
