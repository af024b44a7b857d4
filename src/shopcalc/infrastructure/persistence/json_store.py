"""Shared file handling for the JSON-backed repositories.

Each repository owns one JSON file holding a list of records. Every
read-modify-write cycle runs under the store's lock, so the background
bill writer and the CLI thread never interleave on the same file.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path


class JsonListFile:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self.lock = threading.RLock()
        self._ensure_file()

    def load(self) -> list[dict]:
        with self.lock:
            return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        with self.lock:
            self._file_path.write_text(
                json.dumps(records, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )

    def next_id(self, records: list[dict]) -> int:
        if not records:
            return 1
        return max(int(r["id"]) for r in records) + 1

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
