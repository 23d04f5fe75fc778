"""JSON sources: one-object-per-file directories and the legacy gallery index."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from sitedata.core.logging import get_logger
from .base import BaseSource

log = get_logger("ingestion.json")


class JSONDirectorySource(BaseSource):
    """Reads ``*.json`` files from one directory.

    Bytes that are not valid UTF-8 decode to U+FFFD. A file that fails to
    parse yields a record with ``payload=None`` and an ``error`` message
    instead of aborting the run.
    """

    def __init__(self, name: str, directory: Path):
        self.name = name
        self.directory = Path(directory)

    def fetch(self) -> List[Dict[str, Any]]:
        records: List[Dict[str, Any]] = []
        for path in self.list_files(self.directory, ".json"):
            record: Dict[str, Any] = {"file": path.name, "path": path, "payload": None, "error": None}
            try:
                record["payload"] = json.loads(path.read_text(encoding="utf-8", errors="replace"))
            except ValueError as exc:
                # JSONDecodeError, or e.g. an integer literal over the digit limit
                record["error"] = f"Invalid JSON: {exc}"
            records.append(record)
        log.debug(f"Loaded {len(records)} {self.name} records from {self.directory}")
        return records


class LegacyIndexSource(BaseSource):
    """Reads items from a consolidated ``{"items": [...]}`` index file."""

    def __init__(self, name: str, path: Path):
        self.name = name
        self.path = Path(path)

    def fetch(self) -> List[Dict[str, Any]]:
        if not self.path.is_file():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8", errors="replace"))
        except ValueError as exc:
            log.warning(f"Error reading legacy index {self.path}: {exc}")
            return []

        items = raw.get("items") if isinstance(raw, dict) else None
        if not isinstance(items, list):
            return []
        return [
            {"file": self.path.name, "path": self.path, "payload": item, "error": None}
            for item in items
        ]
