"""Key-value text directory source (events, links)."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

from sitedata.core.logging import get_logger
from .base import BaseSource
from .keyvalue import parse_key_value

log = get_logger("ingestion.text")


class KeyValueSource(BaseSource):
    """Reads ``*.txt`` records from one directory."""

    def __init__(self, name: str, directory: Path):
        self.name = name
        self.directory = Path(directory)

    def fetch(self) -> List[Dict[str, Any]]:
        if not self.directory.is_dir():
            log.warning(f"Source directory not found: {self.directory}")
            return []

        records: List[Dict[str, Any]] = []
        for path in self.list_files(self.directory, ".txt"):
            records.append(
                {
                    "file": path.name,
                    "path": path,
                    "fields": parse_key_value(path.read_text(encoding="utf-8", errors="replace")),
                }
            )
        log.debug(f"Loaded {len(records)} {self.name} records from {self.directory}")
        return records
