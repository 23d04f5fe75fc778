"""Abstract source interface for content ingestion."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List


class BaseSource(ABC):
    """Abstract base class for content sources.

    Every record carries ``file`` (the source filename) and ``path``.
    """

    name: str

    @abstractmethod
    def fetch(self) -> List[Dict[str, Any]]:
        """Read raw records, in a deterministic order."""

    @staticmethod
    def list_files(directory: Path, extension: str) -> List[Path]:
        """Files in ``directory`` with ``extension`` (any case), sorted by name."""
        if not directory.is_dir():
            return []
        ext = extension.lower()
        return sorted(
            (p for p in directory.iterdir() if p.name.lower().endswith(ext) and p.is_file()),
            key=lambda p: p.name,
        )
