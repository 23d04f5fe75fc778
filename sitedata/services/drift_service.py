"""Generated-output drift check: rebuild, then ask git whether data/ changed."""

from __future__ import annotations

import re
import subprocess
from typing import List, Optional

from sitedata.core.errors import DriftCheckError
from sitedata.core.layout import ContentLayout
from sitedata.core.logging import get_logger
from sitedata.services.build_service import BuildService

log = get_logger("drift_service")

STATUS_PREFIX_RE = re.compile(r"^..\s+")
RENAME_SEPARATOR = " -> "


def changed_paths(porcelain: str) -> List[str]:
    """Paths from ``git status --porcelain`` output; renames yield the new path."""
    paths: List[str] = []
    for line in porcelain.splitlines():
        line = line.rstrip()
        if not line:
            continue
        path = STATUS_PREFIX_RE.sub("", line, count=1)
        if RENAME_SEPARATOR in path:
            path = path.split(RENAME_SEPARATOR)[-1]
        paths.append(path)
    return paths


class DriftChecker:
    """Fails when a fresh build changes committed files under data/."""

    def __init__(self, layout: Optional[ContentLayout] = None, builder: Optional[BuildService] = None):
        self.layout = layout or ContentLayout.from_root()
        self.builder = builder or BuildService(self.layout)

    def check(self) -> List[str]:
        """Rebuild and return the generated paths that differ from version control."""
        self.builder.run_all()

        status = self._git_status()
        if status is None:
            return []

        drifted = changed_paths(status)
        if drifted:
            log.warning(f"Generated data drifted | files={len(drifted)}")
        else:
            log.info("Generated data matches version control")
        return drifted

    def _git_status(self) -> Optional[str]:
        """``git status`` limited to the data directory, or None outside a work tree."""
        cmd = [
            "git",
            "status",
            "--porcelain",
            "--untracked-files=all",
            "--",
            self.layout.relative(self.layout.data_dir),
        ]
        try:
            proc = subprocess.run(cmd, cwd=self.layout.root, capture_output=True, text=True, check=False)
        except FileNotFoundError:
            log.warning("git is not installed; skipping drift check")
            return None

        if proc.returncode != 0:
            if "not a git repository" in proc.stderr.lower():
                # e.g. a downloaded archive; nothing to compare against
                log.info(f"{self.layout.root} is not a git work tree; skipping drift check")
                return None
            raise DriftCheckError(f"git status failed ({proc.returncode}): {proc.stderr.strip()}")
        return proc.stdout
