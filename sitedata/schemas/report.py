"""Validation report schemas"""

from collections import defaultdict
from pathlib import Path
from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field

Severity = Literal["error", "warning"]


class Issue(BaseModel):
    """One problem found in one source file."""

    model_config = ConfigDict(frozen=True)

    file: Path
    message: str
    severity: Severity = "error"


class ValidationCounts(BaseModel):
    events: int = 0
    links: int = 0
    news: int = 0
    gallery: int = 0

    @property
    def total(self) -> int:
        return self.events + self.links + self.news + self.gallery


class ValidationReport(BaseModel):
    errors: List[Issue] = []
    warnings: List[Issue] = []
    counts: ValidationCounts = Field(default_factory=ValidationCounts)

    @property
    def ok(self) -> bool:
        """Warnings alone never fail a run."""
        return not self.errors

    @property
    def errors_by_file(self) -> Dict[Path, List[str]]:
        return _group(self.errors)

    @property
    def warnings_by_file(self) -> Dict[Path, List[str]]:
        return _group(self.warnings)


def _group(issues: List[Issue]) -> Dict[Path, List[str]]:
    grouped: Dict[Path, List[str]] = defaultdict(list)
    for issue in issues:
        grouped[issue.file].append(issue.message)
    return dict(grouped)


class BuildResult(BaseModel):
    """Summary of one build run."""

    events: int = 0
    links: int = 0
    gallery: int = 0
    maps_seeded: bool = False
    written: List[Path] = []
