"""Validation entrypoint - content quality gate.

Usage:
    python -m sitedata.validate_entrypoint
    sitedata-validate

Exits 1 if any error was found; warnings alone exit 0.
"""

import sys
from typing import List, TextIO

from sitedata.core.config import settings
from sitedata.core.layout import ContentLayout
from sitedata.core.logging import get_logger
from sitedata.schemas.report import Issue, ValidationReport
from sitedata.services.validation_service import ValidationService

logger = get_logger("validate_entrypoint")

TAG = "[validate-content]"


def _print_issues(
    title: str, noun: str, issues: List[Issue], layout: ContentLayout, limit: int, stream: TextIO
) -> None:
    print(f"\n{TAG} {title} ({len(issues)})", file=stream)
    for issue in issues[:limit]:
        print(f"- {layout.relative(issue.file)}: {issue.message}", file=stream)
    if len(issues) > limit:
        print(f"- ...and {len(issues) - limit} more {noun}", file=stream)


def print_report(
    report: ValidationReport,
    layout: ContentLayout,
    limit: int | None = None,
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Summary, then capped warning and error listings."""
    limit = settings.REPORT_LIMIT if limit is None else limit
    out = out or sys.stdout
    err = err or sys.stderr
    counts = report.counts

    print(f"\n{TAG} Checked {counts.total} source files", file=out)
    print(f"- events:  {counts.events}", file=out)
    print(f"- links:   {counts.links}", file=out)
    print(f"- news:    {counts.news}", file=out)
    print(f"- gallery: {counts.gallery}", file=out)

    if report.warnings:
        _print_issues("WARNINGS", "warnings", report.warnings, layout, limit, out)

    if report.errors:
        _print_issues("ERRORS", "errors", report.errors, layout, limit, err)
        print(f"\n{TAG} FAIL", file=err)
    else:
        print(f"\n{TAG} OK", file=out)


def main() -> int:
    """Main entry point for content validation."""
    layout = ContentLayout.from_root()
    try:
        report = ValidationService(layout).validate()
    except OSError as exc:
        logger.exception(f"Validation aborted: {exc}")
        return 1

    print_report(report, layout)
    if not report.ok:
        logger.bind(details=[layout.relative(path) for path in report.errors_by_file]).error(
            f"Content validation failed | errors={len(report.errors)} warnings={len(report.warnings)}"
        )
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
