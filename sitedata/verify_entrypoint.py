"""Drift-check entrypoint - fail if committed data/ is stale.

Usage:
    python -m sitedata.verify_entrypoint
    sitedata-verify
"""

import sys

from sitedata.core.errors import SiteDataError
from sitedata.core.logging import get_logger
from sitedata.services.drift_service import DriftChecker

logger = get_logger("verify_entrypoint")


def main() -> int:
    """Main entry point for the drift check."""
    try:
        drifted = DriftChecker().check()
    except (OSError, SiteDataError) as exc:
        logger.exception(f"Drift check failed: {exc}")
        return 1

    if drifted:
        print("Generated data is out of date. Run 'sitedata-build' and commit the changes.", file=sys.stderr)
        for path in drifted:
            print(path, file=sys.stderr)
        logger.bind(details=drifted).error(f"Generated data is stale | {len(drifted)} paths under data/")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
