"""Build entrypoint - regenerate every canonical JSON document under data/.

Usage:
    python -m sitedata.build_entrypoint
    sitedata-build
"""

import sys

from sitedata.core.logging import get_logger
from sitedata.services.build_service import BuildService

logger = get_logger("build_entrypoint")


def main() -> int:
    """Main entry point for the build."""
    try:
        result = BuildService().run_all()
    except OSError as exc:
        logger.exception(f"Build failed: {exc}")
        return 1

    for path in result.written:
        logger.debug(f"written: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
