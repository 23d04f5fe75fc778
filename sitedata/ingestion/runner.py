"""Orchestration logic for content ingestion."""

from __future__ import annotations

from typing import Dict, List

from sitedata.core.logging import get_logger
from .base import BaseSource

log = get_logger("ingestion.runner")


class IngestionRunner:
    """Runs multiple sources and returns their records by source name."""

    def __init__(self, sources: List[BaseSource]):
        self.sources = sources

    def run(self) -> Dict[str, List[dict]]:
        aggregated: Dict[str, List[dict]] = {}

        for source in self.sources:
            records = source.fetch()
            aggregated[source.name] = records
            log.info(f"Source={source.name} records={len(records)}")
        return aggregated
