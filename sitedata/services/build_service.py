"""Content builders: source files -> canonical JSON documents under data/."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from sitedata.core.config import settings
from sitedata.core.fields import (
    DEFAULT_LINK_CATEGORY,
    EVENT_ALIASES,
    GALLERY_ALIASES,
    LINK_ALIASES,
    collation_key,
    event_sort_key,
    filename_date_prefix,
    link_sort_key,
    pick,
    strip_extension,
)
from sitedata.core.images import public_image_path
from sitedata.core.layout import ContentLayout
from sitedata.core.logging import get_logger
from sitedata.ingestion.json_source import JSONDirectorySource, LegacyIndexSource
from sitedata.ingestion.text_source import KeyValueSource
from sitedata.schemas.normalized import (
    Event,
    EventsDocument,
    GalleryDocument,
    GalleryItem,
    Link,
    LinksDocument,
    MapEntry,
    MapsDocument,
)
from sitedata.schemas.report import BuildResult

log = get_logger("build_service")

MAPS_PLACEHOLDER = MapsDocument(
    items=[
        MapEntry(
            id="north-shore-forays",
            title="North Shore Foray Spots (placeholder)",
            description="Add GeoJSON layers or embedded maps here later.",
            type="placeholder",
            url="",
        )
    ]
)


def dump_document(payload: Dict[str, Any]) -> str:
    """Serialize a document exactly the same way on every run."""
    return json.dumps(payload, indent=2, ensure_ascii=False)


class BuildService:
    """Builds every canonical document from the content tree.

    Builders do not validate: malformed values pass through unchanged. Output
    files are overwritten on every run, except the maps placeholder.
    """

    def __init__(self, layout: Optional[ContentLayout] = None, event_date_from_filename: Optional[bool] = None):
        self.layout = layout or ContentLayout.from_root()
        if event_date_from_filename is None:
            event_date_from_filename = settings.EVENT_DATE_FROM_FILENAME
        self.event_date_from_filename = event_date_from_filename

    def run_all(self) -> BuildResult:
        """Run every builder in a fixed order."""
        result = BuildResult()

        result.events = len(self.build_events().items)
        result.written.append(self.layout.events_output)

        result.links = len(self.build_links().items)
        result.written.append(self.layout.links_output)

        result.gallery = len(self.build_gallery().items)
        result.written.append(self.layout.gallery_output)

        result.maps_seeded = self.build_maps_placeholder()
        if result.maps_seeded:
            result.written.append(self.layout.maps_output)

        log.info(
            f"Build finished | events={result.events} links={result.links} "
            f"gallery={result.gallery} maps_seeded={result.maps_seeded}"
        )
        return result

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------
    def build_events(self) -> EventsDocument:
        records = KeyValueSource("events", self.layout.events_dir).fetch()
        items = sorted((self.normalize_event(rec) for rec in records), key=lambda e: collation_key(e.sort_key))
        doc = EventsDocument(items=items)
        self._write(self.layout.events_output, doc.model_dump(by_alias=True))
        log.info(f"Wrote {len(items)} events -> {self.layout.relative(self.layout.events_output)}")
        return doc

    def normalize_event(self, record: Dict[str, Any]) -> Event:
        kv = record["fields"]
        file = record["file"]

        event_date = pick(kv, EVENT_ALIASES["date"])
        if not event_date and self.event_date_from_filename:
            event_date = filename_date_prefix(file)
        event_time = pick(kv, EVENT_ALIASES["time"])

        return Event(
            id=file,
            title=pick(kv, EVENT_ALIASES["title"], strip_extension(file, ".txt")),
            date=event_date,
            time=event_time,
            location=pick(kv, EVENT_ALIASES["location"]),
            link=pick(kv, EVENT_ALIASES["link"]),
            contact=pick(kv, EVENT_ALIASES["contact"]),
            description=pick(kv, EVENT_ALIASES["description"]),
            sort_key=event_sort_key(event_date, event_time),
            source="content/events",
        )

    # -------------------------------------------------------------------------
    # Links
    # -------------------------------------------------------------------------
    def build_links(self) -> LinksDocument:
        records = KeyValueSource("links", self.layout.links_dir).fetch()
        items = sorted((self.normalize_link(rec) for rec in records), key=lambda link: collation_key(link.sort_key))
        doc = LinksDocument(items=items)
        self._write(self.layout.links_output, doc.model_dump(by_alias=True))
        log.info(f"Wrote {len(items)} links -> {self.layout.relative(self.layout.links_output)}")
        return doc

    @staticmethod
    def normalize_link(record: Dict[str, Any]) -> Link:
        kv = record["fields"]
        file = record["file"]

        title = pick(kv, LINK_ALIASES["title"], strip_extension(file, ".txt"))
        category = pick(kv, LINK_ALIASES["category"], DEFAULT_LINK_CATEGORY)
        return Link(
            id=file,
            title=title,
            url=pick(kv, LINK_ALIASES["url"]),
            description=pick(kv, LINK_ALIASES["description"]),
            category=category,
            sort_key=link_sort_key(category, title),
            source="content/links",
        )

    # -------------------------------------------------------------------------
    # Gallery
    # -------------------------------------------------------------------------
    def build_gallery(self) -> GalleryDocument:
        items = [self.normalize_gallery_item(rec) for rec in self._gallery_records()]
        # Newest first; ties keep file order
        items.sort(key=lambda it: collation_key(it.order_key), reverse=True)
        doc = GalleryDocument(items=items)
        self._write(self.layout.gallery_output, doc.model_dump())
        log.info(f"Wrote {len(items)} gallery items -> {self.layout.relative(self.layout.gallery_output)}")
        return doc

    def _gallery_records(self) -> List[Dict[str, Any]]:
        """Per-item meta files when gallery/meta/ exists, else the legacy index."""
        if self.layout.gallery_meta_dir.is_dir():
            records = JSONDirectorySource("gallery", self.layout.gallery_meta_dir).fetch()
            for rec in records:
                rec["id_fallback"] = strip_extension(rec["file"], ".json")
        else:
            records = LegacyIndexSource("gallery", self.layout.gallery_legacy_index).fetch()

        usable: List[Dict[str, Any]] = []
        for rec in records:
            if rec.get("error"):
                log.warning(f"Error reading gallery meta file {rec['file']}: {rec['error']}")
                continue
            if not isinstance(rec.get("payload"), dict):
                log.warning(f"Skipping gallery entry in {rec['file']}: not a JSON object")
                continue
            usable.append(rec)
        return usable

    @staticmethod
    def normalize_gallery_item(record: Dict[str, Any]) -> GalleryItem:
        raw = dict(record["payload"])
        if not raw.get("id") and record.get("id_fallback"):
            raw["id"] = record["id_fallback"]
        raw["image"] = public_image_path(pick(raw, GALLERY_ALIASES["image"]))
        return GalleryItem.model_validate(raw)

    # -------------------------------------------------------------------------
    # Maps
    # -------------------------------------------------------------------------
    def build_maps_placeholder(self) -> bool:
        """Seed data/maps/maps.json once. Existing content is never touched."""
        out = self.layout.maps_output
        if out.exists():
            return False
        self._write(out, MAPS_PLACEHOLDER.model_dump())
        log.info(f"Wrote maps placeholder -> {self.layout.relative(out)}")
        return True

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------
    @staticmethod
    def _write(path: Path, payload: Dict[str, Any]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dump_document(payload), encoding="utf-8")
