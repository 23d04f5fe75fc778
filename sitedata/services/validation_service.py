"""Content validator: read-only quality gate over the same sources the builders read."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from sitedata.core.config import settings
from sitedata.core.fields import (
    DEFAULT_LINK_CATEGORY,
    EVENT_ALIASES,
    GALLERY_ALIASES,
    LINK_ALIASES,
    filename_date_prefix,
    is_http_url_optional,
    is_http_url_required,
    is_iso_date,
    is_time_optional,
    non_empty,
    pick,
    strip_extension,
)
from sitedata.core.images import ImageResolver
from sitedata.core.layout import ContentLayout
from sitedata.core.logging import get_logger
from sitedata.ingestion.json_source import JSONDirectorySource
from sitedata.ingestion.runner import IngestionRunner
from sitedata.ingestion.text_source import KeyValueSource
from sitedata.schemas.normalized import NewsItem
from sitedata.schemas.report import Issue, ValidationCounts, ValidationReport

log = get_logger("validation_service")

NEWS_TYPES = (
    "announcement",
    "updates",
    "field-notes",
    "in-the-news",
    "ideas",
    "admin",
    "qa",
)

EVENT_FILENAME_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}-.+\.txt$", re.IGNORECASE)
NEWS_FILENAME_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}-.+\.json$", re.IGNORECASE)


def _text(value: Any) -> str:
    return str(value or "").strip()


def _as_list(value: Any) -> List[Any]:
    if isinstance(value, list):
        return value
    if value is None:
        return []
    return [value]


class ValidationService:
    """Classifies every deviation in the content tree as an error or a warning.

    Errors are content that would break rendering or data integrity; warnings
    degrade the site but never fail a run. Nothing is written.
    """

    def __init__(self, layout: Optional[ContentLayout] = None, max_tag_length: Optional[int] = None):
        self.layout = layout or ContentLayout.from_root()
        self.images = ImageResolver(self.layout)
        self.max_tag_length = max_tag_length or settings.MAX_TAG_LENGTH
        self._report = ValidationReport()

    def validate(self) -> ValidationReport:
        self._report = ValidationReport()

        runner = IngestionRunner(
            [
                KeyValueSource("events", self.layout.events_dir),
                KeyValueSource("links", self.layout.links_dir),
                JSONDirectorySource("news", self.layout.news_dir),
                JSONDirectorySource("gallery", self.layout.gallery_meta_dir),
            ]
        )
        records = runner.run()

        self._validate_events(records["events"])
        self._validate_links(records["links"])
        # News is optional input; a missing directory yields no records.
        self._validate_news(records["news"])
        self._validate_gallery(records["gallery"])

        self._report.counts = ValidationCounts(**{kind: len(recs) for kind, recs in records.items()})
        log.info(
            f"Validated {self._report.counts.total} files | "
            f"errors={len(self._report.errors)} warnings={len(self._report.warnings)}"
        )
        return self._report

    def _error(self, path: Path, message: str) -> None:
        self._report.errors.append(Issue(file=path, message=message, severity="error"))

    def _warn(self, path: Path, message: str) -> None:
        self._report.warnings.append(Issue(file=path, message=message, severity="warning"))

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------
    def _validate_events(self, records: List[Dict[str, Any]]) -> None:
        seen: set[str] = set()

        for rec in records:
            fp, file, kv = rec["path"], rec["file"], rec["fields"]

            title = pick(kv, EVENT_ALIASES["title"], strip_extension(file, ".txt"))
            event_date = pick(kv, EVENT_ALIASES["date"]) or filename_date_prefix(file)
            event_time = pick(kv, EVENT_ALIASES["time"])
            location = pick(kv, EVENT_ALIASES["location"])
            link = pick(kv, EVENT_ALIASES["link"])
            description = pick(kv, EVENT_ALIASES["description"])

            if file in seen:
                self._error(fp, f'Duplicate event filename/id "{file}".')
            seen.add(file)

            if not EVENT_FILENAME_RE.match(file):
                self._warn(fp, f'Recommended filename: "YYYY-MM-DD-slug.txt" (got "{file}").')

            if not non_empty(event_date):
                self._error(fp, 'Missing date. Add "Date:" or use filename prefix "YYYY-MM-DD-...".')
            elif not is_iso_date(event_date):
                self._error(fp, f'Invalid date "{event_date}". Expected YYYY-MM-DD.')

            if not is_time_optional(event_time):
                self._error(fp, f'Invalid time "{event_time}". Expected HH:mm (24h).')

            if not non_empty(title):
                self._warn(fp, 'Missing "Title:" (will fallback to filename).')
            if not non_empty(location):
                self._warn(fp, 'Missing "Location:" (recommended for calendar tiles).')
            if not non_empty(description):
                self._warn(fp, 'Missing "Description:" (recommended for event detail page).')

            if not is_http_url_optional(link):
                self._error(fp, f'Invalid link "{link}". Expected http(s)://...')

    # -------------------------------------------------------------------------
    # Links
    # -------------------------------------------------------------------------
    def _validate_links(self, records: List[Dict[str, Any]]) -> None:
        seen: set[str] = set()

        for rec in records:
            fp, file, kv = rec["path"], rec["file"], rec["fields"]

            title = pick(kv, LINK_ALIASES["title"], strip_extension(file, ".txt"))
            url = pick(kv, LINK_ALIASES["url"])
            description = pick(kv, LINK_ALIASES["description"])
            category = pick(kv, LINK_ALIASES["category"], DEFAULT_LINK_CATEGORY)

            if file in seen:
                self._error(fp, f'Duplicate link filename/id "{file}".')
            seen.add(file)

            if not non_empty(url):
                self._error(fp, 'Missing URL. Add "URL:" or "Link:"')
            elif not is_http_url_required(url):
                self._error(fp, f'Invalid URL "{url}". Expected http(s)://...')

            if not non_empty(title):
                self._warn(fp, 'Missing "Title:" (will fallback to filename).')
            if not non_empty(category):
                self._warn(fp, f'Missing "Category:" (will fallback to "{DEFAULT_LINK_CATEGORY}").')
            if not non_empty(description):
                self._warn(fp, 'No "Description:" provided (optional, but recommended).')

    # -------------------------------------------------------------------------
    # News
    # -------------------------------------------------------------------------
    def _validate_news(self, records: List[Dict[str, Any]]) -> None:
        seen_ids: set[str] = set()

        for rec in records:
            fp, file, obj = rec["path"], rec["file"], rec["payload"]
            if rec["error"]:
                self._error(fp, rec["error"])
                continue
            if not isinstance(obj, dict):
                self._error(fp, "Expected a JSON object.")
                continue

            item = NewsItem(**{key: _text(obj.get(key)) for key in NewsItem.model_fields})
            news_id, title, news_date = item.id, item.title, item.date
            news_type, summary, body, thumb = item.type, item.summary, item.body, item.thumb

            if not news_id:
                self._error(fp, 'Missing required field "id".')
            if not title:
                self._error(fp, 'Missing required field "title".')
            if not news_date:
                self._error(fp, 'Missing required field "date".')
            elif not is_iso_date(news_date):
                self._error(fp, f'Invalid date "{news_date}". Expected YYYY-MM-DD.')

            if not news_type:
                self._error(fp, 'Missing required field "type".')
            elif news_type not in NEWS_TYPES:
                self._error(fp, f'Invalid type "{news_type}". Must be one of: {", ".join(NEWS_TYPES)}')

            if not summary:
                self._warn(fp, 'Missing "summary" (recommended).')
            if not body:
                self._warn(fp, 'Missing "body" (recommended).')

            if thumb and not is_http_url_optional(thumb):
                self._error(fp, f'Invalid thumb "{thumb}". Expected http(s)://...')

            if news_id:
                if news_id in seen_ids:
                    self._error(fp, f'Duplicate news id "{news_id}".')
                seen_ids.add(news_id)

            if not NEWS_FILENAME_RE.match(file):
                self._warn(fp, f'Recommended filename: "YYYY-MM-DD-slug.json" (got "{file}").')

    # -------------------------------------------------------------------------
    # Gallery
    # -------------------------------------------------------------------------
    def _validate_gallery(self, records: List[Dict[str, Any]]) -> None:
        seen_ids: set[str] = set()

        for rec in records:
            fp, file, obj = rec["path"], rec["file"], rec["payload"]
            if rec["error"]:
                self._error(fp, rec["error"])
                continue
            if not isinstance(obj, dict):
                self._error(fp, "Expected a JSON object.")
                continue

            filename_base = strip_extension(file, ".json")
            explicit_id = _text(obj.get("id"))
            item_id = _text(obj.get("id") or filename_base)
            title = _text(pick(obj, GALLERY_ALIASES["title"]))
            item_date = _text(obj.get("date"))
            image = _text(pick(obj, GALLERY_ALIASES["image"]))
            credit = _text(pick(obj, GALLERY_ALIASES["credit"]))
            description = _text(pick(obj, GALLERY_ALIASES["description"]))
            tags = [str(t).strip() for t in _as_list(obj.get("tags"))]
            tags = [t for t in tags if t]

            if not item_id:
                self._error(fp, 'Missing "id" and could not derive from filename.')

            if not image:
                self._error(fp, 'Missing required field "image".')
            else:
                self._check_image(fp, image)

            if item_date and not is_iso_date(item_date):
                self._error(fp, f'Invalid date "{item_date}". Expected YYYY-MM-DD.')
            if not item_date:
                self._warn(fp, 'Missing "date" (recommended for sorting).')

            if not title:
                self._warn(fp, 'Missing "title" (optional; recommended for future UI).')

            if obj.get("tags") is not None and not isinstance(obj.get("tags"), list):
                self._warn(fp, '"tags" is not an array. Prefer: ["tag1","tag2"]')
            for tag in tags:
                if len(tag) > self.max_tag_length:
                    self._warn(fp, f'Tag is very long (>{self.max_tag_length} chars): "{tag[:80]}..."')

            if item_id:
                if item_id in seen_ids:
                    self._error(fp, f'Duplicate gallery id "{item_id}".')
                seen_ids.add(item_id)

            if explicit_id and file != f"{explicit_id}.json":
                self._warn(fp, f'Recommended filename "{explicit_id}.json" (got "{file}").')

            if not credit:
                self._warn(fp, 'No "credit"/"submitted_by" provided (optional, recommended).')
            if not description:
                self._warn(fp, 'No "description" provided (optional, recommended).')

    def _check_image(self, fp: Path, image: str) -> None:
        resolved = self.images.resolve(image)
        if resolved is None:
            self._error(fp, f'Invalid image value "{image}".')
        elif resolved.kind == "url":
            if not is_http_url_required(resolved.value):
                self._error(fp, f'Invalid image URL "{resolved.value}". Expected http(s)://...')
        elif not resolved.path.exists():
            self._error(
                fp,
                f'Image file does not exist: {self.layout.relative(resolved.path)} (from "{image}")',
            )
