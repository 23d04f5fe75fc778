"""Field predicates and legacy alias chains shared by builders and validator."""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Mapping, Sequence

ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
TIME_RE = re.compile(r"^[0-9]{2}:[0-9]{2}$")
HTTP_URL_RE = re.compile(r"^https?://\S+$", re.IGNORECASE)
FILENAME_DATE_RE = re.compile(r"^([0-9]{4}-[0-9]{2}-[0-9]{2})-")

# Ordered, first non-empty wins. Add new legacy labels at the end.
EVENT_ALIASES: dict[str, tuple[str, ...]] = {
    "title": ("title", "event"),
    "date": ("date", "when", "on"),
    "time": ("time",),
    "location": ("location", "where"),
    "link": ("link", "url"),
    "contact": ("contact", "submitted_by", "submittedby", "submitted"),
    "description": ("description",),
}

LINK_ALIASES: dict[str, tuple[str, ...]] = {
    "title": ("title",),
    "url": ("url", "link"),
    "description": ("description",),
    "category": ("category",),
}

GALLERY_ALIASES: dict[str, tuple[str, ...]] = {
    "title": ("title", "name", "caption"),
    "image": ("image", "image_filename", "src"),
    "credit": ("credit", "submitted_by", "submittedby"),
    "description": ("description",),
}

DEFAULT_LINK_CATEGORY = "General"
UNDATED_SORT_DATE = "9999-12-31"
UNTIMED_SORT_TIME = "00:00"


def _text(value: Any) -> str:
    return str(value or "").strip()


def non_empty(value: Any) -> bool:
    return len(_text(value)) > 0


def is_iso_date(value: Any) -> bool:
    """True for a real calendar date written as YYYY-MM-DD."""
    v = _text(value)
    if not ISO_DATE_RE.match(v):
        return False
    year, month, day = (int(part) for part in v.split("-"))
    try:
        parsed = date(year, month, day)
    except ValueError:
        return False
    return parsed.isoformat() == v


def is_time_optional(value: Any) -> bool:
    v = _text(value)
    if not v:
        return True
    if not TIME_RE.match(v):
        return False
    hh, mm = (int(part) for part in v.split(":"))
    return 0 <= hh <= 23 and 0 <= mm <= 59


def is_http_url_required(value: Any) -> bool:
    v = _text(value)
    if not v:
        return False
    return bool(HTTP_URL_RE.match(v))


def is_http_url_optional(value: Any) -> bool:
    v = _text(value)
    if not v:
        return True
    return bool(HTTP_URL_RE.match(v))


def filename_date_prefix(name: str) -> str:
    m = FILENAME_DATE_RE.match(name or "")
    return m.group(1) if m else ""


def pick(fields: Mapping[str, Any], aliases: Sequence[str], default: Any = "") -> Any:
    """Return the first truthy value among ``aliases``, else ``default``."""
    for key in aliases:
        value = fields.get(key)
        if value:
            return value
    return default


def event_sort_key(event_date: str, event_time: str) -> str:
    return f"{event_date or UNDATED_SORT_DATE}T{event_time or UNTIMED_SORT_TIME}"


def link_sort_key(category: str, title: str) -> str:
    return f"{category}::{title}"


def strip_extension(filename: str, extension: str) -> str:
    """``"a.TXT"`` -> ``"a"`` for ``extension=".txt"``; other names unchanged."""
    if filename.lower().endswith(extension.lower()):
        return filename[: -len(extension)]
    return filename


def collation_key(value: Any) -> tuple[str, str]:
    """Case-insensitive ordering; on a tie lowercase sorts before uppercase.

    ``sorted(["Banana", "apple", "Apple"], key=collation_key)`` gives
    ``["apple", "Apple", "Banana"]``, the order the site renderer uses.
    """
    text = str(value)
    return text.casefold(), text.swapcase()
