"""Canonical records written to data/ and read by the site renderer."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    """Calendar event built from one ``content/events/*.txt`` file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    date: str = ""
    time: str = ""
    location: str = ""
    link: str = ""
    contact: str = ""
    description: str = ""
    sort_key: str = Field(alias="sortKey")
    source: str = "content/events"


class Link(BaseModel):
    """Link directory entry built from one ``content/links/*.txt`` file."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    url: str = ""
    description: str = ""
    category: str = "General"
    sort_key: str = Field(alias="sortKey")
    source: str = "content/links"


class GalleryItem(BaseModel):
    """Gallery entry.

    Every key, ``id`` and ``image`` included, is stored as an extra so the
    written object keeps the source key order.
    """

    model_config = ConfigDict(extra="allow")

    @property
    def order_key(self) -> str:
        return str(getattr(self, "date", None) or getattr(self, "id", None) or "")


class NewsItem(BaseModel):
    """News entry; produced by an external channel and only validated here."""

    model_config = ConfigDict(extra="allow")

    id: str = ""
    title: str = ""
    date: str = ""
    type: str = ""
    summary: str = ""
    body: str = ""
    thumb: str = ""


class MapEntry(BaseModel):
    id: str
    title: str
    description: str = ""
    type: str = "placeholder"
    url: str = ""


class EventsDocument(BaseModel):
    items: List[Event] = []


class LinksDocument(BaseModel):
    items: List[Link] = []


class GalleryDocument(BaseModel):
    items: List[GalleryItem] = []


class MapsDocument(BaseModel):
    items: List[MapEntry] = []
