"""Fixed on-disk layout of a content tree."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sitedata.core.config import settings


@dataclass(frozen=True)
class ContentLayout:
    """Source and output locations, all derived from one root."""

    root: Path

    @classmethod
    def from_root(cls, root: Optional[Path] = None) -> "ContentLayout":
        return cls(Path(root).resolve() if root else settings.root_dir)

    # Sources
    @property
    def events_dir(self) -> Path:
        return self.root / "content" / "events"

    @property
    def links_dir(self) -> Path:
        return self.root / "content" / "links"

    @property
    def news_dir(self) -> Path:
        return self.root / "content" / "news"

    @property
    def gallery_dir(self) -> Path:
        return self.root / "gallery"

    @property
    def gallery_meta_dir(self) -> Path:
        return self.gallery_dir / "meta"

    @property
    def gallery_images_dir(self) -> Path:
        return self.gallery_dir / "images"

    @property
    def gallery_legacy_index(self) -> Path:
        return self.gallery_dir / "index.json"

    # Outputs
    @property
    def data_dir(self) -> Path:
        return self.root / "data"

    @property
    def events_output(self) -> Path:
        return self.data_dir / "events" / "events.json"

    @property
    def links_output(self) -> Path:
        return self.data_dir / "links" / "links.json"

    @property
    def gallery_output(self) -> Path:
        return self.data_dir / "gallery" / "gallery.json"

    @property
    def maps_output(self) -> Path:
        return self.data_dir / "maps" / "maps.json"

    def relative(self, path: Path) -> str:
        """Path relative to the root, POSIX style, for reports."""
        try:
            return Path(path).relative_to(self.root).as_posix()
        except ValueError:
            return Path(path).as_posix()
