"""Gallery image reference resolution.

Several authoring conventions are accepted side by side:

- ``https://...``           external image, used as-is
- ``images/foo.jpg``        file in ``gallery/images/``
- ``gallery/images/foo.jpg`` file in ``gallery/images/``
- ``gallery/...``           any path under ``gallery/``, from the root
- ``foo.jpg``               bare filename, assumed in ``gallery/images/``
- anything else             path relative to the root

Prefixes overlap, so rule order matters.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel

from sitedata.core.layout import ContentLayout

URL_PREFIX_RE = re.compile(r"^https?://", re.IGNORECASE)
IMAGES_PREFIX = "images/"
GALLERY_IMAGES_PREFIX = "gallery/images/"
GALLERY_PREFIX = "gallery/"


class ResolvedImage(BaseModel):
    kind: Literal["url", "file"]
    value: str

    model_config = {"frozen": True}

    @property
    def path(self) -> Optional[Path]:
        return Path(self.value) if self.kind == "file" else None


class ImageResolver:
    """Maps an image reference to an external URL or a file on disk."""

    def __init__(self, layout: ContentLayout):
        self.layout = layout

    def resolve(self, ref: object) -> Optional[ResolvedImage]:
        v = str(ref or "").strip()
        if not v:
            return None

        if URL_PREFIX_RE.match(v):
            return ResolvedImage(kind="url", value=v)
        if v.startswith(IMAGES_PREFIX):
            return self._file(self.layout.gallery_images_dir / v[len(IMAGES_PREFIX):])
        if v.startswith(GALLERY_IMAGES_PREFIX):
            return self._file(self.layout.gallery_images_dir / v[len(GALLERY_IMAGES_PREFIX):])
        if v.startswith(GALLERY_PREFIX):
            return self._file(self.layout.root / v)
        if "/" not in v and "\\" not in v:
            return self._file(self.layout.gallery_images_dir / v)
        return self._file(self.layout.root / v)

    @staticmethod
    def _file(path: Path) -> ResolvedImage:
        return ResolvedImage(kind="file", value=str(path))


def public_image_path(ref: object) -> str:
    """Site-relative image path as written to the built gallery document."""
    image = str(ref or "").strip()
    if image.startswith(IMAGES_PREFIX):
        return f"gallery/{image}"
    return image
