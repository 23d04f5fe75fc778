"""Shared fixtures: a throwaway content tree per test."""

import json
from pathlib import Path

import pytest

from sitedata.core.layout import ContentLayout


class ContentTree:
    """Writes source files into a temporary site root."""

    def __init__(self, root: Path):
        self.layout = ContentLayout.from_root(root)
        self.root = self.layout.root

    def write(self, rel: str, text: str) -> Path:
        path = self.root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def event(self, name: str, text: str) -> Path:
        return self.write(f"content/events/{name}", text)

    def link(self, name: str, text: str) -> Path:
        return self.write(f"content/links/{name}", text)

    def news(self, name: str, obj) -> Path:
        return self.write(f"content/news/{name}", json.dumps(obj))

    def gallery_meta(self, name: str, obj) -> Path:
        return self.write(f"gallery/meta/{name}", json.dumps(obj))

    def image(self, rel: str) -> Path:
        return self.write(rel, "")

    def read_json(self, rel: str):
        return json.loads((self.root / rel).read_text(encoding="utf-8"))


@pytest.fixture
def tree(tmp_path):
    """Empty content tree with the standard source directories."""
    (tmp_path / "content" / "events").mkdir(parents=True)
    (tmp_path / "content" / "links").mkdir(parents=True)
    return ContentTree(tmp_path)
