"""Gallery image path resolution tests"""

import pytest

from sitedata.core.images import ImageResolver, public_image_path


class TestImageResolver:
    """Rule order across historical conventions"""

    @pytest.fixture
    def resolver(self, tree):
        return ImageResolver(tree.layout)

    def test_empty_reference(self, resolver):
        assert resolver.resolve("") is None
        assert resolver.resolve("   ") is None
        assert resolver.resolve(None) is None

    def test_external_url(self, resolver):
        ref = resolver.resolve("HTTPS://img.example.com/p.jpg")
        assert ref.kind == "url"
        assert ref.value == "HTTPS://img.example.com/p.jpg"
        assert ref.path is None

    def test_images_prefix(self, resolver, tree):
        ref = resolver.resolve("images/pic.jpg")
        assert ref.kind == "file"
        assert ref.path == tree.layout.gallery_images_dir / "pic.jpg"

    def test_gallery_images_prefix(self, resolver, tree):
        ref = resolver.resolve("gallery/images/sub/pic.jpg")
        assert ref.path == tree.layout.gallery_images_dir / "sub" / "pic.jpg"

    def test_gallery_prefix(self, resolver, tree):
        ref = resolver.resolve("gallery/uploads/pic.jpg")
        assert ref.path == tree.root / "gallery" / "uploads" / "pic.jpg"

    def test_bare_filename(self, resolver, tree):
        ref = resolver.resolve("pic.jpg")
        assert ref.path == tree.layout.gallery_images_dir / "pic.jpg"

    def test_other_relative_path(self, resolver, tree):
        ref = resolver.resolve("assets/img/pic.jpg")
        assert ref.path == tree.root / "assets" / "img" / "pic.jpg"


class TestPublicImagePath:
    """Rewrite applied to built gallery output"""

    def test_images_prefix_rewritten(self):
        assert public_image_path("images/pic.jpg") == "gallery/images/pic.jpg"

    @pytest.mark.parametrize(
        "ref", ["gallery/images/pic.jpg", "https://e.com/p.jpg", "pic.jpg", ""]
    )
    def test_other_references_unchanged(self, ref):
        assert public_image_path(ref) == ref
