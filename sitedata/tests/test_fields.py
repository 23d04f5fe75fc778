"""Field validator and alias chain tests"""

import pytest

from sitedata.core.fields import (
    EVENT_ALIASES,
    GALLERY_ALIASES,
    LINK_ALIASES,
    collation_key,
    event_sort_key,
    filename_date_prefix,
    is_http_url_optional,
    is_http_url_required,
    is_iso_date,
    is_time_optional,
    link_sort_key,
    non_empty,
    pick,
    strip_extension,
)


class TestDateValidation:
    """YYYY-MM-DD plus real calendar dates"""

    @pytest.mark.parametrize("value", ["2024-02-29", "2023-12-31", " 2024-01-01 "])
    def test_valid_dates(self, value):
        assert is_iso_date(value) is True

    @pytest.mark.parametrize(
        "value", ["2023-02-29", "2024-13-01", "2021-02-30", "2024-1-01", "24-01-01", "", None, "2024/01/01"]
    )
    def test_invalid_dates(self, value):
        assert is_iso_date(value) is False

    def test_year_zero_rejected(self):
        """Calendar dates start at year 1"""
        assert is_iso_date("0000-01-01") is False
        assert is_iso_date("0001-01-01") is True


class TestTimeValidation:
    """Optional 24h HH:mm"""

    @pytest.mark.parametrize("value", ["", None, "00:00", "23:59", "09:05"])
    def test_valid_times(self, value):
        assert is_time_optional(value) is True

    @pytest.mark.parametrize("value", ["24:00", "12:60", "9:30", "09:5", "noon"])
    def test_invalid_times(self, value):
        assert is_time_optional(value) is False


class TestUrlValidation:
    """http(s) URLs, required and optional variants"""

    def test_required_rejects_empty(self):
        assert is_http_url_required("") is False
        assert is_http_url_required("   ") is False

    def test_optional_accepts_empty(self):
        assert is_http_url_optional("") is True

    @pytest.mark.parametrize("value", ["https://example.com", "HTTP://EXAMPLE.COM/a?b=c"])
    def test_http_urls(self, value):
        assert is_http_url_required(value) is True
        assert is_http_url_optional(value) is True

    @pytest.mark.parametrize("value", ["ftp://example.com", "example.com", "https://exa mple.com", "https://"])
    def test_non_http_urls(self, value):
        assert is_http_url_required(value) is False
        assert is_http_url_optional(value) is False


class TestHelpers:
    """Small shared helpers"""

    def test_non_empty(self):
        assert non_empty(" x ") is True
        assert non_empty("   ") is False
        assert non_empty(None) is False

    def test_filename_date_prefix(self):
        assert filename_date_prefix("2024-05-01-foray.txt") == "2024-05-01"
        assert filename_date_prefix("foray-2024-05-01.txt") == ""
        assert filename_date_prefix("2024-05-01.txt") == ""

    def test_strip_extension(self):
        assert strip_extension("a.TXT", ".txt") == "a"
        assert strip_extension("a.json", ".txt") == "a.json"

    def test_sort_keys(self):
        assert event_sort_key("2024-05-01", "18:00") == "2024-05-01T18:00"
        assert event_sort_key("", "") == "9999-12-31T00:00"
        assert link_sort_key("Clubs", "Mycology") == "Clubs::Mycology"

    def test_collation_key(self):
        words = ["Banana", "apple", "Apple", "banana", "10", "2"]
        assert sorted(words, key=collation_key) == ["10", "2", "apple", "Apple", "banana", "Banana"]


class TestAliasChains:
    """Legacy labels resolve in a fixed precedence order"""

    def test_event_alias_order(self):
        assert EVENT_ALIASES["title"] == ("title", "event")
        assert EVENT_ALIASES["date"] == ("date", "when", "on")
        assert EVENT_ALIASES["location"] == ("location", "where")
        assert EVENT_ALIASES["link"] == ("link", "url")
        assert EVENT_ALIASES["contact"] == ("contact", "submitted_by", "submittedby", "submitted")

    def test_link_alias_order(self):
        assert LINK_ALIASES["url"] == ("url", "link")

    def test_gallery_alias_order(self):
        assert GALLERY_ALIASES["title"] == ("title", "name", "caption")
        assert GALLERY_ALIASES["image"] == ("image", "image_filename", "src")
        assert GALLERY_ALIASES["credit"] == ("credit", "submitted_by", "submittedby")

    def test_pick_first_non_empty(self):
        fields = {"date": "", "when": "2024-01-02", "on": "2024-01-03"}
        assert pick(fields, EVENT_ALIASES["date"]) == "2024-01-02"

    def test_pick_default(self):
        assert pick({}, LINK_ALIASES["title"], "fallback") == "fallback"
        assert pick({}, LINK_ALIASES["title"]) == ""
