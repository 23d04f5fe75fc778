"""Logging setup and Slack alert tests"""

from types import SimpleNamespace

import httpx
import pytest

from sitedata.core import logging as site_logging
from sitedata.core.config import settings


def make_record(message="Content validation failed", name="validate_entrypoint", details=None):
    extra = {"name": name}
    if details is not None:
        extra["details"] = details
    return {"extra": extra, "level": SimpleNamespace(name="ERROR"), "message": message}


@pytest.fixture
def webhook(monkeypatch):
    """Configured webhook plus a recorder in place of httpx.post"""
    calls = []

    def fake_post(url, json=None, timeout=None):
        calls.append({"url": url, "json": json, "timeout": timeout})

    monkeypatch.setattr(settings, "SLACK_WEBHOOK_URL", "https://hooks.example.com/T0/B0")
    monkeypatch.setattr(site_logging.httpx, "post", fake_post)
    return calls


class TestNormalizeLevel:
    @pytest.mark.parametrize(
        "raw, expected",
        [("debug", "DEBUG"), (" warn ", "WARNING"), ("fatal", "CRITICAL"), ("nope", "INFO"), (None, "INFO")],
    )
    def test_levels(self, raw, expected):
        assert site_logging.normalize_level(raw) == expected


class TestFormatAlert:
    def test_message_only(self, monkeypatch):
        monkeypatch.setattr(settings, "ENV", "prod")
        payload = site_logging.format_alert(make_record())
        assert payload == {"text": "[ERROR] prod validate_entrypoint: Content validation failed"}

    def test_details_are_capped(self, monkeypatch):
        monkeypatch.setattr(site_logging, "ALERT_DETAIL_LIMIT", 2)
        payload = site_logging.format_alert(make_record(details=["a.txt", "b.txt", "c.txt"]))

        lines = payload["text"].splitlines()
        assert lines[1:] == ["- a.txt", "- b.txt", "- ...and 1 more"]


class TestSlackSink:
    def test_posts_alert(self, webhook):
        site_logging._slack_sink(SimpleNamespace(record=make_record(details=["data/events/events.json"])))

        assert len(webhook) == 1
        assert webhook[0]["url"] == "https://hooks.example.com/T0/B0"
        assert webhook[0]["json"]["text"].endswith("- data/events/events.json")
        assert webhook[0]["timeout"] == 5.0

    def test_no_webhook_no_post(self, webhook, monkeypatch):
        monkeypatch.setattr(settings, "SLACK_WEBHOOK_URL", None)
        site_logging._slack_sink(SimpleNamespace(record=make_record()))
        assert webhook == []

    def test_delivery_failure_does_not_raise(self, monkeypatch, capsys):
        def failing_post(url, json=None, timeout=None):
            raise httpx.ConnectError("connection refused")

        monkeypatch.setattr(settings, "SLACK_WEBHOOK_URL", "https://hooks.example.com/T0/B0")
        monkeypatch.setattr(site_logging.httpx, "post", failing_post)

        site_logging._slack_sink(SimpleNamespace(record=make_record()))
        assert "Slack alert not delivered: connection refused" in capsys.readouterr().err
