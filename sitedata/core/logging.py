"""Loguru setup for the content tools, with optional Slack alerts for CI failures.

Diagnostics go to stderr so stdout stays free for reports. ERROR records are
also posted to ``SLACK_WEBHOOK_URL`` when it is set; bind ``details=[...]`` on
the record to append affected files to the alert.
"""

import logging
import sys
from typing import Any, Dict, List

import httpx
from loguru import logger

from sitedata.core.config import settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {extra[name]}:{function}:{line} | {message}"
LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
LEVEL_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}

# Lines of ``details`` included in one Slack alert
ALERT_DETAIL_LIMIT = 10

_configured = False


class InterceptHandler(logging.Handler):
    """Redirect stdlib logs to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_name == "emit":
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def format_alert(record: Dict[str, Any]) -> Dict[str, str]:
    """Slack payload for one log record."""
    extra = record["extra"]
    lines: List[str] = [
        f"[{record['level'].name}] {settings.ENV} {extra.get('name', 'sitedata')}: {record['message']}"
    ]
    details = [str(d) for d in extra.get("details") or []]
    lines.extend(f"- {d}" for d in details[:ALERT_DETAIL_LIMIT])
    if len(details) > ALERT_DETAIL_LIMIT:
        lines.append(f"- ...and {len(details) - ALERT_DETAIL_LIMIT} more")
    return {"text": "\n".join(lines)}


def _slack_sink(message: Any) -> None:
    if not settings.SLACK_WEBHOOK_URL:
        return
    try:
        httpx.post(settings.SLACK_WEBHOOK_URL, json=format_alert(message.record), timeout=5.0)
    except httpx.HTTPError as exc:
        # Logging here would re-enter this sink
        print(f"Slack alert not delivered: {exc}", file=sys.stderr)


def normalize_level(raw: str | None) -> str:
    level = (raw or "INFO").strip().upper()
    level = LEVEL_ALIASES.get(level, level)
    return level if level in LEVELS else "INFO"


def configure_logging() -> None:
    global _configured
    if _configured:
        return
    _configured = True

    level = normalize_level(settings.effective_log_level)

    logger.remove()
    logger.configure(extra={"name": "sitedata"})
    logger.add(sys.stderr, level=level, format=LOG_FORMAT, backtrace=False, diagnose=False)

    # Opt-in only: a default log file inside the site root would show up as drift
    if settings.LOG_FILE:
        settings.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            settings.LOG_FILE,
            level=level,
            format=LOG_FORMAT,
            rotation="10 MB",
            retention="14 days",
            backtrace=False,
            diagnose=False,
        )

    if settings.SLACK_WEBHOOK_URL:
        # Synchronous: the CLI exits right after logging a failure
        logger.add(_slack_sink, level="ERROR")

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def get_logger(name: str) -> logger.__class__:
    return logger.bind(name=name)


configure_logging()
