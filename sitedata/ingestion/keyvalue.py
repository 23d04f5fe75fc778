"""Lenient parser for "Label: value" text records."""

from __future__ import annotations

import re
from typing import Dict, Optional

LINE_SPLIT_RE = re.compile(r"\r?\n")
LABEL_LINE_RE = re.compile(r"^\s*([A-Za-z][A-Za-z\s\-]*)\s*:\s*(.*?)\s*$")
WHITESPACE_RE = re.compile(r"\s+")


def normalize_label(label: str) -> str:
    """``" Submitted  By "`` -> ``"submitted_by"``."""
    return WHITESPACE_RE.sub("_", label.strip().lower())


def parse_key_value(text: Optional[str]) -> Dict[str, str]:
    """Parse a key-value text record.

    A labelled line starts (or, for a repeated label, extends) a field. Other
    non-blank lines are continuation lines of the most recent field and are
    dropped when no field has started yet. Never raises; content rules are
    applied by the validator.
    """
    out: Dict[str, str] = {}
    current: Optional[str] = None

    def push(key: str, value: str) -> None:
        if key in out:
            out[key] += f"\n{value}"
        else:
            out[key] = value

    for line in LINE_SPLIT_RE.split(text or ""):
        m = LABEL_LINE_RE.match(line)
        if m:
            current = normalize_label(m.group(1))
            push(current, m.group(2).strip())
        elif current and line.strip():
            push(current, line.strip())
    return out
