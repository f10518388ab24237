"""Fallible value parsing.

Every helper returns `None` instead of raising, so callers can turn a failed
parse into their own default at the boundary.
"""

from __future__ import annotations

from typing import Optional


def is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def try_parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    text = value
    # int() also accepts "1_000" and non-ASCII digits; only plain base-10 is valid here.
    digits = text[1:] if text[:1] in {"+", "-"} else text
    if not digits or not digits.isascii() or not digits.isdigit():
        return None
    return int(text)


def try_parse_literal_bool(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    normalized = value.lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    return None
