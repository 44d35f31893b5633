"""Strict numeric literal helpers shared by config loading and normalization."""

import re

INTEGER_RE = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_int64(text: str) -> int | None:
    """Parse an optionally signed ASCII base-10 literal within the int64 range.

    Returns ``None`` for anything else (whitespace, ``_``, non-ASCII digits, overflow).
    """
    if not INTEGER_RE.fullmatch(text):
        return None
    value = int(text)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value
