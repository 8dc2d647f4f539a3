from __future__ import annotations

import re

# Leading integer prefix, so "100000.0" reads as 100000 and "1abc" as 1.
_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")


def parse_int(value: object) -> int | None:
    """Read the leading integer of a path/query value; ``None`` when absent or there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _INT_PREFIX_RE.match(str(value))
    if match is None:
        return None
    return int(match.group(1))


def parse_flag(value: str | None) -> bool | None:
    """``"true"`` is True, any other supplied value is False, absent is None."""
    if value is None:
        return None
    return value.strip().lower() == "true"


def clean_optional(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = value.strip()
    return cleaned or None
