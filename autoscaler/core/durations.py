"""Go-style duration strings ("2s", "1m30s", "500ms") as used in cluster config maps and annotations."""

import re
from datetime import timedelta
from typing import Any

_UNIT_SECONDS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_duration(value: str) -> timedelta:
    """
    Parse a duration such as "60s", "1m30s" or "-1.5h". Raises ValueError on malformed input.
    A bare "0" is accepted; any other value needs a unit.
    """
    text = value.strip()
    if not text:
        raise ValueError("empty duration")
    sign = 1.0
    if text[0] in "+-":
        if text[0] == "-":
            sign = -1.0
        text = text[1:]
    if not text:
        raise ValueError(f"invalid duration: {value!r}")
    if text == "0":
        return timedelta(0)
    pos = 0
    total = 0.0
    while pos < len(text):
        match = _COMPONENT.match(text, pos)
        if match is None:
            raise ValueError(f"invalid duration: {value!r}")
        total += float(match.group(1)) * _UNIT_SECONDS[match.group(2)]
        pos = match.end()
    return timedelta(seconds=sign * total)


def coerce_duration(v: Any) -> Any:
    """pydantic before-validator: parse duration strings, leave ISO 8601 and numbers to pydantic."""
    if isinstance(v, str):
        try:
            return parse_duration(v)
        except ValueError:
            return v
    return v
