"""Parse Go-style duration strings such as ``2h``, ``90m`` or ``1h30m``."""

from __future__ import annotations

import re
from datetime import timedelta

_UNIT_SECONDS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")


def parse_duration(text: str) -> timedelta:
    """Parse a duration, raising ValueError if it is malformed.

    A bare ``0`` is accepted; any other value needs a unit on each component.
    """
    raw = text.strip()
    if not raw:
        raise ValueError("empty duration")

    sign = 1
    if raw[0] in "+-":
        if raw[0] == "-":
            sign = -1
        raw = raw[1:]
    if raw == "0":
        return timedelta(0)

    pos = 0
    total = 0.0
    for m in _COMPONENT.finditer(raw):
        if m.start() != pos:
            break
        total += float(m.group(1)) * _UNIT_SECONDS[m.group(2)]
        pos = m.end()
    if pos == 0 or pos != len(raw):
        raise ValueError(f"invalid duration {text!r}")
    return timedelta(seconds=sign * total)
