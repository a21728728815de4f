"""Default rate limit command: parsing and packing into one stored value."""

from __future__ import annotations

import re

_COMMAND_RE = re.compile(
    r"设置默认限速为每[\t\n\f\r ]*([0-9]+)[\t\n\f\r ]*(分钟|秒)[\t\n\f\r ]*([0-9]+)[\t\n\f\r ]*次触发"
)
_LIMIT = 65536


def parse_limit_command(text: str) -> tuple[int, int] | None:
    """Parse a limit command into ``(interval_seconds, burst)``.

    Returns None when the text is not such a command and raises ValueError
    when the interval or the burst is out of range.
    """
    found = _COMMAND_RE.fullmatch(text)
    if found is None:
        return None
    amount, unit, burst_text = found.groups()
    interval = int(amount)
    if unit == "分钟":
        interval *= 60
    if not 0 < interval < _LIMIT:
        raise ValueError("interval too big")
    burst = int(burst_text)
    if not 0 < burst < _LIMIT:
        raise ValueError("burst too big")
    return interval, burst


def pack_limit(interval: int, burst: int) -> int:
    """Pack interval into the low 16 bits and burst into the next 16."""
    return (interval & 0xFFFF) | ((burst << 16) & 0xFFFF0000)


def unpack_limit(value: int) -> tuple[int, int]:
    """Split a packed value back into ``(interval_seconds, burst)``."""
    return value & 0xFFFF, (value >> 16) & 0xFFFF