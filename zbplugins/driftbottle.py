"""Drift bottles: messages thrown into named channels and picked up at random."""

from __future__ import annotations

import re
import sqlite3
import threading
from dataclasses import dataclass, field

DEFAULT_CHANNEL = "global"

_POLY_ISO_REFLECTED = 0xD800000000000000
_MASK64 = (1 << 64) - 1
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _make_table() -> tuple[int, ...]:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            crc = (crc >> 1) ^ _POLY_ISO_REFLECTED if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_TABLE = _make_table()

_THROW_RE = re.compile(r"(在群[0-9]+)?丢漂流瓶(到频道[0-9A-Za-z_]+)?[\t\n\f\r ]+(.*)")
_FETCH_RE = re.compile(r"(从频道[0-9A-Za-z_]+)?捡漂流瓶")


class NoSuchChannel(LookupError):
    """The channel has not been created."""


class BottleNotFound(LookupError):
    """No bottle in the channel can be picked up from this place."""


def crc64_iso(data: bytes) -> int:
    """CRC-64 with the ISO polynomial, reflected, inverted in and out."""
    crc = _MASK64
    for byte in data:
        crc = _TABLE[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ _MASK64


def bottle_id(qq: int, grp: int, name: str, msg: str) -> int:
    """Identify a bottle by the signed CRC-64 of its contents."""
    crc = crc64_iso(f"{qq}_{grp}_{name}_{msg}".encode("utf-8"))
    return crc - (1 << 64) if crc >= 1 << 63 else crc


@dataclass
class Bottle:
    """A thrown message; ``grp`` limits where it can be picked up (0: anywhere)."""

    qq: int
    grp: int
    name: str
    msg: str
    id: int = field(default=0)

    def __post_init__(self) -> None:
        if not self.id:
            self.id = bottle_id(self.qq, self.grp, self.name, self.msg)


def parse_throw(text: str) -> tuple[int | None, str, str] | None:
    """Parse a throw command into ``(group or None, channel, message)``.

    Returns None when the text is not a throw command and raises ValueError
    when the group number or the message is invalid.
    """
    found = _THROW_RE.fullmatch(text)
    if found is None:
        return None
    group_part, channel_part, msg = found.groups()
    grp: int | None = None
    if group_part:
        grp = int(group_part[len("在群"):])
        if not _INT64_MIN <= grp <= _INT64_MAX:
            raise ValueError("群号非法!")
    channel = channel_part[len("到频道"):] if channel_part else DEFAULT_CHANNEL
    if not msg:
        raise ValueError("消息为空!")
    return grp, channel, msg


def parse_fetch(text: str) -> str | None:
    """Return the channel named by a fetch command, or None if it is not one."""
    found = _FETCH_RE.fullmatch(text)
    if found is None:
        return None
    part = found.group(1)
    return part[len("从频道"):] if part else DEFAULT_CHANNEL


def _quote(channel: str) -> str:
    return '"' + channel.replace('"', '""') + '"'


class Sea:
    """SQLite store holding one table of bottles per channel."""

    def __init__(self, path: str = ":memory:") -> None:
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.RLock()
        self.create_channel(DEFAULT_CHANNEL)

    def __enter__(self) -> "Sea":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def _require(self, channel: str) -> str:
        row = self._conn.execute(
            "SELECT 1 FROM sqlite_master WHERE type = 'table' AND name = ?", (channel,)
        ).fetchone()
        if row is None:
            raise NoSuchChannel(channel)
        return _quote(channel)

    def create_channel(self, channel: str) -> None:
        """Create a channel; creating an existing one does nothing."""
        if not channel:
            raise ValueError("频道名为空!")
        with self._lock, self._conn:
            self._conn.execute(
                f"CREATE TABLE IF NOT EXISTS {_quote(channel)} ("
                "id INTEGER PRIMARY KEY, qq INTEGER, grp INTEGER, name TEXT, msg TEXT)"
            )

    def throw(self, bottle: Bottle, channel: str = DEFAULT_CHANNEL) -> None:
        """Put a bottle into a channel."""
        with self._lock, self._conn:
            table = self._require(channel)
            self._conn.execute(
                f"INSERT OR REPLACE INTO {table} (id, qq, grp, name, msg) VALUES (?, ?, ?, ?, ?)",
                (bottle.id, bottle.qq, bottle.grp, bottle.name, bottle.msg),
            )

    def fetch(self, channel: str, grp: int) -> Bottle:
        """Pick a random bottle that may be found at ``grp``."""
        if grp == 0:
            raise ValueError("找不到对象!")
        with self._lock:
            table = self._require(channel)
            row = self._conn.execute(
                f"SELECT id, qq, grp, name, msg FROM {table} "
                "WHERE grp = 0 OR grp = ? ORDER BY RANDOM() LIMIT 1",
                (grp,),
            ).fetchone()
        if row is None:
            raise BottleNotFound(channel)
        bid, qq, bgrp, name, msg = row
        return Bottle(qq=qq, grp=bgrp, name=name, msg=msg, id=bid)

    def destroy(self, bottle: Bottle, channel: str = DEFAULT_CHANNEL) -> None:
        """Remove a bottle from a channel."""
        with self._lock, self._conn:
            table = self._require(channel)
            self._conn.execute(f"DELETE FROM {table} WHERE id = ?", (bottle.id,))

    def count(self, channel: str = DEFAULT_CHANNEL) -> int:
        """Number of bottles floating in a channel."""
        with self._lock:
            table = self._require(channel)
            return self._conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]

    def close(self) -> None:
        self._conn.close()