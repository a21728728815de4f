"""Bilibili helpers: video summaries, medal ordering and a local vup store."""

from __future__ import annotations

import re
import sqlite3
import threading
from dataclasses import dataclass
from typing import Any, Iterable

from .emojimix import Segment

VIDEO_API = "https://api.bilibili.com/x/web-interface/view?"
CARD_API = "http://api.bilibili.com/x/web-interface/card?"
ORIGIN = "https://www.bilibili.com/video/"
COOKIE_KEY = "bilbili_cookie"

_VIDEO_URL = re.compile(r"https://www.bilibili.com/video/([0-9a-zA-Z]+)")


@dataclass(frozen=True)
class Medal:
    """A fan medal worn for one streamer."""

    mid: int
    uname: str
    medal_name: str = ""
    level: int = 0
    color_start: int = 0
    color_end: int = 0
    color_border: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Medal":
        """Build a medal from one entry of the medal wall API list."""
        info = data.get("medal_info") or {}
        return cls(
            mid=int(info.get("target_id", 0)),
            uname=str(data.get("target_name", "")),
            medal_name=str(info.get("medal_name", "")),
            level=int(info.get("level", 0)),
            color_start=int(info.get("medal_color_start", 0)),
            color_end=int(info.get("medal_color_end", 0)),
            color_border=int(info.get("medal_color_border", 0)),
        )


@dataclass(frozen=True)
class Vup:
    """A virtual streamer known to the store."""

    mid: int
    uname: str
    roomid: int = 0


class VupStore:
    """SQLite store of known vups and configuration values."""

    def __init__(self, path: str = ":memory:") -> None:
        self._conn = sqlite3.connect(str(path), check_same_thread=False)
        self._lock = threading.Lock()
        with self._lock, self._conn:
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS vup ("
                "mid INTEGER PRIMARY KEY, uname TEXT, roomid INTEGER)"
            )
            self._conn.execute(
                "CREATE TABLE IF NOT EXISTS config (key TEXT PRIMARY KEY, value TEXT)"
            )

    def __enter__(self) -> "VupStore":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def insert_vup(self, mid: int, uname: str, roomid: int) -> None:
        """Add a vup unless one with the same mid is already stored."""
        with self._lock, self._conn:
            self._conn.execute(
                "INSERT OR IGNORE INTO vup (mid, uname, roomid) VALUES (?, ?, ?)",
                (mid, uname, roomid),
            )

    def filter_vups(self, ids: Iterable[int]) -> list[Vup]:
        """Return the stored vups whose mid is among ``ids``."""
        wanted = list(dict.fromkeys(ids))
        if not wanted:
            return []
        found: list[Vup] = []
        with self._lock:
            for start in range(0, len(wanted), 500):
                chunk = wanted[start:start + 500]
                marks = ",".join("?" * len(chunk))
                rows = self._conn.execute(
                    f"SELECT mid, uname, roomid FROM vup WHERE mid IN ({marks}) ORDER BY mid",
                    chunk,
                )
                found.extend(Vup(mid, uname or "", roomid or 0) for mid, uname, roomid in rows)
        return found

    def set_cookie(self, cookie: str) -> None:
        """Store the cookie sent with authenticated API requests."""
        with self._lock, self._conn:
            self._conn.execute(
                "INSERT INTO config (key, value) VALUES (?, ?) "
                "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (COOKIE_KEY, cookie),
            )

    def get_cookie(self) -> str:
        """Return the stored cookie, or an empty string if none is set."""
        with self._lock:
            row = self._conn.execute(
                "SELECT value FROM config WHERE key = ?", (COOKIE_KEY,)
            ).fetchone()
        return row[0] if row and row[0] is not None else ""

    def close(self) -> None:
        self._conn.close()


def row(count: int) -> str:
    """Format a count, switching to units of ten thousand from 10000 on."""
    if abs(count) >= 10000:
        return f"{count / 10000:.2f}万"
    return str(count)


def cut_url(url: str) -> str:
    """Extract the video id from a video page URL, or return ''."""
    found = _VIDEO_URL.search(url)
    return found.group(1) if found else ""


def video_query(video_id: str) -> str:
    """Return the video API URL for an ``av`` or ``BV`` id."""
    if len(video_id) < 2:
        raise ValueError(f"video id too short: {video_id!r}")
    prefix = video_id[:2]
    if prefix == "av":
        vid = "aid=" + video_id[2:]
    elif prefix == "BV":
        vid = "bvid=" + video_id
    else:
        vid = ""
    return VIDEO_API + vid


def int_to_rgb(value: int) -> tuple[int, int, int]:
    """Split a packed 0xRRGGBB colour into its components."""
    value &= (1 << 64) - 1
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


def sort_medals(medals: Iterable[Medal]) -> list[Medal]:
    """Return medals ordered by level, highest first."""
    return sorted(medals, key=lambda m: m.level, reverse=True)


def merge_vups(vups: Iterable[Vup], medals: Iterable[Medal]) -> list[Vup]:
    """Put medal holders first, then the other vups without duplicates."""
    front = [Vup(m.mid, m.uname) for m in medals]
    medal_mids = {v.mid for v in front}
    return front + [v for v in vups if v.mid not in medal_mids]


def _text(*parts: object) -> Segment:
    return Segment("text", {"text": "".join(str(p) for p in parts)})


def format_video(data: dict[str, Any], fans: int | None = None) -> list[Segment]:
    """Build the summary message for a video API ``data`` object.

    ``fans`` is the uploader's follower count, needed unless the video is a
    cooperation, in which case each staff member is listed instead.
    """
    stat = data.get("stat") or {}
    segments = [_text("标题: ", data.get("title", ""), "\n")]
    if (data.get("rights") or {}).get("is_cooperation") == 1:
        for staff in data.get("staff") or []:
            segments.append(
                _text(
                    staff.get("title", ""), ": ", staff.get("name", ""),
                    ", 粉丝: ", row(int(staff.get("follower", 0))), "\n",
                )
            )
    else:
        if fans is None:
            raise ValueError("uploader follower count is required")
        owner = data.get("owner") or {}
        segments.append(_text("UP主: ", owner.get("name", ""), ", 粉丝: ", row(fans), "\n"))
    segments.append(
        _text("播放: ", row(int(stat.get("view", 0))), ", 弹幕: ", row(int(stat.get("danmaku", 0))), "\n")
    )
    segments.append(Segment("image", {"file": str(data.get("pic", ""))}))
    segments.append(
        _text(
            "\n点赞: ", row(int(stat.get("like", 0))),
            ", 投币: ", row(int(stat.get("coin", 0))),
            "\n收藏: ", row(int(stat.get("favorite", 0))),
            ", 分享: ", row(int(stat.get("share", 0))),
            "\n", ORIGIN, data.get("bvid", ""),
        )
    )
    return segments