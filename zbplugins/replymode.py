"""Per-session choice of the AI reply engine and the text-to-speech voice."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

REPLY_MODES: tuple[str, ...] = ("青云客", "小爱")
DEFAULT_REPLY_MODE = REPLY_MODES[0]

TTS_VOICES: tuple[str, ...] = (
    "拟声鸟阿梓", "拟声鸟文静", "拟声鸟药水哥",
    "百度女声", "百度男声", "百度度逍遥", "百度度丫丫",
)
FALLBACK_VOICE = "拟声鸟阿梓"


def session_id(group_id: int, user_id: int) -> int:
    """Groups are keyed by their id, private chats by the negated user id."""
    return group_id if group_id != 0 else -user_id


@dataclass
class ModeStore:
    """Integer setting stored per session."""

    data: dict[int, int] = field(default_factory=dict)

    def get_reply_mode(self, group_id: int, user_id: int) -> str:
        index = self.data.get(session_id(group_id, user_id), 0)
        if 0 <= index < len(REPLY_MODES):
            return REPLY_MODES[index]
        return DEFAULT_REPLY_MODE

    def set_reply_mode(self, group_id: int, user_id: int, name: str) -> None:
        """Select a reply engine; raises ValueError for an unknown name."""
        try:
            index = REPLY_MODES.index(name)
        except ValueError:
            raise ValueError("no such mode") from None
        self.data[session_id(group_id, user_id)] = index


class TTSModes:
    """Ordered list of voices; position 0 is the default voice."""

    def __init__(self, voices: tuple[str, ...] | list[str] = TTS_VOICES) -> None:
        self._voices = list(voices)
        self._lock = threading.Lock()

    def names(self) -> list[str]:
        with self._lock:
            return list(self._voices)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._voices

    def _index(self, name: str) -> int:
        try:
            return self._voices.index(name)
        except ValueError:
            raise ValueError(f"no such voice: {name!r}") from None

    def get(self, store: ModeStore, group_id: int, user_id: int) -> str:
        """The voice chosen for a session, by its position in the list."""
        index = store.data.get(session_id(group_id, user_id), 0)
        with self._lock:
            if 0 <= index < len(self._voices):
                return self._voices[index]
        return FALLBACK_VOICE

    def set(self, store: ModeStore, group_id: int, user_id: int, name: str) -> None:
        """Choose a voice for a session; raises ValueError for an unknown one."""
        with self._lock:
            index = self._index(name)
        store.data[session_id(group_id, user_id)] = index

    def set_default(self, name: str) -> None:
        """Swap the named voice into the first position."""
        with self._lock:
            index = self._index(name)
            self._voices[0], self._voices[index] = self._voices[index], self._voices[0]