"""Small talk: name calls, poke reactions and a per-group air conditioner."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field

DEFAULT_TEMPERATURE = 26


def name_reply(nickname: str, rng: random.Random | None = None) -> str:
    """Reply to the bot being called by name."""
    rng = rng or random.Random()
    replies = (
        f"{nickname}在此，有何贵干~",
        "(っ●ω●)っ在~",
        f"这里是{nickname}(っ●ω●)っ",
        f"{nickname}不在呢~",
    )
    return replies[rng.randrange(len(replies))]


@dataclass
class AirConditioner:
    """Per-group imaginary air conditioner."""

    temperatures: dict[int, int] = field(default_factory=dict)
    switches: dict[int, bool] = field(default_factory=dict)

    def turn_on(self, group: int) -> str:
        self.switches[group] = True
        return "❄️哔~"

    def turn_off(self, group: int) -> str:
        self.switches[group] = False
        self.temperatures.pop(group, None)
        return "💤哔~"

    def set_temperature(self, group: int, value: int | str) -> str:
        """Set the temperature if the unit is on, then report."""
        self.temperatures.setdefault(group, DEFAULT_TEMPERATURE)
        if self.switches.get(group, False):
            try:
                self.temperatures[group] = int(value)
            except ValueError:
                self.temperatures[group] = 0
        return self.report(group)

    def report(self, group: int) -> str:
        temp = self.temperatures.setdefault(group, DEFAULT_TEMPERATURE)
        head = "❄️风速中" if self.switches.get(group, False) else "💤"
        return f"{head}\n群温度 {temp}℃"


@dataclass
class _Bucket:
    tokens: float
    last: float


class PokeGuard:
    """Token bucket per group deciding how the bot answers pokes."""

    def __init__(
        self,
        interval: float = 300.0,
        burst: int = 8,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.interval = interval
        self.burst = burst
        self._clock = clock
        self._buckets: dict[int, _Bucket] = {}

    def _acquire(self, group: int, n: int) -> bool:
        now = self._clock()
        bucket = self._buckets.get(group)
        if bucket is None:
            bucket = self._buckets[group] = _Bucket(float(self.burst), now)
        rate = self.burst / self.interval
        bucket.tokens = min(float(self.burst), bucket.tokens + (now - bucket.last) * rate)
        bucket.last = now
        if bucket.tokens >= n:
            bucket.tokens -= n
            return True
        return False

    def react(self, group: int, nickname: str) -> str | None:
        """Return the reply to a poke, or None when poked too often."""
        if self._acquire(group, 3):
            return f"请不要戳{nickname} >_<"
        if self._acquire(group, 1):
            return f"喂(#`O′) 戳{nickname}干嘛！"
        return None