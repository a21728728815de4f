"""Genshin-style ten-pull gacha simulation."""

from __future__ import annotations

import random
import re
import threading
from dataclasses import dataclass, field

_MASK64 = (1 << 64) - 1
_NAME_RE = re.compile(r"_(.*)\.png")

STAR_ICONS = {3: "ThreeStar.png", 4: "FourStar.png", 5: "FiveStar.png"}
BACKGROUNDS = {3: "three_bg.jpg", 4: "four_bg.jpg", 5: "five_bg.jpg"}
BONUS_EVERY = 9


@dataclass
class Storage:
    """Per-group settings packed into one unsigned 64-bit value."""

    value: int = 0

    def is_five_star_mode(self) -> bool:
        return self.value & 1 == 1

    def set_mode(self, five_stars: bool) -> bool:
        """Switch the five-star pool on or off and return the new mode."""
        if five_stars:
            self.value = (self.value | 1) & _MASK64
        else:
            self.value = self.value & (_MASK64 ^ 1)
        return five_stars


@dataclass(frozen=True)
class Card:
    """One drawn item and the artwork used to show it."""

    path: str
    stars: int
    weapon: bool

    @property
    def background(self) -> str:
        return BACKGROUNDS[self.stars]

    @property
    def star_icon(self) -> str:
        return STAR_ICONS[self.stars]

    @property
    def element_icon(self) -> str:
        start = self.path.rfind("/") + 1
        return self.path[start:self.path.find("_")] + ".png"


@dataclass(frozen=True)
class GachaResult:
    """Cards in display order, the announcement text and whether to announce."""

    cards: list[Card]
    text: str
    lucky: bool


def card_name(path: str) -> str:
    """Extract the display name from a file name like ``火_胡桃.png``."""
    found = _NAME_RE.search(path)
    if found is None:
        raise ValueError(f"not a card file name: {path!r}")
    return found.group(1)


def reply_text(names: list[str], kind: int, previous: str) -> str:
    """Announce five-star paths; kind 1 is characters, 2 is weapons."""
    if kind == 1:
        head = "★五星角色★\n"
    elif kind == 2 and previous:
        head = "\n★五星武器★\n"
    else:
        head = "★五星武器★\n"
    return head + "".join(card_name(n) + " * " for n in names)


@dataclass
class GachaPool:
    """The item files to draw from and the running pull counter."""

    five: list[str] = field(default_factory=list)
    five_weapons: list[str] = field(default_factory=list)
    four: list[str] = field(default_factory=list)
    four_weapons: list[str] = field(default_factory=list)
    three_weapons: list[str] = field(default_factory=list)
    total: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def draw(
        self,
        nums: int = 10,
        storage: Storage | None = None,
        rng: random.Random | None = None,
    ) -> GachaResult:
        """Draw ``nums`` items; raises ValueError if a needed pool is empty."""
        storage = storage or Storage()
        rng = rng or random.Random()
        fives: list[str] = []
        fours: list[str] = []
        five_arms: list[str] = []
        four_arms: list[str] = []
        three_arms: list[str] = []

        def pick(pool: list[str], out: list[str]) -> None:
            out.append(pool[rng.randrange(len(pool))])

        def any_five() -> None:
            if rng.randrange(2) == 0:
                pick(self.five, fives)
            else:
                pick(self.five_weapons, five_arms)

        def any_four() -> None:
            if rng.randrange(2) == 0:
                pick(self.four, fours)
            else:
                pick(self.four_weapons, four_arms)

        with self._lock:
            bonus = self.total % BONUS_EVERY == 0
        if bonus:
            any_five()
            nums -= 1

        if storage.is_five_star_mode():
            for _ in range(nums):
                any_five()
        else:
            for _ in range(nums):
                roll = rng.randrange(1000)
                if roll <= 800:
                    pick(self.three_weapons, three_arms)
                elif roll <= 885:
                    pick(self.four, fours)
                elif roll <= 970:
                    pick(self.four_weapons, four_arms)
                elif roll <= 985:
                    pick(self.five, fives)
                else:
                    pick(self.five_weapons, five_arms)
            if not fours and not four_arms and three_arms:
                three_arms.pop()
                any_four()
            with self._lock:
                self.total += 1

        text = ""
        if fives:
            text += reply_text(fives, 1, text)
        if five_arms:
            text += reply_text(five_arms, 2, text)

        cards = (
            [Card(p, 5, False) for p in fives]
            + [Card(p, 4, False) for p in fours]
            + [Card(p, 5, True) for p in five_arms]
            + [Card(p, 4, True) for p in four_arms]
            + [Card(p, 3, True) for p in three_arms]
        )
        return GachaResult(cards=cards, text=text, lucky=bool(fives or five_arms))