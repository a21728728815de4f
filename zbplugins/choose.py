"""Pick one of several options for the undecided."""

from __future__ import annotations

import random

SEPARATOR = "还是"


def choose(args: str, nickname: str, rng: random.Random | None = None) -> str:
    """Split ``args`` on the separator, pick one and return the reply text."""
    rng = rng or random.Random()
    options = args.split(SEPARATOR)
    listed = "\n".join(f"{n}, {option}" for n, option in enumerate(options, start=1))
    result = options[rng.randrange(len(options))]
    return f"> {nickname}\n你的选项有:\n{listed}\n你最终会选: {result}"