"""Daily fortune card layout: background choice and vertical text placement."""

from __future__ import annotations

BACKGROUNDS: tuple[str, ...] = (
    "车万", "DC4", "爱因斯坦", "星空列车", "樱云之恋", "富婆妹", "李清歌",
    "公主连结", "原神", "明日方舟", "碧蓝航线", "碧蓝幻想", "战双", "阴阳师",
    "赛马娘", "东方归言录", "奇异恩典", "夏日口袋", "ASoul",
)
DEFAULT_BACKGROUND = BACKGROUNDS[0]

COLUMN_HEIGHT = 9
GLYPH_PADDING = 10
TEXT_X = 115.0
TEXT_Y = 320.0

_INDEX = {name: i for i, name in enumerate(BACKGROUNDS)}


def offset(total: int, now: int, distance: float) -> float:
    """Offset of the ``now``-th slot (1-based) among ``total`` slots."""
    if total % 2 == 0:
        return (float(now - total // 2) - 1) * distance
    return (float(now - total // 2) - 1.5) * distance


def rows_num(total: int, div: int) -> int:
    """Number of groups of ``div`` needed to hold ``total`` items."""
    rows, rest = divmod(total, div)
    return rows + 1 if rest else rows


def layout(text: str, char_width: float, char_height: float) -> list[tuple[str, float, float]]:
    """Place the characters of ``text`` in vertical columns, right to left.

    ``char_width`` and ``char_height`` are the measured glyph size; padding is
    added here. Returns ``(char, x, y)`` for every character in order.
    """
    tw = char_width + GLYPH_PADDING
    th = char_height + GLYPH_PADDING
    length = len(text)
    columns = rows_num(length, COLUMN_HEIGHT)
    placed: list[tuple[str, float, float]] = []
    if columns == 2:
        div = rows_num(length, 2)
        for i, char in enumerate(text):
            column = rows_num(i + 1, div)
            in_column = min(length - (column - 1) * div, div)
            row = i % div + 1
            x = -offset(columns, column, tw) + TEXT_X
            if column == 1:
                y = offset(COLUMN_HEIGHT, row, th) + TEXT_Y
            else:
                y = offset(COLUMN_HEIGHT, row + (COLUMN_HEIGHT - in_column), th) + TEXT_Y
            placed.append((char, x, y))
        return placed
    for i, char in enumerate(text):
        column = rows_num(i + 1, COLUMN_HEIGHT)
        in_column = min(length - (column - 1) * COLUMN_HEIGHT, COLUMN_HEIGHT)
        row = i % COLUMN_HEIGHT + 1
        x = -offset(columns, column, tw) + TEXT_X
        y = offset(in_column, row, th) + TEXT_Y
        placed.append((char, x, y))
    return placed


def background_index(name: str) -> int:
    """Return the index of a background set, raising ValueError if unknown."""
    try:
        return _INDEX[name]
    except KeyError:
        raise ValueError(f"no such background: {name!r}") from None