"""Couple short stories and "abstract speech" emoji translation."""

from __future__ import annotations

from collections.abc import Callable

GONG_TAG = "<攻>"
SHOU_TAG = "<受>"


def parse_cp_names(args: str) -> tuple[str, str]:
    """Split the two names given after the command, separated by a space."""
    params = args.split(" ")
    if len(params) < 2:
        raise ValueError("请用空格分开两个人名")
    return params[0], params[1]


def cp_story(story: str, gong_name: str, shou_name: str, gong: str, shou: str) -> str:
    """Fill a story template with two names.

    ``gong_name`` and ``shou_name`` are the names used in the stored story;
    both are replaced by ``gong``, as the stored stories expect.
    """
    text = story.replace(GONG_TAG, gong)
    text = text.replace(SHOU_TAG, shou)
    text = text.replace(gong_name, gong)
    return text.replace(shou_name, gong)


def abstract_translate(
    text: str,
    pinyin_of: Callable[[str], str],
    emoji_of: Callable[[str], str],
) -> str:
    """Replace characters by emoji that sound alike, preferring two-character matches.

    ``pinyin_of`` maps a character to its pronunciation ('' if unknown) and
    ``emoji_of`` maps a pronunciation to an emoji ('' if none).
    """
    out: list[str] = []
    i = 0
    while i < len(text):
        if i + 1 < len(text):
            pair = emoji_of(pinyin_of(text[i]) + pinyin_of(text[i + 1]))
            if pair:
                out.append(pair)
                i += 2
                continue
        single = emoji_of(pinyin_of(text[i]))
        out.append(single or text[i])
        i += 1
    return "".join(out)