"""ATRI persona: time-dependent greeting replies and random picks."""

from __future__ import annotations

import random
from collections.abc import Sequence

RESOURCE_URL = "https://gitcode.net/u011570312/zbpdata/-/raw/main/Atri/"

_SLEEP_TALK = (
    "zzzz......", "zzzzzzzz......", "zzz...好涩哦..zzz....",
    "别...不要..zzz..那..zzz..", "嘻嘻..zzz..呐~..zzzz..", "...zzz....哧溜哧溜....",
)
_NOON = (
    "午安w", "午觉要好好睡哦，ATRI会陪伴在你身旁的w",
    "嗯哼哼~睡吧，就像平常一样安眠吧~o(≧▽≦)o", "睡你午觉去！哼唧！！",
)
_MORNING_EARLY = (
    "啊......早上好...(哈欠)", "唔......吧唧...早上...哈啊啊~~~\n早上好......",
    "早上好......", "早上好呜......呼啊啊~~~~",
    "啊......早上好。\n昨晚也很激情呢！", "吧唧吧唧......怎么了...已经早上了么...",
    "早上好！", "......看起来像是傍晚，其实已经早上了吗？", "早上好......欸~~~脸好近呢",
)
_MORNING_LATE = (
    "哼！这个点还早啥，昨晚干啥去了！？", "熬夜了对吧熬夜了对吧熬夜了对吧？？？！",
    "是不是熬夜是不是熬夜是不是熬夜？！",
)
_MORNING_EVENING = ("早个啥？哼唧！我都准备洗洗睡了！", "不是...你看看几点了，哼！", "晚上好哇")
_NIGHT_MORNING = (
    "你可猝死算了吧！", "？啊这", "亲，这边建议赶快去睡觉呢~~~",
    "不可忍不可忍不可忍！！为何这还不猝死！！",
)
_NIGHT_AFTERNOON = (
    "难不成？？晚上不想睡觉？？现在休息", "就......挺离谱的...现在睡觉",
    "现在还是白天哦，睡觉还太早了",
)
_NIGHT_EVENING = (
    "嗯哼哼~睡吧，就像平常一样安眠吧~o(≧▽≦)o", "......(打瞌睡)",
    "呼...呼...已经睡着了哦~...呼......", "......我、我会在这守着你的，请务必好好睡着",
)

PERFORMANCE_REPLIES = (
    "当然，我是高性能的嘛~！", "小事一桩，我是高性能的嘛",
    "怎么样？还是我比较高性能吧？", "哼哼！我果然是高性能的呢！",
    "因为我是高性能的嘛！嗯哼！", "因为我是高性能的呢！",
    "哎呀~，我可真是太高性能了", "正是，因为我是高性能的",
    "是的。我是高性能的嘛♪", "毕竟我可是高性能的！",
    "嘿嘿，我的高性能发挥出来啦♪", "我果然是很高性能的机器人吧！",
    "是吧！谁叫我这么高性能呢！哼哼！", "交给我吧，有高性能的我陪着呢",
    "呣......我的高性能，毫无遗憾地施展出来了......",
)
COMFORT_REPLIES = (
    "当然，我是高性能的嘛~！", "没事没事，因为我是高性能的嘛！嗯哼！",
    "没事的，因为我是高性能的呢！", "正是，因为我是高性能的",
    "是的。我是高性能的嘛♪", "毕竟我可是高性能的！",
    "那种程度的事不算什么的。\n别看我这样，我可是高性能的", "没问题的，我可是高性能的",
)
QUESTION_REPLIES = ("?", "？", "嗯？", "(。´・ω・)ん?", "ん？")


def _check_hour(hour: int) -> None:
    if not 0 <= hour < 24:
        raise ValueError(f"hour out of range: {hour}")


def is_awake(hour: int) -> bool:
    """ATRI sleeps from 1 to 6 o'clock and answers nothing then."""
    return not 1 <= hour < 6


def morning_replies(hour: int) -> tuple[str, ...]:
    """Replies to a good-morning at the given hour."""
    _check_hour(hour)
    if hour < 6:
        return _SLEEP_TALK
    if hour < 9:
        return _MORNING_EARLY
    if hour < 18:
        return _MORNING_LATE
    return _MORNING_EVENING


def noon_replies(hour: int) -> tuple[str, ...]:
    """Replies to a good-noon; empty outside noon time."""
    _check_hour(hour)
    return _NOON if 11 < hour < 15 else ()


def night_replies(hour: int) -> tuple[str, ...]:
    """Replies to a good-night at the given hour."""
    _check_hour(hour)
    if hour < 6:
        return _SLEEP_TALK
    if hour < 11:
        return _NIGHT_MORNING
    if hour < 15:
        return _NOON
    if hour < 19:
        return _NIGHT_AFTERNOON
    return _NIGHT_EVENING


def pick(options: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick one option at random."""
    if not options:
        raise ValueError("nothing to pick from")
    rng = rng or random.Random()
    return options[rng.randrange(len(options))]