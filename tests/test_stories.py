import pytest

from zbplugins.stories import abstract_translate, cp_story, parse_cp_names

PINYIN = {"你": "ni", "好": "hao", "吗": "ma", "马": "ma"}
EMOJI = {"nihao": "👋", "ma": "🐴"}


def _translate(text):
    return abstract_translate(text, lambda c: PINYIN.get(c, ""), lambda p: EMOJI.get(p, ""))


def test_parse_cp_names():
    assert parse_cp_names("大老师 雪乃") == ("大老师", "雪乃")
    assert parse_cp_names("a b c") == ("a", "b")


@pytest.mark.parametrize("args", ["", "只有一个"])
def test_parse_cp_names_needs_two(args):
    with pytest.raises(ValueError, match="空格"):
        parse_cp_names(args)


def test_cp_story_tags():
    assert cp_story("<攻>爱<受>", "X", "Y", "甲", "乙") == "甲爱乙"


def test_cp_story_stored_names_become_first():
    assert cp_story("X牵着Y", "X", "Y", "甲", "乙") == "甲牵着甲"


def test_translate_pair_then_single():
    assert _translate("你好吗") == "👋🐴"


def test_translate_keeps_unknown():
    assert _translate("我") == "我"
    assert _translate("") == ""


def test_translate_pair_preferred_over_singles():
    calls = []

    def emoji_of(p):
        calls.append(p)
        return EMOJI.get(p, "")

    result = abstract_translate("你好", lambda c: PINYIN.get(c, ""), emoji_of)
    assert result == "👋"
    assert calls == ["nihao"]