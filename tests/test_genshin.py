import random

import pytest

from zbplugins.genshin import (
    Card,
    GachaPool,
    Storage,
    card_name,
    reply_text,
)


def make_pool():
    return GachaPool(
        five=["five/火_胡桃.png", "five/雷_雷电将军.png"],
        five_weapons=["five2/剑_雾切之回光.png"],
        four=["four/水_行秋.png", "four/风_砂糖.png"],
        four_weapons=["four2/弓_西风猎弓.png"],
        three_weapons=["Three/剑_黎明神剑.png", "Three/弓_弹弓.png"],
    )


def order_rank(card):
    return {(5, False): 0, (4, False): 1, (5, True): 2, (4, True): 3, (3, True): 4}[
        (card.stars, card.weapon)
    ]


def test_storage_mode_toggle_keeps_other_bits():
    s = Storage(6)
    assert s.is_five_star_mode() is False
    assert s.set_mode(True) is True
    assert s.value == 6 | 1
    assert s.is_five_star_mode() is True
    assert s.set_mode(False) is False
    assert s.value == 6


def test_storage_high_bits_preserved():
    s = Storage((1 << 63) | 1)
    s.set_mode(False)
    assert s.value == 1 << 63


def test_card_name():
    assert card_name("five/火_胡桃.png") == "胡桃"


def test_card_name_invalid():
    with pytest.raises(ValueError):
        card_name("nothing.jpg")


def test_reply_text_headers():
    chars = reply_text(["five/火_胡桃.png"], 1, "")
    assert chars == "★五星角色★\n胡桃 * "
    assert reply_text(["five2/剑_雾切之回光.png"], 2, chars).startswith("\n★五星武器★\n")
    assert reply_text(["five2/剑_雾切之回光.png"], 2, "").startswith("★五星武器★\n")


def test_card_icons():
    card = Card("five/火_胡桃.png", 5, False)
    assert card.element_icon == "火.png"
    assert card.star_icon == "FiveStar.png"
    assert card.background == "five_bg.jpg"


@pytest.mark.parametrize("seed", range(10))
def test_normal_draw_invariants(seed):
    pool = make_pool()
    result = pool.draw(10, Storage(), random.Random(seed))
    assert len(result.cards) == 10
    ranks = [order_rank(c) for c in result.cards]
    assert ranks == sorted(ranks)
    assert any(c.stars == 5 for c in result.cards)  # first pull has the bonus
    assert any(c.stars == 4 for c in result.cards) or all(c.stars == 5 for c in result.cards)
    assert result.lucky is True
    assert result.text
    assert pool.total == 1


def test_five_star_mode_all_five():
    pool = make_pool()
    store = Storage()
    store.set_mode(True)
    result = pool.draw(10, store, random.Random(3))
    assert len(result.cards) == 10
    assert all(c.stars == 5 for c in result.cards)
    assert result.lucky is True
    assert pool.total == 0


def test_counter_advances_per_normal_draw():
    pool = make_pool()
    rng = random.Random(1)
    for _ in range(4):
        result = pool.draw(10, Storage(), rng)
        assert len(result.cards) == 10
    assert pool.total == 4


def test_text_lists_drawn_five_stars():
    pool = make_pool()
    store = Storage()
    store.set_mode(True)
    result = pool.draw(10, store, random.Random(5))
    for card in result.cards:
        assert card_name(card.path) in result.text


def test_empty_pool_raises():
    with pytest.raises(ValueError):
        GachaPool().draw(10, Storage(), random.Random(0))