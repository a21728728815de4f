import pytest

from zbplugins.emojimix import EMOJIS, QQ_FACES, Segment, face_to_emoji, match, mix_urls


def text(s):
    return Segment("text", {"text": s})


def face(i):
    return Segment("face", {"id": i})


def test_text_segment_single_char():
    assert face_to_emoji(text("😄")) == 128516


def test_text_segment_two_chars_is_zero():
    assert face_to_emoji(text("😄😀")) == 0


def test_face_segment_maps_through_table():
    assert face_to_emoji(face("66")) == 10084


@pytest.mark.parametrize("seg", [face("3"), face("x"), face(""), Segment("image", {"id": "66"})])
def test_unknown_segments_are_zero(seg):
    assert face_to_emoji(seg) == 0


def test_match_two_segments():
    assert match([text("😄"), face("66")], "") == (128516, 10084)


def test_match_two_segments_no_fallback_to_raw():
    assert match([text("a"), text("😄")], "😄😀") is None


def test_match_raw_message():
    assert match([], "😄😀") == (128516, 128512)


@pytest.mark.parametrize("raw", ["😄", "😄😀😁", "a😄"])
def test_match_raw_rejects(raw):
    assert match([], raw) is None


def test_every_qq_face_is_mixable():
    for face_id in QQ_FACES:
        assert match([face(str(face_id)), text("😄")], "") is not None
        assert face_to_emoji(face(str(face_id))) in EMOJIS


def test_mix_urls_pinned():
    u1, u2 = mix_urls(128516, 128512)
    assert u1 == (
        "https://www.gstatic.com/android/keyboard/emojikitchen/"
        "20201001/u1f604/u1f604_u1f600.png"
    )
    assert u2.endswith("/u1f600/u1f600_u1f604.png")


def test_mix_urls_use_own_date():
    u1, u2 = mix_urls(128558, 128516)
    assert "/20210218/" in u1
    assert "/20201001/" in u2


def test_mix_urls_unknown_raises():
    with pytest.raises(ValueError):
        mix_urls(ord("a"), 128516)