import pytest

from zbplugins.replymode import (
    DEFAULT_REPLY_MODE,
    FALLBACK_VOICE,
    REPLY_MODES,
    TTS_VOICES,
    ModeStore,
    TTSModes,
    session_id,
)


def test_session_id():
    assert session_id(123, 456) == 123
    assert session_id(0, 456) == -456


def test_default_reply_mode():
    assert ModeStore().get_reply_mode(1, 2) == DEFAULT_REPLY_MODE


def test_set_reply_mode_per_session():
    store = ModeStore()
    store.set_reply_mode(1, 2, REPLY_MODES[1])
    assert store.get_reply_mode(1, 99) == REPLY_MODES[1]
    assert store.get_reply_mode(5, 2) == DEFAULT_REPLY_MODE
    assert store.get_reply_mode(0, 2) == DEFAULT_REPLY_MODE


def test_unknown_reply_mode():
    store = ModeStore()
    with pytest.raises(ValueError, match="no such mode"):
        store.set_reply_mode(1, 2, "nope")
    assert store.data == {}


def test_out_of_range_reply_mode_falls_back():
    store = ModeStore({7: 42})
    assert store.get_reply_mode(7, 0) == DEFAULT_REPLY_MODE


def test_tts_default_and_set():
    modes = TTSModes()
    store = ModeStore()
    assert modes.get(store, 0, 10) == TTS_VOICES[0]
    modes.set(store, 0, 10, TTS_VOICES[3])
    assert modes.get(store, 0, 10) == TTS_VOICES[3]
    assert store.data[-10] == 3


def test_tts_unknown_voice():
    modes = TTSModes()
    with pytest.raises(ValueError):
        modes.set(ModeStore(), 1, 1, "nope")
    with pytest.raises(ValueError):
        modes.set_default("nope")


def test_tts_set_default_swaps():
    modes = TTSModes()
    modes.set_default(TTS_VOICES[4])
    names = modes.names()
    assert names[0] == TTS_VOICES[4]
    assert names[4] == TTS_VOICES[0]
    assert sorted(names) == sorted(TTS_VOICES)
    assert modes.get(ModeStore(), 1, 1) == TTS_VOICES[4]


def test_tts_names_is_a_copy():
    modes = TTSModes()
    names = modes.names()
    names.clear()
    assert modes.names() == list(TTS_VOICES)
    assert TTS_VOICES[2] in modes


def test_tts_out_of_range_falls_back():
    assert TTSModes().get(ModeStore({1: 100}), 1, 0) == FALLBACK_VOICE