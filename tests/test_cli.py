import json

import pytest

from zbplugins.cli import (
    BotConfig,
    WSClient,
    banner,
    build_config,
    load_config,
    main,
    parse_super_users,
    save_config,
)


def test_parse_super_users_skips_invalid():
    assert parse_super_users(["123", "abc", "-5", "1.5", "+7"]) == [123, -5, 7]


def test_parse_super_users_rejects_out_of_range():
    assert parse_super_users(["9223372036854775808", "9223372036854775807"]) == [
        9223372036854775807
    ]


def test_banner_contains_version():
    assert "1.5.0-beta4" in banner()


def test_build_config_defaults():
    config = build_config([])
    assert config.nickname == ["椛椛", "小莉"]
    assert config.command_prefix == "/"
    assert config.super_users == []
    assert config.ws == [WSClient(url="ws://127.0.0.1:6700", access_token="")]


def test_build_config_flags():
    config = build_config(
        ["-u", "ws://localhost:1", "-t", "token", "-n", "bot", "-p", "#", "111", "x"]
    )
    assert config.nickname == ["bot", "小莉"]
    assert config.command_prefix == "#"
    assert config.super_users == [111]
    assert config.ws == [WSClient(url="ws://localhost:1", access_token="token")]


def test_to_dict_uses_wire_keys():
    data = BotConfig(["a"], "/", [1], [WSClient("ws://localhost:1", "token")]).to_dict()
    assert data["zero"]["nickname"] == ["a"]
    assert data["zero"]["super_users"] == [1]
    assert data["ws"] == [{"Url": "ws://localhost:1", "AccessToken": "token"}]


def test_dict_round_trip_keeps_extra_keys():
    data = {
        "zero": {"nickname": ["a"], "command_prefix": "!", "super_users": [2], "ring_len": 4096},
        "ws": [{"Url": "ws://localhost:2", "AccessToken": ""}],
    }
    assert BotConfig.from_dict(data).to_dict() == data


def test_from_dict_missing_fields():
    config = BotConfig.from_dict({})
    assert config.nickname == [] and config.ws == [] and config.command_prefix == ""


def test_save_and_load_round_trip(tmp_path):
    path = tmp_path / "cfg.json"
    config = build_config(["-n", "bot", "42"])
    save_config(config, path)
    assert load_config(path) == config


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "none.json")


def test_build_config_from_file(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(
        json.dumps({"zero": {"nickname": ["z"]}, "ws": [{"Url": "ws://localhost:3"}]}),
        encoding="utf-8",
    )
    config = build_config(["-c", str(path), "99"])
    assert config.nickname == ["z"]
    assert config.super_users == []
    assert config.ws[0].url == "ws://localhost:3"


def test_main_saves_config(tmp_path):
    path = tmp_path / "out.json"
    assert main(["-s", str(path), "7"]) == 0
    assert load_config(path).super_users == [7]


def test_main_help(capsys):
    assert main(["-h"]) == 0
    out = capsys.readouterr().out
    assert "Usage:" in out
    assert banner() in out


def test_main_runs_with_defaults():
    assert main([]) == 0