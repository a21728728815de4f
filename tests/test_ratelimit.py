import pytest

from zbplugins.ratelimit import pack_limit, parse_limit_command, unpack_limit


def test_parse_seconds():
    assert parse_limit_command("设置默认限速为每10秒3次触发") == (10, 3)


def test_parse_minutes_with_spaces():
    assert parse_limit_command("设置默认限速为每 1 分钟 5 次触发") == (60, 5)


def test_not_a_command():
    assert parse_limit_command("设置默认限速为每10小时3次触发") is None
    assert parse_limit_command("hello") is None


@pytest.mark.parametrize(
    "text",
    ["设置默认限速为每0秒3次触发", "设置默认限速为每65536秒3次触发", "设置默认限速为每1093分钟3次触发"],
)
def test_interval_out_of_range(text):
    with pytest.raises(ValueError, match="interval"):
        parse_limit_command(text)


@pytest.mark.parametrize("text", ["设置默认限速为每10秒0次触发", "设置默认限速为每10秒65536次触发"])
def test_burst_out_of_range(text):
    with pytest.raises(ValueError, match="burst"):
        parse_limit_command(text)


def test_largest_values_accepted():
    assert parse_limit_command("设置默认限速为每65535秒65535次触发") == (65535, 65535)


@pytest.mark.parametrize("pair", [(1, 1), (60, 3), (65535, 65535), (300, 8)])
def test_pack_round_trip(pair):
    assert unpack_limit(pack_limit(*pair)) == pair


def test_zero_means_unset():
    assert unpack_limit(0) == (0, 0)
    assert pack_limit(0, 0) == 0


def test_pack_masks_overflow():
    assert unpack_limit(pack_limit(65536 + 7, 65536 + 9)) == (7, 9)