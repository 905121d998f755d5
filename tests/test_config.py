from datetime import timedelta

import pytest

from telekit.layout.config import Config

LAYOUT_CONFIG = {
    "str": "string",
    "num": 123,
    "strs": ["abc", "def"],
    "nums": [123, 456],
    "obj": {"dur": "10m"},
    "arr": [{"dur": "10m"}, {"dur": "10m"}],
}


@pytest.fixture
def config():
    return Config(LAYOUT_CONFIG)


def test_scalars(config):
    assert config.string("str") == "string"
    assert config.int("num") == 123
    assert config.float("num") == 123.0


def test_lists(config):
    assert config.strings("strs") == ["abc", "def"]
    assert config.ints("nums") == [123, 456]
    assert config.floats("nums") == [123.0, 456.0]


def test_nested_and_durations(config):
    obj = config.get("obj")
    assert obj is not None
    assert obj.duration("dur") == timedelta(minutes=10)
    assert config.duration("obj.dur") == obj.duration("dur")


def test_slice_of_objects(config):
    arr = config.slice("arr")
    assert len(arr) == 2
    for item in arr:
        assert item.duration("dur") == timedelta(minutes=10)


def test_get_returns_none_for_non_mapping(config):
    assert config.get("str") is None
    assert config.get("missing") is None


def test_slice_returns_none_for_non_lists_of_mappings(config):
    assert config.slice("obj") is None
    assert config.slice("nums") is None
    assert config.slice("missing") is None


def test_keys_are_case_insensitive():
    cfg = Config({"Name": "bot", "Outer": {"Inner": 5}})
    assert cfg.string("NAME") == "bot"
    assert cfg.int("outer.inner") == 5
    assert cfg.get("OUTER").int("INNER") == 5


def test_missing_keys_give_zero_values(config):
    assert config.string("missing") == ""
    assert config.int("missing") == 0
    assert config.float("missing") == 0.0
    assert config.bool("missing") is False
    assert config.duration("missing") == timedelta(0)
    assert config.strings("missing") == []
    assert config.ints("missing") == []


def test_casts_between_types():
    cfg = Config({"f": 3.9, "s": "0x10", "z": "7.0", "bad": "abc", "flag": True})
    assert cfg.int("f") == 3
    assert cfg.int("s") == 16
    assert cfg.int("z") == 7
    assert cfg.int("bad") == 0
    assert cfg.int("flag") == 1
    assert cfg.string("flag") == "true"
    assert cfg.string("f") == "3.9"


def test_string_of_integral_float():
    assert Config({"v": 2.0}).string("v") == "2"


@pytest.mark.parametrize(
    "raw, expected",
    [("t", True), ("TRUE", True), ("1", True), ("false", False), ("yes", False), (2, True), (0, False)],
)
def test_bool(raw, expected):
    assert Config({"v": raw}).bool("v") is expected


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("-2s", timedelta(seconds=-2)),
        ("1.5s", timedelta(seconds=1.5)),
        ("250ms", timedelta(milliseconds=250)),
        (5000, timedelta(microseconds=5)),
        ("5000", timedelta(microseconds=5)),
        ("abc", timedelta(0)),
        ("10x", timedelta(0)),
    ],
)
def test_duration(raw, expected):
    assert Config({"v": raw}).duration("v") == expected


def test_strings_from_single_string_splits_on_whitespace():
    assert Config({"v": "a b  c"}).strings("v") == ["a", "b", "c"]


def test_ints_with_uncastable_element_is_empty():
    assert Config({"v": [1, "x", 3]}).ints("v") == []


def test_floats_from_strings():
    assert Config({"v": ["1.5", "2"]}).floats("v") == [1.5, 2.0]