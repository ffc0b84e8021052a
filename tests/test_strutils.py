import pytest

from fastchess.strutils import (
    contains,
    ends_with,
    find_element,
    join,
    split_string,
    starts_with,
)


def test_starts_with():
    assert starts_with("-engine", "-")
    assert not starts_with("-engine", "")
    assert not starts_with("-engine", "/-")
    assert not starts_with("-engine", "e")


def test_contains_string():
    assert contains("-engine", "-")
    assert contains("-engine", "e")
    assert contains("info string depth 10", "depth")
    assert not contains("info string depth 10", "nodes")


def test_contains_list():
    assert contains(["-engine", "cmd=x"], "cmd=x")
    assert not contains(["-engine", "cmd=x"], "cmd")


def test_ends_with():
    assert ends_with("game.pgn", ".pgn")
    assert not ends_with("pgn", "game.pgn")
    assert ends_with("abc", "")


def test_split_string_drops_empty_segments():
    assert split_string("a,,b,", ",") == ["a", "b"]
    assert split_string("", ",") == []


def test_find_element_types():
    args = ["-concurrency", "4", "-name", "foo", "-alpha", "0.5"]
    assert find_element(args, "-concurrency", int) == 4
    assert find_element(args, "-name") == "foo"
    assert find_element(args, "-alpha", float) == 0.5


def test_find_element_missing():
    assert find_element(["-a", "1"], "-b", int) is None


def test_find_element_at_end_raises():
    with pytest.raises(IndexError):
        find_element(["-a"], "-a")


def test_join_appends_trailing_delimiter():
    assert join(["a", "b"], ",") == "a,b,"
    assert join([], ",") == ""