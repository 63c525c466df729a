import pytest

from safeurl.utils import (
    dirname_path,
    ensure_str,
    join_paths,
    normalize_path,
    remove_duplicate_slashes,
    truthy,
)


@pytest.mark.parametrize(
    "value,expected_value",
    [
        ["/", "/"],
        ["/a/b/c", "/a/b/c"],
        ["/a/b/c/", "/a/b/c/"],
        ["/a/./b/../c", "/a/c"],
        ["/a/b/../", "/a/"],
        ["/..", "/"],
        ["/../a", "/a"],
        ["//a//b", "/a/b"],
        ["a/../..", ".."],
        ["", "."],
    ],
)
def test_normalize_path(value, expected_value):
    assert normalize_path(value) == expected_value


@pytest.mark.parametrize(
    "segments,expected_value",
    [
        [["/this/is/a/path", "..", "../another", "path/"], "/this/is/another/path/"],
        [["/this/is/a/path", ".."], "/this/is/a"],
        [["/this/is/a", "../"], "/this/is/"],
        [["/this/is/", "our/new"], "/this/is/our/new"],
        [["/", ".."], "/"],
        [["/a", "/b"], "/a/b"],
        [["/a", "", "b"], "/a/b"],
        [["/a"], "/a"],
        [[], "."],
    ],
)
def test_join_paths(segments, expected_value):
    assert join_paths(*segments) == expected_value


@pytest.mark.parametrize(
    "value,expected_value",
    [
        ["/a/b/c", "/a/b"],
        ["/a/b/c/", "/a/b"],
        ["/a", "/"],
        ["/", "/"],
        ["//", "/"],
        ["a", "."],
        ["", "."],
    ],
)
def test_dirname_path(value, expected_value):
    assert dirname_path(value) == expected_value


def test_remove_duplicate_slashes():
    assert remove_duplicate_slashes("//a///b/c") == "/a/b/c"


@pytest.mark.parametrize(
    "value,expected_result", [("hello", "hello"), (b"hello", "hello")]
)
def test_ensure_str(value, expected_result):
    assert ensure_str(value) == expected_result


def test_ensure_str_throws_for_invalid_value():
    with pytest.raises(ValueError):
        ensure_str(True)  # type: ignore


@pytest.mark.parametrize(
    "value,expected_result",
    [("1", True), ("true", True), ("TRUE", True), ("0", False), ("no", False)],
)
def test_truthy(value, expected_result):
    assert truthy(value) is expected_result


def test_truthy_default():
    assert truthy("", True) is True
    assert truthy("") is False
