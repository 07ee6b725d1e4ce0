import pytest

from noahkit import paths


@pytest.mark.parametrize(
    "path, expected",
    [
        ("C:\\dir\\file.txt", "file.txt"),
        ("a/b/c.tar.gz", "c.tar.gz"),
        ("plain", "plain"),
        ("mixed\\sep/last", "last"),
    ],
)
def test_name(path, expected):
    assert paths.name(path) == expected


def test_name_of_directory_is_empty():
    assert paths.name("dir\\") == ""


def test_ext_and_ext_all():
    assert paths.ext("C:\\x\\archive.tar.gz") == "gz"
    assert paths.ext_all("C:\\x\\archive.tar.gz") == "tar.gz"


def test_ext_ignores_dots_in_directories():
    assert paths.ext("some.dir\\file") == ""
    assert paths.ext_all("some.dir/file") == ""


def test_leading_dot_is_not_extension():
    assert paths.ext(".hidden") == ""
    assert paths.body(".hidden") == ".hidden"
    assert paths.body_all(".hidden") == ".hidden"
    assert paths.ext(".config.ini") == "ini"


def test_body_and_body_all():
    assert paths.body("dir/archive.tar.gz") == "archive"
    assert paths.body_all("dir/archive.tar.gz") == "archive.tar"


@pytest.mark.parametrize(
    "path", ["a\\b\\c.d.e", "x.y", "noext", "dir/sub/f.tar.bz2"]
)
def test_body_ext_roundtrip(path):
    base = paths.name(path)
    e = paths.ext(path)
    if e:
        assert paths.body_all(path) + "." + e == base
    else:
        assert paths.body_all(path) == base
    ea = paths.ext_all(path)
    if ea:
        assert paths.body(path) + "." + ea == base


@pytest.mark.parametrize("path", ["a/b/c.txt", "C:\\x\\y", "file", "d\\"])
def test_dir_only_plus_name_is_path(path):
    assert paths.dir_only(path) + paths.name(path) == path


def test_dir_only_without_separator():
    assert paths.dir_only("file.txt") == ""


def test_with_backslash_add_and_remove():
    assert paths.with_backslash("C:\\dir", True) == "C:\\dir" + "\\"
    assert paths.with_backslash("C:\\dir\\", True) == "C:\\dir\\"
    assert paths.with_backslash("C:\\dir/", False) == "C:\\dir"
    assert paths.with_backslash("C:\\dir", False) == "C:\\dir"


def test_with_backslash_short_strings_unchanged():
    assert paths.with_backslash("C", True) == "C"
    assert paths.with_backslash("", True) == ""


def test_with_backslash_roundtrip():
    original = "D:\\some\\folder"
    added = paths.with_backslash(original, True)
    assert paths.ends_with_separator(added)
    assert paths.with_backslash(added, False) == original


def test_ends_with_separator():
    assert paths.ends_with_separator("a\\")
    assert paths.ends_with_separator("a/")
    assert not paths.ends_with_separator("a")
    assert not paths.ends_with_separator("")


def test_is_in_same_dir():
    assert paths.is_in_same_dir("dir\\a.txt", "dir\\b.txt")
    assert paths.is_in_same_dir("a.txt", "b.txt")
    assert not paths.is_in_same_dir("one\\a.txt", "two\\a.txt")
    assert not paths.is_in_same_dir("a.txt", "a.txt\\sub")
    assert paths.is_in_same_dir("dir\\a", "dir\\abc")


def test_is_in_same_dir_is_symmetric():
    pairs = [("x\\a", "x\\b"), ("p/q", "r/q"), ("a", "a/b"), ("abc", "ab")]
    for first, second in pairs:
        assert paths.is_in_same_dir(first, second) == paths.is_in_same_dir(
            second, first
        )


def test_format_int_plain():
    assert paths.format_int(0) == "0"
    assert paths.format_int(-42) == "-42"


@pytest.mark.parametrize("number", [0, 7, 999, 1000, 1234567, -1234567, 10**9])
def test_format_int_commas_roundtrip(number):
    text = paths.format_int(number, True)
    assert int(text.replace(",", "")) == number
    groups = text.lstrip("-").split(",")
    assert all(len(g) == 3 for g in groups[1:])
    assert 1 <= len(groups[0]) <= 3


def test_format_int_commas_example():
    assert paths.format_int(1234567, True) == "1,234,567"


def test_remove_trailing_ws():
    assert paths.remove_trailing_ws("abc \t\n") == "abc"
    assert paths.remove_trailing_ws("  abc") == "  abc"
    assert paths.remove_trailing_ws("abc\r") == "abc\r"


def test_replace_to_slash():
    assert paths.replace_to_slash("a\\b\\c") == "a/b/c"
    assert "\\" not in paths.replace_to_slash("C:\\x\\y/z")