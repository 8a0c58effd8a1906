import pytest

from raymaze.strcompare import strlcat, strlcpy, strncmp, strnstr

LOREM = "lorem ipsum dolor sit amet"


@pytest.mark.parametrize(
    "first, second, n, sign",
    [
        ("salut", "salut", 5, 0),
        ("test", "testss", 7, -1),
        ("testss", "test", 7, 1),
        ("test", "tEst", 4, 1),
        ("", "test", 4, -1),
        ("test", "", 4, 1),
        ("abcdefghij", "abcdefgxyz", 3, 0),
        ("abcdefgh", "abcdwxyz", 4, 0),
        ("zyxbcdefgh", "abcdwxyz", 0, 0),
        ("abcdefgh", "", 0, 0),
        ("test\x80", "test\0", 6, 1),
    ],
)
def test_strncmp_sign(first, second, n, sign):
    result = strncmp(first, second, n)
    assert (result > 0) - (result < 0) == sign


def test_strncmp_difference_is_byte_difference():
    assert strncmp(b"abc", b"abd", 3) == ord("c") - ord("d")


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_empty_needle():
    assert strnstr(LOREM, "", 3) == 0


def test_strnstr_found_within_length():
    position = strnstr(LOREM, "ipsum", len(LOREM))
    assert position is not None
    assert LOREM[position:position + len("ipsum")] == "ipsum"
    assert "ipsum" not in LOREM[:position + len("ipsum") - 1]


def test_strnstr_needle_cut_by_length():
    assert strnstr(LOREM, "ipsum", 10) is None


def test_strnstr_missing():
    assert strnstr(LOREM, "zzz", len(LOREM)) is None


def test_strnstr_negative_length():
    with pytest.raises(ValueError):
        strnstr(LOREM, "a", -1)


def test_strlcat_fits():
    result, total = strlcat("rrrrrr", "lorem", 15)
    assert result == "rrrrrr" + "lorem"
    assert total == len("rrrrrr") + len("lorem")


def test_strlcat_empty_source():
    assert strlcat("rrrrrr", "", 15) == ("rrrrrr", len("rrrrrr"))


def test_strlcat_truncates():
    result, total = strlcat("rrrrrr", LOREM, 15)
    assert result == ("rrrrrr" + LOREM)[:14]
    assert total == len("rrrrrr") + len(LOREM)


def test_strlcat_size_zero():
    result, total = strlcat("rrrrrr", LOREM, 0)
    assert result == "rrrrrr"
    assert total == len(LOREM)


def test_strlcat_size_smaller_than_dest():
    for size in (1, 5, 6):
        result, total = strlcat("rrrrrr", LOREM, size)
        assert result == "rrrrrr"
        assert total == size + len(LOREM)


def test_strlcat_dest_fills_buffer():
    dest = "r" * 14
    result, total = strlcat(dest, LOREM, 15)
    assert result == dest
    assert total == len(dest) + len(LOREM)


def test_strlcpy_truncates():
    assert strlcpy("hello", 3) == ("hello"[:2], len("hello"))


def test_strlcpy_size_zero():
    assert strlcpy("hello", 0) == ("", len("hello"))


def test_strlcpy_whole():
    assert strlcpy(LOREM, 100) == (LOREM, len(LOREM))


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("x", -1)