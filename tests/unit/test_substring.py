import pytest

from utf8text.substring import UNBOUNDED, character_substring, codepoint_substring

SAMPLE = "Français普通话\U0001F0A1\U0001F0A2".encode("utf-8")


def _u(text: str) -> bytes:
    return text.encode("utf-8")


@pytest.mark.parametrize(
    ("pos", "count", "expected"),
    [
        (0, 5, "Franç"),
        (10, 2, "话\U0001F0A1"),
        (10, 0, ""),
        (12, 100, "\U0001F0A2"),
        (8, UNBOUNDED, "普通话\U0001F0A1\U0001F0A2"),
        (13, 1, ""),
        (50, UNBOUNDED, ""),
    ],
)
def test_character_substring(pos: int, count, expected: str) -> None:
    assert character_substring(SAMPLE, pos, count) == _u(expected)


def test_character_substring_count_defaults_to_unbounded() -> None:
    assert character_substring(SAMPLE, 12) == character_substring(SAMPLE, 12, UNBOUNDED)
    assert character_substring(SAMPLE) == SAMPLE


def test_combining_mark_attaches_to_base() -> None:
    data = _u("Gru\u0308ße")
    assert character_substring(data, 0, 3) == _u("Gru\u0308")
    assert character_substring(data, 3, 1) == _u("ß")


def test_stacked_combining_marks_stay_together() -> None:
    data = _u("Gru\u0308\u0301ße")
    assert character_substring(data, 0, 3) == _u("Gru\u0308\u0301")
    assert character_substring(data, 2, 1) == _u("u\u0308\u0301")


def test_leading_combining_mark_is_its_own_character() -> None:
    data = _u("\u0301Gru\u0308ße")
    assert character_substring(data, 0, 3) == _u("\u0301Gr")
    assert character_substring(data, 0, 1) == _u("\u0301")


@pytest.mark.parametrize(
    ("pos", "count", "expected"),
    [
        (0, 3, "Gru"),
        (3, 1, "\u0308"),
        (2, 2, "u\u0308"),
        (4, UNBOUNDED, "ße"),
        (6, 1, ""),
    ],
)
def test_codepoint_substring_may_split_characters(pos: int, count, expected: str) -> None:
    assert codepoint_substring(_u("Gru\u0308ße"), pos, count) == _u(expected)


def test_codepoint_substring_multibyte() -> None:
    assert codepoint_substring(SAMPLE, 8, 3) == _u("普通话")
    assert codepoint_substring(SAMPLE, 11) == _u("\U0001F0A1\U0001F0A2")
    assert codepoint_substring(SAMPLE, 13, 1) == b""
    assert codepoint_substring(SAMPLE, 0, 0) == b""


def test_invalid_bytes_are_not_counted() -> None:
    data = b"a\x80b\xffc"
    assert codepoint_substring(data, 1, 1) == b"b"
    assert codepoint_substring(b"a\xff\xfeb", 0, 1) == b"a"
    assert codepoint_substring(b"a\xff\xfeb", 0, 2) == b"a\xff\xfeb"
    assert codepoint_substring(b"ab\xff", 0, 5) == b"ab\xff"
    assert codepoint_substring(data, 2) == b"c"
    assert character_substring(data, 2) == b"c"
    assert character_substring(b"\x80abc", 0, 2) == b"ab"


@pytest.mark.parametrize("extract", [character_substring, codepoint_substring])
def test_negative_arguments_rejected(extract) -> None:
    with pytest.raises(ValueError):
        extract(SAMPLE, -1)
    with pytest.raises(ValueError):
        extract(SAMPLE, 0, -2)


@pytest.mark.parametrize("extract", [character_substring, codepoint_substring])
def test_empty_input(extract) -> None:
    assert extract(b"") == b""
    assert extract(b"", 0, 5) == b""
