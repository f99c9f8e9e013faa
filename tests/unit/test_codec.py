from utf8text.codec import (
    decode_all,
    decode_text,
    encode_all,
    encode_text,
    is_conformant_utf8,
    iter_codepoints,
)
from utf8text.scanner import is_valid_utf8


def test_reencode_round_trip() -> None:
    data = "Français普通话\U0001F0A1\U0001F0A2".encode("utf-8")
    codepoints = decode_all(data)
    assert len(codepoints) == 13
    assert encode_all(codepoints) == data


def test_decode_drops_invalid_bytes() -> None:
    assert decode_all(b"a\x80b\xe6\x99") == [0x61, 0x62]


def test_iter_codepoints_is_lazy_and_restartable() -> None:
    data = "ab".encode("utf-8")
    iterator = iter_codepoints(data)
    assert next(iterator) == 0x61
    assert list(iter_codepoints(data)) == [0x61, 0x62]


def test_encode_length_thresholds() -> None:
    assert encode_all([0x7F]) == b"\x7f"
    assert encode_all([0x80]) == b"\xc2\x80"
    assert encode_all([0x7FF]) == b"\xdf\xbf"
    assert encode_all([0x800]) == b"\xe0\xa0\x80"
    assert encode_all([0xFFFF]) == b"\xef\xbf\xbf"
    assert encode_all([0x10000]) == b"\xf0\x90\x80\x80"
    assert encode_all([0x10FFFF]) == b"\xf4\x8f\xbf\xbf"


def test_encode_drops_out_of_range_values() -> None:
    assert encode_all([-1, 0x41, 0x110000]) == b"A"


def test_encode_accepts_any_iterable() -> None:
    assert encode_all(iter([0xE7])) == "ç".encode("utf-8")
    assert encode_all([]) == b""


def test_decode_text_replaces_values_beyond_unicode() -> None:
    assert decode_text(b"a\xf7\xbf\xbf\xbfb") == "a\ufffdb"
    assert decode_text("Français".encode("utf-8")) == "Français"


def test_encode_text() -> None:
    assert encode_text("héllo普") == "héllo普".encode("utf-8")


def test_strict_check_rejects_what_structural_check_accepts() -> None:
    for data in (b"\xc0\xaf", b"\xed\xa0\x80", b"\xf7\xbf\xbf\xbf"):
        assert is_valid_utf8(data)
        assert not is_conformant_utf8(data)
    assert is_conformant_utf8("普通话".encode("utf-8"))
