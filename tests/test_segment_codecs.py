import pytest

from qrpayload.binary.codecs.bitcursor import Cursor
from qrpayload.binary.codecs.numeric_codec import decode_numeric_segment
from qrpayload.binary.codecs.alphanumeric_codec import decode_alphanumeric_segment, ALPHANUMERIC_CHARS
from qrpayload.binary.codecs.byte_codec import decode_byte_segment
from qrpayload.binary.codecs.kanji_codec import decode_kanji_segment, kanji_unit_to_sjis
from qrpayload.binary.errors import DecodeError
from qrpayload.binary.writer import BitWriter
from qrpayload.config import DecoderConfig


def _cursor(w: BitWriter) -> Cursor:
    return Cursor(w.to_bytes())


def test_symbol_table():
    assert len(ALPHANUMERIC_CHARS) == 45
    assert ALPHANUMERIC_CHARS[10] == "A" and ALPHANUMERIC_CHARS[36] == " "
    assert ALPHANUMERIC_CHARS[-1] == ":"


def test_numeric_groups():
    cur = _cursor(BitWriter().put(123, 10).put(45, 7).put(6, 4))
    out = []
    decode_numeric_segment(cur, out, 3)
    decode_numeric_segment(cur, out, 2)
    decode_numeric_segment(cur, out, 1)
    assert "".join(out) == "123456"


def test_numeric_leading_zeros():
    cur = _cursor(BitWriter().put(7, 10).put(0, 4))
    out = []
    decode_numeric_segment(cur, out, 4)
    assert "".join(out) == "0070"


@pytest.mark.parametrize("value, width, count", [(1000, 10, 3), (1023, 10, 3), (100, 7, 2), (10, 4, 1)])
def test_numeric_out_of_range(value, width, count):
    cur = _cursor(BitWriter().put(value, width))
    with pytest.raises(DecodeError):
        decode_numeric_segment(cur, [], count)


def test_alphanumeric_pair_and_single():
    cur = _cursor(BitWriter().put(45 * 10 + 30, 11).put(0, 6))
    out = []
    decode_alphanumeric_segment(cur, out, 3)
    assert "".join(out) == "AU0"


def test_alphanumeric_value_past_table():
    cur = _cursor(BitWriter().put(63, 6))
    with pytest.raises(DecodeError):
        decode_alphanumeric_segment(cur, [], 1)


def test_byte_segment_latin1():
    cur = Cursor(b"Caf\xe9")
    out = []
    assert decode_byte_segment(cur, out, 4) == "ISO-8859-1"
    assert out == ["Café"]


def test_byte_segment_shift_jis():
    cur = Cursor(bytes([0x82, 0x60]))
    out = []
    assert decode_byte_segment(cur, out, 2) == "Shift_JIS"
    assert out == ["Ａ"]  # FULLWIDTH LATIN CAPITAL LETTER A


def test_byte_segment_forced_shift_jis():
    out = []
    enc = decode_byte_segment(Cursor(b"abc"), out, 3, DecoderConfig(assume_shift_jis=True))
    assert enc == "Shift_JIS"
    assert out == ["abc"]


def test_byte_segment_count_too_large_consumes_nothing():
    cur = Cursor(b"\x41")
    with pytest.raises(DecodeError, match="Count too large"):
        decode_byte_segment(cur, [], 2)
    assert cur.bits_remaining() == 8


def test_kanji_unit_mapping_both_ranges():
    # ISO 18004 examples: 0x935F -> 0xD9F, 0xE4AA -> 0x1AAA
    assert kanji_unit_to_sjis(0xD9F) == 0x935F
    assert kanji_unit_to_sjis(0x1AAA) == 0xE4AA
    assert kanji_unit_to_sjis(0) == 0x8140
    assert kanji_unit_to_sjis(0x1F * 0xC0) == 0xE040


def test_kanji_segment_decodes_whole_buffer():
    cur = _cursor(BitWriter().put(0xD9F, 13).put(0x1AAA, 13))
    out = []
    decode_kanji_segment(cur, out, 2)
    assert out == ["点茗"]


def test_byte_segment_unknown_encoding(monkeypatch):
    from qrpayload.binary.codecs import byte_codec
    monkeypatch.setattr(byte_codec, "guess_encoding", lambda data, config=None: "no-such-codec")
    with pytest.raises(DecodeError) as exc:
        decode_byte_segment(Cursor(b"ab"), [], 2)
    assert isinstance(exc.value.__cause__, LookupError)


def test_kanji_segment_unknown_encoding(monkeypatch):
    from qrpayload.binary.codecs import kanji_codec
    monkeypatch.setattr(kanji_codec, "SHIFT_JIS", "no-such-codec")
    cur = _cursor(BitWriter().put(0xD9F, 13))
    with pytest.raises(DecodeError) as exc:
        decode_kanji_segment(cur, [], 1)
    assert isinstance(exc.value.__cause__, LookupError)
