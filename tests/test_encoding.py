import pytest

from lexpath.encoding import (
    Codecvt,
    CodecvtError,
    CodecvtResult,
    Utf8Codecvt,
    codecvt,
    imbue,
    to_narrow,
    to_text,
    to_wide,
)


class OffByOneCodecvt(Codecvt):
    """Produces values that always differ from a real codec."""

    def decode(self, data):
        return "".join(chr(b + 1) for b in bytes(data))

    def encode(self, text):
        return bytes(ord(c) - 1 for c in text)


class CyclingErrorCodecvt(Codecvt):
    """Fails with partial, then error, then noconv, repeating."""

    def __init__(self):
        super().__init__("utf-8")
        self._results = [CodecvtResult.PARTIAL, CodecvtResult.ERROR, CodecvtResult.NOCONV]
        self._next = 0

    def _fail(self):
        result = self._results[self._next % 3]
        self._next += 1
        raise CodecvtError(result)

    def decode(self, data):
        self._fail()

    def encode(self, text):
        self._fail()


@pytest.fixture
def restore_codecvt():
    original = codecvt()
    yield original
    imbue(original)


def test_constructors_from_containers():
    assert to_text(list("string")) == "string"
    assert len(to_text(list("string"))) == 6
    assert to_text(list("wstring")) == "wstring"
    assert to_text("std::string") == "std::string"
    assert len(to_text("std::wstring")) == 12
    assert to_text(b"fuz", Utf8Codecvt()) == "fuz"
    assert to_text(bytearray(b"fuz"), Utf8Codecvt()) == "fuz"
    assert to_text(list(b"fuz"), Utf8Codecvt()) == "fuz"
    assert to_text("array char") == "array char"
    assert to_text([]) == ""


def test_imbue_locale(restore_codecvt):
    before = to_text("abc")
    old = imbue(Utf8Codecvt())
    assert old is restore_codecvt
    wide = to_text(b"\xE2\x9C\xA2")
    assert len(wide) == 1
    assert ord(wide[0]) == 0x2722
    previous = imbue(old)
    assert isinstance(previous, Utf8Codecvt)
    assert to_text("abc") == before
    assert codecvt() is old


def test_codecvt_argument():
    cvt = OffByOneCodecvt()
    assert to_text(b"a1", cvt) == "b2"
    assert to_text(list(b"a1"), cvt) == "b2"
    assert to_wide(b"a1", cvt) == "b2"
    assert to_text("z9", cvt) == "z9"
    assert to_narrow("z9", cvt) == b"y8"
    assert to_narrow("b2", cvt) == b"a1"


def test_error_handling(restore_codecvt):
    imbue(CyclingErrorCodecvt())
    expected = [CodecvtResult.PARTIAL, CodecvtResult.ERROR, CodecvtResult.NOCONV]
    for result in expected:
        with pytest.raises(CodecvtError) as info:
            to_text(b"foo")
        assert info.value.result == result


def test_error_handling_narrow(restore_codecvt):
    imbue(CyclingErrorCodecvt())
    with pytest.raises(CodecvtError) as info:
        to_narrow("foo")
    assert info.value.result == CodecvtResult.PARTIAL


def test_empty_input_skips_conversion():
    cvt = CyclingErrorCodecvt()
    assert to_wide(b"", cvt) == ""
    assert to_narrow("", cvt) == b""


def test_utf8_partial_and_error():
    cvt = Utf8Codecvt()
    with pytest.raises(CodecvtError) as info:
        cvt.decode(b"\xE2\x9C")
    assert info.value.result == CodecvtResult.PARTIAL
    with pytest.raises(CodecvtError) as info:
        cvt.decode(b"\xFFabc")
    assert info.value.result == CodecvtResult.ERROR
    with pytest.raises(CodecvtError) as info:
        cvt.encode("\ud800")
    assert info.value.result == CodecvtResult.ERROR


def test_generic_codec_partial_and_round_trip():
    cvt = Codecvt("utf-8")
    with pytest.raises(CodecvtError) as info:
        cvt.decode(b"\xE2\x9C")
    assert info.value.result == CodecvtResult.PARTIAL
    text = "caf\u00e9 \u2722"
    assert cvt.decode(cvt.encode(text)) == text


def test_utf8_round_trip():
    cvt = Utf8Codecvt()
    assert cvt.encode("\u2722") == b"\xE2\x9C\xA2"
    assert cvt.decode(cvt.encode("foo bar")) == "foo bar"


def test_unknown_encoding_rejected():
    with pytest.raises(LookupError):
        Codecvt("no-such-encoding")


def test_bad_sources():
    with pytest.raises(TypeError):
        to_text(123)
    with pytest.raises(TypeError):
        to_text(["a", 1])
    with pytest.raises(TypeError):
        imbue("utf-8")


def test_error_message_and_type():
    err = CodecvtError(CodecvtResult.NOCONV)
    assert isinstance(err, ValueError)
    assert err.result is CodecvtResult.NOCONV
    assert "path conversion" in str(err)