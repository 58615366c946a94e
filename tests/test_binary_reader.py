"""Tests for BinaryReader, all synthetic bytes."""

import struct

import pytest

from eff_tools.errors import TruncatedError
from eff_tools.parser.binary_reader import BinaryReader


def test_int8():
    r = BinaryReader(bytes([0x00, 0x7F, 0xFF]))
    assert r.int8() == 0
    assert r.int8() == 127
    assert r.int8() == -1


def test_int16():
    data = struct.pack("<hh", -1, 0x7FFF)
    r = BinaryReader(data)
    assert r.int16() == -1
    assert r.int16() == 32767


def test_uint32():
    data = struct.pack("<II", 42, 0xDEADBEEF)
    r = BinaryReader(data)
    assert r.uint32() == 42
    assert r.uint32() == 0xDEADBEEF


def test_int32():
    data = struct.pack("<ii", -1, 100)
    r = BinaryReader(data)
    assert r.int32() == -1
    assert r.int32() == 100


def test_signature():
    r = BinaryReader(b"EFFN")
    assert r.signature() == b"EFFN"


def test_cstring():
    r = BinaryReader(b"hello\x00world\x00")
    assert r.cstring() == b"hello"
    assert r.cstring() == b"world"
    assert r.remaining == 0


def test_cstring_empty():
    r = BinaryReader(b"\x00rest")
    assert r.cstring() == b""
    assert r.position == 1


def test_cstring_keeps_non_utf8_bytes():
    r = BinaryReader(b"\xff\xfe\x00")
    assert r.cstring() == b"\xff\xfe"


def test_cstring_no_null():
    r = BinaryReader(b"no null")
    with pytest.raises(TruncatedError, match="No null terminator"):
        r.cstring()


def test_cstring_respects_end_boundary():
    r = BinaryReader(b"abc\x00", end=3)
    with pytest.raises(TruncatedError):
        r.cstring()


def test_bytes():
    data = b"\x01\x02\x03\x04"
    r = BinaryReader(data)
    assert r.bytes(2) == b"\x01\x02"
    assert r.bytes(2) == b"\x03\x04"


def test_rest():
    r = BinaryReader(b"\x01\x02\x03")
    r.skip(1)
    assert r.rest() == b"\x02\x03"
    assert r.rest() == b""


def test_skip():
    data = struct.pack("<III", 1, 2, 3)
    r = BinaryReader(data)
    r.skip(4)
    assert r.uint32() == 2


def test_remaining_and_position():
    r = BinaryReader(b"abcdef")
    assert r.position == 0
    assert r.remaining == 6
    r.skip(2)
    assert r.position == 2
    assert r.remaining == 4


def test_align():
    r = BinaryReader(bytes(32))
    r.skip(5)
    assert r.align(16) == 11
    assert r.position == 16
    assert r.align(16) == 0
    assert r.align(1) == 0


def test_align_past_end_leaves_nothing():
    r = BinaryReader(b"abc")
    r.skip(1)
    r.align(0x1000)
    assert r.position == 0x1000
    assert r.rest() == b""


def test_read_past_end():
    r = BinaryReader(b"\x01\x02")
    r.int16()
    with pytest.raises(TruncatedError, match="exceed boundary"):
        r.int16()


def test_truncated_is_a_value_error():
    r = BinaryReader(b"\x01")
    with pytest.raises(ValueError):
        r.int32()


def test_skip_past_end():
    r = BinaryReader(b"\x01\x02")
    with pytest.raises(TruncatedError, match="exceed boundary"):
        r.skip(10)
