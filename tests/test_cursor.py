"""
Tests for the HMA byte cursor
"""
import struct

import pytest

from hma_decoder.errors import TruncatedInput
from hma_decoder.parser.cursor import HmaCursor


class TestPrimitives:
    """Reading the little-endian primitives"""

    def test_u16_is_low_byte_first(self):
        cursor = HmaCursor(bytes([0x34, 0x12]))
        assert cursor.read_u16() == 0x34 + (0x12 << 8)
        assert cursor.exhausted

    def test_u16_full_range(self):
        cursor = HmaCursor(bytes([0xFF, 0xFF, 0x00, 0x00]))
        assert cursor.read_u16() == 0xFFFF
        assert cursor.read_u16() == 0

    def test_float32_reverses_word(self):
        big_endian = struct.pack('>f', 12.5)
        cursor = HmaCursor(big_endian[::-1])
        assert cursor.read_float32() == 12.5

    def test_text_and_blob(self):
        data = struct.pack('<H', 5) + b'V\xe9ga!' + struct.pack('<H', 3) + b'\x01\x02\x03'
        cursor = HmaCursor(data)
        assert cursor.read_text() == 'Véga!'
        assert cursor.read_prefixed_blob() == b'\x01\x02\x03'
        assert cursor.offset == len(data)

    def test_empty_text(self):
        cursor = HmaCursor(b'\x00\x00')
        assert cursor.read_text() == ''

    def test_skip_moves_forward(self):
        cursor = HmaCursor(b'\x00' * 6 + b'\x07\x00')
        cursor.skip(6)
        assert cursor.offset == 6
        assert cursor.remaining == 2
        assert cursor.read_u16() == 7


class TestTruncation:
    """Reads past the end of the stream"""

    def test_short_u16(self):
        cursor = HmaCursor(b'\x01')
        with pytest.raises(TruncatedInput) as exc:
            cursor.read_u16('rules level')
        assert exc.value.offset == 0
        assert 'rules level' in str(exc.value)

    def test_offset_is_start_of_read(self):
        cursor = HmaCursor(b'\x01\x00\x02')
        cursor.read_u16()
        with pytest.raises(TruncatedInput) as exc:
            cursor.read_u16()
        assert exc.value.offset == 2

    def test_text_shorter_than_prefix(self):
        cursor = HmaCursor(struct.pack('<H', 10) + b'abc')
        with pytest.raises(TruncatedInput):
            cursor.read_text()

    def test_skip_past_end(self):
        cursor = HmaCursor(b'\x00' * 3)
        with pytest.raises(TruncatedInput):
            cursor.skip(4)

    def test_blob_past_end(self):
        cursor = HmaCursor(b'\x00' * 3)
        with pytest.raises(TruncatedInput):
            cursor.read_blob(5)
