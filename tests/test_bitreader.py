"""Unit tests for BitReader."""

import pytest

from tagparser.bitreader.bitreader import BitReader
from tagparser.tools.error import TruncatedDataError


class TestBitReader:
    """Test suite for the big-endian bit cursor."""

    def test_read_bits(self):
        """Fields spanning byte boundaries are read MSB first."""
        reader = BitReader(b'\xAB\xCD')
        assert reader.ReadBits(4) == (0xA, None)
        assert reader.ReadBits(8) == (0xBC, None)
        assert reader.BitsLeft() == 4
        assert reader.BitPosition() == 12

    def test_read_zero_bits(self):
        reader = BitReader(b'\xFF')
        assert reader.ReadBits(0) == (0, None)
        assert reader.BitPosition() == 0

    def test_read_64_bits(self):
        reader = BitReader(bytes(range(1, 9)))
        val, err = reader.ReadBits(64)
        assert err is None
        assert val == 0x0102030405060708
        assert reader.BitsLeft() == 0

    def test_read_past_end(self):
        """A short read fails with TruncatedDataError and leaves the cursor alone."""
        reader = BitReader(b'\xAB\xCD')
        reader.ReadBits(12)
        val, err = reader.ReadBits(8)
        assert val == 0
        assert isinstance(err, TruncatedDataError)
        assert reader.BitPosition() == 12

    def test_peek_zero_extends(self):
        """Peeking past the end pads with zero bits instead of failing."""
        reader = BitReader(b'\xAB\xCD')
        reader.ReadBits(12)
        assert reader.PeekBits(8) == (0xD0, None)
        assert reader.BitPosition() == 12

    def test_peek_too_many_bits(self):
        reader = BitReader(b'\x00' * 16)
        val, err = reader.PeekBits(65)
        assert isinstance(err, ValueError)

    @pytest.mark.parametrize("n", [1, 7, 13, 33, 64])
    def test_peek_and_skip_match_read(self, n):
        data = bytes(range(0x31, 0x41))
        peeking = BitReader(data)
        reading = BitReader(data)
        peeking.ReadBits(3)
        reading.ReadBits(3)

        peeked, err = peeking.PeekBits(n)
        assert err is None
        assert peeking.SkipBits(n) is None
        assert reading.ReadBits(n) == (peeked, None)
        assert peeking.BitPosition() == reading.BitPosition()

    def test_skip_past_end(self):
        reader = BitReader(b'\x00')
        assert isinstance(reader.SkipBits(9), TruncatedDataError)
        assert reader.BitPosition() == 0

    def test_byte_align(self):
        reader = BitReader(b'\x00\xFF')
        reader.ByteAlign()
        assert reader.BitPosition() == 0
        reader.ReadBits(3)
        reader.ByteAlign()
        assert reader.BitPosition() == 8
        assert reader.ReadBits(8) == (0xFF, None)

    def test_read_bytes_aligns_first(self):
        reader = BitReader(b'\x80\x12\x34')
        reader.ReadBit()
        arr, err = reader.ReadBytes(2)
        assert err is None
        assert bytes(arr) == b'\x12\x34'

    def test_read_bits_to_byte_array(self):
        """The bits are right aligned in the returned bytes."""
        reader = BitReader(b'\xAB\xCD')
        arr, err = reader.ReadBitsToByteArray(12)
        assert err is None
        assert bytes(arr) == b'\x0A\xBC'

    def test_bool_and_sized_reads(self):
        reader = BitReader(b'\xA5\xFF\xFF')
        assert reader.ReadBitAsBool() == (True, None)
        assert reader.ReadBitAsBool() == (False, None)
        # ReadBitsAsUInt8 reads at most 8 bits
        assert reader.ReadBitsAsUInt8(10) == (0b10010111, None)

    def test_bytes_left_and_reset(self):
        reader = BitReader(b'\x01\x02\x03')
        reader.ReadBits(9)
        assert reader.BytesLeft() == 2
        assert reader.HasBytesLeft(1)
        reader.Reset(b'\xFF')
        assert reader.BitPosition() == 0
        assert reader.BitsLeft() == 8
