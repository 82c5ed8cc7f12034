"""Unit tests for the ADTS frame header."""

import pytest

from tagparser.adtsframe import AdtsFrame
from tagparser.bitreader.bitreader import BitReader
from tagparser.tools.error import InvalidDataError, TruncatedDataError

# MPEG-4, no CRC, AAC LC, 44.1 kHz, two channels, 15 bytes, VBR
LC_STEREO_HEADER = bytes.fromhex('FFF1508001FFFC')


class TestAdtsFrame:
    """Test suite for AdtsFrame.parse_header()."""

    def test_parse_header(self):
        frame = AdtsFrame()
        reader = BitReader(LC_STEREO_HEADER)
        frame.parse_header(reader)

        assert frame.is_valid()
        assert frame.is_mpeg4
        assert frame.mpeg_version == 4
        assert not frame.has_crc
        assert frame.audio_object_id == 2
        assert frame.sampling_frequency_index == 4
        assert frame.sampling_frequency == 44100
        assert frame.channel_config == 2
        assert frame.total_size == 15
        assert frame.header_size == 7
        assert frame.data_size == 8
        assert frame.buffer_fullness == 0x7FF
        assert frame.frame_count == 1
        assert frame.raw_data_block_count == 1
        assert reader.BitPosition() == 56

    def test_header_with_crc(self):
        """With protection the header is 9 bytes and carries the CRC."""
        frame = AdtsFrame()
        frame.parse_header(BitReader(bytes.fromhex('FFF85080021FFCBEEF')))

        assert frame.has_crc
        assert not frame.is_mpeg4
        assert frame.header_size == 9
        assert frame.total_size == 16
        assert frame.crc == 0xBEEF

    def test_missing_syncword(self):
        with pytest.raises(InvalidDataError):
            AdtsFrame().parse_header(BitReader(bytes.fromhex('FFE1508001FFFC')))

    def test_frame_smaller_than_header(self):
        """A frame length field of 0 cannot hold the header."""
        with pytest.raises(InvalidDataError):
            AdtsFrame().parse_header(BitReader(bytes.fromhex('FFF15080001FFC')))

    def test_truncated_header(self):
        with pytest.raises(TruncatedDataError):
            AdtsFrame().parse_header(BitReader(bytes.fromhex('FFF15080')))

    @pytest.mark.parametrize("size", [7, 9, 100, 8191])
    def test_total_size_never_below_header_size(self, size):
        header = 0xFFF1 << 40 | (1 << 38) | (4 << 34) | (2 << 30) | (size << 13) | (0x7FF << 2)
        frame = AdtsFrame()
        frame.parse_header(BitReader(header.to_bytes(7, 'big')))
        assert frame.total_size == size
        assert frame.total_size >= frame.header_size
