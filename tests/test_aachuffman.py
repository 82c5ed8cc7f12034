"""Unit tests for the AAC spectral and scalefactor Huffman decoders."""

import pytest

from tagparser import aaccodebook
from tagparser.aachuffmanutil import hcod, hcod_sf, sbr_huff_dec, f_huffman_env_3_0dB, RESERVED_HCB_VALUES
from tagparser.bitreader.bitreader import BitReader
from tagparser.diagnostics import DiagLevel, Diagnostics
from tagparser.tools.error import InvalidDataError, TruncatedDataError


def codeword(codes, bits, index) -> str:
    return format(codes[index], f'0{bits[index]}b')


class TestSpectralCodebooks:
    """Test suite for hcod()."""

    def test_quad_zero(self, bits):
        reader = BitReader(bits("0"))
        assert hcod(reader, 1) == ([0, 0, 0, 0], None)
        assert reader.BitPosition() == 1

    def test_quad_consumes_exactly_its_codeword(self, bits):
        """Index 41 of codebook 1 is (0, 0, 0, 1), coded as 10100."""
        reader = BitReader(bits("10100", "111"))
        assert hcod(reader, 1) == ([0, 0, 0, 1], None)
        assert reader.BitPosition() == 5

    @pytest.mark.parametrize("cb, expected", [
        (1, [1, 1, 1, 1]), (2, [1, 1, 1, 1]), (3, [2, 2, 2, 2]), (4, [2, 2, 2, 2]),
        (5, [4, 4]), (6, [4, 4]), (7, [7, 7]), (8, [7, 7]), (9, [12, 12]), (10, [12, 12]),
        (11, [16, 16]),
    ])
    def test_last_entry_of_every_codebook(self, bits, cb, expected):
        """The last codeword holds the largest values; sign bits of unsigned codebooks read as positive."""
        codes = getattr(aaccodebook, f'HCB{cb}_CODES')
        lengths = getattr(aaccodebook, f'HCB{cb}_BITS')
        index = len(codes) - 1
        reader = BitReader(bits(codeword(codes, lengths, index), "0" * 4, "0" * 32))
        sp, err = hcod(reader, cb)
        assert err is None
        assert sp == expected
        assert reader.BitPosition() >= lengths[index]

    def test_escape(self, bits):
        """Codebook 11 value 16 is followed by an escape sequence."""
        index = 16 * 17 + 2
        reader = BitReader(bits(codeword(aaccodebook.HCB11_CODES, aaccodebook.HCB11_BITS, index),
                                "0", "1", "0", "0001"))
        assert hcod(reader, 11) == ([17, -2], None)
        assert reader.BitsLeft() == 0

    def test_virtual_codebook_clamp(self, bits):
        """A pair beyond the largest absolute value of codebook 16 is zeroed with a warning."""
        diag = Diagnostics()
        index = 16 * 17 + 2
        reader = BitReader(bits(codeword(aaccodebook.HCB11_CODES, aaccodebook.HCB11_BITS, index),
                                "0", "1", "0", "0001"))
        assert hcod(reader, 16, diag) == ([0, 0], None)
        assert diag.worst_level() == DiagLevel.WARNING
        assert diag[0].context == "parsing AAC spectral data"

    def test_virtual_codebook_within_lav(self, bits):
        diag = Diagnostics()
        index = 3 * 17 + 4
        reader = BitReader(bits(codeword(aaccodebook.HCB11_CODES, aaccodebook.HCB11_BITS, index), "1", "0"))
        assert hcod(reader, 16, diag) == ([-3, 4], None)
        assert len(diag) == 0

    def test_reserved_codebook(self, bits):
        reader = BitReader(bits(codeword(aaccodebook.HCB11_CODES, aaccodebook.HCB11_BITS, 0)))
        assert hcod(reader, 12) == (list(RESERVED_HCB_VALUES), None)

    def test_invalid_codebook(self):
        sp, err = hcod(BitReader(b'\x00'), 32)
        assert isinstance(err, InvalidDataError)

    def test_truncated(self):
        sp, err = hcod(BitReader(b''), 5)
        assert isinstance(err, TruncatedDataError)


class TestScalefactorCodebook:
    def test_zero_delta(self, bits):
        assert hcod_sf(BitReader(bits("0"))) == (60, None)

    def test_plus_one(self, bits):
        reader = BitReader(bits("1010"))
        assert hcod_sf(reader) == (61, None)
        assert reader.BitPosition() == 4


class TestSbrHuffman:
    def test_zero_delta(self, bits):
        assert sbr_huff_dec(BitReader(bits("0")), f_huffman_env_3_0dB) == (0, None)
