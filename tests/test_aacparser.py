"""Unit tests for the AAC frame element parser.

The frames are assembled bit by bit; the comments name the syntax fields.
"""

import pytest

from tagparser.aacparser import (AacFrameElementParser, AacSetup, AacSbrInfo, ParseADTS, ceil_log2, is_intensity,
                                 ics_info, ID_SCE, ID_CPE, FIXFIX, EXTENSION_ID_PS, EXTENSION_ID_DRM_PS,
                                 AAC_MAX_SYNTAX_ELEMENTS)
from tagparser.adtsframe import AdtsFrame
from tagparser.aachuffmanutil import INTENSITY_HCB, INTENSITY_HCB2
from tagparser.bitreader.bitreader import BitReader
from tagparser.tools.error import InvalidDataError, NotImplementedFeatureError, TruncatedDataError

END = "111"

# tag, global_gain, ics_info(OnlyLong, max_sfb 0, no predictor), no pulse/tns/gain control
EMPTY_SCE_BODY = ("0000", "00000000", "0", "00", "0", "000000", "0", "000")


class TestRawDataBlock:
    """Test suite for the element loop of non error resilient streams."""

    def test_end_only(self, lc_parser):
        lc_parser.parse_raw(b'\xE0')
        assert lc_parser.element_count == 0
        assert lc_parser.channel_count == 0

    def test_reserved_bit(self, lc_parser, diag, bits):
        """A set ics_reserved_bit aborts the frame without a diagnostic."""
        with pytest.raises(InvalidDataError):
            lc_parser.parse_raw(bits("000", "0000", "00000000", "1"))
        assert len(diag) == 0

    def test_element_limit(self, lc_parser):
        """Silence is a series of empty SCEs until the element limit is hit."""
        with pytest.raises(NotImplementedFeatureError):
            lc_parser.parse_raw(bytes(200))
        assert lc_parser.element_count == AAC_MAX_SYNTAX_ELEMENTS
        assert lc_parser.channel_count == AAC_MAX_SYNTAX_ELEMENTS

    def test_truncated(self, lc_parser):
        with pytest.raises(TruncatedDataError):
            lc_parser.parse_raw(b'\x00')

    def test_single_channel_with_spectral_data(self, lc_parser, bits):
        lc_parser.parse_raw(bits(
            "000", "0000", "01100100",      # SCE, tag 0, global_gain 100
            "0", "00", "0", "000001", "0",  # ics_info: OnlyLong, max_sfb 1
            "0001", "00001",                # section: codebook 1 for one band
            "0",                            # scalefactor delta 0
            "0", "0", "0",                  # no pulse, tns, gain control
            "0",                            # one zero quad
            END))

        ics = lc_parser.ics1
        assert lc_parser.element_count == 1
        assert lc_parser.channel_count == 1
        assert lc_parser.element_ids[0] == ID_SCE
        assert ics.Max_sfb == 1
        assert ics.num_sec[0] == 1
        assert ics.sfb_cb[0, 0] == 1
        assert ics.scale_factors[0, 0] == 100
        assert ics.Spectral_data.Hcod == [[0, 0, 0, 0]]

    def test_scale_factor_out_of_range(self, lc_parser, bits):
        with pytest.raises(InvalidDataError):
            lc_parser.parse_raw(bits(
                "000", "0000", "11111111",
                "0", "00", "0", "000001", "0",
                "0001", "00001",
                "1010"))  # +1 exceeds 255

    @pytest.mark.parametrize("window, sect_len", [
        (("00", "0", "000001", "0"), "00010"),                  # long window, two bands
        (("10", "0", "0001", "0000000"), "010"),                # short windows, two bands
        (("10", "0", "0001", "0000000"), "111" * 17 + "001"),   # short windows, up to band 120
    ])
    def test_section_beyond_max_sfb(self, lc_parser, bits, window, sect_len):
        """Sections must end at max_sfb, here 1."""
        with pytest.raises(InvalidDataError):
            lc_parser.parse_raw(bits("000", "0000", "01100100", "0", *window, "0001", sect_len, "0" * 16))

    def test_channel_pair_with_common_window(self, lc_parser, bits):
        lc_parser.parse_raw(bits(
            "001", "0000", "1",                 # CPE, tag 0, common_window
            "0", "00", "0", "000000", "0",      # shared ics_info
            "00",                               # no mid/side
            "01100100", "000",                  # first channel, global_gain 100
            "00010000", "000",                  # second channel, global_gain 16
            END))

        assert lc_parser.element_ids[0] == ID_CPE
        assert lc_parser.channel_count == 2
        assert sum(lc_parser.element_channel_counts) == lc_parser.channel_count
        assert lc_parser.common_window
        assert lc_parser.ics1.Global_gain == 100
        assert lc_parser.ics2.Global_gain == 16

    def test_mid_side_mask(self, lc_parser, bits):
        lc_parser.parse_raw(bits(
            "001", "0000", "1",
            "0", "00", "0", "000010", "0",      # max_sfb 2
            "01", "10",                         # ms_mask_present 1, ms_used 1 0
            "01100100", "0000", "00010", "000",  # zero codebook over both bands
            "01100100", "0000", "00010", "000",
            END))

        assert lc_parser.ics1.Ms_mask_present == 1
        assert lc_parser.ics1.Ms_used[0, 0]
        assert not lc_parser.ics1.Ms_used[0, 1]
        assert lc_parser.ics2.Max_sfb == 2
        assert lc_parser.ics2.sect_end[0, 0] == 2

    def test_data_stream_element(self, lc_parser, bits):
        lc_parser.parse_raw(bits("100", "0001", "0", "00000010", "10101010", "01010101", END))
        assert lc_parser.dse.Element_instance_tag == 1
        assert lc_parser.dse.Data_stream_byte == b'\xAA\x55'

    def test_program_config_element(self, lc_parser, bits):
        lc_parser.parse_raw(bits(
            "101", "0000", "01", "0100",        # PCE, tag 0, LC, 44.1 kHz
            "0001", "0000", "0000", "01",       # front, side, back, lfe element counts
            "000", "0000",                      # assoc data, valid cc element counts
            "0", "0", "0",                      # no mixdowns
            "1", "0000",                        # front CPE with tag 0
            "0000",                             # LFE with tag 0
            "00",                               # byte alignment
            "00000010", "01100001", "01100010",  # comment "ab"
            END))

        pce = lc_parser.pce
        assert pce.Sampling_frequency_index == 4
        assert pce.Channels == 3
        assert pce.Front_channel_count == 2
        assert pce.Lfe_channel_count == 1
        assert pce.Cpe_channel[0] == 0
        assert pce.Sce_channel[0] == 2
        assert pce.Comment_field_data == b'ab'

    def test_long_term_prediction(self, bits):
        parser = AacFrameElementParser(AacSetup(audio_object_id=4, sampling_frequency_index=4))
        parser.parse_raw(bits(
            "000", "0000", "00000000",
            "0", "00", "0", "000000", "1",      # predictor_data_present
            "1", "00000001010", "011",          # ltp_data_present, lag 10, coef 3
            "000",
            END))

        assert parser.ics1.Ltp1.Data_present
        assert parser.ics1.Ltp1.Ltp_lag == 10
        assert parser.ics1.Ltp1.Ltp_coef == 3

    def test_temporal_noise_shaping(self, lc_parser, bits):
        lc_parser.parse_raw(bits(
            "000", "0000", "00000000",
            "0", "00", "0", "000000", "0",
            "0", "1",                           # no pulse, tns present
            "01", "1", "000100", "00010",       # one filter, coef_res 1, length 4, order 2
            "1", "0", "0101", "1010",           # direction, compress, coefficients
            "0",
            END))

        tns = lc_parser.ics1.Tns_data
        assert tns.N_filt == [1]
        assert tns.Len[0] == [4]
        assert tns.Order[0] == [2]
        assert tns.Coef[0][0] == [5, 10]

    def test_gain_control_outside_ssr(self, lc_parser, bits):
        with pytest.raises(InvalidDataError):
            lc_parser.parse_raw(bits("000", "0000", "00000000", "0", "00", "0", "000000", "0", "0", "0", "1"))

    def test_pulse_in_short_block(self, lc_parser, bits):
        with pytest.raises(InvalidDataError):
            lc_parser.parse_raw(bits(
                "000", "0000", "00000000",
                "0", "10", "0", "0000", "0000000",    # EightShort, max_sfb 0
                "1", "00", "000000", "00000", "0000",  # one pulse
                "0", "0"))


class TestFillElement:
    def test_fill_after_single_channel(self, lc_parser, bits):
        lc_parser.parse_raw(bits("000", *EMPTY_SCE_BODY, "110", "0001", "0000", "0000", END))
        assert lc_parser.element_count == 1
        assert not lc_parser.sbr_present

    def test_dynamic_range(self, lc_parser, bits):
        lc_parser.parse_raw(bits(
            "110", "0011", "1011",              # FIL, 3 bytes, dynamic range
            "0", "0", "0",                      # no pce tag, excluded channels, bands
            "1", "0101010", "0",                # prog_ref_level 42
            "1", "0000101",                     # dyn_range_sign 1, dyn_range_ctl 5
            END))

        drc = lc_parser.drc
        assert drc.Prog_ref_level == 42
        assert drc.Dyn_range_sign == [1]
        assert drc.Dyn_range_cnt == [5]

    def test_sbr_without_channel_element(self, lc_parser, bits):
        with pytest.raises(InvalidDataError):
            lc_parser.parse_raw(bits("110", "0001", "1101", "0000", END))


class TestSbr:
    """Test suite for SBR data in fill elements."""

    @pytest.fixture
    def parser(self):
        # 24 kHz core, SBR at 48 kHz
        return AacFrameElementParser(AacSetup(audio_object_id=2, sampling_frequency_index=6, channel_config=1))

    def test_single_channel_element(self, parser, bits):
        parser.parse_raw(bits(
            "000", *EMPTY_SCE_BODY,
            "110", "1000", "1101",                          # FIL, 8 bytes, SBR data
            "1",                                            # bs_header_flag
            "1", "0101", "1001", "000", "00", "0", "0",     # sbr_header
            "0",                                            # bs_data_extra
            "00", "00", "0",                                # FIXFIX, one envelope, low resolution
            "0", "0",                                       # dtdf
            "00000000",                                     # invf for 4 noise bands
            "0010100", "0000000",                           # envelope: 20 then 7 zero deltas
            "00011", "000",                                 # noise: 3 then 3 zero deltas
            "0", "0",                                       # no harmonics, no extended data
            "000",                                          # fill bits
            END))

        assert parser.element_count == 1
        assert parser.sbr_present
        sbr = parser.sbr_elements[0]
        assert sbr.Sampling_frequency == 48000
        assert sbr.Sfi == 3
        assert sbr.Header_count == 1
        assert sbr.Reset == 0
        assert (sbr.k0, sbr.k2, sbr.N_master, sbr.N_Q) == (13, 45, 16, 4)
        assert sbr.Bs_frame_class[0] == FIXFIX
        assert sbr.le[0] == 1 and sbr.lq[0] == 1
        assert sbr.Amp_res[0] == 0
        assert sbr.E[0, 0, 0] == 20
        assert list(sbr.E[0, 1:8, 0]) == [0] * 7
        assert sbr.Q[0, 0, 0] == 3

    def test_failure_marks_reset(self, parser, bits):
        """A header with inconsistent frequencies keeps the element but flags a reset."""
        with pytest.raises(InvalidDataError):
            parser.parse_raw(bits(
                "000", *EMPTY_SCE_BODY,
                "110", "1000", "1101",
                "1", "1", "1111", "0000", "000", "00", "0", "0",
                "0" * 40))

        sbr = parser.sbr_elements[0]
        assert sbr is not None
        assert sbr.Reset == 1
        assert sbr.Header_count == 1

    def test_parametric_stereo_header(self, lc_parser, bits):
        sbr = AacSbrInfo(ID_SCE, 48000, 1024)
        lc_parser.reader.Reset(bits("1", "1", "010"))
        with pytest.raises(NotImplementedFeatureError):
            lc_parser.sbr_extension(sbr, EXTENSION_ID_PS, 16)
        assert sbr.Ps.Header_read == 1
        assert sbr.Ps.Enable_iid
        assert sbr.Ps.Iid_mode == 2
        assert sbr.Ps_used == 1

    def test_drm_parametric_stereo(self, lc_parser):
        sbr = AacSbrInfo(ID_CPE, 48000, 1024)
        with pytest.raises(NotImplementedFeatureError):
            lc_parser.sbr_extension(sbr, EXTENSION_ID_DRM_PS, 16)
        assert sbr.Ps_used == 1


class TestErrorResilient:
    def test_single_channel_configuration(self, bits):
        parser = AacFrameElementParser(AacSetup(audio_object_id=17, sampling_frequency_index=4, channel_config=1))
        parser.parse_raw(bits(*EMPTY_SCE_BODY))
        assert parser.element_count == 1
        assert parser.channel_count == 1
        assert parser.element_ids[0] == ID_SCE

    def test_low_delay_block_switching(self, bits):
        parser = AacFrameElementParser(AacSetup(audio_object_id=23, sampling_frequency_index=4,
                                                channel_config=1, frame_length=512))
        with pytest.raises(InvalidDataError):
            parser.parse_raw(bits("0000", "00000000", "0", "10"))

    def test_parametric_object_type(self, bits):
        parser = AacFrameElementParser(AacSetup(audio_object_id=27, sampling_frequency_index=4, channel_config=1))
        with pytest.raises(NotImplementedFeatureError):
            parser.parse_raw(bits(*EMPTY_SCE_BODY))


class TestAdts:
    """Parsing complete ADTS frames."""

    HEADER = bytes.fromhex('FFF1508001FFFC')

    def payload(self, bits):
        data = bits("001", "0000", "1", "0", "00", "0", "000000", "0", "00",
                    "00000000", "000", "00000000", "000", END)
        return data + bytes(8 - len(data))

    def test_parse_adts(self, bits):
        frame, parser = ParseADTS(self.HEADER + self.payload(bits))
        assert frame.total_size == 15
        assert parser.setup.audio_object_id == 2
        assert parser.channel_count == 2

    def test_truncated_frame(self, bits):
        with pytest.raises(InvalidDataError):
            ParseADTS(self.HEADER + self.payload(bits)[:4])

    def test_parse_takes_setup_from_header(self, bits):
        frame = AdtsFrame()
        frame.parse_header(BitReader(self.HEADER))
        parser = AacFrameElementParser(AacSetup(audio_object_id=1, sampling_frequency_index=3))
        parser.parse(frame, self.payload(bits))
        assert parser.setup.audio_object_id == 2
        assert parser.setup.sampling_frequency_index == 4
        assert parser.channel_count == 2


class TestSetup:
    def test_invalid_frame_length(self):
        with pytest.raises(InvalidDataError):
            AacSetup(frame_length=2048)

    def test_from_adts(self):
        frame = AdtsFrame()
        frame.parse_header(BitReader(TestAdts.HEADER))
        setup = AacSetup.from_adts(frame, frame_length=960)
        assert (setup.audio_object_id, setup.sampling_frequency_index, setup.channel_config) == (2, 4, 2)
        assert setup.frame_length == 960
        assert setup.extension_sampling_frequency_index is None


class TestHelpers:
    def test_ceil_log2(self):
        assert [ceil_log2(v) for v in range(10)] == [0, 0, 1, 2, 2, 3, 3, 3, 3, 4]

    def test_is_intensity(self):
        info = ics_info()
        info.sfb_cb[0, 0] = INTENSITY_HCB
        info.sfb_cb[0, 1] = INTENSITY_HCB2
        assert is_intensity(info, 0, 0) == 1
        assert is_intensity(info, 0, 1) == -1
        assert is_intensity(info, 0, 2) == 0
