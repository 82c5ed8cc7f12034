import copy
import logging
from dataclasses import dataclass, replace

import numpy as np

from tagparser.bitreader.bitreader import BitReader
from tagparser.adtsframe import AdtsFrame, SamplingFrequency
from tagparser.aacwindowgrouping import window_grouping, MAX_PREDICTION_SFB
from tagparser.aacwindowgrouping import ONLY_LONG_SEQUENCE, LONG_START_SEQUENCE, EIGHT_SHORT_SEQUENCE
from tagparser.aachuffmanutil import hcod_sf
from tagparser.aachuffmanutil import hcod
from tagparser.aachuffmanutil import ZERO_HCB, FIRST_PAIR_HCB, ESC_HCB, NOISE_HCB, INTENSITY_HCB2, INTENSITY_HCB
from tagparser.aachuffmanutil import t_huffman_env_bal_3_0dB, f_huffman_env_bal_3_0dB
from tagparser.aachuffmanutil import t_huffman_env_bal_1_5dB, f_huffman_env_bal_1_5dB
from tagparser.aachuffmanutil import t_huffman_env_3_0dB, f_huffman_env_3_0dB
from tagparser.aachuffmanutil import t_huffman_env_1_5dB, f_huffman_env_1_5dB
from tagparser.aachuffmanutil import t_huffman_noise_bal_3_0dB, t_huffman_noise_3_0dB
from tagparser.aachuffmanutil import sbr_huff_dec
from tagparser.diagnostics import Diagnostics
from tagparser.parsers.aac_sbr_tables import derive_sbr_tables, get_sr_index
from tagparser.tools.error import InvalidDataError, NotImplementedFeatureError, TagParserError

logger = logging.getLogger(__name__)

################################################################################
## ID_SYN_ELE (Syntactic Element)
################################################################################
ID_SCE = 0x00
ID_CPE = 0x01
ID_CCE = 0x02
ID_LFE = 0x03
ID_DSE = 0x04
ID_PCE = 0x05
ID_FIL = 0x06
ID_END = 0x07

SyntacticElement = [
    "ID_SCE: Single Channel Element",
    "ID_CPE: Channel Pair Element",
    "ID_CCE: Coupling Channel Element",
    "ID_LFE: LFE Channel Element",
    "ID_DSE: Data Stream Element",
    "ID_PCE: Program Config Element",
    "ID_FIL: Fill Element",
    "ID_END: End"
]

################################################################################
## Table 1.17 – Audio Object Types
################################################################################
AUDIO_OBJECT_TYPE_NULL          = 0
AUDIO_OBJECT_TYPE_AAC_MAIN      = 1
AUDIO_OBJECT_TYPE_AAC_LC        = 2
AUDIO_OBJECT_TYPE_SSR           = 3
AUDIO_OBJECT_TYPE_LTP           = 4
AUDIO_OBJECT_TYPE_SBR           = 5
AUDIO_OBJECT_TYPE_AAC_SCALABLE  = 6
AUDIO_OBJECT_TYPE_ER            = 17
AUDIO_OBJECT_TYPE_ER_AAC_LTP    = 19
AUDIO_OBJECT_TYPE_ER_AAC_LD     = 23
AUDIO_OBJECT_TYPE_ER_PARAMETRIC = 27

################################################################################
## Table 4.121 – Values of the extension_type
################################################################################
EXT_FILL          = 0x00
EXT_FILL_DATA     = 0x01
EXT_DATA_ELEMENT  = 0x02
EXT_DYNAMIC_RANGE = 0x0b
EXT_SAC_DATA      = 0x0c
EXT_SBR_DATA      = 0x0d
EXT_SBR_DATA_CRC  = 0x0e

ANC_DATA = 0x00

################################################################################
## SBR
################################################################################
FIXFIX = 0
FIXVAR = 1
VARFIX = 2
VARVAR = 3

EXTENSION_ID_DRM_PS = 0
EXTENSION_ID_PS     = 2

################################################################################
## Limits
################################################################################
AAC_MAX_SYNTAX_ELEMENTS = 48
AAC_MAX_CHANNELS        = 64
AAC_MAX_SFB             = 51
AAC_INVALID_SBR_ELEMENT = 0xFF
MAX_LTP_LONG_SFB        = 40
MAX_SECTIONS_SHORT      = 8 * 15
MAX_WINDOW_GROUPS       = 8

FRAME_LENGTHS = (480, 512, 960, 1024)

# Channel elements of the error resilient profiles per channel configuration
ER_ELEMENT_SEQUENCES = {
    1: (ID_SCE,),
    2: (ID_CPE,),
    3: (ID_SCE, ID_CPE),
    4: (ID_SCE, ID_CPE, ID_SCE),
    5: (ID_SCE, ID_CPE, ID_CPE),
    6: (ID_SCE, ID_CPE, ID_CPE, ID_SCE),
    7: (ID_SCE, ID_CPE, ID_CPE, ID_CPE, ID_SCE),
}


@dataclass(frozen=True)
class AacSetup:
    """Immutable per-stream configuration of the frame element parser."""
    audio_object_id: int = AUDIO_OBJECT_TYPE_AAC_LC
    sampling_frequency_index: int = 4
    extension_sampling_frequency_index: int = None
    channel_config: int = 2
    frame_length: int = 1024
    section_data_resilience: bool = False
    scalefactor_data_resilience: bool = False
    spectral_data_resilience: bool = False

    def __post_init__(self):
        if self.frame_length not in FRAME_LENGTHS:
            raise InvalidDataError(f"frame length {self.frame_length} is not one of {FRAME_LENGTHS}")
        if not 0 <= self.sampling_frequency_index < 12:
            raise InvalidDataError(f"sampling frequency index {self.sampling_frequency_index} out of range (0-11)")
        if not 0 <= self.channel_config < 8:
            raise InvalidDataError(f"channel configuration {self.channel_config} out of range (0-7)")

    @classmethod
    def from_adts(cls, frame: AdtsFrame, **kwargs) -> 'AacSetup':
        return cls(audio_object_id=frame.audio_object_id,
                   sampling_frequency_index=frame.sampling_frequency_index,
                   channel_config=frame.channel_config,
                   **kwargs)


class AacFrameElementParser:
    """Parses the syntax elements of AAC raw data blocks.

    State of the last parsed frame is kept on the instance: both individual
    channel streams, the program config, the dynamic range info and the SBR
    elements. SBR elements persist across frames.
    """

    def __init__(self, setup: AacSetup = None, diag: Diagnostics = None):
        self.setup = setup if setup is not None else AacSetup()
        self.diag = diag if diag is not None else Diagnostics()
        self.reader = BitReader(b'')

        self.ics1 = ics_info()
        self.ics2 = ics_info()
        self.pce = program_config_element()
        self.drc = dynamic_range_info()
        self.cce = None
        self.dse = None
        self.sbr_elements = [None] * AAC_MAX_SYNTAX_ELEMENTS
        self.ps_used = [0] * AAC_MAX_SYNTAX_ELEMENTS
        self.sbr_present = False
        self.ps_present = False
        self.ps_reset_flag = False
        self.common_window = False
        self._reset_frame_state()

    def _reset_frame_state(self) -> None:
        self.element_count = 0
        self.channel_count = 0
        self.element_ids = [0] * AAC_MAX_SYNTAX_ELEMENTS
        self.element_instance_tags = [0] * AAC_MAX_SYNTAX_ELEMENTS
        self.element_channel_counts = [0] * AAC_MAX_SYNTAX_ELEMENTS

    @property
    def audio_object_id(self) -> int:
        return self.setup.audio_object_id

    @property
    def frame_length(self) -> int:
        return self.setup.frame_length

    ################################################################################
    ## Entry points
    ################################################################################
    def parse(self, adts_frame: AdtsFrame, data: bytes) -> None:
        """Parses one raw data block of the payload of ``adts_frame``."""
        self.setup = replace(self.setup,
                             audio_object_id=adts_frame.audio_object_id,
                             sampling_frequency_index=adts_frame.sampling_frequency_index)
        self.parse_raw(data)

    def parse_raw(self, data: bytes) -> None:
        self.reader.Reset(data)
        self.raw_data_block()

    def _read(self, n: int) -> int:
        val, err = self.reader.ReadBits(n)
        if err is not None:
            raise err
        return val

    def _read_bool(self) -> bool:
        return self._read(1) != 0

    def _skip(self, n: int) -> None:
        if err := self.reader.SkipBits(n):
            raise err

    def _scale_factor(self) -> int:
        val, err = hcod_sf(self.reader)
        if err is not None:
            raise err
        return val - 60

    def _sbr_huff(self, table) -> int:
        val, err = sbr_huff_dec(self.reader, table)
        if err is not None:
            raise err
        return val

    ################################################################################
    ## Table 4.3 – Syntax of top level payload for audio object types AAC Main,
    ##             SSR, LC, and LTP (raw_data_block())
    ################################################################################
    def raw_data_block(self) -> None:
        self._reset_frame_state()

        if self.audio_object_id < AUDIO_OBJECT_TYPE_ER:
            while True:
                id_syn_ele = self._read(3)
                logger.debug("syntax element %s", SyntacticElement[id_syn_ele])

                if id_syn_ele == ID_SCE:
                    self.single_channel_element()
                elif id_syn_ele == ID_CPE:
                    self.channel_pair_element()
                elif id_syn_ele == ID_CCE:
                    self.coupling_channel_element()
                elif id_syn_ele == ID_LFE:
                    self.single_channel_element(ID_LFE)
                elif id_syn_ele == ID_DSE:
                    self.data_stream_element()
                elif id_syn_ele == ID_PCE:
                    self.program_config_element()
                elif id_syn_ele == ID_FIL:
                    self.fill_element(AAC_INVALID_SBR_ELEMENT)
                else:
                    break
        else:
            ################################################################################
            ## Table 4.4 – Syntax of top level payload for ER AAC object types
            ################################################################################
            sequence = ER_ELEMENT_SEQUENCES.get(self.setup.channel_config, ())
            if not sequence:
                logger.debug("no channel elements for channel configuration %d", self.setup.channel_config)
            for id_syn_ele in sequence:
                if id_syn_ele == ID_SCE:
                    self.single_channel_element()
                else:
                    self.channel_pair_element()

        self.reader.ByteAlign()

    ################################################################################
    ## Table 4.4 – Syntax of single_channel_element()
    ################################################################################
    def single_channel_element(self, id_syn_ele: int = ID_SCE) -> None:
        if self.element_count + 1 > AAC_MAX_SYNTAX_ELEMENTS:
            raise NotImplementedFeatureError(f"frames with more than {AAC_MAX_SYNTAX_ELEMENTS} syntax elements are not supported")

        self.element_ids[self.element_count] = id_syn_ele
        self.element_channel_counts[self.element_count] = 1
        self.element_instance_tags[self.element_count] = self._read(4)
        self.common_window = False

        self.individual_channel_stream(self.ics1, False)

        # a fill element directly after the channel element may carry its SBR data
        if self.reader.PeekBits(3)[0] == ID_FIL and self.reader.BitsLeft() >= 3:
            self._skip(3)
            self.fill_element(self.element_count)

        self.channel_count += 1
        self.element_count += 1

    ################################################################################
    ## Table 4.5 – Syntax of channel_pair_element()
    ################################################################################
    def channel_pair_element(self) -> None:
        if self.element_count + 2 > AAC_MAX_SYNTAX_ELEMENTS:
            raise NotImplementedFeatureError(f"frames with more than {AAC_MAX_SYNTAX_ELEMENTS} syntax elements are not supported")

        self.element_ids[self.element_count] = ID_CPE
        self.element_channel_counts[self.element_count] = 2
        self.element_instance_tags[self.element_count] = self._read(4)

        self.common_window = self._read_bool()
        if self.common_window:
            ics1 = self.ics1
            self.ics_info(ics1)
            ics1.Ms_mask_present = self._read(2)
            if ics1.Ms_mask_present == 1:
                for g in range(ics1.num_window_groups):
                    for sfb in range(ics1.Max_sfb):
                        ics1.Ms_used[g, sfb] = self._read_bool()
            if self.audio_object_id >= AUDIO_OBJECT_TYPE_ER and ics1.Predictor_data_present:
                ics1.Ltp1.Data_present = self._read_bool()
                if ics1.Ltp1.Data_present:
                    self.ltp_data(ics1, ics1.Ltp1)
            self.ics2 = copy.deepcopy(ics1)
        else:
            self.ics1.Ms_mask_present = 0

        self.individual_channel_stream(self.ics1, False)
        if self.common_window and self.audio_object_id >= AUDIO_OBJECT_TYPE_ER and self.ics1.Predictor_data_present:
            self.ics1.Ltp2.Data_present = self._read_bool()
            if self.ics1.Ltp2.Data_present:
                self.ltp_data(self.ics1, self.ics1.Ltp2)
        self.individual_channel_stream(self.ics2, False)

        if self.reader.PeekBits(3)[0] == ID_FIL and self.reader.BitsLeft() >= 3:
            self._skip(3)
            self.fill_element(self.element_count)

        self.channel_count += 2
        self.element_count += 1

    ################################################################################
    ## Table 4.6 – Syntax of ics_info()
    ################################################################################
    def ics_info(self, info: 'ics_info') -> None:
        if self._read(1) != 0:
            raise InvalidDataError("ics_reserved_bit must equal 0")

        info.Window_sequence = self._read(2)
        info.Window_shape = self._read(1)
        if self.audio_object_id == AUDIO_OBJECT_TYPE_ER_AAC_LD and info.Window_sequence != ONLY_LONG_SEQUENCE:
            raise InvalidDataError("no block switching in AAC LD")

        if info.Window_sequence == EIGHT_SHORT_SEQUENCE:
            info.Max_sfb = self._read(4)
            info.Scale_factor_grouping = self._read(7)
        else:
            info.Max_sfb = self._read(6)

        window_grouping(info, self.setup)

        info.Predictor_data_present = False
        info.Ltp1.Data_present = False
        info.Ltp2.Data_present = False
        if info.Window_sequence == EIGHT_SHORT_SEQUENCE:
            return

        info.Predictor_data_present = self._read_bool()
        if not info.Predictor_data_present:
            return

        if self.audio_object_id == AUDIO_OBJECT_TYPE_AAC_MAIN:
            # MPEG-2 style AAC predictor
            p = info.Predictor
            p.Predictor_reset = self._read_bool()
            if p.Predictor_reset:
                p.Predictor_reset_group_number = self._read(5)
            p.Max_sfb = min(info.Max_sfb, MAX_PREDICTION_SFB[self.setup.sampling_frequency_index])
            p.Prediction_used = [self._read_bool() for _ in range(p.Max_sfb)]
        else:
            if self.audio_object_id < AUDIO_OBJECT_TYPE_ER:
                info.Ltp1.Data_present = self._read_bool()
                if info.Ltp1.Data_present:
                    self.ltp_data(info, info.Ltp1)
                if self.common_window:
                    info.Ltp2.Data_present = self._read_bool()
                    if info.Ltp2.Data_present:
                        self.ltp_data(info, info.Ltp2)
            if not self.common_window and self.audio_object_id >= AUDIO_OBJECT_TYPE_ER:
                info.Ltp1.Data_present = self._read_bool()
                if info.Ltp1.Data_present:
                    self.ltp_data(info, info.Ltp1)

    ################################################################################
    ## Table 4.7 – Syntax of pulse_data()
    ################################################################################
    def pulse_data(self, info: 'ics_info') -> None:
        data = info.Pulse_data
        data.Number_pulse = self._read(2)
        data.Pulse_start_sfb = self._read(6)
        if data.Pulse_start_sfb > info.num_swb:
            raise InvalidDataError(f"pulse_start_sfb ({data.Pulse_start_sfb}) exceeds the number of scalefactor bands ({info.num_swb})")

        data.Pulse_offset = [0] * (data.Number_pulse + 1)
        data.Pulse_amp = [0] * (data.Number_pulse + 1)
        for i in range(data.Number_pulse + 1):
            data.Pulse_offset[i] = self._read(5)
            data.Pulse_amp[i] = self._read(4)

    ################################################################################
    ## Table 4.8 – Syntax of coupling_channel_element()
    ################################################################################
    def coupling_channel_element(self) -> None:
        e = coupling_channel_element()
        e.Element_instance_tag = self._read(4)
        e.Ind_sw_cce_flag = self._read_bool()
        e.Num_coupled_elements = self._read(3)

        num_gain_element_lists = 0
        for c in range(e.Num_coupled_elements):
            num_gain_element_lists += 1
            is_cpe = self._read_bool()
            e.Cc_target_is_cpe.append(is_cpe)
            e.Cc_target_tag_select.append(self._read(4))
            cc_l = cc_r = False
            if is_cpe:
                cc_l = self._read_bool()
                cc_r = self._read_bool()
                if cc_l and cc_r:
                    num_gain_element_lists += 1
            e.Cc_l.append(cc_l)
            e.Cc_r.append(cc_r)

        e.Cc_domain = self._read_bool()
        e.Gain_element_sign = self._read_bool()
        e.Gain_element_scale = self._read(2)

        self.common_window = False
        self.individual_channel_stream(e.Channel_stream, False)

        info = e.Channel_stream
        for c in range(1, num_gain_element_lists):
            cge = True if e.Ind_sw_cce_flag else self._read_bool()
            e.Common_gain_element_present.append(cge)
            if cge:
                e.Common_gain_element.append(self._scale_factor())
            else:
                gains = np.zeros((info.num_window_groups, info.Max_sfb), dtype=np.int16)
                for g in range(info.num_window_groups):
                    for sfb in range(info.Max_sfb):
                        if info.sfb_cb[g, sfb] != ZERO_HCB:
                            gains[g, sfb] = self._scale_factor()
                e.dpcm_gain_element.append(gains)

        self.cce = e

    ################################################################################
    ## Table 4.10 – Syntax of data_stream_element()
    ################################################################################
    def data_stream_element(self) -> None:
        e = data_stream_element()
        e.Element_instance_tag = self._read(4)
        e.Data_byte_align_flag = self._read_bool()
        e.Count = self._read(8)
        if e.Count == 255:
            e.Esc_count = self._read(8)
            e.Count += e.Esc_count

        if e.Data_byte_align_flag:
            self.reader.ByteAlign()

        data, err = self.reader.ReadBitsToByteArray(8 * e.Count)
        if err is not None:
            raise err
        e.Data_stream_byte = bytes(data)
        self.dse = e

    ################################################################################
    ## Table 4.2 – Syntax of program_config_element()
    ################################################################################
    def program_config_element(self) -> None:
        e = program_config_element()
        e.Element_instance_tag = self._read(4)

        e.Object_type = self._read(2)
        e.Sampling_frequency_index = self._read(4)
        e.Num_front_channel_elements = self._read(4)
        e.Num_side_channel_elements = self._read(4)
        e.Num_back_channel_elements = self._read(4)
        e.Num_lfe_channel_elements = self._read(2)
        e.Num_assoc_data_elements = self._read(3)
        e.Num_valid_cc_elements = self._read(4)

        e.Mono_mixdown_present = self._read_bool()
        if e.Mono_mixdown_present:
            e.Mono_mixdown_element_num = self._read(4)

        e.Stereo_mixdown_present = self._read_bool()
        if e.Stereo_mixdown_present:
            e.Stereo_mixdown_element_num = self._read(4)

        e.Matrix_mixdown_idx_present = self._read_bool()
        if e.Matrix_mixdown_idx_present:
            e.Matrix_mixdown_idx = self._read(2)
            e.Pseudo_surround_enable = self._read_bool()

        e.Front_element_is_cpe, e.Front_element_tag_select, e.Front_channel_count = \
            self._pce_channel_elements(e, e.Num_front_channel_elements)
        e.Side_element_is_cpe, e.Side_element_tag_select, e.Side_channel_count = \
            self._pce_channel_elements(e, e.Num_side_channel_elements)
        e.Back_element_is_cpe, e.Back_element_tag_select, e.Back_channel_count = \
            self._pce_channel_elements(e, e.Num_back_channel_elements)

        e.Lfe_element_tag_select = [0] * e.Num_lfe_channel_elements
        for i in range(e.Num_lfe_channel_elements):
            e.Lfe_element_tag_select[i] = self._read(4)
            e.Sce_channel[e.Lfe_element_tag_select[i]] = e.Channels
            e.Lfe_channel_count += 1
            e.Channels += 1

        e.Assoc_data_element_tag_select = [self._read(4) for _ in range(e.Num_assoc_data_elements)]

        e.Cc_element_is_ind_sw = [False] * e.Num_valid_cc_elements
        e.Valid_cc_element_tag_select = [0] * e.Num_valid_cc_elements
        for i in range(e.Num_valid_cc_elements):
            e.Cc_element_is_ind_sw[i] = self._read_bool()
            e.Valid_cc_element_tag_select[i] = self._read(4)

        self.reader.ByteAlign()
        e.Comment_field_bytes = self._read(8)
        data, err = self.reader.ReadBitsToByteArray(8 * e.Comment_field_bytes)
        if err is not None:
            raise err
        e.Comment_field_data = bytes(data)

        self.pce = e
        if e.Channels > AAC_MAX_CHANNELS:
            raise NotImplementedFeatureError(f"program config with {e.Channels} channels exceeds the supported maximum of {AAC_MAX_CHANNELS}")

    def _pce_channel_elements(self, e: 'program_config_element', count: int) -> tuple:
        is_cpe = [False] * count
        tag_select = [0] * count
        channels = 0
        for i in range(count):
            is_cpe[i] = self._read_bool()
            tag_select[i] = self._read(4)
            if is_cpe[i]:
                e.Cpe_channel[tag_select[i]] = e.Channels
                channels += 2
                e.Channels += 2
            else:
                e.Sce_channel[tag_select[i]] = e.Channels
                channels += 1
                e.Channels += 1
        return is_cpe, tag_select, channels

    ################################################################################
    ## Table 4.11 – Syntax of fill_element()
    ################################################################################
    def fill_element(self, sbr_element: int = AAC_INVALID_SBR_ELEMENT) -> None:
        count = self._read(4)
        if count == 15:
            count += self._read(8) - 1

        while count > 0:
            extension_type = self._read(4)

            if extension_type == EXT_DYNAMIC_RANGE:
                count -= self.dynamic_range_info()

            elif extension_type in (EXT_SBR_DATA, EXT_SBR_DATA_CRC):
                if sbr_element == AAC_INVALID_SBR_ELEMENT:
                    raise InvalidDataError("SBR data outside of a channel element")
                if self.sbr_elements[sbr_element] is None:
                    self.sbr_elements[sbr_element] = self.make_sbr_info(sbr_element)
                sbr = self.sbr_elements[sbr_element]

                start = self.reader.BitPosition()
                try:
                    self.sbr_extension_data(sbr, extension_type == EXT_SBR_DATA_CRC)
                except TagParserError:
                    sbr.Reset = 1
                    raise

                # remaining bits of the payload are bs_fill_bits
                consumed = self.reader.BitPosition() - start + 4
                if consumed > 8 * count:
                    sbr.Reset = 1
                    raise InvalidDataError(f"SBR extension data ({consumed} bits) overruns the fill element ({8 * count} bits)")
                self._skip(8 * count - consumed)

                self.sbr_present = True
                if sbr.Ps_used:
                    self.ps_used[sbr_element] = 1
                    self.ps_present = True
                count = 0

            elif extension_type == EXT_DATA_ELEMENT:
                if self._read(4) == ANC_DATA:
                    data_element_length = 0
                    loop_counter = 0
                    while True:
                        part = self._read(8)
                        data_element_length += part
                        loop_counter += 1
                        if part != 255:
                            break
                    self._skip(8 * data_element_length)
                    count -= data_element_length + loop_counter + 1
                else:
                    self._skip(8 * (count - 1))
                    count = 0

            else:
                # EXT_FILL, EXT_FILL_DATA, EXT_SAC_DATA and reserved types
                self._skip(4 + 8 * (count - 1))
                count = 0

    ################################################################################
    ## Table 4.12 – Syntax of gain_control_data()
    ################################################################################
    def gain_control_data(self, info: 'ics_info') -> None:
        data = info.Gain_control_data
        data.Max_band = self._read(2)

        if info.Window_sequence == ONLY_LONG_SEQUENCE:
            windows, loc_bits = 1, (5,)
        elif info.Window_sequence == LONG_START_SEQUENCE:
            windows, loc_bits = 2, (4, 2)
        elif info.Window_sequence == EIGHT_SHORT_SEQUENCE:
            windows, loc_bits = 8, (2,) * 8
        else:
            windows, loc_bits = 2, (4, 5)

        data.Adjust_num = [[0] * windows for _ in range(data.Max_band + 1)]
        data.Alevcode = [[[] for _ in range(windows)] for _ in range(data.Max_band + 1)]
        data.Aloccode = [[[] for _ in range(windows)] for _ in range(data.Max_band + 1)]
        for bd in range(1, data.Max_band + 1):
            for wd in range(windows):
                data.Adjust_num[bd][wd] = self._read(3)
                for ad in range(data.Adjust_num[bd][wd]):
                    data.Alevcode[bd][wd].append(self._read(4))
                    data.Aloccode[bd][wd].append(self._read(loc_bits[wd]))

    ################################################################################
    ## Table 4.50 – Syntax of individual_channel_stream()
    ################################################################################
    def individual_channel_stream(self, info: 'ics_info', scale_flag: bool) -> None:
        self.side_info(info, scale_flag)

        if self.audio_object_id >= AUDIO_OBJECT_TYPE_ER and info.Tns_data_present:
            self.tns_data(info)

        if self.audio_object_id == AUDIO_OBJECT_TYPE_ER_PARAMETRIC:
            raise NotImplementedFeatureError("ER parametric streams are not supported")

        if self.setup.spectral_data_resilience:
            raise NotImplementedFeatureError("reordered spectral data is not supported")
        self.spectral_data(info)

        if info.Pulse_data_present and info.Window_sequence == EIGHT_SHORT_SEQUENCE:
            raise InvalidDataError("pulse coding is not allowed for short blocks")

    def side_info(self, info: 'ics_info', scale_flag: bool) -> None:
        info.Global_gain = self._read(8)
        if not self.common_window and not scale_flag:
            self.ics_info(info)

        self.section_data(info)
        if self.setup.scalefactor_data_resilience:
            self.rvlc_scale_factor_data(info)
        else:
            self.scale_factor_data(info)

        info.Pulse_data_present = False
        info.Tns_data_present = False
        info.Gain_control_data_present = False
        if scale_flag:
            return

        info.Pulse_data_present = self._read_bool()
        if info.Pulse_data_present:
            self.pulse_data(info)

        # ER streams carry tns_data() after the side info
        info.Tns_data_present = self._read_bool()
        if info.Tns_data_present and self.audio_object_id < AUDIO_OBJECT_TYPE_ER:
            self.tns_data(info)

        info.Gain_control_data_present = self._read_bool()
        if info.Gain_control_data_present:
            if self.audio_object_id != AUDIO_OBJECT_TYPE_SSR:
                raise InvalidDataError("gain control data is only allowed for AAC SSR")
            self.gain_control_data(info)

    ################################################################################
    ## Table 4.52 – Syntax of section_data()
    ################################################################################
    def section_data(self, info: 'ics_info') -> None:
        resilience = self.setup.section_data_resilience
        if info.Window_sequence == EIGHT_SHORT_SEQUENCE:
            bits = 3
            upper_bound = MAX_SECTIONS_SHORT
        else:
            bits = 5
            upper_bound = AAC_MAX_SFB
        sect_esc_val = (1 << bits) - 1

        info.reset_sections()
        for g in range(info.num_window_groups):
            k = 0
            i = 0
            while k < info.Max_sfb:
                sect_cb = self._read(5 if resilience else 4)
                sect_len = 0
                if not resilience or sect_cb < ESC_HCB or ESC_HCB < sect_cb < 16:
                    sect_len_incr = self._read(bits)
                    while sect_len_incr == sect_esc_val:
                        sect_len += sect_len_incr
                        sect_len_incr = self._read(bits)
                else:
                    sect_len_incr = 1
                sect_len += sect_len_incr

                # sections tile exactly max_sfb bands
                if k + sect_len > info.Max_sfb:
                    raise InvalidDataError(f"section ends at band {k + sect_len} beyond max_sfb ({info.Max_sfb})")
                if i >= upper_bound:
                    raise InvalidDataError(f"too many sections ({i + 1}, at most {upper_bound})")

                info.Sect_cb[g, i] = sect_cb
                info.sect_start[g, i] = k
                info.sect_end[g, i] = k + sect_len
                info.sfb_cb[g, k:k + sect_len] = sect_cb

                k += sect_len
                i += 1

            info.num_sec[g] = i

    ################################################################################
    ## Table 4.53 – Syntax of scale_factor_data()
    ################################################################################
    def scale_factor_data(self, info: 'ics_info') -> None:
        noise_pcm_flag = True
        scale_factor = info.Global_gain
        is_position = 0
        noise_energy = info.Global_gain - 90

        for g in range(info.num_window_groups):
            for sfb in range(info.Max_sfb):
                cb = info.sfb_cb[g, sfb]
                if cb == ZERO_HCB:
                    info.scale_factors[g, sfb] = 0
                elif is_intensity(info, g, sfb) != 0:
                    is_position += self._scale_factor()
                    info.scale_factors[g, sfb] = is_position
                elif is_noise(info, g, sfb):
                    if noise_pcm_flag:
                        noise_pcm_flag = False
                        noise_energy += self._read(9)
                    else:
                        noise_energy += self._scale_factor()
                    info.scale_factors[g, sfb] = noise_energy
                else:
                    scale_factor += self._scale_factor()
                    if scale_factor < 0 or scale_factor > 255:
                        raise InvalidDataError(f"scale factor ({scale_factor}) out of range (0-255)")
                    info.scale_factors[g, sfb] = scale_factor

    ################################################################################
    ## Table 4.148 – Syntax of rvlc_sf_data()
    ################################################################################
    def rvlc_scale_factor_data(self, info: 'ics_info') -> None:
        noise_used = any(is_noise(info, g, sfb)
                         for g in range(info.num_window_groups) for sfb in range(info.Max_sfb))

        info.Sf_concealment = self._read_bool()
        info.Rev_global_gain = self._read(8)
        info.Len_of_rvlc_sf = self._read(11 if info.Window_sequence == EIGHT_SHORT_SEQUENCE else 9)
        if noise_used:
            info.dpcm_noise_nrg = self._read(9)
            info.Len_of_rvlc_sf = max(0, info.Len_of_rvlc_sf - 9)

        # reversible variable length codes are skipped, scale factors stay zero
        self._skip(info.Len_of_rvlc_sf)
        info.scale_factors[:] = 0

        info.Sf_escapes_present = self._read_bool()
        if info.Sf_escapes_present:
            info.Len_of_rvlc_escapes = self._read(8)
            self._skip(info.Len_of_rvlc_escapes)

        if noise_used:
            info.dpcm_noise_last_pos = self._read(9)

    ################################################################################
    ## Table 4.54 – Syntax of tns_data()
    ################################################################################
    def tns_data(self, info: 'ics_info') -> None:
        data = tns_data()
        if info.Window_sequence == EIGHT_SHORT_SEQUENCE:
            filt_bits, len_bits, order_bits = 1, 4, 3
        else:
            filt_bits, len_bits, order_bits = 2, 6, 5

        data.N_filt = [0] * info.num_windows
        data.Coef_res = [0] * info.num_windows
        for w in range(info.num_windows):
            data.N_filt[w] = self._read(filt_bits)
            start_coef_bits = 3
            if data.N_filt[w]:
                data.Coef_res[w] = self._read(1)
                start_coef_bits = 4 if data.Coef_res[w] else 3

            data.Len.append([0] * data.N_filt[w])
            data.Order.append([0] * data.N_filt[w])
            data.Direction.append([False] * data.N_filt[w])
            data.Coef_compress.append([0] * data.N_filt[w])
            data.Coef.append([[] for _ in range(data.N_filt[w])])

            for filt in range(data.N_filt[w]):
                data.Len[w][filt] = self._read(len_bits)
                data.Order[w][filt] = self._read(order_bits)
                if data.Order[w][filt]:
                    data.Direction[w][filt] = self._read_bool()
                    data.Coef_compress[w][filt] = self._read(1)
                    coef_bits = start_coef_bits - data.Coef_compress[w][filt]
                    data.Coef[w][filt] = [self._read(coef_bits) for _ in range(data.Order[w][filt])]

        info.Tns_data = data

    ################################################################################
    ## Table 4.55 – Syntax of ltp_data()
    ################################################################################
    def ltp_data(self, info: 'ics_info', data: 'ltp_data') -> None:
        data.Ltp_lag = 0
        if self.audio_object_id == AUDIO_OBJECT_TYPE_ER_AAC_LD:
            data.Ltp_lag_update = self._read_bool()
            if data.Ltp_lag_update:
                data.Ltp_lag = self._read(10)
        else:
            data.Ltp_lag = self._read(11)

        if data.Ltp_lag > (self.frame_length << 1):
            raise InvalidDataError(f"Ltp_lag ({data.Ltp_lag}) out of range ({self.frame_length << 1})")

        data.Ltp_coef = self._read(3)
        if info.Window_sequence == EIGHT_SHORT_SEQUENCE:
            data.Ltp_short_used = [False] * info.num_windows
            data.Ltp_short_lag_present = [False] * info.num_windows
            data.Ltp_short_lag = [0] * info.num_windows
            for w in range(info.num_windows):
                data.Ltp_short_used[w] = self._read_bool()
                if data.Ltp_short_used[w]:
                    data.Ltp_short_lag_present[w] = self._read_bool()
                    if data.Ltp_short_lag_present[w]:
                        data.Ltp_short_lag[w] = self._read(4)
        else:
            data.Last_band = min(info.Max_sfb, MAX_LTP_LONG_SFB)
            data.Ltp_long_used = [self._read_bool() for _ in range(data.Last_band)]

    ################################################################################
    ## Table 4.56 – Syntax of spectral_data()
    ################################################################################
    def spectral_data(self, info: 'ics_info') -> None:
        data = spectral_data()

        for g in range(info.num_window_groups):
            for i in range(info.num_sec[g]):
                cb = int(info.Sect_cb[g, i])
                if cb in (ZERO_HCB, NOISE_HCB, INTENSITY_HCB, INTENSITY_HCB2):
                    continue

                inc = 2 if cb >= FIRST_PAIR_HCB else 4
                start = info.sect_sfb_offset[g, info.sect_start[g, i]]
                end = info.sect_sfb_offset[g, info.sect_end[g, i]]
                for k in range(start, end, inc):
                    val, err = hcod(self.reader, cb, self.diag)
                    if err is not None:
                        raise err
                    data.Hcod.append(val)
                    data.Codebooks.append(cb)

        info.Spectral_data = data

    ################################################################################
    ## Table 4.58 – Syntax of dynamic_range_info()
    ################################################################################
    def dynamic_range_info(self) -> int:
        info = dynamic_range_info()
        n = 1
        drc_num_bands = 1

        info.Pce_tag_present = self._read_bool()
        if info.Pce_tag_present:
            info.Pce_instance_tag = self._read(4)
            info.Drc_tag_reserve_bits = self._read(4)
            n += 1

        info.Excluded_chns_present = self._read_bool()
        if info.Excluded_chns_present:
            n += self.excluded_channels(info)

        info.Drc_bands_present = self._read_bool()
        if info.Drc_bands_present:
            info.Drc_band_incr = self._read(4)
            info.Drc_interpolation_scheme = self._read(4)
            n += 1
            drc_num_bands += info.Drc_band_incr
            info.Drc_band_top = [0] * drc_num_bands
            for i in range(drc_num_bands):
                info.Drc_band_top[i] = self._read(8)
                n += 1

        info.Prog_ref_level_present = self._read_bool()
        if info.Prog_ref_level_present:
            info.Prog_ref_level = self._read(7)
            info.Prog_ref_level_reserved_bits = self._read(1)
            n += 1

        info.Dyn_range_sign = [0] * drc_num_bands
        info.Dyn_range_cnt = [0] * drc_num_bands
        for i in range(drc_num_bands):
            info.Dyn_range_sign[i] = self._read(1)
            info.Dyn_range_cnt[i] = self._read(7)
            n += 1

        info.Num_bands = drc_num_bands
        self.drc = info
        return n

    ################################################################################
    ## Table 4.59 – Syntax of excluded_channels()
    ################################################################################
    def excluded_channels(self, info: 'dynamic_range_info') -> int:
        n = 0
        info.Exclude_mask = [self._read_bool() for _ in range(7)]
        n += 1

        info.Additional_excluded_chns = [self._read_bool()]
        while info.Additional_excluded_chns[-1]:
            info.Exclude_mask.extend(self._read_bool() for _ in range(7))
            n += 1
            info.Additional_excluded_chns.append(self._read_bool())

        return n

    ################################################################################
    ## SBR
    ################################################################################
    def make_sbr_info(self, sbr_element: int) -> 'AacSbrInfo':
        ext_index = self.setup.extension_sampling_frequency_index
        if ext_index is not None and 0 <= ext_index < 12:
            sampling_frequency = SamplingFrequency[ext_index]
        else:
            sampling_frequency = SamplingFrequency[self.setup.sampling_frequency_index] * 2
        logger.debug("creating SBR element %d at %d Hz", sbr_element, sampling_frequency)
        return AacSbrInfo(self.element_ids[sbr_element], sampling_frequency, self.frame_length)

    ################################################################################
    ## Table 4.62 – Syntax of sbr_extension_data()
    ################################################################################
    def sbr_extension_data(self, sbr: 'AacSbrInfo', crc_flag: bool) -> None:
        if self.ps_reset_flag:
            sbr.Ps_reset_flag = 1

        if not sbr.Is_drm and crc_flag:
            sbr.Bs_sbr_crc_bits = self._read(10)

        sbr.Bs_header_flag = self._read_bool()
        if sbr.Bs_header_flag:
            self.sbr_header(sbr.Sbr_header)
            sbr.Header_count += 1

        if not sbr.Header_count:
            return

        if sbr.Reset or sbr.Bs_header_flag:
            h = sbr.Sbr_header
            derive_sbr_tables(sbr, sbr.Sfi, h.Bs_start_freq, h.Bs_stop_freq,
                              h.Bs_freq_scale, h.Bs_alter_scale, h.Bs_xover_band)
            sbr.Reset = 0

        sbr.Rate = 2 if sbr.Bs_samplerate_mode else 1
        if sbr.Aac_element_id == ID_SCE:
            self.sbr_single_channel_element(sbr)
        elif sbr.Aac_element_id == ID_CPE:
            self.sbr_channel_pair_element(sbr)

    ################################################################################
    ## Table 4.63 – Syntax of sbr_header()
    ################################################################################
    def sbr_header(self, data: 'sbr_header') -> None:
        data.Bs_amp_res = self._read(1)
        data.Bs_start_freq = self._read(4)
        data.Bs_stop_freq = self._read(4)
        data.Bs_xover_band = self._read(3)
        data.Bs_reserved = self._read(2)

        data.Bs_header_extra_1 = self._read_bool()
        data.Bs_header_extra_2 = self._read_bool()
        if data.Bs_header_extra_1:
            data.Bs_freq_scale = self._read(2)
            data.Bs_alter_scale = self._read(1)
            data.Bs_noise_bands = self._read(2)
        else:
            data.Bs_freq_scale = 2
            data.Bs_alter_scale = 1
            data.Bs_noise_bands = 2

        if data.Bs_header_extra_2:
            data.Bs_limiter_bands = self._read(2)
            data.Bs_limiter_gains = self._read(2)
            data.Bs_interpol_freq = self._read(1)
            data.Bs_smoothing_mode = self._read(1)
        else:
            data.Bs_limiter_bands = 2
            data.Bs_limiter_gains = 2
            data.Bs_interpol_freq = 1
            data.Bs_smoothing_mode = 1

    ################################################################################
    ## Table 4.65 – Syntax of sbr_single_channel_element()
    ################################################################################
    def sbr_single_channel_element(self, sbr: 'AacSbrInfo') -> None:
        if self._read_bool():  # bs_data_extra
            self._skip(4)
        if sbr.Is_drm:
            self._skip(1)

        self.sbr_grid(sbr, 0)
        self.sbr_dtdf(sbr, 0)
        self.sbr_invf(sbr, 0)
        self.sbr_envelope(sbr, 0)
        self.sbr_noise(sbr, 0)

        sbr.Bs_add_harmonic_flag[0] = self._read_bool()
        if sbr.Bs_add_harmonic_flag[0]:
            self.sbr_sinusoidal_coding(sbr, 0)

        self.sbr_extended_data(sbr)

    ################################################################################
    ## Table 4.66 – Syntax of sbr_channel_pair_element()
    ################################################################################
    def sbr_channel_pair_element(self, sbr: 'AacSbrInfo') -> None:
        if self._read_bool():  # bs_data_extra
            self._skip(8)

        sbr.Bs_coupling = self._read_bool()
        if sbr.Bs_coupling:
            self.sbr_grid(sbr, 0)
            grid_copy(sbr)
            self.sbr_dtdf(sbr, 0)
            self.sbr_dtdf(sbr, 1)
            self.sbr_invf(sbr, 0)
            sbr.Bs_invf_mode_prev[1] = sbr.Bs_invf_mode[1]
            sbr.Bs_invf_mode[1] = sbr.Bs_invf_mode[0]
            self.sbr_envelope(sbr, 0)
            self.sbr_noise(sbr, 0)
            self.sbr_envelope(sbr, 1)
            self.sbr_noise(sbr, 1)
        else:
            self.sbr_grid(sbr, 0)
            self.sbr_grid(sbr, 1)
            self.sbr_dtdf(sbr, 0)
            self.sbr_dtdf(sbr, 1)
            self.sbr_invf(sbr, 0)
            self.sbr_invf(sbr, 1)
            self.sbr_envelope(sbr, 0)
            self.sbr_envelope(sbr, 1)
            self.sbr_noise(sbr, 0)
            self.sbr_noise(sbr, 1)

        for ch in range(2):
            sbr.Bs_add_harmonic_flag[ch] = self._read_bool()
            if sbr.Bs_add_harmonic_flag[ch]:
                self.sbr_sinusoidal_coding(sbr, ch)

        self.sbr_extended_data(sbr)

    def sbr_extended_data(self, sbr: 'AacSbrInfo') -> None:
        sbr.Bs_extended_data = self._read_bool()
        if not sbr.Bs_extended_data:
            return

        cnt = self._read(4)
        if cnt == 15:
            cnt += self._read(8)

        num_bits_left = 8 * cnt
        while num_bits_left > 7:
            sbr.Bs_extension_id = self._read(2)
            bits_read = 2 + self.sbr_extension(sbr, sbr.Bs_extension_id, num_bits_left)
            if bits_read > num_bits_left:
                raise InvalidDataError("SBR extension overran the available bits")
            num_bits_left -= bits_read

        if num_bits_left:
            self._skip(num_bits_left)

    ################################################################################
    ## Table 4.69 – Syntax of sbr_grid()
    ################################################################################
    def sbr_grid(self, sbr: 'AacSbrInfo', ch: int) -> None:
        if sbr.le[ch] > 0:
            sbr.f_prev[ch] = sbr.f[ch, sbr.le[ch] - 1]
        sbr.le_prev[ch] = sbr.le[ch]

        sbr.Bs_frame_class[ch] = self._read(2)
        frame_class = sbr.Bs_frame_class[ch]
        sbr.Bs_rel_bord[ch] = []
        sbr.Bs_rel_bord_0[ch] = []
        sbr.Bs_rel_bord_1[ch] = []

        if frame_class == FIXFIX:
            tmp = self._read(2)
            sbr.Abs_bord_lead[ch] = 0
            sbr.Abs_bord_trail[ch] = sbr.Time_slots
            bs_num_env = min(1 << tmp, 5)
            sbr.Rel_lead_count[ch] = bs_num_env - 1
            sbr.Rel_trail_count[ch] = 0
            sbr.f[ch, :bs_num_env] = self._read(1)
            sbr.Bs_pointer[ch] = 0

        elif frame_class == FIXVAR:
            sbr.Abs_bord_lead[ch] = 0
            sbr.Abs_bord_trail[ch] = self._read(2) + sbr.Time_slots
            num_rel = self._read(2)
            sbr.Rel_lead_count[ch] = 0
            sbr.Rel_trail_count[ch] = num_rel
            sbr.Bs_rel_bord[ch] = [2 * self._read(2) + 2 for _ in range(num_rel)]
            sbr.Bs_pointer[ch] = self._read(ceil_log2(num_rel + 2))
            bs_num_env = num_rel + 1
            for env in range(bs_num_env):
                sbr.f[ch, num_rel - env] = self._read(1)

        elif frame_class == VARFIX:
            sbr.Abs_bord_lead[ch] = self._read(2)
            sbr.Abs_bord_trail[ch] = sbr.Time_slots
            num_rel = self._read(2)
            sbr.Rel_lead_count[ch] = num_rel
            sbr.Rel_trail_count[ch] = 0
            sbr.Bs_rel_bord[ch] = [2 * self._read(2) + 2 for _ in range(num_rel)]
            sbr.Bs_pointer[ch] = self._read(ceil_log2(num_rel + 2))
            bs_num_env = num_rel + 1
            for env in range(bs_num_env):
                sbr.f[ch, env] = self._read(1)

        else:
            sbr.Abs_bord_lead[ch] = self._read(2)
            sbr.Abs_bord_trail[ch] = self._read(2) + sbr.Time_slots
            sbr.Bs_rel_count_0[ch] = self._read(2)
            sbr.Bs_rel_count_1[ch] = self._read(2)
            rel_0 = sbr.Bs_rel_count_0[ch]
            rel_1 = sbr.Bs_rel_count_1[ch]
            bs_num_env = min(5, rel_0 + rel_1 + 1)
            sbr.Bs_rel_bord_0[ch] = [2 * self._read(2) + 2 for _ in range(rel_0)]
            sbr.Bs_rel_bord_1[ch] = [2 * self._read(2) + 2 for _ in range(rel_1)]
            sbr.Bs_pointer[ch] = self._read(ceil_log2(rel_0 + rel_1 + 2))
            for env in range(bs_num_env):
                sbr.f[ch, env] = self._read(1)
            sbr.Rel_lead_count[ch] = rel_0
            sbr.Rel_trail_count[ch] = rel_1

        sbr.le[ch] = min(bs_num_env, 5 if frame_class == VARVAR else 4)
        if sbr.le[ch] <= 0:
            raise InvalidDataError(f"number of SBR envelopes ({sbr.le[ch]}) out of range")
        sbr.lq[ch] = 2 if sbr.le[ch] > 1 else 1

    ################################################################################
    ## Table 4.70 – Syntax of sbr_dtdf()
    ################################################################################
    def sbr_dtdf(self, sbr: 'AacSbrInfo', ch: int) -> None:
        sbr.Bs_df_env[ch] = [self._read(1) for _ in range(sbr.le[ch])]
        sbr.Bs_df_noise[ch] = [self._read(1) for _ in range(sbr.lq[ch])]

    ################################################################################
    ## Table 4.71 – Syntax of sbr_invf()
    ################################################################################
    def sbr_invf(self, sbr: 'AacSbrInfo', ch: int) -> None:
        sbr.Bs_invf_mode_prev[ch] = sbr.Bs_invf_mode[ch]
        sbr.Bs_invf_mode[ch] = [self._read(2) for _ in range(sbr.N_Q)]

    ################################################################################
    ## Table 4.72 – Syntax of sbr_envelope()
    ################################################################################
    def sbr_envelope(self, sbr: 'AacSbrInfo', ch: int) -> None:
        if sbr.le[ch] == 1 and sbr.Bs_frame_class[ch] == FIXFIX:
            sbr.Amp_res[ch] = 0
        else:
            sbr.Amp_res[ch] = sbr.Sbr_header.Bs_amp_res

        coupled = sbr.Bs_coupling and ch == 1
        delta = 1 if coupled else 0
        if coupled:
            if sbr.Amp_res[ch]:
                t_huff, f_huff, start_bits = t_huffman_env_bal_3_0dB, f_huffman_env_bal_3_0dB, 5
            else:
                t_huff, f_huff, start_bits = t_huffman_env_bal_1_5dB, f_huffman_env_bal_1_5dB, 6
        else:
            if sbr.Amp_res[ch]:
                t_huff, f_huff, start_bits = t_huffman_env_3_0dB, f_huffman_env_3_0dB, 6
            else:
                t_huff, f_huff, start_bits = t_huffman_env_1_5dB, f_huffman_env_1_5dB, 7

        for env in range(sbr.le[ch]):
            num_bands = sbr.n[sbr.f[ch, env]]
            if not sbr.Bs_df_env[ch][env]:
                sbr.E[ch, 0, env] = self._read(start_bits) << delta
                for band in range(1, num_bands):
                    sbr.E[ch, band, env] = self._sbr_huff(f_huff) << delta
            else:
                for band in range(num_bands):
                    sbr.E[ch, band, env] = self._sbr_huff(t_huff) << delta

    ################################################################################
    ## Table 4.73 – Syntax of sbr_noise()
    ################################################################################
    def sbr_noise(self, sbr: 'AacSbrInfo', ch: int) -> None:
        coupled = sbr.Bs_coupling and ch == 1
        delta = 1 if coupled else 0
        if coupled:
            t_huff, f_huff = t_huffman_noise_bal_3_0dB, f_huffman_env_bal_3_0dB
        else:
            t_huff, f_huff = t_huffman_noise_3_0dB, f_huffman_env_3_0dB

        for noise in range(sbr.lq[ch]):
            if not sbr.Bs_df_noise[ch][noise]:
                sbr.Q[ch, 0, noise] = self._read(5) << delta
                for band in range(1, sbr.N_Q):
                    sbr.Q[ch, band, noise] = self._sbr_huff(f_huff) << delta
            else:
                for band in range(sbr.N_Q):
                    sbr.Q[ch, band, noise] = self._sbr_huff(t_huff) << delta

    ################################################################################
    ## Table 4.74 – Syntax of sbr_sinusoidal_coding()
    ################################################################################
    def sbr_sinusoidal_coding(self, sbr: 'AacSbrInfo', ch: int) -> None:
        for n in range(sbr.N_high):
            sbr.Bs_add_harmonic[ch, n] = self._read_bool()

    ################################################################################
    ## Table 4.75 – Syntax of sbr_extension()
    ################################################################################
    def sbr_extension(self, sbr: 'AacSbrInfo', bs_extension_id: int, num_bits_left: int) -> int:
        if bs_extension_id == EXTENSION_ID_PS:
            if sbr.Ps is None:
                sbr.Ps = AacPsInfo()
            if sbr.Ps_reset_flag:
                sbr.Ps.Header_read = 0
            self.ps_data(sbr)
        if bs_extension_id == EXTENSION_ID_DRM_PS:
            sbr.Ps_used = 1
            if sbr.Drm_ps is None:
                sbr.Drm_ps = AacDrmPsInfo()
            raise NotImplementedFeatureError("DRM parametric stereo is not supported")

        sbr.Bs_extension_data = self._read(6)
        return 6

    ################################################################################
    ## Table 8.1 – Syntax of ps_data()
    ################################################################################
    def ps_data(self, sbr: 'AacSbrInfo') -> None:
        ps = sbr.Ps
        if self._read_bool():  # enable_ps_header
            ps.Header_read = 1
            ps.Use34_hybrid_bands = 0
            ps.Enable_iid = self._read_bool()
            if ps.Enable_iid:
                ps.Iid_mode = self._read(3)
            sbr.Ps_used = 1
            sbr.Ps_reset_flag = 0
        raise NotImplementedFeatureError("parametric stereo data is not supported")


################################################################################
## Syntax data
################################################################################
class ltp_data:
    def __init__(self,
                 Data_present: bool = False,
                 Ltp_lag_update: bool = False,
                 Ltp_lag: int = 0,
                 Ltp_coef: int = 0,
                 Last_band: int = 0,
                 Ltp_long_used: list = None,
                 Ltp_short_used: list = None,
                 Ltp_short_lag_present: list = None,
                 Ltp_short_lag: list = None):
        self.Data_present = Data_present
        self.Ltp_lag_update = Ltp_lag_update
        self.Ltp_lag = Ltp_lag
        self.Ltp_coef = Ltp_coef
        self.Last_band = Last_band
        self.Ltp_long_used = Ltp_long_used if Ltp_long_used is not None else []
        self.Ltp_short_used = Ltp_short_used if Ltp_short_used is not None else []
        self.Ltp_short_lag_present = Ltp_short_lag_present if Ltp_short_lag_present is not None else []
        self.Ltp_short_lag = Ltp_short_lag if Ltp_short_lag is not None else []

class predictor_data:
    def __init__(self,
                 Max_sfb: int = 0,
                 Predictor_reset: bool = False,
                 Predictor_reset_group_number: int = 0,
                 Prediction_used: list = None):
        self.Max_sfb = Max_sfb
        self.Predictor_reset = Predictor_reset
        self.Predictor_reset_group_number = Predictor_reset_group_number
        self.Prediction_used = Prediction_used if Prediction_used is not None else []

class pulse_data:
    def __init__(self,
                 Number_pulse: int = 0,
                 Pulse_start_sfb: int = 0,
                 Pulse_offset: list = None,
                 Pulse_amp: list = None):
        self.Number_pulse = Number_pulse
        self.Pulse_start_sfb = Pulse_start_sfb
        self.Pulse_offset = Pulse_offset if Pulse_offset is not None else []
        self.Pulse_amp = Pulse_amp if Pulse_amp is not None else []

class tns_data:
    def __init__(self,
                 N_filt: list = None,
                 Coef_res: list = None,
                 Len: list = None,
                 Order: list = None,
                 Direction: list = None,
                 Coef_compress: list = None,
                 Coef: list = None):
        self.N_filt = N_filt if N_filt is not None else []
        self.Coef_res = Coef_res if Coef_res is not None else []
        self.Len = Len if Len is not None else []
        self.Order = Order if Order is not None else []
        self.Direction = Direction if Direction is not None else []
        self.Coef_compress = Coef_compress if Coef_compress is not None else []
        self.Coef = Coef if Coef is not None else []

class gain_control_data:
    def __init__(self,
                 Max_band: int = 0,
                 Adjust_num: list = None,
                 Alevcode: list = None,
                 Aloccode: list = None):
        self.Max_band = Max_band
        self.Adjust_num = Adjust_num if Adjust_num is not None else []
        self.Alevcode = Alevcode if Alevcode is not None else []
        self.Aloccode = Aloccode if Aloccode is not None else []

class spectral_data:
    def __init__(self, Hcod: list = None, Codebooks: list = None):
        self.Hcod = Hcod if Hcod is not None else []
        self.Codebooks = Codebooks if Codebooks is not None else []

class ics_info:
    """State of one individual channel stream.

    Section, scalefactor and mid/side arrays are indexed ``[group, sfb]``.
    """

    def __init__(self,
                 Window_sequence: int = ONLY_LONG_SEQUENCE,
                 Window_shape: int = 0,
                 Max_sfb: int = 0,
                 Scale_factor_grouping: int = 0,
                 Global_gain: int = 0):
        self.Window_sequence = Window_sequence
        self.Window_shape = Window_shape
        self.Max_sfb = Max_sfb
        self.Scale_factor_grouping = Scale_factor_grouping
        self.Global_gain = Global_gain

        # filled by window_grouping()
        self.num_windows = 0
        self.num_window_groups = 0
        self.num_swb = 0
        self.window_group_length = np.zeros(MAX_WINDOW_GROUPS, dtype=np.int32)
        self.swb_offset = np.zeros(AAC_MAX_SFB + 1, dtype=np.int32)
        self.sect_sfb_offset = np.zeros((MAX_WINDOW_GROUPS, MAX_SECTIONS_SHORT), dtype=np.int32)

        self.reset_sections()
        self.scale_factors = np.zeros((MAX_WINDOW_GROUPS, AAC_MAX_SFB), dtype=np.int16)
        self.Ms_mask_present = 0
        self.Ms_used = np.zeros((MAX_WINDOW_GROUPS, AAC_MAX_SFB), dtype=bool)

        self.Predictor_data_present = False
        self.Predictor = predictor_data()
        self.Ltp1 = ltp_data()
        self.Ltp2 = ltp_data()
        self.Pulse_data_present = False
        self.Pulse_data = pulse_data()
        self.Tns_data_present = False
        self.Tns_data = tns_data()
        self.Gain_control_data_present = False
        self.Gain_control_data = gain_control_data()
        self.Spectral_data = spectral_data()

        # rvlc_sf_data()
        self.Sf_concealment = False
        self.Rev_global_gain = 0
        self.Len_of_rvlc_sf = 0
        self.Sf_escapes_present = False
        self.Len_of_rvlc_escapes = 0
        self.dpcm_noise_nrg = 0
        self.dpcm_noise_last_pos = 0

    def reset_sections(self) -> None:
        self.Sect_cb = np.zeros((MAX_WINDOW_GROUPS, MAX_SECTIONS_SHORT), dtype=np.uint8)
        self.sect_start = np.zeros((MAX_WINDOW_GROUPS, MAX_SECTIONS_SHORT), dtype=np.int32)
        self.sect_end = np.zeros((MAX_WINDOW_GROUPS, MAX_SECTIONS_SHORT), dtype=np.int32)
        self.sfb_cb = np.zeros((MAX_WINDOW_GROUPS, MAX_SECTIONS_SHORT), dtype=np.uint8)
        self.num_sec = np.zeros(MAX_WINDOW_GROUPS, dtype=np.int32)

class coupling_channel_element:
    def __init__(self,
                 Element_instance_tag: int = 0,
                 Ind_sw_cce_flag: bool = False,
                 Num_coupled_elements: int = 0,
                 Cc_target_is_cpe: list = None,
                 Cc_target_tag_select: list = None,
                 Cc_l: list = None,
                 Cc_r: list = None,
                 Cc_domain: bool = False,
                 Gain_element_sign: bool = False,
                 Gain_element_scale: int = 0,
                 Channel_stream: 'ics_info' = None,
                 Common_gain_element_present: list = None,
                 Common_gain_element: list = None,
                 dpcm_gain_element: list = None):
        self.Element_instance_tag = Element_instance_tag
        self.Ind_sw_cce_flag = Ind_sw_cce_flag
        self.Num_coupled_elements = Num_coupled_elements
        self.Cc_target_is_cpe = Cc_target_is_cpe if Cc_target_is_cpe is not None else []
        self.Cc_target_tag_select = Cc_target_tag_select if Cc_target_tag_select is not None else []
        self.Cc_l = Cc_l if Cc_l is not None else []
        self.Cc_r = Cc_r if Cc_r is not None else []
        self.Cc_domain = Cc_domain
        self.Gain_element_sign = Gain_element_sign
        self.Gain_element_scale = Gain_element_scale

        self.Channel_stream = Channel_stream if Channel_stream is not None else ics_info()

        self.Common_gain_element_present = Common_gain_element_present if Common_gain_element_present is not None else []
        self.Common_gain_element = Common_gain_element if Common_gain_element is not None else []
        self.dpcm_gain_element = dpcm_gain_element if dpcm_gain_element is not None else []

class data_stream_element:
    def __init__(self,
                 Element_instance_tag: int = 0,
                 Data_byte_align_flag: bool = False,
                 Count: int = 0,
                 Esc_count: int = 0,
                 Data_stream_byte: bytes = None):
        self.Element_instance_tag = Element_instance_tag
        self.Data_byte_align_flag = Data_byte_align_flag
        self.Count = Count
        self.Esc_count = Esc_count
        self.Data_stream_byte = Data_stream_byte if Data_stream_byte is not None else b''

class program_config_element:
    def __init__(self,
                 Element_instance_tag: int = 0,
                 Object_type: int = 0,
                 Sampling_frequency_index: int = 0,
                 Num_front_channel_elements: int = 0,
                 Num_side_channel_elements: int = 0,
                 Num_back_channel_elements: int = 0,
                 Num_lfe_channel_elements: int = 0,
                 Num_assoc_data_elements: int = 0,
                 Num_valid_cc_elements: int = 0,
                 Mono_mixdown_present: bool = False,
                 Mono_mixdown_element_num: int = 0,
                 Stereo_mixdown_present: bool = False,
                 Stereo_mixdown_element_num: int = 0,
                 Matrix_mixdown_idx_present: bool = False,
                 Matrix_mixdown_idx: int = 0,
                 Pseudo_surround_enable: bool = False,
                 Comment_field_bytes: int = 0,
                 Comment_field_data: bytes = None):
        self.Element_instance_tag = Element_instance_tag
        self.Object_type = Object_type
        self.Sampling_frequency_index = Sampling_frequency_index
        self.Num_front_channel_elements = Num_front_channel_elements
        self.Num_side_channel_elements = Num_side_channel_elements
        self.Num_back_channel_elements = Num_back_channel_elements
        self.Num_lfe_channel_elements = Num_lfe_channel_elements
        self.Num_assoc_data_elements = Num_assoc_data_elements
        self.Num_valid_cc_elements = Num_valid_cc_elements

        self.Mono_mixdown_present = Mono_mixdown_present
        self.Mono_mixdown_element_num = Mono_mixdown_element_num
        self.Stereo_mixdown_present = Stereo_mixdown_present
        self.Stereo_mixdown_element_num = Stereo_mixdown_element_num
        self.Matrix_mixdown_idx_present = Matrix_mixdown_idx_present
        self.Matrix_mixdown_idx = Matrix_mixdown_idx
        self.Pseudo_surround_enable = Pseudo_surround_enable

        self.Front_element_is_cpe = []
        self.Front_element_tag_select = []
        self.Side_element_is_cpe = []
        self.Side_element_tag_select = []
        self.Back_element_is_cpe = []
        self.Back_element_tag_select = []
        self.Lfe_element_tag_select = []
        self.Assoc_data_element_tag_select = []
        self.Cc_element_is_ind_sw = []
        self.Valid_cc_element_tag_select = []

        self.Comment_field_bytes = Comment_field_bytes
        self.Comment_field_data = Comment_field_data if Comment_field_data is not None else b''

        # output channel of each element instance tag
        self.Channels = 0
        self.Front_channel_count = 0
        self.Side_channel_count = 0
        self.Back_channel_count = 0
        self.Lfe_channel_count = 0
        self.Sce_channel = [0] * 16
        self.Cpe_channel = [0] * 16

class dynamic_range_info:
    def __init__(self):
        self.Pce_tag_present = False
        self.Pce_instance_tag = 0
        self.Drc_tag_reserve_bits = 0
        self.Excluded_chns_present = False
        self.Exclude_mask = []
        self.Additional_excluded_chns = []
        self.Drc_bands_present = False
        self.Drc_band_incr = 0
        self.Drc_interpolation_scheme = 0
        self.Num_bands = 1
        self.Drc_band_top = []
        self.Prog_ref_level_present = False
        self.Prog_ref_level = 0
        self.Prog_ref_level_reserved_bits = 0
        self.Dyn_range_sign = []
        self.Dyn_range_cnt = []

class sbr_header:
    def __init__(self,
                 Bs_amp_res: int = 1,
                 Bs_start_freq: int = 5,
                 Bs_stop_freq: int = 0,
                 Bs_xover_band: int = 0,
                 Bs_reserved: int = 0,
                 Bs_header_extra_1: bool = False,
                 Bs_header_extra_2: bool = False,
                 Bs_freq_scale: int = 2,
                 Bs_alter_scale: int = 1,
                 Bs_noise_bands: int = 2,
                 Bs_limiter_bands: int = 2,
                 Bs_limiter_gains: int = 2,
                 Bs_interpol_freq: int = 1,
                 Bs_smoothing_mode: int = 1):
        self.Bs_amp_res = Bs_amp_res
        self.Bs_start_freq = Bs_start_freq
        self.Bs_stop_freq = Bs_stop_freq
        self.Bs_xover_band = Bs_xover_band
        self.Bs_reserved = Bs_reserved
        self.Bs_header_extra_1 = Bs_header_extra_1
        self.Bs_header_extra_2 = Bs_header_extra_2
        self.Bs_freq_scale = Bs_freq_scale
        self.Bs_alter_scale = Bs_alter_scale
        self.Bs_noise_bands = Bs_noise_bands
        self.Bs_limiter_bands = Bs_limiter_bands
        self.Bs_limiter_gains = Bs_limiter_gains
        self.Bs_interpol_freq = Bs_interpol_freq
        self.Bs_smoothing_mode = Bs_smoothing_mode

class AacPsInfo:
    def __init__(self):
        self.Header_read = 0
        self.Use34_hybrid_bands = 0
        self.Enable_iid = False
        self.Iid_mode = 0

class AacDrmPsInfo:
    def __init__(self):
        self.Header_read = 0

class AacSbrInfo:
    """Bitstream state of one SBR element, kept across frames.

    ``E`` holds the envelope data ``[ch, band, env]`` and ``Q`` the noise floor
    data ``[ch, band, noise]``; ``*_prev`` fields keep the previous frame's
    values for time-differential coding.
    """

    def __init__(self, Aac_element_id: int, Sampling_frequency: int, Frame_length: int, Is_drm: bool = False):
        self.Aac_element_id = Aac_element_id
        self.Sampling_frequency = Sampling_frequency
        self.Frame_length = Frame_length
        self.Is_drm = Is_drm
        self.Sfi = get_sr_index(Sampling_frequency)
        self.Time_slots = 15 if Frame_length == 960 else 16

        self.Sbr_header = sbr_header()
        self.Header_count = 0
        self.Bs_header_flag = False
        self.Bs_sbr_crc_bits = 0
        self.Bs_samplerate_mode = 1
        self.Reset = 1
        self.Rate = 0
        self.Just_seeked = 0

        # frequency band tables, see derive_sbr_tables()
        self.k0 = 0
        self.k2 = 0
        self.k_x = 0
        self.M = 0
        self.f_master = []
        self.f_tablehigh = []
        self.f_tablelow = []
        self.f_tablenoise = []
        self.N_master = 0
        self.N_high = 0
        self.N_low = 0
        self.N_Q = 0
        self.n = [0, 0]

        # time/frequency grid
        self.Bs_coupling = False
        self.Bs_frame_class = [FIXFIX, FIXFIX]
        self.Abs_bord_lead = [0, 0]
        self.Abs_bord_trail = [0, 0]
        self.Rel_lead_count = [0, 0]
        self.Rel_trail_count = [0, 0]
        self.Bs_rel_count_0 = [0, 0]
        self.Bs_rel_count_1 = [0, 0]
        self.Bs_rel_bord = [[], []]
        self.Bs_rel_bord_0 = [[], []]
        self.Bs_rel_bord_1 = [[], []]
        self.Bs_pointer = [0, 0]
        self.f = np.zeros((2, 6), dtype=np.uint8)
        self.f_prev = [0, 0]
        self.le = [0, 0]
        self.le_prev = [0, 0]
        self.lq = [0, 0]
        self.Amp_res = [0, 0]

        self.Bs_df_env = [[], []]
        self.Bs_df_noise = [[], []]
        self.Bs_invf_mode = [[], []]
        self.Bs_invf_mode_prev = [[], []]
        self.E = np.zeros((2, 64, 5), dtype=np.int32)
        self.Q = np.zeros((2, 64, 2), dtype=np.int32)
        self.Bs_add_harmonic_flag = [False, False]
        self.Bs_add_harmonic = np.zeros((2, 64), dtype=bool)

        self.Bs_extended_data = False
        self.Bs_extension_id = 0
        self.Bs_extension_data = 0
        self.Ps = None
        self.Drm_ps = None
        self.Ps_used = 0
        self.Ps_reset_flag = 0


################################################################################
## MAIN PARSE FUNCTION
################################################################################
def ParseADTS(byteArray: bytes, diag: Diagnostics = None) -> tuple:
    """Parses the ADTS header and every raw data block of one ADTS frame.

    Returns ``(frame, parser)``; errors are raised.
    """
    reader = BitReader(byteArray)
    frame = AdtsFrame()
    frame.parse_header(reader)
    if len(byteArray) < frame.total_size:
        raise InvalidDataError(f"ADTS frame is truncated ({len(byteArray)} of {frame.total_size} bytes)")

    parser = AacFrameElementParser(AacSetup.from_adts(frame), diag)
    parser.reader = reader
    blocks = frame.raw_data_block_count
    if frame.has_crc and blocks > 1:
        # raw_data_block_position of all but the first block; the header CRC was read with the header
        parser._skip(16 * (blocks - 1))

    for i in range(blocks):
        parser.raw_data_block()
        if frame.has_crc and blocks > 1:
            parser._skip(16)

    return frame, parser

def is_intensity(info: 'ics_info', group: int, sfb: int) -> int:
    if info.sfb_cb[group, sfb] == INTENSITY_HCB:
        return 1
    elif info.sfb_cb[group, sfb] == INTENSITY_HCB2:
        return -1
    return 0

def is_noise(info: 'ics_info', group: int, sfb: int) -> bool:
    return info.sfb_cb[group, sfb] == NOISE_HCB

def ceil_log2(val: int) -> int:
    log2 = [0, 0, 1, 2, 2, 3, 3, 3, 3, 4]
    if 0 <= val < 10:
        return log2[val]

    return 0

def grid_copy(sbr: 'AacSbrInfo'):
    sbr.le_prev[1] = sbr.le[1]
    if sbr.le[1] > 0:
        sbr.f_prev[1] = sbr.f[1, sbr.le[1] - 1]

    sbr.Bs_frame_class[1] = sbr.Bs_frame_class[0]
    sbr.le[1] = sbr.le[0]
    sbr.lq[1] = sbr.lq[0]
    sbr.Bs_pointer[1] = sbr.Bs_pointer[0]
    sbr.Abs_bord_lead[1] = sbr.Abs_bord_lead[0]
    sbr.Abs_bord_trail[1] = sbr.Abs_bord_trail[0]
    sbr.Rel_lead_count[1] = sbr.Rel_lead_count[0]
    sbr.Rel_trail_count[1] = sbr.Rel_trail_count[0]
    sbr.Bs_rel_count_0[1] = sbr.Bs_rel_count_0[0]
    sbr.Bs_rel_count_1[1] = sbr.Bs_rel_count_1[0]
    sbr.Bs_rel_bord[1] = list(sbr.Bs_rel_bord[0])
    sbr.Bs_rel_bord_0[1] = list(sbr.Bs_rel_bord_0[0])
    sbr.Bs_rel_bord_1[1] = list(sbr.Bs_rel_bord_1[0])
    sbr.f[1, :] = sbr.f[0, :]

