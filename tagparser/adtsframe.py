import logging

from tagparser.tools.error import InvalidDataError

logger = logging.getLogger(__name__)

SamplingFrequency = [
    96000,
    88200,
    64000,
    48000,
    44100,
    32000,
    24000,
    22050,
    16000,
    12000,
    11025,
    8000,
    7350,
    0,  # RESERVED
    0,  # RESERVED
    0,  # ESCAPE VALUE
]


class AdtsFrame:
    """Header of an "Audio Data Transport Stream" frame.

    The header is kept as two words: ``h1`` holds syncword, id, layer and
    protection_absent; ``h2`` holds the remaining fields followed by the
    16 bit CRC (zero when protection is absent).
    """

    def __init__(self, h1: int = 0, h2: int = 0):
        self.h1 = h1
        self.h2 = h2

    ################################################################################
    ## Table 1.A.6 – Syntax of adts_fixed_header() and adts_variable_header()
    ################################################################################
    def parse_header(self, reader) -> None:
        h1, err = reader.ReadBits(16)
        if err is not None:
            raise err
        if (h1 & 0xFFF6) != 0xFFF0:
            raise InvalidDataError(f"ADTS syncword missing (0x{h1:04X})")
        self.h1 = h1

        if self.has_crc:
            h2, err = reader.ReadBits(56)
        else:
            h2, err = reader.ReadBits(40)
            h2 <<= 16
        if err is not None:
            raise err
        self.h2 = h2

        if self.total_size < self.header_size:
            raise InvalidDataError(f"ADTS frame length ({self.total_size}) is smaller than its header ({self.header_size})")
        logger.debug("ADTS frame: aot=%d sfi=%d channels=%d size=%d",
                     self.audio_object_id, self.sampling_frequency_index, self.channel_config, self.total_size)

    def is_valid(self) -> bool:
        return (self.h1 & 0xFFF6) == 0xFFF0 and self.total_size >= self.header_size

    # ID bit 0 signals MPEG-4, 1 MPEG-2
    @property
    def is_mpeg4(self) -> bool:
        return not (self.h1 & 0x8)

    @property
    def mpeg_version(self) -> int:
        return 4 if self.is_mpeg4 else 2

    @property
    def has_crc(self) -> bool:
        return (self.h1 & 0x1) == 0

    @property
    def audio_object_id(self) -> int:
        return (self.h2 >> 54) + 1

    @property
    def sampling_frequency_index(self) -> int:
        return (self.h2 >> 50) & 0xF

    @property
    def sampling_frequency(self) -> int:
        return SamplingFrequency[self.sampling_frequency_index]

    @property
    def channel_config(self) -> int:
        return (self.h2 >> 46) & 0x7

    @property
    def total_size(self) -> int:
        return (self.h2 >> 29) & 0x1FFF

    @property
    def header_size(self) -> int:
        return 9 if self.has_crc else 7

    @property
    def data_size(self) -> int:
        return self.total_size - self.header_size

    @property
    def buffer_fullness(self) -> int:
        return (self.h2 >> 18) & 0x7FF

    @property
    def frame_count(self) -> int:
        return ((self.h2 >> 16) & 0x3) + 1

    @property
    def raw_data_block_count(self) -> int:
        return self.frame_count

    @property
    def crc(self) -> int:
        return self.h2 & 0xFFFF
