import numpy as np

from tagparser.tools.error import InvalidDataError

ONLY_LONG_SEQUENCE   = 0
LONG_START_SEQUENCE  = 1
EIGHT_SHORT_SEQUENCE = 2
LONG_STOP_SEQUENCE   = 3

MAX_WINDOWS = 8
MAX_SWB_OFFSETS = 52
MAX_SECTION_SFB = 8 * 15

################################################################################
## Table 4.140 ff – Number of scalefactor bands per sampling frequency index
################################################################################
NUM_SWB_512_WINDOW  = [0, 0, 0, 36, 36, 37, 31, 31, 0, 0, 0, 0]
NUM_SWB_480_WINDOW  = [0, 0, 0, 35, 35, 37, 30, 30, 0, 0, 0, 0]
NUM_SWB_960_WINDOW  = [40, 40, 45, 49, 49, 49, 46, 46, 42, 42, 42, 40]
NUM_SWB_1024_WINDOW = [41, 41, 47, 49, 49, 51, 47, 47, 43, 43, 43, 40]
NUM_SWB_128_WINDOW  = [12, 12, 12, 14, 14, 14, 15, 15, 15, 15, 15, 15]

# Limit of the predictor max_sfb per sampling frequency index
MAX_PREDICTION_SFB = [33, 33, 38, 40, 40, 40, 41, 41, 37, 37, 37, 34, 64, 64, 64, 64]

################################################################################
## Scalefactor band offsets
################################################################################
SWB_OFFSET_1024_96 = [
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 64, 72, 80, 88, 96, 108,
    120, 132, 144, 156, 172, 188, 212, 240, 276, 320, 384, 448, 512, 576, 640, 704,
    768, 832, 896, 960, 1024,
]

SWB_OFFSET_128_96 = [0, 4, 8, 12, 16, 20, 24, 32, 40, 48, 64, 92, 128]

SWB_OFFSET_1024_64 = [
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 64, 72, 80, 88, 100, 112,
    124, 140, 156, 172, 192, 216, 240, 268, 304, 344, 384, 424, 464, 504, 544, 584,
    624, 664, 704, 744, 784, 824, 864, 904, 944, 984, 1024,
]

SWB_OFFSET_1024_48 = [
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 48, 56, 64, 72, 80, 88, 96, 108, 120, 132,
    144, 160, 176, 196, 216, 240, 264, 292, 320, 352, 384, 416, 448, 480, 512, 544,
    576, 608, 640, 672, 704, 736, 768, 800, 832, 864, 896, 928, 1024,
]

SWB_OFFSET_512_48 = [
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 60, 68, 76, 84, 92, 100,
    112, 124, 136, 148, 164, 184, 208, 236, 268, 300, 332, 364, 396, 428, 460, 512,
]

SWB_OFFSET_480_48 = [
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 64, 72, 80, 88, 96, 108,
    120, 132, 144, 156, 172, 188, 212, 240, 272, 304, 336, 368, 400, 432, 480,
]

SWB_OFFSET_128_48 = [0, 4, 8, 12, 16, 20, 28, 36, 44, 56, 68, 80, 96, 112, 128]

SWB_OFFSET_1024_32 = [
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 48, 56, 64, 72, 80, 88, 96, 108, 120, 132,
    144, 160, 176, 196, 216, 240, 264, 292, 320, 352, 384, 416, 448, 480, 512, 544,
    576, 608, 640, 672, 704, 736, 768, 800, 832, 864, 896, 928, 960, 992, 1024,
]

SWB_OFFSET_512_32 = [
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 64, 72, 80, 88, 96, 108,
    120, 132, 144, 160, 176, 192, 212, 236, 260, 288, 320, 352, 384, 416, 448, 480,
    512,
]

SWB_OFFSET_480_32 = [
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 44, 48, 52, 56, 60, 64, 72, 80, 88, 96,
    104, 112, 124, 136, 148, 164, 180, 200, 224, 256, 288, 320, 352, 384, 416, 448,
    480,
]

SWB_OFFSET_1024_24 = [
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 44, 52, 60, 68, 76, 84, 92, 100, 108, 116,
    124, 136, 148, 160, 172, 188, 204, 220, 240, 260, 284, 308, 336, 364, 396, 432,
    468, 508, 552, 600, 652, 704, 768, 832, 896, 960, 1024,
]

SWB_OFFSET_512_24 = [
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 44, 52, 60, 68, 80, 92, 104, 120, 140,
    164, 192, 224, 256, 288, 320, 352, 384, 416, 448, 480, 512,
]

SWB_OFFSET_480_24 = [
    0, 4, 8, 12, 16, 20, 24, 28, 32, 36, 40, 44, 52, 60, 68, 80, 92, 104, 120, 140,
    164, 192, 224, 256, 288, 320, 352, 384, 416, 448, 480,
]

SWB_OFFSET_128_24 = [0, 4, 8, 12, 16, 20, 24, 28, 36, 44, 52, 64, 76, 92, 108, 128]

SWB_OFFSET_1024_16 = [
    0, 8, 16, 24, 32, 40, 48, 56, 64, 72, 80, 88, 100, 112, 124, 136, 148, 160, 172,
    184, 196, 212, 228, 244, 260, 280, 300, 320, 344, 368, 396, 424, 456, 492, 532,
    572, 616, 664, 716, 772, 832, 896, 960, 1024,
]

SWB_OFFSET_128_16 = [0, 4, 8, 12, 16, 20, 24, 28, 32, 40, 48, 60, 72, 88, 108, 128]

SWB_OFFSET_1024_8 = [
    0, 12, 24, 36, 48, 60, 72, 84, 96, 108, 120, 132, 144, 156, 172, 188, 204, 220,
    236, 252, 268, 288, 308, 328, 348, 372, 396, 420, 448, 476, 508, 544, 580, 620,
    664, 712, 764, 820, 880, 944, 1024,
]

SWB_OFFSET_128_8 = [0, 4, 8, 12, 16, 20, 24, 28, 36, 44, 52, 60, 72, 88, 108, 128]

SWB_OFFSET_1024_WINDOW = [
    SWB_OFFSET_1024_96,  # 96000
    SWB_OFFSET_1024_96,  # 88200
    SWB_OFFSET_1024_64,  # 64000
    SWB_OFFSET_1024_48,  # 48000
    SWB_OFFSET_1024_48,  # 44100
    SWB_OFFSET_1024_32,  # 32000
    SWB_OFFSET_1024_24,  # 24000
    SWB_OFFSET_1024_24,  # 22050
    SWB_OFFSET_1024_16,  # 16000
    SWB_OFFSET_1024_16,  # 12000
    SWB_OFFSET_1024_16,  # 11025
    SWB_OFFSET_1024_8,   # 8000
]

SWB_OFFSET_512_WINDOW = [
    None, None, None,
    SWB_OFFSET_512_48,  # 48000
    SWB_OFFSET_512_48,  # 44100
    SWB_OFFSET_512_32,  # 32000
    SWB_OFFSET_512_24,  # 24000
    SWB_OFFSET_512_24,  # 22050
    None, None, None, None,
]

SWB_OFFSET_480_WINDOW = [
    None, None, None,
    SWB_OFFSET_480_48,  # 48000
    SWB_OFFSET_480_48,  # 44100
    SWB_OFFSET_480_32,  # 32000
    SWB_OFFSET_480_24,  # 24000
    SWB_OFFSET_480_24,  # 22050
    None, None, None, None,
]

SWB_OFFSET_128_WINDOW = [
    SWB_OFFSET_128_96,  # 96000
    SWB_OFFSET_128_96,  # 88200
    SWB_OFFSET_128_96,  # 64000
    SWB_OFFSET_128_48,  # 48000
    SWB_OFFSET_128_48,  # 44100
    SWB_OFFSET_128_48,  # 32000
    SWB_OFFSET_128_24,  # 24000
    SWB_OFFSET_128_24,  # 22050
    SWB_OFFSET_128_16,  # 16000
    SWB_OFFSET_128_16,  # 12000
    SWB_OFFSET_128_16,  # 11025
    SWB_OFFSET_128_8,   # 8000
]


def _long_window_table(sfi: int, frame_length: int) -> tuple:
    if frame_length == 512:
        return NUM_SWB_512_WINDOW[sfi], SWB_OFFSET_512_WINDOW[sfi]
    if frame_length == 480:
        return NUM_SWB_480_WINDOW[sfi], SWB_OFFSET_480_WINDOW[sfi]
    if frame_length == 960:
        return NUM_SWB_960_WINDOW[sfi], SWB_OFFSET_1024_WINDOW[sfi]
    return NUM_SWB_1024_WINDOW[sfi], SWB_OFFSET_1024_WINDOW[sfi]


################################################################################
## 4.5.2.3.4 Calculation of window grouping information
################################################################################
def window_grouping(info, setup) -> None:
    """Fills the window counts, group lengths and scalefactor band offsets of ``info``.

    Raises InvalidDataError if no band table exists for the sampling frequency
    index and frame length of ``setup`` or if max_sfb exceeds the band count.
    """
    sfi = setup.sampling_frequency_index
    frame_length = setup.frame_length
    if sfi < 0 or sfi >= len(SWB_OFFSET_1024_WINDOW):
        raise InvalidDataError(f"sampling frequency index {sfi} has no scalefactor band table")

    info.window_group_length = np.zeros(MAX_WINDOWS, dtype=np.int32)
    info.swb_offset = np.zeros(MAX_SWB_OFFSETS, dtype=np.int32)
    info.sect_sfb_offset = np.zeros((MAX_WINDOWS, MAX_SECTION_SFB), dtype=np.int32)

    if info.Window_sequence in (ONLY_LONG_SEQUENCE, LONG_START_SEQUENCE, LONG_STOP_SEQUENCE):
        info.num_windows = 1
        info.num_window_groups = 1
        info.window_group_length[0] = 1
        info.num_swb, offsets = _long_window_table(sfi, frame_length)
        if offsets is None or info.num_swb == 0:
            raise InvalidDataError(f"no scalefactor band table for frame length {frame_length} at index {sfi}")
        if info.Max_sfb > info.num_swb:
            raise InvalidDataError(f"max_sfb ({info.Max_sfb}) exceeds the number of scalefactor bands ({info.num_swb})")
        info.swb_offset[:info.num_swb] = offsets[:info.num_swb]
        info.sect_sfb_offset[0, :info.num_swb] = offsets[:info.num_swb]
        info.swb_offset[info.num_swb] = frame_length
        info.sect_sfb_offset[0, info.num_swb] = frame_length

    elif info.Window_sequence == EIGHT_SHORT_SEQUENCE:
        info.num_windows = 8
        info.num_window_groups = 1
        info.window_group_length[0] = 1
        info.num_swb = NUM_SWB_128_WINDOW[sfi]
        offsets = SWB_OFFSET_128_WINDOW[sfi]
        if info.Max_sfb > info.num_swb:
            raise InvalidDataError(f"max_sfb ({info.Max_sfb}) exceeds the number of scalefactor bands ({info.num_swb})")
        info.swb_offset[:info.num_swb] = offsets[:info.num_swb]
        info.swb_offset[info.num_swb] = frame_length // 8

        for i in range(info.num_windows - 1):
            if (info.Scale_factor_grouping & (1 << (6 - i))) == 0:
                info.num_window_groups += 1
                info.window_group_length[info.num_window_groups - 1] = 1
            else:
                info.window_group_length[info.num_window_groups - 1] += 1

        for g in range(info.num_window_groups):
            offset = 0
            sect_sfb = 0
            for i in range(info.num_swb):
                width = (offsets[i + 1] - offsets[i]) * int(info.window_group_length[g])
                info.sect_sfb_offset[g, sect_sfb] = offset
                sect_sfb += 1
                offset += width
            info.sect_sfb_offset[g, sect_sfb] = offset

    else:
        raise InvalidDataError(f"invalid window sequence {info.Window_sequence}")
