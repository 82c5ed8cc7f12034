import logging
import math
from itertools import accumulate

from tagparser.parsers.aac_utils import minInt, maxInt, aacRound
from tagparser.tools.error import InvalidDataError

logger = logging.getLogger(__name__)

MAX_NOISE_BANDS = 5
MAX_MASTER_BANDS = 64

startOffset = [
    [-8, -7, -6, -5, -4, -3, -2, -1, 0, 1, 2, 3, 4, 5, 6, 7],  # sfi = 8
    [-5, -4, -3, -2, -1, 0, 1, 2, 3, 4, 5, 6, 7, 9, 11, 13],  # sfi = 7
    [-5, -3, -2, -1, 0, 1, 2, 3, 4, 5, 6, 7, 9, 11, 13, 16],  # sfi = 6
    [-6, -4, -2, -1, 0, 1, 2, 3, 4, 5, 6, 7, 9, 11, 13, 16],  # sfi = 5
    [-4, -2, -1, 0, 1, 2, 3, 4, 5, 6, 7, 9, 11, 13, 16, 20],  # sfi = 4...2
    [-2, -1, 0, 1, 2, 3, 4, 5, 6, 7, 9, 11, 13, 16, 20, 24],  # sfi < 2
]

startMin = [
    7, 7, 10, 11, 12, 16, 16, 17, 24, 32, 35, 48,
]

stopOffset = [
    [0, 2, 4, 6, 8, 11, 14, 18, 22, 26, 31, 37, 44, 51],
    [0, 2, 4, 6, 8, 11, 14, 18, 22, 26, 31, 36, 42, 49],
    [0, 2, 4, 6, 8, 11, 14, 17, 21, 25, 29, 34, 39, 44],
    [0, 2, 4, 6, 8, 11, 14, 17, 20, 24, 28, 33, 38, 43],
    [0, 2, 4, 6, 8, 11, 14, 17, 20, 24, 28, 32, 36, 41],
    [0, 2, 4, 6, 8, 10, 12, 14, 17, 20, 23, 26, 29, 32],
    [0, 2, 4, 6, 8, 10, 12, 14, 17, 20, 23, 26, 29, 32],
    [0, 1, 3, 5, 7, 9, 11, 13, 15, 17, 20, 23, 26, 29],
    [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 14, 16],
    [0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, -1, -2, -3, -4, -5, -6, -6, -6, -6, -6, -6, -6, -6],
    [0, -3, -6, -9, -12, -15, -18, -20, -22, -24, -26, -28, -30, -32],
]

stopMin = [
    13, 15, 20, 21, 23, 32, 32, 35, 48, 64, 70, 96,
]


################################################################################
## 4.6.18.3.2 Frequency band tables
################################################################################
def derive_sbr_tables(data, sfi, bs_start_freq, bs_stop_freq,
                      bs_freq_scale, bs_alter_scale, bs_xover_band):
    """Derives the master, high, low and noise band tables of an SBR element.

    ``data`` receives k0, k2, k_x, M, f_master, f_tablehigh, f_tablelow,
    f_tablenoise, N_master, N_high, N_low, N_Q and n.
    """
    if sfi < 0 or sfi >= len(startMin):
        raise InvalidDataError(f"sampling frequency index {sfi} has no SBR band tables")

    data.k0 = qmf_lower_boundary(bs_start_freq, sfi)
    data.k2 = qmf_upper_boundary(bs_stop_freq, sfi, data.k0)

    if data.k2 <= data.k0:
        raise InvalidDataError(f"k0 ({data.k0}) must be lower than k2 ({data.k2})")
    if sfi < 4:
        max_range = 32
    elif sfi == 4:
        max_range = 35
    else:
        max_range = 48
    if data.k2 - data.k0 > max_range:
        raise InvalidDataError(f"k0 ({data.k0}) and k2 ({data.k2}) out of range")

    if bs_freq_scale == 0:
        freq_master_fs0(data, data.k0, data.k2, bs_alter_scale)
    else:
        freq_master(data, data.k0, data.k2, bs_freq_scale, bs_alter_scale)

    freq_derived(data, bs_xover_band, data.k2)
    logger.debug("SBR tables: k0=%d k2=%d N_master=%d N_high=%d N_Q=%d",
                 data.k0, data.k2, data.N_master, data.N_high, data.N_Q)


# startOffset row of each sampling frequency index
START_OFFSET_ROW = {0: 5, 1: 5, 2: 4, 3: 4, 4: 4, 5: 3, 6: 2, 7: 1, 8: 0, 9: 5, 10: 5, 11: 5}


def qmf_lower_boundary(bs_start_freq, sfi):
    return startMin[sfi] + startOffset[START_OFFSET_ROW[sfi]][bs_start_freq]


def qmf_upper_boundary(bs_stop_freq, sfi, k0):
    if bs_stop_freq == 15:
        return minInt(64, k0 * 3)
    if bs_stop_freq == 14:
        return minInt(64, k0 * 2)
    return minInt(64, stopMin[sfi] + stopOffset[sfi][minInt(13, bs_stop_freq)])


def _borders(start, widths):
    return list(accumulate(widths, initial=start))


def freq_master_fs0(data, k0, k2, bs_alter_scale):
    if bs_alter_scale:
        dk, num_bands = 2, ((k2 - k0 + 2) >> 2) << 1
    else:
        dk, num_bands = 1, ((k2 - k0) >> 1) << 1

    num_bands = minInt(63, num_bands)
    if num_bands <= 0:
        raise InvalidDataError("SBR master table has no bands")

    # spread the difference to k2 over the outer bands, one QMF band each
    widths = [dk] * num_bands
    diff = k2 - (k0 + num_bands * dk)
    order = range(num_bands - 1, -1, -1) if diff > 0 else range(num_bands)
    step = 1 if diff > 0 else -1
    for k in order:
        if diff == 0:
            break
        widths[k] += step
        diff -= step

    data.f_master = _borders(k0, widths)
    data.N_master = num_bands


def _band_widths(start, stop, num_bands):
    widths = [
        aacRound(start * math.pow(stop / start, (k + 1) / num_bands)) -
        aacRound(start * math.pow(stop / start, k / num_bands))
        for k in range(num_bands)
    ]
    widths.sort()
    return widths


def _num_bands(bands, start, stop, warp=1.0):
    return 2 * aacRound(bands * math.log10(stop / start) / (2.0 * math.log10(2.0) * warp))


def freq_master(data, k0, k2, bs_freq_scale, bs_alter_scale):
    two_regions = k2 / k0 > 2.2449
    k1 = k0 * 2 if two_regions else k2
    bands = [12.0, 10.0, 8.0][bs_freq_scale - 1]

    num_bands0 = _num_bands(bands, k0, k1)
    if num_bands0 <= 0:
        raise InvalidDataError("SBR master table has no bands in its first region")
    widths0 = _band_widths(k0, k1, num_bands0)
    if widths0[0] <= 0:
        raise InvalidDataError("SBR master table has an empty band")

    if not two_regions:
        data.f_master = _borders(k0, widths0)
        data.N_master = num_bands0
        return

    num_bands1 = _num_bands(bands, k1, k2, 1.3 if bs_alter_scale else 1.0)
    if num_bands1 <= 0:
        raise InvalidDataError("SBR master table has no bands in its second region")
    if num_bands0 + num_bands1 > MAX_MASTER_BANDS:
        raise InvalidDataError(f"SBR master table has too many bands ({num_bands0 + num_bands1})")

    widths1 = _band_widths(k1, k2, num_bands1)
    if widths1[0] < widths0[-1]:
        change = minInt(widths0[-1] - widths1[0], (widths1[-1] - widths1[0]) // 2)
        widths1[0] += change
        widths1[-1] -= change
        widths1.sort()

    # k1 closes the first region and opens the second
    data.f_master = _borders(k0, widths0) + _borders(k1, widths1)[1:]
    data.N_master = num_bands0 + num_bands1


def freq_derived(data, bs_xover_band, k2):
    if bs_xover_band >= data.N_master:
        raise InvalidDataError(f"xover band ({bs_xover_band}) must be lower than N_master ({data.N_master})")

    data.N_high = data.N_master - bs_xover_band
    data.N_low = (data.N_high >> 1) + (data.N_high & 1)
    data.n = [data.N_low, data.N_high]

    high = data.f_master[bs_xover_band:bs_xover_band + data.N_high + 1]
    data.f_tablehigh = high
    data.k_x = high[0]
    data.M = high[-1] - high[0]
    if data.k_x + data.M > 64:
        raise InvalidDataError(f"k_x ({data.k_x}) + M ({data.M}) exceeds the QMF bank")

    odd = data.N_high & 1
    data.f_tablelow = [high[0]] + [high[2 * k - odd] for k in range(1, data.N_low + 1)]

    noise_bands = data.Sbr_header.Bs_noise_bands
    data.N_Q = maxInt(1, aacRound(noise_bands * math.log2(k2 / data.k_x)))
    if data.N_Q > MAX_NOISE_BANDS:
        raise InvalidDataError(f"SBR noise band count {data.N_Q} exceeds {MAX_NOISE_BANDS}")

    index = [0]
    for k in range(1, data.N_Q + 1):
        index.append(index[-1] + (data.N_low - index[-1]) // (data.N_Q + 1 - k))
    data.f_tablenoise = [data.f_tablelow[i] for i in index]


def get_sr_index(samplerate):
    """Maps a sampling rate to the nearest sampling frequency index."""
    thresholds = [92017, 75132, 55426, 46009, 37566, 27713, 23004, 18783, 13856, 11502, 9391]
    for i, threshold in enumerate(thresholds):
        if samplerate >= threshold:
            return i
    return 11
