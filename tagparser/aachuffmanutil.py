import logging

from tagparser import aaccodebook
from tagparser.diagnostics import DiagLevel
from tagparser.tools.error import InvalidDataError

logger = logging.getLogger(__name__)

################################################################################
## Codebook ids
################################################################################
ZERO_HCB       = 0
FIRST_PAIR_HCB = 5
ESC_HCB        = 11
RESERVED_HCB   = 12
NOISE_HCB      = 13
INTENSITY_HCB2 = 14
INTENSITY_HCB  = 15
ESC_FLAG       = 16
VCB11_FIRST    = 16
VCB11_LAST     = 31

# largest absolute value of the virtual codebooks 16..31
VCB11_LAV = [16, 31, 47, 63, 95, 127, 159, 191, 223, 255, 319, 383, 511, 767, 1023, 2047]

# width of the first lookup stage of the two-step codebooks (0: binary tree)
HCB_N = [0, 5, 5, 0, 5, 0, 5, 0, 5, 0, 6, 5]

# the reserved codebook 12 yields this fixed pair
RESERVED_HCB_VALUES = (250, -20960)

MAX_ESCAPE_SIZE = 16


class HuffmanTwoStep:
    """Two-step lookup table built from code words and their lengths.

    The first stage is indexed by the next ``width`` bits and holds
    ``(offset, extra_bits)``; the second stage holds ``(bits, index)``.
    """

    def __init__(self, codes, bits, width):
        self.width = width
        self.first = []
        self.second = []
        groups = {}
        for index, (code, length) in enumerate(zip(codes, bits)):
            if length <= width:
                continue
            groups.setdefault(code >> (length - width), []).append((code, length, index))

        first = [None] * (1 << width)
        for index, (code, length) in enumerate(zip(codes, bits)):
            if length > width:
                continue
            offset = len(self.second)
            self.second.append((length, index))
            start = code << (width - length)
            for i in range(start, start + (1 << (width - length))):
                first[i] = (offset, 0)

        for prefix, members in sorted(groups.items()):
            extra = max(length for _, length, _ in members) - width
            offset = len(self.second)
            second = [None] * (1 << extra)
            for code, length, index in members:
                tail = length - width
                start = (code & ((1 << tail) - 1)) << (extra - tail)
                for i in range(start, start + (1 << (extra - tail))):
                    second[i] = (length, index)
            self.second.extend(second)
            first[prefix] = (offset, extra)

        # unused prefixes point past the second stage
        self.first = [entry if entry is not None else (len(self.second) + 1, 0) for entry in first]


class HuffmanBinaryTree:
    """Binary decoding tree; node is ``(is_leaf, left_or_index, right)``."""

    def __init__(self, codes, bits):
        nodes = [[False, -1, -1]]
        for index, (code, length) in enumerate(zip(codes, bits)):
            node = 0
            for i in range(length - 1, -1, -1):
                bit = (code >> i) & 1
                child = nodes[node][1 + bit]
                if child < 0:
                    child = len(nodes)
                    nodes.append([False, -1, -1])
                    nodes[node][1 + bit] = child
                node = child
            nodes[node] = [True, index, 0]
        self.nodes = [tuple(node) for node in nodes]


class SbrHuffmanTable:
    """SBR envelope/noise table; decoded values are centred around lav."""

    def __init__(self, codes, bits, name):
        self.name = name
        self.lav = len(codes) // 2
        self.tree = HuffmanBinaryTree(codes, bits)


################################################################################
## Tables
################################################################################
hcb_sf = HuffmanBinaryTree(aaccodebook.HCB_SF_CODES, aaccodebook.HCB_SF_BITS)

_SPECTRAL_SOURCES = [
    None,
    (aaccodebook.HCB1_CODES, aaccodebook.HCB1_BITS),
    (aaccodebook.HCB2_CODES, aaccodebook.HCB2_BITS),
    (aaccodebook.HCB3_CODES, aaccodebook.HCB3_BITS),
    (aaccodebook.HCB4_CODES, aaccodebook.HCB4_BITS),
    (aaccodebook.HCB5_CODES, aaccodebook.HCB5_BITS),
    (aaccodebook.HCB6_CODES, aaccodebook.HCB6_BITS),
    (aaccodebook.HCB7_CODES, aaccodebook.HCB7_BITS),
    (aaccodebook.HCB8_CODES, aaccodebook.HCB8_BITS),
    (aaccodebook.HCB9_CODES, aaccodebook.HCB9_BITS),
    (aaccodebook.HCB10_CODES, aaccodebook.HCB10_BITS),
    (aaccodebook.HCB11_CODES, aaccodebook.HCB11_BITS),
]

hcb_table = [None] * len(_SPECTRAL_SOURCES)
for _cb in range(1, len(_SPECTRAL_SOURCES)):
    _codes, _bits = _SPECTRAL_SOURCES[_cb]
    if HCB_N[_cb]:
        hcb_table[_cb] = HuffmanTwoStep(_codes, _bits, HCB_N[_cb])
    else:
        hcb_table[_cb] = HuffmanBinaryTree(_codes, _bits)

# (dimension, modulo, offset, signed values): unsigned codebooks are followed by sign bits
HCB_LAYOUT = [
    None,
    (4, 3, 1, True),
    (4, 3, 1, True),
    (4, 3, 0, False),
    (4, 3, 0, False),
    (2, 9, 4, True),
    (2, 9, 4, True),
    (2, 8, 0, False),
    (2, 8, 0, False),
    (2, 13, 0, False),
    (2, 13, 0, False),
    (2, 17, 0, False),
]

t_huffman_env_1_5dB = SbrHuffmanTable(aaccodebook.T_HUFFMAN_ENV_1_5DB_CODES, aaccodebook.T_HUFFMAN_ENV_1_5DB_BITS, "t_huffman_env_1_5dB")
f_huffman_env_1_5dB = SbrHuffmanTable(aaccodebook.F_HUFFMAN_ENV_1_5DB_CODES, aaccodebook.F_HUFFMAN_ENV_1_5DB_BITS, "f_huffman_env_1_5dB")
t_huffman_env_bal_1_5dB = SbrHuffmanTable(aaccodebook.T_HUFFMAN_ENV_BAL_1_5DB_CODES, aaccodebook.T_HUFFMAN_ENV_BAL_1_5DB_BITS, "t_huffman_env_bal_1_5dB")
f_huffman_env_bal_1_5dB = SbrHuffmanTable(aaccodebook.F_HUFFMAN_ENV_BAL_1_5DB_CODES, aaccodebook.F_HUFFMAN_ENV_BAL_1_5DB_BITS, "f_huffman_env_bal_1_5dB")
t_huffman_env_3_0dB = SbrHuffmanTable(aaccodebook.T_HUFFMAN_ENV_3_0DB_CODES, aaccodebook.T_HUFFMAN_ENV_3_0DB_BITS, "t_huffman_env_3_0dB")
f_huffman_env_3_0dB = SbrHuffmanTable(aaccodebook.F_HUFFMAN_ENV_3_0DB_CODES, aaccodebook.F_HUFFMAN_ENV_3_0DB_BITS, "f_huffman_env_3_0dB")
t_huffman_env_bal_3_0dB = SbrHuffmanTable(aaccodebook.T_HUFFMAN_ENV_BAL_3_0DB_CODES, aaccodebook.T_HUFFMAN_ENV_BAL_3_0DB_BITS, "t_huffman_env_bal_3_0dB")
f_huffman_env_bal_3_0dB = SbrHuffmanTable(aaccodebook.F_HUFFMAN_ENV_BAL_3_0DB_CODES, aaccodebook.F_HUFFMAN_ENV_BAL_3_0DB_BITS, "f_huffman_env_bal_3_0dB")
t_huffman_noise_3_0dB = SbrHuffmanTable(aaccodebook.T_HUFFMAN_NOISE_3_0DB_CODES, aaccodebook.T_HUFFMAN_NOISE_3_0DB_BITS, "t_huffman_noise_3_0dB")
t_huffman_noise_bal_3_0dB = SbrHuffmanTable(aaccodebook.T_HUFFMAN_NOISE_BAL_3_0DB_CODES, aaccodebook.T_HUFFMAN_NOISE_BAL_3_0DB_BITS, "t_huffman_noise_bal_3_0dB")


################################################################################
## Decoders, all returning (value, err)
################################################################################
def hcod_2step(reader, table: HuffmanTwoStep) -> tuple:
    cw, err = reader.PeekBits(table.width)
    if err:
        return 0, err
    offset, extra = table.first[cw]
    if extra:
        if err := reader.SkipBits(table.width):
            return 0, err
        cw, err = reader.PeekBits(extra)
        if err:
            return 0, err
        offset += cw
        if offset >= len(table.second) or table.second[offset] is None:
            return 0, InvalidDataError("Huffman two-step offset out of range")
        bits, index = table.second[offset]
        err = reader.SkipBits(bits - table.width)
    else:
        if offset >= len(table.second):
            return 0, InvalidDataError("Huffman two-step offset out of range")
        bits, index = table.second[offset]
        err = reader.SkipBits(bits)
    if err:
        return 0, err
    return index, None


def hcod_binary(reader, tree: HuffmanBinaryTree) -> tuple:
    nodes = tree.nodes
    offset = 0
    while not nodes[offset][0]:
        bit, err = reader.ReadBit()
        if err:
            return 0, err
        offset = nodes[offset][1 + bit]
        if offset < 0 or offset >= len(nodes):
            return 0, InvalidDataError("Huffman binary tree offset out of range")
    return nodes[offset][1], None


# Return the scalefactor codeword index; the dpcm value is index - 60
def hcod_sf(reader) -> tuple:
    return hcod_binary(reader, hcb_sf)


def sbr_huff_dec(reader, table: SbrHuffmanTable) -> tuple:
    index, err = hcod_binary(reader, table.tree)
    if err:
        return 0, err
    return index - table.lav, None


def index_to_values(cb: int, index: int) -> list:
    dimension, mod, off, _ = HCB_LAYOUT[cb]
    if dimension == 4:
        return [index // (mod ** 3) - off, index // (mod ** 2) % mod - off, index // mod % mod - off, index % mod - off]
    return [index // mod - off, index % mod - off]


def sign_bits(reader, sp: list) -> tuple:
    for i, value in enumerate(sp):
        if value:
            bit, err = reader.ReadBit()
            if err:
                return sp, err
            if bit:
                sp[i] = -value
    return sp, None


def get_escape(reader, value: int) -> tuple:
    """Expands an escape-coded magnitude of 16, keeping the sign."""
    if abs(value) != ESC_FLAG:
        return value, None
    size = 4
    while True:
        bit, err = reader.ReadBit()
        if err:
            return value, err
        if not bit:
            break
        size += 1
        if size > MAX_ESCAPE_SIZE:
            return value, InvalidDataError("escape sequence is too long")
    offset, err = reader.ReadBits(size)
    if err:
        return value, err
    j = offset | (1 << size)
    return (-j if value < 0 else j), None


def vcb11_check_lav(cb: int, sp: list, diag=None) -> list:
    lav = VCB11_LAV[cb - VCB11_FIRST]
    if abs(sp[0]) > lav or abs(sp[1]) > lav:
        message = f"spectral pair ({sp[0]}, {sp[1]}) exceeds the largest absolute value {lav} of codebook {cb}"
        if diag is not None:
            diag.add(DiagLevel.WARNING, message, "parsing AAC spectral data")
        else:
            logger.warning(message)
        sp[0] = 0
        sp[1] = 0
    return sp


################################################################################
## Spectral data decoder: codebooks 1..11, reserved 12 and virtual 16..31
################################################################################
def hcod(reader, cb: int, diag=None) -> tuple:
    if cb == RESERVED_HCB:
        index, err = hcod_2step(reader, hcb_table[ESC_HCB])
        if err:
            return [0, 0], err
        return list(RESERVED_HCB_VALUES), None

    vcb11 = VCB11_FIRST <= cb <= VCB11_LAST
    table_cb = ESC_HCB if vcb11 else cb
    if table_cb < 1 or table_cb > ESC_HCB:
        return [], InvalidDataError(f"invalid spectral codebook {cb}")

    table = hcb_table[table_cb]
    if isinstance(table, HuffmanTwoStep):
        index, err = hcod_2step(reader, table)
    else:
        index, err = hcod_binary(reader, table)
    sp = index_to_values(table_cb, index)
    if err:
        return sp, err

    if not HCB_LAYOUT[table_cb][3]:
        sp, err = sign_bits(reader, sp)
        if err:
            return sp, err

    if table_cb == ESC_HCB:
        for i in range(2):
            sp[i], err = get_escape(reader, sp[i])
            if err:
                return sp, err
        if vcb11:
            sp = vcb11_check_lav(cb, sp, diag)

    return sp, None
