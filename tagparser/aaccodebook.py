"""Static Huffman code tables of ISO/IEC 14496-3.

Every table is a pair of tuples: the code words and their lengths in bits,
ordered by the index of the decoded value. The decoders in aachuffmanutil
turn them into two-step lookup tables or binary trees at import time.
"""

################################################################################
## Table 4.A.1 – Scalefactor Huffman codebook (index = dpcm value + 60)
################################################################################
HCB_SF_CODES = (
    0x3ffe8, 0x3ffe6, 0x3ffe7, 0x3ffe5, 0x7fff5, 0x7fff1, 0x7ffed, 0x7fff6,
    0x7ffee, 0x7ffef, 0x7fff0, 0x7fffc, 0x7fffd, 0x7ffff, 0x7fffe, 0x7fff7,
    0x7fff8, 0x7fffb, 0x7fff9, 0x3ffe4, 0x7fffa, 0x3ffe3, 0x1ffef, 0x1fff0,
    0x0fff5, 0x1ffee, 0x0fff2, 0x0fff3, 0x0fff4, 0x0fff1, 0x07ff6, 0x07ff7,
    0x03ff9, 0x03ff5, 0x03ff7, 0x03ff3, 0x03ff6, 0x03ff2, 0x01ff7, 0x01ff5,
    0x00ff9, 0x00ff7, 0x00ff6, 0x007f9, 0x00ff4, 0x007f8, 0x003f9, 0x003f7,
    0x003f5, 0x001f8, 0x001f7, 0x000fa, 0x000f8, 0x000f6, 0x00079, 0x0003a,
    0x00038, 0x0001a, 0x0000b, 0x00004, 0x00000, 0x0000a, 0x0000c, 0x0001b,
    0x00039, 0x0003b, 0x00078, 0x0007a, 0x000f7, 0x000f9, 0x001f6, 0x001f9,
    0x003f4, 0x003f6, 0x003f8, 0x007f5, 0x007f4, 0x007f6, 0x007f7, 0x00ff5,
    0x00ff8, 0x01ff4, 0x01ff6, 0x01ff8, 0x03ff8, 0x03ff4, 0x0fff0, 0x07ff4,
    0x0fff6, 0x07ff5, 0x3ffe2, 0x7ffd9, 0x7ffda, 0x7ffdb, 0x7ffdc, 0x7ffdd,
    0x7ffde, 0x7ffd8, 0x7ffd2, 0x7ffd3, 0x7ffd4, 0x7ffd5, 0x7ffd6, 0x7fff2,
    0x7ffdf, 0x7ffe7, 0x7ffe8, 0x7ffe9, 0x7ffea, 0x7ffeb, 0x7ffe6, 0x7ffe0,
    0x7ffe1, 0x7ffe2, 0x7ffe3, 0x7ffe4, 0x7ffe5, 0x7ffd7, 0x7ffec, 0x7fff4,
    0x7fff3,
)
HCB_SF_BITS = (
    18, 18, 18, 18, 19, 19, 19, 19, 19, 19, 19, 19, 19, 19, 19, 19,
    19, 19, 19, 18, 19, 18, 17, 17, 16, 17, 16, 16, 16, 16, 15, 15,
    14, 14, 14, 14, 14, 14, 13, 13, 12, 12, 12, 11, 12, 11, 10, 10,
    10, 9, 9, 8, 8, 8, 7, 6, 6, 5, 4, 3, 1, 4, 4, 5,
    6, 6, 7, 7, 8, 8, 9, 9, 10, 10, 10, 11, 11, 11, 11, 12,
    12, 13, 13, 13, 14, 14, 16, 15, 16, 15, 18, 19, 19, 19, 19, 19,
    19, 19, 19, 19, 19, 19, 19, 19, 19, 19, 19, 19, 19, 19, 19, 19,
    19, 19, 19, 19, 19, 19, 19, 19, 19,
)

################################################################################
## Table 4.A.2 – Spectrum Huffman codebook 1
################################################################################
HCB1_CODES = (
    0x7f8, 0x1f1, 0x7fd, 0x3f5, 0x068, 0x3f0, 0x7f7, 0x1ec,
    0x7f5, 0x3f1, 0x072, 0x3f4, 0x074, 0x011, 0x076, 0x1eb,
    0x06c, 0x3f6, 0x7fc, 0x1e1, 0x7f1, 0x1f0, 0x061, 0x1f6,
    0x7f2, 0x1ea, 0x7fb, 0x1f2, 0x069, 0x1ed, 0x077, 0x017,
    0x06f, 0x1e6, 0x064, 0x1e5, 0x067, 0x015, 0x062, 0x012,
    0x000, 0x014, 0x065, 0x016, 0x06d, 0x1e9, 0x063, 0x1e4,
    0x06b, 0x013, 0x071, 0x1e3, 0x070, 0x1f3, 0x7fe, 0x1e7,
    0x7f3, 0x1ef, 0x060, 0x1ee, 0x7f0, 0x1e2, 0x7fa, 0x3f3,
    0x06a, 0x1e8, 0x075, 0x010, 0x073, 0x1f4, 0x06e, 0x3f7,
    0x7f6, 0x1e0, 0x7f9, 0x3f2, 0x066, 0x1f5, 0x7ff, 0x1f7,
    0x7f4,
)
HCB1_BITS = (
    11, 9, 11, 10, 7, 10, 11, 9, 11, 10, 7, 10, 7, 5, 7, 9,
    7, 10, 11, 9, 11, 9, 7, 9, 11, 9, 11, 9, 7, 9, 7, 5,
    7, 9, 7, 9, 7, 5, 7, 5, 1, 5, 7, 5, 7, 9, 7, 9,
    7, 5, 7, 9, 7, 9, 11, 9, 11, 9, 7, 9, 11, 9, 11, 10,
    7, 9, 7, 5, 7, 9, 7, 10, 11, 9, 11, 10, 7, 9, 11, 9,
    11,
)

################################################################################
## Table 4.A.3 – Spectrum Huffman codebook 2
################################################################################
HCB2_CODES = (
    0x1f3, 0x06f, 0x1fd, 0x0eb, 0x023, 0x0ea, 0x1f7, 0x0e8,
    0x1fa, 0x0f2, 0x02d, 0x070, 0x020, 0x006, 0x02b, 0x06e,
    0x028, 0x0e9, 0x1f9, 0x066, 0x0f8, 0x0e7, 0x01b, 0x0f1,
    0x1f4, 0x06b, 0x1f5, 0x0ec, 0x02a, 0x06c, 0x02c, 0x00a,
    0x027, 0x067, 0x01a, 0x0f5, 0x024, 0x008, 0x01f, 0x009,
    0x000, 0x007, 0x01d, 0x00b, 0x030, 0x0ef, 0x01c, 0x064,
    0x01e, 0x00c, 0x029, 0x0f3, 0x02f, 0x0f0, 0x1fc, 0x071,
    0x1f2, 0x0f4, 0x021, 0x0e6, 0x0f7, 0x068, 0x1f8, 0x0ee,
    0x022, 0x065, 0x031, 0x002, 0x026, 0x0ed, 0x025, 0x06a,
    0x1fb, 0x072, 0x1fe, 0x069, 0x02e, 0x0f6, 0x1ff, 0x06d,
    0x1f6,
)
HCB2_BITS = (
    9, 7, 9, 8, 6, 8, 9, 8, 9, 8, 6, 7, 6, 5, 6, 7,
    6, 8, 9, 7, 8, 8, 6, 8, 9, 7, 9, 8, 6, 7, 6, 5,
    6, 7, 6, 8, 6, 5, 6, 5, 3, 5, 6, 5, 6, 8, 6, 7,
    6, 5, 6, 8, 6, 8, 9, 7, 9, 8, 6, 8, 8, 7, 9, 8,
    6, 7, 6, 4, 6, 8, 6, 7, 9, 7, 9, 7, 6, 8, 9, 7,
    9,
)

################################################################################
## Table 4.A.4 – Spectrum Huffman codebook 3
################################################################################
HCB3_CODES = (
    0x0000, 0x0009, 0x00ef, 0x000b, 0x0019, 0x00f0, 0x01eb, 0x01e6,
    0x03f2, 0x000a, 0x0035, 0x01ef, 0x0034, 0x0037, 0x01e9, 0x01ed,
    0x01e7, 0x03f3, 0x01ee, 0x03ed, 0x1ffa, 0x01ec, 0x01f2, 0x07f9,
    0x07f8, 0x03f8, 0x0ff8, 0x0008, 0x0038, 0x03f6, 0x0036, 0x0075,
    0x03f1, 0x03eb, 0x03ec, 0x0ff4, 0x0018, 0x0076, 0x07f4, 0x0039,
    0x0074, 0x03ef, 0x01f3, 0x01f4, 0x07f6, 0x01e8, 0x03ea, 0x1ffc,
    0x00f2, 0x01f1, 0x0ffb, 0x03f5, 0x07f3, 0x0ffc, 0x00ee, 0x03f7,
    0x7ffe, 0x01f0, 0x07f5, 0x7ffd, 0x1ffb, 0x3ffa, 0xffff, 0x00f1,
    0x03f0, 0x3ffc, 0x01ea, 0x03ee, 0x3ffb, 0x0ff6, 0x0ffa, 0x7ffc,
    0x07f2, 0x0ff5, 0xfffe, 0x03f4, 0x07f7, 0x7ffb, 0x0ff7, 0x0ff9,
    0x7ffa,
)
HCB3_BITS = (
    1, 4, 8, 4, 5, 8, 9, 9, 10, 4, 6, 9, 6, 6, 9, 9,
    9, 10, 9, 10, 13, 9, 9, 11, 11, 10, 12, 4, 6, 10, 6, 7,
    10, 10, 10, 12, 5, 7, 11, 6, 7, 10, 9, 9, 11, 9, 10, 13,
    8, 9, 12, 10, 11, 12, 8, 10, 15, 9, 11, 15, 13, 14, 16, 8,
    10, 14, 9, 10, 14, 12, 12, 15, 11, 12, 16, 10, 11, 15, 12, 12,
    15,
)

################################################################################
## Table 4.A.5 – Spectrum Huffman codebook 4
################################################################################
HCB4_CODES = (
    0x007, 0x016, 0x0f6, 0x018, 0x008, 0x0ef, 0x1ef, 0x0f3,
    0x7f8, 0x019, 0x017, 0x0ed, 0x015, 0x001, 0x0e2, 0x0f0,
    0x070, 0x3f0, 0x1ee, 0x0f1, 0x7fa, 0x0ee, 0x0e4, 0x3f2,
    0x7f6, 0x3ef, 0x7fd, 0x005, 0x014, 0x0f2, 0x009, 0x004,
    0x0e5, 0x0f4, 0x0e8, 0x3f4, 0x006, 0x002, 0x0e7, 0x003,
    0x000, 0x06b, 0x0e3, 0x069, 0x1f3, 0x0eb, 0x0e6, 0x3f6,
    0x06e, 0x06a, 0x1f4, 0x3ec, 0x1f0, 0x3f9, 0x0f5, 0x0ec,
    0x7fb, 0x0ea, 0x06f, 0x3f7, 0x7f9, 0x3f3, 0xfff, 0x0e9,
    0x06d, 0x3f8, 0x06c, 0x068, 0x1f5, 0x3ee, 0x1f2, 0x7f4,
    0x7f7, 0x3f1, 0xffe, 0x3ed, 0x1f1, 0x7f5, 0x7fe, 0x3f5,
    0x7fc,
)
HCB4_BITS = (
    4, 5, 8, 5, 4, 8, 9, 8, 11, 5, 5, 8, 5, 4, 8, 8,
    7, 10, 9, 8, 11, 8, 8, 10, 11, 10, 11, 4, 5, 8, 4, 4,
    8, 8, 8, 10, 4, 4, 8, 4, 4, 7, 8, 7, 9, 8, 8, 10,
    7, 7, 9, 10, 9, 10, 8, 8, 11, 8, 7, 10, 11, 10, 12, 8,
    7, 10, 7, 7, 9, 10, 9, 11, 11, 10, 12, 10, 9, 11, 11, 10,
    11,
)

################################################################################
## Table 4.A.6 – Spectrum Huffman codebook 5
################################################################################
HCB5_CODES = (
    0x1fff, 0x0ff7, 0x07f4, 0x07e8, 0x03f1, 0x07ee, 0x07f9, 0x0ff8,
    0x1ffd, 0x0ffd, 0x07f1, 0x03e8, 0x01e8, 0x00f0, 0x01ec, 0x03ee,
    0x07f2, 0x0ffa, 0x0ff4, 0x03ef, 0x01f2, 0x00e8, 0x0070, 0x00ec,
    0x01f0, 0x03ea, 0x07f3, 0x07eb, 0x01eb, 0x00ea, 0x001a, 0x0008,
    0x0019, 0x00ee, 0x01ef, 0x07ed, 0x03f0, 0x00f2, 0x0073, 0x000b,
    0x0000, 0x000a, 0x0071, 0x00f3, 0x07e9, 0x07ef, 0x01ee, 0x00ef,
    0x0018, 0x0009, 0x001b, 0x00eb, 0x01e9, 0x07ec, 0x07f6, 0x03eb,
    0x01f3, 0x00ed, 0x0072, 0x00e9, 0x01f1, 0x03ed, 0x07f7, 0x0ff6,
    0x07f0, 0x03e9, 0x01ed, 0x00f1, 0x01ea, 0x03ec, 0x07f8, 0x0ff9,
    0x1ffc, 0x0ffc, 0x0ff5, 0x07ea, 0x03f3, 0x03f2, 0x07f5, 0x0ffb,
    0x1ffe,
)
HCB5_BITS = (
    13, 12, 11, 11, 10, 11, 11, 12, 13, 12, 11, 10, 9, 8, 9, 10,
    11, 12, 12, 10, 9, 8, 7, 8, 9, 10, 11, 11, 9, 8, 5, 4,
    5, 8, 9, 11, 10, 8, 7, 4, 1, 4, 7, 8, 11, 11, 9, 8,
    5, 4, 5, 8, 9, 11, 11, 10, 9, 8, 7, 8, 9, 10, 11, 12,
    11, 10, 9, 8, 9, 10, 11, 12, 13, 12, 12, 11, 10, 10, 11, 12,
    13,
)

################################################################################
## Table 4.A.7 – Spectrum Huffman codebook 6
################################################################################
HCB6_CODES = (
    0x7fe, 0x3fd, 0x1f1, 0x1eb, 0x1f4, 0x1ea, 0x1f0, 0x3fc,
    0x7fd, 0x3f6, 0x1e5, 0x0ea, 0x06c, 0x071, 0x068, 0x0f0,
    0x1e6, 0x3f7, 0x1f3, 0x0ef, 0x032, 0x027, 0x028, 0x026,
    0x031, 0x0eb, 0x1f7, 0x1e8, 0x06f, 0x02e, 0x008, 0x004,
    0x006, 0x029, 0x06b, 0x1ee, 0x1ef, 0x072, 0x02d, 0x002,
    0x000, 0x003, 0x02f, 0x073, 0x1fa, 0x1e7, 0x06e, 0x02b,
    0x007, 0x001, 0x005, 0x02c, 0x06d, 0x1ec, 0x1f9, 0x0ee,
    0x030, 0x024, 0x02a, 0x025, 0x033, 0x0ec, 0x1f2, 0x3f8,
    0x1e4, 0x0ed, 0x06a, 0x070, 0x069, 0x074, 0x0f1, 0x3fa,
    0x7fc, 0x3f9, 0x1f5, 0x1ed, 0x1e9, 0x1f8, 0x1f6, 0x3fb,
    0x7ff,
)
HCB6_BITS = (
    11, 10, 9, 9, 9, 9, 9, 10, 11, 10, 9, 8, 7, 7, 7, 8,
    9, 10, 9, 8, 6, 6, 6, 6, 6, 8, 9, 9, 7, 6, 4, 4,
    4, 6, 7, 9, 9, 7, 6, 4, 4, 4, 6, 7, 9, 9, 7, 6,
    4, 4, 4, 6, 7, 9, 9, 8, 6, 6, 6, 6, 6, 8, 9, 10,
    9, 8, 7, 7, 7, 7, 8, 10, 11, 10, 9, 9, 9, 9, 9, 10,
    11,
)

################################################################################
## Table 4.A.8 – Spectrum Huffman codebook 7
################################################################################
HCB7_CODES = (
    0x000, 0x005, 0x037, 0x074, 0x0f2, 0x1eb, 0x3ed, 0x7f7,
    0x004, 0x00c, 0x035, 0x071, 0x0ec, 0x0ee, 0x1ee, 0x1f5,
    0x036, 0x034, 0x072, 0x0ea, 0x0f1, 0x1e9, 0x1f3, 0x3f5,
    0x073, 0x070, 0x0eb, 0x0f0, 0x1f1, 0x1f0, 0x3ec, 0x3fa,
    0x0f3, 0x0ed, 0x1e8, 0x1ef, 0x3ef, 0x3f1, 0x3f9, 0x7fb,
    0x1ed, 0x0ef, 0x1ea, 0x1f2, 0x3f3, 0x3f8, 0x7f9, 0x7fc,
    0x3ee, 0x1ec, 0x1f4, 0x3f4, 0x3f7, 0x7f8, 0xffd, 0xffe,
    0x7f6, 0x3f0, 0x3f2, 0x3f6, 0x7fa, 0x7fd, 0xffc, 0xfff,
)
HCB7_BITS = (
    1, 3, 6, 7, 8, 9, 10, 11, 3, 4, 6, 7, 8, 8, 9, 9,
    6, 6, 7, 8, 8, 9, 9, 10, 7, 7, 8, 8, 9, 9, 10, 10,
    8, 8, 9, 9, 10, 10, 10, 11, 9, 8, 9, 9, 10, 10, 11, 11,
    10, 9, 9, 10, 10, 11, 12, 12, 11, 10, 10, 10, 11, 11, 12, 12,
)

################################################################################
## Table 4.A.9 – Spectrum Huffman codebook 8
################################################################################
HCB8_CODES = (
    0x00e, 0x005, 0x010, 0x030, 0x06f, 0x0f1, 0x1fa, 0x3fe,
    0x003, 0x000, 0x004, 0x012, 0x02c, 0x06a, 0x075, 0x0f8,
    0x00f, 0x002, 0x006, 0x014, 0x02e, 0x069, 0x072, 0x0f5,
    0x02f, 0x011, 0x013, 0x02a, 0x032, 0x06c, 0x0ec, 0x0fa,
    0x071, 0x02b, 0x02d, 0x031, 0x06d, 0x070, 0x0f2, 0x1f9,
    0x0ef, 0x068, 0x033, 0x06b, 0x06e, 0x0ee, 0x0f9, 0x3fc,
    0x1f8, 0x074, 0x073, 0x0ed, 0x0f0, 0x0f6, 0x1f6, 0x1fd,
    0x3fd, 0x0f3, 0x0f4, 0x0f7, 0x1f7, 0x1fb, 0x1fc, 0x3ff,
)
HCB8_BITS = (
    5, 4, 5, 6, 7, 8, 9, 10, 4, 3, 4, 5, 6, 7, 7, 8,
    5, 4, 4, 5, 6, 7, 7, 8, 6, 5, 5, 6, 6, 7, 8, 8,
    7, 6, 6, 6, 7, 7, 8, 9, 8, 7, 6, 7, 7, 8, 8, 10,
    9, 7, 7, 8, 8, 8, 9, 9, 10, 8, 8, 8, 9, 9, 9, 10,
)

################################################################################
## Table 4.A.10 – Spectrum Huffman codebook 9
################################################################################
HCB9_CODES = (
    0x0000, 0x0005, 0x0037, 0x00e7, 0x01de, 0x03ce, 0x03d9, 0x07c8,
    0x07cd, 0x0fc8, 0x0fdd, 0x1fe4, 0x1fec, 0x0004, 0x000c, 0x0035,
    0x0072, 0x00ea, 0x00ed, 0x01e2, 0x03d1, 0x03d3, 0x03e0, 0x07d8,
    0x0fcf, 0x0fd5, 0x0036, 0x0034, 0x0071, 0x00e8, 0x00ec, 0x01e1,
    0x03cf, 0x03dd, 0x03db, 0x07d0, 0x0fc7, 0x0fd4, 0x0fe4, 0x00e6,
    0x0070, 0x00e9, 0x01dd, 0x01e3, 0x03d2, 0x03dc, 0x07cc, 0x07ca,
    0x07de, 0x0fd8, 0x0fea, 0x1fdb, 0x01df, 0x00eb, 0x01dc, 0x01e6,
    0x03d5, 0x03de, 0x07cb, 0x07dd, 0x07dc, 0x0fcd, 0x0fe2, 0x0fe7,
    0x1fe1, 0x03d0, 0x01e0, 0x01e4, 0x03d6, 0x07c5, 0x07d1, 0x07db,
    0x0fd2, 0x07e0, 0x0fd9, 0x0feb, 0x1fe3, 0x1fe9, 0x07c4, 0x01e5,
    0x03d7, 0x07c6, 0x07cf, 0x07da, 0x0fcb, 0x0fda, 0x0fe3, 0x0fe9,
    0x1fe6, 0x1ff3, 0x1ff7, 0x07d3, 0x03d8, 0x03e1, 0x07d4, 0x07d9,
    0x0fd3, 0x0fde, 0x1fdd, 0x1fd9, 0x1fe2, 0x1fea, 0x1ff1, 0x1ff6,
    0x07d2, 0x03d4, 0x03da, 0x07c7, 0x07d7, 0x07e2, 0x0fce, 0x0fdb,
    0x1fd8, 0x1fee, 0x3ff0, 0x1ff4, 0x3ff2, 0x07e1, 0x03df, 0x07c9,
    0x07d6, 0x0fca, 0x0fd0, 0x0fe5, 0x0fe6, 0x1feb, 0x1fef, 0x3ff3,
    0x3ff4, 0x3ff5, 0x0fe0, 0x07ce, 0x07d5, 0x0fc6, 0x0fd1, 0x0fe1,
    0x1fe0, 0x1fe8, 0x1ff0, 0x3ff1, 0x3ff8, 0x3ff6, 0x7ffc, 0x0fe8,
    0x07df, 0x0fc9, 0x0fd7, 0x0fdc, 0x1fdc, 0x1fdf, 0x1fed, 0x1ff5,
    0x3ff9, 0x3ffb, 0x7ffd, 0x7ffe, 0x1fe7, 0x0fcc, 0x0fd6, 0x0fdf,
    0x1fde, 0x1fda, 0x1fe5, 0x1ff2, 0x3ffa, 0x3ff7, 0x3ffc, 0x3ffd,
    0x7fff,
)
HCB9_BITS = (
    1, 3, 6, 8, 9, 10, 10, 11, 11, 12, 12, 13, 13, 3, 4, 6,
    7, 8, 8, 9, 10, 10, 10, 11, 12, 12, 6, 6, 7, 8, 8, 9,
    10, 10, 10, 11, 12, 12, 12, 8, 7, 8, 9, 9, 10, 10, 11, 11,
    11, 12, 12, 13, 9, 8, 9, 9, 10, 10, 11, 11, 11, 12, 12, 12,
    13, 10, 9, 9, 10, 11, 11, 11, 12, 11, 12, 12, 13, 13, 11, 9,
    10, 11, 11, 11, 12, 12, 12, 12, 13, 13, 13, 11, 10, 10, 11, 11,
    12, 12, 13, 13, 13, 13, 13, 13, 11, 10, 10, 11, 11, 11, 12, 12,
    13, 13, 14, 13, 14, 11, 10, 11, 11, 12, 12, 12, 12, 13, 13, 14,
    14, 14, 12, 11, 11, 12, 12, 12, 13, 13, 13, 14, 14, 14, 15, 12,
    11, 12, 12, 12, 13, 13, 13, 13, 14, 14, 15, 15, 13, 12, 12, 12,
    13, 13, 13, 13, 14, 14, 14, 14, 15,
)

################################################################################
## Table 4.A.11 – Spectrum Huffman codebook 10
################################################################################
HCB10_CODES = (
    0x022, 0x008, 0x01d, 0x026, 0x05f, 0x0d3, 0x1cf, 0x3d0,
    0x3d7, 0x3ed, 0x7f0, 0x7f6, 0xffd, 0x007, 0x000, 0x001,
    0x009, 0x020, 0x054, 0x060, 0x0d5, 0x0dc, 0x1d4, 0x3cd,
    0x3de, 0x7e7, 0x01c, 0x002, 0x006, 0x00c, 0x01e, 0x028,
    0x05b, 0x0cd, 0x0d9, 0x1ce, 0x1dc, 0x3d9, 0x3f1, 0x025,
    0x00b, 0x00a, 0x00d, 0x024, 0x057, 0x061, 0x0cc, 0x0dd,
    0x1cc, 0x1de, 0x3d3, 0x3e7, 0x05d, 0x021, 0x01f, 0x023,
    0x027, 0x059, 0x064, 0x0d8, 0x0df, 0x1d2, 0x1e2, 0x3dd,
    0x3ee, 0x0d1, 0x055, 0x029, 0x056, 0x058, 0x062, 0x0ce,
    0x0e0, 0x0e2, 0x1da, 0x3d4, 0x3e3, 0x7eb, 0x1c9, 0x05e,
    0x05a, 0x05c, 0x063, 0x0ca, 0x0da, 0x1c7, 0x1ca, 0x1e0,
    0x3db, 0x3e8, 0x7ec, 0x1e3, 0x0d2, 0x0cb, 0x0d0, 0x0d7,
    0x0db, 0x1c6, 0x1d5, 0x1d8, 0x3ca, 0x3da, 0x7ea, 0x7f1,
    0x1e1, 0x1d0, 0x0cf, 0x0d6, 0x0de, 0x0d4, 0x1c8, 0x1cb,
    0x3cb, 0x3cc, 0x3ce, 0x7e6, 0x7e8, 0x3cf, 0x1cd, 0x1d1,
    0x1d3, 0x0e1, 0x1d6, 0x1d7, 0x1d9, 0x3d1, 0x3d2, 0x3d5,
    0x7e9, 0xff8, 0x3d6, 0x1db, 0x1dd, 0x1df, 0x1e4, 0x3d8,
    0x3dc, 0x3df, 0x3e0, 0x3e1, 0x7ed, 0x7ee, 0xff9, 0x3e2,
    0x3e4, 0x3e5, 0x3e6, 0x3e9, 0x3ea, 0x3eb, 0x7ef, 0x7f2,
    0x7f3, 0x7f4, 0x7f5, 0xffa, 0x7f7, 0x3ec, 0x3ef, 0x3f0,
    0x3f2, 0x7f8, 0x7f9, 0x7fa, 0x7fb, 0xffb, 0xffc, 0xffe,
    0xfff,
)
HCB10_BITS = (
    6, 5, 6, 6, 7, 8, 9, 10, 10, 10, 11, 11, 12, 5, 4, 4,
    5, 6, 7, 7, 8, 8, 9, 10, 10, 11, 6, 4, 5, 5, 6, 6,
    7, 8, 8, 9, 9, 10, 10, 6, 5, 5, 5, 6, 7, 7, 8, 8,
    9, 9, 10, 10, 7, 6, 6, 6, 6, 7, 7, 8, 8, 9, 9, 10,
    10, 8, 7, 6, 7, 7, 7, 8, 8, 8, 9, 10, 10, 11, 9, 7,
    7, 7, 7, 8, 8, 9, 9, 9, 10, 10, 11, 9, 8, 8, 8, 8,
    8, 9, 9, 9, 10, 10, 11, 11, 9, 9, 8, 8, 8, 8, 9, 9,
    10, 10, 10, 11, 11, 10, 9, 9, 9, 8, 9, 9, 9, 10, 10, 10,
    11, 12, 10, 9, 9, 9, 9, 10, 10, 10, 10, 10, 11, 11, 12, 10,
    10, 10, 10, 10, 10, 10, 11, 11, 11, 11, 11, 12, 11, 10, 10, 10,
    10, 11, 11, 11, 11, 12, 12, 12, 12,
)

################################################################################
## Table 4.A.12 – Spectrum Huffman codebook 11
################################################################################
HCB11_CODES = (
    0x000, 0x004, 0x014, 0x036, 0x08c, 0x08d, 0x16a, 0x37a,
    0x37b, 0x37c, 0x37d, 0x37e, 0x37f, 0x380, 0x381, 0x382,
    0x383, 0x005, 0x001, 0x006, 0x015, 0x037, 0x038, 0x08e,
    0x08f, 0x16b, 0x16c, 0x16d, 0x384, 0x385, 0x386, 0x387,
    0x388, 0x090, 0x016, 0x007, 0x008, 0x017, 0x039, 0x03a,
    0x091, 0x092, 0x093, 0x16e, 0x16f, 0x170, 0x389, 0x38a,
    0x38b, 0x38c, 0x094, 0x03b, 0x018, 0x019, 0x01a, 0x03c,
    0x03d, 0x095, 0x096, 0x097, 0x171, 0x172, 0x173, 0x38d,
    0x38e, 0x38f, 0x390, 0x098, 0x099, 0x03e, 0x03f, 0x040,
    0x041, 0x09a, 0x09b, 0x09c, 0x09d, 0x174, 0x175, 0x176,
    0x391, 0x392, 0x393, 0x394, 0x09e, 0x09f, 0x042, 0x043,
    0x044, 0x045, 0x0a0, 0x0a1, 0x0a2, 0x177, 0x178, 0x179,
    0x17a, 0x395, 0x396, 0x397, 0x398, 0x0a3, 0x17b, 0x0a4,
    0x0a5, 0x0a6, 0x0a7, 0x0a8, 0x0a9, 0x0aa, 0x17c, 0x17d,
    0x17e, 0x399, 0x39a, 0x39b, 0x39c, 0x39d, 0x0ab, 0x17f,
    0x0ac, 0x0ad, 0x180, 0x0ae, 0x0af, 0x0b0, 0x181, 0x182,
    0x183, 0x184, 0x39e, 0x39f, 0x3a0, 0x3a1, 0x3a2, 0x0b1,
    0x185, 0x186, 0x187, 0x188, 0x189, 0x18a, 0x18b, 0x18c,
    0x18d, 0x3a3, 0x3a4, 0x3a5, 0x3a6, 0x3a7, 0x3a8, 0x3a9,
    0x0b2, 0x3aa, 0x18e, 0x18f, 0x190, 0x191, 0x192, 0x193,
    0x194, 0x3ab, 0x3ac, 0x3ad, 0x3ae, 0x3af, 0x3b0, 0x3b1,
    0x3b2, 0x0b3, 0x3b3, 0x3b4, 0x195, 0x196, 0x3b5, 0x197,
    0x3b6, 0x3b7, 0x3b8, 0x3b9, 0x3ba, 0x3bb, 0x3bc, 0x3bd,
    0x3be, 0x3bf, 0x0b4, 0x3c0, 0x3c1, 0x3c2, 0x3c3, 0x3c4,
    0x3c5, 0x3c6, 0x3c7, 0x3c8, 0x3c9, 0x3ca, 0x3cb, 0x3cc,
    0x3cd, 0x3ce, 0x3cf, 0x198, 0x3d0, 0x3d1, 0x3d2, 0x3d3,
    0x3d4, 0x3d5, 0x3d6, 0x3d7, 0x3d8, 0x3d9, 0x3da, 0x3db,
    0x3dc, 0x3dd, 0x3de, 0x3df, 0x199, 0x3e0, 0x3e1, 0x3e2,
    0x3e3, 0x3e4, 0x3e5, 0x3e6, 0x3e7, 0x3e8, 0x3e9, 0x3ea,
    0x3eb, 0x3ec, 0x3ed, 0x3ee, 0x3ef, 0x19a, 0x3f0, 0x3f1,
    0x3f2, 0x3f3, 0x3f4, 0x3f5, 0x3f6, 0x3f7, 0x3f8, 0x3f9,
    0x3fa, 0x3fb, 0x3fc, 0x3fd, 0x3fe, 0x3ff, 0x19b, 0x19c,
    0x19d, 0x19e, 0x19f, 0x1a0, 0x1a1, 0x1a2, 0x1a3, 0x1a4,
    0x1a5, 0x1a6, 0x1a7, 0x1a8, 0x1a9, 0x1aa, 0x1ab, 0x1ac,
    0x1ad, 0x1ae, 0x1af, 0x1b0, 0x1b1, 0x1b2, 0x1b3, 0x1b4,
    0x1b5, 0x1b6, 0x1b7, 0x1b8, 0x1b9, 0x1ba, 0x1bb, 0x1bc,
    0x009,
)
HCB11_BITS = (
    4, 5, 6, 7, 8, 8, 9, 10, 10, 10, 10, 10, 10, 10, 10, 10,
    10, 5, 4, 5, 6, 7, 7, 8, 8, 9, 9, 9, 10, 10, 10, 10,
    10, 8, 6, 5, 5, 6, 7, 7, 8, 8, 8, 9, 9, 9, 10, 10,
    10, 10, 8, 7, 6, 6, 6, 7, 7, 8, 8, 8, 9, 9, 9, 10,
    10, 10, 10, 8, 8, 7, 7, 7, 7, 8, 8, 8, 8, 9, 9, 9,
    10, 10, 10, 10, 8, 8, 7, 7, 7, 7, 8, 8, 8, 9, 9, 9,
    9, 10, 10, 10, 10, 8, 9, 8, 8, 8, 8, 8, 8, 8, 9, 9,
    9, 10, 10, 10, 10, 10, 8, 9, 8, 8, 9, 8, 8, 8, 9, 9,
    9, 9, 10, 10, 10, 10, 10, 8, 9, 9, 9, 9, 9, 9, 9, 9,
    9, 10, 10, 10, 10, 10, 10, 10, 8, 10, 9, 9, 9, 9, 9, 9,
    9, 10, 10, 10, 10, 10, 10, 10, 10, 8, 10, 10, 9, 9, 10, 9,
    10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 8, 10, 10, 10, 10, 10,
    10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 9, 10, 10, 10, 10,
    10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 9, 10, 10, 10,
    10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 9, 10, 10,
    10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 10, 9, 9,
    9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9,
    9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9, 9,
    5,
)

################################################################################
## SBR t_huffman_env_1_5dB (index = delta + 60)
################################################################################
T_HUFFMAN_ENV_1_5DB_CODES = (
    0xfff9c, 0xfff9d, 0xfff9e, 0xfff9f, 0xfffa0, 0xfffa1, 0xfffa2, 0xfffa3,
    0xfffa4, 0xfffa5, 0xfffa6, 0xfffa7, 0xfffa8, 0xfffa9, 0xfffaa, 0xfffab,
    0xfffac, 0xfffad, 0xfffae, 0xfffaf, 0xfffb0, 0xfffb1, 0xfffb2, 0xfffb3,
    0xfffb4, 0xfffb5, 0xfffb6, 0xfffb7, 0xfffb8, 0xfffb9, 0xfffba, 0xfffbb,
    0xfffbc, 0xfffbd, 0xfffbe, 0xfffbf, 0xfffc0, 0xfffc1, 0xfffc2, 0xfffc3,
    0xfffc4, 0xfffc5, 0xfffc6, 0xfffc7, 0xfffc8, 0xfffc9, 0xfffca, 0xfffcb,
    0xfffcc, 0xfffcd, 0x7ffcc, 0x3ffe4, 0x1fff0, 0x03ffc, 0x01ffc, 0x003fe,
    0x000fe, 0x0003e, 0x0000e, 0x00002, 0x00000, 0x00006, 0x0001e, 0x0007e,
    0x001fe, 0x007fe, 0x01ffd, 0x03ffd, 0x1fff1, 0x3ffe5, 0x7ffcd, 0xfffce,
    0xfffcf, 0xfffd0, 0xfffd1, 0xfffd2, 0xfffd3, 0xfffd4, 0xfffd5, 0xfffd6,
    0xfffd7, 0xfffd8, 0xfffd9, 0xfffda, 0xfffdb, 0xfffdc, 0xfffdd, 0xfffde,
    0xfffdf, 0xfffe0, 0xfffe1, 0xfffe2, 0xfffe3, 0xfffe4, 0xfffe5, 0xfffe6,
    0xfffe7, 0xfffe8, 0xfffe9, 0xfffea, 0xfffeb, 0xfffec, 0xfffed, 0xfffee,
    0xfffef, 0xffff0, 0xffff1, 0xffff2, 0xffff3, 0xffff4, 0xffff5, 0xffff6,
    0xffff7, 0xffff8, 0xffff9, 0xffffa, 0xffffb, 0xffffc, 0xffffd, 0xffffe,
    0xfffff,
)
T_HUFFMAN_ENV_1_5DB_BITS = (
    20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20,
    20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20,
    20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20,
    20, 20, 19, 18, 17, 14, 13, 10, 8, 6, 4, 2, 1, 3, 5, 7,
    9, 11, 13, 14, 17, 18, 19, 20, 20, 20, 20, 20, 20, 20, 20, 20,
    20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20,
    20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20,
    20, 20, 20, 20, 20, 20, 20, 20, 20,
)

################################################################################
## SBR f_huffman_env_1_5dB (index = delta + 60)
################################################################################
F_HUFFMAN_ENV_1_5DB_CODES = (
    0xfff9c, 0xfff9d, 0xfff9e, 0xfff9f, 0xfffa0, 0xfffa1, 0xfffa2, 0xfffa3,
    0xfffa4, 0xfffa5, 0xfffa6, 0xfffa7, 0xfffa8, 0xfffa9, 0xfffaa, 0xfffab,
    0xfffac, 0xfffad, 0xfffae, 0xfffaf, 0xfffb0, 0xfffb1, 0xfffb2, 0xfffb3,
    0xfffb4, 0xfffb5, 0xfffb6, 0xfffb7, 0xfffb8, 0xfffb9, 0xfffba, 0xfffbb,
    0xfffbc, 0xfffbd, 0xfffbe, 0xfffbf, 0xfffc0, 0xfffc1, 0xfffc2, 0xfffc3,
    0xfffc4, 0xfffc5, 0xfffc6, 0xfffc7, 0xfffc8, 0xfffc9, 0xfffca, 0xfffcb,
    0xfffcc, 0xfffcd, 0x7ffcc, 0x3ffe4, 0x1fff0, 0x03ffc, 0x01ffc, 0x003fe,
    0x000fe, 0x0003e, 0x0000e, 0x00002, 0x00000, 0x00006, 0x0001e, 0x0007e,
    0x001fe, 0x007fe, 0x01ffd, 0x03ffd, 0x1fff1, 0x3ffe5, 0x7ffcd, 0xfffce,
    0xfffcf, 0xfffd0, 0xfffd1, 0xfffd2, 0xfffd3, 0xfffd4, 0xfffd5, 0xfffd6,
    0xfffd7, 0xfffd8, 0xfffd9, 0xfffda, 0xfffdb, 0xfffdc, 0xfffdd, 0xfffde,
    0xfffdf, 0xfffe0, 0xfffe1, 0xfffe2, 0xfffe3, 0xfffe4, 0xfffe5, 0xfffe6,
    0xfffe7, 0xfffe8, 0xfffe9, 0xfffea, 0xfffeb, 0xfffec, 0xfffed, 0xfffee,
    0xfffef, 0xffff0, 0xffff1, 0xffff2, 0xffff3, 0xffff4, 0xffff5, 0xffff6,
    0xffff7, 0xffff8, 0xffff9, 0xffffa, 0xffffb, 0xffffc, 0xffffd, 0xffffe,
    0xfffff,
)
F_HUFFMAN_ENV_1_5DB_BITS = (
    20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20,
    20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20,
    20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20,
    20, 20, 19, 18, 17, 14, 13, 10, 8, 6, 4, 2, 1, 3, 5, 7,
    9, 11, 13, 14, 17, 18, 19, 20, 20, 20, 20, 20, 20, 20, 20, 20,
    20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20,
    20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20, 20,
    20, 20, 20, 20, 20, 20, 20, 20, 20,
)

################################################################################
## SBR t_huffman_env_bal_1_5dB (index = delta + 24)
################################################################################
T_HUFFMAN_ENV_BAL_1_5DB_CODES = (
    0x0ffde, 0x0ffdf, 0x0ffe0, 0x0ffe1, 0x0ffe2, 0x0ffe3, 0x0ffe4, 0x0ffe5,
    0x0ffe6, 0x0ffe7, 0x0ffe8, 0x0ffe9, 0x0ffea, 0x0ffeb, 0x0ffec, 0x0ffed,
    0x0ffee, 0x03ff6, 0x00ffc, 0x007fc, 0x000fe, 0x0003e, 0x0000e, 0x00002,
    0x00000, 0x00006, 0x0001e, 0x0007e, 0x001fe, 0x007fd, 0x01ffa, 0x07fee,
    0x0ffef, 0x0fff0, 0x0fff1, 0x0fff2, 0x0fff3, 0x0fff4, 0x0fff5, 0x0fff6,
    0x0fff7, 0x0fff8, 0x0fff9, 0x0fffa, 0x0fffb, 0x0fffc, 0x0fffd, 0x0fffe,
    0x0ffff,
)
T_HUFFMAN_ENV_BAL_1_5DB_BITS = (
    16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16,
    16, 14, 12, 11, 8, 6, 4, 2, 1, 3, 5, 7, 9, 11, 13, 15,
    16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16,
    16,
)

################################################################################
## SBR f_huffman_env_bal_1_5dB (index = delta + 24)
################################################################################
F_HUFFMAN_ENV_BAL_1_5DB_CODES = (
    0x0ffde, 0x0ffdf, 0x0ffe0, 0x0ffe1, 0x0ffe2, 0x0ffe3, 0x0ffe4, 0x0ffe5,
    0x0ffe6, 0x0ffe7, 0x0ffe8, 0x0ffe9, 0x0ffea, 0x0ffeb, 0x0ffec, 0x0ffed,
    0x0ffee, 0x03ff6, 0x00ffc, 0x007fc, 0x000fe, 0x0003e, 0x0000e, 0x00002,
    0x00000, 0x00006, 0x0001e, 0x0007e, 0x001fe, 0x007fd, 0x01ffa, 0x07fee,
    0x0ffef, 0x0fff0, 0x0fff1, 0x0fff2, 0x0fff3, 0x0fff4, 0x0fff5, 0x0fff6,
    0x0fff7, 0x0fff8, 0x0fff9, 0x0fffa, 0x0fffb, 0x0fffc, 0x0fffd, 0x0fffe,
    0x0ffff,
)
F_HUFFMAN_ENV_BAL_1_5DB_BITS = (
    16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16,
    16, 14, 12, 11, 8, 6, 4, 2, 1, 3, 5, 7, 9, 11, 13, 15,
    16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16, 16,
    16,
)

################################################################################
## SBR t_huffman_env_3_0dB (index = delta + 31)
################################################################################
T_HUFFMAN_ENV_3_0DB_CODES = (
    0x3fffc, 0x3fffd, 0x1ffd4, 0x1ffd5, 0x1ffd6, 0x1ffd7, 0x1ffd8, 0x1ffd9,
    0x1ffda, 0x1ffdb, 0x1ffdc, 0x1ffdd, 0x1ffde, 0x1ffdf, 0x1ffe0, 0x1ffe1,
    0x1ffe2, 0x1ffe3, 0x1ffe4, 0x1ffe5, 0x1ffe6, 0x1ffe7, 0x1ffe8, 0x0ffe8,
    0x03ff8, 0x00ffc, 0x007fc, 0x000fe, 0x0003e, 0x0000e, 0x00002, 0x00000,
    0x00006, 0x0001e, 0x0007e, 0x001fe, 0x007fd, 0x00ffd, 0x03ff9, 0x0ffe9,
    0x1ffe9, 0x1ffea, 0x1ffeb, 0x1ffec, 0x1ffed, 0x1ffee, 0x1ffef, 0x1fff0,
    0x1fff1, 0x1fff2, 0x1fff3, 0x1fff4, 0x1fff5, 0x1fff6, 0x1fff7, 0x1fff8,
    0x1fff9, 0x1fffa, 0x1fffb, 0x1fffc, 0x1fffd, 0x3fffe, 0x3ffff,
)
T_HUFFMAN_ENV_3_0DB_BITS = (
    18, 18, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17,
    17, 17, 17, 17, 17, 17, 17, 16, 14, 12, 11, 8, 6, 4, 2, 1,
    3, 5, 7, 9, 11, 12, 14, 16, 17, 17, 17, 17, 17, 17, 17, 17,
    17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 18, 18,
)

################################################################################
## SBR f_huffman_env_3_0dB (index = delta + 31)
################################################################################
F_HUFFMAN_ENV_3_0DB_CODES = (
    0x3fffc, 0x3fffd, 0x1ffd4, 0x1ffd5, 0x1ffd6, 0x1ffd7, 0x1ffd8, 0x1ffd9,
    0x1ffda, 0x1ffdb, 0x1ffdc, 0x1ffdd, 0x1ffde, 0x1ffdf, 0x1ffe0, 0x1ffe1,
    0x1ffe2, 0x1ffe3, 0x1ffe4, 0x1ffe5, 0x1ffe6, 0x1ffe7, 0x1ffe8, 0x0ffe8,
    0x03ff8, 0x00ffc, 0x007fc, 0x000fe, 0x0003e, 0x0000e, 0x00002, 0x00000,
    0x00006, 0x0001e, 0x0007e, 0x001fe, 0x007fd, 0x00ffd, 0x03ff9, 0x0ffe9,
    0x1ffe9, 0x1ffea, 0x1ffeb, 0x1ffec, 0x1ffed, 0x1ffee, 0x1ffef, 0x1fff0,
    0x1fff1, 0x1fff2, 0x1fff3, 0x1fff4, 0x1fff5, 0x1fff6, 0x1fff7, 0x1fff8,
    0x1fff9, 0x1fffa, 0x1fffb, 0x1fffc, 0x1fffd, 0x3fffe, 0x3ffff,
)
F_HUFFMAN_ENV_3_0DB_BITS = (
    18, 18, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17,
    17, 17, 17, 17, 17, 17, 17, 16, 14, 12, 11, 8, 6, 4, 2, 1,
    3, 5, 7, 9, 11, 12, 14, 16, 17, 17, 17, 17, 17, 17, 17, 17,
    17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 18, 18,
)

################################################################################
## SBR t_huffman_env_bal_3_0dB (index = delta + 12)
################################################################################
T_HUFFMAN_ENV_BAL_3_0DB_CODES = (
    0x01ff4, 0x01ff5, 0x01ff6, 0x01ff7, 0x01ff8, 0x01ff9, 0x00ff8, 0x003fc,
    0x001fc, 0x0003e, 0x0000e, 0x00002, 0x00000, 0x00006, 0x0001e, 0x0007e,
    0x001fd, 0x003fd, 0x00ff9, 0x01ffa, 0x01ffb, 0x01ffc, 0x01ffd, 0x01ffe,
    0x01fff,
)
T_HUFFMAN_ENV_BAL_3_0DB_BITS = (
    13, 13, 13, 13, 13, 13, 12, 10, 9, 6, 4, 2, 1, 3, 5, 7,
    9, 10, 12, 13, 13, 13, 13, 13, 13,
)

################################################################################
## SBR f_huffman_env_bal_3_0dB (index = delta + 12)
################################################################################
F_HUFFMAN_ENV_BAL_3_0DB_CODES = (
    0x01ff4, 0x01ff5, 0x01ff6, 0x01ff7, 0x01ff8, 0x01ff9, 0x00ff8, 0x003fc,
    0x001fc, 0x0003e, 0x0000e, 0x00002, 0x00000, 0x00006, 0x0001e, 0x0007e,
    0x001fd, 0x003fd, 0x00ff9, 0x01ffa, 0x01ffb, 0x01ffc, 0x01ffd, 0x01ffe,
    0x01fff,
)
F_HUFFMAN_ENV_BAL_3_0DB_BITS = (
    13, 13, 13, 13, 13, 13, 12, 10, 9, 6, 4, 2, 1, 3, 5, 7,
    9, 10, 12, 13, 13, 13, 13, 13, 13,
)

################################################################################
## SBR t_huffman_noise_3_0dB (index = delta + 31)
################################################################################
T_HUFFMAN_NOISE_3_0DB_CODES = (
    0x3fffc, 0x3fffd, 0x1ffd4, 0x1ffd5, 0x1ffd6, 0x1ffd7, 0x1ffd8, 0x1ffd9,
    0x1ffda, 0x1ffdb, 0x1ffdc, 0x1ffdd, 0x1ffde, 0x1ffdf, 0x1ffe0, 0x1ffe1,
    0x1ffe2, 0x1ffe3, 0x1ffe4, 0x1ffe5, 0x1ffe6, 0x1ffe7, 0x1ffe8, 0x0ffe8,
    0x03ff8, 0x00ffc, 0x007fc, 0x000fe, 0x0003e, 0x0000e, 0x00002, 0x00000,
    0x00006, 0x0001e, 0x0007e, 0x001fe, 0x007fd, 0x00ffd, 0x03ff9, 0x0ffe9,
    0x1ffe9, 0x1ffea, 0x1ffeb, 0x1ffec, 0x1ffed, 0x1ffee, 0x1ffef, 0x1fff0,
    0x1fff1, 0x1fff2, 0x1fff3, 0x1fff4, 0x1fff5, 0x1fff6, 0x1fff7, 0x1fff8,
    0x1fff9, 0x1fffa, 0x1fffb, 0x1fffc, 0x1fffd, 0x3fffe, 0x3ffff,
)
T_HUFFMAN_NOISE_3_0DB_BITS = (
    18, 18, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17,
    17, 17, 17, 17, 17, 17, 17, 16, 14, 12, 11, 8, 6, 4, 2, 1,
    3, 5, 7, 9, 11, 12, 14, 16, 17, 17, 17, 17, 17, 17, 17, 17,
    17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 17, 18, 18,
)

################################################################################
## SBR t_huffman_noise_bal_3_0dB (index = delta + 12)
################################################################################
T_HUFFMAN_NOISE_BAL_3_0DB_CODES = (
    0x01ff4, 0x01ff5, 0x01ff6, 0x01ff7, 0x01ff8, 0x01ff9, 0x00ff8, 0x003fc,
    0x001fc, 0x0003e, 0x0000e, 0x00002, 0x00000, 0x00006, 0x0001e, 0x0007e,
    0x001fd, 0x003fd, 0x00ff9, 0x01ffa, 0x01ffb, 0x01ffc, 0x01ffd, 0x01ffe,
    0x01fff,
)
T_HUFFMAN_NOISE_BAL_3_0DB_BITS = (
    13, 13, 13, 13, 13, 13, 12, 10, 9, 6, 4, 2, 1, 3, 5, 7,
    9, 10, 12, 13, 13, 13, 13, 13, 13,
)

