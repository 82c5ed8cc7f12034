import math


def minInt(a: int, b: int) -> int:
    return a if a < b else b


def maxInt(a: int, b: int) -> int:
    return a if a > b else b


# Round half up as used by the SBR band table formulas
def aacRound(x: float) -> int:
    return int(math.floor(x + 0.5))
