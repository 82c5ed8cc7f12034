import math

from tagparser.tools.error import TruncatedDataError

MaxReadBits = 64


class BitReader:
    """Big-endian bit cursor over a read-only byte buffer.

    Read methods return a ``(value, err)`` tuple, skip methods return ``err``.
    ``err`` is None on success and a TruncatedDataError when fewer bits are
    left than requested; the cursor is not moved in that case.
    """

    def __init__(self, input_bytes):
        self.bytes = bytes(input_bytes)
        self.length = len(self.bytes)
        self.bitLength = self.length * 8
        self.bitPosition = 0

    # Return the total number of bits left in the stream
    def BitsLeft(self):
        return self.bitLength - self.bitPosition

    # Return the number of bytes left (even if partially read)
    def BytesLeft(self):
        return max(0, self.length - self.ByteOffset())

    # Return the absolute bit offset of the cursor
    def BitPosition(self):
        return self.bitPosition

    def ReadBitAsBool(self):
        val, err = self.ReadBit()
        if err:
            return False, err
        return val != 0, None

    # Return the number of bits as an unsigned integer
    def ReadBitsAsUInt8(self, n):
        return self.ReadBits(min(n, 8))

    # Return the number of bits as an unsigned integer
    def ReadBitsAsUInt16(self, n):
        return self.ReadBits(min(n, 16))

    # Return the number of bits as an unsigned integer
    def ReadBitsAsUInt32(self, n):
        return self.ReadBits(min(n, 32))

    # Return n number of bits into a byte array, right aligned
    def ReadBitsToByteArray(self, n):
        if self.BitsLeft() < n:
            return None, TruncatedDataError()
        result = bytearray(math.ceil(n / 8))
        value = self._extract(self.bitPosition, n)
        self.bitPosition += n
        result[:] = value.to_bytes(len(result), 'big')
        return result, None

    # Return n number of bits (0 <= n <= 64)
    def ReadBits(self, n):
        val, err = self.PeekBits(n)
        if err:
            return 0, err
        if self.BitsLeft() < n:
            return 0, TruncatedDataError(f"cannot read {n} bits, only {self.BitsLeft()} left")
        self.bitPosition += n
        return val, None

    # Return the next bit from the buffer
    def ReadBit(self):
        if self.BitsLeft() == 0:
            return 0, TruncatedDataError("not enough bits left to read")
        r = (self.bytes[self.bitPosition >> 3] >> (7 - (self.bitPosition & 7))) & 1
        self.bitPosition += 1
        return r, None

    # Return n number of bytes read from the buffer, starting at the next byte boundary
    def ReadBytes(self, n):
        self.ByteAlign()
        if self.BytesLeft() < n:
            return None, TruncatedDataError("not enough bytes left to read")
        start = self.ByteOffset()
        arr = bytearray(self.bytes[start:start + n])
        self.bitPosition += n * 8
        return arr, None

    # Return n number of bits from the buffer, do not adv. the cursor.
    # Bits past the end of the buffer read as zero.
    def PeekBits(self, n):
        if n < 0 or n > MaxReadBits:
            return 0, ValueError(f"cannot handle {n} bits at once, up to {MaxReadBits} are supported")
        return self._extract(self.bitPosition, n), None

    # Return the next bit from the buffer, do not adv. the cursor
    def PeekBit(self):
        if self.BitsLeft() == 0:
            return 0, TruncatedDataError("not enough bits left to read")
        return self._extract(self.bitPosition, 1), None

    # Skip n number of bits in the buffer
    def SkipBits(self, n):
        if self.BitsLeft() < n:
            return TruncatedDataError("not enough bits left to skip")
        self.bitPosition += n
        return None

    # Skip n number of bytes in the buffer
    def SkipBytes(self, n):
        return self.SkipBits(n * 8)

    # Return if there's a bit left in the stream
    def HasBitLeft(self):
        return self.BitsLeft() > 0

    # Return if there is a byte left in the stream
    def HasByteLeft(self):
        return self.HasBytesLeft(0)

    # Return if there are more than n bytes left in the stream
    def HasBytesLeft(self, n):
        return self.BytesLeft() > n

    # Reset the stream reader back to the start of the buffer
    def Reset(self, input_bytes=None):
        if input_bytes is not None:
            self.bytes = bytes(input_bytes)
            self.length = len(self.bytes)
            self.bitLength = self.length * 8
        self.bitPosition = 0

    # Perform byte alignment (skip any remaining bits of current byte)
    def ByteAlign(self):
        self.bitPosition = min(self.bitLength, (self.bitPosition + 7) & ~7)

    def ByteOffset(self):
        return self.bitPosition >> 3

    def _extract(self, pos, n):
        if n == 0:
            return 0
        start = pos >> 3
        end = (pos + n + 7) >> 3
        chunk = self.bytes[start:end]
        width = (end - start) * 8
        value = int.from_bytes(chunk, 'big') << (8 * (end - start - len(chunk)))
        return (value >> (width - (pos & 7) - n)) & ((1 << n) - 1)
