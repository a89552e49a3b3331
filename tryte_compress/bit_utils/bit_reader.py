from bitarray import bitarray

from tryte_compress.errors import TruncatedInputError


class BitReader:
    """
    Walks an in-memory byte buffer one bit at a time, most significant
    bit of each byte first.
    """

    def __init__(self, data: bytes) -> None:
        self.bits = bitarray(endian="big")
        self.bits.frombytes(bytes(data))
        self.pos = 0

    @property
    def byte_pos(self) -> int:
        """Index of the byte holding the next bit."""
        return self.pos // 8

    @property
    def bit_index(self) -> int:
        """Position (0-7, MSB first) of the next bit inside its byte."""
        return self.pos % 8

    def remaining(self) -> int:
        return len(self.bits) - self.pos

    def read_bit(self) -> int:
        """
        Consume the next bit.

        Raises:
            TruncatedInputError: If every bit has been consumed
        """
        if self.pos >= len(self.bits):
            raise TruncatedInputError(
                f"Bit stream exhausted after {len(self.bits) // 8} bytes"
            )
        val = self.bits[self.pos]
        self.pos += 1
        return val
