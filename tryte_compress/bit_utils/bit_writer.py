from bitarray import bitarray
from bitarray.util import int2ba


class BitWriter:
    """
    Accumulates Huffman codes in a big-endian bitarray and hands them out
    as zero-padded bytes.
    """

    def __init__(self) -> None:
        self.bits = bitarray(endian="big")

    def write_code(self, bits: int, length: int) -> None:
        """
        Append the low `length` bits of `bits`, most significant first.

        Args:
            bits: Code value
            length: Code length in bits

        Raises:
            ValueError: If length is negative
            OverflowError: If bits does not fit in length bits
        """
        if length < 0:
            raise ValueError("Length cannot be negative")
        if length:
            self.bits.extend(int2ba(bits, length, endian="big"))

    def to_bytes(self) -> bytes:
        """
        Return the stream as bytes, the last one padded with zero bits.
        """
        # tobytes() zero-fills the unused low bits of the last byte
        return self.bits.tobytes()

    def __len__(self) -> int:
        return len(self.bits)
