import unittest

from tryte_compress.bit_utils.bit_reader import BitReader
from tryte_compress.bit_utils.bit_writer import BitWriter
from tryte_compress.errors import TruncatedInputError


def read_bits(reader: BitReader, n: int) -> int:
    val = 0
    for _ in range(n):
        val = (val << 1) | reader.read_bit()
    return val


class BitWriterTests(unittest.TestCase):
    def test_msb_first_and_zero_padding(self) -> None:
        writer = BitWriter()
        writer.write_code(0b101, 3)
        self.assertEqual(len(writer), 3)
        self.assertEqual(writer.to_bytes(), b"\xa0")

    def test_spans_bytes(self) -> None:
        writer = BitWriter()
        writer.write_code(0b11110, 5)
        writer.write_code(0b0100, 4)
        writer.write_code(0b0011, 4)
        # 11110010 00011 + 000 padding
        self.assertEqual(writer.to_bytes(), b"\xf2\x18")

    def test_leading_zero_bits_kept(self) -> None:
        writer = BitWriter()
        writer.write_code(0b0000001, 7)
        writer.write_code(0, 8)
        self.assertEqual(len(writer), 15)
        self.assertEqual(writer.to_bytes(), b"\x02\x00")

    def test_exact_byte_has_no_padding(self) -> None:
        writer = BitWriter()
        writer.write_code(0b0100, 4)
        writer.write_code(0b0001, 4)
        self.assertEqual(writer.to_bytes(), b"\x41")

    def test_zero_and_negative_length(self) -> None:
        writer = BitWriter()
        writer.write_code(0, 0)
        self.assertEqual(len(writer), 0)
        self.assertEqual(writer.to_bytes(), b"")
        with self.assertRaises(ValueError):
            writer.write_code(1, -1)

    def test_code_wider_than_length(self) -> None:
        with self.assertRaises(OverflowError):
            BitWriter().write_code(0b100, 2)


class BitReaderTests(unittest.TestCase):
    def test_reads_msb_first(self) -> None:
        reader = BitReader(b"\xa5")
        self.assertEqual(read_bits(reader, 4), 0b1010)
        self.assertEqual(reader.read_bit(), 0)
        self.assertEqual(reader.byte_pos, 0)
        self.assertEqual(reader.bit_index, 5)
        self.assertEqual(read_bits(reader, 3), 0b101)
        self.assertEqual(reader.remaining(), 0)

    def test_cursor_moves_to_next_byte(self) -> None:
        reader = BitReader(bytearray(b"\x00\xff"))
        read_bits(reader, 8)
        self.assertEqual((reader.byte_pos, reader.bit_index), (1, 0))
        self.assertEqual(reader.read_bit(), 1)

    def test_exhausted(self) -> None:
        reader = BitReader(b"\x01")
        self.assertEqual(read_bits(reader, 8), 1)
        with self.assertRaises(TruncatedInputError) as ctx:
            reader.read_bit()
        self.assertIsInstance(ctx.exception, EOFError)

    def test_empty(self) -> None:
        with self.assertRaises(TruncatedInputError):
            BitReader(b"").read_bit()


if __name__ == "__main__":
    unittest.main()
