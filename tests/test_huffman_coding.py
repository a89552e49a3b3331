import unittest

from tryte_compress.codec_tables import END, RUN1, RUN2, RUN3, build_tables
from tryte_compress.errors import (
    TruncatedInputError,
    TryteCompressError,
    UnknownCodeError,
    UnknownSymbolError,
)
from tryte_compress.huffman_coding import HuffmanPacker
from tryte_compress.bit_utils.bit_reader import BitReader


class HuffmanPackerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.packer = HuffmanPacker()

    def test_pack_scenario(self) -> None:
        symbols = RUN1 + "ZA" + RUN1 + "CA" + END
        self.assertEqual(self.packer.pack(symbols), b"\x05\xc8\x08\xa0\x00")

    def test_pack_end_only(self) -> None:
        self.assertEqual(self.packer.pack(END), b"\x00")

    def test_pack_unknown_symbol(self) -> None:
        with self.assertRaises(UnknownSymbolError):
            self.packer.pack("AbC")

    def test_unpack_scenario(self) -> None:
        self.assertEqual(
            self.packer.unpack(b"\x05\xc8\x08\xa0\x00"),
            RUN1 + "ZA" + RUN1 + "CA",
        )

    def test_unpack_stops_at_end(self) -> None:
        data = self.packer.pack("HELLO" + END) + b"\xff\xff"
        self.assertEqual(self.packer.unpack(data), "HELLO")
        self.assertEqual(self.packer.unpack(b"\x00"), "")

    def test_every_symbol(self) -> None:
        symbols = "9ABCDEFGHIJKLMNOPQRSTUVWXYZ" + RUN1 + RUN2 + RUN3
        self.assertEqual(self.packer.unpack(self.packer.pack(symbols + END)), symbols)

    def test_read_symbol_probes_at_most_eight_bits(self) -> None:
        reader = BitReader(b"\x01\x40")
        self.assertEqual(self.packer.read_symbol(reader), RUN3)
        self.assertEqual(reader.pos, 8)
        self.assertEqual(self.packer.read_symbol(reader), "A")
        self.assertEqual(reader.pos, 12)

    def test_unpack_truncated(self) -> None:
        cases = [
            b"",
            # RUN2 then a single dangling bit
            b"\x02",
            # scenario stream with the last byte cut off
            b"\x05\xc8\x08\xa0",
            # valid codes but no end marker
            self.packer.pack("ABC"),
        ]
        for data in cases:
            with self.assertRaises(TruncatedInputError, msg=data):
                self.packer.unpack(data)

    def test_custom_tables(self) -> None:
        tables = build_tables({"A": "0", "B": "10", END: "11"})
        packer = HuffmanPacker(tables)
        data = packer.pack("ABBA" + END)
        self.assertEqual(data, bytes([0b01010011]))
        self.assertEqual(packer.unpack(data), "ABBA")

    def test_incomplete_table_reports_unknown_code(self) -> None:
        # nothing is assigned to codes starting with 11
        packer = HuffmanPacker(build_tables({"A": "0", END: "10"}))
        with self.assertRaises(UnknownCodeError) as ctx:
            packer.unpack(b"\xff")
        self.assertIsInstance(ctx.exception, TryteCompressError)
        self.assertIn("11111111", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
