"""
Static tables shared by the run-length stage and the Huffman packer.

The tryte alphabet doubles as the base-27 digit alphabet used to spell run
lengths. Four extra control symbols (three run markers and the end marker)
extend it to the 31 symbols covered by the Huffman code.
"""
from types import MappingProxyType
from typing import Mapping

from tryte_compress.errors import UnknownSymbolError

# '9' is the zero digit, 'A'..'Z' are 1..26
RLE_ALPHABET = "9ABCDEFGHIJKLMNOPQRSTUVWXYZ"
TRYTE_ALPHABET = frozenset(RLE_ALPHABET)

RUN1 = "1"
RUN2 = "2"
RUN3 = "3"
END = "_"
CONTROL_SYMBOLS = frozenset((RUN1, RUN2, RUN3, END))

MAX_CODE_LENGTH = 8

# symbol -> code written as a bit string, most significant bit first
HUFFMAN_CODES = {
    "A": "0100",
    "B": "11110",
    "C": "0001",
    "D": "11111",
    "E": "11101",
    "F": "11100",
    "G": "10010",
    "H": "11000",
    "I": "10111",
    "J": "10000",
    "K": "10001",
    "L": "10011",
    "M": "00001",
    "N": "11001",
    "O": "10101",
    "P": "11011",
    "Q": "01010",
    "R": "11010",
    "S": "0010",
    "T": "10100",
    "U": "01011",
    "V": "01111",
    "W": "10110",
    "X": "01101",
    "Y": "01100",
    "Z": "01110",
    "9": "0011",
    RUN1: "000001",
    RUN2: "0000001",
    RUN3: "00000001",
    END: "00000000",
}


def is_prefix_free(codes: Mapping[str, str]) -> bool:
    """
    Check that no code in the mapping is a prefix of another one.

    Sorting puts every code right before the codes it prefixes, so only
    neighbours need to be compared.
    """
    ordered = sorted(codes.values())
    for shorter, longer in zip(ordered, ordered[1:]):
        if longer.startswith(shorter):
            return False
    return True


class CodecTables:
    """
    Encode and decode lookups for the static Huffman code.

    The decode side is a tuple indexed by code length, each entry mapping
    the integer value of a code of that length to its symbol.
    """

    def __init__(self, codes: Mapping[str, str]) -> None:
        """
        Build the lookups from a symbol -> bit string mapping.

        :param codes: prefix-free code listing
        """
        if not is_prefix_free(codes):
            raise ValueError("Huffman code listing is not prefix-free")

        encode_table = {}
        by_length = [dict() for _ in range(MAX_CODE_LENGTH + 1)]
        for symbol, code in codes.items():
            length = len(code)
            if not 0 < length <= MAX_CODE_LENGTH:
                raise ValueError(
                    f"Code for {symbol!r} has length {length}, "
                    f"expected 1..{MAX_CODE_LENGTH}"
                )
            bits = int(code, 2)
            encode_table[symbol] = (bits, length)
            by_length[length][bits] = symbol

        self.encode_table = MappingProxyType(encode_table)
        self.decode_table = tuple(MappingProxyType(d) for d in by_length)

    def encode_of(self, symbol: str) -> tuple[int, int]:
        """
        Return the (bits, length) pair for a symbol.

        :raises UnknownSymbolError: symbol is not in the extended alphabet
        """
        try:
            return self.encode_table[symbol]
        except KeyError:
            raise UnknownSymbolError(symbol) from None

    def decode_attempt(self, bits: int, length: int) -> str | None:
        """Return the symbol whose code is exactly `length` bits of `bits`, if any."""
        if length > MAX_CODE_LENGTH:
            return None
        return self.decode_table[length].get(bits)

    def __eq__(self, other) -> bool:
        if not isinstance(other, CodecTables):
            return NotImplemented
        return (
            dict(self.encode_table) == dict(other.encode_table)
            and [dict(d) for d in self.decode_table]
            == [dict(d) for d in other.decode_table]
        )


def build_tables(codes: Mapping[str, str] = HUFFMAN_CODES) -> CodecTables:
    """Construct a fresh set of codec tables from a code listing."""
    return CodecTables(codes)


DEFAULT_TABLES = build_tables()
