"""
Static Huffman coding for the extended tryte alphabet -
packs symbols into bytes and reads them back.
"""
import logging

from tryte_compress.bit_utils.bit_reader import BitReader
from tryte_compress.bit_utils.bit_writer import BitWriter
from tryte_compress.codec_tables import DEFAULT_TABLES, END, MAX_CODE_LENGTH, CodecTables
from tryte_compress.errors import TruncatedInputError, UnknownCodeError

logger = logging.getLogger(__name__)


class HuffmanPacker:
    """
    Class object for the static Huffman bit packer. Object includes
    packing of extended symbols into bytes and unpacking back until
    the end marker.
    """

    def __init__(self, tables: CodecTables = DEFAULT_TABLES) -> None:
        """
        Function initializes the packer.

        :param tables: CodecTables, code lookups to use
        """
        self.tables = tables

    def pack(self, symbols: str) -> bytes:
        """
        Function writes the Huffman code of every symbol, MSB first,
        and pads the last byte with zero bits.

        :param symbols: str, extended symbols, normally ending with END
        :return: bytes, packed bit stream
        """
        writer = BitWriter()
        for symbol in symbols:
            bits, length = self.tables.encode_of(symbol)
            writer.write_code(bits, length)

        bit_length = len(writer)
        data = writer.to_bytes()
        logger.debug(
            "Packed %d symbols into %d bits (%d bytes)",
            len(symbols),
            bit_length,
            len(data),
        )
        return data

    def read_symbol(self, reader: BitReader) -> str:
        """
        Function reads bits one at a time until they form a known code.

        :param reader: BitReader, positioned at the start of a code
        :return: str, decoded symbol
        """
        key = 0
        key_length = 0
        start = reader.pos
        while key_length < MAX_CODE_LENGTH:
            key = (key << 1) | reader.read_bit()
            key_length += 1
            symbol = self.tables.decode_attempt(key, key_length)
            if symbol is not None:
                return symbol

        # only reachable with an incomplete code table
        raise UnknownCodeError(
            f"No Huffman code matches bits {key:0{key_length}b} at bit {start}"
        )

    def unpack(self, data: bytes) -> str:
        """
        Function decodes symbols from a packed stream up to the end marker.

        :param data: bytes, packed bit stream
        :return: str, decoded symbols without the end marker
        """
        reader = BitReader(data)
        decoded = []

        while True:
            try:
                symbol = self.read_symbol(reader)
            except TruncatedInputError:
                raise TruncatedInputError(
                    f"Input ended at byte {reader.byte_pos} after "
                    f"{len(decoded)} symbols without an end marker"
                ) from None
            if symbol == END:
                break
            decoded.append(symbol)

        logger.debug(
            "Unpacked %d symbols from %d bytes, %d trailing bits ignored",
            len(decoded),
            len(data),
            reader.remaining(),
        )
        return "".join(decoded)
