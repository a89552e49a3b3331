"""
Tryte compression pipeline: run-length encoding followed by static
Huffman bit packing.
"""
import logging

from tryte_compress.codec_tables import DEFAULT_TABLES, END, TRYTE_ALPHABET, CodecTables
from tryte_compress.compressor_ABC import Compressor, TryteInput
from tryte_compress.errors import InvalidTryteError
from tryte_compress.huffman_coding import HuffmanPacker
from tryte_compress.RLE import RunLengthCoder

logger = logging.getLogger(__name__)


def _as_tryte_string(trytes: TryteInput) -> str:
    """Accept str, ASCII bytes or a sequence of characters; check every one is a tryte."""
    if isinstance(trytes, (bytes, bytearray)):
        trytes = trytes.decode("latin-1")
    elif not isinstance(trytes, str):
        # TypeError for sequences holding anything but strings
        trytes = "".join(trytes)
    for position, symbol in enumerate(trytes):
        if symbol not in TRYTE_ALPHABET:
            raise InvalidTryteError(symbol, position)
    return trytes


class TryteCodec(Compressor):
    def __init__(self, tables: CodecTables = DEFAULT_TABLES, verbose: bool = False) -> None:
        """
        Initialize the tryte codec.

        Args:
            tables: Huffman code lookups shared by packer and unpacker
            verbose: Log per-call statistics at INFO instead of DEBUG
        """
        self.packer = HuffmanPacker(tables)
        self.verbose = verbose

    def _log(self, msg: str, *args) -> None:
        logger.log(logging.INFO if self.verbose else logging.DEBUG, msg, *args)

    def compress(self, trytes: TryteInput) -> bytes:
        """
        Compress a tryte sequence.

        Args:
            trytes: Tryte string or its ASCII bytes

        Returns:
            Packed bit stream terminated by the end marker code

        Raises:
            EmptyInputError: If trytes is empty
            InvalidTryteError: If trytes holds a non-tryte character
        """
        trytes = _as_tryte_string(trytes)
        symbols = RunLengthCoder.encode(trytes)
        data = self.packer.pack(symbols + END)
        self._log("Compressed: %s", self.describe(len(trytes), len(data)))
        return data

    def decompress(self, data: bytes) -> str:
        """
        Decompress a packed bit stream.

        Args:
            data: Bytes produced by compress

        Returns:
            The original tryte string

        Raises:
            TruncatedInputError: If the stream ends before the end marker
            MalformedRunRecordError: If a run record is incomplete
        """
        symbols = self.packer.unpack(data)
        trytes = RunLengthCoder.decode(symbols)
        self._log("Decompressed: %s", self.describe(len(trytes), len(data)))
        return trytes


_DEFAULT_CODEC = TryteCodec()


def compress(trytes: TryteInput) -> bytes:
    """Compress trytes with the default tables."""
    return _DEFAULT_CODEC.compress(trytes)


def decompress(data: bytes) -> str:
    """Decompress bytes produced by compress."""
    return _DEFAULT_CODEC.decompress(data)
