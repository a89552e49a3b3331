"""
tryte_compress - lossless compression for tryte strings
(run-length encoding + static Huffman coding)
"""
from tryte_compress.codec_tables import END, RUN1, RUN2, RUN3, TRYTE_ALPHABET
from tryte_compress.compressor_ABC import Compressor
from tryte_compress.errors import (
    EmptyInputError,
    InvalidTryteError,
    MalformedRunRecordError,
    TruncatedInputError,
    TryteCompressError,
    UnknownCodeError,
    UnknownSymbolError,
)
from tryte_compress.tryte_codec import TryteCodec, compress, decompress

__all__ = [
    "END",
    "RUN1",
    "RUN2",
    "RUN3",
    "TRYTE_ALPHABET",
    "Compressor",
    "EmptyInputError",
    "InvalidTryteError",
    "MalformedRunRecordError",
    "TruncatedInputError",
    "TryteCompressError",
    "UnknownCodeError",
    "UnknownSymbolError",
    "TryteCodec",
    "compress",
    "decompress",
]
