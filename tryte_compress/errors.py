"""
Exceptions raised by the tryte codec.
"""


class TryteCompressError(ValueError):
    """Base class for every error raised by the codec."""


class EmptyInputError(TryteCompressError):
    """Compression was asked to encode zero trytes."""


class InvalidTryteError(TryteCompressError):
    """Raw input contains a character outside the tryte alphabet."""

    def __init__(self, symbol: str, position: int) -> None:
        super().__init__(f"Invalid tryte {symbol!r} at position {position}")
        self.symbol = symbol
        self.position = position


class UnknownSymbolError(TryteCompressError, KeyError):
    """A symbol has no entry in the Huffman table."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Symbol {symbol!r} not found in Huffman table")
        self.symbol = symbol

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class MalformedRunRecordError(TryteCompressError):
    """A run marker is not followed by the digits and literal it declares."""


class TruncatedInputError(TryteCompressError, EOFError):
    """The bit stream ran out before a code or the end marker was read."""


class UnknownCodeError(TryteCompressError):
    """No Huffman code matches the bits read, which needs an incomplete table."""
