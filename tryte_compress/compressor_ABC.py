from abc import ABC, abstractmethod
from typing import Sequence, Tuple, Union

TryteInput = Union[str, bytes, bytearray, Sequence[str]]


class Compressor(ABC):
    """
    Interface describing compression and decompression of tryte payloads
    held in memory.
    """

    @abstractmethod
    def compress(self, trytes: TryteInput) -> bytes:
        """
        Compress a tryte sequence.

        Args:
            trytes: Tryte string, or its ASCII bytes

        Returns:
            The compressed bit stream
        """
        pass

    @abstractmethod
    def decompress(self, data: bytes) -> str:
        """
        Decompress a bit stream produced by compress.

        Args:
            data: Compressed bytes

        Returns:
            The original tryte string
        """
        pass

    @staticmethod
    def describe(original_size: int, compressed_size: int) -> str:
        """
        Build a one-line summary of a compression result.

        Args:
            original_size: Number of trytes
            compressed_size: Number of compressed bytes

        Returns:
            Summary string for logging
        """
        ratio = original_size / compressed_size if compressed_size else 0.0
        return (
            f"{original_size} trytes <-> {compressed_size} bytes "
            f"(ratio {ratio:.2f}x)"
        )

    def compress_bytes(self, trytes: TryteInput) -> Tuple[bytes, str]:
        """
        Helper that compresses and also reports sizes.

        Args:
            trytes: Input trytes

        Returns:
            Tuple (compressed data, compression info)
        """
        data = self.compress(trytes)
        return data, self.describe(len(trytes), len(data))

    def decompress_bytes(self, data: bytes) -> Tuple[str, str]:
        """
        Helper that decompresses and also reports sizes.

        Args:
            data: Compressed data

        Returns:
            Tuple (decompressed trytes, decompression info)
        """
        trytes = self.decompress(data)
        return trytes, self.describe(len(trytes), len(data))
