"""
Run-Length Encoding over the tryte alphabet.

A run of three or more equal trytes becomes a record: a marker telling how
many digits follow, the run length written as little-endian base-27 digits
spelled with tryte symbols, then the repeated tryte. Shorter runs are left
as they are.
"""
import logging

import numpy as np

from tryte_compress.codec_tables import (
    CONTROL_SYMBOLS,
    RLE_ALPHABET,
    RUN1,
    RUN2,
    RUN3,
)
from tryte_compress.errors import EmptyInputError, MalformedRunRecordError

logger = logging.getLogger(__name__)

RUN_MIN_LENGTH = 3
ONE_TRYTE_MAX = 26
TWO_TRYTE_MAX = 728
THREE_TRYTE_MAX = 19682

DIGIT_VALUES = {digit: value for value, digit in enumerate(RLE_ALPHABET)}
MARKER_DIGITS = {RUN1: 1, RUN2: 2, RUN3: 3}


def number_to_rle(value: int) -> str:
    """
    Spell a run length as a marker followed by its base-27 digits.

    :param value: run length, 0..THREE_TRYTE_MAX
    :return: str, marker and 1-3 digit symbols, least significant first
    """
    if not 0 <= value <= THREE_TRYTE_MAX:
        raise ValueError(f"Run length {value} outside 0..{THREE_TRYTE_MAX}")

    if value <= ONE_TRYTE_MAX:
        marker, count = RUN1, 1
    elif value <= TWO_TRYTE_MAX:
        marker, count = RUN2, 2
    else:
        marker, count = RUN3, 3

    digits = []
    for _ in range(count):
        value, rem = divmod(value, 27)
        digits.append(RLE_ALPHABET[rem])
    return marker + "".join(digits)


def rle_to_number(digits: str) -> int:
    """
    Read little-endian base-27 digit symbols back into an integer.

    :raises MalformedRunRecordError: a symbol is not a digit
    """
    value = 0
    for weight, digit in enumerate(digits):
        if digit not in DIGIT_VALUES:
            raise MalformedRunRecordError(f"Expected a run digit, got {digit!r}")
        value += DIGIT_VALUES[digit] * 27**weight
    return value


class RunLengthCoder:
    """Class for tryte run-length encoding and decoding"""

    @staticmethod
    def find_runs(trytes: str) -> list[tuple[str, int]]:
        """
        Split a tryte string into maximal runs.

        Args:
            trytes: Non-empty string of trytes

        Returns:
            List of (symbol, length) tuples in input order
        """
        codes = np.frombuffer(trytes.encode("ascii"), dtype=np.uint8)
        starts = np.flatnonzero(np.diff(codes)) + 1
        starts = np.concatenate(([0], starts))
        lengths = np.diff(np.append(starts, len(codes)))
        return [
            (trytes[start], int(length))
            for start, length in zip(starts.tolist(), lengths.tolist())
        ]

    @staticmethod
    def append_run(encoded: list[str], symbol: str, count: int) -> None:
        """
        Append the encoding of one run to a list of symbol chunks.

        Runs longer than THREE_TRYTE_MAX are split across several records;
        a tail shorter than RUN_MIN_LENGTH is written literally.
        """
        remaining = count
        while remaining >= RUN_MIN_LENGTH:
            chunk = min(remaining, THREE_TRYTE_MAX)
            encoded.append(number_to_rle(chunk))
            encoded.append(symbol)
            remaining -= chunk

        if remaining > 0:
            encoded.append(symbol * remaining)

    @staticmethod
    def encode(trytes: str) -> str:
        """
        Run-length encode a tryte string.

        Args:
            trytes: Input trytes

        Returns:
            Extended symbol string with run records in place of long runs

        Raises:
            EmptyInputError: If trytes is empty
        """
        if not trytes:
            raise EmptyInputError("Cannot run-length encode an empty tryte sequence")

        encoded: list[str] = []
        runs = RunLengthCoder.find_runs(trytes)
        for symbol, count in runs:
            RunLengthCoder.append_run(encoded, symbol, count)

        result = "".join(encoded)
        logger.debug(
            "RLE encoded %d trytes (%d runs) into %d symbols",
            len(trytes),
            len(runs),
            len(result),
        )
        return result

    @staticmethod
    def decode(symbols: str) -> str:
        """
        Expand run records back into trytes.

        Args:
            symbols: Extended symbol string produced by encode

        Returns:
            The reconstructed tryte string

        Raises:
            MalformedRunRecordError: If a record is cut short or holds
                a control symbol where a digit or literal is expected
        """
        output: list[str] = []
        i = 0
        n = len(symbols)

        while i < n:
            symbol = symbols[i]
            digit_count = MARKER_DIGITS.get(symbol)
            if digit_count is None:
                output.append(symbol)
                i += 1
                continue

            end = i + 1 + digit_count
            if end >= n:
                raise MalformedRunRecordError(
                    f"Run record at position {i} needs {digit_count} digit(s) "
                    f"and a literal, only {n - i - 1} symbol(s) left"
                )
            length = rle_to_number(symbols[i + 1 : end])
            literal = symbols[end]
            if literal in CONTROL_SYMBOLS:
                raise MalformedRunRecordError(
                    f"Run record at position {i} repeats control symbol {literal!r}"
                )
            output.append(literal * length)
            i = end + 1

        return "".join(output)
