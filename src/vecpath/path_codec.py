"""Binary and compact text serialization of VecPath objects.

Binary format: a sequence of records, each one tag byte followed by
little-endian IEEE-754 single precision floats::

    m x y               MoveTo
    l x y               LineTo
    q cx cy x y         QuadraticTo
    b c1x c1y c2x c2y x y   CubicTo
    c                   ClosePath
    n / z               non-zero / even-odd winding rule
    e                   end of path

Text format: whitespace separated tokens, e.g. "a m 0 0 l 10 0 10 10 z".
A leading "a" selects the even-odd winding rule. The tag letters are
m, l, q, c (cubic) and z (close); a tag is only written when it differs from
the tag of the previous record.
"""

from __future__ import annotations

import io
import logging
import math
import re
import struct
from typing import BinaryIO, Dict, List, Optional, Tuple

import numpy as np

from vecpath.common import VecPathCmds
from vecpath.path import VecPath
from vecpath.path_support import COMMAND_INFO

logger = logging.getLogger(__name__)


class PathDecodeError(ValueError):
    """Raised when binary path data is corrupt."""


###############################################################################
# VecPathBinaryCodec
###############################################################################
class VecPathBinaryCodec:
    """Reading and writing paths in the binary tagged-record format."""

    FLOAT_SIZE: int = struct.calcsize("<f")  # pylint: disable=invalid-name

    # record command -> tag byte
    TAGS: Dict[VecPathCmds, bytes] = {
        "M": b"m",
        "L": b"l",
        "Q": b"q",
        "C": b"b",
        "Z": b"c",
    }
    NON_ZERO_WINDING_TAG: bytes = b"n"
    EVEN_ODD_WINDING_TAG: bytes = b"z"
    END_TAG: bytes = b"e"

    @classmethod
    def write(cls, path: VecPath, stream: BinaryIO) -> None:
        """
        Write _path_ to a binary _stream_.

        The winding rule comes first, the end marker last.
        """
        stream.write(cls.NON_ZERO_WINDING_TAG if path.use_non_zero_winding else cls.EVEN_ODD_WINDING_TAG)

        coords = path.coordinates
        offset = 0
        for cmd in path.commands:
            num_coords = COMMAND_INFO[cmd].consumes_coords
            stream.write(cls.TAGS[cmd])
            if num_coords:
                stream.write(coords[offset : offset + num_coords].astype("<f4").tobytes())
            offset += num_coords

        stream.write(cls.END_TAG)

    @classmethod
    def _read_floats(cls, stream: BinaryIO, count: int, tag: bytes) -> Tuple[float, ...]:
        size = count * cls.FLOAT_SIZE
        data = stream.read(size)
        if len(data) != size:
            raise PathDecodeError(
                f"Stream ends inside a '{tag.decode('latin-1')}' record: {len(data)} of {size} bytes available"
            )
        values = struct.unpack(f"<{count}f", data)
        if not all(math.isfinite(value) for value in values):
            raise PathDecodeError(f"Non-finite coordinate in '{tag.decode('latin-1')}' record: {values}")
        return values

    @classmethod
    def read(cls, stream: BinaryIO, path: VecPath) -> VecPath:
        """
        Append the records read from _stream_ to _path_.

        Reading stops at the end marker or when the stream is exhausted.
        Winding-rule tags may appear anywhere and only change the rule.

        Args:
            stream (BinaryIO): binary stream positioned at the first tag
            path (VecPath): the path the records are appended to

        Returns:
            VecPath: _path_

        Raises:
            PathDecodeError: If an unknown tag is found or the stream ends
                inside a record.
        """
        num_records = 0

        while True:
            tag = stream.read(1)
            if not tag or tag == cls.END_TAG:
                break

            if tag == b"m":
                path.start_new_sub_path(*cls._read_floats(stream, 2, tag))
            elif tag == b"l":
                path.line_to(*cls._read_floats(stream, 2, tag))
            elif tag == b"q":
                path.quadratic_to(*cls._read_floats(stream, 4, tag))
            elif tag == b"b":
                path.cubic_to(*cls._read_floats(stream, 6, tag))
            elif tag == b"c":
                path.close_sub_path()
            elif tag == cls.NON_ZERO_WINDING_TAG:
                path.set_using_non_zero_winding(True)
                continue
            elif tag == cls.EVEN_ODD_WINDING_TAG:
                path.set_using_non_zero_winding(False)
                continue
            else:
                raise PathDecodeError(f"Illegal tag byte {tag!r} in path data")

            num_records += 1

        logger.debug("Read %d path records", num_records)
        return path

    @classmethod
    def read_bytes(cls, data: bytes, path: VecPath) -> VecPath:
        """Append the records of binary _data_ to _path_."""
        return cls.read(io.BytesIO(data), path)

    @classmethod
    def to_bytes(cls, path: VecPath) -> bytes:
        """Encode _path_ into bytes."""
        buffer = io.BytesIO()
        cls.write(path, buffer)
        return buffer.getvalue()

    @classmethod
    def from_bytes(cls, data: bytes) -> VecPath:
        """Decode a new path from _data_."""
        return cls.read_bytes(data, VecPath())


###############################################################################
# VecPathTextCodec
###############################################################################
class VecPathTextCodec:
    """Reading and writing paths in the compact text format."""

    EVEN_ODD_TOKEN: str = "a"

    # record command -> tag letter, note "c" is cubic and "z" is close here
    TAGS: Dict[VecPathCmds, str] = {
        "M": "m",
        "L": "l",
        "Q": "q",
        "C": "c",
        "Z": "z",
    }

    # tag letter -> (record command, number of values)
    MARKERS: Dict[str, Tuple[VecPathCmds, int]] = {
        "m": ("M", 2),
        "l": ("L", 2),
        "q": ("Q", 4),
        "c": ("C", 6),
        "z": ("Z", 0),
    }

    # Leading number of a token, e.g. "12", "-1.5", ".5", "1e-3"
    NUMBER_PATTERN = re.compile(r"[-+]?[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?")

    MAX_COORDINATE: float = float(np.finfo(np.float32).max)

    @staticmethod
    def format_coordinate(value: float) -> str:
        """Format _value_ with 3 decimals and strip trailing zeros and a trailing decimal point."""
        text = f"{value:.3f}"
        while text.endswith("0") and text != "0":
            text = text[:-1]
        if text.endswith("."):
            text = text[:-1]
        if text == "-0":
            text = "0"
        return text

    @classmethod
    def encode(cls, path: VecPath) -> str:
        """Encode _path_ into the compact text format."""
        tokens: List[str] = []
        if not path.use_non_zero_winding:
            tokens.append(cls.EVEN_ODD_TOKEN)

        coords = path.coordinates.tolist()
        offset = 0
        last_cmd: Optional[VecPathCmds] = None

        for cmd in path.commands:
            if cmd != last_cmd:
                tokens.append(cls.TAGS[cmd])
                last_cmd = cmd

            num_coords = COMMAND_INFO[cmd].consumes_coords
            tokens.extend(cls.format_coordinate(value) for value in coords[offset : offset + num_coords])
            offset += num_coords

        return " ".join(tokens)

    @classmethod
    def parse_number(cls, token: Optional[str]) -> float:
        """
        Parse the leading number of _token_.

        Missing tokens and tokens without a leading number read as 0.
        """
        if token is None:
            return 0.0

        match = cls.NUMBER_PATTERN.match(token)
        if match is None:
            logger.warning("Path text token '%s' is not a number, using 0", token)
            return 0.0

        value = float(match.group(0))
        if abs(value) > cls.MAX_COORDINATE:
            logger.warning("Path text token '%s' exceeds single precision, using 0", token)
            return 0.0
        return value

    @classmethod
    def decode(cls, text: str, path: VecPath) -> VecPath:
        """
        Replace the contents of _path_ by the path described in _text_.

        The path is cleared and set to the non-zero winding rule first.
        Parsing is lenient: a token that is no tag letter is taken as the first
        value of another record of the current kind (initially MoveTo), and
        values missing at the end of the text read as 0.

        Args:
            text (str): the text to decode
            path (VecPath): the path to fill

        Returns:
            VecPath: _path_
        """
        path.clear()
        path.set_using_non_zero_winding(True)

        tokens = text.split()
        cmd, num_values = cls.MARKERS["m"]
        index = 0

        while index < len(tokens):
            token = tokens[index]
            index += 1
            first_char = token[0]
            values: List[float] = []

            if first_char in cls.MARKERS:
                cmd, num_values = cls.MARKERS[first_char]
            elif first_char == cls.EVEN_ODD_TOKEN:
                path.set_using_non_zero_winding(False)
                continue
            else:
                values.append(cls.parse_number(token))

            while len(values) < num_values:
                values.append(cls.parse_number(tokens[index] if index < len(tokens) else None))
                index += 1

            if cmd == "M":
                path.start_new_sub_path(values[0], values[1])
            elif cmd == "L":
                path.line_to(values[0], values[1])
            elif cmd == "Q":
                path.quadratic_to(*values[:4])
            elif cmd == "C":
                path.cubic_to(*values[:6])
            else:
                path.close_sub_path()

        return path


def main():
    """Main"""
    path = VecPath()
    path.add_triangle(0, 0, 10, 0, 10, 10)
    print(VecPathTextCodec.encode(path))
    print(VecPathBinaryCodec.to_bytes(path).hex())


if __name__ == "__main__":
    main()
