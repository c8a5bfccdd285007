"""Tests for the binary and text serialization of VecPath."""

from __future__ import annotations

import io
import logging
import math
import struct

import numpy as np
import pytest

from vecpath.path import VecPath
from vecpath.path_codec import PathDecodeError, VecPathBinaryCodec, VecPathTextCodec


@pytest.fixture
def open_triangle() -> VecPath:
    """M(0,0) L(10,0) L(10,10) Z"""
    path = VecPath()
    path.start_new_sub_path(0, 0)
    path.line_to(10, 0)
    path.line_to(10, 10)
    path.close_sub_path()
    return path


###############################################################################
# Text format
###############################################################################


class TestTextEncode:
    """Tests for writing the text format."""

    def test_simple_path(self, open_triangle):
        """Tags are only written when the record kind changes."""
        assert open_triangle.to_string() == "m 0 0 l 10 0 10 10 z"
        assert str(open_triangle) == "m 0 0 l 10 0 10 10 z"

    def test_even_odd_prefix(self, open_triangle):
        """The even-odd winding rule is written as a leading 'a'."""
        open_triangle.set_using_non_zero_winding(False)
        assert open_triangle.to_string() == "a m 0 0 l 10 0 10 10 z"

    def test_curves(self):
        """Quadratic curves use 'q', cubic curves use 'c'."""
        path = VecPath()
        path.start_new_sub_path(0, 0)
        path.quadratic_to(1, 2, 3, 4)
        path.cubic_to(5, 6, 7, 8, 9, 10)
        path.cubic_to(11, 12, 13, 14, 15, 16)
        assert path.to_string() == "m 0 0 q 1 2 3 4 c 5 6 7 8 9 10 11 12 13 14 15 16"

    def test_repeated_moves(self):
        """Consecutive records of the same kind share one tag, MoveTo included."""
        path = VecPath()
        path.start_new_sub_path(1, 1)
        path.start_new_sub_path(2, 2)
        assert path.to_string() == "m 1 1 2 2"

    def test_empty_path(self):
        """An empty path with the default winding rule is the empty string."""
        assert VecPath().to_string() == ""

    @pytest.mark.parametrize(
        "value, text",
        [
            (1.5, "1.5"),
            (1.0, "1"),
            (10.0, "10"),
            (0.1234, "0.123"),
            (-2.25, "-2.25"),
            (0.0, "0"),
            (-0.0001, "0"),
        ],
    )
    def test_format_coordinate(self, value, text):
        """Coordinates have at most 3 decimals and no trailing zeros."""
        assert VecPathTextCodec.format_coordinate(value) == text


class TestTextDecode:
    """Tests for reading the text format."""

    def test_simple_path(self, open_triangle):
        """The text of a path decodes to an equal path."""
        assert VecPath.from_string("m 0 0 l 10 0 10 10 z") == open_triangle

    def test_round_trip(self):
        """Values exact to 3 decimals survive encoding and decoding."""
        path = VecPath()
        path.start_new_sub_path(-1.5, 2.25)
        path.quadratic_to(3.125, 4, 5, -6.5)
        path.cubic_to(7, 8, 9.75, 10, 11, 12)
        path.close_sub_path()
        path.line_to(0.5, 0.5)
        path.set_using_non_zero_winding(False)

        assert VecPath.from_string(path.to_string()) == path

    def test_initial_kind_is_move(self):
        """Values before any tag are MoveTo records."""
        path = VecPath.from_string("0 0 l 5 5")
        assert path.commands == ["M", "L"]
        np.testing.assert_array_equal(path.coordinates, [0, 0, 5, 5])

    def test_value_without_tag_repeats_kind(self):
        """A value following a complete record starts another record of the same kind."""
        path = VecPath.from_string("m 0 0 l 1 1 2 2 3 3")
        assert path.commands == ["M", "L", "L", "L"]

    def test_bad_token_reads_as_zero(self, caplog):
        """A token that is not a number reads as 0 with a warning."""
        with caplog.at_level(logging.WARNING, logger="vecpath.path_codec"):
            path = VecPath.from_string("m 1 x 3")

        assert path.commands == ["M", "M"]
        np.testing.assert_array_equal(path.coordinates, [1, 0, 3, 0])
        assert "'x'" in caplog.text

    def test_missing_values_read_as_zero(self):
        """Values missing at the end of the text are 0."""
        path = VecPath.from_string("l 5")
        assert path.commands == ["M", "L"]
        np.testing.assert_array_equal(path.coordinates, [0, 0, 5, 0])

    def test_leading_number_of_token(self):
        """Only the leading number of a token is used."""
        assert VecPathTextCodec.parse_number("12.5px") == 12.5
        assert VecPathTextCodec.parse_number(".5") == 0.5
        assert VecPathTextCodec.parse_number("-1e2") == -100.0
        assert VecPathTextCodec.parse_number(None) == 0.0

    def test_overflow_reads_as_zero(self, caplog):
        """A value beyond single precision reads as 0 with a warning."""
        with caplog.at_level(logging.WARNING, logger="vecpath.path_codec"):
            path = VecPath.from_string("m 1e39 7")

        np.testing.assert_array_equal(path.coordinates, [0, 7])
        assert "single precision" in caplog.text

    def test_decode_replaces_contents(self):
        """Decoding clears the path and resets the winding rule."""
        path = VecPath()
        path.add_rectangle(0, 0, 50, 50)
        path.set_using_non_zero_winding(False)

        path.restore_from_string("m 1 1 l 2 2")

        assert path.commands == ["M", "L"]
        assert path.use_non_zero_winding
        assert path.bounding_box().extent == (1, 1, 2, 2)

    def test_even_odd_token(self):
        """A leading 'a' selects the even-odd rule."""
        assert not VecPath.from_string("a m 0 0 l 1 1").use_non_zero_winding
        assert VecPath.from_string("m 0 0 l 1 1").use_non_zero_winding

    def test_close_tag(self):
        """'z' closes the subpath and takes no values."""
        path = VecPath.from_string("m 0 0 l 1 0 z m 5 5")
        assert path.commands == ["M", "L", "Z", "M"]


###############################################################################
# Binary format
###############################################################################


class TestBinaryCodec:
    """Tests for the binary tagged-record format."""

    def test_layout(self, open_triangle):
        """Winding tag, records with little-endian floats, end marker."""
        expected = (
            b"n"
            + b"m" + struct.pack("<2f", 0, 0)
            + b"l" + struct.pack("<2f", 10, 0)
            + b"l" + struct.pack("<2f", 10, 10)
            + b"c"
            + b"e"
        )  # fmt: skip
        assert open_triangle.to_bytes() == expected

    def test_curve_tags(self):
        """Quadratic curves are 'q', cubic curves are 'b', even-odd is 'z'."""
        path = VecPath()
        path.start_new_sub_path(1, 2)
        path.quadratic_to(3, 4, 5, 6)
        path.cubic_to(7, 8, 9, 10, 11, 12)
        path.set_using_non_zero_winding(False)

        expected = (
            b"z"
            + b"m" + struct.pack("<2f", 1, 2)
            + b"q" + struct.pack("<4f", 3, 4, 5, 6)
            + b"b" + struct.pack("<6f", 7, 8, 9, 10, 11, 12)
            + b"e"
        )  # fmt: skip
        assert VecPathBinaryCodec.to_bytes(path) == expected

    def test_round_trip_is_bit_exact(self):
        """Single precision values survive the binary format unchanged."""
        path = VecPath()
        path.start_new_sub_path(0.1, -0.2)
        path.cubic_to(1 / 3, 2 / 3, math.pi, -math.e, 1e-7, 12345.678)
        path.close_sub_path()
        path.add_ellipse(0.3, 0.7, 11.1, 13.3)

        decoded = VecPath.from_bytes(path.to_bytes())

        assert decoded.commands == path.commands
        np.testing.assert_array_equal(decoded.coordinates.view(np.uint32), path.coordinates.view(np.uint32))
        assert decoded == path

    def test_empty_path(self):
        """An empty path is the winding tag and the end marker."""
        assert VecPath().to_bytes() == b"ne"
        assert VecPath.from_bytes(b"ne").num_records == 0

    def test_interleaved_winding_tags(self):
        """Winding tags can appear between records."""
        data = b"n" + b"m" + struct.pack("<2f", 0, 0) + b"z" + b"l" + struct.pack("<2f", 1, 1) + b"e"
        path = VecPath.from_bytes(data)

        assert path.commands == ["M", "L"]
        assert not path.use_non_zero_winding

    def test_missing_end_marker(self):
        """Without end marker the stream is read to its end."""
        path = VecPath.from_bytes(b"m" + struct.pack("<2f", 1, 2) + b"l" + struct.pack("<2f", 3, 4))
        assert path.commands == ["M", "L"]

    def test_reading_stops_at_end_marker(self, open_triangle):
        """Bytes after the end marker stay in the stream."""
        stream = io.BytesIO(open_triangle.to_bytes() + b"trailing")

        path = VecPath()
        path.load_path_from_stream(stream)

        assert path == open_triangle
        assert stream.read() == b"trailing"

    def test_load_appends(self, open_triangle):
        """Loading adds to the existing records."""
        path = VecPath()
        path.add_rectangle(0, 0, 5, 5)
        path.load_path_from_data(open_triangle.to_bytes())

        assert path.num_records == 9
        assert path.commands[5:] == ["M", "L", "L", "Z"]

    def test_write_to_stream(self, open_triangle):
        """write_path_to_stream writes the same bytes as to_bytes."""
        stream = io.BytesIO()
        open_triangle.write_path_to_stream(stream)
        assert stream.getvalue() == open_triangle.to_bytes()

    def test_debug_log(self, open_triangle, caplog):
        """The number of decoded records is logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="vecpath.path_codec"):
            VecPath.from_bytes(open_triangle.to_bytes())
        assert "Read 4 path records" in caplog.text


class TestBinaryErrors:
    """Tests for corrupt binary data."""

    def test_unknown_tag(self):
        """A byte that is no tag is rejected."""
        with pytest.raises(PathDecodeError, match="Illegal tag"):
            VecPath.from_bytes(b"nx")

    def test_truncated_record(self):
        """The stream must not end inside a record."""
        with pytest.raises(PathDecodeError, match="ends inside"):
            VecPath.from_bytes(b"m" + struct.pack("<f", 1))

    def test_non_finite_value(self):
        """NaN coordinates are rejected."""
        with pytest.raises(PathDecodeError, match="Non-finite"):
            VecPath.from_bytes(b"l" + struct.pack("<2f", math.nan, 0))

    def test_decode_error_is_value_error(self):
        """PathDecodeError can be handled as ValueError."""
        with pytest.raises(ValueError):
            VecPathBinaryCodec.from_bytes(b"?")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
