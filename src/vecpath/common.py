"""Central module containing constants and definitions for path handling."""

from __future__ import annotations

from enum import IntFlag
from typing import Literal

###############################################################################
# Types
###############################################################################


VecPathCmds = Literal[  # Type-Definition for the records stored in a VecPath
    # MoveTo (2) - start a new subpath and move the current point to (x,y)
    "M",
    # LineTo (2) - draw a straight line from the current point to (x,y)
    "L",
    # Quadratic Bezier To (4) - draw a quadratic Bezier curve with one control point and an endpoint (x,y)
    "Q",
    # Cubic Bezier To (6) - draw a cubic Bezier curve with two control points and an endpoint (x,y)
    "C",
    # ClosePath (0) - close subpath by drawing a line from the current point to start point
    "Z",
]


###############################################################################
# Enums and Consts
###############################################################################


class Justification(IntFlag):
    """Flags to define how a shape is placed inside a target rectangle.

    A horizontal and a vertical flag can be combined, e.g. ``TOP | LEFT``.
    If neither horizontal flag is given, the shape is centred horizontally,
    and the same holds for the vertical flags.
    """

    LEFT = 1
    RIGHT = 2
    HORIZONTALLY_CENTRED = 4
    TOP = 8
    BOTTOM = 16
    VERTICALLY_CENTRED = 32

    CENTRED = HORIZONTALLY_CENTRED | VERTICALLY_CENTRED
    CENTRED_LEFT = LEFT | VERTICALLY_CENTRED
    CENTRED_RIGHT = RIGHT | VERTICALLY_CENTRED
    CENTRED_TOP = HORIZONTALLY_CENTRED | TOP
    CENTRED_BOTTOM = HORIZONTALLY_CENTRED | BOTTOM
    TOP_LEFT = TOP | LEFT
    TOP_RIGHT = TOP | RIGHT
    BOTTOM_LEFT = BOTTOM | LEFT
    BOTTOM_RIGHT = BOTTOM | RIGHT

    def test_flags(self, flags: Justification) -> bool:
        """Return True if any of the given flags is set."""
        return bool(self & flags)


# Angle step (radians) used to linearize elliptical arcs
ELLIPSE_ANGULAR_INCREMENT: float = 0.05

# Control point offset (fraction of the radius) for the cubic fillets of a rounded rectangle.
# Approximates a quarter circle, it is not an exact circle.
ROUNDED_RECTANGLE_CONTROL_FACTOR: float = 0.45

# Control point offset (fraction of the radius) for the 4-cubic ellipse approximation.
# Radial error is about 0.027% of the radius.
ELLIPSE_CONTROL_FACTOR: float = 0.55

# Arrow heads are clamped to this fraction of the shaft length
ARROW_HEAD_MAX_PROPORTION: float = 0.8

# Sweep above which a pie segment is treated as a full circle (multiple of pi)
PIE_FULL_CIRCLE_THRESHOLD: float = 1.999

# Corner radius at or below which rounding returns an unmodified copy
MIN_CORNER_RADIUS: float = 0.01

# Default maximum distance between a curve and its flattened approximation
DEFAULT_FLATTENING_TOLERANCE: float = 1.0

# Smallest tolerance used by the flattener (a tolerance of 0 is clamped to this)
MIN_FLATTENING_TOLERANCE: float = 1.0e-3

# Upper bound of line segments a single curve is flattened into
MAX_FLATTENING_STEPS: int = 512


def main() -> None:
    """Display the justification flags and their values."""
    for flag in Justification:
        print(flag, int(flag))


if __name__ == "__main__":
    main()
