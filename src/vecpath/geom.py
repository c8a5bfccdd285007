"""Handling geometries: points, affine transforms, boxes and lines"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import List, NamedTuple, Optional, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling."""

    @staticmethod
    def transform_point(
        affine_trafo: Sequence[Union[int, float]], point: Sequence[Union[int, float]]
    ) -> Tuple[float, float]:
        """
        Perform an affine transformation on the given 2D point.

        The given _affine_trafo_ is a list of 6 floats, performing an affine transformation.
        The transformation is defined as:
            | x' | = | a00 a01 b0 |   | x |
            | y' | = | a10 a11 b1 | * | y |
            | 1  | = |  0   0  1  |   | 1 |
        with
            affine_trafo = [a00, a01, a10, a11, b0, b1]
        See also shapely - Affine Transformations

        Args:
            affine_trafo (Tuple/List[float]): Affine transformation - [a00, a01, a10, a11, b0, b1]
            point (Tuple/List[float]): 2D point - (x, y)

        Returns:
            Tuple[float, float]: the transformed point
        """
        x_new = float(affine_trafo[0] * point[0] + affine_trafo[1] * point[1] + affine_trafo[4])
        y_new = float(affine_trafo[2] * point[0] + affine_trafo[3] * point[1] + affine_trafo[5])
        return (x_new, y_new)

    @staticmethod
    def perpendicular_offset(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        offset_x: float,
        offset_y: float,
    ) -> Tuple[float, float]:
        """
        Offset the start point of the directed segment (x1,y1)->(x2,y2).

        _offset_x_ is measured along the segment direction, _offset_y_ along
        its unit normal (rotated by +90 degrees).
        A zero-length segment returns its start point unchanged.

        Returns:
            Tuple[float, float]: the offset point
        """
        dx = x2 - x1
        dy = y2 - y1
        length = math.hypot(dx, dy)

        if length == 0:
            return (x1, y1)

        return (
            x1 + ((dx * offset_x) - (dy * offset_y)) / length,
            y1 + ((dy * offset_x) + (dx * offset_y)) / length,
        )


###############################################################################
# VecPoint
###############################################################################
class VecPoint(NamedTuple):
    """A 2D point (x, y)."""

    x: float = 0.0
    y: float = 0.0


###############################################################################
# VecAffine
###############################################################################
@dataclass(frozen=True)
class VecAffine:
    """
    2D affine transformation [a00, a01, a10, a11, b0, b1].

    Uses the same coefficient order as GeomMath.transform_point (and shapely):
        x' = a00 * x + a01 * y + b0
        y' = a10 * x + a11 * y + b1
    """

    a00: float = 1.0
    a01: float = 0.0
    a10: float = 0.0
    a11: float = 1.0
    b0: float = 0.0
    b1: float = 0.0

    @classmethod
    def identity(cls) -> VecAffine:
        """The transform that leaves every point unchanged."""
        return cls()

    @classmethod
    def translation(cls, dx: float, dy: float) -> VecAffine:
        """A pure translation by (dx, dy)."""
        return cls(1.0, 0.0, 0.0, 1.0, dx, dy)

    @classmethod
    def scale(cls, factor_x: float, factor_y: Optional[float] = None) -> VecAffine:
        """A scale around the origin. If _factor_y_ is None, _factor_x_ is used for both axes."""
        if factor_y is None:
            factor_y = factor_x
        return cls(factor_x, 0.0, 0.0, factor_y, 0.0, 0.0)

    @classmethod
    def rotation(cls, angle: float, pivot_x: float = 0.0, pivot_y: float = 0.0) -> VecAffine:
        """A clockwise (in y-down coordinates) rotation by _angle_ radians around (pivot_x, pivot_y)."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return cls(
            cos_a,
            -sin_a,
            sin_a,
            cos_a,
            pivot_x - cos_a * pivot_x + sin_a * pivot_y,
            pivot_y - sin_a * pivot_x - cos_a * pivot_y,
        )

    @property
    def is_identity(self) -> bool:
        """True if this transform leaves every point unchanged."""
        return self == VecAffine.identity()

    def to_list(self) -> List[float]:
        """The coefficients as list [a00, a01, a10, a11, b0, b1]."""
        return [self.a00, self.a01, self.a10, self.a11, self.b0, self.b1]

    def followed_by(self, other: VecAffine) -> VecAffine:
        """Return the transform that applies this one first and _other_ afterwards."""
        return VecAffine(
            other.a00 * self.a00 + other.a01 * self.a10,
            other.a00 * self.a01 + other.a01 * self.a11,
            other.a10 * self.a00 + other.a11 * self.a10,
            other.a10 * self.a01 + other.a11 * self.a11,
            other.a00 * self.b0 + other.a01 * self.b1 + other.b0,
            other.a10 * self.b0 + other.a11 * self.b1 + other.b1,
        )

    def translated(self, dx: float, dy: float) -> VecAffine:
        """This transform followed by a translation."""
        return self.followed_by(VecAffine.translation(dx, dy))

    def scaled(self, factor_x: float, factor_y: Optional[float] = None) -> VecAffine:
        """This transform followed by a scale around the origin."""
        return self.followed_by(VecAffine.scale(factor_x, factor_y))

    def rotated(self, angle: float, pivot_x: float = 0.0, pivot_y: float = 0.0) -> VecAffine:
        """This transform followed by a rotation."""
        return self.followed_by(VecAffine.rotation(angle, pivot_x, pivot_y))

    def transform_point(self, x: float, y: float) -> Tuple[float, float]:
        """Transform a single point."""
        return GeomMath.transform_point(self.to_list(), (x, y))

    def transform_points(self, points: NDArray) -> NDArray[np.float64]:
        """Transform an array of points of shape (n, 2) in one go."""
        pts = np.asarray(points, dtype=np.float64)
        result = np.empty_like(pts)
        result[:, 0] = self.a00 * pts[:, 0] + self.a01 * pts[:, 1] + self.b0
        result[:, 1] = self.a10 * pts[:, 0] + self.a11 * pts[:, 1] + self.b1
        return result


###############################################################################
# VecBox
###############################################################################
@dataclass
class VecBox:
    """
    Represents a rectangular box with coordinates and dimensions.

    Attributes:
        xmin (float): The minimum x-coordinate.
        ymin (float): The minimum y-coordinate.
        xmax (float): The maximum x-coordinate.
        ymax (float): The maximum y-coordinate.
    """

    _xmin: float
    _ymin: float
    _xmax: float
    _ymax: float

    def __init__(self, xmin: float, ymin: float, xmax: float, ymax: float):
        """Initialize VecBox with coordinates.

        Args:
            xmin: The minimum x-coordinate
            ymin: The minimum y-coordinate
            xmax: The maximum x-coordinate
            ymax: The maximum y-coordinate
        """
        self._xmin = xmin
        self._ymin = ymin
        self._xmax = xmax
        self._ymax = ymax

        # Normalize coordinates to ensure xmin <= xmax and ymin <= ymax
        if self._xmin > self._xmax:
            self._xmin, self._xmax = self._xmax, self._xmin
        if self._ymin > self._ymax:
            self._ymin, self._ymax = self._ymax, self._ymin

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> VecBox:
        """Create a VecBox from its origin and size."""
        return cls(x, y, x + width, y + height)

    @property
    def xmin(self) -> float:
        """float: The minimum x-coordinate."""
        return self._xmin

    @property
    def ymin(self) -> float:
        """float: The minimum y-coordinate."""
        return self._ymin

    @property
    def xmax(self) -> float:
        """float: The maximum x-coordinate."""
        return self._xmax

    @property
    def ymax(self) -> float:
        """float: The maximum y-coordinate."""
        return self._ymax

    @property
    def extent(self) -> Tuple[float, float, float, float]:
        """The extent of the box as Tuple (xmin, ymin, xmax, ymax)."""
        return self._xmin, self._ymin, self._xmax, self._ymax

    @property
    def width(self) -> float:
        """float: The width of the box (difference between xmax and xmin)."""

        return self._xmax - self._xmin

    @property
    def height(self) -> float:
        """float: The height of the box (difference between ymax and ymin)."""

        return self._ymax - self._ymin

    @property
    def is_empty(self) -> bool:
        """bool: True if the box has no area."""
        return self.width <= 0 or self.height <= 0

    @property
    def centroid(self) -> Tuple[float, float]:
        """
        The centroid of the box.

        Returns:
            Tuple[float, float]: The coordinates of the centroid as (x, y)
        """
        return (self._xmin + self._xmax) / 2, (self._ymin + self._ymax) / 2

    def transformed(self, affine: VecAffine) -> VecBox:
        """
        Transform all four corners and return the box enclosing them.

        Args:
            affine (VecAffine): The transformation to apply

        Returns:
            VecBox: The transformed box
        """
        corners = np.array(
            [
                [self._xmin, self._ymin],
                [self._xmax, self._ymin],
                [self._xmin, self._ymax],
                [self._xmax, self._ymax],
            ],
            dtype=np.float64,
        )
        moved = affine.transform_points(corners)
        return VecBox(
            float(moved[:, 0].min()),
            float(moved[:, 1].min()),
            float(moved[:, 0].max()),
            float(moved[:, 1].max()),
        )

    def __str__(self):
        """Returns a string representation of the VecBox instance."""
        return (
            f"VecBox(xmin={self.xmin}, ymin={self.ymin}, "
            f"xmax={self.xmax}, ymax={self.ymax}, "
            f"width={self.width}, height={self.height})"
        )


###############################################################################
# VecLine
###############################################################################
@dataclass(frozen=True)
class VecLine:
    """A directed line segment from (start_x, start_y) to (end_x, end_y)."""

    start_x: float = 0.0
    start_y: float = 0.0
    end_x: float = 0.0
    end_y: float = 0.0

    @classmethod
    def from_points(cls, start: Sequence[float], end: Sequence[float]) -> VecLine:
        """Create a line from two (x, y) points."""
        return cls(float(start[0]), float(start[1]), float(end[0]), float(end[1]))

    @property
    def start(self) -> VecPoint:
        """The start point."""
        return VecPoint(self.start_x, self.start_y)

    @property
    def end(self) -> VecPoint:
        """The end point."""
        return VecPoint(self.end_x, self.end_y)

    @property
    def length(self) -> float:
        """The euclidean length of the segment."""
        return math.hypot(self.end_x - self.start_x, self.end_y - self.start_y)

    def with_start(self, point: Sequence[float]) -> VecLine:
        """Return a copy of this line with another start point."""
        return replace(self, start_x=float(point[0]), start_y=float(point[1]))

    def with_end(self, point: Sequence[float]) -> VecLine:
        """Return a copy of this line with another end point."""
        return replace(self, end_x=float(point[0]), end_y=float(point[1]))

    def intersects(self, other: VecLine) -> Optional[VecPoint]:
        """
        Return the point where this segment crosses _other_, or None.

        Touching at an end point counts as an intersection.
        Parallel (including collinear) segments are reported as not intersecting.
        """
        dx1 = self.end_x - self.start_x
        dy1 = self.end_y - self.start_y
        dx2 = other.end_x - other.start_x
        dy2 = other.end_y - other.start_y

        denominator = dx1 * dy2 - dy1 * dx2
        if denominator == 0:
            return None

        ox = other.start_x - self.start_x
        oy = other.start_y - self.start_y
        t_self = (ox * dy2 - oy * dx2) / denominator
        t_other = (ox * dy1 - oy * dx1) / denominator

        if not (0.0 <= t_self <= 1.0 and 0.0 <= t_other <= 1.0):
            return None

        return VecPoint(self.start_x + t_self * dx1, self.start_y + t_self * dy1)


def main():
    """Main"""


if __name__ == "__main__":
    main()
