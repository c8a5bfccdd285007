"""Bezier curve handling utilities for flattening path curves into line segments."""

from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

from vecpath.common import MAX_FLATTENING_STEPS, MIN_FLATTENING_TOLERANCE

ControlPoints = Union[Sequence[Tuple[float, float]], NDArray[np.float64]]


class BezierCurve:
    """Class to handle quadratic and cubic Bezier curve operations.

    Provides the step estimation and the polygonization used to flatten the
    curves of a path within a given tolerance.
    """

    @staticmethod
    def _steps_for_second_differences(points: NDArray[np.float64], degree: int, tolerance: float) -> int:
        """Number of uniform steps needed to keep the chord error below _tolerance_.

        Uses Wang's formula: for a Bezier curve of degree n and
        M = max |P[i] - 2*P[i+1] + P[i+2]|, n*(n-1)*M / (8*steps^2) bounds the
        distance between the curve and its uniform polyline.
        """
        tolerance = max(tolerance, MIN_FLATTENING_TOLERANCE)
        second_diffs = points[:-2] - 2.0 * points[1:-1] + points[2:]
        max_norm = float(np.max(np.hypot(second_diffs[:, 0], second_diffs[:, 1])))

        if max_norm == 0.0:
            return 1

        steps = math.ceil(math.sqrt(degree * (degree - 1) * max_norm / (8.0 * tolerance)))
        return min(max(steps, 1), MAX_FLATTENING_STEPS)

    @classmethod
    def quadratic_steps(cls, points: ControlPoints, tolerance: float) -> int:
        """
        Number of line segments to approximate a quadratic curve within _tolerance_.

        Args:
            points: start, control and end point
            tolerance: maximum allowed distance between curve and polyline

        Returns:
            int: a step count between 1 and MAX_FLATTENING_STEPS
        """
        return cls._steps_for_second_differences(np.asarray(points, dtype=np.float64), 2, tolerance)

    @classmethod
    def cubic_steps(cls, points: ControlPoints, tolerance: float) -> int:
        """
        Number of line segments to approximate a cubic curve within _tolerance_.

        Args:
            points: start, control1, control2 and end point
            tolerance: maximum allowed distance between curve and polyline

        Returns:
            int: a step count between 1 and MAX_FLATTENING_STEPS
        """
        return cls._steps_for_second_differences(np.asarray(points, dtype=np.float64), 3, tolerance)

    @classmethod
    def polygonize_quadratic_curve(cls, points: ControlPoints, steps: int) -> NDArray[np.float64]:
        """
        Polygonize a quadratic Bezier curve into line segments.
        Uses direct evaluation with vectorized operations.

        Args:
            points: Control points (start, control, end)
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2), first row is the start, last row the end point
        """
        points_array = np.asarray(points, dtype=np.float64)
        t = np.linspace(0.0, 1.0, steps + 1, dtype=np.float64)

        # Quadratic Bezier basis functions
        omt = 1.0 - t
        omt2 = omt * omt
        t2 = t * t

        result = np.empty((steps + 1, 2), dtype=np.float64)
        result[:, 0] = omt2 * points_array[0, 0] + 2.0 * omt * t * points_array[1, 0] + t2 * points_array[2, 0]
        result[:, 1] = omt2 * points_array[0, 1] + 2.0 * omt * t * points_array[1, 1] + t2 * points_array[2, 1]
        return result

    @classmethod
    def polygonize_cubic_curve(cls, points: ControlPoints, steps: int) -> NDArray[np.float64]:
        """
        Polygonize a cubic Bezier curve into line segments.
        Uses direct evaluation with vectorized operations.

        Args:
            points: Control points (start, control1, control2, end)
            steps: Number of segments to divide the curve into

        Returns:
            NDArray[np.float64] of shape (steps+1, 2), first row is the start, last row the end point
        """
        points_array = np.asarray(points, dtype=np.float64)
        t = np.linspace(0.0, 1.0, steps + 1, dtype=np.float64)

        # Cubic Bezier basis functions
        omt = 1.0 - t
        omt2 = omt * omt
        omt3 = omt2 * omt
        t2 = t * t
        t3 = t2 * t

        result = np.empty((steps + 1, 2), dtype=np.float64)
        for axis in (0, 1):
            result[:, axis] = (
                omt3 * points_array[0, axis]
                + 3.0 * omt2 * t * points_array[1, axis]
                + 3.0 * omt * t2 * points_array[2, axis]
                + t3 * points_array[3, axis]
            )
        return result

    @classmethod
    def flatten_quadratic_curve(cls, points: ControlPoints, tolerance: float) -> NDArray[np.float64]:
        """Polygonize a quadratic curve with as many steps as _tolerance_ requires."""
        return cls.polygonize_quadratic_curve(points, cls.quadratic_steps(points, tolerance))

    @classmethod
    def flatten_cubic_curve(cls, points: ControlPoints, tolerance: float) -> NDArray[np.float64]:
        """Polygonize a cubic curve with as many steps as _tolerance_ requires."""
        return cls.polygonize_cubic_curve(points, cls.cubic_steps(points, tolerance))
