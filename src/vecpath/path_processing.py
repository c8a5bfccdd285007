"""Path rewriting utilities: rounding the corners between straight segments."""

from __future__ import annotations

import logging
import math
from typing import List, Optional, Tuple

from vecpath.common import MIN_CORNER_RADIUS
from vecpath.path import VecPath
from vecpath.path_support import VecPathElement, VecPathElementType

logger = logging.getLogger(__name__)

Point2D = Tuple[float, float]


###############################################################################
# VecCornerRounder
###############################################################################
class VecCornerRounder:
    """Collection of static utilities to round the corners of a path."""

    @staticmethod
    def _fillet(result: VecPath, start: Point2D, join: Point2D, end: Point2D, radius: float) -> None:
        """Replace the corner at _join_ between start->join and join->end by a quadratic curve.

        The last point of _result_ must be _join_. It is pulled back towards
        _start_ and a curve with _join_ as control point is added that ends on
        the way towards _end_. Neither point moves past the middle of its segment.
        """
        len1 = math.hypot(start[0] - join[0], start[1] - join[1])
        if len1 > 0:
            prop = min(0.5, radius / len1)
            result._replace_last_point(  # pylint: disable=protected-access
                join[0] - (join[0] - start[0]) * prop,
                join[1] - (join[1] - start[1]) * prop,
            )

        len2 = math.hypot(end[0] - join[0], end[1] - join[1])
        if len2 > 0:
            prop = min(0.5, radius / len2)
            result.quadratic_to(
                join[0],
                join[1],
                join[0] + (end[0] - join[0]) * prop,
                join[1] + (end[1] - join[1]) * prop,
            )

    @staticmethod
    def round_corners(path: VecPath, corner_radius: float) -> VecPath:
        """
        Create a new path where each join of two consecutive lines is rounded.

        Both lines are shortened by _corner_radius_ (but at most to half of
        their length) and a quadratic curve with the corner as control point
        connects the new ends. Curves and isolated lines are copied unchanged.

        When a subpath is closed, the closing line counts as a line too: the
        join to the last line is rounded if the subpath has at least two lines,
        and the join at the start point is rounded if both the first and the
        last segment are lines. In that case the already written start point
        of the subpath is moved onto the end of the final curve.

        Args:
            path (VecPath): the source path, it is not modified
            corner_radius (float): the rounding radius

        Returns:
            VecPath: the new path; a copy of _path_ if corner_radius <= MIN_CORNER_RADIUS
        """
        # pylint: disable=too-many-branches,too-many-statements,protected-access
        if corner_radius <= MIN_CORNER_RADIUS:
            return path.copy()

        elements: List[VecPathElement] = list(path)
        result = VecPath()
        result.set_using_non_zero_winding(path.use_non_zero_winding)

        start_out_offset = 0
        start_point: Point2D = (0.0, 0.0)
        first_line_end: Optional[Point2D] = None
        last_was_line = False
        num_lines = 0
        previous: Point2D = (0.0, 0.0)
        current: Point2D = (0.0, 0.0)
        num_fillets = 0

        for index, element in enumerate(elements):
            element_type = element.element_type

            if element_type is VecPathElementType.START_NEW_SUB_PATH:
                start_out_offset = result._num_coords
                start_point = (element.x1, element.y1)
                result.start_new_sub_path(*start_point)
                previous = current = start_point
                last_was_line = False
                num_lines = 0

                following = elements[index + 1] if index + 1 < len(elements) else None
                if following is not None and following.element_type is VecPathElementType.LINE_TO:
                    first_line_end = (following.x1, following.y1)
                else:
                    first_line_end = None

            elif element_type is VecPathElementType.LINE_TO:
                end = (element.x1, element.y1)
                if last_was_line:
                    VecCornerRounder._fillet(result, previous, current, end, corner_radius)
                    num_fillets += 1
                result.line_to(*end)
                last_was_line = True
                num_lines += 1
                previous, current = current, end

            elif element_type is VecPathElementType.QUADRATIC_TO:
                result.quadratic_to(element.x1, element.y1, element.x2, element.y2)
                last_was_line = False
                previous, current = (element.x1, element.y1), (element.x2, element.y2)

            elif element_type is VecPathElementType.CUBIC_TO:
                result.cubic_to(element.x1, element.y1, element.x2, element.y2, element.x3, element.y3)
                last_was_line = False
                previous, current = (element.x2, element.y2), (element.x3, element.y3)

            elif element_type is VecPathElementType.CLOSE_PATH:
                if last_was_line and num_lines >= 2:
                    # The implicit closing line joins the last line ...
                    VecCornerRounder._fillet(result, previous, current, start_point, corner_radius)
                    result.line_to(*start_point)
                    num_fillets += 1

                    # ... and the first line
                    if first_line_end is not None:
                        wrap_end = VecCornerRounder._wrap_fillet(
                            result, current, start_point, first_line_end, corner_radius
                        )
                        if wrap_end is not None:
                            result._set_point(start_out_offset, *wrap_end)
                        num_fillets += 1

                result.close_sub_path()
                previous = current = start_point
                last_was_line = False
                num_lines = 0
                first_line_end = None

        result._recompute_bounds()
        logger.debug("Rounded %d corners with radius %s", num_fillets, corner_radius)
        return result

    @staticmethod
    def _wrap_fillet(
        result: VecPath, start: Point2D, join: Point2D, end: Point2D, radius: float
    ) -> Optional[Point2D]:
        """Round the corner at the start point of a closed subpath.

        Returns:
            Optional[Point2D]: the end of the added curve, which becomes the new
            start point of the subpath; None if no curve was added
        """
        VecCornerRounder._fillet(result, start, join, end, radius)
        if result._commands[-1] != "Q":  # pylint: disable=protected-access
            return None
        last = result.current_position()
        return (last.x, last.y)
