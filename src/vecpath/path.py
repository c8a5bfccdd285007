"""Mutable 2D vector path built from lines, quadratic and cubic Bezier curves."""

from __future__ import annotations

import logging
import math
from typing import BinaryIO, Iterator, Optional, Union

import numpy as np

from vecpath.common import (
    ARROW_HEAD_MAX_PROPORTION,
    DEFAULT_FLATTENING_TOLERANCE,
    ELLIPSE_ANGULAR_INCREMENT,
    ELLIPSE_CONTROL_FACTOR,
    PIE_FULL_CIRCLE_THRESHOLD,
    ROUNDED_RECTANGLE_CONTROL_FACTOR,
    Justification,
    VecPathCmds,
)
from vecpath.geom import GeomMath, VecAffine, VecBox, VecLine, VecPoint
from vecpath.path_flattener import VecPathFlattener
from vecpath.path_store import VecSegmentStore
from vecpath.path_support import VecPathElement, VecPathElementType, VecPathIterator

logger = logging.getLogger(__name__)


###############################################################################
# VecPath
###############################################################################


class VecPath(VecSegmentStore):
    """
    A mutable path made of subpaths of lines, quadratic and cubic curves.

    A subpath starts with start_new_sub_path() and may end with
    close_sub_path(). Drawing onto an empty path implicitly starts a subpath
    at the origin. The bounding box is kept up to date on every change and
    includes the control points of curves.

    The winding rule (non-zero by default, even-odd otherwise) only affects
    containment queries.
    """

    def __init__(self):
        super().__init__()
        self._use_non_zero_winding: bool = True

    ###########################################################################
    # Lifecycle
    ###########################################################################

    def copy(self) -> VecPath:
        """Return an independent deep copy of this path."""
        new_path = VecPath()
        new_path._copy_from(self)  # pylint: disable=protected-access
        new_path._use_non_zero_winding = self._use_non_zero_winding
        return new_path

    def swap_with(self, other: VecPath) -> None:
        """Exchange the contents of this path and _other_ without copying."""
        self._swap_with(other)
        self._use_non_zero_winding, other._use_non_zero_winding = (
            other._use_non_zero_winding,
            self._use_non_zero_winding,
        )

    def __iter__(self) -> Iterator[VecPathElement]:
        return VecPathIterator(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VecPath):
            return NotImplemented
        return (
            self._commands == other._commands
            and self._use_non_zero_winding == other._use_non_zero_winding
            and np.array_equal(self.coordinates, other.coordinates)
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"VecPath('{self.to_string()}')"

    ###########################################################################
    # Winding rule
    ###########################################################################

    @property
    def use_non_zero_winding(self) -> bool:
        """True for the non-zero winding rule, False for even-odd."""
        return self._use_non_zero_winding

    def set_using_non_zero_winding(self, is_non_zero: bool) -> None:
        """Select the non-zero (True) or even-odd (False) winding rule."""
        self._use_non_zero_winding = bool(is_non_zero)

    ###########################################################################
    # Builder primitives
    ###########################################################################

    def start_new_sub_path(self, x: float, y: float) -> None:
        """
        Begin a new subpath at (x, y).

        Raises:
            ValueError: If x or y is not a finite number.
        """
        self._append_record("M", x, y)

    def _append_drawing_record(self, cmd: VecPathCmds, *coords: float) -> None:
        # An empty path gets its implicit MoveTo(0, 0) in the same block
        if self._commands:
            self._append_record(cmd, *coords)
        else:
            self._append_records(["M", cmd], [0.0, 0.0, *coords])

    def line_to(self, x: float, y: float) -> None:
        """Add a straight line from the current position to (x, y)."""
        self._append_drawing_record("L", x, y)

    def quadratic_to(self, control_x: float, control_y: float, end_x: float, end_y: float) -> None:
        """Add a quadratic Bezier curve from the current position to (end_x, end_y)."""
        self._append_drawing_record("Q", control_x, control_y, end_x, end_y)

    def cubic_to(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        control1_x: float,
        control1_y: float,
        control2_x: float,
        control2_y: float,
        end_x: float,
        end_y: float,
    ) -> None:
        """Add a cubic Bezier curve from the current position to (end_x, end_y)."""
        self._append_drawing_record("C", control1_x, control1_y, control2_x, control2_y, end_x, end_y)

    def close_sub_path(self) -> None:
        """Close the current subpath. Closing twice in a row has no effect."""
        if self._commands and self._commands[-1] != "Z":
            self._append_record("Z")

    def add_path(self, other: VecPath, transform: Optional[VecAffine] = None) -> None:
        """
        Append all records of _other_ to this path.

        Args:
            other (VecPath): path to copy the records from
            transform (Optional[VecAffine]): applied to every point of _other_ if given
        """
        if transform is None:
            transform = VecAffine.identity()
        if other is self:
            other = self.copy()

        for element in VecPathIterator(other):
            if element.element_type is VecPathElementType.CLOSE_PATH:
                self.close_sub_path()
                continue

            x1, y1 = transform.transform_point(element.x1, element.y1)
            if element.element_type is VecPathElementType.START_NEW_SUB_PATH:
                self.start_new_sub_path(x1, y1)
            elif element.element_type is VecPathElementType.LINE_TO:
                self.line_to(x1, y1)
            elif element.element_type is VecPathElementType.QUADRATIC_TO:
                x2, y2 = transform.transform_point(element.x2, element.y2)
                self.quadratic_to(x1, y1, x2, y2)
            elif element.element_type is VecPathElementType.CUBIC_TO:
                x2, y2 = transform.transform_point(element.x2, element.y2)
                x3, y3 = transform.transform_point(element.x3, element.y3)
                self.cubic_to(x1, y1, x2, y2, x3, y3)

    ###########################################################################
    # Shapes
    ###########################################################################

    def add_rectangle(
        self,
        x: Union[float, VecBox],
        y: float = 0.0,
        width: float = 0.0,
        height: float = 0.0,
    ) -> None:
        """
        Add a closed rectangle as a new subpath.

        Negative sizes are allowed, the corners are swapped accordingly.

        Args:
            x (Union[float, VecBox]): left edge, or a VecBox giving the whole rectangle
            y (float): top edge
            width (float): width of the rectangle
            height (float): height of the rectangle
        """
        if isinstance(x, VecBox):
            x, y, width, height = x.xmin, x.ymin, x.width, x.height

        x1, y1 = x, y
        x2, y2 = x + width, y + height
        if width < 0:
            x1, x2 = x2, x1
        if height < 0:
            y1, y2 = y2, y1

        # All four corners are known, so the bounds are widened once for the whole block
        self._append_records(
            ["M", "L", "L", "L", "Z"],
            [x1, y2, x1, y1, x2, y1, x2, y2],
        )

    def add_rounded_rectangle(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        corner_size_x: float,
        corner_size_y: Optional[float] = None,
    ) -> None:
        """
        Add a rectangle with rounded corners as a new subpath.

        Each corner is a single cubic curve with its control points at
        ROUNDED_RECTANGLE_CONTROL_FACTOR of the corner size, which comes close
        to a quarter ellipse but is not exact. The corner sizes are clamped to
        half the width and half the height.

        Args:
            corner_size_x: horizontal corner size
            corner_size_y: vertical corner size, defaults to _corner_size_x_
        """
        if corner_size_y is None:
            corner_size_y = corner_size_x

        csx = min(corner_size_x, width * 0.5)
        csy = min(corner_size_y, height * 0.5)
        cs45x = csx * ROUNDED_RECTANGLE_CONTROL_FACTOR
        cs45y = csy * ROUNDED_RECTANGLE_CONTROL_FACTOR
        x2 = x + width
        y2 = y + height

        self.start_new_sub_path(x + csx, y)
        self.line_to(x2 - csx, y)
        self.cubic_to(x2 - cs45x, y, x2, y + cs45y, x2, y + csy)
        self.line_to(x2, y2 - csy)
        self.cubic_to(x2, y2 - cs45y, x2 - cs45x, y2, x2 - csx, y2)
        self.line_to(x + csx, y2)
        self.cubic_to(x + cs45x, y2, x, y2 - cs45y, x, y2 - csy)
        self.line_to(x, y + csy)
        self.cubic_to(x, y + cs45y, x + cs45x, y, x + csx, y)
        self.close_sub_path()

    def add_triangle(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x3: float,
        y3: float,
    ) -> None:
        """Add a closed triangle as a new subpath."""
        self.start_new_sub_path(x1, y1)
        self.line_to(x2, y2)
        self.line_to(x3, y3)
        self.close_sub_path()

    def add_quadrilateral(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x3: float,
        y3: float,
        x4: float,
        y4: float,
    ) -> None:
        """Add a closed four-sided polygon as a new subpath."""
        self.start_new_sub_path(x1, y1)
        self.line_to(x2, y2)
        self.line_to(x3, y3)
        self.line_to(x4, y4)
        self.close_sub_path()

    def add_ellipse(self, x: float, y: float, width: float, height: float) -> None:
        """
        Add an ellipse fitting into the given rectangle as a new subpath.

        The outline consists of four cubic curves starting at the top.
        All control points stay inside the rectangle, so the bounding box
        equals the rectangle.
        """
        hw = width * 0.5
        hw55 = hw * ELLIPSE_CONTROL_FACTOR
        hh = height * 0.5
        hh55 = hh * ELLIPSE_CONTROL_FACTOR
        cx = x + hw
        cy = y + hh

        self.start_new_sub_path(cx, cy - hh)
        self.cubic_to(cx + hw55, cy - hh, cx + hw, cy - hh55, cx + hw, cy)
        self.cubic_to(cx + hw, cy + hh55, cx + hw55, cy + hh, cx, cy + hh)
        self.cubic_to(cx - hw55, cy + hh, cx - hw, cy + hh55, cx - hw, cy)
        self.cubic_to(cx - hw, cy - hh55, cx - hw55, cy - hh, cx, cy - hh)
        self.close_sub_path()

    def add_arc(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        from_radians: float,
        to_radians: float,
        start_as_new_sub_path: bool = True,
    ) -> None:
        """
        Add an elliptical arc of the ellipse fitting into the given rectangle.

        Angles are measured clockwise from 12 o'clock. See add_centred_arc().
        """
        radius_x = width / 2.0
        radius_y = height / 2.0
        self.add_centred_arc(
            x + radius_x,
            y + radius_y,
            radius_x,
            radius_y,
            0.0,
            from_radians,
            to_radians,
            start_as_new_sub_path,
        )

    def add_centred_arc(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        centre_x: float,
        centre_y: float,
        radius_x: float,
        radius_y: float,
        rotation_of_ellipse: float,
        from_radians: float,
        to_radians: float,
        start_as_new_sub_path: bool = True,
    ) -> None:
        """
        Add an elliptical arc as a sequence of short lines.

        The angle walks from _from_radians_ to _to_radians_ in steps of
        ELLIPSE_ANGULAR_INCREMENT, in whichever direction leads there. The last
        point lies exactly at _to_radians_. Nothing is added unless both radii
        are positive.

        Args:
            centre_x, centre_y: centre of the ellipse
            radius_x, radius_y: radii of the ellipse
            rotation_of_ellipse: rotation (radians) of the ellipse around its centre
            from_radians: start angle, clockwise from 12 o'clock
            to_radians: end angle, clockwise from 12 o'clock
            start_as_new_sub_path: if False, the arc is joined to the current
                subpath with a line from the current position
        """
        if radius_x <= 0.0 or radius_y <= 0.0:
            return

        rotation = VecAffine.rotation(rotation_of_ellipse, centre_x, centre_y)

        def arc_point(angle: float):
            px = centre_x + radius_x * math.sin(angle)
            py = centre_y - radius_y * math.cos(angle)
            if rotation_of_ellipse != 0:
                return rotation.transform_point(px, py)
            return (px, py)

        angle = from_radians
        if start_as_new_sub_path:
            self.start_new_sub_path(*arc_point(angle))

        if from_radians < to_radians:
            if start_as_new_sub_path:
                angle += ELLIPSE_ANGULAR_INCREMENT
            while angle < to_radians:
                self.line_to(*arc_point(angle))
                angle += ELLIPSE_ANGULAR_INCREMENT
        else:
            if start_as_new_sub_path:
                angle -= ELLIPSE_ANGULAR_INCREMENT
            while angle > to_radians:
                self.line_to(*arc_point(angle))
                angle -= ELLIPSE_ANGULAR_INCREMENT

        self.line_to(*arc_point(to_radians))

    def add_pie_segment(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        from_radians: float,
        to_radians: float,
        inner_circle_proportional_size: float = 0.0,
    ) -> None:
        """
        Add a pie segment of the ellipse fitting into the given rectangle.

        With _inner_circle_proportional_size_ > 0 a second arc of the
        proportionally smaller ellipse runs back from _to_radians_ to
        _from_radians_, giving an annular wedge. Otherwise the outer arc is
        connected to the centre.

        A sweep above PIE_FULL_CIRCLE_THRESHOLD * pi is a full circle: the outer
        loop is closed and the inner loop becomes a subpath of its own.
        """
        hw = width * 0.5
        hh = height * 0.5
        centre_x = x + hw
        centre_y = y + hh

        self.add_arc(x, y, width, height, from_radians, to_radians)

        if abs(from_radians - to_radians) > math.pi * PIE_FULL_CIRCLE_THRESHOLD:
            self.close_sub_path()

            if inner_circle_proportional_size > 0:
                hw *= inner_circle_proportional_size
                hh *= inner_circle_proportional_size
                self.add_arc(centre_x - hw, centre_y - hh, hw * 2.0, hh * 2.0, to_radians, from_radians)

        elif inner_circle_proportional_size > 0:
            hw *= inner_circle_proportional_size
            hh *= inner_circle_proportional_size
            self.add_arc(
                centre_x - hw,
                centre_y - hh,
                hw * 2.0,
                hh * 2.0,
                to_radians,
                from_radians,
                start_as_new_sub_path=False,
            )

        else:
            self.line_to(centre_x, centre_y)

        self.close_sub_path()

    def add_line_segment(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        start_x: float,
        start_y: float,
        end_x: float,
        end_y: float,
        line_thickness: float,
    ) -> None:
        """Add the outline of a straight line of the given thickness as a closed subpath."""
        half = line_thickness * 0.5
        offset = GeomMath.perpendicular_offset

        self.start_new_sub_path(*offset(start_x, start_y, end_x, end_y, 0.0, half))
        self.line_to(*offset(start_x, start_y, end_x, end_y, 0.0, -half))
        self.line_to(*offset(end_x, end_y, start_x, start_y, 0.0, half))
        self.line_to(*offset(end_x, end_y, start_x, start_y, 0.0, -half))
        self.close_sub_path()

    def add_arrow(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        start_x: float,
        start_y: float,
        end_x: float,
        end_y: float,
        line_thickness: float,
        arrowhead_width: float,
        arrowhead_length: float,
    ) -> None:
        """
        Add the outline of an arrow pointing from start to end as a closed subpath.

        The head length is clamped to ARROW_HEAD_MAX_PROPORTION of the distance
        between start and end.
        """
        half_thickness = line_thickness * 0.5
        half_width = arrowhead_width * 0.5
        head = min(arrowhead_length, ARROW_HEAD_MAX_PROPORTION * math.hypot(start_x - end_x, start_y - end_y))
        offset = GeomMath.perpendicular_offset

        self.start_new_sub_path(*offset(start_x, start_y, end_x, end_y, 0.0, half_thickness))
        self.line_to(*offset(start_x, start_y, end_x, end_y, 0.0, -half_thickness))
        self.line_to(*offset(end_x, end_y, start_x, start_y, head, half_thickness))
        self.line_to(*offset(end_x, end_y, start_x, start_y, head, half_width))
        self.line_to(*offset(end_x, end_y, start_x, start_y, 0.0, 0.0))
        self.line_to(*offset(end_x, end_y, start_x, start_y, head, -half_width))
        self.line_to(*offset(end_x, end_y, start_x, start_y, head, -half_thickness))
        self.close_sub_path()

    def add_star(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        centre_x: float,
        centre_y: float,
        number_of_points: int,
        inner_radius: float,
        outer_radius: float,
        start_angle: float = 0.0,
    ) -> None:
        """
        Add a star as a closed subpath.

        The outer points are spaced evenly by 2*pi / _number_of_points_, the
        first one at _start_angle_ (clockwise from 12 o'clock). Each inner
        point lies halfway between two outer points.

        Raises:
            ValueError: If _number_of_points_ is less than 2.
        """
        if number_of_points < 2:
            raise ValueError(f"A star needs at least 2 points, got {number_of_points}")

        angle_between_points = 2.0 * math.pi / number_of_points

        for i in range(number_of_points):
            angle = start_angle + i * angle_between_points
            x = centre_x + outer_radius * math.sin(angle)
            y = centre_y - outer_radius * math.cos(angle)

            if i == 0:
                self.start_new_sub_path(x, y)
            else:
                self.line_to(x, y)

            angle += angle_between_points * 0.5
            self.line_to(
                centre_x + inner_radius * math.sin(angle),
                centre_y - inner_radius * math.cos(angle),
            )

        self.close_sub_path()

    def add_bubble(
        # pylint: disable=too-many-arguments,too-many-positional-arguments,too-many-locals
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        corner_size: float,
        tip_x: float,
        tip_y: float,
        which_side: int,
        arrow_position: float,
        arrow_width: float,
    ) -> None:
        """
        Add a speech-bubble outline as a closed subpath.

        The outline is a rounded rectangle. One side may carry a triangular
        tip pointing at (tip_x, tip_y).

        Args:
            corner_size: corner radius, clamped to half the width and half the height
            tip_x, tip_y: the point the tip points at
            which_side: side carrying the tip: 0 top, 1 left, 2 bottom, 3 right,
                any other value draws no tip
            arrow_position: position of the tip base along its side (0..1)
            arrow_width: width of the tip base, clamped to the straight part of the side
        """
        if width <= 1.0 or height <= 1.0:
            return

        cs = min(corner_size, width * 0.5, height * 0.5)
        cs2 = 2.0 * cs

        half_arrow_w = min(arrow_width, width - cs2) * 0.5
        arrow_x1 = x + cs + max(0.0, (width - cs2) * arrow_position - half_arrow_w)
        half_arrow_h = min(arrow_width, height - cs2) * 0.5
        arrow_y1 = y + cs + max(0.0, (height - cs2) * arrow_position - half_arrow_h)

        self.start_new_sub_path(x + cs, y)

        if which_side == 0:
            self.line_to(arrow_x1, y)
            self.line_to(tip_x, tip_y)
            self.line_to(arrow_x1 + half_arrow_w * 2.0, y)

        self.line_to(x + width - cs, y)
        if cs > 0.0:
            self.add_arc(x + width - cs2, y, cs2, cs2, 0.0, math.pi * 0.5, start_as_new_sub_path=False)

        if which_side == 3:
            self.line_to(x + width, arrow_y1)
            self.line_to(tip_x, tip_y)
            self.line_to(x + width, arrow_y1 + half_arrow_h * 2.0)

        self.line_to(x + width, y + height - cs)
        if cs > 0.0:
            self.add_arc(
                x + width - cs2, y + height - cs2, cs2, cs2, math.pi * 0.5, math.pi, start_as_new_sub_path=False
            )

        if which_side == 2:
            self.line_to(arrow_x1 + half_arrow_w * 2.0, y + height)
            self.line_to(tip_x, tip_y)
            self.line_to(arrow_x1, y + height)

        self.line_to(x + cs, y + height)
        if cs > 0.0:
            self.add_arc(x, y + height - cs2, cs2, cs2, math.pi, math.pi * 1.5, start_as_new_sub_path=False)

        if which_side == 1:
            self.line_to(x, arrow_y1 + half_arrow_h * 2.0)
            self.line_to(tip_x, tip_y)
            self.line_to(x, arrow_y1)

        self.line_to(x, y + cs)
        if cs > 0.0:
            self.add_arc(
                x,
                y,
                cs2,
                cs2,
                math.pi * 1.5,
                math.pi * 2.0 - ELLIPSE_ANGULAR_INCREMENT,
                start_as_new_sub_path=False,
            )

        self.close_sub_path()

    ###########################################################################
    # Transform
    ###########################################################################

    def apply_transform(self, transform: VecAffine) -> None:
        """
        Transform every stored point in place and rebuild the bounding box.

        Raises:
            ValueError: If a transformed coordinate is not finite in single
                precision. The path is left unchanged.
        """
        if not self._num_coords:
            return

        points = self._coords[: self._num_coords].reshape(-1, 2)
        with np.errstate(over="ignore", invalid="ignore"):
            transformed = transform.transform_points(points).astype(np.float32)
        if not np.all(np.isfinite(transformed)):
            raise ValueError(f"Transform {transform.to_list()} maps the path outside the finite single precision range")

        points[:] = transformed
        self._recompute_bounds()

    def bounds_transformed(self, transform: VecAffine) -> VecBox:
        """The bounding box after _transform_, computed from the corners of the current box."""
        return self.bounding_box().transformed(transform)

    def get_transform_to_scale_to_fit(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        preserve_proportions: bool,
        justification: Justification = Justification.CENTRED,
    ) -> VecAffine:
        """
        The transform that maps the bounding box of this path onto the given rectangle.

        Args:
            x, y, width, height: target rectangle
            preserve_proportions: if True, the aspect ratio is kept and the
                scaled path is placed inside the target according to _justification_
            justification: placement flags, see Justification

        Returns:
            VecAffine: the fitting transform; identity if proportions are kept and
            either the target or the bounding box has no area
        """
        bounds = self.bounding_box()

        if preserve_proportions:
            if width <= 0 or height <= 0 or bounds.is_empty:
                return VecAffine.identity()

            src_ratio = bounds.height / bounds.width
            if src_ratio > height / width:
                new_w = height / src_ratio
                new_h = height
            else:
                new_w = width
                new_h = width * src_ratio

            if justification.test_flags(Justification.LEFT):
                new_x_centre = x + new_w * 0.5
            elif justification.test_flags(Justification.RIGHT):
                new_x_centre = x + width - new_w * 0.5
            else:
                new_x_centre = x + width * 0.5

            if justification.test_flags(Justification.TOP):
                new_y_centre = y + new_h * 0.5
            elif justification.test_flags(Justification.BOTTOM):
                new_y_centre = y + height - new_h * 0.5
            else:
                new_y_centre = y + height * 0.5

            return (
                VecAffine.translation(bounds.width * -0.5 - bounds.xmin, bounds.height * -0.5 - bounds.ymin)
                .scaled(new_w / bounds.width, new_h / bounds.height)
                .translated(new_x_centre, new_y_centre)
            )

        # An axis without extent cannot be stretched, it is only moved
        scale_x = width / bounds.width if bounds.width > 0 else 1.0
        scale_y = height / bounds.height if bounds.height > 0 else 1.0
        return VecAffine.translation(-bounds.xmin, -bounds.ymin).scaled(scale_x, scale_y).translated(x, y)

    def scale_to_fit(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        preserve_proportions: bool,
        justification: Justification = Justification.CENTRED,
    ) -> None:
        """Transform this path in place so that it fits into the given rectangle."""
        self.apply_transform(
            self.get_transform_to_scale_to_fit(x, y, width, height, preserve_proportions, justification)
        )

    ###########################################################################
    # Queries
    ###########################################################################

    def contains(self, x: float, y: float, tolerance: float = DEFAULT_FLATTENING_TOLERANCE) -> bool:
        """
        Check if (x, y) lies inside the filled path.

        Points on or outside the bounding box are always outside. Otherwise a
        horizontal ray to the left of the point is intersected with the
        flattened path and the crossings are counted according to the winding
        rule. An edge counts if y1 <= y < y2 (or y2 <= y < y1), so a shared
        vertex is counted once.

        Args:
            x (float): x-coordinate of the point
            y (float): y-coordinate of the point
            tolerance (float): flattening tolerance for the curves

        Returns:
            bool: True if the point is inside
        """
        if x <= self._xmin or x >= self._xmax or y <= self._ymin or y >= self._ymax:
            return False

        positive_crossings = 0
        negative_crossings = 0

        for edge in VecPathFlattener(self, tolerance=tolerance):
            if (edge.y1 <= y < edge.y2) or (edge.y2 <= y < edge.y1):
                intersect_x = edge.x1 + (edge.x2 - edge.x1) * (y - edge.y1) / (edge.y2 - edge.y1)
                if intersect_x <= x:
                    if edge.y1 < edge.y2:
                        positive_crossings += 1
                    else:
                        negative_crossings += 1

        if self._use_non_zero_winding:
            return negative_crossings != positive_crossings
        return (negative_crossings + positive_crossings) % 2 == 1

    def contains_point(self, point: VecPoint, tolerance: float = DEFAULT_FLATTENING_TOLERANCE) -> bool:
        """Same as contains() for a VecPoint (or any (x, y) pair)."""
        return self.contains(point[0], point[1], tolerance)

    def intersects_line(self, line: VecLine, tolerance: float = DEFAULT_FLATTENING_TOLERANCE) -> bool:
        """True if _line_ crosses or touches any edge of the flattened path."""
        return any(line.intersects(edge.to_line()) is not None for edge in VecPathFlattener(self, tolerance=tolerance))

    def get_clipped_line(self, line: VecLine, keep_section_outside_path: bool) -> VecLine:
        """
        Clip _line_ against the filled path.

        If both ends are on the same side, the line is returned unchanged when
        that side is kept, otherwise a zero line. If the ends are on different
        sides, the end lying in the discarded area is moved to the first found
        intersection with the path.

        Args:
            line (VecLine): the line to clip
            keep_section_outside_path (bool): keep the part outside (True) or inside (False)

        Returns:
            VecLine: the clipped line
        """
        start_inside = self.contains_point(line.start)
        end_inside = self.contains_point(line.end)

        if start_inside == end_inside:
            if keep_section_outside_path == start_inside:
                return VecLine()
            return line

        for edge in VecPathFlattener(self):
            intersection = line.intersects(edge.to_line())
            if intersection is None:
                continue

            if (start_inside and keep_section_outside_path) or (end_inside and not keep_section_outside_path):
                return line.with_start(intersection)
            return line.with_end(intersection)

        logger.debug("No intersection found while clipping %s", line)
        return line

    ###########################################################################
    # Derived paths
    ###########################################################################

    def create_path_with_rounded_corners(self, corner_radius: float) -> VecPath:
        """
        Return a new path with the joins between consecutive lines rounded.

        See VecCornerRounder.round_corners(). This path is not modified.
        """
        from vecpath.path_processing import (  # pylint: disable=import-outside-toplevel
            VecCornerRounder,
        )

        return VecCornerRounder.round_corners(self, corner_radius)

    ###########################################################################
    # Binary format
    ###########################################################################

    def write_path_to_stream(self, stream: BinaryIO) -> None:
        """Write this path in the binary format to _stream_."""
        from vecpath.path_codec import (  # pylint: disable=import-outside-toplevel
            VecPathBinaryCodec,
        )

        VecPathBinaryCodec.write(self, stream)

    def load_path_from_stream(self, stream: BinaryIO) -> None:
        """
        Append the records read from a binary _stream_ to this path.

        Raises:
            PathDecodeError: If the stream contains an unknown tag or ends inside a record.
        """
        from vecpath.path_codec import (  # pylint: disable=import-outside-toplevel
            VecPathBinaryCodec,
        )

        VecPathBinaryCodec.read(stream, self)

    def load_path_from_data(self, data: bytes) -> None:
        """Append the records of binary _data_ to this path."""
        from vecpath.path_codec import (  # pylint: disable=import-outside-toplevel
            VecPathBinaryCodec,
        )

        VecPathBinaryCodec.read_bytes(data, self)

    def to_bytes(self) -> bytes:
        """This path in the binary format."""
        from vecpath.path_codec import (  # pylint: disable=import-outside-toplevel
            VecPathBinaryCodec,
        )

        return VecPathBinaryCodec.to_bytes(self)

    @classmethod
    def from_bytes(cls, data: bytes) -> VecPath:
        """Create a new path from binary _data_."""
        path = cls()
        path.load_path_from_data(data)
        return path

    ###########################################################################
    # Text format
    ###########################################################################

    def to_string(self) -> str:
        """This path in the compact text format, e.g. "m 0 0 l 10 0 10 10 z"."""
        from vecpath.path_codec import (  # pylint: disable=import-outside-toplevel
            VecPathTextCodec,
        )

        return VecPathTextCodec.encode(self)

    def restore_from_string(self, text: str) -> None:
        """Replace the contents of this path by the path described in _text_."""
        from vecpath.path_codec import (  # pylint: disable=import-outside-toplevel
            VecPathTextCodec,
        )

        VecPathTextCodec.decode(text, self)

    @classmethod
    def from_string(cls, text: str) -> VecPath:
        """Create a new path from the compact text format."""
        path = cls()
        path.restore_from_string(text)
        return path


def main():
    """Main"""
    path = VecPath()
    path.add_rounded_rectangle(0, 0, 100, 50, 10)
    path.add_star(50, 25, 5, 8, 20)
    print(path)
    print(path.bounding_box())


if __name__ == "__main__":
    main()
