"""Tests for the builder primitives and shape constructors of VecPath."""

from __future__ import annotations

import math

import numpy as np
import pytest

from vecpath.geom import VecAffine, VecBox
from vecpath.path import VecPath

###############################################################################
# Primitives
###############################################################################


class TestSubPathLifecycle:
    """Tests for start, close and add_path."""

    def test_close_is_idempotent(self):
        """Closing an already closed subpath adds nothing."""
        path = VecPath()
        path.start_new_sub_path(0, 0)
        path.line_to(10, 0)
        path.line_to(10, 10)
        path.close_sub_path()
        path.close_sub_path()

        assert path.commands == ["M", "L", "L", "Z"]

    def test_close_on_empty_path_adds_nothing(self):
        """There is no subpath to close on an empty path."""
        path = VecPath()
        path.close_sub_path()
        assert path.num_records == 0

    def test_add_path_replays_records(self):
        """add_path copies all records including closes."""
        source = VecPath()
        source.add_triangle(0, 0, 10, 0, 5, 8)
        source.start_new_sub_path(20, 20)
        source.quadratic_to(25, 30, 30, 20)

        path = VecPath()
        path.add_path(source)

        assert path.commands == source.commands
        np.testing.assert_array_equal(path.coordinates, source.coordinates)
        assert path.bounding_box() == source.bounding_box()

    def test_add_path_with_transform(self):
        """Every point of the added path is transformed."""
        source = VecPath()
        source.add_rectangle(0, 0, 10, 10)

        path = VecPath()
        path.add_path(source, VecAffine.translation(100, 50))

        assert path.commands == ["M", "L", "L", "L", "Z"]
        np.testing.assert_array_equal(path.coordinates, [100, 60, 100, 50, 110, 50, 110, 60])
        assert path.bounding_box().extent == (100, 50, 110, 60)

    def test_add_path_to_itself(self):
        """A path can be appended to itself."""
        path = VecPath()
        path.add_triangle(0, 0, 10, 0, 5, 8)
        path.add_path(path)

        assert path.commands == ["M", "L", "L", "Z"] * 2


###############################################################################
# Rectangles and polygons
###############################################################################


class TestRectangles:
    """Tests for plain and rounded rectangles."""

    def test_rectangle_records(self):
        """A rectangle starts at its bottom-left corner and runs clockwise on screen."""
        path = VecPath()
        path.add_rectangle(1, 2, 10, 20)

        assert path.commands == ["M", "L", "L", "L", "Z"]
        np.testing.assert_array_equal(path.coordinates, [1, 22, 1, 2, 11, 2, 11, 22])
        assert path.bounding_box().extent == (1, 2, 11, 22)

    def test_rectangle_negative_size(self):
        """Negative width and height give the same rectangle as the normalized call."""
        normalized = VecPath()
        normalized.add_rectangle(0, 0, 10, 20)

        negative = VecPath()
        negative.add_rectangle(10, 20, -10, -20)

        assert negative == normalized

    def test_rectangle_from_box(self):
        """A VecBox can be passed instead of x, y, width, height."""
        from_box = VecPath()
        from_box.add_rectangle(VecBox(1, 2, 5, 9))

        from_values = VecPath()
        from_values.add_rectangle(1, 2, 4, 7)

        assert from_box == from_values

    def test_rectangle_widens_existing_bounds(self):
        """The rectangle fast path combines with existing bounds."""
        path = VecPath()
        path.start_new_sub_path(-5, 50)
        path.add_rectangle(0, 0, 10, 10)
        assert path.bounding_box().extent == (-5, 0, 10, 50)

    def test_rounded_rectangle_records(self):
        """Four lines joined by four cubic corners."""
        path = VecPath()
        path.add_rounded_rectangle(0, 0, 100, 50, 10)

        assert path.commands == ["M", "L", "C", "L", "C", "L", "C", "L", "C", "Z"]
        assert tuple(path.points[0]) == (10, 0)
        assert tuple(path.points[1]) == (90, 0)
        # first corner: control points at 0.45 of the corner size
        np.testing.assert_allclose(path.points[2:5], [[95.5, 0], [100, 4.5], [100, 10]])
        assert path.bounding_box().extent == (0, 0, 100, 50)

    def test_rounded_rectangle_clamps_corner(self):
        """Corner sizes are limited to half the width and half the height."""
        path = VecPath()
        path.add_rounded_rectangle(0, 0, 40, 20, 100)

        assert tuple(path.points[0]) == (20, 0)
        assert tuple(path.points[1]) == (20, 0)
        # end of the first corner lies at half the height
        assert tuple(path.points[4]) == (40, 10)

    def test_rounded_rectangle_separate_corner_sizes(self):
        """Horizontal and vertical corner sizes can differ."""
        path = VecPath()
        path.add_rounded_rectangle(0, 0, 100, 100, 10, 20)
        assert tuple(path.points[4]) == (100, 20)

    def test_triangle_and_quadrilateral(self):
        """Polygons are closed subpaths through the given points."""
        path = VecPath()
        path.add_triangle(0, 0, 10, 0, 5, 8)
        path.add_quadrilateral(20, 0, 30, 0, 30, 10, 20, 10)

        assert path.commands == ["M", "L", "L", "Z", "M", "L", "L", "L", "Z"]
        assert path.bounding_box().extent == (0, 0, 30, 10)


###############################################################################
# Ellipses and arcs
###############################################################################


class TestEllipsesAndArcs:
    """Tests for ellipses, arcs and pie segments."""

    def test_ellipse_bounds_are_exact(self):
        """The control points of the ellipse stay inside its rectangle."""
        path = VecPath()
        path.add_ellipse(0, 0, 100, 100)

        assert path.commands == ["M", "C", "C", "C", "C", "Z"]
        assert path.bounding_box().extent == (0, 0, 100, 100)
        assert tuple(path.points[0]) == (50, 0)
        np.testing.assert_allclose(path.points[1], [77.5, 0])

    def test_arc_end_points(self):
        """The arc starts at the start angle and ends exactly at the end angle."""
        path = VecPath()
        path.add_arc(0, 0, 100, 100, 0, math.pi / 2)

        assert path.commands[0] == "M"
        assert set(path.commands[1:]) == {"L"}
        np.testing.assert_allclose(path.points[0], [50, 0])
        np.testing.assert_allclose(path.points[-1], [100, 50], atol=1e-5)

    def test_arc_step_size(self):
        """The angle advances in steps of 0.05 radians."""
        path = VecPath()
        path.add_arc(0, 0, 200, 200, 0, 1.0)

        # 0.05 .. 0.95 (or 1.0 minus rounding) plus the exact end point
        assert 20 <= path.num_records - 1 <= 21
        for x, y in path.points:
            assert math.hypot(x - 100, y - 100) == pytest.approx(100, abs=1e-4)

    def test_arc_backwards(self):
        """An arc from a larger to a smaller angle runs counter-clockwise."""
        path = VecPath()
        path.add_arc(0, 0, 100, 100, math.pi / 2, 0)

        np.testing.assert_allclose(path.points[0], [100, 50], atol=1e-5)
        np.testing.assert_allclose(path.points[-1], [50, 0], atol=1e-5)

    def test_arc_continues_sub_path(self):
        """Without a new subpath the arc starts with a line from the current position."""
        path = VecPath()
        path.start_new_sub_path(0, 0)
        path.add_arc(0, 0, 100, 100, 0, math.pi / 2, start_as_new_sub_path=False)

        assert path.commands.count("M") == 1
        np.testing.assert_allclose(path.points[1], [50, 0], atol=1e-5)

    def test_arc_needs_positive_radii(self):
        """Arcs with a zero radius add nothing."""
        path = VecPath()
        path.add_arc(0, 0, 0, 100, 0, 1)
        path.add_centred_arc(0, 0, 10, -1, 0, 0, 1)
        assert path.num_records == 0

    def test_centred_arc_rotation(self):
        """The rotation turns the ellipse around its centre."""
        path = VecPath()
        path.add_centred_arc(50, 50, 10, 20, math.pi / 2, 0, math.pi)

        np.testing.assert_allclose(path.points[0], [70, 50], atol=1e-4)
        np.testing.assert_allclose(path.points[-1], [30, 50], atol=1e-4)

    def test_pie_segment_wedge(self):
        """A quarter pie runs along the arc and back to the centre."""
        path = VecPath()
        path.add_pie_segment(0, 0, 100, 100, 0, math.pi / 2)

        assert path.commands.count("M") == 1
        assert path.commands[-1] == "Z"
        np.testing.assert_allclose(path.points[-1], [50, 50])
        assert path.contains(70, 30)
        assert not path.contains(30, 30)

    def test_pie_segment_annular_wedge(self):
        """With an inner proportion the wedge is cut out of a ring."""
        path = VecPath()
        path.add_pie_segment(0, 0, 100, 100, 0, math.pi / 2, 0.5)

        assert path.commands.count("M") == 1
        # the inner arc ends at the start angle of the inner ellipse
        np.testing.assert_allclose(path.points[-1], [50, 25], atol=1e-5)
        assert path.contains(80, 20)
        assert not path.contains(55, 45)

    def test_pie_segment_full_ring(self):
        """A full circle with inner proportion becomes two loops."""
        path = VecPath()
        path.add_pie_segment(0, 0, 100, 100, 0, 2 * math.pi, 0.5)

        assert path.commands.count("M") == 2
        assert path.commands.count("Z") == 2
        assert path.contains(50, 10)
        assert not path.contains(50, 50)


###############################################################################
# Lines, arrows, stars, bubbles
###############################################################################


class TestOutlineShapes:
    """Tests for line segments, arrows, stars and bubbles."""

    def test_line_segment(self):
        """A thick horizontal line is a rectangle around it."""
        path = VecPath()
        path.add_line_segment(0, 0, 10, 0, 2)

        assert path.commands == ["M", "L", "L", "L", "Z"]
        np.testing.assert_allclose(path.points, [[0, 1], [0, -1], [10, -1], [10, 1]], atol=1e-6)

    def test_degenerate_line_segment(self):
        """A zero-length line collapses onto its point."""
        path = VecPath()
        path.add_line_segment(5, 5, 5, 5, 3)
        np.testing.assert_array_equal(path.points, [[5, 5]] * 4)

    def test_arrow(self):
        """The arrow outline consists of shaft and head."""
        path = VecPath()
        path.add_arrow(0, 0, 100, 0, 10, 30, 20)

        assert path.commands == ["M", "L", "L", "L", "L", "L", "L", "Z"]
        np.testing.assert_allclose(
            path.points,
            [[0, 5], [0, -5], [80, -5], [80, -15], [100, 0], [80, 15], [80, 5]],
            atol=1e-5,
        )

    def test_arrow_head_is_clamped(self):
        """The head is at most 80% of the arrow length."""
        path = VecPath()
        path.add_arrow(0, 0, 100, 0, 10, 30, 1000)

        np.testing.assert_allclose(path.points[2], [20, -5], atol=1e-5)

    def test_star(self):
        """A star alternates outer and inner points."""
        path = VecPath()
        path.add_star(0, 0, 5, 10, 20)

        assert path.commands == ["M"] + ["L"] * 9 + ["Z"]
        np.testing.assert_allclose(path.points[0], [0, -20], atol=1e-5)

        radii = np.hypot(path.points[:, 0], path.points[:, 1])
        np.testing.assert_allclose(radii[0::2], 20, rtol=1e-6)
        np.testing.assert_allclose(radii[1::2], 10, rtol=1e-6)

    def test_star_needs_two_points(self):
        """Stars with fewer than 2 points are rejected."""
        path = VecPath()
        with pytest.raises(ValueError, match="at least 2"):
            path.add_star(0, 0, 1, 10, 20)
        assert path.num_records == 0

    def test_bubble_with_tip(self):
        """A bubble is one closed subpath including its tip."""
        path = VecPath()
        path.add_bubble(0, 0, 100, 50, 10, 50, -30, 0, 0.5, 20)

        assert path.commands.count("M") == 1
        assert path.commands[-1] == "Z"
        assert path.bounding_box().extent == pytest.approx((0, -30, 100, 50), abs=1e-5)
        # tip base centred on the top edge
        np.testing.assert_allclose(path.points[1:4], [[40, 0], [50, -30], [60, 0]])
        assert path.contains(50, 25)
        assert path.contains(50, -10)

    @pytest.mark.parametrize("which_side", [1, 2, 3])
    def test_bubble_tip_sides(self, which_side):
        """The tip is included in the outline on each side."""
        tips = {1: (-30, 25), 2: (50, 80), 3: (130, 25)}
        tip_x, tip_y = tips[which_side]

        path = VecPath()
        path.add_bubble(0, 0, 100, 50, 10, tip_x, tip_y, which_side, 0.5, 10)

        assert [tip_x, tip_y] in path.points.tolist()
        assert path.contains(50, 25)

    def test_small_bubble_adds_nothing(self):
        """Bubbles of one unit or less are skipped."""
        path = VecPath()
        path.add_bubble(0, 0, 1, 50, 5, 0, 0, 0, 0.5, 5)
        assert path.num_records == 0


###############################################################################
# Copy, swap, winding
###############################################################################


class TestLifecycle:
    """Tests for copy, swap_with and equality."""

    def test_copy_is_independent(self):
        """Changing the copy does not change the original."""
        path = VecPath()
        path.add_rectangle(0, 0, 10, 10)
        path.set_using_non_zero_winding(False)

        clone = path.copy()
        assert clone == path

        clone.line_to(50, 50)
        assert clone != path
        assert path.num_records == 5
        assert path.bounding_box().extent == (0, 0, 10, 10)
        assert not clone.use_non_zero_winding

    def test_swap(self):
        """swap_with exchanges records, bounds and winding rule."""
        first = VecPath()
        first.add_rectangle(0, 0, 10, 10)
        second = VecPath()
        second.add_ellipse(0, 0, 5, 5)
        second.set_using_non_zero_winding(False)

        first_copy, second_copy = first.copy(), second.copy()
        first.swap_with(second)

        assert first == second_copy
        assert second == first_copy
        assert first.bounding_box().extent == (0, 0, 5, 5)
        assert not first.use_non_zero_winding

    def test_equality_includes_winding(self):
        """Paths with different winding rules are not equal."""
        first = VecPath()
        first.add_rectangle(0, 0, 10, 10)
        second = first.copy()
        second.set_using_non_zero_winding(False)
        assert first != second

    def test_apply_transform_recomputes_bounds(self):
        """The box after a transform equals the box of the transformed points."""
        path = VecPath()
        path.add_star(0, 0, 6, 4, 10)
        path.add_rounded_rectangle(20, 20, 30, 10, 3)
        path.apply_transform(VecAffine.rotation(0.7, 5, 5).scaled(1.5, 0.25))

        points = path.points
        assert path.bounding_box().extent == (
            float(points[:, 0].min()),
            float(points[:, 1].min()),
            float(points[:, 0].max()),
            float(points[:, 1].max()),
        )

    def test_apply_transform_matches_add_path(self):
        """Transforming in place and adding transformed give the same path."""
        source = VecPath()
        source.add_ellipse(0, 0, 30, 20)
        trafo = VecAffine.translation(3, 4).scaled(2)

        added = VecPath()
        added.add_path(source, trafo)
        source.apply_transform(trafo)

        assert added == source
        assert added.bounding_box() == source.bounding_box()

    @pytest.mark.parametrize(
        "trafo",
        [VecAffine.scale(1e20), VecAffine.translation(math.nan, 0), VecAffine(math.inf, 0, 0, 1, 0, 0)],
    )
    def test_apply_transform_rejects_non_finite_result(self, trafo):
        """A transform leaving the single precision range raises and keeps the path unchanged."""
        path = VecPath()
        path.add_rectangle(0, 0, 1e30, 1e30)
        before = path.copy()

        with pytest.raises(ValueError, match="finite"):
            path.apply_transform(trafo)

        assert path == before
        assert path.bounding_box() == before.bounding_box()
        assert VecPath.from_bytes(path.to_bytes()) == path


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
