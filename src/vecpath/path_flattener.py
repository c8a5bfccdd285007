"""Flattening of paths into straight edges for hit-testing and intersection."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, NamedTuple, Optional

import numpy as np

from vecpath.bezier import BezierCurve
from vecpath.common import DEFAULT_FLATTENING_TOLERANCE
from vecpath.geom import VecAffine, VecLine
from vecpath.path_support import VecPathElementType, VecPathIterator

if TYPE_CHECKING:
    from vecpath.path_store import VecSegmentStore  # pylint: disable=unused-import


###############################################################################
# VecEdge
###############################################################################
class VecEdge(NamedTuple):
    """A straight edge (x1, y1) -> (x2, y2) produced by VecPathFlattener."""

    x1: float
    y1: float
    x2: float
    y2: float

    def to_line(self) -> VecLine:
        """This edge as VecLine."""
        return VecLine(self.x1, self.y1, self.x2, self.y2)


###############################################################################
# VecPathFlattener
###############################################################################
class VecPathFlattener:
    """
    Restartable sequence of straight edges approximating a path.

    Every point is transformed first and the curves are flattened afterwards,
    so _tolerance_ applies in the transformed coordinate system.
    Each subpath ends with an edge back to its start point, whether or not
    it was closed explicitly, as a filled shape is always closed.
    Zero-length edges are skipped.

    Iterating twice yields the same edges as long as the path is unchanged.
    """

    def __init__(
        self,
        path: VecSegmentStore,
        transform: Optional[VecAffine] = None,
        tolerance: float = DEFAULT_FLATTENING_TOLERANCE,
    ):
        self._path = path
        self._transform = transform if transform is not None and not transform.is_identity else None
        self._tolerance = tolerance

    @property
    def tolerance(self) -> float:
        """The maximum distance between a curve and its edges."""
        return self._tolerance

    def _map(self, x: float, y: float):
        if self._transform is None:
            return (x, y)
        return self._transform.transform_point(x, y)

    def __iter__(self) -> Iterator[VecEdge]:
        # pylint: disable=too-many-branches
        start_x = start_y = 0.0
        last_x = last_y = 0.0
        has_sub_path = False

        for element in VecPathIterator(self._path):
            element_type = element.element_type

            if element_type is VecPathElementType.START_NEW_SUB_PATH:
                if has_sub_path and (last_x, last_y) != (start_x, start_y):
                    yield VecEdge(last_x, last_y, start_x, start_y)
                start_x, start_y = self._map(element.x1, element.y1)
                last_x, last_y = start_x, start_y
                has_sub_path = True

            elif element_type is VecPathElementType.LINE_TO:
                x, y = self._map(element.x1, element.y1)
                if (x, y) != (last_x, last_y):
                    yield VecEdge(last_x, last_y, x, y)
                last_x, last_y = x, y

            elif element_type in (VecPathElementType.QUADRATIC_TO, VecPathElementType.CUBIC_TO):
                if element_type is VecPathElementType.QUADRATIC_TO:
                    control_points = np.array(
                        [
                            (last_x, last_y),
                            self._map(element.x1, element.y1),
                            self._map(element.x2, element.y2),
                        ],
                        dtype=np.float64,
                    )
                    polyline = BezierCurve.flatten_quadratic_curve(control_points, self._tolerance)
                else:
                    control_points = np.array(
                        [
                            (last_x, last_y),
                            self._map(element.x1, element.y1),
                            self._map(element.x2, element.y2),
                            self._map(element.x3, element.y3),
                        ],
                        dtype=np.float64,
                    )
                    polyline = BezierCurve.flatten_cubic_curve(control_points, self._tolerance)

                # The first row is the current point itself
                for x, y in polyline[1:].tolist():
                    if (x, y) != (last_x, last_y):
                        yield VecEdge(last_x, last_y, x, y)
                    last_x, last_y = x, y

            elif element_type is VecPathElementType.CLOSE_PATH:
                if (last_x, last_y) != (start_x, start_y):
                    yield VecEdge(last_x, last_y, start_x, start_y)
                last_x, last_y = start_x, start_y

        if has_sub_path and (last_x, last_y) != (start_x, start_y):
            yield VecEdge(last_x, last_y, start_x, start_y)
