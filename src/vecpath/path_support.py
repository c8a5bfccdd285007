"""Supporting definitions for VecPath.

This module contains command metadata and the segment cursor that exposes
the records of a path one at a time to renderers and flatteners without
depending on the internal storage layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Dict, Iterator

from vecpath.common import VecPathCmds

if TYPE_CHECKING:
    from vecpath.path_store import VecSegmentStore  # pylint: disable=unused-import

###############################################################################
# PathCommandInfo
###############################################################################


@dataclass(frozen=True)
class PathCommandInfo:
    """Metadata for path records.

    Attributes:
        consumes_points: Number of (x, y) points the record stores
        is_curve: Whether this record represents a curve
        is_drawing: Whether this record draws (vs. move)
    """

    consumes_points: int
    is_curve: bool
    is_drawing: bool = True

    @property
    def consumes_coords(self) -> int:
        """Number of float coordinates the record stores."""
        return 2 * self.consumes_points


# Command registry with metadata
COMMAND_INFO: Dict[VecPathCmds, PathCommandInfo] = {
    "M": PathCommandInfo(1, False, False),  # MoveTo - not drawing
    "L": PathCommandInfo(1, False, True),  # LineTo - drawing
    "Q": PathCommandInfo(2, True, True),  # Quadratic - curve, drawing
    "C": PathCommandInfo(3, True, True),  # Cubic - curve, drawing
    "Z": PathCommandInfo(0, False, True),  # ClosePath - drawing, no points
}


###############################################################################
# VecPathElement
###############################################################################


class VecPathElementType(Enum):
    """Discriminant of a record delivered by VecPathIterator."""

    START_NEW_SUB_PATH = auto()
    LINE_TO = auto()
    QUADRATIC_TO = auto()
    CUBIC_TO = auto()
    CLOSE_PATH = auto()


_ELEMENT_TYPES: Dict[VecPathCmds, VecPathElementType] = {
    "M": VecPathElementType.START_NEW_SUB_PATH,
    "L": VecPathElementType.LINE_TO,
    "Q": VecPathElementType.QUADRATIC_TO,
    "C": VecPathElementType.CUBIC_TO,
    "Z": VecPathElementType.CLOSE_PATH,
}


@dataclass(frozen=True)
class VecPathElement:
    """One record of a path.

    The coordinates are filled in the order they are stored:
    MoveTo/LineTo use (x1, y1), QuadraticTo uses (x1, y1) as control point and
    (x2, y2) as end point, CubicTo uses all six values. Unused values are 0.
    """

    element_type: VecPathElementType
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 0.0
    x3: float = 0.0
    y3: float = 0.0

    @property
    def command(self) -> VecPathCmds:
        """The one-letter command of this element."""
        for cmd, element_type in _ELEMENT_TYPES.items():
            if element_type is self.element_type:
                return cmd
        raise ValueError(f"Unknown element type {self.element_type}")


###############################################################################
# VecPathIterator
###############################################################################


class VecPathIterator:
    """Forward-only cursor over the records of a path.

    The cursor keeps nothing but its position; it must not be used while the
    path it reads from is being modified.
    """

    def __init__(self, store: VecSegmentStore):
        self._commands = store._commands  # pylint: disable=protected-access
        self._coords = store.coordinates
        self._record_index = 0
        self._coord_index = 0

    def __iter__(self) -> Iterator[VecPathElement]:
        return self

    def __next__(self) -> VecPathElement:
        if self._record_index >= len(self._commands):
            raise StopIteration

        cmd = self._commands[self._record_index]
        num_coords = COMMAND_INFO[cmd].consumes_coords
        values = [float(v) for v in self._coords[self._coord_index : self._coord_index + num_coords]]

        self._record_index += 1
        self._coord_index += num_coords

        return VecPathElement(_ELEMENT_TYPES[cmd], *values)
