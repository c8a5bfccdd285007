"""Flat record buffer with incremental bounding-box tracking."""

from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np
from numpy.typing import NDArray

from vecpath.common import VecPathCmds
from vecpath.geom import VecBox, VecPoint
from vecpath.path_support import COMMAND_INFO

###############################################################################
# VecSegmentStore
###############################################################################


class VecSegmentStore:
    """Append-only store of path records.

    A record is a one-letter command (see VecPathCmds) followed by a fixed
    number of coordinates (see COMMAND_INFO). Commands are kept in a list,
    the coordinates of all records in one flat float32 buffer that grows on
    demand. The first record of a non-empty store is always "M".

    The bounding box covers every stored coordinate, control points included.
    The first MoveTo seeds it, every later point only widens it.

    Attributes:
        _commands: One command per record
        _coords: Coordinate buffer, only the first _num_coords values are valid
        _num_coords: Number of valid coordinates in _coords
        _last_move_offset: Buffer offset of the most recent MoveTo point (-1 if none)
    """

    INITIAL_CAPACITY: int = 32  # pylint: disable=invalid-name

    def __init__(self):
        self._commands: List[VecPathCmds] = []
        self._coords: NDArray[np.float32] = np.empty(self.INITIAL_CAPACITY, dtype=np.float32)
        self._num_coords: int = 0
        self._last_move_offset: int = -1
        self._xmin: float = 0.0
        self._ymin: float = 0.0
        self._xmax: float = 0.0
        self._ymax: float = 0.0

    ###########################################################################
    # Read access
    ###########################################################################

    @property
    def num_records(self) -> int:
        """Number of stored records."""
        return len(self._commands)

    @property
    def commands(self) -> List[VecPathCmds]:
        """Copy of the record commands in storage order."""
        return list(self._commands)

    @property
    def coordinates(self) -> NDArray[np.float32]:
        """Read-only view of all stored coordinates (x0, y0, x1, y1, ...)."""
        view = self._coords[: self._num_coords]
        view.flags.writeable = False
        return view

    @property
    def points(self) -> NDArray[np.float32]:
        """Read-only view of all stored points, shape (n_points, 2)."""
        return self.coordinates.reshape(-1, 2)

    @property
    def is_empty(self) -> bool:
        """True if no record draws anything (a lone MoveTo still counts as empty)."""
        return not any(cmd in ("L", "Q", "C") for cmd in self._commands)

    def bounding_box(self) -> VecBox:
        """The box around every stored coordinate, (0, 0, 0, 0) for an empty store."""
        return VecBox(self._xmin, self._ymin, self._xmax, self._ymax)

    def current_position(self) -> VecPoint:
        """
        The last anchor point.

        After a ClosePath record this is the start point of the closed subpath.
        An empty store reports the origin.
        """
        if not self._commands:
            return VecPoint(0.0, 0.0)

        if self._commands[-1] == "Z":
            offset = self._last_move_offset
        else:
            offset = self._num_coords - 2

        return VecPoint(float(self._coords[offset]), float(self._coords[offset + 1]))

    ###########################################################################
    # Mutation
    ###########################################################################

    def clear(self) -> None:
        """Remove all records and reset the bounding box. The buffer is kept for reuse."""
        self._commands = []
        self._num_coords = 0
        self._last_move_offset = -1
        self._xmin = self._ymin = self._xmax = self._ymax = 0.0

    def _ensure_capacity(self, extra: int) -> None:
        needed = self._num_coords + extra
        capacity = self._coords.shape[0]
        if needed <= capacity:
            return

        new_coords = np.empty(max(needed, 2 * capacity), dtype=np.float32)
        new_coords[: self._num_coords] = self._coords[: self._num_coords]
        self._coords = new_coords

    def _append_record(self, cmd: VecPathCmds, *coords: float) -> None:
        """Append one record and widen the bounding box over its points.

        Raises:
            ValueError: If the number of coordinates does not fit the command
                or any coordinate is not finite in single precision.
        """
        self._append_records([cmd], coords)

    def _append_records(self, cmds: Sequence[VecPathCmds], coords: Sequence[float]) -> None:
        """Append a block of records whose coordinates are all known upfront.

        The bounding box is widened once over the whole block instead of
        point by point.

        Raises:
            ValueError: If the number of coordinates does not fit the commands
                or any coordinate is not finite in single precision.
        """
        expected = sum(COMMAND_INFO[cmd].consumes_coords for cmd in cmds)
        if len(coords) != expected:
            raise ValueError(f"Records {''.join(cmds)} need {expected} coordinates, got {len(coords)}")

        values = np.asarray(coords, dtype=np.float32)
        if not np.all(np.isfinite(values)):
            raise ValueError(f"Coordinates of records {''.join(cmds)} must be finite, got {tuple(coords)}")

        if values.size:
            xs = values[0::2]
            ys = values[1::2]
            if not self._commands:
                self._xmin = self._xmax = float(xs[0])
                self._ymin = self._ymax = float(ys[0])
            self._xmin = min(self._xmin, float(xs.min()))
            self._xmax = max(self._xmax, float(xs.max()))
            self._ymin = min(self._ymin, float(ys.min()))
            self._ymax = max(self._ymax, float(ys.max()))

        self._ensure_capacity(values.size)
        offset = self._num_coords
        for cmd in cmds:
            if cmd == "M":
                self._last_move_offset = offset
            offset += COMMAND_INFO[cmd].consumes_coords
        self._coords[self._num_coords : self._num_coords + values.size] = values
        self._num_coords += values.size
        self._commands.extend(cmds)

    def _set_point(self, offset: int, x: float, y: float) -> None:
        """Overwrite the point at buffer _offset_. The bounding box is not updated."""
        self._coords[offset] = x
        self._coords[offset + 1] = y

    def _replace_last_point(self, x: float, y: float) -> None:
        """Overwrite the last stored point. The bounding box is not updated."""
        self._set_point(self._num_coords - 2, x, y)

    def _recompute_bounds(self) -> None:
        """Rebuild the bounding box from all stored coordinates."""
        if self._num_coords == 0:
            self._xmin = self._ymin = self._xmax = self._ymax = 0.0
            return

        pts = self._coords[: self._num_coords]
        self._xmin = float(pts[0::2].min())
        self._xmax = float(pts[0::2].max())
        self._ymin = float(pts[1::2].min())
        self._ymax = float(pts[1::2].max())

    def _copy_from(self, other: VecSegmentStore) -> None:
        self._commands = list(other._commands)
        self._coords = other._coords[: max(other._num_coords, self.INITIAL_CAPACITY)].copy()
        self._num_coords = other._num_coords
        self._last_move_offset = other._last_move_offset
        self._xmin, self._ymin, self._xmax, self._ymax = other._xmin, other._ymin, other._xmax, other._ymax

    def _swap_with(self, other: VecSegmentStore) -> None:
        self._commands, other._commands = other._commands, self._commands
        self._coords, other._coords = other._coords, self._coords
        self._num_coords, other._num_coords = other._num_coords, self._num_coords
        self._last_move_offset, other._last_move_offset = other._last_move_offset, self._last_move_offset
        own_bounds: Tuple[float, float, float, float] = (self._xmin, self._ymin, self._xmax, self._ymax)
        self._xmin, self._ymin, self._xmax, self._ymax = other._xmin, other._ymin, other._xmax, other._ymax
        other._xmin, other._ymin, other._xmax, other._ymax = own_bounds
