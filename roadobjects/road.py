"""Road centerline collaborator: the (s, t, h) -> (x, y, z) mapping.

Placement only needs something that looks like :class:`RoadCurve`.
:class:`Road` is a concrete polyline centerline built on shapely, used by
the CLI and the tests.
"""

import math
import logging
from typing import Optional, Protocol, Sequence

import numpy as np
from shapely.geometry import LineString, Point

logger = logging.getLogger(__name__)


class RoadCurve(Protocol):
    """Interface consumed by road-object placement."""

    length: float

    def evaluate(self, s: float, t: float, h: float) -> list[float]:
        ...


class Road:
    """Planar polyline centerline with an optional elevation profile.

    Stations ``s`` are arc length along the centerline.  Lateral offset
    ``t`` is positive to the left of the driving direction, ``h`` is
    added on top of the elevation at ``s``.
    """

    def __init__(self, centerline: LineString,
                 elevation: Optional[Sequence[Sequence[float]]] = None,
                 road_id: str = ""):
        self.id = road_id
        self.centerline = centerline
        self.length = float(centerline.length)

        coords = np.asarray(centerline.coords, dtype=float)[:, :2]
        seg = np.diff(coords, axis=0)
        seg_len = np.hypot(seg[:, 0], seg[:, 1])
        keep = seg_len > 1e-12
        self._seg_dir = seg[keep] / seg_len[keep, None]
        # Station at the end of each non-degenerate segment
        self._seg_end = np.cumsum(seg_len[keep])

        if elevation is not None and len(elevation) > 0:
            prof = np.asarray(elevation, dtype=float).reshape(-1, 2)
            prof = prof[np.argsort(prof[:, 0])]
            self._elev_s, self._elev_z = prof[:, 0], prof[:, 1]
        else:
            self._elev_s, self._elev_z = np.array([0.0]), np.array([0.0])

    @classmethod
    def from_points(cls, points, elevation=None, road_id: str = "") -> "Road":
        """Build a road from ``[(x, y), ...]`` centerline points."""
        pts = [tuple(map(float, p[:2])) for p in points]
        distinct = {p for p in pts}
        if len(distinct) < 2:
            raise ValueError("Road centerline needs at least two distinct points")
        return cls(LineString(pts), elevation=elevation, road_id=road_id)

    @classmethod
    def straight(cls, length: float, x0: float = 0.0, y0: float = 0.0,
                 hdg: float = 0.0, elevation=None, road_id: str = "") -> "Road":
        """Straight road starting at (x0, y0) heading *hdg* radians."""
        x1 = x0 + length * math.cos(hdg)
        y1 = y0 + length * math.sin(hdg)
        return cls.from_points([(x0, y0), (x1, y1)], elevation=elevation,
                               road_id=road_id)

    def elevation(self, s: float) -> float:
        return float(np.interp(s, self._elev_s, self._elev_z))

    def direction(self, s: float) -> np.ndarray:
        """Unit tangent of the segment containing station *s*."""
        i = int(np.searchsorted(self._seg_end, s, side='left'))
        i = min(max(i, 0), len(self._seg_dir) - 1)
        return self._seg_dir[i]

    def evaluate(self, s: float, t: float, h: float) -> list[float]:
        s = min(max(s, 0.0), self.length)
        p: Point = self.centerline.interpolate(s)
        dx, dy = self.direction(s)
        # Left-hand normal of (dx, dy)
        return [p.x - t * dy, p.y + t * dx, self.elevation(s) + h]

    def __repr__(self):
        return f"Road(id={self.id!r}, length={self.length:.3f})"
