"""Road-object placement: expand repeats, build primitives, map to world.

For every repeat span the object is sampled every ``distance`` metres
from ``s_start`` to ``s_end`` inclusive.  Each sample gets its own
primitive, sized by the interpolated height/width, which is rotated by
the object's orientation, shifted to ``(s, t, z)`` and pushed through
the road's ``evaluate``.  Instance meshes are appended in span order,
then sample order.
"""

import logging
from typing import Optional

import numpy as np

from .geometry import euler_to_matrix, get_box, get_cylinder
from .mesh import Mesh3D
from .models import DEFAULT_REPEAT, RoadObject, RoadObjectRepeat

logger = logging.getLogger(__name__)


def _lerp_or_base(start: Optional[float], end: Optional[float],
                  progress: float, base: float) -> float:
    """Interpolate between *start* and *end*, or fall back to *base*."""
    if start is None or end is None:
        return base
    return start + progress * (end - start)


def _span_bounds(obj: RoadObject, repeat: RoadObjectRepeat,
                 road_length: float) -> tuple[float, float]:
    s_start = obj.s0 if repeat.s0 is None else repeat.s0
    if repeat.length is not None and repeat.length > 0:
        obj_len = repeat.length
    else:
        obj_len = obj.length
    # Clamp to the road so the progress denominator stays sane
    return s_start, s_start + min(obj_len, road_length)


def _sample_stations(s_start: float, s_end: float, distance: float):
    i = 0
    s = s_start
    while s <= s_end:
        yield s
        i += 1
        s = s_start + i * distance


def instance_mesh(obj: RoadObject, tolerance: float,
                  height: float, width: float) -> Mesh3D:
    """Local-frame primitive for one sample; empty if nothing fits."""
    if obj.radius > 0:
        return get_cylinder(tolerance, obj.radius, height)
    if width > 0 and obj.length > 0:
        return get_box(width, obj.length, height)
    return Mesh3D()


def transform_vertices(vertices, rot_mat: np.ndarray, offset, road) -> list[list[float]]:
    """Rotate, shift by ``(s, t, z)`` and map road-relative points to world."""
    if not vertices:
        return []
    pts = np.asarray(vertices, dtype=float) @ rot_mat.T + np.asarray(offset, dtype=float)
    pts[:, 0] = np.clip(pts[:, 0], 0.0, road.length)
    return [list(road.evaluate(float(s), float(t), float(h))) for s, t, h in pts]


def compute_mesh(obj: RoadObject, tolerance: float) -> Mesh3D:
    """Build the world-space mesh of *obj* with chordal *tolerance*.

    Raises :class:`~roadobjects.models.DanglingRoadError` if the road the
    object was attached to is gone.
    """
    road = obj.get_road()

    repeats = obj.repeats or [DEFAULT_REPEAT]
    rot_mat = euler_to_matrix(obj.roll, obj.pitch, obj.hdg)

    result = Mesh3D()
    for span_idx, repeat in enumerate(repeats):
        s_start, s_end = _span_bounds(obj, repeat, road.length)

        if repeat.distance <= 0:
            logger.warning(f"Road object {obj.id!r}: repeat {span_idx} has "
                           f"distance={repeat.distance}, skipping")
            continue

        n_instances = 0
        for s in _sample_stations(s_start, s_end, repeat.distance):
            progress = 1.0 if s_start == s_end else (s - s_start) / (s_end - s_start)
            t_s = _lerp_or_base(repeat.t_start, repeat.t_end, progress, obj.t0)
            z_s = _lerp_or_base(repeat.z_offset_start, repeat.z_offset_end,
                                progress, obj.z0)
            height_s = _lerp_or_base(repeat.height_start, repeat.height_end,
                                     progress, obj.height)
            width_s = _lerp_or_base(repeat.width_start, repeat.width_end,
                                    progress, obj.width)

            single = instance_mesh(obj, tolerance, height_s, width_s)
            single.vertices = transform_vertices(single.vertices, rot_mat,
                                                 (s, t_s, z_s), road)
            result.add_mesh(single)
            n_instances += 1

        logger.debug(f"Road object {obj.id!r}: repeat {span_idx} "
                     f"s=[{s_start:.3f}, {s_end:.3f}] -> {n_instances} instances")

    if result.is_empty:
        logger.warning(f"Road object {obj.id!r} produced no geometry")
    return result
