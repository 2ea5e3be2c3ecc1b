"""Local-frame primitive meshes (cylinder, box) and the orientation matrix.

Primitives stand on the origin in road-relative axes: X along the road
(station), Y lateral, Z up.  Placement onto the road happens later in
:mod:`roadobjects.placement`.
"""

import math
import logging

import numpy as np
from scipy.spatial.transform import Rotation

from .constants import CYLINDER_FALLBACK_ANGLE
from .mesh import Mesh3D

logger = logging.getLogger(__name__)


# ── Orientation ─────────────────────────────────────────────────────────

def euler_to_matrix(roll: float, pitch: float, hdg: float) -> np.ndarray:
    """Rotation matrix Rz(hdg) @ Ry(pitch) @ Rx(roll)."""
    return Rotation.from_euler('xyz', [roll, pitch, hdg]).as_matrix()


# ── Cylinder ────────────────────────────────────────────────────────────

def cylinder_angle_step(tolerance: float, radius: float) -> float:
    """Largest angular step whose chord stays within *tolerance* of the circle.

    *tolerance* is used as given; :func:`get_cylinder` halves it first.
    Radii at or below the tolerance fall back to a fixed 30 degree step,
    where the arc-cosine argument would leave [-1, 1].
    """
    if not tolerance > 0:
        raise ValueError(f"Chordal tolerance must be positive, got {tolerance}")
    if radius <= tolerance:
        return CYLINDER_FALLBACK_ANGLE
    r2 = radius * radius
    return math.acos((r2 - 4.0 * radius * tolerance + 2.0 * tolerance * tolerance) / r2)


def _cylinder_angles(step: float) -> list[float]:
    # Sample [0, 2pi) by index to avoid drift, then close the loop at 2pi.
    n = max(1, math.ceil(2.0 * math.pi / step - 1e-9))
    angles = [i * step for i in range(n)]
    angles.append(2.0 * math.pi)
    return angles


def get_cylinder(tolerance: float, radius: float, height: float) -> Mesh3D:
    """Create a capped cylinder with its bottom cap centred on the origin.

    Vertex 0 is the bottom pole, vertex 1 the top pole; every sampled
    angle then adds a (bottom, top) rim pair.  Each sector adds one cap
    triangle per end and two wall triangles.  Raises ``ValueError`` for a
    non-positive *tolerance*.
    """
    if not tolerance > 0:
        raise ValueError(f"Cylinder tolerance must be positive, got {tolerance}")

    mesh = Mesh3D()
    mesh.vertices.append([0.0, 0.0, 0.0])
    mesh.vertices.append([0.0, 0.0, height])

    # Cylinders show faceting more than other shapes
    tolerance = 0.5 * tolerance
    step = cylinder_angle_step(tolerance, radius)

    for alpha in _cylinder_angles(step):
        x = radius * math.cos(alpha)
        y = radius * math.sin(alpha)
        mesh.vertices.append([x, y, 0.0])
        mesh.vertices.append([x, y, height])

        if len(mesh.vertices) > 5:
            cur = len(mesh.vertices) - 1
            # Caps: bottom fan on pole 0, top fan on pole 1
            mesh.indices.extend([0, cur - 1, cur - 3, 1, cur - 2, cur])
            # Wall quad between previous and current rim pair
            mesh.indices.extend([cur, cur - 2, cur - 3, cur, cur - 3, cur - 1])

    logger.debug(f"Cylinder r={radius:.3f} h={height:.3f}: "
                 f"step={math.degrees(step):.2f} deg, "
                 f"{len(mesh.vertices)} vertices")
    return mesh


# ── Box ─────────────────────────────────────────────────────────────────

# Bottom ring 0-3 then top ring 4-7, counter-clockwise seen from above
_BOX_FACES = [
    0, 3, 1, 3, 2, 1,   # bottom
    4, 5, 7, 7, 5, 6,   # top
    7, 6, 3, 3, 6, 2,   # -Y side
    5, 4, 1, 1, 4, 0,   # +Y side
    0, 4, 7, 7, 3, 0,   # +X end
    1, 6, 5, 1, 2, 6,   # -X end
]


def get_box(width: float, length: float, height: float) -> Mesh3D:
    """Create a box of *length* along X and *width* along Y, z in [0, height]."""
    hl = length / 2.0
    hw = width / 2.0
    vertices = [
        [hl, hw, 0.0],
        [-hl, hw, 0.0],
        [-hl, -hw, 0.0],
        [hl, -hw, 0.0],
        [hl, hw, height],
        [-hl, hw, height],
        [-hl, -hw, height],
        [hl, -hw, height],
    ]
    return Mesh3D(vertices, _BOX_FACES)


# Public names used by scene-assembly callers
generate_cylinder = get_cylinder
generate_box = get_box
