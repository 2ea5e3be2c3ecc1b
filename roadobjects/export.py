"""Write meshes to disk through trimesh.

Usage:
    from roadobjects.export import write_mesh
    path = write_mesh(mesh, "output/guardrail.glb")
"""

import logging
import pathlib
import time

from .constants import EXPORT_FORMATS
from .mesh import Mesh3D

logger = logging.getLogger(__name__)


def write_mesh(mesh: Mesh3D, output_path) -> pathlib.Path:
    """Export *mesh* in the format given by the file extension."""
    path = pathlib.Path(output_path)
    fmt = path.suffix.lower().lstrip('.')
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unsupported export format {fmt!r} "
                         f"(expected one of {', '.join(EXPORT_FORMATS)})")
    if mesh.is_empty:
        raise ValueError("No geometry produced")

    t0 = time.time()
    tm = mesh.to_trimesh()
    path.parent.mkdir(parents=True, exist_ok=True)
    tm.export(str(path), file_type=fmt)
    logger.info(f"Wrote {path} ({len(tm.vertices)} vertices, "
                f"{len(tm.faces)} faces) in {time.time() - t0:.2f}s")
    return path
