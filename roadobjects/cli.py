"""Click CLI commands for previewing road objects."""

import json
import logging
import pathlib

import click

from .constants import DEFAULT_TOLERANCE
from .export import write_mesh
from .geometry import get_box, get_cylinder
from .mesh import Mesh3D
from .models import RoadObject
from .placement import compute_mesh
from .road import Road

logger = logging.getLogger(__name__)


@click.group()
def cli():
    """Tessellate road-side objects (poles, signs, barriers) into meshes."""
    pass


@cli.command()
@click.option('--radius', '-r', type=float, required=True, help='Cylinder radius')
@click.option('--height', '-h', 'height', type=float, required=True, help='Cylinder height')
@click.option('--tolerance', '-t', type=click.FloatRange(min=0, min_open=True),
              default=DEFAULT_TOLERANCE,
              show_default=True, help='Chordal tolerance')
@click.option('--output', '-o', default='cylinder.stl', help='Output mesh file path')
def cylinder(radius: float, height: float, tolerance: float, output: str):
    """Write a single capped cylinder primitive."""
    _write(get_cylinder(tolerance, radius, height), output)


@cli.command()
@click.option('--width', '-w', type=float, required=True, help='Lateral size')
@click.option('--length', '-l', type=float, required=True, help='Size along the road')
@click.option('--height', '-h', 'height', type=float, required=True, help='Box height')
@click.option('--output', '-o', default='box.stl', help='Output mesh file path')
def box(width: float, length: float, height: float, output: str):
    """Write a single box primitive."""
    _write(get_box(width, length, height), output)


@cli.command()
@click.argument('scene', type=click.Path(exists=True, dir_okay=False))
@click.option('--tolerance', '-t', type=click.FloatRange(min=0, min_open=True),
              default=DEFAULT_TOLERANCE,
              show_default=True, help='Chordal tolerance')
@click.option('--output', '-o', default='objects.glb', help='Output mesh file path')
def place(scene: str, tolerance: float, output: str):
    """Place the objects of a SCENE json file on its road.

    The file holds ``{"road": {"points": [...], "elevation": [...]},
    "objects": [...]}``.
    """
    try:
        data = json.loads(pathlib.Path(scene).read_text())
        road_data = data['road']
        road = Road.from_points(road_data['points'],
                                elevation=road_data.get('elevation'),
                                road_id=str(road_data.get('id', '')))
        objects = [RoadObject.from_dict(o, road=road) for o in data.get('objects', [])]
    except (KeyError, ValueError, TypeError) as e:
        logger.error(f"Invalid scene file {scene}: {e}")
        raise click.ClickException(f"Invalid scene file: {e}")

    mesh = Mesh3D()
    for obj in objects:
        mesh.add_mesh(compute_mesh(obj, tolerance))
    logger.info(f"Placed {len(objects)} objects on {road}")
    _write(mesh, output)


def _write(mesh: Mesh3D, output: str):
    try:
        path = write_mesh(mesh, output)
    except Exception as e:
        logger.error(f"Error writing mesh: {e}")
        raise click.ClickException(str(e))
    click.echo(f"{path}: {len(mesh.vertices)} vertices, "
               f"{len(mesh.indices) // 3} triangles")


if __name__ == '__main__':
    cli()
