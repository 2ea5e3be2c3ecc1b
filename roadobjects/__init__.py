"""roadobjects — tessellation and placement of road-side objects.

Import constants FIRST so configuration and logging are set up before
any other module logs.
"""

from roadobjects import constants as _constants  # noqa: F401

from roadobjects.mesh import Mesh3D
from roadobjects.geometry import generate_box, generate_cylinder, get_box, get_cylinder
from roadobjects.models import DEFAULT_REPEAT, DanglingRoadError, RoadObject, RoadObjectRepeat
from roadobjects.placement import compute_mesh
from roadobjects.road import Road, RoadCurve
