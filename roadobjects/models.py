"""Road object and repeat records."""

import math
import weakref
from dataclasses import InitVar, dataclass, field, fields
from typing import Any, Optional

from .constants import DEFAULT_REPEAT_DISTANCE


class DanglingRoadError(RuntimeError):
    """The road a road object was attached to no longer exists."""


def _optional(value) -> Optional[float]:
    # NaN is how upstream formats mark "unset"
    if value is None:
        return None
    value = float(value)
    return None if math.isnan(value) else value


def _known_kwargs(cls, data: dict) -> dict:
    names = {f.name for f in fields(cls) if f.init}
    unknown = set(data) - names
    if unknown:
        raise ValueError(f"Unknown {cls.__name__} field(s): {', '.join(sorted(unknown))}")
    return dict(data)


@dataclass
class RoadObjectRepeat:
    """Repeat rule: instantiate an object every *distance* along a span.

    Each start/end pair interpolates linearly across the span when both
    ends are set; otherwise the object's base value is used throughout.
    Unset ``s0`` and ``length`` (or a non-positive ``length``) fall back to
    the object's own station and length.
    """
    s0: Optional[float] = None
    length: Optional[float] = None
    distance: float = DEFAULT_REPEAT_DISTANCE
    t_start: Optional[float] = None
    t_end: Optional[float] = None
    z_offset_start: Optional[float] = None
    z_offset_end: Optional[float] = None
    height_start: Optional[float] = None
    height_end: Optional[float] = None
    width_start: Optional[float] = None
    width_end: Optional[float] = None

    def __post_init__(self):
        for f in fields(self):
            if f.name != 'distance':
                setattr(self, f.name, _optional(getattr(self, f.name)))
        self.distance = float(self.distance)

    @classmethod
    def from_dict(cls, data: dict) -> "RoadObjectRepeat":
        return cls(**_known_kwargs(cls, data))


# Stand-in for an empty repeat list: an infinite step leaves only the
# first sample, i.e. one placement at the object's own s0
DEFAULT_REPEAT = RoadObjectRepeat(distance=math.inf)


@dataclass(eq=False)
class RoadObject:
    """Furniture placed on a road in (s, t, h) coordinates.

    The road is held through a weak reference, so the object never keeps
    it alive; resolve it with :meth:`get_road` on every use.
    """
    s0: float = 0.0
    t0: float = 0.0
    z0: float = 0.0
    roll: float = 0.0
    pitch: float = 0.0
    hdg: float = 0.0
    length: float = 0.0
    width: float = 0.0
    height: float = 0.0
    radius: float = 0.0
    repeats: list = field(default_factory=list)
    id: str = ""
    name: str = ""
    type: str = ""
    road: InitVar[Any] = None
    _road_ref: Optional[weakref.ref] = field(default=None, init=False, repr=False)

    def __post_init__(self, road):
        if road is not None:
            self.attach(road)

    def attach(self, road) -> None:
        """Point this object at *road* without taking ownership of it."""
        self._road_ref = weakref.ref(road)

    def get_road(self):
        road = self._road_ref() if self._road_ref is not None else None
        if road is None:
            raise DanglingRoadError(
                f"could not access parent road for road object {self.id!r}")
        return road

    @classmethod
    def from_dict(cls, data: dict, road=None) -> "RoadObject":
        data = _known_kwargs(cls, data)
        data['repeats'] = [RoadObjectRepeat.from_dict(r)
                           for r in data.get('repeats', [])]
        return cls(road=road, **data)
