import pytest

from roadobjects.road import Road


@pytest.fixture
def straight_road():
    """100 m road along +X, so evaluate(s, t, h) == (s, t, h)."""
    return Road.straight(100.0, road_id="r1")


@pytest.fixture
def short_road():
    return Road.straight(50.0, road_id="r2")
