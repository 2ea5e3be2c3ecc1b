"""Tests for the polyline road centerline."""

import math

import numpy as np
import pytest

from roadobjects.road import Road


def test_straight_length(straight_road):
    assert straight_road.length == pytest.approx(100.0)


def test_straight_is_identity(straight_road):
    assert straight_road.evaluate(12.5, -3.0, 1.5) == pytest.approx([12.5, -3.0, 1.5])


def test_heading_and_origin():
    road = Road.straight(10.0, x0=5.0, y0=5.0, hdg=math.pi / 2)
    # Heading north: left of the road is -x
    assert road.evaluate(4.0, 1.0, 0.0) == pytest.approx([4.0, 9.0, 0.0])


def test_station_clamped(straight_road):
    assert straight_road.evaluate(-5.0, 0.0, 0.0) == pytest.approx([0.0, 0.0, 0.0])
    assert straight_road.evaluate(150.0, 0.0, 0.0) == pytest.approx([100.0, 0.0, 0.0])


class TestPolyline:

    @pytest.fixture
    def corner_road(self):
        # 10 m east, then 10 m north
        return Road.from_points([(0, 0), (10, 0), (10, 10)])

    def test_length(self, corner_road):
        assert corner_road.length == pytest.approx(20.0)

    def test_first_leg(self, corner_road):
        assert corner_road.evaluate(5.0, 2.0, 0.0) == pytest.approx([5.0, 2.0, 0.0])

    def test_second_leg(self, corner_road):
        assert corner_road.evaluate(15.0, 2.0, 0.0) == pytest.approx([8.0, 5.0, 0.0])

    def test_duplicate_points_ignored(self):
        road = Road.from_points([(0, 0), (0, 0), (10, 0)])
        assert road.evaluate(5.0, 1.0, 0.0) == pytest.approx([5.0, 1.0, 0.0])


class TestElevation:

    def test_flat_by_default(self, straight_road):
        assert straight_road.elevation(42.0) == 0.0

    def test_interpolated(self):
        road = Road.straight(100.0, elevation=[(0, 0.0), (100, 10.0)])
        assert road.elevation(25.0) == pytest.approx(2.5)
        assert road.evaluate(50.0, 0.0, 1.0) == pytest.approx([50.0, 0.0, 6.0])

    def test_constant_outside_profile(self):
        road = Road.straight(100.0, elevation=[(20, 1.0), (40, 3.0)])
        assert road.elevation(0.0) == pytest.approx(1.0)
        assert road.elevation(90.0) == pytest.approx(3.0)


def test_needs_two_distinct_points():
    with pytest.raises(ValueError):
        Road.from_points([(1, 1), (1, 1)])
    with pytest.raises(ValueError):
        Road.from_points([(1, 1)])


def test_elevation_from_array():
    profile = np.array([[100.0, 10.0], [0.0, 0.0]])
    road = Road.straight(100.0, elevation=profile)
    assert road.elevation(50.0) == pytest.approx(5.0)


def test_empty_elevation_array_is_flat():
    road = Road.straight(100.0, elevation=np.empty((0, 2)))
    assert road.elevation(50.0) == 0.0
