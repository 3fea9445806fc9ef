import dataclasses

import pytest

from photon.vertex import Vertex2, Vertex3


def test_vertex2_holds_coordinates():
    v = Vertex2(1.5, -2.0)
    assert (v.x, v.y) == (1.5, -2.0)


def test_vertex3_holds_coordinates():
    v = Vertex3(1.0, 2.0, 3.0)
    assert (v.x, v.y, v.z) == (1.0, 2.0, 3.0)


def test_vertices_compare_by_value():
    assert Vertex3(0.0, 0.5, 3.0) == Vertex3(0.0, 0.5, 3.0)
    assert Vertex2(1.0, 1.0) != Vertex2(1.0, 2.0)


def test_vertices_are_immutable():
    v = Vertex2(0.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 1.0  # type: ignore[misc]
    assert (v.x, v.y) == (0.0, 0.0)


def test_vertices_are_hashable():
    points = {Vertex3(1.0, 2.0, 3.0), Vertex3(1.0, 2.0, 3.0)}
    assert len(points) == 1