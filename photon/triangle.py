"""Triangles and the cube mesh built from them."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from photon.vertex import Vertex2, Vertex3

__all__ = ["Triangle", "cube_vertices", "triangles_from_cube"]


@dataclass(frozen=True)
class Triangle:
    """A screen-space triangle."""

    p1: Vertex2
    p2: Vertex2
    p3: Vertex2

    def __iter__(self) -> Iterator[Vertex2]:
        yield self.p1
        yield self.p2
        yield self.p3


# Vertex indices of the two triangles on each cube face.
_CUBE_FACES = (
    (0, 1, 2), (2, 3, 0),
    (4, 5, 6), (6, 7, 4),
    (0, 1, 5), (5, 4, 0),
    (1, 2, 6), (6, 5, 1),
    (2, 3, 7), (7, 6, 2),
    (3, 0, 4), (4, 7, 3),
)


def cube_vertices(lower: Vertex3, upper: Vertex3) -> list[Vertex3]:
    """Return the eight corners of the box spanned by two opposite corners."""
    dx = upper.x - lower.x
    dz = upper.z - lower.z
    return [
        Vertex3(lower.x, lower.y, lower.z),
        Vertex3(lower.x, lower.y, lower.z + dz),
        Vertex3(lower.x + dx, lower.y, lower.z + dz),
        Vertex3(lower.x + dx, lower.y, lower.z),
        Vertex3(lower.x, upper.y, lower.z),
        Vertex3(lower.x, upper.y, lower.z + dz),
        Vertex3(upper.x, upper.y, upper.z),
        Vertex3(lower.x + dx, upper.y, lower.z),
    ]


def triangles_from_cube(cube: Sequence[Vertex3]) -> list[Triangle]:
    """Build the twelve triangles of a cube from its projected corners.

    Only the x and y coordinates of the corners are used.
    """
    if len(cube) != 8:
        raise ValueError(f"a cube has 8 corners, got {len(cube)}")
    flat = [Vertex2(v.x, v.y) for v in cube]
    return [Triangle(flat[a], flat[b], flat[c]) for a, b, c in _CUBE_FACES]