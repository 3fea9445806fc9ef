"""Two- and three-dimensional points."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Vertex2", "Vertex3"]


@dataclass(frozen=True)
class Vertex2:
    """A point in screen space."""

    x: float
    y: float


@dataclass(frozen=True)
class Vertex3:
    """A point in world space; ``y`` is the vertical axis."""

    x: float
    y: float
    z: float