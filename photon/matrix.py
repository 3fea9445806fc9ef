"""Projection matrix and camera description."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from photon.vertex import Vertex3

__all__ = ["PI", "Matrix4x4", "Camera", "perspective_matrix"]

PI = 3.1415927


def _zeros() -> list[float]:
    return [0.0] * 16


@dataclass
class Matrix4x4:
    """A 4x4 matrix stored row-major as 16 floats."""

    mat: list[float] = field(default_factory=_zeros)

    def __post_init__(self) -> None:
        if len(self.mat) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 entries, got {len(self.mat)}")
        self.mat = [float(v) for v in self.mat]

    def __getitem__(self, index: int) -> float:
        return self.mat[index]

    def __setitem__(self, index: int, value: float) -> None:
        self.mat[index] = float(value)


@dataclass
class Camera:
    """Viewer position and lens; angles are in radians, fov in degrees."""

    position: Vertex3 = field(default_factory=lambda: Vertex3(0.0, 0.0, 0.0))
    pitch: float = 0.0
    yaw: float = 0.0
    fov: float = 90.0
    z_near_plane: float = 0.1
    z_far_plane: float = 1000.0


def perspective_matrix(
    width: int,
    height: int,
    fov: float = 90.0,
    near: float = 0.1,
    far: float = 1000.0,
) -> Matrix4x4:
    """Build the projection matrix for a viewport of the given size."""
    if width <= 0 or height <= 0:
        raise ValueError("viewport dimensions must be positive")
    if far == near:
        raise ValueError("near and far planes must differ")
    aspect_ratio = height / width
    fov_factor = 1.0 / math.tan((fov * PI) / 360.0)
    scale_factor = far / (far - near)

    matrix = Matrix4x4()
    matrix[0] = aspect_ratio * fov_factor
    matrix[5] = fov_factor
    matrix[10] = scale_factor
    matrix[11] = -near * scale_factor
    matrix[14] = 1.0
    return matrix