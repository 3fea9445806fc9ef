"""Pixel buffer and the basic drawing operations on it."""

from __future__ import annotations

from array import array
from typing import Protocol

from photon.matrix import Matrix4x4
from photon.triangle import Triangle
from photon.vertex import Vertex3

__all__ = [
    "Color",
    "WHITE",
    "pack_rgba",
    "Framebuffer",
    "perspective_transform",
]

Color = tuple[int, int, int, int]
WHITE: Color = (255, 255, 255, 255)


class _Point(Protocol):
    x: float
    y: float


def pack_rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack colour channels of 0..255 into one 32-bit RGBA value."""
    for channel in (r, g, b, a):
        if not 0 <= channel <= 255:
            raise ValueError(f"colour channel out of range: {channel}")
    return (r << 24) | (g << 16) | (b << 8) | a


class Framebuffer:
    """A width by height grid of packed RGBA pixels, row-major."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        self.width = width
        self.height = height
        self.pixels = array("I", [0]) * (width * height)

    def __getitem__(self, position: tuple[int, int]) -> int:
        x, y = position
        self._check(x, y)
        return self.pixels[y * self.width + x]

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")

    def set_pixel(self, x: int, y: int, color: Color) -> None:
        """Colour one pixel."""
        self._check(x, y)
        self.pixels[y * self.width + x] = pack_rgba(*color)

    def draw_line(self, start: _Point, end: _Point, color: Color) -> None:
        """Draw a line with Bresenham's algorithm, skipping off-screen pixels.

        Row 0 and column 0 are treated as off-screen.
        """
        packed = pack_rgba(*color)
        x, y = int(start.x), int(start.y)
        ex, ey = int(end.x), int(end.y)
        delta_x = abs(ex - x)
        delta_y = -abs(ey - y)
        sx = 1 if x < ex else -1
        sy = 1 if y < ey else -1
        error = delta_x + delta_y

        while True:
            if 0 < x < self.width and 0 < y < self.height:
                self.pixels[y * self.width + x] = packed
            error2 = 2 * error
            if error2 >= delta_y:
                if x == ex:
                    break
                error += delta_y
                x += sx
            if error2 < delta_x:
                if y == ey:
                    break
                error += delta_x
                y += sy

    def draw_triangle(self, triangle: Triangle, color: Color) -> None:
        """Draw the outline of a triangle."""
        self.draw_line(triangle.p1, triangle.p2, color)
        self.draw_line(triangle.p2, triangle.p3, color)
        self.draw_line(triangle.p3, triangle.p1, color)


def perspective_transform(
    vertex: Vertex3, matrix: Matrix4x4, width: int, height: int
) -> Vertex3:
    """Project a world-space vertex to screen coordinates.

    The returned z is the projected depth and is not used for drawing.
    """
    x = vertex.x * matrix[0]
    y = vertex.y * matrix[5]
    z = vertex.z * matrix[10] + matrix[11]
    w = vertex.z * matrix[14]

    if w != 0:
        x /= w
        y /= w
        z /= w

    x = (x + 1.0) * width / 2.0
    y = height - (y + 1.0) * height / 2.0
    return Vertex3(x, y, z)