"""Scene drawing and presentation onto a pygame surface."""

from __future__ import annotations

import os
import sys
from array import array

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from photon.matrix import perspective_matrix  # noqa: E402
from photon.primitives import WHITE, Framebuffer, perspective_transform  # noqa: E402
from photon.triangle import cube_vertices, triangles_from_cube  # noqa: E402
from photon.vertex import Vertex3  # noqa: E402

__all__ = ["CUBE_LOWER", "CUBE_UPPER", "render_scene", "present"]

CUBE_LOWER = Vertex3(-1.0, -0.5, 2.0)
CUBE_UPPER = Vertex3(0.0, 0.5, 3.0)


def render_scene(width: int, height: int) -> Framebuffer:
    """Draw the wireframe cube into a fresh framebuffer."""
    framebuffer = Framebuffer(width, height)
    matrix = perspective_matrix(width, height, 90.0, 0.1, 1000.0)
    projected = [
        perspective_transform(v, matrix, width, height)
        for v in cube_vertices(CUBE_LOWER, CUBE_UPPER)
    ]
    for tri in triangles_from_cube(projected):
        framebuffer.draw_triangle(tri, WHITE)
    return framebuffer


def present(framebuffer: Framebuffer, surface: pygame.Surface) -> None:
    """Copy a framebuffer onto a surface, stretching it to fit."""
    data = array("I", framebuffer.pixels)
    if sys.byteorder == "little":
        data.byteswap()
    image = pygame.image.frombuffer(
        data.tobytes(), (framebuffer.width, framebuffer.height), "RGBA"
    )
    if image.get_size() != surface.get_size():
        image = pygame.transform.scale(image, surface.get_size())
    surface.fill((0, 0, 0))
    surface.blit(image, (0, 0))