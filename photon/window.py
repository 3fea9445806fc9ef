"""Window and frame loop."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from photon.renderer import present, render_scene  # noqa: E402

__all__ = [
    "DEFAULT_WINDOW_WIDTH",
    "DEFAULT_WINDOW_HEIGHT",
    "MIN_WINDOW_SIZE",
    "MAX_FPS",
    "MS_PER_FRAME",
    "frame_delay",
    "main",
]

DEFAULT_WINDOW_WIDTH = 500
DEFAULT_WINDOW_HEIGHT = 500
MIN_WINDOW_SIZE = 200
MAX_FPS = 50
MS_PER_FRAME = 1000 // MAX_FPS


def frame_delay(elapsed_ms: int) -> int:
    """Milliseconds to wait so a frame lasts at least MS_PER_FRAME."""
    if elapsed_ms < MS_PER_FRAME:
        return MS_PER_FRAME - elapsed_ms
    return 0


def _open_window(width: int, height: int) -> pygame.Surface:
    return pygame.display.set_mode(
        (max(width, MIN_WINDOW_SIZE), max(height, MIN_WINDOW_SIZE)),
        pygame.RESIZABLE,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and draw until it is closed."""
    parser = argparse.ArgumentParser(prog="photon", description="Wireframe renderer.")
    parser.parse_args(argv)

    try:
        pygame.init()
        pygame.display.set_caption("Photon")
        screen = _open_window(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)
    except pygame.error:
        print("Failed")
        pygame.quit()
        return 1

    width, height = screen.get_size()
    time_log = 0
    try:
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.VIDEORESIZE:
                    screen = _open_window(event.w, event.h)
                    width, height = screen.get_size()

            present(render_scene(width, height), screen)
            pygame.display.flip()

            delay = frame_delay(pygame.time.get_ticks() - time_log)
            if delay:
                pygame.time.delay(delay)
            time_log = pygame.time.get_ticks()
    finally:
        pygame.quit()