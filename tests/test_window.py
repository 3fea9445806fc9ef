from unittest import mock

import pygame
import pytest

from photon import window


def test_frame_delay_full_frame_when_no_time_elapsed():
    assert window.frame_delay(0) == window.MS_PER_FRAME


def test_frame_delay_fills_remaining_time():
    assert window.frame_delay(5) + 5 == window.MS_PER_FRAME


@pytest.mark.parametrize("elapsed", [window.MS_PER_FRAME, window.MS_PER_FRAME + 1, 1000])
def test_frame_delay_zero_when_frame_overran(elapsed):
    assert window.frame_delay(elapsed) == 0


def test_frame_delay_full_frame_is_twenty_ms_at_fifty_fps():
    assert window.frame_delay(0) == 20
    assert window.frame_delay(19) == 1


def test_main_quits_on_close(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    quit_event = pygame.event.Event(pygame.QUIT)
    with mock.patch("pygame.event.get", return_value=[quit_event]):
        assert window.main([]) == 0


def test_main_handles_resize_then_quit(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    batches = [
        [pygame.event.Event(pygame.VIDEORESIZE, w=300, h=250, size=(300, 250))],
        [pygame.event.Event(pygame.QUIT)],
    ]
    with mock.patch("pygame.event.get", side_effect=batches) as get:
        assert window.main([]) == 0
    assert get.call_count == 2


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        window.main(["--bogus"])
    assert info.value.code == 2