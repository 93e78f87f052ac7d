import pygame
import pytest

from pongo.window import Window, WindowError


@pytest.fixture
def dummy_video(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")


def test_get_instance_returns_same_object():
    first = Window.get_instance()
    second = Window.get_instance()
    assert second is first
    assert first.initialized is False
    assert first.surface is None
    assert first.should_close() is True


def test_unopened_window_should_close():
    window = Window()
    assert window.should_close() is True


def test_unopened_window_reports_no_keys():
    window = Window()
    assert window.is_key_pressed(pygame.K_w) is False


def test_set_should_close_ignored_when_not_open():
    window = Window()
    window.set_should_close(False)
    assert window.should_close() is True
    assert window.surface is None


def test_initialize_twice_raises(dummy_video):
    window = Window()
    window.initialize(320, 240, "test")
    try:
        assert window.surface.get_size() == (320, 240)
        with pytest.raises(WindowError, match="already initialized"):
            window.initialize(320, 240, "again")
    finally:
        window.shutdown()
    assert window.surface is None


def test_close_request_and_shutdown(dummy_video):
    window = Window()
    window.initialize(200, 100, "test")
    try:
        assert window.should_close() is False
        window.set_should_close(True)
        assert window.should_close() is True
        window.set_should_close(False)
        assert window.should_close() is False
    finally:
        window.shutdown()
    assert window.initialized is False
    assert window.should_close() is True


def test_quit_event_requests_close(dummy_video):
    window = Window()
    window.initialize(200, 100, "test")
    try:
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        window.swap_and_poll()
        assert window.should_close() is True
    finally:
        window.shutdown()