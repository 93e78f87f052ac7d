import pygame
import pytest

from pongo.main import main
from pongo.window import Window


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "pongo" in capsys.readouterr().out


def test_runs_until_quit_event(monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setattr("builtins.input", lambda *args: "y")
    monkeypatch.setattr(pygame.event, "get", lambda *args, **kwargs: [pygame.event.Event(pygame.QUIT)])
    assert main([]) == 0
    window = Window.get_instance()
    assert window.initialized is False
    assert window.should_close() is True
    assert "Play against ai? y/n" in capsys.readouterr().out