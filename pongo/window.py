"""The single game window: creation, key state, close requests and buffer swaps."""

from __future__ import annotations

import pygame


class WindowError(RuntimeError):
    """Raised when the window cannot be created or is initialised twice."""


class Window:
    """One process-wide window, created lazily by :meth:`initialize`."""

    _instance: Window | None = None

    def __init__(self):
        self._surface = None
        self._initialized = False
        self._close_requested = False

    @classmethod
    def get_instance(cls):
        """Return the shared window, creating the object on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def surface(self):
        """The display surface, or None when the window is not open."""
        return self._surface

    @property
    def initialized(self):
        return self._initialized

    def initialize(self, width, height, title):
        """Open the window; raise WindowError if it is already open or cannot be made."""
        if self._initialized:
            raise WindowError("Window already initialized")
        pygame.init()
        try:
            surface = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        except pygame.error as exc:
            pygame.quit()
            raise WindowError("Failed to create window") from exc
        pygame.display.set_caption(title)
        self._surface = surface
        self._close_requested = False
        self._initialized = True

    def shutdown(self):
        """Close the window and release the display, if it is open."""
        if self._surface is not None:
            pygame.display.quit()
            pygame.quit()
            self._surface = None
            self._initialized = False

    def should_close(self):
        """True once a close was requested, and always when the window is not open."""
        if self._surface is None:
            return True
        return self._close_requested

    def set_should_close(self, should_close):
        if self._surface is not None:
            self._close_requested = bool(should_close)

    def is_key_pressed(self, key):
        """True if the pygame key code ``key`` is held down; False when not open."""
        if self._surface is None:
            return False
        return bool(pygame.key.get_pressed()[key])

    def swap_and_poll(self):
        """Show the finished frame and process pending window events."""
        if self._surface is None:
            return
        pygame.display.flip()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._close_requested = True