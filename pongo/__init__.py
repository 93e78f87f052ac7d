"""A two-paddle Pong game with an optional computer opponent, drawn with pygame."""

__version__ = "0.1.0"