"""Command entry point: open the window and run the game loop."""

import argparse

from pongo.game import Game
from pongo.renderer import Renderer
from pongo.settings import SCREEN_HEIGHT, SCREEN_WIDTH
from pongo.shader import Shader
from pongo.window import Window


def main(argv=None):
    """Run the game until the window is closed; return the exit status."""
    parser = argparse.ArgumentParser(prog="pongo", description="Two-paddle ball game.")
    parser.parse_args(argv)

    window = Window.get_instance()
    window.initialize(SCREEN_WIDTH, SCREEN_HEIGHT, "Pongo")
    try:
        renderer = Renderer()
        shader = Shader()
        game = Game(renderer, shader, window)
        while not window.should_close():
            game.update_model()
            game.draw_frame()
            window.swap_and_poll()
    finally:
        window.shutdown()
    return 0