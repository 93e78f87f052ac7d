"""Screen and world dimensions, and the mapping between world and device coordinates."""

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

WORLD_WIDTH = 100.0
WORLD_HEIGHT = 75.0


def world_to_ndc(wx, wy):
    """Map a world position to normalised device coordinates, with y pointing down."""
    return (2.0 * wx / WORLD_WIDTH - 1.0, 1.0 - 2.0 * wy / WORLD_HEIGHT)