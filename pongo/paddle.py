"""A rectangular paddle that moves vertically within the world."""

from pongo.material import Material
from pongo.mesh import Mesh, Primitive
from pongo.renderable import RenderableComponent, identity, scale, translate
from pongo.settings import WORLD_HEIGHT

_WHITE = (1.0, 1.0, 1.0, 1.0)

# A unit square centred on the origin, as two triangles: x, y, z, u, v.
_RECTANGLE = (
    -0.5, -0.5, 0.0, 0.0, 0.0,
    0.5, -0.5, 0.0, 1.0, 0.0,
    0.5, 0.5, 0.0, 1.0, 1.0,
    -0.5, -0.5, 0.0, 0.0, 0.0,
    0.5, 0.5, 0.0, 1.0, 1.0,
    -0.5, 0.5, 0.0, 0.0, 1.0,
)


class Paddle:
    """Centre position, size and speed in world units; speed is per second."""

    def __init__(self, x, y, width, height, speed, color=_WHITE):
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.speed = float(speed)
        self.renderable = RenderableComponent(
            Mesh(_RECTANGLE, Primitive.TRIANGLES), Material(color), identity()
        )
        self.update_transform()

    def move_up(self, delta_time):
        """Move up, stopping at the top of the world."""
        self.y += self.speed * delta_time
        if self.y + self.height / 2 > WORLD_HEIGHT:
            self.y = WORLD_HEIGHT - self.height / 2
        self.update_transform()

    def move_down(self, delta_time):
        """Move down, stopping at the bottom of the world."""
        self.y -= self.speed * delta_time
        if self.y - self.height / 2 < 0:
            self.y = self.height / 2
        self.update_transform()

    def update_transform(self):
        """Refresh the model matrix from the current position and size."""
        model = translate(identity(), (self.x, self.y, 0.0))
        self.renderable.transform = scale(model, (self.width, self.height, 1.0))