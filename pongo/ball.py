"""The ball: moves, bounces off walls and reflects off paddles."""

import math

from pongo.material import Material
from pongo.mesh import Mesh, Primitive
from pongo.paddle import Paddle
from pongo.renderable import RenderableComponent, identity, scale, translate

_WHITE = (1.0, 1.0, 1.0, 1.0)
_SEGMENTS = 18
_SPEED_INCREASE = 1.02
_MAX_SPEED = 150.0
_ENGLISH = 15.0
_PUSH_OUT = 1.01


def circle_vertices(segments):
    """Vertices (x, y, z, u, v) of a unit circle as a triangle fan: centre then rim."""
    vertices = [0.0, 0.0, 0.0, 0.5, 0.5]
    for i in range(segments + 1):
        angle = 2.0 * math.pi * i / segments
        cx, cy = math.cos(angle), math.sin(angle)
        vertices.extend((cx, cy, 0.0, cx * 0.5 + 0.5, cy * 0.5 + 0.5))
    return vertices


def _normalize(x, y):
    length = math.hypot(x, y)
    if length == 0.0:
        return 0.0, 0.0
    return x / length, y / length


class Ball:
    """Centre position, velocity (world units per second) and radius."""

    def __init__(self, x, y, vx, vy, radius, color=_WHITE):
        self.x = float(x)
        self.y = float(y)
        self.vx = float(vx)
        self.vy = float(vy)
        self.radius = float(radius)
        self.renderable = RenderableComponent(
            Mesh(circle_vertices(_SEGMENTS), Primitive.TRIANGLE_FAN), Material(color), identity()
        )
        self.update_transform()

    def move(self, delta_time):
        self.x += self.vx * delta_time
        self.y += self.vy * delta_time
        self.update_transform()

    def bounce_x(self):
        self.vx = -self.vx

    def bounce_y(self):
        self.vy = -self.vy

    def reset(self, x, y, vx, vy):
        self.x, self.y = float(x), float(y)
        self.vx, self.vy = float(vx), float(vy)
        self.update_transform()

    def accelerate(self, factor):
        self.vx *= factor
        self.vy *= factor

    @staticmethod
    def _edges(paddle: Paddle):
        half_w, half_h = paddle.width / 2, paddle.height / 2
        return paddle.x - half_w, paddle.x + half_w, paddle.y - half_h, paddle.y + half_h

    def collides_with_paddle(self, paddle: Paddle):
        """True if the circle overlaps the paddle's rectangle."""
        left, right, bottom, top = self._edges(paddle)
        closest_x = max(left, min(self.x, right))
        closest_y = max(bottom, min(self.y, top))
        dx, dy = self.x - closest_x, self.y - closest_y
        return dx * dx + dy * dy < self.radius * self.radius

    def handle_paddle_collision(self, paddle: Paddle):
        """Push the ball out of the paddle and reflect its velocity, with spin and speed-up."""
        if not self.collides_with_paddle(paddle):
            return

        left, right, bottom, top = self._edges(paddle)
        closest_x = min(max(self.x, left), right)
        closest_y = min(max(self.y, bottom), top)

        nx, ny = self.x - closest_x, self.y - closest_y
        if math.hypot(nx, ny) < 0.0001:
            # The centre is inside the paddle: use the nearest edge.
            distances = [
                (abs(self.x - left), (-1.0, 0.0)),
                (abs(self.x - right), (1.0, 0.0)),
                (abs(self.y - top), (0.0, 1.0)),
                (abs(self.y - bottom), (0.0, -1.0)),
            ]
            nearest = min(d for d, _ in distances)
            nx, ny = next(normal for d, normal in distances if d == nearest)
        nx, ny = _normalize(nx, ny)

        length = math.hypot(self.x - closest_x, self.y - closest_y)
        if length < self.radius:
            overlap = self.radius - length
            self.x += nx * overlap * _PUSH_OUT
            self.y += ny * overlap * _PUSH_OUT

        dot = self.vx * nx + self.vy * ny
        rx = self.vx - 2.0 * dot * nx
        ry = self.vy - 2.0 * dot * ny

        hit_x = 2.0 * (self.x - paddle.x) / paddle.width
        hit_y = 2.0 * (self.y - paddle.y) / paddle.height
        if abs(nx) > abs(ny):
            ry += hit_y * _ENGLISH
        else:
            rx += hit_x * _ENGLISH

        speed = math.hypot(rx, ry)
        new_speed = min(speed * _SPEED_INCREASE, _MAX_SPEED)
        ux, uy = _normalize(rx, ry)
        self.vx, self.vy = ux * new_speed, uy * new_speed
        self.update_transform()

    def is_out_of_bounds_x(self, min_x, max_x):
        return self.x - self.radius < min_x or self.x + self.radius > max_x

    def is_out_of_bounds_y(self, min_y, max_y):
        return self.y - self.radius < min_y or self.y + self.radius > max_y

    def update_transform(self):
        """Refresh the model matrix from the current position and radius."""
        model = translate(identity(), (self.x, self.y, 0.0))
        self.renderable.transform = scale(model, (self.radius, self.radius, 1.0))