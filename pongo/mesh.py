"""Vertex data with position and texture coordinates, drawn as filled triangles."""

import enum

from pongo.shader import Shader

_STRIDE = 5  # x, y, z, u, v
_WHITE = (1.0, 1.0, 1.0, 1.0)


class Primitive(enum.Enum):
    """How consecutive vertices form triangles."""

    TRIANGLES = "triangles"
    TRIANGLE_FAN = "triangle_fan"


def _to_rgba(color):
    channels = [max(0, min(255, round(c * 255.0))) for c in color]
    while len(channels) < 4:
        channels.append(255)
    return tuple(channels[:4])


class Mesh:
    """Interleaved vertices (x, y, z, u, v) and the primitive they make up."""

    def __init__(self, vertices, primitive=Primitive.TRIANGLES):
        self.vertices = tuple(float(v) for v in vertices)
        self.primitive = Primitive(primitive)

    @property
    def vertex_count(self):
        return len(self.vertices) // _STRIDE

    @property
    def positions(self):
        """The (x, y, z) position of every vertex."""
        return [
            self.vertices[start:start + 3]
            for start in range(0, self.vertex_count * _STRIDE, _STRIDE)
        ]

    @property
    def tex_coords(self):
        """The (u, v) texture coordinate of every vertex."""
        return [
            self.vertices[start + 3:start + 5]
            for start in range(0, self.vertex_count * _STRIDE, _STRIDE)
        ]

    def triangles(self):
        """Return the triangles as tuples of three vertex positions."""
        points = self.positions
        if self.primitive is Primitive.TRIANGLES:
            return [tuple(points[i:i + 3]) for i in range(0, len(points) - 2, 3)]
        if len(points) < 3:
            return []
        centre = points[0]
        return [(centre, a, b) for a, b in zip(points[1:], points[2:])]

    def draw(self, surface, shader: Shader):
        """Fill every triangle on ``surface`` in the shader's ``u_Color``."""
        import pygame

        try:
            color = shader.uniform("u_Color")
        except KeyError:
            color = _WHITE
        rgba = _to_rgba(color)
        width, height = surface.get_size()
        for triangle in self.triangles():
            pixels = []
            for point in triangle:
                nx, ny = shader.project(point)
                pixels.append(((nx + 1.0) * 0.5 * width, (1.0 - ny) * 0.5 * height))
            pygame.draw.polygon(surface, rgba, pixels)