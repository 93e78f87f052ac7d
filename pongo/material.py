"""Surface appearance: a single RGBA colour handed to the shader."""

from pongo.shader import Shader

_WHITE = (1.0, 1.0, 1.0, 1.0)


def _rgba(color):
    values = tuple(float(c) for c in color)
    if len(values) != 4:
        raise ValueError(f"colour needs 4 components, got {len(values)}")
    return values


class Material:
    """An RGBA colour, each channel from 0 to 1."""

    def __init__(self, color=_WHITE):
        self.color = _rgba(color)

    def set_color(self, color):
        self.color = _rgba(color)

    def bind(self, shader: Shader):
        """Pass the colour to the shader as ``u_Color``."""
        shader.set_vec("u_Color", self.color)

    def __repr__(self):
        return f"Material(color={self.color!r})"