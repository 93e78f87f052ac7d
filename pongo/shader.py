"""A software shader: a named set of uniforms and the vertex transform they drive."""

import numpy as np

from pongo.renderable import identity

_UTF8_BOM = b"\xef\xbb\xbf"


def remove_bom(data):
    """Strip a leading UTF-8 byte order mark from ``data`` (bytes or str)."""
    if isinstance(data, (bytes, bytearray)):
        return bytes(data[3:]) if data.startswith(_UTF8_BOM) else bytes(data)
    return data[1:] if data.startswith("\ufeff") else data


class Shader:
    """Holds uniform values and projects model-space points to device coordinates.

    The vertex stage computes ``u_Projection @ u_View @ u_Model @ point``;
    any of these matrices that is unset counts as the identity.
    """

    def __init__(self):
        self._uniforms = {}
        self.active = False

    def use(self):
        """Make this shader the active one."""
        self.active = True
        return self

    def set_bool(self, name, value):
        self._uniforms[name] = int(bool(value))

    def set_int(self, name, value):
        self._uniforms[name] = int(value)

    def set_float(self, name, value):
        self._uniforms[name] = float(value)

    def set_vec(self, name, *args):
        """Set a 2-, 3- or 4-component vector, given as one sequence or as components."""
        components = args[0] if len(args) == 1 else args
        values = tuple(float(c) for c in components)
        if not 2 <= len(values) <= 4:
            raise ValueError(f"vector uniform {name!r} needs 2 to 4 components, got {len(values)}")
        self._uniforms[name] = values

    def set_mat(self, name, value):
        """Set a square 2x2, 3x3 or 4x4 matrix."""
        matrix = np.array(value, dtype=np.float64)
        if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1] or matrix.shape[0] not in (2, 3, 4):
            raise ValueError(f"matrix uniform {name!r} must be square 2x2, 3x3 or 4x4, got {matrix.shape}")
        self._uniforms[name] = matrix

    def uniform(self, name):
        """Return the value of a uniform; raise KeyError if it was never set."""
        value = self._uniforms[name]
        return value.copy() if isinstance(value, np.ndarray) else value

    def _matrix(self, name):
        value = self._uniforms.get(name)
        return identity() if value is None else value

    def project(self, point):
        """Transform a model-space point to normalised device coordinates (x, y)."""
        if len(point) == 2:
            x, y = point
            z = 0.0
        else:
            x, y, z = point
        mvp = self._matrix("u_Projection") @ self._matrix("u_View") @ self._matrix("u_Model")
        clip = mvp @ np.array([x, y, z, 1.0])
        return (float(clip[0] / clip[3]), float(clip[1] / clip[3]))