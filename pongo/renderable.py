"""Things that can be drawn, and the 4x4 matrix helpers used to place them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pongo.material import Material
    from pongo.mesh import Mesh


def identity():
    """Return a fresh 4x4 identity matrix."""
    return np.identity(4, dtype=np.float64)


def translate(matrix, offset):
    """Return ``matrix`` followed by a translation by ``offset`` (x, y, z)."""
    x, y, z = offset
    step = identity()
    step[:3, 3] = (x, y, z)
    return np.asarray(matrix, dtype=np.float64) @ step


def scale(matrix, factors):
    """Return ``matrix`` followed by a scale by ``factors`` (x, y, z)."""
    x, y, z = factors
    step = np.diag([x, y, z, 1.0]).astype(np.float64)
    return np.asarray(matrix, dtype=np.float64) @ step


def ortho(left, right, bottom, top, near, far):
    """Return an orthographic projection matrix for column vectors."""
    result = identity()
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    return result


class Renderable(ABC):
    """Anything the renderer can draw: a mesh, a material and a model transform."""

    @property
    @abstractmethod
    def mesh(self) -> Mesh:
        """The geometry to draw."""

    @property
    @abstractmethod
    def material(self) -> Material:
        """The material to draw it with."""

    @property
    @abstractmethod
    def transform(self) -> np.ndarray:
        """The model matrix placing the mesh in the world."""


class RenderableComponent(Renderable):
    """A mesh and material shared with an owner, plus a transform it updates."""

    def __init__(self, mesh, material, transform=None):
        self._mesh = mesh
        self._material = material
        self._transform = identity() if transform is None else np.array(transform, dtype=np.float64)

    @property
    def mesh(self):
        return self._mesh

    @property
    def material(self):
        return self._material

    @property
    def transform(self):
        return self._transform.copy()

    @transform.setter
    def transform(self, value):
        self._transform = np.array(value, dtype=np.float64)