"""Batching renderer: collects draw commands for a frame and draws them grouped by material."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pongo.material import Material
from pongo.mesh import Mesh
from pongo.renderable import Renderable
from pongo.shader import Shader

_CLEAR_COLOR = (0, 0, 0, 255)


@dataclass
class RenderCommand:
    """One queued draw: geometry, material and model transform."""

    mesh: Mesh
    material: Material
    transform: np.ndarray

    def sort_key(self):
        """Commands sharing a material sort next to each other."""
        return id(self.material)


class Renderer:
    """Queues renderables between begin_scene and end_scene, then draws them.

    Drawing goes to ``surface``; when it is None the current pygame display
    surface is used.
    """

    def __init__(self, surface=None):
        self.surface = surface
        self._queue: list[RenderCommand] = []

    @property
    def queue(self):
        """The commands submitted since the last begin_scene, in submission order."""
        return tuple(self._queue)

    def _target(self):
        if self.surface is not None:
            return self.surface
        import pygame

        surface = pygame.display.get_surface()
        if surface is None:
            raise RuntimeError("no surface to draw on: pass one or open a display")
        return surface

    def begin_scene(self):
        """Start a new frame, dropping any queued commands."""
        self._queue.clear()

    def submit(self, renderable: Renderable):
        """Queue a renderable for drawing at end_scene."""
        self._queue.append(
            RenderCommand(renderable.mesh, renderable.material, renderable.transform)
        )

    def end_scene(self, shader: Shader):
        """Sort the queue by material and draw every command with ``shader``."""
        self._queue.sort(key=RenderCommand.sort_key)
        shader.use()
        target = self._target()

        current_material = None
        for command in self._queue:
            if command.material is not current_material:
                command.material.bind(shader)
                current_material = command.material
            shader.set_mat("u_Model", command.transform)
            command.mesh.draw(target, shader)

    def clear(self):
        """Fill the target with black."""
        self._target().fill(_CLEAR_COLOR)