"""
Scene Context
=============
Explicit container for everything the scene builder and the animation need:
the renderer that owns the props, the camera, the texture source and the
surface that is drawn to. One instance is created at start-up and passed
around instead of module-level globals.

Classes:
    RenderSurface: Protocol of the drawable (a PyVista plotter in the app).
    SceneContext: The shared state.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Protocol

from vtkmodules.vtkRenderingCore import vtkCamera, vtkRenderer

from solarsystem import config
from solarsystem.controller.textures import TextureBinder, TextureSource

logger = logging.getLogger(__name__)


class RenderSurface(Protocol):
    def set_size(self, width: int, height: int) -> None: ...
    def render(self) -> None: ...


@dataclass
class SceneContext:
    renderer: vtkRenderer
    camera: vtkCamera
    textures: TextureSource
    surface: RenderSurface
    width: int = config.WINDOW_SIZE[0]
    height: int = config.WINDOW_SIZE[1]
    binder: TextureBinder = field(default_factory=TextureBinder)

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def configure_camera(self) -> None:
        """Perspective camera looking at the sun from +Z, Y up."""
        cam = self.camera
        cam.SetViewAngle(config.CAMERA_FOV)
        cam.SetPosition(0.0, 0.0, config.CAMERA_DISTANCE)
        cam.SetFocalPoint(0.0, 0.0, 0.0)
        cam.SetViewUp(0.0, 1.0, 0.0)
        cam.SetClippingRange(config.CAMERA_NEAR, config.CAMERA_FAR)
        self._apply_aspect()

    def resize(self, width: int, height: int) -> None:
        """
        Track a new viewport size: camera aspect becomes width/height and the
        surface is resized once. Props are not touched.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport size must be positive, got {width}x{height}.")

        self.width = int(width)
        self.height = int(height)
        self._apply_aspect()
        self.surface.set_size(self.width, self.height)
        logger.debug(f"Viewport resized to {self.width}x{self.height}")

    def request_render(self) -> None:
        self.surface.render()

    def _apply_aspect(self) -> None:
        self.camera.SetExplicitAspectRatio(self.aspect)
        self.camera.SetUseExplicitAspectRatio(True)
