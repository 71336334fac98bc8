"""
3D Solar System Widget (PyVista Wrapper)
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout
from PySide6.QtGui import QCloseEvent

from pyvistaqt import QtInteractor

from solarsystem import config
from solarsystem.controller.context import SceneContext
from solarsystem.controller.motion import Animator
from solarsystem.controller.scene_builder import build_solar_system
from solarsystem.controller.scheduler import FrameScheduler
from solarsystem.controller.textures import TextureSource

logger = logging.getLogger(__name__)


class PlotterSurface:
    """Adapts a PyVista plotter to the RenderSurface protocol."""

    def __init__(self, plotter: QtInteractor) -> None:
        self._plotter = plotter

    def set_size(self, width: int, height: int) -> None:
        # The Qt interactor usually resized the render window already
        if tuple(self._plotter.window_size) != (width, height):
            self._plotter.window_size = (width, height)

    def render(self) -> None:
        self._plotter.render()


def forward_resize(plotter: QtInteractor, context: SceneContext) -> bool:
    """
    Push the render window size into the context when it really changed.

    Returns:
        True if the context was resized.
    """
    width, height = (int(v) for v in plotter.window_size)
    # Hidden or minimised windows report an empty size
    if width <= 0 or height <= 0:
        return False
    if (width, height) == (context.width, context.height):
        return False
    context.resize(width, height)
    return True


class SolarSystemWidget(QWidget):
    def __init__(
        self,
        textures: TextureSource,
        scheduler: FrameScheduler,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)

        self.layout_box: QVBoxLayout = QVBoxLayout(self)
        self.layout_box.setContentsMargins(0, 0, 0, 0)

        self.plotter: QtInteractor = QtInteractor(self)
        self.layout_box.addWidget(self.plotter)

        self._init_plotter()

        width, height = self.plotter.window_size
        self.context = SceneContext(
            renderer=self.plotter.renderer,
            camera=self.plotter.camera,
            textures=textures,
            surface=PlotterSurface(self.plotter),
            width=max(int(width), 1),
            height=max(int(height), 1),
        )
        self.context.configure_camera()

        self.system = build_solar_system(self.context)
        self.animator = Animator(self.context, self.system)
        self.scheduler = scheduler

        self._attach_observers()
        self.plotter.render()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def start_animation(self) -> None:
        self.scheduler.start(self.animator.on_frame)

    def stop_animation(self) -> None:
        self.scheduler.stop()

    def reset_camera(self) -> None:
        """Return to the initial view."""
        self.context.configure_camera()
        self.plotter.render()

    # ------------------------------------------------------------------------------
    # Internal: Setup & Observers
    # ------------------------------------------------------------------------------

    def _init_plotter(self) -> None:
        self.plotter.set_background(config.BACKGROUND_COLOR)
        # The scene brings its own light
        self.plotter.remove_all_lights()
        # Orbit around the focal point, keeping Y up
        self.plotter.enable_terrain_style(mouse_wheel_zooms=True)

    def _attach_observers(self) -> None:
        iren = self.plotter.iren
        iren.add_observer("ConfigureEvent", lambda *_: self._on_configure())

    def _on_configure(self) -> None:
        forward_resize(self.plotter, self.context)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.stop_animation()
        self.plotter.close()
        event.accept()
