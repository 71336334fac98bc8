"""
Main Application Window
=======================
Hosts the 3D view and the few global actions of the application.
"""
import logging

from PySide6.QtWidgets import QMainWindow
from PySide6.QtGui import QAction, QCloseEvent

from solarsystem import config
from solarsystem.controller.scheduler import FrameScheduler
from solarsystem.controller.textures import TextureSource
from solarsystem.view.widgets.scene_view import SolarSystemWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, textures: TextureSource, scheduler: FrameScheduler) -> None:
        super().__init__()
        self.textures = textures

        self.setWindowTitle(config.WINDOW_TITLE)
        self.resize(*config.WINDOW_SIZE)

        self.visualizer = SolarSystemWidget(textures, scheduler)
        self.setCentralWidget(self.visualizer)

        self._create_actions()
        self._create_menus()

        self.visualizer.start_animation()

    def _create_actions(self) -> None:
        self.act_reset_camera = QAction("Reset Camera", self)
        self.act_reset_camera.setShortcut("Ctrl+R")
        self.act_reset_camera.triggered.connect(self.visualizer.reset_camera)

        self.act_exit = QAction("Exit", self)
        self.act_exit.setShortcut("Ctrl+Q")
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self.act_exit)

        view_menu = menu_bar.addMenu("&View")
        view_menu.addAction(self.act_reset_camera)

    def closeEvent(self, event: QCloseEvent, /) -> None:
        """Stop the animation and release the plotter and texture workers."""
        self.visualizer.stop_animation()
        self.textures.shutdown()

        if self.visualizer and self.visualizer.plotter:
            self.visualizer.plotter.close()

        logger.info("Main window closed.")
        event.accept()
