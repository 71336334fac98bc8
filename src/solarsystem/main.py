"""
Application Initialization
==========================
Builds the collaborators of the scene and starts the Qt Event Loop.

It acts as the "Dependency Injection" root. It:
1. Chooses the texture source (image files or generated textures).
2. Creates the frame scheduler that drives the animation.
3. Passes both into the Main Window, which builds the scene.
"""
import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from solarsystem import config
from solarsystem.logging_config import setup_logging
from solarsystem.controller.scheduler import QtFrameScheduler
from solarsystem.controller.textures import FileTextureSource, ProceduralTextureSource, TextureSource
from solarsystem.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def create_texture_source(textures_path: str = config.TEXTURES_PATH) -> TextureSource:
    """Use the image assets when present, otherwise generate textures."""
    if os.path.isdir(textures_path):
        logger.info(f"Loading textures from {textures_path}")
        return FileTextureSource(textures_path, max_workers=config.TEXTURE_WORKERS)

    logger.warning(f"Textures path not found at {textures_path}, using generated textures.")
    return ProceduralTextureSource()


def main() -> None:
    # Use logging.DEBUG to see per-body build and texture messages
    setup_logging(level=logging.INFO)

    app = QApplication(sys.argv)
    app.setApplicationName(config.WINDOW_TITLE)

    textures = create_texture_source()
    scheduler = QtFrameScheduler(config.FRAME_INTERVAL_MS)

    window = MainWindow(textures, scheduler)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
