"""
Configuration & Path Management
===============================
Central registry for file paths and scene-wide constants.

Paths are resolved relative to the project root in development and relative
to the PyInstaller bundle (sys._MEIPASS) when frozen.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    TEXTURES_PATH (str): Absolute path to the texture images.
"""
import os
import sys
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/solarsystem/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


ASSETS_PATH: str = get_resource_path("assets")
TEXTURES_PATH: str = os.path.join(ASSETS_PATH, "textures")

# Window
WINDOW_TITLE: str = "Solar System"
WINDOW_SIZE: tuple[int, int] = (1280, 800)
BACKGROUND_COLOR: str = "black"

# Camera (perspective)
CAMERA_FOV: float = 45.0
CAMERA_NEAR: float = 1.0
CAMERA_FAR: float = 1000.0
CAMERA_DISTANCE: float = 150.0

# Animation: one tick per timer shot (~60 FPS)
FRAME_INTERVAL_MS: int = 16

# Lights
POINT_LIGHT_INTENSITY: float = 3.0
POINT_LIGHT_ATTENUATION: tuple[float, float, float] = (1.0, 0.01, 0.0)
AMBIENT_INTENSITY: float = 0.1

# Texture loading
TEXTURE_WORKERS: int = 4
