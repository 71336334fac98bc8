"""
Texture Loading
===============
Textures are requested as futures so that the scene can be built (and drawn)
before any image has been decoded.

Why is this file needed?
------------------------
1. Responsiveness: decoding large JPEGs on the GUI thread stalls start-up.
   FileTextureSource pushes the reads to a thread pool.
2. Thread safety: VTK objects in the scene are only touched from the render
   thread. Loaded textures are parked in a TextureBinder and attached to their
   actors by the frame callback.
3. Testability: any object with a ``load(ref) -> Future`` method can be
   injected, e.g. already resolved or failing futures.

Classes:
    TextureSource: Protocol implemented by all sources.
    FileTextureSource: Reads images from a directory on worker threads.
    ProceduralTextureSource: Generates textures with numpy (no assets needed).
    TextureBinder: Attaches resolved textures to actors.
"""
from __future__ import annotations

import logging
import os
import zlib
from concurrent.futures import Future, ThreadPoolExecutor, wait
from typing import Optional, Protocol

import numpy as np
import pyvista as pv
from vtkmodules.vtkRenderingCore import vtkActor

from solarsystem.model.bodies import BACKGROUND

logger = logging.getLogger(__name__)


class TextureSource(Protocol):
    def load(self, ref: str) -> Future: ...
    def shutdown(self) -> None: ...


class FileTextureSource:
    """Loads texture images relative to ``base_dir`` on a thread pool."""

    def __init__(self, base_dir: str, max_workers: int = 4) -> None:
        self.base_dir = base_dir
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="texture"
        )

    def load(self, ref: str) -> Future:
        path = os.path.join(self.base_dir, ref)
        logger.debug(f"Queueing texture load: {path}")
        return self._executor.submit(self._read, path)

    @staticmethod
    def _read(path: str) -> pv.Texture:
        if not os.path.exists(path):
            raise FileNotFoundError(f"Texture not found: {path}")
        texture = pv.read_texture(path)
        logger.debug(f"Texture decoded: {path}")
        return texture

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)


# Base colours (RGB) used when no image assets are available
PROCEDURAL_PALETTE: dict[str, tuple[int, int, int]] = {
    "sun.jpg": (255, 180, 60),
    "mercury.jpg": (150, 140, 130),
    "venus.jpg": (220, 190, 140),
    "earth.jpg": (60, 110, 190),
    "mars.jpg": (190, 90, 50),
    "jupiter.jpg": (200, 160, 120),
    "saturn.jpg": (220, 200, 150),
    "saturnRings.png": (180, 165, 130),
    "uranus.jpg": (150, 210, 220),
    "neptune.jpg": (70, 100, 210),
}
DEFAULT_COLOR: tuple[int, int, int] = (200, 200, 200)


class ProceduralTextureSource:
    """
    Generates deterministic textures: latitude bands with a little noise for
    bodies and a speckled black image for the starfield.
    """

    def __init__(self, width: int = 256, height: int = 128) -> None:
        self.width = width
        self.height = height

    def load(self, ref: str) -> Future:
        future: Future = Future()
        future.set_result(self.generate(ref))
        return future

    def generate(self, ref: str) -> pv.Texture:
        rng = np.random.default_rng(zlib.crc32(ref.encode("utf-8")))
        if ref == BACKGROUND.texture_ref:
            image = self._starfield(rng)
        else:
            image = self._banded(rng, PROCEDURAL_PALETTE.get(ref, DEFAULT_COLOR))
        return pv.Texture(image)

    def _banded(self, rng: np.random.Generator, color: tuple[int, int, int]) -> np.ndarray:
        rows = np.linspace(0.0, 1.0, self.height)
        n_bands = rng.integers(4, 12)
        phase = rng.uniform(0.0, 2.0 * np.pi)
        bands = 0.85 + 0.15 * np.sin(rows * np.pi * n_bands + phase)
        noise = rng.normal(1.0, 0.05, size=(self.height, self.width))

        shade = bands[:, None] * noise
        base = np.asarray(color, dtype=np.float64)
        return np.clip(base[None, None, :] * shade[..., None], 0, 255).astype(np.uint8)

    def _starfield(self, rng: np.random.Generator) -> np.ndarray:
        # Background sphere is large, use 4x the resolution
        h, w = self.height * 4, self.width * 4
        image = np.zeros((h, w, 3), dtype=np.uint8)
        stars = rng.random((h, w)) > 0.998
        brightness = rng.integers(150, 256, size=int(stars.sum()), dtype=np.uint8)
        image[stars] = brightness[:, None]
        return image

    def shutdown(self) -> None:
        pass


class TextureBinder:
    """Attaches textures to actors once their futures have resolved."""

    def __init__(self) -> None:
        self._pending: list[tuple[vtkActor, Future]] = []

    @property
    def pending(self) -> int:
        return len(self._pending)

    def bind(self, actor: vtkActor, future: Future) -> None:
        self._pending.append((actor, future))

    def apply_ready(self) -> int:
        """
        Attach every resolved texture. Must run on the render thread.

        Returns:
            Number of textures attached by this call.

        Raises:
            Exception: Whatever the texture load raised. The failed entry is
                dropped so the error is reported once.
        """
        applied = 0
        for index in range(len(self._pending) - 1, -1, -1):
            actor, future = self._pending[index]
            if not future.done():
                continue
            del self._pending[index]
            try:
                texture = future.result()
            except Exception as e:
                logger.error(f"Texture load failed: {e}")
                raise
            actor.SetTexture(texture)
            applied += 1

        if applied:
            logger.debug(f"Attached {applied} textures, {self.pending} pending.")
        return applied

    def apply_all(self, timeout: Optional[float] = None) -> int:
        """Wait for outstanding loads (up to ``timeout`` seconds), then attach them."""
        if self._pending:
            wait([future for _, future in self._pending], timeout=timeout)
        return self.apply_ready()
