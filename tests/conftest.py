"""Shared fixtures: a bare VTK renderer, a fake surface and fake texture sources."""
import os
from concurrent.futures import Future

import numpy as np
import pytest
import pyvista as pv
from vtkmodules.vtkRenderingCore import vtkCamera, vtkRenderer

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from solarsystem.controller.context import SceneContext  # noqa: E402


class FakeSurface:
    """Records resize and render requests instead of drawing."""

    def __init__(self):
        self.sizes = []
        self.renders = 0

    def set_size(self, width, height):
        self.sizes.append((width, height))

    def render(self):
        self.renders += 1


class ResolvedTextureSource:
    """Returns futures that already hold a tiny texture."""

    def __init__(self):
        self.requested = []

    def load(self, ref):
        self.requested.append(ref)
        future = Future()
        future.set_result(pv.Texture(np.full((2, 2, 3), 128, dtype=np.uint8)))
        return future

    def shutdown(self):
        pass


class DeferredTextureSource:
    """Returns unresolved futures; tests resolve or fail them by ref."""

    def __init__(self):
        self.futures = {}

    def load(self, ref):
        future = Future()
        self.futures.setdefault(ref, []).append(future)
        return future

    def resolve_all(self):
        for futures in self.futures.values():
            for future in futures:
                if not future.done():
                    future.set_result(pv.Texture(np.zeros((2, 2, 3), dtype=np.uint8)))

    def fail(self, ref, error):
        for future in self.futures[ref]:
            future.set_exception(error)

    def shutdown(self):
        pass


class FailingTextureSource:
    def __init__(self, failing_ref):
        self.failing_ref = failing_ref
        self._ok = ResolvedTextureSource()

    def load(self, ref):
        if ref != self.failing_ref:
            return self._ok.load(ref)
        future = Future()
        future.set_exception(FileNotFoundError(f"Texture not found: {ref}"))
        return future

    def shutdown(self):
        pass


@pytest.fixture
def surface():
    return FakeSurface()


@pytest.fixture
def make_context(surface):
    """Factory building a SceneContext around a fresh renderer and camera."""

    def factory(textures=None, width=800, height=600):
        renderer = vtkRenderer()
        camera = vtkCamera()
        renderer.SetActiveCamera(camera)
        return SceneContext(
            renderer=renderer,
            camera=camera,
            textures=textures if textures is not None else ResolvedTextureSource(),
            surface=surface,
            width=width,
            height=height,
        )

    return factory


@pytest.fixture
def context(make_context):
    return make_context()


@pytest.fixture
def deferred_textures():
    return DeferredTextureSource()


@pytest.fixture
def failing_textures():
    return FailingTextureSource
