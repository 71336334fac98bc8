"""
Motion Updater
==============
Applies fixed per-frame rotations to the props built by the scene builder.

Motion is fixed-step: every call rotates by the same angle regardless of
wall-clock time, so after ``n`` frames a body has turned by ``n * rate``.
The accumulated angle lives only in the props' transforms.
"""
from __future__ import annotations

import logging
import math
from typing import Sequence

from solarsystem.controller.context import SceneContext
from solarsystem.controller.scene_builder import BodyHandle, SolarSystem
from solarsystem.model.bodies import ROTATION_RATES, SUN_RATES, RotationRates

logger = logging.getLogger(__name__)

# Emit a debug heartbeat every this many frames
LOG_EVERY_N_FRAMES: int = 600


def tick(handles: Sequence[BodyHandle], rates: Sequence[RotationRates]) -> None:
    """
    Spin each planet about its own Y axis and revolve its orbit container
    about the world Y axis by one frame's worth of rotation.

    Raises:
        ValueError: If handles and rates do not pair up.
    """
    if len(handles) != len(rates):
        raise ValueError(f"Got {len(handles)} bodies but {len(rates)} rotation rates.")

    for handle, rate in zip(handles, rates):
        # VTK rotations are in degrees
        handle.mesh.RotateY(math.degrees(rate.self_spin))
        handle.orbit.RotateY(math.degrees(rate.orbit_revolution))


class Animator:
    """Per-frame callback: rotate everything, attach loaded textures, redraw."""

    def __init__(
        self,
        ctx: SceneContext,
        system: SolarSystem,
        rates: Sequence[RotationRates] = ROTATION_RATES,
        sun_rates: RotationRates = SUN_RATES,
    ) -> None:
        if len(rates) != len(system.handles):
            raise ValueError(f"Got {len(system.handles)} bodies but {len(rates)} rotation rates.")
        self.ctx = ctx
        self.system = system
        self.rates = tuple(rates)
        self.sun_rates = sun_rates
        self.frames_rendered: int = 0

    def on_frame(self, frame_index: int) -> None:
        self.system.sun.RotateY(math.degrees(self.sun_rates.self_spin))
        tick(self.system.handles, self.rates)

        if self.ctx.binder.pending:
            self.ctx.binder.apply_ready()

        self.ctx.request_render()
        self.frames_rendered += 1

        if self.frames_rendered % LOG_EVERY_N_FRAMES == 0:
            logger.debug(f"{self.frames_rendered} frames rendered (last index {frame_index}).")
