"""
Scene Builder
=============
Constructs the static prop tree of the solar system once at start-up.

Layout of the tree (all props registered in the context's renderer):
    background   - textured sphere seen from the inside
    sun          - textured, unlit sphere at the origin
    orbit (x8)   - vtkAssembly per planet, holding
                     * the planet sphere at (distance, 0, 0)
                     * a thin white annulus marking the orbit path
                     * optionally a textured ring around the planet

Rotating an orbit assembly about Y revolves the planet around the origin,
rotating the planet actor about Y spins it around its own centre.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, Optional

import pyvista as pv
from vtkmodules.vtkRenderingCore import vtkAssembly

from solarsystem import config
from solarsystem.controller.context import SceneContext
from solarsystem.controller.vtk_utils import VtkUtils
from solarsystem.model.bodies import (
    BACKGROUND,
    BACKGROUND_RESOLUTION,
    BODY_RESOLUTION,
    PLANETS,
    SUN,
    CelestialBody,
    RingSpec,
)

logger = logging.getLogger(__name__)

ORBIT_PATH_HALF_WIDTH: float = 0.025
ORBIT_PATH_SEGMENTS: int = 100
RING_SEGMENTS: int = 32


@dataclass
class BodyHandle:
    """Live props of one planet. ``orbit`` owns ``mesh``, ``path`` and ``ring``."""
    name: str
    mesh: pv.Actor
    orbit: vtkAssembly
    path: pv.Actor
    ring: Optional[pv.Actor] = None

    @property
    def spin_angle(self) -> float:
        return VtkUtils.yaw_angle(self.mesh)

    @property
    def orbit_angle(self) -> float:
        return VtkUtils.yaw_angle(self.orbit)


@dataclass
class SolarSystem:
    background: pv.Actor
    sun: pv.Actor
    light: pv.Light
    handles: list[BodyHandle]


def _textured_actor(ctx: SceneContext, mesh: pv.DataSet, texture_ref: str) -> pv.Actor:
    """Actor whose texture is attached by the binder once the load resolves."""
    actor = VtkUtils.make_actor(mesh)
    ctx.binder.bind(actor, ctx.textures.load(texture_ref))
    return actor


def build_background(ctx: SceneContext) -> pv.Actor:
    mesh = VtkUtils.textured_sphere(BACKGROUND.radius, BACKGROUND_RESOLUTION)
    actor = _textured_actor(ctx, mesh, BACKGROUND.texture_ref)
    actor.prop.lighting = False
    # Only the inside of the sphere is visible
    actor.prop.culling = "front"
    ctx.renderer.AddActor(actor)
    return actor


def build_sun(ctx: SceneContext, body: CelestialBody = SUN) -> pv.Actor:
    mesh = VtkUtils.textured_sphere(body.radius, BODY_RESOLUTION)
    actor = _textured_actor(ctx, mesh, body.texture_ref)
    # The point light sits inside the sun
    actor.prop.lighting = False
    ctx.renderer.AddActor(actor)
    return actor


def build_lights(ctx: SceneContext) -> pv.Light:
    """
    Point light at the sun. The ambient contribution is carried by the
    ``ambient`` coefficient of every lit material (see ``build``).
    """
    light = pv.Light(
        position=(0.0, 0.0, 0.0),
        color="white",
        light_type="scene light",
        intensity=config.POINT_LIGHT_INTENSITY,
    )
    light.positional = True
    # A cone of 90 degrees or more makes a positional light omnidirectional
    light.cone_angle = 90.0
    light.attenuation_values = config.POINT_LIGHT_ATTENUATION
    ctx.renderer.AddLight(light)
    return light


def _build_ring(ctx: SceneContext, ring: RingSpec, distance: float) -> pv.Actor:
    mesh = VtkUtils.flat_ring(ring.inner_radius, ring.outer_radius, RING_SEGMENTS)
    actor = _textured_actor(ctx, mesh, ring.texture_ref)
    actor.prop.lighting = False
    actor.prop.culling = "none"
    actor.position = (distance, 0.0, 0.0)
    return actor


def build(ctx: SceneContext, body: CelestialBody) -> BodyHandle:
    """
    Build the orbit container of one planet and register it in the renderer.

    Texture load failures are not handled here; they surface from
    ``ctx.binder.apply_ready()``.
    """
    distance = body.orbital_distance

    mesh = _textured_actor(ctx, VtkUtils.textured_sphere(body.radius, BODY_RESOLUTION), body.texture_ref)
    mesh.prop.ambient = config.AMBIENT_INTENSITY
    mesh.prop.diffuse = 1.0
    mesh.position = (distance, 0.0, 0.0)

    orbit = vtkAssembly()
    orbit.AddPart(mesh)

    path = VtkUtils.make_actor(
        VtkUtils.flat_ring(
            distance - ORBIT_PATH_HALF_WIDTH,
            distance + ORBIT_PATH_HALF_WIDTH,
            ORBIT_PATH_SEGMENTS,
        )
    )
    path.prop.color = "white"
    path.prop.lighting = False
    orbit.AddPart(path)

    ring = None
    if body.ring is not None:
        ring = _build_ring(ctx, body.ring, distance)
        orbit.AddPart(ring)

    ctx.renderer.AddActor(orbit)
    logger.debug(f"Built '{body.name}' at distance {distance} (ring: {ring is not None})")
    return BodyHandle(name=body.name, mesh=mesh, orbit=orbit, path=path, ring=ring)


def build_solar_system(ctx: SceneContext, bodies: Iterable[CelestialBody] = PLANETS) -> SolarSystem:
    """Build background, sun, lights and one orbit container per body."""
    background = build_background(ctx)
    sun = build_sun(ctx)
    light = build_lights(ctx)
    handles = [build(ctx, body) for body in bodies]

    # Sources that resolve immediately get their textures before the first frame
    ctx.binder.apply_ready()

    logger.info(f"Scene built: {len(handles)} planets, {ctx.binder.pending} textures pending.")
    return SolarSystem(background=background, sun=sun, light=light, handles=handles)
