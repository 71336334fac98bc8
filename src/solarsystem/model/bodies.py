"""
Celestial Body Tables
=====================
Fixed, hand-authored parameters for every body in the scene.

Classes:
    RingSpec: Annulus attached to a planet (Saturn).
    CelestialBody: Size, orbital distance and texture of one body.
    RotationRates: Self-spin and orbit angles applied per frame.

Tables:
    SUN, BACKGROUND: Bodies that are not placed on an orbit.
    PLANETS: The eight planets, ordered by distance from the sun.
    ROTATION_RATES: Per-planet rates, same order as PLANETS.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RingSpec:
    inner_radius: float
    outer_radius: float
    texture_ref: str

    def __post_init__(self) -> None:
        if not 0.0 <= self.inner_radius < self.outer_radius:
            raise ValueError(
                f"Ring needs 0 <= inner < outer, got {self.inner_radius}..{self.outer_radius}."
            )


@dataclass(frozen=True)
class CelestialBody:
    name: str
    radius: float
    orbital_distance: float
    texture_ref: str
    ring: Optional[RingSpec] = None

    def __post_init__(self) -> None:
        if self.radius <= 0.0:
            raise ValueError(f"Body '{self.name}' must have a positive radius, got {self.radius}.")
        if self.orbital_distance < 0.0:
            raise ValueError(f"Body '{self.name}' has a negative orbital distance.")


@dataclass(frozen=True)
class RotationRates:
    """Angles in radians applied once per frame."""
    self_spin: float
    orbit_revolution: float = 0.0


# Sphere tessellation (theta, phi)
BACKGROUND_RESOLUTION: int = 128
BODY_RESOLUTION: int = 64

BACKGROUND = CelestialBody("stars", radius=300.0, orbital_distance=0.0, texture_ref="stars.jpg")
SUN = CelestialBody("sun", radius=10.0, orbital_distance=0.0, texture_ref="sun.jpg")
SUN_RATES = RotationRates(self_spin=0.003)

SATURN_RING = RingSpec(inner_radius=4.0, outer_radius=7.0, texture_ref="saturnRings.png")

PLANETS: tuple[CelestialBody, ...] = (
    CelestialBody("mercury", radius=1.0, orbital_distance=20.0, texture_ref="mercury.jpg"),
    CelestialBody("venus", radius=2.0, orbital_distance=27.0, texture_ref="venus.jpg"),
    CelestialBody("earth", radius=2.2, orbital_distance=35.0, texture_ref="earth.jpg"),
    CelestialBody("mars", radius=1.5, orbital_distance=42.0, texture_ref="mars.jpg"),
    CelestialBody("jupiter", radius=4.5, orbital_distance=57.0, texture_ref="jupiter.jpg"),
    CelestialBody("saturn", radius=4.0, orbital_distance=72.0, texture_ref="saturn.jpg", ring=SATURN_RING),
    CelestialBody("uranus", radius=3.0, orbital_distance=100.0, texture_ref="uranus.jpg"),
    CelestialBody("neptune", radius=3.0, orbital_distance=142.0, texture_ref="neptune.jpg"),
)

ROTATION_RATES: tuple[RotationRates, ...] = (
    RotationRates(self_spin=0.004, orbit_revolution=0.04),     # mercury
    RotationRates(self_spin=0.002, orbit_revolution=0.015),    # venus
    RotationRates(self_spin=0.02, orbit_revolution=0.01),      # earth
    RotationRates(self_spin=0.018, orbit_revolution=0.008),    # mars
    RotationRates(self_spin=0.04, orbit_revolution=0.002),     # jupiter
    RotationRates(self_spin=0.038, orbit_revolution=0.0009),   # saturn
    RotationRates(self_spin=0.03, orbit_revolution=0.0004),    # uranus
    RotationRates(self_spin=0.032, orbit_revolution=0.0001),   # neptune
)
