"""Tests for the body and rotation tables."""
import dataclasses

import pytest

from solarsystem.model.bodies import (
    BACKGROUND,
    PLANETS,
    ROTATION_RATES,
    SUN,
    SUN_RATES,
    CelestialBody,
    RingSpec,
    RotationRates,
)


class TestBodyTables:
    def test_eight_planets_in_order(self):
        names = [body.name for body in PLANETS]
        assert names == ["mercury", "venus", "earth", "mars", "jupiter", "saturn", "uranus", "neptune"]

    def test_distances_increase_outwards(self):
        distances = [body.orbital_distance for body in PLANETS]
        assert distances == sorted(distances)
        assert distances[0] == 20.0
        assert distances[-1] == 142.0

    def test_only_saturn_has_a_ring(self):
        ringed = [body for body in PLANETS if body.ring is not None]
        assert [body.name for body in ringed] == ["saturn"]
        assert ringed[0].ring == RingSpec(4.0, 7.0, "saturnRings.png")

    def test_rates_pair_with_planets(self):
        assert len(ROTATION_RATES) == len(PLANETS)
        assert ROTATION_RATES[2] == RotationRates(self_spin=0.02, orbit_revolution=0.01)
        assert all(rate.self_spin > 0 and rate.orbit_revolution > 0 for rate in ROTATION_RATES)

    def test_sun_and_background(self):
        assert SUN.radius == 10.0
        assert SUN.orbital_distance == 0.0
        assert SUN_RATES.self_spin == pytest.approx(0.003)
        assert BACKGROUND.radius == 300.0
        assert BACKGROUND.texture_ref == "stars.jpg"


class TestValidation:
    def test_bodies_are_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            PLANETS[0].radius = 5.0

    def test_rejects_non_positive_radius(self):
        with pytest.raises(ValueError):
            CelestialBody("dust", radius=0.0, orbital_distance=10.0, texture_ref="dust.jpg")

    def test_rejects_negative_distance(self):
        with pytest.raises(ValueError):
            CelestialBody("dust", radius=1.0, orbital_distance=-1.0, texture_ref="dust.jpg")

    def test_rejects_inverted_ring(self):
        with pytest.raises(ValueError):
            RingSpec(inner_radius=7.0, outer_radius=4.0, texture_ref="ring.png")
