"""Orbit-controllable 3D solar system scene."""
