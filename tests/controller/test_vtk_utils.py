"""Tests for the geometry and transform helpers."""
import math

import numpy as np
import pytest
from vtkmodules.vtkRenderingCore import vtkActor, vtkAssembly

from solarsystem.controller.vtk_utils import VtkUtils


def tcoords(mesh):
    data = mesh.GetPointData().GetTCoords()
    assert data is not None
    return np.array([data.GetTuple2(i) for i in range(data.GetNumberOfTuples())])


class TestTexturedSphere:
    def test_radius_and_texture_coordinates(self):
        sphere = VtkUtils.textured_sphere(2.5, 32)
        radii = np.linalg.norm(sphere.points, axis=1)
        assert np.allclose(radii, 2.5, atol=1e-4)
        assert len(tcoords(sphere)) == sphere.n_points

    def test_poles_lie_on_vertical_axis(self):
        sphere = VtkUtils.textured_sphere(1.0, 32)
        top = int(np.argmax(sphere.points[:, 1]))
        assert sphere.points[top, 1] == pytest.approx(1.0, abs=1e-4)
        t = tcoords(sphere)[top, 1]
        assert min(t, 1.0 - t) < 0.01


class TestFlatRing:
    def test_lies_in_horizontal_plane(self):
        ring = VtkUtils.flat_ring(4.0, 7.0, 32)
        assert np.allclose(ring.points[:, 1], 0.0, atol=1e-9)

    def test_radial_extent(self):
        ring = VtkUtils.flat_ring(4.0, 7.0, 32)
        radii = np.hypot(ring.points[:, 0], ring.points[:, 2])
        assert radii.min() == pytest.approx(4.0, abs=1e-6)
        assert radii.max() == pytest.approx(7.0, abs=1e-6)
        assert len(tcoords(ring)) == ring.n_points

    @pytest.mark.parametrize("inner, outer", [(7.0, 4.0), (3.0, 3.0), (-1.0, 2.0)])
    def test_rejects_invalid_radii(self, inner, outer):
        with pytest.raises(ValueError):
            VtkUtils.flat_ring(inner, outer, 16)


class TestMakeActor:
    def test_fresh_actor_has_own_mapper_and_no_texture(self):
        mesh = VtkUtils.flat_ring(1.0, 2.0, 8)
        first = VtkUtils.make_actor(mesh)
        second = VtkUtils.make_actor(mesh)
        assert first.GetTexture() is None
        assert first.GetMapper() is not second.GetMapper()
        assert first.GetProperty() is not second.GetProperty()
        assert first.GetMapper().GetInput() is mesh


class TestTransforms:
    def test_yaw_angle_of_fresh_prop_is_zero(self):
        assert VtkUtils.yaw_angle(vtkActor()) == pytest.approx(0.0)

    def test_yaw_angle_reads_rotation(self):
        actor = vtkActor()
        actor.SetPosition(12.0, 0.0, 0.0)
        actor.RotateY(30.0)
        assert VtkUtils.yaw_angle(actor) == pytest.approx(math.radians(30.0))

    def test_yaw_angle_wraps(self):
        actor = vtkActor()
        actor.RotateY(200.0)
        assert VtkUtils.yaw_angle(actor) == pytest.approx(math.radians(-160.0))

    def test_assembly_parts_keep_identity(self):
        assembly = vtkAssembly()
        first, second = vtkActor(), vtkActor()
        assembly.AddPart(first)
        assembly.AddPart(second)
        parts = VtkUtils.assembly_parts(assembly)
        assert len(parts) == 2
        assert parts[0] is first
        assert parts[1] is second
