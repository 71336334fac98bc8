"""
VTK and Geometry Utilities
Helper functions for building textured primitives and reading transforms.
"""
import math

import pyvista as pv
from vtkmodules.vtkRenderingCore import vtkAssembly, vtkProp3D

# Annuli are modelled in the XZ plane, i.e. perpendicular to the vertical axis
UP_AXIS: tuple[float, float, float] = (0.0, 1.0, 0.0)


class VtkUtils:
    @staticmethod
    def textured_sphere(radius: float, resolution: int) -> pv.PolyData:
        """
        Create a sphere with spherical texture coordinates and poles on the Y axis.

        vtkTextureMapToSphere wraps the texture around Z, so the sphere is mapped
        first and then tilted so that the texture equator lies in the XZ plane.
        """
        sphere = pv.Sphere(
            radius=radius,
            theta_resolution=resolution,
            phi_resolution=resolution,
        )
        sphere.texture_map_to_sphere(inplace=True)
        sphere.rotate_x(-90.0, inplace=True)
        return sphere

    @staticmethod
    def flat_ring(inner: float, outer: float, segments: int) -> pv.PolyData:
        """
        Create a flat annulus centred on the origin, perpendicular to the Y axis,
        with planar texture coordinates spanning its bounding square.

        Raises:
            ValueError: If the radii do not describe an annulus.
        """
        if not 0.0 <= inner < outer:
            raise ValueError(f"Expected 0 <= inner < outer, got {inner}, {outer}.")

        ring = pv.Disc(
            center=(0.0, 0.0, 0.0),
            inner=inner,
            outer=outer,
            normal=UP_AXIS,
            r_res=1,
            c_res=segments,
        )
        ring.texture_map_to_plane(
            origin=(-outer, 0.0, -outer),
            point_u=(outer, 0.0, -outer),
            point_v=(-outer, 0.0, outer),
            inplace=True,
        )
        return ring

    @staticmethod
    def make_actor(mesh: pv.DataSet) -> pv.Actor:
        """Wrap a dataset in its own mapper and actor (nothing is shared)."""
        return pv.Actor(mapper=pv.DataSetMapper(mesh))

    @staticmethod
    def yaw_angle(prop: vtkProp3D) -> float:
        """
        Angle (radians, in (-pi, pi]) of the rotation about Y stored in a prop.

        Only valid for props rotated exclusively about their Y axis.
        """
        m = prop.GetMatrix()
        return math.atan2(m.GetElement(0, 2), m.GetElement(0, 0))

    @staticmethod
    def assembly_parts(assembly: vtkAssembly) -> list[vtkProp3D]:
        """Direct children of an assembly, in insertion order."""
        parts = assembly.GetParts()
        return [parts.GetItemAsObject(i) for i in range(parts.GetNumberOfItems())]
