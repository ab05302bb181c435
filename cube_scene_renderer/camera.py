#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Demo geometry provider.

The renderer only consumes projected points; this module produces them for
a plain unit cube so the CLI and tests have something realistic to draw.
"""

import math

from .snapshot import CubeSnapshot

# Labeled corners of a cube of half-size 1, see topology for the layout
CUBE_CORNERS = (
    (-1,  1,  1), ( 1,  1,  1), (-1, -1,  1), ( 1, -1,  1),   # A0 B1 C2 D3
    (-1,  1, -1), ( 1,  1, -1), (-1, -1, -1), ( 1, -1, -1),   # E4 F5 G6 H7
)

# Cross-section points are edge midpoints: i0 A0-B1, j1 A0-C2, k2 B1-D3,
# l3 C2-D3, m4 C2-G6, n5 D3-H7
CROSS_EDGES = ((0, 1), (0, 2), (1, 3), (2, 3), (2, 6), (3, 7))


class Camera:
    """
    Orbital camera looking at the world origin.

    Uses the same inline rotation + perspective as the terminal wireframe
    renderer; output is in normalized screen units with y up.
    """
    __slots__ = ('pitch', 'yaw', 'distance', 'fov', 'near')

    def __init__(self, yaw: float = 0.6, pitch: float = 0.4,
                 distance: float = 8.0, fov: float = 60.0, near: float = 0.1):
        self.yaw = yaw           # Rotation around Y axis (radians)
        self.pitch = pitch       # Rotation around X axis (radians)
        self.distance = distance # Camera Z offset
        self.fov = fov           # Field of view (degrees)
        self.near = near

    def project(self, points):
        """Project (x, y, z) world points to (x, y) screen points."""
        f_tan = 1.0 / math.tan(math.radians(self.fov) / 2.0)
        cx_r = math.cos(self.pitch)
        sx_r = math.sin(self.pitch)
        cy_r = math.cos(self.yaw)
        sy_r = math.sin(self.yaw)

        m0, m1, m2 = cy_r, sx_r * sy_r, cx_r * sy_r
        m3, m4, m5 = 0,    cx_r,        -sx_r
        m6, m7, m8 = -sy_r, sx_r * cy_r, cx_r * cy_r

        out = []
        for vx, vy, vz in points:
            rz = vx * m6 + vy * m7 + vz * m8 + self.distance
            if rz <= self.near:
                raise ValueError(
                    f"point ({vx}, {vy}, {vz}) is behind the near plane; "
                    f"increase the camera distance")
            rx = vx * m0 + vy * m1 + vz * m2
            ry = vx * m3 + vy * m4 + vz * m5
            out.append((rx * f_tan / rz, ry * f_tan / rz))
        return out


def project_demo_cube(camera: Camera, half_size: float = 1.0,
                      offset=(0.0, 0.0, 0.0), world_axis_length: float = 2.0) -> CubeSnapshot:
    """Axis-aligned cube centered at `offset`, projected through `camera`."""
    ox, oy, oz = offset
    s = half_size
    corners = [(x * s + ox, y * s + oy, z * s + oz) for x, y, z in CUBE_CORNERS]
    cross = [tuple((corners[a][k] + corners[b][k]) / 2 for k in range(3))
             for a, b in CROSS_EDGES]
    center = (ox, oy, oz)
    axes = [(ox + s, oy, oz), (ox, oy + s, oz), (ox, oy, oz + s)]
    L = world_axis_length
    world_axes = [(L, 0.0, 0.0), (0.0, L, 0.0), (0.0, 0.0, L)]

    return CubeSnapshot(
        vertex_points_2d=camera.project(corners),
        cross_points_2d=camera.project(cross),
        axes_2d=camera.project(axes),
        world_axes_2d=camera.project(world_axes),
        center_2d=camera.project([center])[0],
        world_origin_2d=camera.project([(0.0, 0.0, 0.0)])[0],
    )
