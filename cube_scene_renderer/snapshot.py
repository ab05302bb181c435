#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/snapshot.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import json
from dataclasses import dataclass
from typing import Tuple

from .vector import Vec2


def _points(values) -> Tuple[Vec2, ...]:
    return tuple(Vec2.coerce(v) for v in values)


@dataclass(frozen=True)
class CubeSnapshot:
    """
    Already-projected 2D geometry of one cube for one render pass.

      vertex_points_2d  8 vertices, labeled A0..H7 (see topology)
      cross_points_2d   6 cross-section points
      axes_2d           3 cube-local axis tips, anchored at center_2d
      world_axes_2d     3 world axis tips, anchored at world_origin_2d

    Everything is copied into tuples of Vec2 on construction, so later
    changes to the source cube never leak into a renderer. Sizes are not
    checked here; a short sequence surfaces as IndexError when rendered.
    """
    vertex_points_2d: Tuple[Vec2, ...]
    cross_points_2d: Tuple[Vec2, ...]
    axes_2d: Tuple[Vec2, ...]
    world_axes_2d: Tuple[Vec2, ...]
    center_2d: Vec2
    world_origin_2d: Vec2

    def __post_init__(self):
        for name in ('vertex_points_2d', 'cross_points_2d', 'axes_2d', 'world_axes_2d'):
            object.__setattr__(self, name, _points(getattr(self, name)))
        object.__setattr__(self, 'center_2d', Vec2.coerce(self.center_2d))
        object.__setattr__(self, 'world_origin_2d', Vec2.coerce(self.world_origin_2d))

    @classmethod
    def from_cube(cls, cube) -> 'CubeSnapshot':
        """Capture the projected geometry of any cube-like object."""
        if isinstance(cube, cls):
            return cube
        return cls(
            vertex_points_2d=cube.vertex_points_2d,
            cross_points_2d=cube.cross_points_2d,
            axes_2d=cube.axes_2d,
            world_axes_2d=cube.world_axes_2d,
            center_2d=cube.center_2d,
            world_origin_2d=cube.world_origin_2d,
        )

    @classmethod
    def from_dict(cls, data) -> 'CubeSnapshot':
        """Read the camelCase wire shape, e.g. {"vertexPoints2d": [[x, y], ...], ...}."""
        return cls(
            vertex_points_2d=data['vertexPoints2d'],
            cross_points_2d=data['crossPoints2d'],
            axes_2d=data['axes2d'],
            world_axes_2d=data['worldAxes2d'],
            center_2d=data['center2d'],
            world_origin_2d=data['worldOrigin2d'],
        )

    @classmethod
    def from_file(cls, filename) -> 'CubeSnapshot':
        with open(filename, 'r') as f:
            return cls.from_dict(json.load(f))

    def to_dict(self):
        def pts(values):
            return [[p.x, p.y] for p in values]
        return {
            "vertexPoints2d": pts(self.vertex_points_2d),
            "crossPoints2d": pts(self.cross_points_2d),
            "axes2d": pts(self.axes_2d),
            "worldAxes2d": pts(self.world_axes_2d),
            "center2d": [self.center_2d.x, self.center_2d.y],
            "worldOrigin2d": [self.world_origin_2d.x, self.world_origin_2d.y],
        }
