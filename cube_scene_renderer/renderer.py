#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from typing import List

from .config import AxesOptions, SceneOptions, shared_axis_tag
from .primitives import Lines2dSpecs, Points2dSpecs, Polygon2dSpecs
from .snapshot import CubeSnapshot
from .topology import (
    BACK_FACE_LOOP,
    CROSS_POINT_SEGMENTS,
    EDGE_AXES_ORIGIN,
    EDGE_AXES_TARGETS,
    POINT_FACE_SET,
    XY_PLANE_FACE,
)
from .vector import Vec2

XY_PLANE_COLOR = "#0e2845"
XY_PLANE_FILL_OPACITY = 0.5
CROSS_LINES_COLOR = "#079992"
CROSS_LINES_OPACITY = 0.5


def draw_axis(p: Vec2, v: Vec2, color, opacity, size, tag) -> Lines2dSpecs:
    """One-segment bundle from p to v."""
    return Lines2dSpecs(
        x0=(p.x,), y0=(p.y,),
        x1=(v.x,), y1=(v.y,),
        color=color,
        opacity=opacity,
        size=size,
        tag=tag,
    )


def draw_axes(p0: Vec2, vx: Vec2, vy: Vec2, vz: Vec2, name: str,
              axes_options: AxesOptions, axis_tag=shared_axis_tag):
    """
    Draw an axis triple anchored at p0.

    Always returns 4 primitives: the x, y and z lines (tagged through
    `axis_tag(letter, name)`) followed by the origin marker `point-<name>`.
    """
    opacity = axes_options.edge_opacity
    size = axes_options.line_size

    lines = [
        draw_axis(p0, target, color, opacity, size, axis_tag(letter, name))
        for letter, target, color in zip("xyz", (vx, vy, vz), axes_options.colors)
    ]

    center_point = Points2dSpecs(
        x=(p0.x,),
        y=(p0.y,),
        color=axes_options.intersection_point_color,
        opacity=1.0,
        size=axes_options.intersection_point_size,
        tag=f"point-{name}",
    )

    return lines + [center_point]


class SceneCubeRenderer:
    """
    Stateless projection of one cube snapshot into 2D primitives.

    The snapshot is captured by value at construction; build a new
    renderer per frame when the cube moves.
    """

    def __init__(self, cube, scene_options: SceneOptions):
        self.cube = CubeSnapshot.from_cube(cube)
        self.scene_options = scene_options

    def render(self) -> list:
        """
        Concatenate every feature in paint order. Later entries paint over
        earlier ones. The ground plane is emitted twice: once beneath the
        edge axes and once above them.
        """
        return [
            *self.draw_box(),
            *self.draw_xy_plane(),
            *self.draw_edges(),
            *self.draw_xy_plane(),
            *self.draw_cross_section_lines(),
            *self.draw_world_axes(),
            *self.draw_cube_axes(),
        ]

    def draw_box(self) -> List[Polygon2dSpecs]:
        scene_edges = self.scene_options.scene_edges
        if scene_edges is None:
            return []

        p = self.cube.vertex_points_2d
        data = []
        for index, point_indices in enumerate(POINT_FACE_SET):
            data.append(Polygon2dSpecs(
                x=[p[i].x for i in point_indices],
                y=[p[i].y for i in point_indices],
                border_color=scene_edges.color,
                border_opacity=scene_edges.opacity,
                border_size=1,
                fill_color=scene_edges.color,
                fill_opacity=0,
                tag=f"plane-{index}",
            ))
        return data

    def draw_edges(self):
        """
        E4
        |      y
        |      |
        |      *----- x
        G6-------H7
         \\
          C2   origin G6, x toward H7, y toward E4, z toward C2
        """
        edge_axes = self.scene_options.edge_axes
        if edge_axes is None:
            return []
        p = self.cube.vertex_points_2d
        vx, vy, vz = (p[i] for i in EDGE_AXES_TARGETS)
        return draw_axes(p[EDGE_AXES_ORIGIN], vx, vy, vz, "edge", edge_axes,
                         self.scene_options.axis_tag)

    def draw_world_axes(self):
        world_axes = self.scene_options.world_axes
        if world_axes is None:
            return []
        v = self.cube.world_axes_2d
        return draw_axes(self.cube.world_origin_2d, v[0], v[1], v[2], "worldAxes",
                         world_axes, self.scene_options.axis_tag)

    def draw_cube_axes(self):
        cube_axes = self.scene_options.cube_axes
        if cube_axes is None:
            return []
        v = self.cube.axes_2d
        return draw_axes(self.cube.center_2d, v[0], v[1], v[2], "axes",
                         cube_axes, self.scene_options.axis_tag)

    def draw_xy_plane(self) -> List[Polygon2dSpecs]:
        p = self.cube.vertex_points_2d
        polygon = Polygon2dSpecs(
            x=[p[i].x for i in XY_PLANE_FACE],
            y=[p[i].y for i in XY_PLANE_FACE],
            fill_color=XY_PLANE_COLOR,
            fill_opacity=XY_PLANE_FILL_OPACITY,
            border_color=XY_PLANE_COLOR,
            border_opacity=1.0,
            border_size=1,
            tag="xy-plane",
        )
        return [polygon]

    def draw_cross_section_lines(self) -> List[Lines2dSpecs]:
        """
        Four guides between cross points (i0-l3, j1-k2, j1-m4, l3-n5)
        followed by the loop G6-E4-F5-H7-G6 around the ground plane.
        """
        p = self.cube.cross_points_2d
        t = self.cube.vertex_points_2d
        pairs = ([(p[a], p[b]) for a, b in CROSS_POINT_SEGMENTS] +
                 [(t[a], t[b]) for a, b in BACK_FACE_LOOP])

        lines = Lines2dSpecs(
            x0=[a.x for a, _ in pairs],
            y0=[a.y for a, _ in pairs],
            x1=[b.x for _, b in pairs],
            y1=[b.y for _, b in pairs],
            color=CROSS_LINES_COLOR,
            opacity=CROSS_LINES_OPACITY,
            size=1,
            tag="cross-section-lines",
        )
        return [lines]
