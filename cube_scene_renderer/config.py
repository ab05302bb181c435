#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Callable, Optional


def shared_axis_tag(axis: str, name: str) -> str:
    """All three lines of a triple share one tag: x-<name>."""
    return f"x-{name}"


def per_axis_tag(axis: str, name: str) -> str:
    """One tag per axis line: x-<name>, y-<name>, z-<name>."""
    return f"{axis}-{name}"


AXIS_TAG_STRATEGIES = {
    "shared": shared_axis_tag,
    "per-axis": per_axis_tag,
}

# Feature styling used by `SceneOptions.all_enabled()`
DEFAULT_EDGE_COLOR = "#ffffff"
DEFAULT_AXIS_COLORS = ("#e74c3c", "#2ecc71", "#3498db")


@dataclass(frozen=True)
class SceneEdgesOptions:
    """
    Styling for the six face outlines.

    Fallbacks, applied once at construction:
      color     -> #ffffff
      opacity   -> 1.0
    A value of None (or 0 for opacity) counts as missing.
    """
    color: Optional[str] = DEFAULT_EDGE_COLOR
    opacity: float = 1.0

    def __post_init__(self):
        object.__setattr__(self, 'color', self.color or DEFAULT_EDGE_COLOR)
        object.__setattr__(self, 'opacity', self.opacity or 1.0)

    @classmethod
    def from_dict(cls, data) -> 'SceneEdgesOptions':
        _require_mapping("sceneEdges", data)
        return cls(color=data.get('color'), opacity=data.get('opacity'))


@dataclass(frozen=True)
class AxesOptions:
    """
    Styling for one axis triple (3 lines + origin marker).

    Fallbacks, applied once at construction:
      x_color, y_color, z_color -> #e74c3c, #2ecc71, #3498db
      line_size                 -> 1
      edge_opacity              -> 1.0
      intersection_point_size   -> 3
    A value of None or 0 counts as missing.
    """
    x_color: Optional[str] = DEFAULT_AXIS_COLORS[0]
    y_color: Optional[str] = DEFAULT_AXIS_COLORS[1]
    z_color: Optional[str] = DEFAULT_AXIS_COLORS[2]
    line_size: float = 1
    edge_opacity: float = 1.0
    intersection_point_color: Optional[str] = None
    intersection_point_size: float = 3

    def __post_init__(self):
        for name, default in zip(('x_color', 'y_color', 'z_color'), DEFAULT_AXIS_COLORS):
            object.__setattr__(self, name, getattr(self, name) or default)
        object.__setattr__(self, 'line_size', self.line_size or 1)
        object.__setattr__(self, 'edge_opacity', self.edge_opacity or 1.0)
        object.__setattr__(self, 'intersection_point_size',
                           self.intersection_point_size or 3)

    @property
    def colors(self):
        return (self.x_color, self.y_color, self.z_color)

    @classmethod
    def from_dict(cls, data, section="axes") -> 'AxesOptions':
        _require_mapping(section, data)
        return cls(
            x_color=data.get('xColor'),
            y_color=data.get('yColor'),
            z_color=data.get('zColor'),
            line_size=data.get('lineSize'),
            edge_opacity=data.get('edgeOpacity'),
            intersection_point_color=data.get('intersectionPointColor'),
            intersection_point_size=data.get('intersectionPointSize'),
        )


@dataclass(frozen=True)
class SceneOptions:
    """
    Which scene features to draw and how.

    A feature whose options are None is disabled. `xy_plane` and
    `cross_lines` are carried for the configuration surface but the
    ground plane and cross-section guides are always drawn.
    """
    scene_edges: Optional[SceneEdgesOptions] = None
    xy_plane: bool = True
    cross_lines: bool = True
    edge_axes: Optional[AxesOptions] = None
    world_axes: Optional[AxesOptions] = None
    cube_axes: Optional[AxesOptions] = None
    axis_tag: Callable[[str, str], str] = field(default=shared_axis_tag,
                                                compare=False)

    @classmethod
    def all_enabled(cls, axis_tag=shared_axis_tag) -> 'SceneOptions':
        """Every optional feature on, default styling."""
        return cls(
            scene_edges=SceneEdgesOptions(),
            edge_axes=AxesOptions(intersection_point_color=DEFAULT_EDGE_COLOR),
            world_axes=AxesOptions(intersection_point_color=DEFAULT_EDGE_COLOR),
            cube_axes=AxesOptions(intersection_point_color=DEFAULT_EDGE_COLOR),
            axis_tag=axis_tag,
        )

    @classmethod
    def from_dict(cls, data) -> 'SceneOptions':
        """
        Build options from the camelCase configuration surface:
          {"sceneEdges": {"color", "opacity"} | null,
           "xyPlane": bool, "crossLines": bool,
           "edgeAxes" | "worldAxes" | "cubeAxes": {...} | null,
           "axisTags": "shared" | "per-axis"}
        """
        _require_mapping("options", data)
        scene_edges = data.get('sceneEdges')
        strategy = data.get('axisTags', 'shared')
        if strategy not in AXIS_TAG_STRATEGIES:
            raise ValueError(
                f"axisTags must be one of {sorted(AXIS_TAG_STRATEGIES)}, got {strategy!r}")

        return cls(
            scene_edges=SceneEdgesOptions.from_dict(scene_edges) if scene_edges is not None else None,
            xy_plane=bool(data.get('xyPlane', True)),
            cross_lines=bool(data.get('crossLines', True)),
            edge_axes=_axes_or_none(data, 'edgeAxes'),
            world_axes=_axes_or_none(data, 'worldAxes'),
            cube_axes=_axes_or_none(data, 'cubeAxes'),
            axis_tag=AXIS_TAG_STRATEGIES[strategy],
        )

    @classmethod
    def from_file(cls, filename) -> 'SceneOptions':
        with open(filename, 'r') as f:
            return cls.from_dict(json.load(f))


def _axes_or_none(data, key):
    section = data.get(key)
    if section is None:
        return None
    return AxesOptions.from_dict(section, section=key)


def _require_mapping(section, data):
    if not isinstance(data, Mapping):
        raise ValueError(f"{section}: expected an object, got {type(data).__name__}")
