#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .vector import Vec2
from .topology import POINT_FACE_SET, VERTEX_LABELS
from .primitives import DataSpecType, Polygon2dSpecs, Lines2dSpecs, Points2dSpecs
from .config import (
    SceneOptions, SceneEdgesOptions, AxesOptions, shared_axis_tag, per_axis_tag,
)
from .snapshot import CubeSnapshot
from .renderer import SceneCubeRenderer, draw_axes
from .camera import Camera, project_demo_cube
from .preview import preview_lines
