#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/primitives.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Declarative 2D primitives handed to the plotting surface.

Every primitive is frozen and stores its parallel coordinate sequences as tuples.
`to_dict()` produces the surface's wire shape (camelCase keys, `type`, `id`).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class DataSpecType(str, Enum):
    polygon = "polygon"
    lines = "lines"
    points = "points"


def _check_parallel(kind, **columns):
    lengths = {name: len(values) for name, values in columns.items()}
    if len(set(lengths.values())) > 1:
        detail = ", ".join(f"{k}={v}" for k, v in lengths.items())
        raise ValueError(f"{kind}: parallel sequences differ in length ({detail})")


@dataclass(frozen=True)
class Polygon2dSpecs:
    """Closed polygon; the last vertex joins back to the first."""
    x: Tuple[float, ...]
    y: Tuple[float, ...]
    border_color: Optional[str]
    border_opacity: float
    border_size: float
    fill_color: Optional[str]
    fill_opacity: float
    tag: str

    def __post_init__(self):
        object.__setattr__(self, 'x', tuple(self.x))
        object.__setattr__(self, 'y', tuple(self.y))
        _check_parallel("polygon", x=self.x, y=self.y)

    @property
    def type(self):
        return DataSpecType.polygon

    def to_dict(self):
        return {
            "x": list(self.x),
            "y": list(self.y),
            "borderColor": self.border_color,
            "borderOpacity": self.border_opacity,
            "borderSize": self.border_size,
            "fillColor": self.fill_color,
            "fillOpacity": self.fill_opacity,
            "type": self.type.value,
            "id": self.tag,
        }


@dataclass(frozen=True)
class Lines2dSpecs:
    """
    Bundle of N independent segments.
    Segment i runs from (x0[i], y0[i]) to (x1[i], y1[i]).
    """
    x0: Tuple[float, ...]
    y0: Tuple[float, ...]
    x1: Tuple[float, ...]
    y1: Tuple[float, ...]
    color: Optional[str]
    opacity: float
    size: float
    tag: str

    def __post_init__(self):
        for name in ('x0', 'y0', 'x1', 'y1'):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        _check_parallel("lines", x0=self.x0, y0=self.y0, x1=self.x1, y1=self.y1)
        if not self.x0:
            raise ValueError("lines: a bundle needs at least one segment")

    @property
    def type(self):
        return DataSpecType.lines

    def __len__(self):
        return len(self.x0)

    def segments(self):
        """Yield ((x0, y0), (x1, y1)) per segment."""
        for i in range(len(self.x0)):
            yield (self.x0[i], self.y0[i]), (self.x1[i], self.y1[i])

    def to_dict(self):
        return {
            "x0": list(self.x0),
            "y0": list(self.y0),
            "x1": list(self.x1),
            "y1": list(self.y1),
            "color": self.color,
            "opacity": self.opacity,
            "size": self.size,
            "type": self.type.value,
            "id": self.tag,
        }


@dataclass(frozen=True)
class Points2dSpecs:
    x: Tuple[float, ...]
    y: Tuple[float, ...]
    color: Optional[str]
    opacity: float
    size: float
    tag: str

    def __post_init__(self):
        object.__setattr__(self, 'x', tuple(self.x))
        object.__setattr__(self, 'y', tuple(self.y))
        _check_parallel("points", x=self.x, y=self.y)

    @property
    def type(self):
        return DataSpecType.points

    def to_dict(self):
        return {
            "x": list(self.x),
            "y": list(self.y),
            "color": self.color,
            "opacity": self.opacity,
            "size": self.size,
            "type": self.type.value,
            "id": self.tag,
        }
