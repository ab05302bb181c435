#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/vector.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from collections.abc import Mapping


class Vec2:
    """Immutable 2-component screen-space point."""
    __slots__ = ('x', 'y')

    def __init__(self, x: float, y: float):
        object.__setattr__(self, 'x', float(x))
        object.__setattr__(self, 'y', float(y))

    def __setattr__(self, name, value):
        raise AttributeError("Vec2 is immutable")

    def __repr__(self):
        return f"Vec2({self.x:.2f}, {self.y:.2f})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __getitem__(self, index):
        if index == 0: return self.x
        if index == 1: return self.y
        raise IndexError("Vec2 index out of range")

    def __eq__(self, other):
        if isinstance(other, Vec2):
            return self.x == other.x and self.y == other.y
        return NotImplemented

    def __hash__(self):
        return hash((self.x, self.y))

    def __add__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x + other.x, self.y + other.y)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Vec2):
            return Vec2(self.x - other.x, self.y - other.y)
        return NotImplemented

    def __mul__(self, scalar):
        return Vec2(self.x * scalar, self.y * scalar)

    @classmethod
    def coerce(cls, value) -> 'Vec2':
        """
        Build a Vec2 from whatever the geometry side hands over.
        Accepts: Vec2, objects with .x/.y, {'x':..,'y':..} mappings,
        or (x, y) sequences.
        """
        if isinstance(value, Vec2):
            return value
        if isinstance(value, Mapping):
            return cls(value['x'], value['y'])
        if hasattr(value, 'x') and hasattr(value, 'y'):
            return cls(value.x, value.y)
        x, y = value[0], value[1]
        return cls(x, y)
