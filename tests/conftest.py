from types import SimpleNamespace

import pytest

from cube_scene_renderer import CubeSnapshot


def make_cube():
    """Mutable cube-like object; every point is distinct and easy to trace."""
    return SimpleNamespace(
        vertex_points_2d=[(float(i), 10.0 + i) for i in range(8)],
        cross_points_2d=[(100.0 + j, 200.0 + j) for j in range(6)],
        axes_2d=[(31.0, 30.0), (30.0, 31.0), (29.0, 29.0)],
        world_axes_2d=[(1.0, 0.0), (0.0, 1.0), (-0.5, -0.5)],
        center_2d=(30.0, 30.0),
        world_origin_2d=(0.0, 0.0),
    )


@pytest.fixture
def cube():
    return make_cube()


@pytest.fixture
def snapshot(cube):
    return CubeSnapshot.from_cube(cube)
