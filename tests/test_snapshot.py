import json
from types import SimpleNamespace

import pytest

from cube_scene_renderer import CubeSnapshot, Vec2


def test_vec2_coerce_accepts_common_shapes():
    assert Vec2.coerce((1, 2)) == Vec2(1, 2)
    assert Vec2.coerce([1, 2]) == Vec2(1, 2)
    assert Vec2.coerce({"x": 1, "y": 2}) == Vec2(1, 2)
    assert Vec2.coerce(SimpleNamespace(x=1, y=2)) == Vec2(1, 2)
    v = Vec2(3, 4)
    assert Vec2.coerce(v) is v


def test_vec2_is_immutable():
    v = Vec2(1, 2)
    with pytest.raises(AttributeError):
        v.x = 5
    assert tuple(v) == (1.0, 2.0)
    assert v[1] == 2.0
    with pytest.raises(IndexError):
        v[2]


def test_vec2_arithmetic():
    assert Vec2(1, 2) + Vec2(3, 4) == Vec2(4, 6)
    assert Vec2(3, 4) - Vec2(1, 1) == Vec2(2, 3)
    assert Vec2(1, 2) * 2 == Vec2(2, 4)


def test_from_cube_copies_points(cube):
    snap = CubeSnapshot.from_cube(cube)
    assert len(snap.vertex_points_2d) == 8
    assert snap.vertex_points_2d[3] == Vec2(3, 13)
    assert snap.center_2d == Vec2(30, 30)

    cube.vertex_points_2d[3] = (-1.0, -1.0)
    cube.center_2d = (0.0, 0.0)
    assert snap.vertex_points_2d[3] == Vec2(3, 13)
    assert snap.center_2d == Vec2(30, 30)


def test_from_cube_returns_snapshot_unchanged(snapshot):
    assert CubeSnapshot.from_cube(snapshot) is snapshot


def test_dict_round_trip_and_file(snapshot, tmp_path):
    data = snapshot.to_dict()
    assert data["vertexPoints2d"][0] == [0.0, 10.0]
    assert data["worldOrigin2d"] == [0.0, 0.0]

    path = tmp_path / "cube.json"
    path.write_text(json.dumps(data))
    assert CubeSnapshot.from_file(str(path)) == snapshot


def test_missing_key_fails_fast(snapshot):
    data = snapshot.to_dict()
    del data["crossPoints2d"]
    with pytest.raises(KeyError):
        CubeSnapshot.from_dict(data)
