from dataclasses import FrozenInstanceError

import pytest

from cube_scene_renderer.primitives import (
    DataSpecType,
    Lines2dSpecs,
    Points2dSpecs,
    Polygon2dSpecs,
)


def _polygon(**overrides):
    kwargs = dict(
        x=[0, 1, 1, 0], y=[0, 0, 1, 1],
        border_color="#fff", border_opacity=1.0, border_size=1,
        fill_color="#fff", fill_opacity=0, tag="plane-0",
    )
    kwargs.update(overrides)
    return Polygon2dSpecs(**kwargs)


def test_polygon_stores_tuples_and_serializes():
    poly = _polygon()
    assert poly.x == (0, 1, 1, 0)
    assert poly.type is DataSpecType.polygon
    assert poly.to_dict() == {
        "x": [0, 1, 1, 0],
        "y": [0, 0, 1, 1],
        "borderColor": "#fff",
        "borderOpacity": 1.0,
        "borderSize": 1,
        "fillColor": "#fff",
        "fillOpacity": 0,
        "type": "polygon",
        "id": "plane-0",
    }


def test_polygon_rejects_mismatched_coordinates():
    with pytest.raises(ValueError, match="polygon"):
        _polygon(y=[0, 0, 1])


def test_specs_are_frozen():
    poly = _polygon()
    with pytest.raises(FrozenInstanceError):
        poly.tag = "other"


def test_lines_segments_and_length():
    lines = Lines2dSpecs(x0=[0, 5], y0=[1, 6], x1=[2, 7], y1=[3, 8],
                         color="red", opacity=0.5, size=1, tag="l")
    assert len(lines) == 2
    assert list(lines.segments()) == [((0, 1), (2, 3)), ((5, 6), (7, 8))]
    data = lines.to_dict()
    assert data["type"] == "lines"
    assert data["id"] == "l"
    assert data["x1"] == [2, 7]


def test_lines_need_equal_columns():
    with pytest.raises(ValueError, match="lines"):
        Lines2dSpecs(x0=[0, 1], y0=[0], x1=[0], y1=[0],
                     color=None, opacity=1, size=1, tag="bad")


def test_lines_need_at_least_one_segment():
    with pytest.raises(ValueError, match="at least one segment"):
        Lines2dSpecs(x0=[], y0=[], x1=[], y1=[],
                     color=None, opacity=1, size=1, tag="empty")


def test_points_serialize():
    pts = Points2dSpecs(x=[1], y=[2], color="white", opacity=1.0, size=3, tag="point-t")
    assert pts.to_dict() == {
        "x": [1], "y": [2], "color": "white", "opacity": 1.0,
        "size": 3, "type": "points", "id": "point-t",
    }


def test_points_reject_mismatched_coordinates():
    with pytest.raises(ValueError):
        Points2dSpecs(x=[1, 2], y=[2], color=None, opacity=1, size=3, tag="p")
