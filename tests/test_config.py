import json

import pytest

from cube_scene_renderer.config import (
    DEFAULT_AXIS_COLORS,
    DEFAULT_EDGE_COLOR,
    AxesOptions,
    SceneEdgesOptions,
    SceneOptions,
    per_axis_tag,
    shared_axis_tag,
)


def test_tag_strategies():
    assert [shared_axis_tag(a, "edge") for a in "xyz"] == ["x-edge"] * 3
    assert [per_axis_tag(a, "edge") for a in "xyz"] == ["x-edge", "y-edge", "z-edge"]


def test_axes_defaults_resolved_at_construction():
    opts = AxesOptions(x_color="red", y_color="green", z_color="blue",
                       line_size=None, edge_opacity=None,
                       intersection_point_size=None)
    assert opts.line_size == 1
    assert opts.edge_opacity == 1.0
    assert opts.intersection_point_size == 3
    assert opts.colors == ("red", "green", "blue")


def test_zero_counts_as_missing():
    assert AxesOptions(edge_opacity=0).edge_opacity == 1.0
    assert SceneEdgesOptions(color="#fff", opacity=0).opacity == 1.0


def test_explicit_values_are_kept():
    opts = AxesOptions(line_size=2, edge_opacity=0.5, intersection_point_size=5)
    assert (opts.line_size, opts.edge_opacity, opts.intersection_point_size) == (2, 0.5, 5)


def test_everything_disabled_by_default():
    opts = SceneOptions()
    assert opts.scene_edges is None
    assert opts.edge_axes is None
    assert opts.world_axes is None
    assert opts.cube_axes is None
    assert opts.axis_tag is shared_axis_tag


def test_all_enabled():
    opts = SceneOptions.all_enabled(axis_tag=per_axis_tag)
    assert opts.scene_edges is not None
    assert opts.edge_axes is not None
    assert opts.world_axes is not None
    assert opts.cube_axes is not None
    assert opts.axis_tag is per_axis_tag


def test_from_dict_reads_camel_case():
    opts = SceneOptions.from_dict({
        "sceneEdges": {"color": "#fff", "opacity": 0.8},
        "xyPlane": True,
        "crossLines": False,
        "edgeAxes": {
            "xColor": "red", "yColor": "green", "zColor": "blue",
            "lineSize": 2, "edgeOpacity": 0.5,
            "intersectionPointColor": "white", "intersectionPointSize": 4,
        },
        "worldAxes": None,
        "axisTags": "per-axis",
    })
    assert opts.scene_edges == SceneEdgesOptions(color="#fff", opacity=0.8)
    assert opts.cross_lines is False
    assert opts.edge_axes == AxesOptions(
        x_color="red", y_color="green", z_color="blue", line_size=2,
        edge_opacity=0.5, intersection_point_color="white",
        intersection_point_size=4)
    assert opts.world_axes is None
    assert opts.cube_axes is None
    assert opts.axis_tag is per_axis_tag


def test_from_dict_applies_fallbacks():
    opts = SceneOptions.from_dict({"cubeAxes": {"xColor": "red"}})
    assert opts.cube_axes.line_size == 1
    assert opts.cube_axes.edge_opacity == 1.0
    assert opts.cube_axes.intersection_point_size == 3
    assert opts.cube_axes.x_color == "red"
    assert opts.cube_axes.y_color == DEFAULT_AXIS_COLORS[1]


def test_from_dict_rejects_unknown_tag_strategy():
    with pytest.raises(ValueError, match="axisTags"):
        SceneOptions.from_dict({"axisTags": "random"})


def test_from_dict_rejects_non_mapping_sections():
    with pytest.raises(ValueError, match="edgeAxes"):
        SceneOptions.from_dict({"edgeAxes": ["red", "green", "blue"]})
    with pytest.raises(ValueError, match="options"):
        SceneOptions.from_dict([])


def test_from_file(tmp_path):
    path = tmp_path / "scene.json"
    path.write_text(json.dumps({"sceneEdges": {"color": "#abc"}}))
    opts = SceneOptions.from_file(str(path))
    assert opts.scene_edges.color == "#abc"
    assert opts.scene_edges.opacity == 1.0


def test_empty_sections_enable_features_with_fallbacks(snapshot):
    from cube_scene_renderer import SceneCubeRenderer

    opts = SceneOptions.from_dict({"sceneEdges": {}, "edgeAxes": {}})
    assert opts.scene_edges == SceneEdgesOptions()
    assert opts.edge_axes == AxesOptions()

    tags = [p.tag for p in SceneCubeRenderer(snapshot, opts).render()]
    for i in range(6):
        assert f"plane-{i}" in tags
    assert "point-edge" in tags


def test_null_section_still_disables_feature():
    opts = SceneOptions.from_dict({"sceneEdges": None, "worldAxes": None})
    assert opts.scene_edges is None
    assert opts.world_axes is None


def test_omitted_color_resolves_the_same_everywhere():
    assert SceneEdgesOptions().color == DEFAULT_EDGE_COLOR
    assert SceneEdgesOptions(color=None).color == DEFAULT_EDGE_COLOR
    assert SceneEdgesOptions.from_dict({}).color == DEFAULT_EDGE_COLOR
    assert AxesOptions.from_dict({}).colors == DEFAULT_AXIS_COLORS
    assert AxesOptions(x_color=None).colors == DEFAULT_AXIS_COLORS
