#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/preview.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Text preview of a primitive list.

Stands in for the plotting surface when all you have is a terminal: fits
the primitives' bounding box to a braille (or ASCII) canvas and returns one
string per terminal row.
"""

from .canvas import Canvas, render_cell_ascii, render_cell_braille
from .color import ansi_index_for
from .primitives import Lines2dSpecs, Points2dSpecs, Polygon2dSpecs
from .rasterizer import draw_line_dda, draw_marker, draw_polygon_outline


def _bounds(primitives):
    xs, ys = [], []
    for prim in primitives:
        if isinstance(prim, Lines2dSpecs):
            xs.extend(prim.x0); xs.extend(prim.x1)
            ys.extend(prim.y0); ys.extend(prim.y1)
        else:
            xs.extend(prim.x)
            ys.extend(prim.y)
    if not xs:
        return None
    return min(xs), min(ys), max(xs), max(ys)


def _color_of(prim):
    if isinstance(prim, Polygon2dSpecs):
        return ansi_index_for(prim.border_color)
    return ansi_index_for(prim.color)


def preview_lines(primitives, width=80, height=24, use_color=True,
                  use_braille=True, flip_y=True, margin=1):
    """
    Rasterize `primitives` into `height` rows of `width` characters.

    Primitives are painted in list order. With flip_y the y axis points up,
    as on the plotting surface.
    """
    W = width * 2
    H = height * 4
    canv = Canvas(W, H)

    box = _bounds(primitives)
    if box is not None:
        min_x, min_y, max_x, max_y = box
        span_x = max(max_x - min_x, 1e-9)
        span_y = max(max_y - min_y, 1e-9)
        usable_w = max(W - 1 - 2 * margin, 1)
        usable_h = max(H - 1 - 2 * margin, 1)
        scale = min(usable_w / span_x, usable_h / span_y)
        off_x = margin + (usable_w - span_x * scale) / 2
        off_y = margin + (usable_h - span_y * scale) / 2

        def to_px(x, y):
            px = off_x + (x - min_x) * scale
            py = off_y + (y - min_y) * scale
            if flip_y:
                py = H - 1 - py
            return (px, py)

        for order, prim in enumerate(primitives):
            c_idx = _color_of(prim)
            if isinstance(prim, Polygon2dSpecs):
                pts = [to_px(x, y) for x, y in zip(prim.x, prim.y)]
                draw_polygon_outline(canv, pts, order, c_idx)
            elif isinstance(prim, Lines2dSpecs):
                for (x0, y0), (x1, y1) in prim.segments():
                    draw_line_dda(canv, to_px(x0, y0), to_px(x1, y1), order, c_idx)
            elif isinstance(prim, Points2dSpecs):
                for x, y in zip(prim.x, prim.y):
                    draw_marker(canv, to_px(x, y), prim.size // 2, order, c_idx)
            else:
                raise TypeError(f"cannot preview {type(prim).__name__}")

    render_cell = render_cell_braille if use_braille else render_cell_ascii
    rows = []
    for y in range(height):
        row_grid = canv.grid[y]
        row_color = canv.c_grid[y]
        chars = []
        for x in range(width):
            mask = row_grid[x]
            char = render_cell(mask)
            if use_color and mask:
                char = f"\x1b[3{row_color[x]}m{char}\x1b[0m"
            chars.append(char)
        rows.append(''.join(chars))
    return rows
