#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .canvas import Canvas

def draw_line_dda(canvas: Canvas, p1, p2, order, color_idx):
    """
    Draws a line using the DDA algorithm.
    p1, p2 are (x, y) pixel coordinates; `order` is the paint order.
    """
    x1, y1 = int(round(p1[0])), int(round(p1[1]))
    x2, y2 = int(round(p2[0])), int(round(p2[1]))

    dx = x2 - x1
    dy = y2 - y1
    if dx == 0 and dy == 0:
        canvas.set_pixel(x1, y1, order, color_idx)
        return

    step = abs(dx) if abs(dx) > abs(dy) else abs(dy)

    x_inc = dx / step
    y_inc = dy / step

    cx, cy = float(x1), float(y1)
    for _ in range(int(step) + 1):
        canvas.set_pixel(int(round(cx)), int(round(cy)), order, color_idx)
        cx += x_inc; cy += y_inc


def draw_polygon_outline(canvas: Canvas, pts, order, color_idx):
    """Closed outline through pts; the last point joins the first."""
    for i in range(len(pts)):
        draw_line_dda(canvas, pts[i], pts[(i + 1) % len(pts)], order, color_idx)


def draw_marker(canvas: Canvas, p, radius, order, color_idx):
    """Small '+' centered on p."""
    x, y = int(round(p[0])), int(round(p[1]))
    r = max(1, int(radius))
    draw_line_dda(canvas, (x - r, y), (x + r, y), order, color_idx)
    draw_line_dda(canvas, (x, y - r), (x, y + r), order, color_idx)
