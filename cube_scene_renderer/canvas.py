#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

class Canvas:
    """
    Pixel grid packed into 2x4 terminal cells.

    `order_buffer` holds the paint order of the primitive that last set each
    pixel, so later primitives cover earlier ones like on the plotting
    surface. Each cell takes the color of its most recent pixel.
    """
    __slots__ = ['w', 'h', 'grid', 'order_buffer', 'c_grid', 'cell_order']

    # Braille dot mapping for 2x4 grid
    #  1 4
    #  2 5
    #  3 6
    #  7 8
    # 0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80
    BRAILLE_REMAP = [0x01, 0x02, 0x04, 0x40, 0x08, 0x10, 0x20, 0x80]

    def __init__(self, w, h):
        self.w, self.h = w, h
        # Grid stores 8-bit masks for 2x4 cells
        self.grid = [[0] * (w // 2 + 1) for _ in range(h // 4 + 1)]
        self.order_buffer = [[-1] * w for _ in range(h)]
        # Color grid stores color index per-cell (resolution w/2 x h/4)
        self.c_grid = [[7] * (w // 2 + 1) for _ in range(h // 4 + 1)]
        self.cell_order = [[-1] * (w // 2 + 1) for _ in range(h // 4 + 1)]

    def set_pixel(self, x, y, order, color_idx):
        if x < 0 or x >= self.w or y < 0 or y >= self.h: return

        if order >= self.order_buffer[y][x]:
            self.order_buffer[y][x] = order
            cx, cy = x >> 1, y >> 2
            # Bit index 0-7: 0,1,2,3 for left col; 4,5,6,7 for right col
            self.grid[cy][cx] |= (1 << ((y & 3) + (x & 1) * 4))

            if order >= self.cell_order[cy][cx]:
                self.cell_order[cy][cx] = order
                self.c_grid[cy][cx] = color_idx

def render_cell_ascii(mask: int) -> str:
    """
    Renders a 2x4 cell mask as an ASCII character based on pixel density.
    Used when Braille is unavailable.
    """
    if not mask:
        return ' '

    density = bin(mask).count('1')
    chars = " .:-=+*#%@"
    return chars[density] if density < len(chars) else '@'

def render_cell_braille(mask: int) -> str:
    """Renders a 2x4 cell mask as a Unicode Braille character."""
    if not mask:
        return ' '
    b = sum(Canvas.BRAILLE_REMAP[i] for i in range(8) if mask & (1 << i))
    return chr(0x2800 + b)
