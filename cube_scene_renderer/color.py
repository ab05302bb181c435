#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB', 'RRGGBB' or the short '#RGB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) == 3:
        val = ''.join(c * 2 for c in val)
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

# Named colors commonly used in scene option files
_NAMED_RGB = {
    'black': (0, 0, 0),
    'white': (255, 255, 255),
    'red': (255, 0, 0),
    'green': (0, 128, 0),
    'lime': (0, 255, 0),
    'blue': (0, 0, 255),
    'yellow': (255, 255, 0),
    'cyan': (0, 255, 255),
    'magenta': (255, 0, 255),
    'gray': (128, 128, 128),
    'grey': (128, 128, 128),
    'orange': (255, 165, 0),
}

def parse_color(value):
    """Parse a hex string or a basic color name. Returns (r, g, b) or None."""
    if value is None:
        return None
    named = _NAMED_RGB.get(str(value).strip().lower())
    if named is not None:
        return named
    return parse_hex_color(value)

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]

def nearest_ansi8(rgb):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color."""
    r, g, b = rgb
    best_idx = 0
    best_dist = (r - _ANSI8[0][0]) ** 2 + (g - _ANSI8[0][1]) ** 2 + (b - _ANSI8[0][2]) ** 2
    for i in range(1, 8):
        ar, ag, ab = _ANSI8[i]
        d = (r - ar) ** 2 + (g - ag) ** 2 + (b - ab) ** 2
        if d < best_dist:
            best_dist = d
            best_idx = i
    return best_idx

def ansi_index_for(value, default=7):
    """ANSI-8 index for a color option value; unknown colors map to `default`."""
    rgb = parse_color(value)
    if rgb is None:
        return default
    return nearest_ansi8(rgb)
