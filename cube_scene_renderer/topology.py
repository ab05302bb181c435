#
# PROJECT: cube-scene-renderer
# MODULE: cube_scene_renderer/topology.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Fixed cube labeling shared by every renderer feature.

   E4------F5      y
   |`.    | `.     |
   |  `A0-----B1   *----- x
   |   |  |   |     \\
   G6--|--H7  |      \\
    `. |   `. |       z
      `C2-----D3
"""

VERTEX_LABELS = ('A0', 'B1', 'C2', 'D3', 'E4', 'F5', 'G6', 'H7')
VERTEX_COUNT = len(VERTEX_LABELS)

# Winding order keeps the border continuous; fill direction is irrelevant.
POINT_FACE_SET = (
    (0, 1, 3, 2),  # front
    (1, 5, 7, 3),  # front right
    (5, 4, 6, 7),  # front left
    (4, 0, 2, 6),  # back
    (4, 5, 1, 0),  # top
    (2, 3, 7, 6),  # bottom
)

# E4, F5, H7, G6
XY_PLANE_FACE = (4, 5, 7, 6)

# Edge axes sit on G6 and point along H7 (x), E4 (y), C2 (z)
EDGE_AXES_ORIGIN = 6
EDGE_AXES_TARGETS = (7, 4, 2)

# Cross-section guides: pairs of cross-point indices, then the loop
# around the back face in vertex indices.
CROSS_POINT_SEGMENTS = ((0, 3), (1, 2), (1, 4), (3, 5))
BACK_FACE_LOOP = ((6, 4), (4, 5), (5, 7), (7, 6))


def face_points(points, face_index):
    """Return the 4 points bounding face `face_index`, in winding order."""
    return [points[i] for i in POINT_FACE_SET[face_index]]


def faces_containing(vertex):
    """Indices of the faces that include `vertex`."""
    if vertex < 0 or vertex >= VERTEX_COUNT:
        raise IndexError(f"vertex {vertex} out of range 0-{VERTEX_COUNT - 1}")
    return [i for i, face in enumerate(POINT_FACE_SET) if vertex in face]
