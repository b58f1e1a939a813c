#
# PROJECT: term3d
# MODULE: term3d/rasterizer.py
# STATUS: Level 2 - Implementation
# TRUTH_LINK: DESIGN.md Section 4.3
# LOG_REF: 2026-10-19
#

"""
Triangle membership and barycentric interpolation.

Two renditions of the same arithmetic live here:

* tri_interpolate() evaluates one triangle at one sample point. It is the
  reference and what fill_triangle_per_cell() loops over.
* interpolate_grid() evaluates one triangle over a whole grid of sample
  points with numpy, in the same operation order, so fill_triangle()
  produces the same buffer as the per-cell loop.

Triangles are seen in 2D by dropping z. A sample on an edge counts as
inside. Depth and shading are barycentric blends divided by 3; that
scaling is part of the output format and is kept as-is.
"""

import math

import numpy as np

from .camera import Camera
from .canvas import BACKGROUND, BACKGROUND_DEPTH, BACKGROUND_VALUE, Depthpixel, FrameBuffer
from .mesh import Triangle

_NAN3 = (math.nan, math.nan, math.nan)


def edge_function(p, q, r) -> float:
    """2D cross product (q - p) x (r - p); z is ignored."""
    return (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])


def clockwise(p, q, r) -> bool:
    return edge_function(p, q, r) < 0.0


def pixel_in_triangle(tri: Triangle, pixel) -> bool:
    p, q, r = tri.vertices
    orientation = edge_function(p, q, r)
    d1 = edge_function(p, q, pixel)
    d2 = edge_function(q, r, pixel)
    d3 = edge_function(r, p, pixel)
    if orientation < 0.0:
        return d1 <= 0.0 and d2 <= 0.0 and d3 <= 0.0
    return d1 >= 0.0 and d2 >= 0.0 and d3 >= 0.0


def barycentric(tri: Triangle, pixel):
    """
    Barycentric weights (l1, l2, l3) of `pixel` by Cramer's rule.

    A zero-area triangle has no weights; NaNs are returned instead so the
    resulting depth loses every merge.
    """
    x, y = pixel[0], pixel[1]
    (x1, y1, _), (x2, y2, _), (x3, y3, _) = tri.vertices
    den = (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)
    if den == 0.0:
        return _NAN3
    l1 = ((y2 - y3) * (x - x3) + (x3 - x2) * (y - y3)) / den
    l2 = ((y3 - y1) * (x - x3) + (x1 - x3) * (y - y3)) / den
    return l1, l2, 1.0 - l1 - l2


def tri_interpolate(tri: Triangle, pixel) -> Depthpixel:
    """Depth and shading of `tri` at `pixel`, or BACKGROUND when outside."""
    if not pixel_in_triangle(tri, pixel):
        return BACKGROUND
    l1, l2, l3 = barycentric(tri, pixel)
    v1, v2, v3 = tri.vertices
    n1, n2, n3 = tri.normals
    depth = (l1 * v1.z + l2 * v2.z + l3 * v3.z) / 3.0
    value = tuple(-(l1 * n1[axis] + l2 * n2[axis] + l3 * n3[axis]) / 3.0
                  for axis in range(3))
    return Depthpixel(depth, value)


def interpolate_grid(tri: Triangle, wx, wy):
    """
    tri_interpolate() over arrays of sample points.

    wx and wy are same-shaped float arrays. Returns (depth, value) with
    value carrying one extra trailing axis of length 3. Cells outside the
    triangle hold the background depth and value.
    """
    p, q, r = tri.vertices
    (x1, y1, z1), (x2, y2, z2), (x3, y3, z3) = p, q, r

    orientation = edge_function(p, q, r)
    d1 = (x2 - x1) * (wy - y1) - (y2 - y1) * (wx - x1)
    d2 = (x3 - x2) * (wy - y2) - (y3 - y2) * (wx - x2)
    d3 = (x1 - x3) * (wy - y3) - (y1 - y3) * (wx - x3)
    if orientation < 0.0:
        inside = (d1 <= 0.0) & (d2 <= 0.0) & (d3 <= 0.0)
    else:
        inside = (d1 >= 0.0) & (d2 >= 0.0) & (d3 >= 0.0)

    # Slivers with a tiny denominator can overflow at cells outside the
    # triangle; np.where drops those cells.
    with np.errstate(over='ignore', invalid='ignore'):
        den = (y2 - y3) * (x1 - x3) + (x3 - x2) * (y1 - y3)
        if den == 0.0:
            l1 = l2 = l3 = np.full(np.shape(wx), np.nan)
        else:
            l1 = ((y2 - y3) * (wx - x3) + (x3 - x2) * (wy - y3)) / den
            l2 = ((y3 - y1) * (wx - x3) + (x1 - x3) * (wy - y3)) / den
            l3 = 1.0 - l1 - l2

        depth = np.where(inside, (l1 * z1 + l2 * z2 + l3 * z3) / 3.0, BACKGROUND_DEPTH)

        n1, n2, n3 = tri.normals
        value = np.stack(
            [-(l1 * n1[axis] + l2 * n2[axis] + l3 * n3[axis]) / 3.0 for axis in range(3)],
            axis=-1)
    value = np.where(inside[..., None], value, np.asarray(BACKGROUND_VALUE))
    return depth, value


def fill_triangle(canvas: FrameBuffer, tri: Triangle, wx, wy) -> int:
    """Rasterize one triangle into `canvas` given its world sample grid."""
    depth, value = interpolate_grid(tri, wx, wy)
    return canvas.merge_array(depth, value)


def fill_triangle_per_cell(canvas: FrameBuffer, tri: Triangle, camera: Camera) -> int:
    """Rasterize one triangle cell by cell. Slow; the reference path."""
    changed = 0
    for row in range(canvas.height):
        for col in range(canvas.width):
            if canvas.merge(row, col, tri_interpolate(tri, camera.to_world(row, col))):
                changed += 1
    return changed
