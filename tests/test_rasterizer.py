import math
import warnings

import numpy as np
import pytest

from term3d.camera import Camera, Display
from term3d.canvas import BACKGROUND, FrameBuffer
from term3d.math_utils import Vec3
from term3d.mesh import Triangle
from term3d.rasterizer import (barycentric, clockwise, fill_triangle,
                               fill_triangle_per_cell, interpolate_grid,
                               pixel_in_triangle, tri_interpolate)

ZERO = Vec3(0, 0, 0)
CORNERS = [Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1)]
TRI = Triangle(CORNERS, [ZERO] * 3)
SHADED = Triangle(CORNERS, [Vec3(3, 0, 0), Vec3(0, 3, 0), Vec3(0, 0, 3)])


def test_point_inside_reference_triangle():
    assert pixel_in_triangle(TRI, (0.25, 0.25))


def test_point_outside_reference_triangle():
    assert not pixel_in_triangle(TRI, (1.0, 1.0))
    assert not pixel_in_triangle(TRI, (-0.1, 0.5))


def test_clockwise_flips_with_vertex_order():
    p, q, r = Vec3(2, 3, 0), Vec3(6, 7, 0), Vec3(4, -2, 0)
    assert clockwise(p, q, r)
    assert not clockwise(q, p, r)


@pytest.mark.parametrize("order", [(0, 1, 2), (0, 2, 1), (2, 1, 0)])
def test_membership_ignores_winding(order):
    tri = Triangle([CORNERS[i] for i in order], [ZERO] * 3)
    assert pixel_in_triangle(tri, (0.25, 0.25))
    assert not pixel_in_triangle(tri, (0.8, 0.8))


@pytest.mark.parametrize("order", [(0, 1, 2), (1, 0, 2)])
@pytest.mark.parametrize("point", [(0.5, 0.5), (0.0, 0.3), (1.0, 0.0)])
def test_samples_on_edges_are_inside(order, point):
    tri = Triangle([CORNERS[i] for i in order], [ZERO] * 3)
    assert pixel_in_triangle(tri, point)


@pytest.mark.parametrize("point", [(0.25, 0.25), (0.1, 0.6), (0.5, 0.2), (0.0, 0.0), (0.3, 0.7)])
def test_barycentric_weights_sum_to_one(point):
    weights = barycentric(TRI, point)
    assert sum(weights) == pytest.approx(1.0)
    for w in weights:
        assert -1e-12 <= w <= 1.0 + 1e-12


def test_barycentric_at_vertices():
    assert barycentric(TRI, (1.0, 0.0)) == pytest.approx((1.0, 0.0, 0.0))
    assert barycentric(TRI, (0.0, 1.0)) == pytest.approx((0.0, 1.0, 0.0))
    assert barycentric(TRI, (0.0, 0.0)) == pytest.approx((0.0, 0.0, 1.0))


def test_interpolated_depth_and_shading_are_divided_by_three():
    px = tri_interpolate(SHADED, (0.25, 0.25))
    # weights are (0.25, 0.25, 0.5); only the third vertex has z = 1
    assert px.depth == pytest.approx(0.5 / 3)
    assert px.value == pytest.approx((-0.25, -0.25, -0.5))


def test_outside_gives_background():
    assert tri_interpolate(SHADED, (2.0, 2.0)) == BACKGROUND


def test_degenerate_triangle_gives_nan_and_never_wins():
    flat = Triangle([Vec3(0, 0, 0), Vec3(1, 1, 5), Vec3(2, 2, 9)], [Vec3(0, 0, 1)] * 3)
    assert all(math.isnan(w) for w in barycentric(flat, (1.0, 1.0)))
    px = tri_interpolate(flat, (1.0, 1.0))
    assert math.isnan(px.depth)

    canv = FrameBuffer(Display(1, 1))
    assert not canv.merge(0, 0, px)
    assert canv[0, 0] == BACKGROUND


def test_degenerate_triangle_on_grid_leaves_background():
    flat = Triangle([Vec3(0, 0, 0), Vec3(1, 1, 5), Vec3(2, 2, 9)], [Vec3(0, 0, 1)] * 3)
    display = Display(4, 4)
    camera = Camera(0, 0, 1, 1)
    canv = FrameBuffer(display)
    assert fill_triangle(canv, flat, *camera.world_grid(display)) == 0
    assert not canv.covered().any()


@pytest.mark.parametrize("tri", [
    SHADED,
    Triangle([Vec3(0.3, 0.2, 0.5), Vec3(7.1, 1.4, -0.2), Vec3(2.2, 6.7, 0.9)],
             [Vec3(0.1, 0.2, 0.3), Vec3(-0.4, 0.5, 0.0), Vec3(0.9, -0.8, 0.7)]),
    Triangle([Vec3(6, 6, 1), Vec3(0, 6, 2), Vec3(3, 0, 3)],
             [Vec3(0, 0, 1), Vec3(0, 1, 0), Vec3(1, 0, 0)]),
])
def test_grid_matches_per_sample(tri):
    display = Display(9, 8)
    camera = Camera(-0.5, -0.5, 1.0, 1.0)
    wx, wy = camera.world_grid(display)
    depth, value = interpolate_grid(tri, wx, wy)
    for row in range(display.height):
        for col in range(display.width):
            px = tri_interpolate(tri, camera.to_world(row, col))
            assert depth[row, col] == px.depth
            assert tuple(value[row, col]) == px.value


def test_fill_paths_agree():
    tri = Triangle([Vec3(0.3, 0.2, 0.5), Vec3(7.1, 1.4, -0.2), Vec3(2.2, 6.7, 0.9)],
                   [Vec3(0.1, 0.2, 0.3), Vec3(-0.4, 0.5, 0.0), Vec3(0.9, -0.8, 0.7)])
    display = Display(10, 10)
    camera = Camera(0, 0, 0.8, 1.0)
    a = FrameBuffer(display)
    b = FrameBuffer(display)
    changed_a = fill_triangle(a, tri, *camera.world_grid(display))
    changed_b = fill_triangle_per_cell(b, tri, camera)
    assert changed_a == changed_b > 0
    np.testing.assert_array_equal(a.depth, b.depth)
    np.testing.assert_array_equal(a.value, b.value)


def test_sliver_triangle_raises_no_float_warnings():
    # The denominator is about 1e-308, so weights overflow to inf at wy >= 2.
    sliver = Triangle([Vec3(1, 0, 0), Vec3(0, 1e-308, 0), Vec3(0, 0, 0)], [ZERO] * 3)
    wx, wy = Camera(0, 0, 1, 1).world_grid(Display(4, 4))
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        depth, value = interpolate_grid(sliver, wx, wy)
    assert depth[0, 0] == 0.0
    assert depth[0, 2] == -math.inf
    assert tuple(value[0, 2]) == BACKGROUND.value
