import pytest

from xyphra.buffers import DrawBuffers, DrawFlags, DrawListFlags
from xyphra.geometry import Vec2, Vec4
from xyphra.shadow import (
    add_shadow_convex_poly,
    add_subtracted_rect,
    add_subtracted_rect_box,
)

COL = 0xFF336699
A_MIN = Vec2(0.0, 0.0)
A_MAX = Vec2(10.0, 10.0)
UV_MIN = Vec2(0.0, 0.0)
UV_MAX = Vec2(1.0, 1.0)
SQUARE = [Vec2(3.0, 3.0), Vec2(7.0, 3.0), Vec2(7.0, 7.0), Vec2(3.0, 7.0)]


def triangle_area_sum(buffers):
    total = 0.0
    idx = buffers.idx_buffer
    for k in range(0, len(idx), 3):
        a, b, c = (buffers.vtx_buffer[i].pos for i in idx[k:k + 3])
        total += abs(a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)) * 0.5
    return total


def assert_consistent(buffers):
    assert len(buffers.idx_buffer) % 3 == 0
    assert all(i < len(buffers.vtx_buffer) for i in buffers.idx_buffer)
    assert buffers.cmd_buffer[-1].elem_count == len(buffers.idx_buffer)
    assert buffers.vtx_current_idx == len(buffers.vtx_buffer)


def test_box_zero_size_a_draws_nothing():
    buffers = DrawBuffers()
    add_subtracted_rect_box(buffers, A_MIN, Vec2(0.0, 10.0), UV_MIN, UV_MAX,
                            Vec2(2, 2), Vec2(4, 4), COL)
    assert buffers.vtx_buffer == []
    assert buffers.idx_buffer == []


def test_box_covering_a_draws_nothing():
    buffers = DrawBuffers()
    add_subtracted_rect_box(buffers, A_MIN, A_MAX, UV_MIN, UV_MAX,
                            Vec2(-1, -1), Vec2(11, 11), COL)
    assert buffers.vtx_buffer == []


def test_box_outside_draws_plain_rect():
    buffers = DrawBuffers()
    add_subtracted_rect_box(buffers, A_MIN, A_MAX, UV_MIN, UV_MAX,
                            Vec2(20, 20), Vec2(30, 30), COL)
    assert len(buffers.vtx_buffer) == 4
    assert len(buffers.idx_buffer) == 6
    assert triangle_area_sum(buffers) == pytest.approx(100.0)
    assert_consistent(buffers)


def test_box_in_middle_emits_four_quads():
    buffers = DrawBuffers()
    add_subtracted_rect_box(buffers, A_MIN, A_MAX, UV_MIN, UV_MAX,
                            Vec2(3, 3), Vec2(7, 7), COL)
    assert len(buffers.vtx_buffer) == 12
    assert len(buffers.idx_buffer) == 24
    assert triangle_area_sum(buffers) == pytest.approx(100.0 - 16.0)
    assert_consistent(buffers)


def test_box_touching_edge_skips_quad():
    buffers = DrawBuffers()
    add_subtracted_rect_box(buffers, A_MIN, A_MAX, UV_MIN, UV_MAX,
                            Vec2(0, 3), Vec2(7, 7), COL)
    assert len(buffers.idx_buffer) == 18
    assert triangle_area_sum(buffers) == pytest.approx(100.0 - 28.0)
    assert_consistent(buffers)


def test_box_uvs_follow_positions_linearly():
    buffers = DrawBuffers()
    add_subtracted_rect_box(buffers, A_MIN, A_MAX, UV_MIN, UV_MAX,
                            Vec2(2, 4), Vec2(6, 8), COL)
    for vertex in buffers.vtx_buffer:
        assert vertex.uv.x * 10.0 == pytest.approx(vertex.pos.x)
        assert vertex.uv.y * 10.0 == pytest.approx(vertex.pos.y)
        assert vertex.col == COL


def test_polygon_zero_size_a_draws_nothing():
    buffers = DrawBuffers()
    add_subtracted_rect(buffers, A_MIN, Vec2(10.0, 0.0), UV_MIN, UV_MAX, SQUARE, COL)
    assert buffers.vtx_buffer == []


def test_polygon_outside_draws_plain_rect():
    buffers = DrawBuffers()
    outside = [p + Vec2(50.0, 50.0) for p in SQUARE]
    add_subtracted_rect(buffers, A_MIN, A_MAX, UV_MIN, UV_MAX, outside, COL)
    assert len(buffers.vtx_buffer) == 4
    assert len(buffers.idx_buffer) == 6
    assert_consistent(buffers)


def test_polygon_inside_covers_remaining_area():
    buffers = DrawBuffers()
    add_subtracted_rect(buffers, A_MIN, A_MAX, UV_MIN, UV_MAX, SQUARE, COL)
    assert len(buffers.vtx_buffer) == 8
    assert triangle_area_sum(buffers) == pytest.approx(100.0 - 16.0)
    assert_consistent(buffers)


def test_polygon_inner_vertices_keep_positions_and_uvs():
    buffers = DrawBuffers()
    add_subtracted_rect(buffers, A_MIN, A_MAX, UV_MIN, UV_MAX, SQUARE, COL)
    assert [v.pos for v in buffers.vtx_buffer[:4]] == SQUARE
    for vertex in buffers.vtx_buffer:
        assert vertex.uv.x * 10.0 == pytest.approx(vertex.pos.x)
        assert vertex.uv.y * 10.0 == pytest.approx(vertex.pos.y)


def shadow_buffers(flags=DrawListFlags.NONE):
    buffers = DrawBuffers(flags=flags)
    uvs = list(buffers.shared_data.shadow_rect_uvs)
    uvs[9] = Vec4(0.1, 0.2, 0.3, 0.4)
    buffers.shared_data.shadow_rect_uvs = uvs
    return buffers


def test_shadow_needs_three_points():
    buffers = shadow_buffers()
    with pytest.raises(ValueError):
        add_shadow_convex_poly(buffers, SQUARE[:2], COL, 4.0, Vec2(), DrawFlags.NONE)


def test_shadow_cut_out_with_offset_rejected():
    buffers = shadow_buffers()
    with pytest.raises(ValueError):
        add_shadow_convex_poly(buffers, SQUARE, COL, 4.0, Vec2(2.0, 0.0),
                               DrawFlags.SHADOW_CUT_OUT_SHAPE_BACKGROUND)


def test_shadow_filled_is_consistent_and_ends_with_fill():
    buffers = shadow_buffers()
    offset = Vec2(1.0, 2.0)
    add_shadow_convex_poly(buffers, SQUARE, COL, 4.0, offset, DrawFlags.NONE)
    assert_consistent(buffers)
    tail = buffers.vtx_buffer[-4:]
    assert [v.pos for v in tail] == [p + offset for p in SQUARE]
    assert all(v.uv == Vec2(0.3, 0.4) for v in tail)
    assert all(v.col == COL for v in buffers.vtx_buffer)


def test_shadow_cut_out_has_no_fill_vertices():
    filled = shadow_buffers()
    add_shadow_convex_poly(filled, SQUARE, COL, 4.0, Vec2(), DrawFlags.NONE)
    cut = shadow_buffers()
    add_shadow_convex_poly(cut, SQUARE, COL, 4.0, Vec2(), DrawFlags.SHADOW_CUT_OUT_SHAPE_BACKGROUND)
    assert_consistent(cut)
    assert len(filled.vtx_buffer) - len(cut.vtx_buffer) == len(SQUARE)
    assert len(filled.idx_buffer) - len(cut.idx_buffer) == (len(SQUARE) - 2) * 3


def test_shadow_reaches_out_by_thickness():
    buffers = shadow_buffers()
    add_shadow_convex_poly(buffers, SQUARE, COL, 4.0, Vec2(), DrawFlags.NONE)
    xs = [v.pos.x for v in buffers.vtx_buffer]
    assert min(xs) <= 3.0 - 4.0 + 1e-6
    assert max(xs) >= 7.0 + 4.0 - 1e-6