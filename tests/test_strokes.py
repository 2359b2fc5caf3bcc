import pytest

from xyphra.buffers import DrawBuffers, DrawFlags, DrawListFlags
from xyphra.geometry import Vec2, Vec4
from xyphra.strokes import add_convex_poly_filled, add_polyline

COL = 0xFF336699
COL_TRANS = COL & 0x00FFFFFF
SQUARE = [Vec2(0.0, 0.0), Vec2(10.0, 0.0), Vec2(10.0, 10.0), Vec2(0.0, 10.0)]


def _check_indices_in_range(buffers):
    assert all(0 <= i < len(buffers.vtx_buffer) for i in buffers.idx_buffer)
    assert buffers.cmd_buffer[-1].elem_count == len(buffers.idx_buffer)


def test_plain_polyline_counts_and_indices():
    buffers = DrawBuffers()
    add_polyline(buffers, [Vec2(0.0, 0.0), Vec2(10.0, 0.0)], COL, DrawFlags.NONE, 2.0)
    assert len(buffers.vtx_buffer) == 4
    assert buffers.idx_buffer == [0, 1, 2, 0, 2, 3]
    assert all(v.col == COL for v in buffers.vtx_buffer)
    _check_indices_in_range(buffers)


def test_plain_polyline_width_matches_thickness():
    buffers = DrawBuffers()
    add_polyline(buffers, [Vec2(0.0, 0.0), Vec2(10.0, 0.0)], COL, DrawFlags.NONE, 2.0)
    v = buffers.vtx_buffer
    assert abs(v[0].pos.y - v[3].pos.y) == pytest.approx(2.0)
    assert v[1].pos.x == pytest.approx(10.0)
    assert v[0].pos.x == pytest.approx(0.0)


def test_plain_closed_polyline_has_segment_per_point():
    buffers = DrawBuffers()
    add_polyline(buffers, SQUARE, COL, DrawFlags.CLOSED, 1.0)
    assert len(buffers.vtx_buffer) == 4 * len(SQUARE)
    assert len(buffers.idx_buffer) == 6 * len(SQUARE)
    _check_indices_in_range(buffers)


def test_transparent_and_short_polylines_draw_nothing():
    buffers = DrawBuffers()
    add_polyline(buffers, [Vec2(0.0, 0.0), Vec2(5.0, 5.0)], COL_TRANS)
    add_polyline(buffers, [Vec2(0.0, 0.0)], COL)
    assert buffers.vtx_buffer == []
    assert buffers.idx_buffer == []


def test_anti_aliased_thin_line():
    buffers = DrawBuffers(flags=DrawListFlags.ANTI_ALIASED_LINES)
    pts = [Vec2(0.0, 0.0), Vec2(10.0, 0.0)]
    add_polyline(buffers, pts, COL, DrawFlags.NONE, 1.0)
    assert len(buffers.vtx_buffer) == 3 * len(pts)
    assert len(buffers.idx_buffer) == 12
    centres = buffers.vtx_buffer[0::3]
    assert [v.pos for v in centres] == pts
    assert all(v.col == COL for v in centres)
    edges = [v for i, v in enumerate(buffers.vtx_buffer) if i % 3]
    assert all(v.col == COL_TRANS for v in edges)
    for i, centre in enumerate(centres):
        left = buffers.vtx_buffer[i * 3 + 1].pos
        assert (left - centre.pos).length() == pytest.approx(buffers.fringe_scale)
    _check_indices_in_range(buffers)


def test_anti_aliased_thick_line():
    buffers = DrawBuffers(flags=DrawListFlags.ANTI_ALIASED_LINES)
    pts = [Vec2(0.0, 0.0), Vec2(10.0, 0.0), Vec2(20.0, 0.0)]
    add_polyline(buffers, pts, COL, DrawFlags.NONE, 4.0)
    assert len(buffers.vtx_buffer) == 4 * len(pts)
    assert len(buffers.idx_buffer) == 18 * (len(pts) - 1)
    for i in range(len(pts)):
        group = buffers.vtx_buffer[i * 4:i * 4 + 4]
        assert [v.col for v in group] == [COL_TRANS, COL, COL, COL_TRANS]
        inner = abs(group[1].pos.y - group[2].pos.y)
        outer = abs(group[0].pos.y - group[3].pos.y)
        assert inner == pytest.approx(4.0 - buffers.fringe_scale)
        assert outer - inner == pytest.approx(2 * buffers.fringe_scale)
    _check_indices_in_range(buffers)


def test_textured_line_uses_line_uvs():
    buffers = DrawBuffers(
        flags=DrawListFlags.ANTI_ALIASED_LINES | DrawListFlags.ANTI_ALIASED_LINES_USE_TEX
    )
    buffers.shared_data.tex_uv_lines[3] = Vec4(0.1, 0.2, 0.3, 0.4)
    pts = [Vec2(0.0, 0.0), Vec2(10.0, 0.0)]
    add_polyline(buffers, pts, COL, DrawFlags.NONE, 3.0)
    assert len(buffers.vtx_buffer) == 2 * len(pts)
    assert len(buffers.idx_buffer) == 6
    assert [v.uv for v in buffers.vtx_buffer] == [
        Vec2(0.1, 0.2), Vec2(0.3, 0.4), Vec2(0.1, 0.2), Vec2(0.3, 0.4)
    ]
    assert all(v.col == COL for v in buffers.vtx_buffer)
    _check_indices_in_range(buffers)


def test_fractional_thickness_skips_texture_path():
    buffers = DrawBuffers(
        flags=DrawListFlags.ANTI_ALIASED_LINES | DrawListFlags.ANTI_ALIASED_LINES_USE_TEX
    )
    add_polyline(buffers, [Vec2(0.0, 0.0), Vec2(10.0, 0.0)], COL, DrawFlags.NONE, 2.5)
    assert len(buffers.vtx_buffer) == 8
    assert len(buffers.idx_buffer) == 18


def test_closed_anti_aliased_polyline_wraps_indices():
    buffers = DrawBuffers(flags=DrawListFlags.ANTI_ALIASED_LINES)
    add_polyline(buffers, SQUARE, COL, DrawFlags.CLOSED, 1.0)
    assert len(buffers.idx_buffer) == 12 * len(SQUARE)
    assert 0 in buffers.idx_buffer[-12:]
    _check_indices_in_range(buffers)


def test_plain_convex_fill_is_fan():
    buffers = DrawBuffers()
    add_convex_poly_filled(buffers, SQUARE, COL)
    assert [v.pos for v in buffers.vtx_buffer] == SQUARE
    assert buffers.idx_buffer == [0, 1, 2, 0, 2, 3]


def test_second_fill_offsets_indices():
    buffers = DrawBuffers()
    add_convex_poly_filled(buffers, SQUARE, COL)
    add_convex_poly_filled(buffers, SQUARE[:3], COL)
    assert buffers.idx_buffer[-3:] == [4, 5, 6]
    _check_indices_in_range(buffers)


def test_anti_aliased_convex_fill():
    buffers = DrawBuffers(flags=DrawListFlags.ANTI_ALIASED_FILL)
    n = len(SQUARE)
    add_convex_poly_filled(buffers, SQUARE, COL)
    assert len(buffers.vtx_buffer) == 2 * n
    assert len(buffers.idx_buffer) == (n - 2) * 3 + n * 6
    centre = Vec2(5.0, 5.0)
    for inner, outer in zip(buffers.vtx_buffer[0::2], buffers.vtx_buffer[1::2]):
        assert inner.col == COL
        assert outer.col == COL_TRANS
        assert (outer.pos - centre).length() > (inner.pos - centre).length()
    _check_indices_in_range(buffers)


def test_convex_fill_rejects_degenerate_input():
    buffers = DrawBuffers()
    add_convex_poly_filled(buffers, SQUARE[:2], COL)
    add_convex_poly_filled(buffers, SQUARE, COL_TRANS)
    assert buffers.vtx_buffer == []
    assert buffers.cmd_buffer[-1].elem_count == 0