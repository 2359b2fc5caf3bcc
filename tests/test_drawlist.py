import math

import pytest

from xyphra.buffers import DrawFlags, DrawListFlags
from xyphra.drawlist import DrawList
from xyphra.geometry import Vec2, col32

RED = col32(255, 0, 0, 255)
GREEN = col32(0, 255, 0, 255)
BLUE = col32(0, 0, 255, 255)
WHITE = col32(255, 255, 255, 255)


def check_consistent(dl):
    assert sum(cmd.elem_count for cmd in dl.cmd_buffer) == len(dl.idx_buffer)
    assert all(0 <= i < len(dl.vtx_buffer) for i in dl.idx_buffer)


def test_rect_filled_without_rounding_is_one_quad():
    dl = DrawList()
    dl.add_rect_filled(Vec2(0, 0), Vec2(10, 20), RED)
    assert dl.idx_buffer == [0, 1, 2, 0, 2, 3]
    assert [(v.pos.x, v.pos.y) for v in dl.vtx_buffer] == [(0, 0), (10, 0), (10, 20), (0, 20)]
    assert all(v.col == RED for v in dl.vtx_buffer)
    check_consistent(dl)


def test_rounded_rect_filled_clears_path_and_stays_in_bounds():
    dl = DrawList()
    dl.add_rect_filled(Vec2(0, 0), Vec2(40, 40), RED, 8.0, DrawFlags.NONE)
    assert dl.path == []
    assert len(dl.vtx_buffer) > 4
    assert all(-1e-6 <= v.pos.x <= 40 + 1e-6 and -1e-6 <= v.pos.y <= 40 + 1e-6 for v in dl.vtx_buffer)
    check_consistent(dl)


def test_transparent_colour_draws_nothing():
    dl = DrawList()
    dl.add_triangle_filled(Vec2(0, 0), Vec2(5, 0), Vec2(0, 5), col32(255, 255, 255, 0))
    assert dl.vtx_buffer == []
    assert dl.path == []


def test_triangle_multi_color():
    dl = DrawList()
    dl.add_triangle_filled_multi_color(Vec2(0, 0), Vec2(1, 0), Vec2(0, 1), RED, GREEN, BLUE)
    assert [v.col for v in dl.vtx_buffer] == [RED, GREEN, BLUE]
    assert dl.idx_buffer == [0, 1, 2]


def test_path_arc_to_explicit_segments():
    dl = DrawList()
    dl.path_arc_to(Vec2(5, 5), 10.0, 0.0, math.pi, 4)
    assert len(dl.path) == 5
    assert dl.path[0].x == pytest.approx(15.0)
    assert dl.path[-1].x == pytest.approx(-5.0)
    assert dl.path[-1].y == pytest.approx(5.0, abs=1e-9)


def test_path_arc_to_auto_points_lie_on_circle():
    dl = DrawList()
    dl.path_arc_to(Vec2(0, 0), 20.0, 0.3, 2.0)
    assert len(dl.path) >= 3
    for p in dl.path:
        assert math.hypot(p.x, p.y) == pytest.approx(20.0, rel=1e-6)


def test_path_arc_to_small_radius_adds_center():
    dl = DrawList()
    dl.path_arc_to(Vec2(3, 4), 0.2, 0.0, 1.0)
    assert [(p.x, p.y) for p in dl.path] == [(3, 4)]


def test_path_arc_to_fast_quarter():
    dl = DrawList()
    dl.path_arc_to_fast(Vec2(0, 0), 10.0, 0, 3)
    assert dl.path[0].x == pytest.approx(10.0)
    assert dl.path[0].y == pytest.approx(0.0, abs=1e-9)
    assert dl.path[-1].x == pytest.approx(0.0, abs=1e-9)
    assert dl.path[-1].y == pytest.approx(10.0)


def test_path_rect_plain_corners():
    dl = DrawList()
    dl.path_rect(Vec2(1, 2), Vec2(5, 6))
    assert [(p.x, p.y) for p in dl.path] == [(1, 2), (5, 2), (5, 6), (1, 6)]


def test_bezier_explicit_segments_ends_at_last_point():
    dl = DrawList()
    dl.path_line_to(Vec2(0, 0))
    dl.path_bezier_cubic_curve_to(Vec2(0, 10), Vec2(10, 10), Vec2(10, 0), 5)
    assert len(dl.path) == 6
    assert dl.path[-1].x == pytest.approx(10.0)
    assert dl.path[-1].y == pytest.approx(0.0, abs=1e-9)


def test_bezier_quadratic_auto_ends_at_last_point():
    dl = DrawList()
    dl.path_line_to(Vec2(0, 0))
    dl.path_bezier_quadratic_curve_to(Vec2(50, 100), Vec2(100, 0))
    assert dl.path[-1].x == pytest.approx(100.0)
    assert len(dl.path) > 2


def test_bezier_needs_start_point():
    with pytest.raises(IndexError):
        DrawList().path_bezier_cubic_curve_to(Vec2(0, 1), Vec2(1, 1), Vec2(1, 0))


def test_circle_filled_explicit_segments():
    dl = DrawList()
    dl.add_circle_filled(Vec2(0, 0), 10.0, RED, 8)
    assert len(dl.vtx_buffer) == 8
    assert len(dl.idx_buffer) == (8 - 2) * 3
    check_consistent(dl)


def test_tiny_circle_and_degenerate_ngon_draw_nothing():
    dl = DrawList()
    dl.add_circle(Vec2(0, 0), 0.2, RED)
    dl.add_ngon(Vec2(0, 0), 10.0, RED, 2)
    dl.add_ngon_filled(Vec2(0, 0), 10.0, RED, 1)
    assert dl.vtx_buffer == []


def test_circle_stroke_auto_is_consistent():
    dl = DrawList(flags=DrawListFlags.ANTI_ALIASED_LINES | DrawListFlags.ANTI_ALIASED_FILL)
    dl.add_circle(Vec2(50, 50), 20.0, RED, 0, 2.0)
    dl.add_ngon_filled(Vec2(0, 0), 10.0, RED, 6)
    assert dl.path == []
    check_consistent(dl)


def test_add_line_multi_color():
    dl = DrawList()
    dl.add_line_multi_color(Vec2(0, 0), Vec2(10, 0), RED, BLUE, 2.0)
    assert dl.idx_buffer == [0, 1, 2, 2, 3, 0]
    assert [v.col for v in dl.vtx_buffer] == [RED, BLUE, BLUE, RED]
    assert dl.vtx_buffer[0].pos.y == pytest.approx(1.0)
    dl2 = DrawList()
    dl2.add_line_multi_color(Vec2(1, 1), Vec2(1, 1), RED, BLUE)
    assert dl2.vtx_buffer == []


def test_add_image_switches_texture_and_back():
    dl = DrawList()
    dl.add_image("tex", Vec2(0, 0), Vec2(4, 4))
    assert dl.cmd_buffer[0].texture_id == "tex"
    assert dl.cmd_buffer[0].elem_count == 6
    assert dl.texture_id is None
    check_consistent(dl)


def test_shade_verts_linear_uv():
    dl = DrawList()
    dl.add_rect_filled(Vec2(0, 0), Vec2(10, 10), RED)
    dl.shade_verts_linear_uv(0, 4, Vec2(0, 0), Vec2(10, 10), Vec2(0, 0), Vec2(1, 1))
    for v in dl.vtx_buffer:
        assert v.uv.x == pytest.approx(v.pos.x / 10)
        assert v.uv.y == pytest.approx(v.pos.y / 10)


def test_add_image_rounded_uvs_within_range():
    dl = DrawList()
    dl.add_image_rounded("img", Vec2(0, 0), Vec2(30, 30), Vec2(0, 0), Vec2(1, 1), WHITE, 6.0)
    assert len(dl.vtx_buffer) > 4
    assert all(0.0 <= v.uv.x <= 1.0 and 0.0 <= v.uv.y <= 1.0 for v in dl.vtx_buffer)


def test_multi_color_rounded_uniform_colour():
    dl = DrawList()
    dl.add_rect_filled_multi_color_rounded(Vec2(0, 0), Vec2(40, 40), RED, RED, RED, RED, 8.0)
    assert len(dl.vtx_buffer) > 4
    assert all(v.col == RED for v in dl.vtx_buffer)


def test_multi_color_rounded_without_rounding_is_quad():
    dl = DrawList()
    dl.add_rect_filled_multi_color_rounded(Vec2(0, 0), Vec2(4, 4), RED, GREEN, BLUE, WHITE, 0.0)
    assert [v.col for v in dl.vtx_buffer] == [RED, GREEN, BLUE, WHITE]


def test_shadow_rect():
    dl = DrawList()
    dl.add_shadow_rect(Vec2(0, 0), Vec2(20, 20), col32(255, 255, 255, 0), 0.0, 4.0)
    assert dl.vtx_buffer == []
    dl.add_shadow_rect(Vec2(0, 0), Vec2(20, 20), RED, 0.0, 4.0)
    assert dl.path == []
    assert dl.vtx_buffer and all(v.col == RED for v in dl.vtx_buffer)
    check_consistent(dl)


def test_shadow_circle_and_ngon():
    dl = DrawList()
    dl.add_shadow_circle(Vec2(30, 30), 10.0, RED, 4.0)
    dl.add_shadow_ngon(Vec2(30, 30), 10.0, RED, 4.0, Vec2(0, 0), DrawFlags.NONE, 5)
    assert dl.path == []
    check_consistent(dl)
    with pytest.raises(ValueError):
        dl.add_shadow_ngon(Vec2(0, 0), 5.0, RED, 2.0, Vec2(0, 0), DrawFlags.NONE, 0)