"""A draw list: path building and high-level shape, image and shadow primitives."""

from __future__ import annotations

import math
from typing import Any, Iterable, List, Optional

from . import shadow as _shadow
from . import strokes as _strokes
from .buffers import (
    ARCFAST_SAMPLE_MAX,
    ARCFAST_TABLE_SIZE,
    CIRCLE_AUTO_SEGMENT_MAX,
    DrawBuffers,
    DrawFlags,
    DrawListFlags,
    SharedData,
    circle_auto_segment_calc,
    fix_rect_corner_flags,
)
from .geometry import (
    COL32_A_MASK,
    COL32_WHITE,
    Vec2,
    Vec4,
    bezier_cubic_calc,
    bezier_quadratic_calc,
    float4_to_u32,
    tessellate_cubic,
    tessellate_quadratic,
    u32_to_float4,
)

_HALF_PIXEL = Vec2(0.5, 0.5)


def _clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


def _closed_arc_max(num_segments: int) -> float:
    return (math.pi * 2.0) * (num_segments - 1.0) / num_segments


class DrawList(DrawBuffers):
    """Draw buffers plus a current path and the shapes built on top of it."""

    def __init__(
        self,
        shared_data: Optional[SharedData] = None,
        flags: DrawListFlags = DrawListFlags.NONE,
        fringe_scale: float = 1.0,
    ) -> None:
        super().__init__(shared_data, flags, fringe_scale)
        self.path: List[Vec2] = []

    # Path building

    def path_clear(self) -> None:
        self.path.clear()

    def path_line_to(self, pos: Vec2) -> None:
        self.path.append(pos)

    def path_fill_convex(self, col: int) -> None:
        """Fill the current path as a convex polygon, then clear it."""
        self.add_convex_poly_filled(self.path, col)
        self.path_clear()

    def path_stroke(self, col: int, flags: int = DrawFlags.NONE, thickness: float = 1.0) -> None:
        """Stroke the current path, then clear it."""
        self.add_polyline(self.path, col, flags, thickness)
        self.path_clear()

    def _arc_fast_ex(
        self, center: Vec2, radius: float, a_min_sample: int, a_max_sample: int, a_step: int
    ) -> None:
        if radius < 0.5:
            self.path.append(center)
            return

        if a_step <= 0:
            a_step = ARCFAST_SAMPLE_MAX // self.shared_data.circle_segment_count(radius)
        a_step = int(_clamp(a_step, 1, ARCFAST_TABLE_SIZE // 4))

        sample_range = abs(a_max_sample - a_min_sample)
        a_next_step = a_step
        extra_max_sample = False
        if a_step > 1:
            overstep = sample_range % a_step
            if overstep > 0:
                extra_max_sample = True
                if sample_range > 0:
                    a_step -= (a_step - overstep) // 2

        table = self.shared_data.arc_fast_vtx

        def emit(index: int) -> None:
            s = table[index]
            self.path.append(Vec2(center.x + s.x * radius, center.y + s.y * radius))

        sample_index = a_min_sample
        if not 0 <= sample_index < ARCFAST_SAMPLE_MAX:
            sample_index %= ARCFAST_SAMPLE_MAX

        a = a_min_sample
        if a_max_sample >= a_min_sample:
            while a <= a_max_sample:
                if sample_index >= ARCFAST_SAMPLE_MAX:
                    sample_index -= ARCFAST_SAMPLE_MAX
                emit(sample_index)
                a += a_step
                sample_index += a_step
                a_step = a_next_step
        else:
            while a >= a_max_sample:
                if sample_index < 0:
                    sample_index += ARCFAST_SAMPLE_MAX
                emit(sample_index)
                a -= a_step
                sample_index -= a_step
                a_step = a_next_step

        if extra_max_sample:
            emit(a_max_sample % ARCFAST_SAMPLE_MAX)

    def _arc_to_n(
        self, center: Vec2, radius: float, a_min: float, a_max: float, num_segments: int
    ) -> None:
        if radius < 0.5:
            self.path.append(center)
            return
        for i in range(num_segments + 1):
            a = a_min + (i / num_segments) * (a_max - a_min)
            self.path.append(Vec2(center.x + math.cos(a) * radius, center.y + math.sin(a) * radius))

    def path_arc_to(
        self, center: Vec2, radius: float, a_min: float, a_max: float, num_segments: int = 0
    ) -> None:
        """Append an arc from angle ``a_min`` to ``a_max`` (both ends included)."""
        if radius < 0.5:
            self.path.append(center)
            return
        if num_segments > 0:
            self._arc_to_n(center, radius, a_min, a_max, num_segments)
            return

        if radius <= self.shared_data.arc_fast_radius_cutoff:
            reverse = a_max < a_min
            a_min_f = ARCFAST_SAMPLE_MAX * a_min / (math.pi * 2.0)
            a_max_f = ARCFAST_SAMPLE_MAX * a_max / (math.pi * 2.0)
            a_min_sample = math.floor(a_min_f) if reverse else math.ceil(a_min_f)
            a_max_sample = math.ceil(a_max_f) if reverse else math.floor(a_max_f)
            mid_samples = max(
                (a_min_sample - a_max_sample) if reverse else (a_max_sample - a_min_sample), 0
            )
            min_segment_angle = a_min_sample * math.pi * 2.0 / ARCFAST_SAMPLE_MAX
            max_segment_angle = a_max_sample * math.pi * 2.0 / ARCFAST_SAMPLE_MAX
            emit_start = abs(min_segment_angle - a_min) >= 1e-5
            emit_end = abs(a_max - max_segment_angle) >= 1e-5

            if emit_start:
                self.path.append(
                    Vec2(center.x + math.cos(a_min) * radius, center.y + math.sin(a_min) * radius)
                )
            if mid_samples > 0:
                self._arc_fast_ex(center, radius, a_min_sample, a_max_sample, 0)
            if emit_end:
                self.path.append(
                    Vec2(center.x + math.cos(a_max) * radius, center.y + math.sin(a_max) * radius)
                )
        else:
            arc_length = abs(a_max - a_min)
            circle_segments = self.shared_data.circle_segment_count(radius)
            by_length = math.ceil(circle_segments * arc_length / (math.pi * 2.0))
            by_min = int(2.0 * math.pi / arc_length) if arc_length > 0.0 else 1
            self._arc_to_n(center, radius, a_min, a_max, max(by_length, by_min))

    def path_arc_to_fast(
        self, center: Vec2, radius: float, a_min_of_12: int, a_max_of_12: int
    ) -> None:
        """Append an arc using the precomputed table; angles are in twelfths of a turn."""
        if radius < 0.5:
            self.path.append(center)
            return
        self._arc_fast_ex(
            center,
            radius,
            a_min_of_12 * ARCFAST_SAMPLE_MAX // 12,
            a_max_of_12 * ARCFAST_SAMPLE_MAX // 12,
            0,
        )

    def _path_last(self) -> Vec2:
        if not self.path:
            raise IndexError("a curve needs a starting point in the path")
        return self.path[-1]

    def _tessellation_tol(self) -> float:
        tol = self.shared_data.curve_tessellation_tol
        if tol <= 0.0:
            raise ValueError("curve tessellation tolerance must be positive")
        return tol

    def path_bezier_cubic_curve_to(
        self, p2: Vec2, p3: Vec2, p4: Vec2, num_segments: int = 0
    ) -> None:
        """Append a cubic Bezier curve starting at the last path point."""
        p1 = self._path_last()
        if num_segments == 0:
            self.path.extend(tessellate_cubic(p1, p2, p3, p4, self._tessellation_tol()))
            return
        t_step = 1.0 / num_segments
        for i in range(1, num_segments + 1):
            self.path.append(bezier_cubic_calc(p1, p2, p3, p4, t_step * i))

    def path_bezier_quadratic_curve_to(self, p2: Vec2, p3: Vec2, num_segments: int = 0) -> None:
        """Append a quadratic Bezier curve starting at the last path point."""
        p1 = self._path_last()
        if num_segments == 0:
            self.path.extend(tessellate_quadratic(p1, p2, p3, self._tessellation_tol()))
            return
        t_step = 1.0 / num_segments
        for i in range(1, num_segments + 1):
            self.path.append(bezier_quadratic_calc(p1, p2, p3, t_step * i))

    def path_rect(self, a: Vec2, b: Vec2, rounding: float = 0.0, flags: int = DrawFlags.NONE) -> None:
        """Append a rectangle, with rounded corners where ``flags`` ask for them."""
        flags = fix_rect_corner_flags(flags)
        top, bottom = DrawFlags.ROUND_CORNERS_TOP, DrawFlags.ROUND_CORNERS_BOTTOM
        left, right = DrawFlags.ROUND_CORNERS_LEFT, DrawFlags.ROUND_CORNERS_RIGHT
        horiz = 0.5 if (flags & top) == top or (flags & bottom) == bottom else 1.0
        vert = 0.5 if (flags & left) == left or (flags & right) == right else 1.0
        rounding = min(rounding, abs(b.x - a.x) * horiz - 1.0)
        rounding = min(rounding, abs(b.y - a.y) * vert - 1.0)

        if rounding < 0.5 or (flags & DrawFlags.ROUND_CORNERS_MASK) == DrawFlags.ROUND_CORNERS_NONE:
            self.path_line_to(a)
            self.path_line_to(Vec2(b.x, a.y))
            self.path_line_to(b)
            self.path_line_to(Vec2(a.x, b.y))
            return

        tl = rounding if flags & DrawFlags.ROUND_CORNERS_TOP_LEFT else 0.0
        tr = rounding if flags & DrawFlags.ROUND_CORNERS_TOP_RIGHT else 0.0
        br = rounding if flags & DrawFlags.ROUND_CORNERS_BOTTOM_RIGHT else 0.0
        bl = rounding if flags & DrawFlags.ROUND_CORNERS_BOTTOM_LEFT else 0.0
        self.path_arc_to_fast(Vec2(a.x + tl, a.y + tl), tl, 6, 9)
        self.path_arc_to_fast(Vec2(b.x - tr, a.y + tr), tr, 9, 12)
        self.path_arc_to_fast(Vec2(b.x - br, b.y - br), br, 0, 3)
        self.path_arc_to_fast(Vec2(a.x + bl, b.y - bl), bl, 3, 6)

    # Primitives

    def add_polyline(
        self, points: Iterable[Vec2], col: int, flags: int = DrawFlags.NONE, thickness: float = 1.0
    ) -> None:
        _strokes.add_polyline(self, points, col, flags, thickness)

    def add_convex_poly_filled(self, points: Iterable[Vec2], col: int) -> None:
        _strokes.add_convex_poly_filled(self, points, col)

    def add_line(self, p1: Vec2, p2: Vec2, col: int, thickness: float = 1.0) -> None:
        self.path_line_to(p1 + _HALF_PIXEL)
        self.path_line_to(p2 + _HALF_PIXEL)
        self.path_stroke(col, DrawFlags.NONE, thickness)

    def add_line_multi_color(
        self, a: Vec2, b: Vec2, col_a: int, col_b: int, thickness: float = 1.0
    ) -> None:
        """Draw a quad from ``a`` to ``b`` whose colour fades from ``col_a`` to ``col_b``.

        The indices written are 0..3, not offset by the current vertex index.
        """
        dx, dy = b.x - a.x, b.y - a.y
        length = math.sqrt(dx * dx + dy * dy)
        if length < 0.0001:
            return
        half = thickness * 0.5
        px, py = -dy / length * half, dx / length * half
        v0 = Vec2(a.x + px, a.y + py)
        v1 = Vec2(b.x + px, b.y + py)
        v2 = Vec2(b.x - px, b.y - py)
        v3 = Vec2(a.x - px, a.y - py)

        self.prim_reserve(6, 4)
        for idx in (0, 1, 2, 2, 3, 0):
            self.write_idx(idx)
        zero = Vec2(0.0, 0.0)
        self.write_vtx(v0, zero, col_a)
        self.write_vtx(v1, zero, col_b)
        self.write_vtx(v2, zero, col_b)
        self.write_vtx(v3, zero, col_a)

    def add_rect(
        self,
        p_min: Vec2,
        p_max: Vec2,
        col: int,
        rounding: float = 0.0,
        flags: int = DrawFlags.NONE,
        thickness: float = 1.0,
    ) -> None:
        if self.flags & DrawListFlags.ANTI_ALIASED_LINES:
            self.path_rect(p_min + _HALF_PIXEL, p_max - _HALF_PIXEL, rounding, flags)
        else:
            self.path_rect(p_min + _HALF_PIXEL, p_max - Vec2(0.49, 0.49), rounding, flags)
        self.path_stroke(col, DrawFlags.CLOSED, thickness)

    def add_rect_filled(
        self, p_min: Vec2, p_max: Vec2, col: int, rounding: float = 0.0, flags: int = DrawFlags.NONE
    ) -> None:
        if rounding < 0.5 or (int(flags) & DrawFlags.ROUND_CORNERS_MASK) == DrawFlags.ROUND_CORNERS_NONE:
            self.prim_reserve(6, 4)
            self.prim_rect(p_min, p_max, col)
        else:
            self.path_rect(p_min, p_max, rounding, flags)
            self.path_fill_convex(col)

    def _quad_multi_color(
        self, p_min: Vec2, p_max: Vec2, ul: int, ur: int, br: int, bl: int
    ) -> None:
        uv = self.shared_data.tex_uv_white_pixel
        self.prim_reserve(6, 4)
        idx = self.vtx_current_idx
        for offset in (0, 1, 2, 0, 2, 3):
            self.write_idx(idx + offset)
        self.write_vtx(p_min, uv, ul)
        self.write_vtx(Vec2(p_max.x, p_min.y), uv, ur)
        self.write_vtx(p_max, uv, br)
        self.write_vtx(Vec2(p_min.x, p_max.y), uv, bl)

    def add_rect_filled_multi_color(
        self,
        p_min: Vec2,
        p_max: Vec2,
        col_upr_left: int,
        col_upr_right: int,
        col_bot_right: int,
        col_bot_left: int,
    ) -> None:
        self._quad_multi_color(p_min, p_max, col_upr_left, col_upr_right, col_bot_right, col_bot_left)

    def add_rect_filled_multi_color_rounded(
        self,
        p_min: Vec2,
        p_max: Vec2,
        col_upr_left: int,
        col_upr_right: int,
        col_bot_right: int,
        col_bot_left: int,
        rounding: float = 0.0,
        flags: int = DrawFlags.NONE,
    ) -> None:
        """Fill a rectangle with a bilinear colour gradient, optionally rounded."""
        flags = fix_rect_corner_flags(flags)
        top, bottom = DrawFlags.ROUND_CORNERS_TOP, DrawFlags.ROUND_CORNERS_BOTTOM
        left, right = DrawFlags.ROUND_CORNERS_LEFT, DrawFlags.ROUND_CORNERS_RIGHT
        horiz = 0.5 if (flags & top) == top or (flags & bottom) == bottom else 1.0
        vert = 0.5 if (flags & left) == left or (flags & right) == right else 1.0
        rounding = min(rounding, abs(p_max.x - p_min.x) * horiz - 1.0)
        rounding = min(rounding, abs(p_max.y - p_min.y) * vert - 1.0)

        if rounding <= 0.0:
            self._quad_multi_color(
                p_min, p_max, col_upr_left, col_upr_right, col_bot_right, col_bot_left
            )
            return

        size_before = len(self.vtx_buffer)
        self.add_rect_filled(p_min, p_max, COL32_WHITE, rounding, flags)

        def components(col: int):
            c = u32_to_float4(col)
            return (c.x, c.y, c.z, c.w)

        ul, ur = components(col_upr_left), components(col_upr_right)
        br, bl = components(col_bot_right), components(col_bot_left)
        width, height = p_max.x - p_min.x, p_max.y - p_min.y

        for vertex in self.vtx_buffer[size_before:]:
            tx = _clamp((vertex.pos.x - p_min.x) / width, 0.0, 1.0)
            ty = _clamp((vertex.pos.y - p_min.y) / height, 0.0, 1.0)
            top_row = [u + (r - u) * tx for u, r in zip(ul, ur)]
            bottom_row = [l + (r - l) * tx for l, r in zip(bl, br)]
            blended = [t + (b - t) * ty for t, b in zip(top_row, bottom_row)]
            own = components(vertex.col)
            vertex.col = float4_to_u32(Vec4(*(c * o for c, o in zip(blended, own))))

    def add_quad(
        self, p1: Vec2, p2: Vec2, p3: Vec2, p4: Vec2, col: int, thickness: float = 1.0
    ) -> None:
        self.path.extend((p1, p2, p3, p4))
        self.path_stroke(col, DrawFlags.CLOSED, thickness)

    def add_quad_filled(self, p1: Vec2, p2: Vec2, p3: Vec2, p4: Vec2, col: int) -> None:
        self.path.extend((p1, p2, p3, p4))
        self.path_fill_convex(col)

    def add_triangle(self, p1: Vec2, p2: Vec2, p3: Vec2, col: int, thickness: float = 1.0) -> None:
        self.path.extend((p1, p2, p3))
        self.path_stroke(col, DrawFlags.CLOSED, thickness)

    def add_triangle_filled(self, p1: Vec2, p2: Vec2, p3: Vec2, col: int) -> None:
        self.path.extend((p1, p2, p3))
        self.path_fill_convex(col)

    def add_triangle_filled_multi_color(
        self, a: Vec2, b: Vec2, c: Vec2, a_col: int, b_col: int, c_col: int
    ) -> None:
        uv = self.shared_data.tex_uv_white_pixel
        self.prim_reserve(3, 3)
        idx = self.vtx_current_idx
        for offset in (0, 1, 2):
            self.write_idx(idx + offset)
        self.write_vtx(a, uv, a_col)
        self.write_vtx(b, uv, b_col)
        self.write_vtx(c, uv, c_col)

    def _circle_path(self, center: Vec2, radius: float, num_segments: int) -> None:
        if num_segments <= 0:
            self._arc_fast_ex(center, radius, 0, ARCFAST_SAMPLE_MAX, 0)
            self.path.pop()
        else:
            num_segments = int(_clamp(num_segments, 3, CIRCLE_AUTO_SEGMENT_MAX))
            self.path_arc_to(center, radius, 0.0, _closed_arc_max(num_segments), num_segments - 1)

    def add_circle(
        self, center: Vec2, radius: float, col: int, num_segments: int = 0, thickness: float = 1.0
    ) -> None:
        if radius < 0.5:
            return
        self._circle_path(center, radius - 0.5, num_segments)
        self.path_stroke(col, DrawFlags.CLOSED, thickness)

    def add_circle_filled(self, center: Vec2, radius: float, col: int, num_segments: int = 0) -> None:
        if radius < 0.5:
            return
        self._circle_path(center, radius, num_segments)
        self.path_fill_convex(col)

    def add_ngon(
        self, center: Vec2, radius: float, col: int, num_segments: int, thickness: float = 1.0
    ) -> None:
        if num_segments <= 2:
            return
        self.path_arc_to(center, radius - 0.5, 0.0, _closed_arc_max(num_segments), num_segments - 1)
        self.path_stroke(col, DrawFlags.CLOSED, thickness)

    def add_ngon_filled(self, center: Vec2, radius: float, col: int, num_segments: int) -> None:
        if num_segments <= 2:
            return
        self.path_arc_to(center, radius, 0.0, _closed_arc_max(num_segments), num_segments - 1)
        self.path_fill_convex(col)

    # Images

    def _with_texture(self, texture_id: Any, draw) -> None:
        push = texture_id != self.texture_id
        if push:
            self.push_texture_id(texture_id)
        draw()
        if push:
            self.pop_texture_id()

    def add_image(
        self,
        texture_id: Any,
        p_min: Vec2,
        p_max: Vec2,
        uv_min: Vec2 = Vec2(0.0, 0.0),
        uv_max: Vec2 = Vec2(1.0, 1.0),
        col: int = COL32_WHITE,
    ) -> None:
        def draw() -> None:
            self.prim_reserve(6, 4)
            self.prim_rect_uv(p_min, p_max, uv_min, uv_max, col)

        self._with_texture(texture_id, draw)

    def add_image_quad(
        self,
        texture_id: Any,
        p1: Vec2,
        p2: Vec2,
        p3: Vec2,
        p4: Vec2,
        uv1: Vec2 = Vec2(0.0, 0.0),
        uv2: Vec2 = Vec2(1.0, 0.0),
        uv3: Vec2 = Vec2(1.0, 1.0),
        uv4: Vec2 = Vec2(0.0, 1.0),
        col: int = COL32_WHITE,
    ) -> None:
        def draw() -> None:
            self.prim_reserve(6, 4)
            self.prim_quad_uv(p1, p2, p3, p4, uv1, uv2, uv3, uv4, col)

        self._with_texture(texture_id, draw)

    def add_image_rounded(
        self,
        texture_id: Any,
        p_min: Vec2,
        p_max: Vec2,
        uv_min: Vec2,
        uv_max: Vec2,
        col: int,
        rounding: float,
        flags: int = DrawFlags.NONE,
    ) -> None:
        flags = fix_rect_corner_flags(flags)
        if rounding < 0.5 or (flags & DrawFlags.ROUND_CORNERS_MASK) == DrawFlags.ROUND_CORNERS_NONE:
            self.add_image(texture_id, p_min, p_max, uv_min, uv_max, col)
            return

        def draw() -> None:
            start = len(self.vtx_buffer)
            self.path_rect(p_min, p_max, rounding, flags)
            self.path_fill_convex(col)
            self.shade_verts_linear_uv(
                start, len(self.vtx_buffer), p_min, p_max, uv_min, uv_max, True
            )

        self._with_texture(texture_id, draw)

    def shade_verts_linear_uv(
        self,
        vert_start: int,
        vert_end: int,
        a: Vec2,
        b: Vec2,
        uv_a: Vec2,
        uv_b: Vec2,
        clamp: bool = False,
    ) -> None:
        """Assign UVs to vertices in ``[vert_start, vert_end)`` by linear mapping of positions."""
        size = b - a
        uv_size = uv_b - uv_a
        sx = uv_size.x / size.x if size.x != 0.0 else 0.0
        sy = uv_size.y / size.y if size.y != 0.0 else 0.0
        lo = uv_a.minimum(uv_b)
        hi = uv_a.maximum(uv_b)
        for vertex in self.vtx_buffer[vert_start:vert_end]:
            uv = Vec2(uv_a.x + (vertex.pos.x - a.x) * sx, uv_a.y + (vertex.pos.y - a.y) * sy)
            vertex.uv = uv.clamp(lo, hi) if clamp else uv

    # Shadows

    def add_shadow_rect(
        self,
        obj_min: Vec2,
        obj_max: Vec2,
        shadow_col: int,
        obj_rounding: float,
        shadow_thickness: float,
        shadow_offset: Vec2 = Vec2(0.0, 0.0),
        flags: int = DrawFlags.NONE,
    ) -> None:
        if not shadow_col & COL32_A_MASK:
            return
        self.path_rect(obj_min, obj_max, obj_rounding, flags)
        points = list(self.path)
        self.path_clear()
        self.add_shadow_convex_poly(points, shadow_col, shadow_thickness, shadow_offset, flags)

    def add_shadow_circle(
        self,
        obj_center: Vec2,
        obj_radius: float,
        shadow_col: int,
        shadow_thickness: float,
        shadow_offset: Vec2 = Vec2(0.0, 0.0),
        flags: int = DrawFlags.NONE,
        num_segments: int = 12,
    ) -> None:
        if num_segments <= 0:
            counts = self.shared_data.circle_segment_counts
            radius_idx = int(obj_radius) - 1
            if 0 <= radius_idx < len(counts):
                num_segments = counts[radius_idx]
            else:
                num_segments = circle_auto_segment_calc(
                    obj_radius, self.shared_data.circle_segment_max_error
                )
        else:
            num_segments = int(_clamp(num_segments, 3, CIRCLE_AUTO_SEGMENT_MAX))

        if self.path:
            raise ValueError("the path must be empty before drawing a circle shadow")
        if num_segments == 12:
            self.path_arc_to_fast(obj_center, obj_radius, 0, 12 - 1)
        else:
            self.path_arc_to(
                obj_center, obj_radius, 0.0, _closed_arc_max(num_segments), num_segments - 1
            )
        points = list(self.path)
        self.path_clear()
        self.add_shadow_convex_poly(points, shadow_col, shadow_thickness, shadow_offset, flags)

    def add_shadow_ngon(
        self,
        obj_center: Vec2,
        obj_radius: float,
        shadow_col: int,
        shadow_thickness: float,
        shadow_offset: Vec2,
        flags: int,
        obj_num_segments: int,
    ) -> None:
        if obj_num_segments == 0:
            raise ValueError("an n-gon shadow needs an explicit segment count")
        self.add_shadow_circle(
            obj_center, obj_radius, shadow_col, shadow_thickness, shadow_offset, flags,
            obj_num_segments,
        )

    def add_shadow_convex_poly(
        self,
        points: Iterable[Vec2],
        shadow_col: int,
        shadow_thickness: float,
        shadow_offset: Vec2 = Vec2(0.0, 0.0),
        flags: int = DrawFlags.NONE,
    ) -> None:
        _shadow.add_shadow_convex_poly(
            self, points, shadow_col, shadow_thickness, shadow_offset, flags
        )