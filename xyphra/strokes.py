"""Tessellation of polylines and convex filled polygons into draw buffers."""

from __future__ import annotations

import math
from typing import Iterable, List, Sequence, Tuple

from .buffers import TEX_LINES_WIDTH_MAX, DrawBuffers, DrawFlags, DrawListFlags
from .geometry import COL32_A_MASK, Vec2

FIXNORMAL_MAX_INVLEN2 = 100.0
_TEXTURE_THICKNESS_EPSILON = 0.00001


def _normalize_over_zero(dx: float, dy: float) -> Tuple[float, float]:
    d2 = dx * dx + dy * dy
    if d2 > 0.0:
        inv_len = 1.0 / math.sqrt(d2)
        return dx * inv_len, dy * inv_len
    return dx, dy


def _fix_normal(x: float, y: float) -> Tuple[float, float]:
    d2 = x * x + y * y
    if d2 > 0.000001:
        inv_len2 = min(1.0 / d2, FIXNORMAL_MAX_INVLEN2)
        return x * inv_len2, y * inv_len2
    return x, y


def _averaged_normal(n0: Vec2, n1: Vec2) -> Vec2:
    x, y = _fix_normal((n0.x + n1.x) * 0.5, (n0.y + n1.y) * 0.5)
    return Vec2(x, y)


def _transparent(col: int) -> int:
    return col & ~COL32_A_MASK & 0xFFFFFFFF


def _next_index(i: int, count: int) -> int:
    return 0 if i + 1 == count else i + 1


def _segment_normals(points: Sequence[Vec2], count: int, closed: bool) -> List[Vec2]:
    n = len(points)
    normals = [Vec2()] * n
    for i1 in range(count):
        i2 = _next_index(i1, n)
        dx, dy = _normalize_over_zero(points[i2].x - points[i1].x, points[i2].y - points[i1].y)
        normals[i1] = Vec2(dy, -dx)
    if not closed:
        normals[n - 1] = normals[n - 2]
    return normals


def add_polyline(
    target: DrawBuffers,
    points: Iterable[Vec2],
    col: int,
    flags: int = DrawFlags.NONE,
    thickness: float = 1.0,
) -> None:
    """Stroke a polyline into ``target``; closed when ``flags`` holds ``CLOSED``."""
    pts = list(points)
    n = len(pts)
    if n < 2 or not col & COL32_A_MASK:
        return

    closed = bool(int(flags) & DrawFlags.CLOSED)
    count = n if closed else n - 1
    thick_line = thickness > target.fringe_scale

    if target.flags & DrawListFlags.ANTI_ALIASED_LINES:
        _polyline_anti_aliased(target, pts, col, closed, count, thick_line, thickness)
    else:
        _polyline_plain(target, pts, col, count, thickness)


def _polyline_anti_aliased(
    target: DrawBuffers,
    pts: List[Vec2],
    col: int,
    closed: bool,
    count: int,
    thick_line: bool,
    thickness: float,
) -> None:
    n = len(pts)
    aa_size = target.fringe_scale
    col_trans = _transparent(col)

    thickness = max(thickness, 1.0)
    integer_thickness = int(thickness)
    fractional_thickness = thickness - integer_thickness

    use_texture = (
        bool(target.flags & DrawListFlags.ANTI_ALIASED_LINES_USE_TEX)
        and integer_thickness < TEX_LINES_WIDTH_MAX
        and fractional_thickness <= _TEXTURE_THICKNESS_EPSILON
        and aa_size == 1.0
    )

    if use_texture:
        idx_count, vtx_count = count * 6, n * 2
    elif thick_line:
        idx_count, vtx_count = count * 18, n * 4
    else:
        idx_count, vtx_count = count * 12, n * 3
    target.prim_reserve(idx_count, vtx_count)

    normals = _segment_normals(pts, count, closed)
    base = target.vtx_current_idx

    if use_texture or not thick_line:
        _polyline_thin(target, pts, col, col_trans, closed, count, normals, base,
                       use_texture, thickness, integer_thickness, aa_size)
    else:
        _polyline_thick(target, pts, col, col_trans, closed, count, normals, base,
                        thickness, aa_size)


def _polyline_thin(
    target: DrawBuffers,
    pts: List[Vec2],
    col: int,
    col_trans: int,
    closed: bool,
    count: int,
    normals: List[Vec2],
    base: int,
    use_texture: bool,
    thickness: float,
    integer_thickness: int,
    aa_size: float,
) -> None:
    n = len(pts)
    half_draw_size = (thickness * 0.5 + 1) if use_texture else aa_size
    stride = 2 if use_texture else 3

    temp = [Vec2()] * (n * 2)
    if not closed:
        last = n - 1
        temp[0] = pts[0] + normals[0] * half_draw_size
        temp[1] = pts[0] - normals[0] * half_draw_size
        temp[last * 2] = pts[last] + normals[last] * half_draw_size
        temp[last * 2 + 1] = pts[last] - normals[last] * half_draw_size

    idx1 = base
    for i1 in range(count):
        i2 = _next_index(i1, n)
        idx2 = base if i1 + 1 == n else idx1 + stride

        dm = _averaged_normal(normals[i1], normals[i2]) * half_draw_size
        temp[i2 * 2] = pts[i2] + dm
        temp[i2 * 2 + 1] = pts[i2] - dm

        if use_texture:
            indices = (idx2, idx1, idx1 + 1,
                       idx2 + 1, idx1 + 1, idx2)
        else:
            indices = (idx2, idx1, idx1 + 2,
                       idx1 + 2, idx2 + 2, idx2,
                       idx2 + 1, idx1 + 1, idx1,
                       idx1, idx2, idx2 + 1)
        for idx in indices:
            target.write_idx(idx)
        idx1 = idx2

    if use_texture:
        tex_uvs = target.shared_data.tex_uv_lines[integer_thickness]
        tex_uv0 = Vec2(tex_uvs.x, tex_uvs.y)
        tex_uv1 = Vec2(tex_uvs.z, tex_uvs.w)
        for i in range(n):
            target.write_vtx(temp[i * 2], tex_uv0, col)
            target.write_vtx(temp[i * 2 + 1], tex_uv1, col)
    else:
        opaque_uv = target.shared_data.tex_uv_white_pixel
        for i, point in enumerate(pts):
            target.write_vtx(point, opaque_uv, col)
            target.write_vtx(temp[i * 2], opaque_uv, col_trans)
            target.write_vtx(temp[i * 2 + 1], opaque_uv, col_trans)


def _polyline_thick(
    target: DrawBuffers,
    pts: List[Vec2],
    col: int,
    col_trans: int,
    closed: bool,
    count: int,
    normals: List[Vec2],
    base: int,
    thickness: float,
    aa_size: float,
) -> None:
    n = len(pts)
    half_inner = (thickness - aa_size) * 0.5
    half_outer = half_inner + aa_size

    temp = [Vec2()] * (n * 4)
    if not closed:
        for i in (0, n - 1):
            p, nrm = pts[i], normals[i]
            temp[i * 4 + 0] = p + nrm * half_outer
            temp[i * 4 + 1] = p + nrm * half_inner
            temp[i * 4 + 2] = p - nrm * half_inner
            temp[i * 4 + 3] = p - nrm * half_outer

    idx1 = base
    for i1 in range(count):
        i2 = _next_index(i1, n)
        idx2 = base if i1 + 1 == n else idx1 + 4

        dm = _averaged_normal(normals[i1], normals[i2])
        dm_out = dm * half_outer
        dm_in = dm * half_inner
        p = pts[i2]
        temp[i2 * 4 + 0] = p + dm_out
        temp[i2 * 4 + 1] = p + dm_in
        temp[i2 * 4 + 2] = p - dm_in
        temp[i2 * 4 + 3] = p - dm_out

        for idx in (idx2 + 1, idx1 + 1, idx1 + 2,
                    idx1 + 2, idx2 + 2, idx2 + 1,
                    idx2 + 1, idx1 + 1, idx1,
                    idx1, idx2, idx2 + 1,
                    idx2 + 2, idx1 + 2, idx1 + 3,
                    idx1 + 3, idx2 + 3, idx2 + 2):
            target.write_idx(idx)
        idx1 = idx2

    opaque_uv = target.shared_data.tex_uv_white_pixel
    for i in range(n):
        target.write_vtx(temp[i * 4 + 0], opaque_uv, col_trans)
        target.write_vtx(temp[i * 4 + 1], opaque_uv, col)
        target.write_vtx(temp[i * 4 + 2], opaque_uv, col)
        target.write_vtx(temp[i * 4 + 3], opaque_uv, col_trans)


def _polyline_plain(
    target: DrawBuffers, pts: List[Vec2], col: int, count: int, thickness: float
) -> None:
    n = len(pts)
    opaque_uv = target.shared_data.tex_uv_white_pixel
    target.prim_reserve(count * 6, count * 4)

    for i1 in range(count):
        p1 = pts[i1]
        p2 = pts[_next_index(i1, n)]
        dx, dy = _normalize_over_zero(p2.x - p1.x, p2.y - p1.y)
        dx *= thickness * 0.5
        dy *= thickness * 0.5

        idx = target.vtx_current_idx
        target.write_vtx(Vec2(p1.x + dy, p1.y - dx), opaque_uv, col)
        target.write_vtx(Vec2(p2.x + dy, p2.y - dx), opaque_uv, col)
        target.write_vtx(Vec2(p2.x - dy, p2.y + dx), opaque_uv, col)
        target.write_vtx(Vec2(p1.x - dy, p1.y + dx), opaque_uv, col)
        for offset in (0, 1, 2, 0, 2, 3):
            target.write_idx(idx + offset)


def add_convex_poly_filled(target: DrawBuffers, points: Iterable[Vec2], col: int) -> None:
    """Fill a convex polygon into ``target``, with an anti-aliased fringe if enabled."""
    pts = list(points)
    n = len(pts)
    if n < 3 or not col & COL32_A_MASK:
        return

    uv = target.shared_data.tex_uv_white_pixel

    if target.flags & DrawListFlags.ANTI_ALIASED_FILL:
        aa_size = target.fringe_scale
        col_trans = _transparent(col)
        target.prim_reserve((n - 2) * 3 + n * 6, n * 2)

        inner = target.vtx_current_idx
        outer = inner + 1
        for i in range(2, n):
            target.write_idx(inner)
            target.write_idx(inner + ((i - 1) << 1))
            target.write_idx(inner + (i << 1))

        pairs = list(zip([n - 1, *range(n - 1)], range(n)))
        normals = [Vec2()] * n
        for i0, i1 in pairs:
            dx, dy = _normalize_over_zero(pts[i1].x - pts[i0].x, pts[i1].y - pts[i0].y)
            normals[i0] = Vec2(dy, -dx)

        for i0, i1 in pairs:
            dm = _averaged_normal(normals[i0], normals[i1]) * (aa_size * 0.5)
            target.write_vtx(pts[i1] - dm, uv, col)
            target.write_vtx(pts[i1] + dm, uv, col_trans)
            for idx in (inner + (i1 << 1), inner + (i0 << 1), outer + (i0 << 1),
                        outer + (i0 << 1), outer + (i1 << 1), inner + (i1 << 1)):
                target.write_idx(idx)
    else:
        target.prim_reserve((n - 2) * 3, n)
        base = target.vtx_current_idx
        for point in pts:
            target.write_vtx(point, uv, col)
        for i in range(2, n):
            target.write_idx(base)
            target.write_idx(base + i - 1)
            target.write_idx(base + i)