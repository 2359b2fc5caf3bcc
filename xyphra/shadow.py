"""Subtracted-rectangle geometry and soft shadows for convex shapes."""

from __future__ import annotations

import math
from typing import Iterable, List

from .buffers import DrawBuffers, DrawFlags, DrawListFlags
from .clipping import clip_polygon
from .geometry import Vec2

_DEGENERATE_AREA2 = 0.1 * 2.0
_STRAIGHT_CORNER_COS = 0.999999
_MIN_EDGE_LENGTH = 0.00001
_INSET_DISTANCE = 0.5
_SHADOW_TEX_SIZE = 4
_CONVEX_SHADOW_UV_INDEX = 9


def _signed_area2(a: Vec2, b: Vec2, c: Vec2) -> float:
    return a.x * (b.y - c.y) + b.x * (c.y - a.y) + c.x * (a.y - b.y)


def _is_degenerate(a: Vec2, b: Vec2, c: Vec2) -> bool:
    return abs(_signed_area2(a, b, c)) < _DEGENERATE_AREA2


def _normalize(vec: Vec2) -> Vec2:
    return vec / vec.length(0.001)


def _uv_mapper(a_min: Vec2, a_max: Vec2, a_min_uv: Vec2, a_max_uv: Vec2):
    scale = (a_max_uv - a_min_uv) / (a_max - a_min)

    def to_uv(pos: Vec2) -> Vec2:
        return a_min_uv + (pos - a_min) * scale

    return to_uv


def _outer_corner_index(normal: Vec2) -> int:
    """Corner (0=top left, 1=top right, 2=bottom right, 3=bottom left) a normal points at."""
    if abs(normal.x) > abs(normal.y):
        if normal.x >= 0.0:
            return 2 if normal.y > 0.0 else 1
        return 3 if normal.y > 0.0 else 0
    if normal.y >= 0.0:
        return 2 if normal.x > 0.0 else 3
    return 1 if normal.x > 0.0 else 0


def add_subtracted_rect(
    target: DrawBuffers,
    a_min: Vec2,
    a_max: Vec2,
    a_min_uv: Vec2,
    a_max_uv: Vec2,
    b_points: Iterable[Vec2],
    col: int,
) -> None:
    """Draw rectangle A with the convex polygon B cut out of it."""
    if a_min.x >= a_max.x or a_min.y >= a_max.y:
        return

    source = list(b_points)
    inner = clip_polygon(source, a_min, a_max, len(source) + 4)

    if not inner:
        target.prim_reserve(6, 4)
        target.prim_rect_uv(a_min, a_max, a_min_uv, a_max_uv, col)
        return

    n = len(inner)
    max_verts = n + 4
    max_indices = n * 3 + 4 * 3
    target.prim_reserve(max_indices, max_verts)

    inner_idx = target.vtx_current_idx
    to_uv = _uv_mapper(a_min, a_max, a_min_uv, a_max_uv)
    for point in inner:
        target.write_vtx(point, to_uv(point), col)

    outer_idx = inner_idx + n
    outer = (
        Vec2(a_min.x, a_min.y),
        Vec2(a_max.x, a_min.y),
        Vec2(a_max.x, a_max.y),
        Vec2(a_min.x, a_max.y),
    )
    outer_uvs = (
        Vec2(a_min_uv.x, a_min_uv.y),
        Vec2(a_max_uv.x, a_min_uv.y),
        Vec2(a_max_uv.x, a_max_uv.y),
        Vec2(a_min_uv.x, a_max_uv.y),
    )
    for pos, uv in zip(outer, outer_uvs):
        target.write_vtx(pos, uv, col)

    used = 0

    def triangle(i0: int, i1: int, i2: int) -> None:
        nonlocal used
        target.write_idx(i0)
        target.write_idx(i1)
        target.write_idx(i2)
        used += 3

    winding = -1 if _signed_area2(inner[0], inner[1], inner[2]) < 0.0 else 1

    def walk_outer(from_idx: int, to_idx: int, inner_vert: Vec2, inner_vert_idx: int) -> int:
        while to_idx != from_idx:
            nxt = (from_idx + winding) & 3
            if not _is_degenerate(outer[from_idx], outer[nxt], inner_vert):
                triangle(outer_idx + from_idx, outer_idx + nxt, inner_idx + inner_vert_idx)
            from_idx = nxt
        return from_idx

    last_inner = inner[-1]
    last_inner_idx = n - 1
    first_outer = -1
    last_outer = -1

    for i, current in enumerate(inner):
        normal = Vec2(current.y - last_inner.y, -(current.x - last_inner.x))
        corner = _outer_corner_index(normal)

        if not _is_degenerate(last_inner, current, outer[corner]):
            triangle(inner_idx + last_inner_idx, inner_idx + i, outer_idx + corner)

        if first_outer == -1:
            first_outer = corner
            last_outer = corner

        last_outer = walk_outer(last_outer, corner, last_inner, last_inner_idx)

        last_inner = current
        last_inner_idx = i

    if first_outer != -1:
        walk_outer(last_outer, first_outer, last_inner, last_inner_idx)

    target.prim_unreserve(max_indices - used, 0)


def add_subtracted_rect_box(
    target: DrawBuffers,
    a_min: Vec2,
    a_max: Vec2,
    a_min_uv: Vec2,
    a_max_uv: Vec2,
    b_min: Vec2,
    b_max: Vec2,
    col: int,
) -> None:
    """Draw rectangle A with the axis-aligned rectangle B cut out of it."""
    if a_min.x >= a_max.x or a_min.y >= a_max.y:
        return
    if a_min.x >= b_min.x and a_max.x <= b_max.x and a_min.y >= b_min.y and a_max.y <= b_max.y:
        return

    b_min = b_min.maximum(a_min)
    b_max = b_max.minimum(a_max)
    if b_min.x >= b_max.x or b_min.y >= b_max.y:
        target.prim_reserve(6, 4)
        target.prim_rect_uv(a_min, a_max, a_min_uv, a_max_uv, col)
        return

    # Vertex layout (letters are the quads that may be emitted):
    # 0---8------9-----1
    # |   |  B   |     |
    # +   4------5     +
    # | A |xxxxxx|  C  |
    # +   7------6     +
    # |   |  D   |     |
    # 3---11-----10----2
    max_verts = 12
    max_indices = 6 * 4
    target.prim_reserve(max_indices, max_verts)
    idx = target.vtx_current_idx

    target.write_vtx(Vec2(a_min.x, a_min.y), Vec2(a_min_uv.x, a_min_uv.y), col)
    target.write_vtx(Vec2(a_max.x, a_min.y), Vec2(a_max_uv.x, a_min_uv.y), col)
    target.write_vtx(Vec2(a_max.x, a_max.y), Vec2(a_max_uv.x, a_max_uv.y), col)
    target.write_vtx(Vec2(a_min.x, a_max.y), Vec2(a_min_uv.x, a_max_uv.y), col)

    to_uv = _uv_mapper(a_min, a_max, a_min_uv, a_max_uv)
    for pos in (
        Vec2(b_min.x, b_min.y),
        Vec2(b_max.x, b_min.y),
        Vec2(b_max.x, b_max.y),
        Vec2(b_min.x, b_max.y),
        Vec2(b_min.x, a_min.y),
        Vec2(b_max.x, a_min.y),
        Vec2(b_max.x, a_max.y),
        Vec2(b_min.x, a_max.y),
    ):
        target.write_vtx(pos, to_uv(pos), col)

    quads: List[tuple] = []
    if b_min.x > a_min.x:
        quads.append((0, 8, 11, 0, 11, 3))
    if b_min.y > a_min.y:
        quads.append((8, 9, 5, 8, 5, 4))
    if a_max.x > b_max.x:
        quads.append((9, 1, 2, 9, 2, 10))
    if a_max.y > b_max.y:
        quads.append((7, 6, 10, 7, 10, 11))

    for quad in quads:
        for offset in quad:
            target.write_idx(idx + offset)

    target.prim_unreserve(max_indices - 6 * len(quads), 0)


def add_shadow_convex_poly(
    target: DrawBuffers,
    points: Iterable[Vec2],
    shadow_col: int,
    shadow_thickness: float,
    shadow_offset: Vec2 = Vec2(),
    flags: int = DrawFlags.NONE,
) -> None:
    """Draw a soft shadow around a convex polygon, filled unless cut out."""
    pts = list(points)
    n = len(pts)
    is_filled = not int(flags) & DrawFlags.SHADOW_CUT_OUT_SHAPE_BACKGROUND
    if not is_filled and shadow_offset.length_sqr() >= 0.00001:
        raise ValueError("shadows with a cut-out shape and an offset are not supported")
    if n < 3:
        raise ValueError("a convex shadow needs at least three points")

    winding = -1 if _signed_area2(pts[0], pts[1], pts[2]) < 0.0 else 1
    use_inset = bool(target.flags & DrawListFlags.ANTI_ALIASED_FILL) and not is_filled

    uvs = target.shared_data.shadow_rect_uvs[_CONVEX_SHADOW_UV_INDEX]
    inv_tex = 1.0 / float(_SHADOW_TEX_SIZE)
    solid_uv = Vec2(uvs.z, uvs.w)
    edge_uv = Vec2(uvs.x, uvs.w)
    solid_to_edge_texels = (edge_uv - solid_uv) * float(_SHADOW_TEX_SIZE)

    normals = [
        _normalize(Vec2(end.y - start.y, -(end.x - start.x))) * float(winding)
        for start, end in zip(pts, pts[1:] + pts[:1])
    ]

    scales: List[float] = []
    prev_normal = normals[-1]
    for normal in normals:
        cos_cov = normal.dot(prev_normal)
        if cos_cov < _STRAIGHT_CORNER_COS:
            angle = math.acos(max(-1.0, min(1.0, cos_cov)))
            if cos_cov <= 0.0:
                angle *= 0.5
            scales.append(1.0 / math.cos(angle * 0.5))
        else:
            scales.append(1.0)
        prev_normal = normal

    max_vertices = (4 + 3 * 2 + (1 if is_filled else 0)) * n
    max_indices = (6 + 3 * 2) * n + ((n - 2) * 3 if is_filled else 0)
    target.prim_reserve(max_indices, max_vertices)
    start_vtx = target.vtx_current_idx
    used_indices = 0

    def indices(*values: int) -> None:
        nonlocal used_indices
        for value in values:
            target.write_idx(value)
        used_indices += len(values)

    prev_normal = normals[-1]
    edge_start = pts[0] + shadow_offset
    if use_inset:
        edge_start = edge_start - _normalize(normals[0] + prev_normal) * _INSET_DISTANCE

    for i in range(n):
        nxt = (i + 1) % n
        edge_end = pts[nxt] + shadow_offset
        edge_normal = normals[i]
        scale_start = scales[i]
        scale_end = scales[nxt]
        if use_inset:
            edge_end = edge_end - _normalize(normals[nxt] + edge_normal) * _INSET_DISTANCE

        cos_cov = edge_normal.dot(prev_normal)
        if cos_cov < _STRAIGHT_CORNER_COS:
            steps = 2 if cos_cov <= 0.0 else 1
            for step in range(steps):
                if steps > 1:
                    edge_normal = (
                        _normalize(edge_normal + prev_normal) if step == 0 else normals[i]
                    )
                    cos_cov = edge_normal.dot(prev_normal)

                angle = math.acos(max(-1.0, min(1.0, cos_cov)))
                sin_cov = math.sin(angle)
                delta = solid_to_edge_texels * scale_start
                rotated = Vec2(
                    delta.x * cos_cov + delta.y * sin_cov,
                    delta.x * sin_cov + delta.y * cos_cov,
                )
                expanded_uv = solid_uv + delta * inv_tex
                other_uv = solid_uv + rotated * inv_tex

                expanded_thickness = shadow_thickness * scale_start
                outer_start = edge_start + prev_normal * expanded_thickness
                outer_end = edge_start + edge_normal * expanded_thickness

                base = target.vtx_current_idx
                target.write_vtx(edge_start, solid_uv, shadow_col)
                target.write_vtx(outer_end, expanded_uv, shadow_col)
                target.write_vtx(outer_start, other_uv, shadow_col)
                indices(base, base + 1, base + 2)

                prev_normal = edge_normal

        if (edge_end - edge_start).length(0.0) > _MIN_EDGE_LENGTH:
            outer_start = edge_start + edge_normal * (shadow_thickness * scale_start)
            outer_end = edge_end + edge_normal * (shadow_thickness * scale_end)
            uv_start = solid_uv + (edge_uv - solid_uv) * scale_start
            uv_end = solid_uv + (edge_uv - solid_uv) * scale_end

            base = target.vtx_current_idx
            target.write_vtx(edge_start, solid_uv, shadow_col)
            target.write_vtx(edge_end, solid_uv, shadow_col)
            target.write_vtx(outer_end, uv_end, shadow_col)
            target.write_vtx(outer_start, uv_start, shadow_col)
            indices(base, base + 1, base + 2, base, base + 2, base + 3)

        edge_start = edge_end

    if is_filled:
        base = target.vtx_current_idx
        for point in pts:
            target.write_vtx(point + shadow_offset, solid_uv, shadow_col)
        for i in range(2, n):
            indices(base, base + i - 1, base + i)

    used_vertices = target.vtx_current_idx - start_vtx
    target.prim_unreserve(max_indices - used_indices, max_vertices - used_vertices)