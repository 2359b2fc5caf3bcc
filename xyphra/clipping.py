"""Clipping of convex polygons against an axis-aligned rectangle."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .geometry import Vec2

_REDUNDANT_VERTEX_DIST_SQR = 0.00001

_PLANE_MIN_X = 0
_PLANE_MAX_X = 1
_PLANE_MIN_Y = 2
_PLANE_MAX_Y = 3


class ClipBufferError(Exception):
    """Raised when the clipped polygon needs more vertices than the given capacity."""


def _outflags(pos: Vec2, clip_min: Vec2, clip_max: Vec2) -> int:
    """Bit mask of the clip planes (X-, X+, Y-, Y+) that ``pos`` lies outside of."""
    return (
        (1 if pos.x < clip_min.x else 0)
        | (2 if pos.x > clip_max.x else 0)
        | (4 if pos.y < clip_min.y else 0)
        | (8 if pos.y > clip_max.y else 0)
    )


def _intersect(plane: int, pos0: Vec2, pos1: Vec2, clip_min: Vec2, clip_max: Vec2) -> Vec2:
    if plane == _PLANE_MIN_X:
        t = (clip_min.x - pos0.x) / (pos1.x - pos0.x)
        return Vec2(clip_min.x, pos0.y + (pos1.y - pos0.y) * t)
    if plane == _PLANE_MAX_X:
        t = (clip_max.x - pos0.x) / (pos1.x - pos0.x)
        return Vec2(clip_max.x, pos0.y + (pos1.y - pos0.y) * t)
    if plane == _PLANE_MIN_Y:
        t = (clip_min.y - pos0.y) / (pos1.y - pos0.y)
        return Vec2(pos0.x + (pos1.x - pos0.x) * t, clip_min.y)
    t = (clip_max.y - pos0.y) / (pos1.y - pos0.y)
    return Vec2(pos0.x + (pos1.x - pos0.x) * t, clip_max.y)


def clip_polygon(
    points: Iterable[Vec2],
    clip_min: Vec2,
    clip_max: Vec2,
    capacity: Optional[int] = None,
) -> List[Vec2]:
    """Clip a convex polygon to the rectangle ``[clip_min, clip_max]``.

    Returns the clipped vertices, or an empty list when nothing of the shape
    remains. ``capacity`` bounds the number of vertices the work buffers may
    hold (by default four more than the input); exceeding it raises
    :class:`ClipBufferError`.
    """
    src = list(points)
    if capacity is None:
        capacity = len(src) + 4

    if clip_max.x <= clip_min.x or clip_max.y <= clip_min.y:
        return []
    if len(src) < 3:
        return []

    flags = [_outflags(p, clip_min, clip_max) for p in src]
    anded = 0xFF
    ored = 0
    for f in flags:
        anded &= f
        ored |= f
    if anded != 0:
        return []

    if ored == 0:
        if capacity < len(src):
            raise ClipBufferError(
                f"polygon of {len(src)} vertices exceeds capacity {capacity}"
            )
        return src

    verts = src
    for plane in range(4):
        plane_bit = 1 << plane
        if not ored & plane_bit:
            continue

        out_verts: List[Vec2] = []
        out_flags: List[int] = []

        def emit(vert: Vec2, vert_flags: int) -> None:
            if len(out_verts) >= capacity:
                raise ClipBufferError(f"clipped polygon exceeds capacity {capacity}")
            out_verts.append(vert)
            out_flags.append(vert_flags)

        last_vert = verts[-1]
        last_flags = flags[-1]
        for vert, current_flags in zip(verts, flags):
            outside = (current_flags & plane_bit) != 0
            if not (current_flags ^ last_flags) & plane_bit:
                if not outside:
                    emit(vert, current_flags)
            else:
                crossing = _intersect(plane, last_vert, vert, clip_min, clip_max)
                emit(crossing, _outflags(crossing, clip_min, clip_max))
                if not outside:
                    emit(vert, current_flags)
                last_flags = current_flags
            last_vert = vert

        verts = out_verts
        flags = out_flags

    if len(verts) < 3:
        return []

    result: List[Vec2] = []
    last = verts[-1]
    for vert in verts:
        if (vert - last).length_sqr() <= _REDUNDANT_VERTEX_DIST_SQR:
            continue
        result.append(vert)
        last = vert

    return result if len(result) > 2 else []