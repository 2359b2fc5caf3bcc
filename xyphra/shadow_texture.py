"""Rendering of the rectangular and convex shadow textures into an atlas."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional

from .custom_rects import CustomRect, custom_rect_uv
from .fields import distance_from_point, distance_from_rectangle, gaussian_blur
from .geometry import Vec2, Vec4, col32
from .pixels import Texture


@dataclass
class ShadowTexConfig:
    """Shape of the baked shadow textures."""

    corner_size: int
    edge_size: int
    falloff_power: float
    distance_field_offset: float
    blur: bool = True


def _uv_scale_for(texture: Texture, uv_scale: Optional[Vec2]) -> Vec2:
    if uv_scale is not None:
        return uv_scale
    if texture.width == 0 or texture.height == 0:
        raise ValueError("cannot derive a UV scale from an empty texture")
    return Vec2(1.0 / texture.width, 1.0 / texture.height)


def _alpha(dist: float, config: ShadowTexConfig) -> float:
    offset = config.distance_field_offset
    ratio = max(dist + offset, 0.0) / max(float(config.corner_size) + offset, 0.001)
    return (1.0 - min(ratio, 1.0)) ** config.falloff_power


def _store(texture: Texture, x: int, y: int, alpha: float) -> None:
    alpha_8 = min(255, max(0, int(0xFF * alpha)))
    texture.set_pixel(x, y, col32(255, 255, 255, alpha_8) if texture.rgba32 else alpha_8)


def _shrink(rect: CustomRect, padding: int, width: int, height: int) -> CustomRect:
    return CustomRect(width=width, height=height, x=rect.x + padding, y=rect.y + padding)


def render_rect_shadow(
    texture: Texture,
    rect: CustomRect,
    config: ShadowTexConfig,
    padding: int,
    tex_size: int,
    uv_scale: Optional[Vec2] = None,
) -> List[Vec4]:
    """Render the rectangular shadow texture into ``rect``.

    Returns the UVs of the nine sections of a 3x3 grid, row by row; the third
    row and column reuse the first ones, flipped.
    """
    if not rect.is_packed():
        raise ValueError("shadow rectangle has not been packed")
    scale = _uv_scale_for(texture, uv_scale)
    corner, edge = config.corner_size, config.edge_size
    size = corner + edge + corner
    if tex_size > size:
        raise ValueError("shadow texture size exceeds the generated field")

    rect_min = Vec2(float(corner), float(corner))
    rect_max = Vec2(float(corner + edge), float(corner + edge))
    field = [
        _alpha(distance_from_rectangle(Vec2(float(x), float(y)), rect_min, rect_max), config)
        for y in range(size)
        for x in range(size)
    ]
    if config.blur:
        field = gaussian_blur(field, size)

    inner = _shrink(rect, padding, rect.width - padding * 2, rect.height - padding * 2)
    for y in range(tex_size):
        for x in range(tex_size):
            _store(texture, inner.x + x, inner.y + y, field[x + y * size])

    uvs: List[Vec4] = []
    for i in range(9):
        column, row = i % 3, i // 3
        sub_x, sub_w = (inner.x + corner, edge) if column == 1 else (inner.x, corner)
        sub_y, sub_h = (inner.y + corner, edge) if row == 1 else (inner.y, corner)
        uv0, uv1 = custom_rect_uv(CustomRect(width=sub_w, height=sub_h, x=sub_x, y=sub_y), scale)
        flip_h, flip_v = column == 2, row == 2
        uvs.append(
            Vec4(
                uv1.x if flip_h else uv0.x,
                uv1.y if flip_v else uv0.y,
                uv0.x if flip_h else uv1.x,
                uv0.y if flip_v else uv1.y,
            )
        )
    return uvs


def render_convex_shadow(
    texture: Texture,
    rect: CustomRect,
    config: ShadowTexConfig,
    padding: int,
    tex_width: int,
    tex_height: int,
    uv_scale: Optional[Vec2] = None,
) -> Vec4:
    """Render the radial shadow texture used by convex shapes into ``rect``; returns its UVs."""
    if not rect.is_packed():
        raise ValueError("shadow rectangle has not been packed")
    if tex_width < padding * 2 or tex_height < padding * 2:
        raise ValueError("texture size is smaller than its padding")
    scale = _uv_scale_for(texture, uv_scale)
    corner = config.corner_size
    size = corner * 2
    if size <= 0:
        raise ValueError("corner size must be positive")

    center = Vec2(size * 0.5, size * 0.5)
    field = [
        _alpha(distance_from_point(Vec2(float(x), float(y)), center), config)
        for y in range(size)
        for x in range(size)
    ]
    if config.blur:
        field = gaussian_blur(field, size)

    padded_size = int(corner / math.cos(math.pi * 0.25))
    src_offset = padding + (padded_size - corner)
    for y in range(tex_height):
        src_y = min(max(y - src_offset, 0), size - 1)
        for x in range(tex_width):
            src_x = min(max(x - src_offset, 0), size - 1)
            _store(texture, rect.x + x, rect.y + y, field[src_x + src_y * size])

    inner = _shrink(rect, padding, tex_width - padding * 2, tex_height - padding * 2)
    uv0, uv1 = custom_rect_uv(inner, scale)
    return Vec4(uv0.x, uv0.y, uv1.x, uv1.y)