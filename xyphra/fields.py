"""Distance fields and the separable Gaussian blur used for shadow textures."""

from __future__ import annotations

from typing import Iterable, List

from .geometry import Vec2

GAUSSIAN_KERNEL = (
    0.0,
    0.0,
    0.000003,
    0.000229,
    0.005977,
    0.060598,
    0.24173,
    0.382925,
    0.24173,
    0.060598,
    0.005977,
    0.000229,
    0.000003,
    0.0,
    0.0,
)


def distance_from_rectangle(sample_pos: Vec2, rect_min: Vec2, rect_max: Vec2) -> float:
    """Signed distance from ``sample_pos`` to a rectangle; negative inside."""
    centre = (rect_min + rect_max) * 0.5
    half_size = (rect_max - rect_min) * 0.5
    local = sample_pos - centre
    axis_dist = Vec2(abs(local.x), abs(local.y)) - half_size
    out_dist = Vec2(max(axis_dist.x, 0.0), max(axis_dist.y, 0.0)).length(0.00001)
    in_dist = min(max(axis_dist.x, axis_dist.y), 0.0)
    return out_dist + in_dist


def distance_from_point(sample_pos: Vec2, point: Vec2) -> float:
    """Euclidean distance between two points."""
    return (sample_pos - point).length(0.0)


def _blur_pass(src: List[float], size: int, horizontal: bool) -> List[float]:
    radius = (len(GAUSSIAN_KERNEL) - 1) >> 1
    out: List[float] = []
    for y in range(size):
        for x in range(size):
            along = x if horizontal else y
            total = 0.0
            for j, coefficient in enumerate(GAUSSIAN_KERNEL):
                offset = along - radius + j
                if 0 <= offset < size:
                    sample = src[y * size + offset] if horizontal else src[offset * size + x]
                    total += sample * coefficient
            out.append(total)
    return out


def gaussian_blur(data: Iterable[float], size: int) -> List[float]:
    """Blur a ``size`` by ``size`` row-major field; returns the blurred values."""
    values = [float(v) for v in data]
    if size < 0 or len(values) != size * size:
        raise ValueError("data must hold size * size values")
    return _blur_pass(_blur_pass(values, size, True), size, False)