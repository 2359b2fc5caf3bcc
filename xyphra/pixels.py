"""Pixel-level helpers for 8-bit and 32-bit texture data."""

from __future__ import annotations

from typing import List, Sequence, Union

from .geometry import COL32_BLACK_TRANS


def build_multiply_table(brighten_factor: float) -> bytes:
    """Lookup table mapping each 8-bit value to ``value * brighten_factor``, saturated."""
    return bytes(min(255, max(0, int(i * brighten_factor))) for i in range(256))


def multiply_rect_alpha8(
    table: Sequence[int],
    pixels: bytearray,
    x: int,
    y: int,
    w: int,
    h: int,
    stride: int,
) -> None:
    """Remap, in place, a ``w`` by ``h`` rectangle of 8-bit pixels through ``table``."""
    if len(table) != 256:
        raise ValueError("lookup table must hold 256 entries")
    translation = bytes(table)
    for row in range(y, y + h):
        start = x + row * stride
        pixels[start:start + w] = bytes(pixels[start:start + w]).translate(translation)


class Texture:
    """A texture of ``width`` by ``height`` pixels, either alpha-only or RGBA32."""

    def __init__(self, width: int, height: int, rgba32: bool = False) -> None:
        if width < 0 or height < 0:
            raise ValueError("texture dimensions must not be negative")
        self.width = width
        self.height = height
        self.rgba32 = rgba32
        self.pixels: Union[bytearray, List[int]] = (
            [COL32_BLACK_TRANS] * (width * height) if rgba32 else bytearray(width * height)
        )

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} texture")
        return x + y * self.width

    def pixel(self, x: int, y: int) -> int:
        return self.pixels[self._offset(x, y)]

    def set_pixel(self, x: int, y: int, value: int) -> None:
        limit = 0xFFFFFFFF if self.rgba32 else 0xFF
        if not 0 <= value <= limit:
            raise ValueError(f"pixel value {value:#x} out of range")
        self.pixels[self._offset(x, y)] = value

    def render_rect_from_string(
        self, x: int, y: int, w: int, h: int, text: str, marker: str, value: int
    ) -> None:
        """Fill a rectangle from ``text``, rows of ``w`` characters; ``marker`` cells get ``value``."""
        if x < 0 or x + w > self.width:
            raise ValueError("rectangle exceeds texture width")
        if y < 0 or y + h > self.height:
            raise ValueError("rectangle exceeds texture height")
        if len(text) < w * h:
            raise ValueError("source string is shorter than the rectangle")
        empty = COL32_BLACK_TRANS if self.rgba32 else 0x00
        for row in range(h):
            line = text[row * w:(row + 1) * w]
            start = x + (y + row) * self.width
            self.pixels[start:start + w] = type(self.pixels)(
                value if ch == marker else empty for ch in line
            )