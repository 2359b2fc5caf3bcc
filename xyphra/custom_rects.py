"""Custom rectangles reserved in a font atlas texture."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from .geometry import Vec2

UNPACKED = 0xFFFF
_USHORT_MAX = 0xFFFF


@dataclass
class CustomRect:
    """A rectangle reserved in the atlas; ``x``/``y`` are set once it is packed."""

    width: int = 0
    height: int = 0
    x: int = UNPACKED
    y: int = UNPACKED
    glyph_id: int = 0
    glyph_advance_x: float = 0.0
    glyph_offset: Vec2 = field(default_factory=Vec2)
    font: Optional[Any] = None

    def __post_init__(self) -> None:
        for name in ("width", "height", "x", "y"):
            value = getattr(self, name)
            if not 0 <= value <= _USHORT_MAX:
                raise ValueError(f"{name} {value} outside 0..{_USHORT_MAX}")

    def is_packed(self) -> bool:
        """Whether the packer has placed this rectangle in the texture."""
        return self.x != UNPACKED


def custom_rect_uv(rect: CustomRect, uv_scale: Vec2) -> Tuple[Vec2, Vec2]:
    """Texture coordinates of the top-left and bottom-right corners of ``rect``."""
    if not rect.is_packed():
        raise ValueError("custom rectangle has not been packed")
    uv0 = Vec2(rect.x * uv_scale.x, rect.y * uv_scale.y)
    uv1 = Vec2((rect.x + rect.width) * uv_scale.x, (rect.y + rect.height) * uv_scale.y)
    return uv0, uv1