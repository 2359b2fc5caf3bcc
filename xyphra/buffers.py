"""Draw-command, vertex and index buffers, plus the data shared by draw lists."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from .geometry import Vec2, Vec4

TEX_LINES_WIDTH_MAX = 63
ARCFAST_TABLE_SIZE = 48
ARCFAST_SAMPLE_MAX = ARCFAST_TABLE_SIZE
CIRCLE_AUTO_SEGMENT_MIN = 4
CIRCLE_AUTO_SEGMENT_MAX = 512
CIRCLE_SEGMENT_COUNT_TABLE_SIZE = 64
SHADOW_RECT_UV_COUNT = 10
INDEX_MASK = 0xFFFF
VTX_OFFSET_LIMIT = 1 << 16


class DrawFlags(enum.IntFlag):
    """Flags for path, rectangle and shadow drawing."""

    NONE = 0
    CLOSED = 1 << 0
    ROUND_CORNERS_TOP_LEFT = 1 << 4
    ROUND_CORNERS_TOP_RIGHT = 1 << 5
    ROUND_CORNERS_BOTTOM_LEFT = 1 << 6
    ROUND_CORNERS_BOTTOM_RIGHT = 1 << 7
    ROUND_CORNERS_NONE = 1 << 8
    SHADOW_CUT_OUT_SHAPE_BACKGROUND = 1 << 9
    ROUND_CORNERS_TOP = ROUND_CORNERS_TOP_LEFT | ROUND_CORNERS_TOP_RIGHT
    ROUND_CORNERS_BOTTOM = ROUND_CORNERS_BOTTOM_LEFT | ROUND_CORNERS_BOTTOM_RIGHT
    ROUND_CORNERS_LEFT = ROUND_CORNERS_BOTTOM_LEFT | ROUND_CORNERS_TOP_LEFT
    ROUND_CORNERS_RIGHT = ROUND_CORNERS_BOTTOM_RIGHT | ROUND_CORNERS_TOP_RIGHT
    ROUND_CORNERS_ALL = (
        ROUND_CORNERS_TOP_LEFT
        | ROUND_CORNERS_TOP_RIGHT
        | ROUND_CORNERS_BOTTOM_LEFT
        | ROUND_CORNERS_BOTTOM_RIGHT
    )
    ROUND_CORNERS_MASK = ROUND_CORNERS_ALL | ROUND_CORNERS_NONE


class DrawListFlags(enum.IntFlag):
    """Behaviour switches of a draw list."""

    NONE = 0
    ANTI_ALIASED_LINES = 1 << 0
    ANTI_ALIASED_LINES_USE_TEX = 1 << 1
    ANTI_ALIASED_FILL = 1 << 2
    ALLOW_VTX_OFFSET = 1 << 3


@dataclass
class Vertex:
    """A single vertex: position, texture coordinate and packed colour."""

    pos: Vec2 = Vec2()
    uv: Vec2 = Vec2()
    col: int = 0


@dataclass
class DrawCmd:
    """One draw call: a run of indices sharing clip rectangle, texture and vertex offset."""

    clip_rect: Vec4 = Vec4()
    texture_id: Any = None
    vtx_offset: int = 0
    idx_offset: int = 0
    elem_count: int = 0

    def same_header(self, other: "DrawCmd") -> bool:
        return (
            self.clip_rect == other.clip_rect
            and self.texture_id == other.texture_id
            and self.vtx_offset == other.vtx_offset
        )


def fix_rect_corner_flags(flags: int) -> DrawFlags:
    """Normalise corner flags, accepting the legacy ``~0`` and ``0x01..0x0F`` forms."""
    value = int(flags)
    if value == -1:
        return DrawFlags.ROUND_CORNERS_ALL
    if 0x01 <= value <= 0x0F:
        return DrawFlags(value << 4)
    if value & 0x0F:
        raise ValueError("misuse of legacy hard-coded corner flag values")
    if not value & DrawFlags.ROUND_CORNERS_MASK:
        value |= DrawFlags.ROUND_CORNERS_ALL
    return DrawFlags(value)


def circle_auto_segment_calc(radius: float, max_error: float) -> int:
    """Number of segments for a circle of ``radius`` within ``max_error`` pixels."""
    if radius <= 0.0:
        raise ValueError("radius must be positive")
    n = math.ceil(math.pi / math.acos(1.0 - min(max_error, radius) / radius))
    even = ((n + 1) // 2) * 2
    return max(CIRCLE_AUTO_SEGMENT_MIN, min(CIRCLE_AUTO_SEGMENT_MAX, even))


def _circle_auto_segment_radius(segments: int, max_error: float) -> float:
    return max_error / (1.0 - math.cos(math.pi / max(float(segments), math.pi)))


def _arc_fast_table() -> Tuple[Vec2, ...]:
    return tuple(
        Vec2(math.cos(a), math.sin(a))
        for a in (i * 2.0 * math.pi / ARCFAST_TABLE_SIZE for i in range(ARCFAST_TABLE_SIZE))
    )


@dataclass
class SharedData:
    """Data shared between draw lists: texture lookups and tessellation settings."""

    tex_uv_white_pixel: Vec2 = Vec2()
    tex_uv_lines: List[Vec4] = field(
        default_factory=lambda: [Vec4()] * (TEX_LINES_WIDTH_MAX + 1)
    )
    shadow_rect_uvs: List[Vec4] = field(default_factory=lambda: [Vec4()] * SHADOW_RECT_UV_COUNT)
    clip_rect_fullscreen: Vec4 = Vec4(-8192.0, -8192.0, 8192.0, 8192.0)
    curve_tessellation_tol: float = 1.25
    circle_segment_max_error: float = 0.30
    arc_fast_vtx: Tuple[Vec2, ...] = field(init=False, default=())
    arc_fast_radius_cutoff: float = field(init=False, default=0.0)
    circle_segment_counts: Tuple[int, ...] = field(init=False, default=())

    def __post_init__(self) -> None:
        self.arc_fast_vtx = _arc_fast_table()
        self.set_circle_tessellation_max_error(self.circle_segment_max_error)

    def set_circle_tessellation_max_error(self, max_error: float) -> None:
        """Rebuild the cached per-radius segment counts for a new error bound."""
        if max_error <= 0.0:
            raise ValueError("max_error must be positive")
        self.circle_segment_max_error = max_error
        self.circle_segment_counts = tuple(
            circle_auto_segment_calc(float(i), max_error) if i > 0 else ARCFAST_SAMPLE_MAX
            for i in range(CIRCLE_SEGMENT_COUNT_TABLE_SIZE)
        )
        self.arc_fast_radius_cutoff = _circle_auto_segment_radius(ARCFAST_SAMPLE_MAX, max_error)

    def circle_segment_count(self, radius: float) -> int:
        """Automatic segment count for a circle of ``radius``, cached for small radii."""
        radius_idx = int(radius + 0.999999)
        if 0 <= radius_idx < len(self.circle_segment_counts):
            return self.circle_segment_counts[radius_idx]
        return circle_auto_segment_calc(radius, self.circle_segment_max_error)


class DrawBuffers:
    """Command, vertex and index buffers with reservation and state stacks."""

    def __init__(
        self,
        shared_data: Optional[SharedData] = None,
        flags: DrawListFlags = DrawListFlags.NONE,
        fringe_scale: float = 1.0,
    ) -> None:
        self.shared_data = shared_data if shared_data is not None else SharedData()
        self.flags = DrawListFlags(flags)
        self.fringe_scale = fringe_scale
        self.cmd_buffer: List[DrawCmd] = []
        self.idx_buffer: List[int] = []
        self.vtx_buffer: List[Vertex] = []
        self.vtx_current_idx = 0
        self._vtx_write = 0
        self._idx_write = 0
        self._header = DrawCmd(clip_rect=self.shared_data.clip_rect_fullscreen)
        self._clip_rect_stack: List[Vec4] = []
        self._texture_id_stack: List[Any] = []
        self.add_draw_cmd()

    @property
    def clip_rect(self) -> Vec4:
        """The clip rectangle new primitives are drawn with."""
        return self._header.clip_rect

    @property
    def texture_id(self) -> Any:
        """The texture new primitives are drawn with."""
        return self._header.texture_id

    @property
    def vtx_offset(self) -> int:
        return self._header.vtx_offset

    def add_draw_cmd(self) -> None:
        """Start a new draw command from the current header state."""
        self.cmd_buffer.append(
            DrawCmd(
                clip_rect=self._header.clip_rect,
                texture_id=self._header.texture_id,
                vtx_offset=self._header.vtx_offset,
                idx_offset=len(self.idx_buffer),
            )
        )

    def prim_reserve(self, idx_count: int, vtx_count: int) -> None:
        """Reserve room for ``idx_count`` indices and ``vtx_count`` vertices."""
        if idx_count < 0 or vtx_count < 0:
            raise ValueError("reservation counts must not be negative")
        if (
            self.vtx_current_idx + vtx_count >= VTX_OFFSET_LIMIT
            and self.flags & DrawListFlags.ALLOW_VTX_OFFSET
        ):
            self._header.vtx_offset = len(self.vtx_buffer)
            self.vtx_current_idx = 0
            current = self.cmd_buffer[-1]
            if current.elem_count != 0:
                self.add_draw_cmd()
            else:
                current.vtx_offset = self._header.vtx_offset

        self.cmd_buffer[-1].elem_count += idx_count
        self._vtx_write = len(self.vtx_buffer)
        self.vtx_buffer.extend(Vertex() for _ in range(vtx_count))
        self._idx_write = len(self.idx_buffer)
        self.idx_buffer.extend([0] * idx_count)

    def prim_unreserve(self, idx_count: int, vtx_count: int) -> None:
        """Give back unused reserved indices and vertices from the end of the buffers."""
        if idx_count < 0 or vtx_count < 0:
            raise ValueError("unreserve counts must not be negative")
        self.cmd_buffer[-1].elem_count -= idx_count
        if vtx_count:
            del self.vtx_buffer[len(self.vtx_buffer) - vtx_count:]
        if idx_count:
            del self.idx_buffer[len(self.idx_buffer) - idx_count:]

    def write_vtx(self, pos: Vec2, uv: Vec2, col: int) -> None:
        """Write the next reserved vertex and advance the current vertex index."""
        if self._vtx_write >= len(self.vtx_buffer):
            raise IndexError("no reserved vertex space left")
        self.vtx_buffer[self._vtx_write] = Vertex(pos, uv, col)
        self._vtx_write += 1
        self.vtx_current_idx += 1

    def write_idx(self, idx: int) -> None:
        """Write the next reserved index."""
        if self._idx_write >= len(self.idx_buffer):
            raise IndexError("no reserved index space left")
        self.idx_buffer[self._idx_write] = idx & INDEX_MASK
        self._idx_write += 1

    def _write_quad(self, corners, uvs, col: int) -> None:
        idx = self.vtx_current_idx
        for offset in (0, 1, 2, 0, 2, 3):
            self.write_idx(idx + offset)
        for pos, uv in zip(corners, uvs):
            self.write_vtx(pos, uv, col)

    def prim_rect(self, a: Vec2, c: Vec2, col: int) -> None:
        """Write an axis-aligned rectangle using the white-pixel UV."""
        uv = self.shared_data.tex_uv_white_pixel
        corners = (a, Vec2(c.x, a.y), c, Vec2(a.x, c.y))
        self._write_quad(corners, (uv, uv, uv, uv), col)

    def prim_rect_uv(self, a: Vec2, c: Vec2, uv_a: Vec2, uv_c: Vec2, col: int) -> None:
        """Write an axis-aligned rectangle with a UV rectangle."""
        corners = (a, Vec2(c.x, a.y), c, Vec2(a.x, c.y))
        uvs = (uv_a, Vec2(uv_c.x, uv_a.y), uv_c, Vec2(uv_a.x, uv_c.y))
        self._write_quad(corners, uvs, col)

    def prim_quad_uv(
        self,
        a: Vec2,
        b: Vec2,
        c: Vec2,
        d: Vec2,
        uv_a: Vec2,
        uv_b: Vec2,
        uv_c: Vec2,
        uv_d: Vec2,
        col: int,
    ) -> None:
        """Write an arbitrary quad with per-corner UVs."""
        self._write_quad((a, b, c, d), (uv_a, uv_b, uv_c, uv_d), col)

    def push_clip_rect(self, cr_min: Vec2, cr_max: Vec2, intersect_with_current: bool = False) -> None:
        """Push a clip rectangle, optionally intersected with the current one."""
        x, y, z, w = cr_min.x, cr_min.y, cr_max.x, cr_max.y
        if intersect_with_current:
            current = self._header.clip_rect
            x = max(x, current.x)
            y = max(y, current.y)
            z = min(z, current.z)
            w = min(w, current.w)
        cr = Vec4(x, y, max(x, z), max(y, w))
        self._clip_rect_stack.append(cr)
        self._header.clip_rect = cr
        self._on_changed_clip_rect()

    def pop_clip_rect(self) -> None:
        """Restore the previous clip rectangle."""
        if not self._clip_rect_stack:
            raise IndexError("clip rectangle stack is empty")
        self._clip_rect_stack.pop()
        self._header.clip_rect = (
            self._clip_rect_stack[-1]
            if self._clip_rect_stack
            else self.shared_data.clip_rect_fullscreen
        )
        self._on_changed_clip_rect()

    def push_texture_id(self, texture_id: Any) -> None:
        """Push a texture identifier."""
        self._texture_id_stack.append(texture_id)
        self._header.texture_id = texture_id
        self._on_changed_texture_id()

    def pop_texture_id(self) -> None:
        """Restore the previous texture identifier."""
        if not self._texture_id_stack:
            raise IndexError("texture stack is empty")
        self._texture_id_stack.pop()
        self._header.texture_id = self._texture_id_stack[-1] if self._texture_id_stack else None
        self._on_changed_texture_id()

    def _try_merge_with_previous(self) -> bool:
        current = self.cmd_buffer[-1]
        if current.elem_count != 0 or len(self.cmd_buffer) < 2:
            return False
        previous = self.cmd_buffer[-2]
        if self._header.same_header(previous) and (
            previous.idx_offset + previous.elem_count == current.idx_offset
        ):
            self.cmd_buffer.pop()
            return True
        return False

    def _on_changed_clip_rect(self) -> None:
        current = self.cmd_buffer[-1]
        if current.elem_count != 0 and current.clip_rect != self._header.clip_rect:
            self.add_draw_cmd()
            return
        if self._try_merge_with_previous():
            return
        current.clip_rect = self._header.clip_rect

    def _on_changed_texture_id(self) -> None:
        current = self.cmd_buffer[-1]
        if current.elem_count != 0 and current.texture_id != self._header.texture_id:
            self.add_draw_cmd()
            return
        if self._try_merge_with_previous():
            return
        current.texture_id = self._header.texture_id