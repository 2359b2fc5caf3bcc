# xyphra

xyphra builds the geometry behind immediate-mode 2D user interfaces. Each draw call becomes vertices, indices and draw commands that a GPU can render as indexed triangle lists. The package also bakes the shadow textures that shadow draw calls sample from.

xyphra does no rendering itself. It fills buffers, and you pass those buffers to whatever graphics API you use.

## Modules

- `xyphra.geometry`: value types and helpers.
  - `Vec2` and `Vec4` are immutable vectors.
  - Packed 32-bit colours: `col32`, `u32_to_float4` and `float4_to_u32`.
  - HSV conversion: `rgb_to_hsv` and `hsv_to_rgb`.
  - Bézier curves: evaluation with `bezier_cubic_calc` and `bezier_quadratic_calc`, and adaptive tessellation with `tessellate_cubic` and `tessellate_quadratic`.
- `xyphra.buffers`: the low-level buffers.
  - `DrawBuffers` holds the vertex, index and command buffers. It manages reservation through `prim_reserve` and `prim_unreserve`, and holds the clip-rectangle and texture-id stacks.
  - The `Vertex` and `DrawCmd` records and the `DrawFlags` and `DrawListFlags` flag sets.
  - `fix_rect_corner_flags` and `circle_auto_segment_calc`.
  - `SharedData`, which holds the white-pixel UV, the line and shadow UV tables, the clip rectangle used when nothing is pushed, the curve tolerance and the cached circle segment counts.
- `xyphra.strokes`: `add_polyline` and `add_convex_poly_filled`. Both can be anti-aliased or aliased.
- `xyphra.clipping`: `clip_polygon` clips a convex polygon against an axis-aligned rectangle. It raises `ClipBufferError` when the result would exceed the given capacity.
- `xyphra.shadow`: `add_subtracted_rect`, `add_subtracted_rect_box` and `add_shadow_convex_poly`.
- `xyphra.drawlist`: `DrawList`, the high-level API.
  - Paths, arcs, fast arcs and Bézier curves.
  - Lines and multi-colour lines.
  - Rectangles, including rounded ones and ones with gradient fills.
  - Quads, triangles, circles and n-gons.
  - Images, including rounded images, and UV shading.
  - Drop shadows for rectangles, circles, n-gons and convex polygons.
- `xyphra.pixels`: `Texture` holds alpha-8 or RGBA32 pixel data. This module also provides `build_multiply_table` and `multiply_rect_alpha8`.
- `xyphra.custom_rects`: `CustomRect` is a rectangle reserved in a texture. `custom_rect_uv` returns its UVs.
- `xyphra.fields`: `distance_from_rectangle`, `distance_from_point` and `gaussian_blur`.
- `xyphra.shadow_texture`:
  - `ShadowTexConfig` configures the shadow textures.
  - `render_rect_shadow` returns the nine UV rectangles of the 3x3 grid.
  - `render_convex_shadow` returns the UV rectangle of the radial shadow.

## Installation

```
pip install xyphra
```

The package has no third-party dependencies.

## Example

```python
from xyphra.buffers import DrawListFlags
from xyphra.drawlist import DrawList
from xyphra.geometry import Vec2, col32

draw = DrawList(flags=DrawListFlags.ANTI_ALIASED_LINES | DrawListFlags.ANTI_ALIASED_FILL)
draw.add_rect_filled(Vec2(10, 10), Vec2(110, 60), col32(40, 120, 200, 255), 6.0, 0)
draw.add_circle(Vec2(60, 100), 20.0, col32(255, 255, 255, 255), 0, 1.0)
draw.add_line(Vec2(0, 0), Vec2(100, 100), col32(255, 0, 0, 255), 2.0)

for cmd in draw.cmd_buffer:
    print(cmd.clip_rect, cmd.texture_id, cmd.vtx_offset, cmd.idx_offset, cmd.elem_count)
```

After drawing:

- `draw.vtx_buffer` holds `Vertex` records, each with `pos`, `uv` and `col`.
- `draw.idx_buffer` holds 16-bit indices.
- `draw.cmd_buffer` holds one `DrawCmd` per draw call you need to issue.

Colours are packed 32-bit integers in RGBA order, with red in the lowest byte. A colour whose alpha is zero draws nothing.

Two kinds of shadow geometry sample textures whose UVs come from `SharedData.shadow_rect_uvs`:

- Shadows of convex shapes read entry 9.
- The texture produced by `render_rect_shadow` fills entries 0 to 8.

You can render both shadow textures into a `Texture` with `xyphra.shadow_texture` and store the UVs they return in `SharedData`.

## What the package does not do

- xyphra loads no fonts. It does not rasterise glyphs or pack rectangles into an atlas, and it has no text drawing or text measuring.
- It does not generate the white pixel or the baked line-width texture data.
- `SharedData.tex_uv_white_pixel` and `SharedData.tex_uv_lines` default to zero UVs. Set them yourself if you render from a texture that provides them. The UVs in `tex_uv_lines` are only read when `DrawListFlags.ANTI_ALIASED_LINES_USE_TEX` is enabled.
- You also choose where shadow rectangles go in your texture: set `x` and `y` on each `CustomRect` before rendering into it.

## Running the tests

```
pip install -e ".[test]"
pytest
```