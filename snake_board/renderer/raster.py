"""Raster backend.

Paints a scene tree onto a Pillow RGBA image in paint order. Opaque shapes
are drawn straight onto the canvas; translucent ones are drawn on a scratch
layer and alpha-composited so whatever lies beneath stays visible.

SVG centres strokes on the shape edge while Pillow draws outlines inside the
box, so grid borders come out slightly thinner here. Text is positioned from
its baseline using the font size as ascent; exact glyph placement depends on
the font Pillow finds.
"""

from functools import lru_cache
from typing import Tuple

import numpy as np
import numpy.typing as npt
from PIL import Image, ImageDraw, ImageFont

from snake_board.scene import Circle, Group, Rect, Shape, Text, iter_shapes
from snake_board.utils.color import to_rgba

UInt8Array = npt.NDArray[np.uint8]

Box = Tuple[int, int, int, int]


@lru_cache(maxsize=32)
def _font(size: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    return ImageFont.load_default(size=size)


def _box(x0: float, y0: float, x1: float, y1: float, scale: float) -> Box:
    # Pillow treats the lower-right corner as inclusive.
    return (
        int(round(x0 * scale)),
        int(round(y0 * scale)),
        int(round(x1 * scale)) - 1,
        int(round(y1 * scale)) - 1,
    )


def _draw_shape(draw: ImageDraw.ImageDraw, shape: Shape, scale: float) -> None:
    if isinstance(shape, Rect):
        box = _box(shape.x, shape.y, shape.x + shape.width, shape.y + shape.height, scale)
        fill = to_rgba(shape.fill, shape.opacity)
        outline = None
        width = 0
        if shape.stroke is not None and shape.stroke_width > 0:
            outline = to_rgba(shape.stroke, shape.opacity)
            width = max(1, int(round(shape.stroke_width * scale)))
        radius = max(shape.rx, shape.ry) * scale
        if radius > 0:
            draw.rounded_rectangle(box, radius=radius, fill=fill, outline=outline, width=width)
        else:
            draw.rectangle(box, fill=fill, outline=outline, width=width)
    elif isinstance(shape, Circle):
        box = _box(shape.cx - shape.r, shape.cy - shape.r, shape.cx + shape.r, shape.cy + shape.r, scale)
        draw.ellipse(box, fill=to_rgba(shape.fill, shape.opacity))
    elif isinstance(shape, Text):
        font = _font(shape.font_size * scale)
        draw.text(
            (shape.x * scale, (shape.y - shape.font_size) * scale),
            shape.text,
            fill=to_rgba(shape.fill),
            font=font,
        )
    else:
        raise ValueError(f"Unsupported shape: {shape!r}")


def _opacity(shape: Shape) -> float:
    if isinstance(shape, Text):
        return 1.0
    return shape.opacity


def rasterize(
    scene: Group, width: float, height: float, scale: float = 1.0
) -> Image.Image:
    """
    Paints the scene on a transparent ``width`` x ``height`` canvas, multiplied by ``scale``.
    """
    size = (int(round(width * scale)), int(round(height * scale)))
    img = Image.new("RGBA", size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(img)
    for shape in iter_shapes(scene):
        if _opacity(shape) >= 1.0:
            _draw_shape(draw, shape, scale)
            continue
        layer = Image.new("RGBA", size, (0, 0, 0, 0))
        _draw_shape(ImageDraw.Draw(layer), shape, scale)
        img.alpha_composite(layer)
        draw = ImageDraw.Draw(img)
    return img


def to_array(img: Image.Image) -> UInt8Array:
    """Image as an ``(H, W, 4)`` uint8 array."""
    return np.array(img.convert("RGBA"), dtype=np.uint8)
