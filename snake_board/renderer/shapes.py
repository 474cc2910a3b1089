"""Shape generators.

One pure function per visual kind. Each takes the top-left drawing-surface
coordinate of a cell plus the cell edge length and style values, and returns a
single primitive. All geometry is proportional to ``square_size``.
"""

from snake_board.scene import Circle, Rect, Text
from snake_board.types import Color, DrawPoint, LabelAxis

GRID_STROKE_COLOR: Color = "#FFFFFF"
HEAD_OPACITY = 0.8
LABEL_COLOR: Color = "#ffffff"
LABEL_FONT_FAMILY = "sans-serif"
LABEL_FONT_SIZE = 10


def grid_square(origin: DrawPoint, square_size: float, color: Color) -> Rect:
    x, y = origin
    return Rect(
        x=x,
        y=y,
        width=square_size,
        height=square_size,
        fill=color,
        stroke=GRID_STROKE_COLOR,
        stroke_width=square_size / 20,
    )


def body_segment(origin: DrawPoint, square_size: float, color: Color) -> Rect:
    x, y = origin
    radius = square_size / 4
    return Rect(
        x=x,
        y=y,
        width=square_size,
        height=square_size,
        fill=color,
        rx=radius,
        ry=radius,
    )


def head(origin: DrawPoint, square_size: float, color: Color) -> Rect:
    """Smaller rounded square centred in the cell, slightly translucent."""
    x, y = origin
    inner_size = square_size / 2.5
    offset = (square_size - inner_size) / 2
    radius = square_size / 8
    return Rect(
        x=x + offset,
        y=y + offset,
        width=inner_size,
        height=inner_size,
        fill=color,
        rx=radius,
        ry=radius,
        opacity=HEAD_OPACITY,
    )


def item(origin: DrawPoint, square_size: float, color: Color) -> Circle:
    x, y = origin
    return Circle(
        cx=x + square_size / 2,
        cy=y + square_size / 2,
        r=square_size / 4,
        fill=color,
    )


def hazard(
    origin: DrawPoint, square_size: float, color: Color, opacity: float
) -> Rect:
    x, y = origin
    radius = square_size / 4
    return Rect(
        x=x,
        y=y,
        width=square_size,
        height=square_size,
        fill=color,
        rx=radius,
        ry=radius,
        opacity=opacity,
    )


def label(origin: DrawPoint, square_size: float, text: str, axis: LabelAxis) -> Text:
    """Coordinate label.

    Row labels sit in the cell's top-left corner, column labels in its
    bottom-right corner.
    """
    x, y = origin
    if axis == LabelAxis.ROW:
        x, y = x + 1, y + 10
    else:
        x, y = x + square_size - 7, y + square_size - 2
    return Text(
        x=x,
        y=y,
        text=text,
        fill=LABEL_COLOR,
        font_family=LABEL_FONT_FAMILY,
        font_size=LABEL_FONT_SIZE,
    )
