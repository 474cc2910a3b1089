"""Vector scene primitives.

A scene is a tree of frozen dataclasses: :class:`Group` containers holding
:class:`Rect`, :class:`Circle` and :class:`Text` leaves. Paint order is tree
order (depth first, children left to right), so a later shape is drawn on top
of an earlier one. Backends in :mod:`snake_board.renderer.svg` and
:mod:`snake_board.renderer.raster` consume this tree; nothing here knows about
a particular output format.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from pyrsistent import PVector, pvector

from snake_board.types import Color


@dataclass(frozen=True)
class Rect:
    """Axis-aligned, optionally rounded rectangle."""

    x: float
    y: float
    width: float
    height: float
    fill: Color
    rx: float = 0.0
    ry: float = 0.0
    stroke: Optional[Color] = None
    stroke_width: float = 0.0
    opacity: float = 1.0


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: Color
    opacity: float = 1.0


@dataclass(frozen=True)
class Text:
    """Text anchored at its baseline start point ``(x, y)``."""

    x: float
    y: float
    text: str
    fill: Color
    font_family: str = "sans-serif"
    font_size: float = 10


Shape = Union[Rect, Circle, Text]


@dataclass(frozen=True)
class Group:
    """Ordered container of shapes and nested groups."""

    id: Optional[str] = None
    children: PVector["Node"] = pvector()

    def child(self, group_id: str) -> "Group":
        """Return the direct child group with the given ``id``."""
        for node in self.children:
            if isinstance(node, Group) and node.id == group_id:
                return node
        raise KeyError(f"No child group {group_id!r} in group {self.id!r}")


Node = Union[Shape, Group]


def iter_shapes(node: Node) -> Iterator[Shape]:
    """Yield every leaf shape under ``node`` in paint order."""
    if isinstance(node, Group):
        for child in node.children:
            yield from iter_shapes(child)
    else:
        yield node


def shape_bounds(shape: Shape) -> Tuple[float, float, float, float]:
    """Return ``(min_x, min_y, max_x, max_y)`` of a rect or circle.

    Text has no intrinsic extent without font metrics; its anchor point is
    returned as a degenerate box.
    """
    if isinstance(shape, Rect):
        return (shape.x, shape.y, shape.x + shape.width, shape.y + shape.height)
    if isinstance(shape, Circle):
        return (shape.cx - shape.r, shape.cy - shape.r, shape.cx + shape.r, shape.cy + shape.r)
    return (shape.x, shape.y, shape.x, shape.y)


def bounding_box(node: Node) -> Optional[Tuple[float, float, float, float]]:
    """Union of :func:`shape_bounds` over every shape, or None for an empty tree."""
    box: Optional[Tuple[float, float, float, float]] = None
    for shape in iter_shapes(node):
        x0, y0, x1, y1 = shape_bounds(shape)
        if box is None:
            box = (x0, y0, x1, y1)
        else:
            box = (min(box[0], x0), min(box[1], y0), max(box[2], x1), max(box[3], y1))
    return box
