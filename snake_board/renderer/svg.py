"""SVG backend.

Serializes a scene tree into a standalone ``<svg>`` document whose
``viewBox``, ``width`` and ``height`` match the board's drawing surface, the
form a host page can mount directly.
"""

from typing import Any, Dict

import svgwrite
from svgwrite.base import BaseElement

from snake_board.scene import Circle, Group, Node, Rect, Text
from snake_board.utils.color import normalize_color


def _rect(dwg: svgwrite.Drawing, rect: Rect) -> BaseElement:
    extra: Dict[str, Any] = {}
    if rect.rx or rect.ry:
        extra["rx"] = rect.rx
        extra["ry"] = rect.ry
    if rect.stroke is not None:
        extra["stroke"] = normalize_color(rect.stroke)
        extra["stroke_width"] = rect.stroke_width
    if rect.opacity != 1.0:
        extra["opacity"] = rect.opacity
    return dwg.rect(
        insert=(rect.x, rect.y),
        size=(rect.width, rect.height),
        fill=normalize_color(rect.fill),
        **extra,
    )


def _circle(dwg: svgwrite.Drawing, circle: Circle) -> BaseElement:
    extra: Dict[str, Any] = {}
    if circle.opacity != 1.0:
        extra["opacity"] = circle.opacity
    return dwg.circle(
        center=(circle.cx, circle.cy),
        r=circle.r,
        fill=normalize_color(circle.fill),
        **extra,
    )


def _text(dwg: svgwrite.Drawing, text: Text) -> BaseElement:
    return dwg.text(
        text.text,
        insert=(text.x, text.y),
        fill=normalize_color(text.fill),
        font_family=text.font_family,
        font_size=text.font_size,
    )


def to_element(dwg: svgwrite.Drawing, node: Node) -> BaseElement:
    """Convert one scene node (recursively for groups) into an svgwrite element."""
    if isinstance(node, Group):
        group = dwg.g(id=str(node.id)) if node.id is not None else dwg.g()
        for child in node.children:
            group.add(to_element(dwg, child))
        return group
    if isinstance(node, Rect):
        return _rect(dwg, node)
    if isinstance(node, Circle):
        return _circle(dwg, node)
    if isinstance(node, Text):
        return _text(dwg, node)
    raise ValueError(f"Unsupported scene node: {node!r}")


def to_drawing(scene: Group, width: float, height: float) -> svgwrite.Drawing:
    dwg = svgwrite.Drawing(size=(width, height), profile="full")
    dwg.viewbox(0, 0, width, height)
    dwg.add(to_element(dwg, scene))
    return dwg


def to_svg(scene: Group, width: float, height: float) -> str:
    """Return the scene as SVG markup sized ``width`` x ``height``."""
    return to_drawing(scene, width, height).tostring()
