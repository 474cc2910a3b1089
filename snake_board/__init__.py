"""snake_board
=============

Render snake-game board snapshots as layered vector scenes.

Typical use::

    from snake_board import BoardRenderer, from_json, style_config

    state = from_json(source)
    svg = BoardRenderer(style_config(show_coordinate_labels=False)).render_svg(state)

The renderer is a pure function of ``(BoardState, StyleConfig)``; see
:mod:`snake_board.renderer` for the layering rules.
"""

from .board import BoardState, BoardStateError, Cell, Hazard, Item, PrimaryEntityNotFoundError, Snake
from .convert import from_json, from_mapping
from .renderer import BoardRenderer, color_for_entity, render, scene_size, to_drawing_origin
from .scene import Circle, Group, Rect, Text
from .style import DEFAULT_STYLE, StyleConfig, style_config

__all__ = [
    "BoardRenderer",
    "BoardState",
    "BoardStateError",
    "Cell",
    "Circle",
    "DEFAULT_STYLE",
    "Group",
    "Hazard",
    "Item",
    "PrimaryEntityNotFoundError",
    "Rect",
    "Snake",
    "StyleConfig",
    "Text",
    "color_for_entity",
    "from_json",
    "from_mapping",
    "render",
    "scene_size",
    "style_config",
    "to_drawing_origin",
]
