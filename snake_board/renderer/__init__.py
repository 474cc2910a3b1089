"""Board-to-scene rendering.

Turns an immutable :class:`~snake_board.board.BoardState` and a
:class:`~snake_board.style.StyleConfig` into a fresh vector scene. The
renderer focuses on:

* A single coordinate transform from the bottom-left-origin logical grid to
  the top-left-origin drawing surface.
* Deterministic layering: grid squares, then snakes (others first, primary
  last), then food, then hazards, then optional coordinate labels.
* An explicit palette policy (:func:`color_for_entity`) for snake bodies.

See :mod:`snake_board.renderer.shapes` for the per-kind geometry, and
:mod:`snake_board.renderer.svg` / :mod:`snake_board.renderer.raster` for the
output backends.
"""

from typing import List, Sequence, Tuple

from PIL import Image
from pyrsistent import pvector

from snake_board.board import BoardState, Cell, Snake
from snake_board.renderer import shapes
from snake_board.renderer.raster import rasterize
from snake_board.renderer.svg import to_svg
from snake_board.scene import Group, Shape
from snake_board.style import DEFAULT_STYLE, StyleConfig
from snake_board.types import Color, DrawPoint, LabelAxis, SceneLayer
from snake_board.utils.grid import column_letter, iter_draw_cells


def to_drawing_origin(cell: Cell, grid_height: int, square_size: float) -> DrawPoint:
    """Top-left drawing-surface corner of ``cell``.

    The logical grid counts rows from the bottom, the drawing surface from the
    top, so the vertical axis is flipped. No bounds checking is done here.
    """
    draw_row = grid_height - 1 - cell.y
    return (cell.x * square_size, draw_row * square_size)


def color_for_entity(index: int, total: int, palette: Sequence[Color]) -> Color:
    """Body color of the ``index``-th snake out of ``total``.

    Index 0 is the primary snake and always gets ``palette[0]``. The others
    cycle through ``palette[1:]`` in draw order. A single-color palette is
    shared by every snake.

    Raises:
        ValueError: If the palette is empty or ``index`` is outside ``[0, total)``.
    """
    if len(palette) == 0:
        raise ValueError("Palette must contain at least one color")
    if not 0 <= index < total:
        raise ValueError(f"Snake index {index} out of range for {total} snakes")
    if index == 0 or len(palette) == 1:
        return palette[0]
    return palette[1 + (index - 1) % (len(palette) - 1)]


def draw_grid(state: BoardState, style: StyleConfig) -> Group:
    size = style.square_size
    squares = [
        shapes.grid_square((col * size, draw_row * size), size, style.square_color)
        for col, draw_row in iter_draw_cells(state.width, state.height)
    ]
    return Group(id=SceneLayer.GRID, children=pvector(squares))


def draw_snake(
    snake: Snake, grid_height: int, style: StyleConfig, color: Color
) -> List[Shape]:
    """Body segments in order, then the head on top."""
    size = style.square_size
    out: List[Shape] = [
        shapes.body_segment(to_drawing_origin(cell, grid_height, size), size, color)
        for cell in snake.body
    ]
    out.append(
        shapes.head(
            to_drawing_origin(snake.head, grid_height, size),
            size,
            style.snake_head_color,
        )
    )
    return out


def draw_entities(state: BoardState, style: StyleConfig) -> Group:
    """Snakes, then food, then hazards.

    Non-primary snakes are drawn first in source order, the primary snake
    last so it sits on top of any overlap.
    """
    primary = state.primary_snake()
    others = state.other_snakes()
    total = len(others) + 1
    size = style.square_size

    out: List[Shape] = []
    for index, snake in enumerate(others, start=1):
        color = color_for_entity(index, total, style.snake_colors)
        out.extend(draw_snake(snake, state.height, style, color))
    out.extend(
        draw_snake(primary, state.height, style, color_for_entity(0, total, style.snake_colors))
    )

    for food in state.items:
        out.append(
            shapes.item(
                to_drawing_origin(food.position, state.height, size),
                size,
                style.item_color,
            )
        )
    for hazard in state.hazards:
        out.append(
            shapes.hazard(
                to_drawing_origin(hazard.position, state.height, size),
                size,
                style.hazard_color,
                style.hazard_opacity,
            )
        )
    return Group(id=SceneLayer.ENTITIES, children=pvector(out))


def draw_labels(state: BoardState, style: StyleConfig) -> Group:
    """Row numbers down the left column, column letters along the bottom row."""
    size = style.square_size
    out: List[Shape] = []
    for col, draw_row in iter_draw_cells(state.width, state.height):
        origin = (col * size, draw_row * size)
        if col == 0:
            out.append(
                shapes.label(origin, size, str(state.height - draw_row), LabelAxis.ROW)
            )
        if draw_row == state.height - 1:
            out.append(shapes.label(origin, size, column_letter(col), LabelAxis.COLUMN))
    return Group(id=SceneLayer.LABELS, children=pvector(out))


def scene_size(state: BoardState, style: StyleConfig = DEFAULT_STYLE) -> Tuple[float, float]:
    """Width and height of the drawing surface a scene for ``state`` covers."""
    return (state.width * style.square_size, state.height * style.square_size)


def render(state: BoardState, style: StyleConfig = DEFAULT_STYLE) -> Group:
    """
    Renders a board state as a scene: root group of grid, entities, labels.
    The labels group is present but empty when labels are disabled.
    """
    entities = draw_entities(state, style)
    grid = draw_grid(state, style)
    if style.show_coordinate_labels:
        labels = draw_labels(state, style)
    else:
        labels = Group(id=SceneLayer.LABELS)
    return Group(children=pvector([grid, entities, labels]))


class BoardRenderer:
    style: StyleConfig

    def __init__(self, style: StyleConfig = DEFAULT_STYLE):
        self.style = style

    def render(self, state: BoardState) -> Group:
        return render(state, self.style)

    def size(self, state: BoardState) -> Tuple[float, float]:
        return scene_size(state, self.style)

    def render_svg(self, state: BoardState) -> str:
        """Render and wrap the scene in a standalone SVG document of exact size."""
        width, height = self.size(state)
        return to_svg(self.render(state), width, height)

    def render_image(self, state: BoardState, scale: float = 1.0) -> Image.Image:
        width, height = self.size(state)
        return rasterize(self.render(state), width, height, scale=scale)
