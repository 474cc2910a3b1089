"""Grid helpers shared by validation and the layer builders.

Functions here are pure and take plain dimensions rather than a state so they
can be used both before and after a :class:`~snake_board.board.BoardState`
exists.
"""

from typing import TYPE_CHECKING, Iterator, Tuple

if TYPE_CHECKING:
    from snake_board.board import Cell


def is_in_bounds(width: int, height: int, cell: "Cell") -> bool:
    """Return True if ``cell`` lies within a ``width`` x ``height`` board."""
    return 0 <= cell.x < width and 0 <= cell.y < height


def iter_draw_cells(width: int, height: int) -> Iterator[Tuple[int, int]]:
    """Yield ``(col, draw_row)`` for every cell, row-major from the top row."""
    for draw_row in range(height):
        for col in range(width):
            yield col, draw_row


def column_letter(index: int) -> str:
    """Column label for a 0-based column index: 0 -> 'a', 1 -> 'b', ..."""
    return chr(ord("a") + index)
