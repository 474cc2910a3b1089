"""Immutable board snapshot consumed by the renderer.

A :class:`BoardState` is a *value object*: the renderer reads it and never
mutates or retains it. Cells use the game's logical convention, with the
origin in the bottom-left corner (row 0 is the bottom row).

Design notes:

* Sequences are persistent vectors (``pyrsistent.PVector``) so a state can be
    shared freely between callers without defensive copies.
* :meth:`BoardState.validate` checks the geometric invariants. The decoder in
    :mod:`snake_board.convert` calls it; hand-built states should too.
* The primary snake is resolved through :meth:`BoardState.primary_snake`,
    which fails with :class:`PrimaryEntityNotFoundError` instead of an
    unchecked lookup.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from pyrsistent import PVector, pvector

from snake_board.types import SnakeID
from snake_board.utils.grid import is_in_bounds


class BoardStateError(ValueError):
    """Raised when a board snapshot violates its structural invariants."""


class PrimaryEntityNotFoundError(BoardStateError):
    """Raised when ``focus_id`` does not name any snake on the board."""


@dataclass(frozen=True)
class Cell:
    """Logical grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at bottom).
    """

    x: int
    y: int


@dataclass(frozen=True)
class Snake:
    """A segmented occupant of the board.

    Attributes:
        id: Identifier unique within the board.
        head: Cell of the head.
        body: Ordered body cells. Depending on the source this may or may not
            repeat the head cell; every element is drawn as a body segment.
        name: Optional display name carried through from the source.
    """

    id: SnakeID
    head: Cell
    body: PVector[Cell] = pvector()
    name: Optional[str] = None


@dataclass(frozen=True)
class Item:
    """Single-cell collectible (food)."""

    position: Cell


@dataclass(frozen=True)
class Hazard:
    """Single-cell danger zone, drawn as a translucent overlay."""

    position: Cell


@dataclass(frozen=True)
class BoardState:
    """Board snapshot rendered by :class:`snake_board.renderer.BoardRenderer`.

    Attributes:
        width (int): Board width in cells.
        height (int): Board height in cells.
        focus_id (SnakeID): Id of the primary snake (the point of view).
        snakes (PVector[Snake]): All snakes, primary included, in source order.
        items (PVector[Item]): Food cells.
        hazards (PVector[Hazard]): Hazard cells.
    """

    width: int
    height: int
    focus_id: SnakeID
    snakes: PVector[Snake] = pvector()
    items: PVector[Item] = pvector()
    hazards: PVector[Hazard] = pvector()

    def primary_snake(self) -> Snake:
        """Return the snake whose id matches ``focus_id``."""
        for snake in self.snakes:
            if snake.id == self.focus_id:
                return snake
        raise PrimaryEntityNotFoundError(
            f"No snake with id {self.focus_id!r} on the board "
            f"(known ids: {[snake.id for snake in self.snakes]})"
        )

    def other_snakes(self) -> PVector[Snake]:
        """Return every non-primary snake, preserving source order."""
        return pvector(snake for snake in self.snakes if snake.id != self.focus_id)

    def cells(self) -> Iterator[Cell]:
        """Yield every occupied cell (snake heads and bodies, items, hazards)."""
        for snake in self.snakes:
            yield snake.head
            yield from snake.body
        for item in self.items:
            yield item.position
        for hazard in self.hazards:
            yield hazard.position

    def validate(self) -> "BoardState":
        """Check dimensions, bounds, id uniqueness and the focus id.

        Returns:
            BoardState: ``self``, so the call can be chained after construction.

        Raises:
            BoardStateError: If any invariant is violated.
            PrimaryEntityNotFoundError: If ``focus_id`` matches no snake.
        """
        if self.width <= 0 or self.height <= 0:
            raise BoardStateError(
                f"Board dimensions must be positive, got {self.width}x{self.height}"
            )
        for cell in self.cells():
            if not is_in_bounds(self.width, self.height, cell):
                raise BoardStateError(
                    f"Cell ({cell.x}, {cell.y}) lies outside the "
                    f"{self.width}x{self.height} board"
                )
        ids = [snake.id for snake in self.snakes]
        if len(set(ids)) != len(ids):
            raise BoardStateError(f"Duplicate snake ids: {ids}")
        self.primary_snake()
        return self
