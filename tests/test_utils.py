from typing import Iterable, Optional, Sequence, Tuple

from pyrsistent import pvector

from snake_board.board import BoardState, Cell, Hazard, Item, Snake
from snake_board.scene import Group

XY = Tuple[int, int]


def make_snake(snake_id: str, head: XY, body: Sequence[XY] = ()) -> Snake:
    return Snake(
        id=snake_id,
        head=Cell(*head),
        body=pvector(Cell(*xy) for xy in body),
    )


def make_state(
    width: int = 3,
    height: int = 3,
    snakes: Iterable[Snake] = (),
    items: Iterable[XY] = (),
    hazards: Iterable[XY] = (),
    focus_id: Optional[str] = None,
) -> BoardState:
    """Build a board; the focus defaults to the first snake."""
    snake_list = list(snakes)
    if focus_id is None:
        focus_id = snake_list[0].id if snake_list else "you"
    return BoardState(
        width=width,
        height=height,
        focus_id=focus_id,
        snakes=pvector(snake_list),
        items=pvector(Item(Cell(*xy)) for xy in items),
        hazards=pvector(Hazard(Cell(*xy)) for xy in hazards),
    )


def scenario_state() -> BoardState:
    """3x3 board: primary snake at (1,1)/(1,0), one food at (0,2)."""
    return make_state(
        snakes=[make_snake("you", (1, 1), [(1, 1), (1, 0)])],
        items=[(0, 2)],
    )


def layer(scene: Group, name: str) -> Group:
    return scene.child(name)
