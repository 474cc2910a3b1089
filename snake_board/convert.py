from __future__ import annotations

import json
from typing import Any, List, Mapping, Sequence

from pyrsistent import pvector

from snake_board.board import BoardState, BoardStateError, Cell, Hazard, Item, Snake


def _field(obj: Any, key: str, where: str) -> Any:
    if not isinstance(obj, Mapping):
        raise BoardStateError(f"{where} must be an object, got {type(obj).__name__}")
    if key not in obj:
        raise BoardStateError(f"Missing field {where}.{key}")
    return obj[key]


def _list(obj: Any, key: str, where: str, required: bool = True) -> Sequence[Any]:
    if not required and isinstance(obj, Mapping) and key not in obj:
        return []
    value = _field(obj, key, where)
    if not isinstance(value, list):
        raise BoardStateError(f"{where}.{key} must be a list")
    return value


def _int(obj: Any, key: str, where: str) -> int:
    value = _field(obj, key, where)
    # bool is an int subclass; reject it explicitly.
    if not isinstance(value, int) or isinstance(value, bool):
        raise BoardStateError(f"{where}.{key} must be an integer, got {value!r}")
    return value


def cell_from_mapping(obj: Any, where: str) -> Cell:
    return Cell(x=_int(obj, "x", where), y=_int(obj, "y", where))


def snake_from_mapping(obj: Any, where: str) -> Snake:
    """Decode ``{"id", "head", "body", "name"?}``."""
    snake_id = _field(obj, "id", where)
    if not isinstance(snake_id, str):
        raise BoardStateError(f"{where}.id must be a string, got {snake_id!r}")
    body = _list(obj, "body", where)
    name = obj.get("name")
    return Snake(
        id=snake_id,
        head=cell_from_mapping(_field(obj, "head", where), f"{where}.head"),
        body=pvector(
            cell_from_mapping(cell, f"{where}.body[{i}]") for i, cell in enumerate(body)
        ),
        name=name if isinstance(name, str) else None,
    )


def from_mapping(data: Mapping[str, Any]) -> BoardState:
    """
    Decode a game-state mapping into a validated ``BoardState``.

    Expected shape (extra keys such as ``game`` or ``turn`` are ignored)::

        {"board": {"width", "height", "food", "hazards", "snakes"},
         "you": {"id", "head", "body"}}

    ``you`` names the primary snake. If it is missing from ``board.snakes``
    it is still drawn, so it is appended to the snake list.

    Raises:
        BoardStateError: On missing or mistyped fields or violated invariants.
    """
    board = _field(data, "board", "state")
    you = snake_from_mapping(_field(data, "you", "state"), "you")

    snakes: List[Snake] = [
        snake_from_mapping(snake, f"board.snakes[{i}]")
        for i, snake in enumerate(_list(board, "snakes", "board"))
    ]
    if all(snake.id != you.id for snake in snakes):
        snakes.append(you)
    else:
        # The ``you`` record is authoritative for the primary snake.
        snakes = [you if snake.id == you.id else snake for snake in snakes]

    state = BoardState(
        width=_int(board, "width", "board"),
        height=_int(board, "height", "board"),
        focus_id=you.id,
        snakes=pvector(snakes),
        items=pvector(
            Item(cell_from_mapping(cell, f"board.food[{i}]"))
            for i, cell in enumerate(_list(board, "food", "board", required=False))
        ),
        hazards=pvector(
            Hazard(cell_from_mapping(cell, f"board.hazards[{i}]"))
            for i, cell in enumerate(_list(board, "hazards", "board", required=False))
        ),
    )
    return state.validate()


def from_json(text: str) -> BoardState:
    """Parse JSON text and decode it with :func:`from_mapping`."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise BoardStateError(f"Invalid board JSON: {exc}") from exc
    if not isinstance(data, Mapping):
        raise BoardStateError("Board JSON must be an object")
    return from_mapping(data)
