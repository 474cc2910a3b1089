"""Common type aliases and enumerations.

``Color`` is any string the output backends understand (CSS names, ``#rgb``
and ``#rrggbb`` hex). ``DrawPoint`` is a top-left-origin drawing-surface
coordinate, as opposed to the bottom-left-origin logical grid.
"""

from enum import StrEnum, auto
from typing import Tuple

SnakeID = str
Color = str
DrawPoint = Tuple[float, float]


class SceneLayer(StrEnum):
    """Top-level groups of a rendered scene, in paint order."""

    GRID = auto()
    ENTITIES = auto()
    LABELS = auto()


class LabelAxis(StrEnum):
    """Which board edge a coordinate label annotates."""

    ROW = auto()
    COLUMN = auto()
