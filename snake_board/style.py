"""Style configuration for board rendering.

All defaults live here as module constants; :func:`style_config` and
:meth:`StyleConfig.from_mapping` are the only ways the package builds a
configuration, so a caller that omits a field always gets the documented
default.

Example:

>>> from snake_board.style import style_config
>>> style = style_config(show_coordinate_labels=False, item_color="orange")
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Tuple

from snake_board.types import Color

DEFAULT_SQUARE_SIZE = 40
DEFAULT_SQUARE_COLOR: Color = "#a1a1a1"
DEFAULT_ITEM_COLOR: Color = "red"
DEFAULT_HAZARD_COLOR: Color = "#616161"
DEFAULT_HAZARD_OPACITY = 0.35
DEFAULT_SNAKE_COLORS: Tuple[Color, ...] = ("green", "#E4601B", "#C51BE4", "#1B9FE4")
DEFAULT_SNAKE_HEAD_COLOR: Color = "#5c5c5c"

# Keys used by the settings store of the original viewer plugin.
SETTINGS_KEY_ALIASES: Dict[str, str] = {
    "drawCoordinates": "show_coordinate_labels",
    "showCoordinateLabels": "show_coordinate_labels",
    "squareColor": "square_color",
    "foodColor": "item_color",
    "itemColor": "item_color",
    "hazardColor": "hazard_color",
    "hazardOpacity": "hazard_opacity",
    "snakeColors": "snake_colors",
    "entityBodyColors": "snake_colors",
    "snakeHeadColor": "snake_head_color",
    "entityHeadColor": "snake_head_color",
    "squareSize": "square_size",
}


def _as_float(name: str, value: Any) -> float:
    # bool is an int subclass; reject it explicitly.
    if isinstance(value, bool):
        raise ValueError(f"{name} must be a number, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


@dataclass(frozen=True)
class StyleConfig:
    """Visual settings for one render.

    Attributes:
        show_coordinate_labels: Draw row numbers and column letters on top.
        square_color: Fill of the background grid squares.
        item_color: Fill of food circles.
        hazard_color: Fill of hazard overlays.
        hazard_opacity: Opacity of hazard overlays, in ``[0, 1]``.
        snake_colors: Body palette. Index 0 is reserved for the primary snake.
        snake_head_color: Fill of every snake head.
        square_size: Edge length of one cell in drawing units.
    """

    show_coordinate_labels: bool = True
    square_color: Color = DEFAULT_SQUARE_COLOR
    item_color: Color = DEFAULT_ITEM_COLOR
    hazard_color: Color = DEFAULT_HAZARD_COLOR
    hazard_opacity: float = DEFAULT_HAZARD_OPACITY
    snake_colors: Tuple[Color, ...] = DEFAULT_SNAKE_COLORS
    snake_head_color: Color = DEFAULT_SNAKE_HEAD_COLOR
    square_size: float = DEFAULT_SQUARE_SIZE

    def __post_init__(self) -> None:
        if not isinstance(self.show_coordinate_labels, bool):
            raise ValueError(
                f"show_coordinate_labels must be a bool, got {self.show_coordinate_labels!r}"
            )
        # A bare string would otherwise be split into one-letter colors.
        if isinstance(self.snake_colors, str):
            raise ValueError(
                f"snake_colors must be a list of colors, got {self.snake_colors!r}"
            )
        # Lists coming from JSON settings are frozen into tuples.
        object.__setattr__(self, "snake_colors", tuple(self.snake_colors))
        object.__setattr__(self, "hazard_opacity", _as_float("hazard_opacity", self.hazard_opacity))
        object.__setattr__(self, "square_size", _as_float("square_size", self.square_size))
        if len(self.snake_colors) == 0:
            raise ValueError("snake_colors must contain at least one color")
        if not 0.0 <= self.hazard_opacity <= 1.0:
            raise ValueError(
                f"hazard_opacity must be within [0, 1], got {self.hazard_opacity}"
            )
        if self.square_size <= 0:
            raise ValueError(f"square_size must be positive, got {self.square_size}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "StyleConfig":
        """Build a config from a partial settings mapping.

        Keys may be the field names or the camelCase names a settings store
        uses (``squareColor``, ``foodColor``, ...). Missing keys fall back to
        the defaults.

        Raises:
            ValueError: On an unknown key or an invalid value.
        """
        known = {f.name for f in fields(cls)}
        overrides: Dict[str, Any] = {}
        for key, value in mapping.items():
            name = SETTINGS_KEY_ALIASES.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown style setting: {key!r}")
            overrides[name] = value
        return cls(**overrides)


DEFAULT_STYLE = StyleConfig()


def style_config(**overrides: Any) -> StyleConfig:
    """Return the default style with ``overrides`` applied."""
    return replace(DEFAULT_STYLE, **overrides)
