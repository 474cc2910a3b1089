"""Color normalisation shared by the output backends."""

from functools import lru_cache
from typing import Tuple

from PIL import ImageColor

from snake_board.types import Color

RGBA = Tuple[int, int, int, int]

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def normalize_color(color: Color) -> Color:
    """Strip whitespace and restore a missing ``#`` on bare hex colors.

    Settings stores have been seen to drop the ``#`` (``"616161"``).
    """
    value = color.strip()
    if len(value) in (3, 6) and set(value) <= _HEX_DIGITS:
        return f"#{value}"
    return value


@lru_cache(maxsize=256)
def to_rgba(color: Color, opacity: float = 1.0) -> RGBA:
    """Convert a CSS color string to an RGBA tuple, folding in ``opacity``.

    Raises:
        ValueError: If the color cannot be parsed.
    """
    rgb = ImageColor.getrgb(normalize_color(color))
    alpha = rgb[3] if len(rgb) == 4 else 255
    return rgb[0], rgb[1], rgb[2], int(round(alpha * opacity))
