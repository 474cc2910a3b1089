import pytest

from snake_board.renderer import BoardRenderer
from snake_board.renderer.raster import _font, to_array
from snake_board.style import style_config
from tests.test_utils import make_snake, make_state, scenario_state

GRAY = (161, 161, 161, 255)
RED = (255, 0, 0, 255)
GREEN = (0, 128, 0, 255)

NO_LABELS = style_config(show_coordinate_labels=False)


def close(actual: tuple, expected: tuple, tolerance: int = 2) -> bool:
    return all(abs(a - e) <= tolerance for a, e in zip(actual, expected))


def test_image_size_matches_board() -> None:
    state = make_state(5, 3, snakes=[make_snake("you", (0, 0))])
    img = BoardRenderer(NO_LABELS).render_image(state)
    assert img.size == (200, 120)
    assert img.mode == "RGBA"


def test_scale_multiplies_image_size() -> None:
    img = BoardRenderer(NO_LABELS).render_image(scenario_state(), scale=2)
    assert img.size == (240, 240)


def test_pixel_colors() -> None:
    img = BoardRenderer(NO_LABELS).render_image(scenario_state())
    # empty square
    assert img.getpixel((100, 20)) == GRAY
    # food at logical (0, 2) -> top-left cell
    assert img.getpixel((20, 20)) == RED
    # body segment at logical (1, 0), off the head
    assert img.getpixel((60, 85)) == GREEN
    # white cell border
    assert img.getpixel((100, 0)) == (255, 255, 255, 255)


def test_hazard_is_translucent_over_grid() -> None:
    state = make_state(snakes=[make_snake("you", (0, 0))], hazards=[(2, 2)])
    img = BoardRenderer(NO_LABELS).render_image(state)
    r, g, b, a = img.getpixel((100, 20))
    expected = round(0x61 * 0.35 + 0xA1 * 0.65)
    assert close((r, g, b), (expected, expected, expected))
    assert a == 255


def test_head_blends_over_body() -> None:
    img = BoardRenderer(NO_LABELS).render_image(scenario_state())
    r, g, b, _ = img.getpixel((60, 60))
    assert close((r, g, b), (round(0x5C * 0.8), round(0x5C * 0.8 + 128 * 0.2), round(0x5C * 0.8)))


def test_to_array_shape() -> None:
    img = BoardRenderer(NO_LABELS).render_image(scenario_state())
    arr = to_array(img)
    assert arr.shape == (120, 120, 4)
    assert tuple(arr[20, 20]) == RED


def test_labels_are_painted_over_grid() -> None:
    state = make_state(2, 2, snakes=[make_snake("you", (1, 1))])
    with_labels = BoardRenderer().render_image(state)
    without = BoardRenderer(NO_LABELS).render_image(state)
    region = [(x, y) for x in range(2, 12) for y in range(2, 12)]
    assert any(with_labels.getpixel(xy) != without.getpixel(xy) for xy in region)
    assert all(without.getpixel(xy) == GRAY for xy in region)


def test_unparseable_color_raises() -> None:
    style = style_config(item_color="not-a-color", show_coordinate_labels=False)
    with pytest.raises(ValueError):
        BoardRenderer(style).render_image(scenario_state())


def test_label_font_is_loaded_once_per_size() -> None:
    _font.cache_clear()
    BoardRenderer().render_image(make_state(3, 3, snakes=[make_snake("you", (0, 0))]))
    info = _font.cache_info()
    assert info.misses == 1
    assert info.hits == 5
