import re
import xml.etree.ElementTree as ET
from typing import List

from snake_board.renderer import BoardRenderer, render
from snake_board.renderer.svg import to_svg
from snake_board.scene import Group
from snake_board.style import style_config
from tests.test_utils import make_snake, make_state, scenario_state

SVG_NS = "{http://www.w3.org/2000/svg}"


def parse(markup: str) -> ET.Element:
    return ET.fromstring(markup)


def numbers(value: str) -> List[float]:
    return [float(part) for part in re.split(r"[ ,]+", value.strip())]


def group(root: ET.Element, group_id: str) -> ET.Element:
    found = root.find(f".//{SVG_NS}g[@id='{group_id}']")
    assert found is not None
    return found


def test_document_size_matches_board() -> None:
    root = parse(BoardRenderer().render_svg(make_state(7, 3, snakes=[make_snake("you", (0, 0))])))
    assert root.tag == f"{SVG_NS}svg"
    assert float(root.get("width", "")) == 280
    assert float(root.get("height", "")) == 120
    assert numbers(root.get("viewBox", "")) == [0, 0, 280, 120]


def test_layers_and_shape_counts() -> None:
    root = parse(BoardRenderer().render_svg(scenario_state()))
    grid = group(root, "grid")
    entities = group(root, "entities")
    labels = group(root, "labels")
    assert len(grid.findall(f"{SVG_NS}rect")) == 9
    assert [child.tag for child in entities] == [
        f"{SVG_NS}rect",
        f"{SVG_NS}rect",
        f"{SVG_NS}rect",
        f"{SVG_NS}circle",
    ]
    assert [text.text for text in labels.findall(f"{SVG_NS}text")] == [
        "3",
        "2",
        "1",
        "a",
        "b",
        "c",
    ]


def test_shape_attributes() -> None:
    state = make_state(
        snakes=[make_snake("you", (1, 1), [(1, 1)])],
        items=[(0, 2)],
        hazards=[(2, 0)],
    )
    root = parse(BoardRenderer(style_config(show_coordinate_labels=False)).render_svg(state))
    body, head, food, hazard = list(group(root, "entities"))

    assert body.get("fill") == "green"
    assert float(body.get("rx", "")) == 10
    assert body.get("opacity") is None

    assert float(head.get("x", "")) == 52
    assert float(head.get("width", "")) == 16
    assert float(head.get("opacity", "")) == 0.8

    assert (float(food.get("cx", "")), float(food.get("cy", ""))) == (20, 20)
    assert float(food.get("r", "")) == 10
    assert food.get("fill") == "red"

    assert (float(hazard.get("x", "")), float(hazard.get("y", ""))) == (80, 80)
    assert hazard.get("fill") == "#616161"
    assert float(hazard.get("opacity", "")) == 0.35

    square = group(root, "grid").find(f"{SVG_NS}rect")
    assert square is not None
    assert square.get("stroke") == "#FFFFFF"
    assert float(square.get("stroke-width", "")) == 2
    assert square.get("rx") is None


def test_label_text_attributes() -> None:
    root = parse(BoardRenderer().render_svg(make_state(2, 2, snakes=[make_snake("you", (0, 0))])))
    first = group(root, "labels").find(f"{SVG_NS}text")
    assert first is not None
    assert first.text == "2"
    assert first.get("font-family") == "sans-serif"
    assert float(first.get("font-size", "")) == 10
    assert first.get("fill") == "#ffffff"
    assert (float(first.get("x", "")), float(first.get("y", ""))) == (1, 10)


def test_bare_hex_color_is_normalised() -> None:
    style = style_config(hazard_color="616161", show_coordinate_labels=False)
    state = make_state(snakes=[make_snake("you", (0, 0))], hazards=[(1, 1)])
    root = parse(BoardRenderer(style).render_svg(state))
    assert list(group(root, "entities"))[-1].get("fill") == "#616161"


def test_empty_group_serialises() -> None:
    markup = to_svg(Group(id="labels"), 40, 40)
    assert group(parse(markup), "labels") is not None


def test_svg_is_deterministic() -> None:
    state = scenario_state()
    assert to_svg(render(state), 120, 120) == to_svg(render(state), 120, 120)
