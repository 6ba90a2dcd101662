import skia

from render_pipeline.rendering import (
    DrawCursor, DrawOutline, DrawRect, DrawText, Rect, is_transparent,
    parse_color,
)
from conftest import MockFont


def test_rect():
    rect = Rect(10, 20, 30, 60)
    assert rect.width == 20
    assert rect.height == 40
    assert rect.contains_point(10, 20)
    assert not rect.contains_point(30, 20)
    assert rect == Rect(10, 20, 30, 60)


def test_draw_text_to_dict():
    cmd = DrawText(5, 7, "hey", MockFont(10), "red")
    assert cmd.to_dict() == {
        "kind": "text", "x": 5, "y": 7, "width": 30, "height": 10,
        "text": "hey", "font": "roman normal 10px", "color": "red",
    }


def test_box_commands_to_dict():
    assert DrawRect(0, 0, 10, 5, "blue").to_dict() == {
        "kind": "rect", "x": 0, "y": 0, "width": 10, "height": 5,
        "color": "blue",
    }
    outline = DrawOutline(Rect(1, 2, 11, 12), "black", 2).to_dict()
    assert outline["kind"] == "border"
    assert outline["thickness"] == 2
    cursor = DrawCursor(3, 4, 1, 8).to_dict()
    assert cursor["kind"] == "cursor"
    assert (cursor["width"], cursor["height"]) == (1, 8)


def test_is_transparent():
    assert is_transparent(None)
    assert is_transparent("transparent")
    assert is_transparent("rgba(0, 0, 0, 0)")
    assert not is_transparent("white")
    assert not is_transparent("rgba(0,0,0,0.5)")


def test_parse_color():
    assert parse_color("red") == skia.ColorRED
    assert parse_color("#f00") == skia.Color(255, 0, 0, 255)
    assert parse_color("#00ff0080") == skia.Color(0, 255, 0, 128)
    assert parse_color("rgb(1, 2, 3)") == skia.Color(1, 2, 3, 255)
    assert parse_color("nonsense") == skia.ColorBLACK
    assert parse_color(None) == skia.ColorBLACK
