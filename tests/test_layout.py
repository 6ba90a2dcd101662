from types import SimpleNamespace

import pytest

from render_pipeline.css import apply_styles
from render_pipeline.dom import Element, parse_html, tree_to_list
from render_pipeline.layout import (
    BlockLayout, InputLayout, LineLayout, TextLayout, LayoutError,
    compute_layout, layout_document, font_for,
    Edges, box_edges, border_of, resolve_length,
)
from render_pipeline.layout.box_model import expand_shorthand


def styled(html, css=""):
    root = parse_html(html).tree
    apply_styles(root, css)
    return root


def layout(html, width, font_factory, css=""):
    return layout_document(styled(html, css), width, font_factory)


def boxes(document, kind):
    return [obj for obj in tree_to_list(document, []) if isinstance(obj, kind)]


def body_box(document):
    html = document.children[0]
    return html.children[0]


class TestBoxModel:
    def test_resolve_length(self):
        assert resolve_length("12px") == 12
        assert resolve_length("3") == 3
        assert resolve_length("2em") == 32
        assert resolve_length("1rem") == 16
        assert resolve_length("50%") == 8
        assert resolve_length("auto") == 0

    def test_shorthand_expansion(self):
        assert expand_shorthand("4px") == Edges(4, 4, 4, 4)
        assert expand_shorthand("1px 2px") == Edges(1, 2, 1, 2)
        assert expand_shorthand("1px 2px 3px") == Edges(1, 2, 3, 2)
        assert expand_shorthand("1px 2px 3px 4px") == Edges(1, 2, 3, 4)
        assert expand_shorthand("") == Edges(0, 0, 0, 0)

    def test_longhand_overrides_shorthand(self):
        style = {"margin": "10px", "margin-left": "2px"}
        assert box_edges(style, "margin") == Edges(10, 10, 10, 2)

    def test_border(self):
        assert border_of({"border": "2px solid red"}) == (2, "red")
        assert border_of({"border": "none"})[0] == 0
        assert border_of({"border": "solid"})[0] == 3
        assert border_of({"border": "1px solid", "border-color": "blue"}) == (1, "blue")
        assert border_of({}, "green") == (0, "green")

    def test_font_for(self, font_factory):
        node = SimpleNamespace(style={"font-size": "20px", "font-weight": "700",
                                      "font-style": "oblique"})
        font = font_for(node, font_factory)
        assert (font.size, font.weight, font.style) == (20, "bold", "italic")

        plain = font_for(SimpleNamespace(style={}), font_factory)
        assert (plain.size, plain.weight, plain.style) == (16, "normal", "roman")


class TestBlockLayout:
    def test_document_insets(self, font_factory):
        document = layout("<p>x</p>", 800, font_factory)
        assert (document.x, document.y, document.width) == (13, 18, 774)

    def test_body_margin(self, font_factory):
        document = layout("x", 800, font_factory)
        body = body_box(document)
        assert body.node.tag == "body"
        assert (body.x, body.y, body.width) == (21, 26, 758)

    def test_block_siblings_stack_with_margins(self, font_factory):
        document = layout("<p>a</p><p>b</p>", 800, font_factory)
        body = body_box(document)
        p1, p2 = body.children
        assert p1.y == 26 + 16
        assert p2.y == p1.y + p1.height + 16 + 16
        assert body.height == (20 + 32) * 2

    def test_padding_and_border_inset_content(self, font_factory):
        document = layout('<div style="padding: 5px; border: 2px solid red">x</div>',
                          800, font_factory)
        div, = [box for box in boxes(document, BlockLayout)
                if isinstance(box.node, Element) and box.node.tag == "div"]
        word, = boxes(document, TextLayout)
        assert (div.content_x, div.content_y) == (28, 33)
        assert word.x == 28
        assert div.height == 20 + 2 * 5 + 2 * 2

    def test_display_none_makes_no_boxes(self, font_factory):
        document = layout("<p>a</p><p style='display: none'>b</p>", 800, font_factory)
        assert len(body_box(document).children) == 1
        assert [w.word for w in boxes(document, TextLayout)] == ["a"]

    def test_hidden_inline_element_is_skipped(self, font_factory):
        document = layout('<p>a <span style="display: none">gone</span> b</p>',
                          800, font_factory)
        assert [w.word for w in boxes(document, TextLayout)] == ["a", "b"]

    def test_block_mode_when_any_block_child(self, font_factory):
        document = layout("<div>text<p>para</p></div>", 800, font_factory)
        div, = [box for box in boxes(document, BlockLayout)
                if isinstance(box.node, Element) and box.node.tag == "div"]
        assert div.layout_mode() == "block"
        assert all(isinstance(child, BlockLayout) for child in div.children)


class TestLineBreaking:
    # body content width = container width - 2 * 13 - 2 * 8
    def test_word_that_overflows_starts_new_line(self, font_factory):
        document = layout("aaa bbb ccc", 162, font_factory)
        lines = boxes(document, LineLayout)
        assert [[w.word for w in line.children] for line in lines] == \
            [["aaa", "bbb"], ["ccc"]]
        ccc = lines[1].children[0]
        assert ccc.x == body_box(document).content_x == 21

    def test_word_that_exactly_fits_stays(self, font_factory):
        document = layout("aaa bbb ccc", 154, font_factory)
        lines = boxes(document, LineLayout)
        assert [len(line.children) for line in lines] == [2, 1]

    def test_overlong_word_on_empty_line_is_kept(self, font_factory):
        document = layout("aaaaaaaaaa", 100, font_factory)
        lines = boxes(document, LineLayout)
        assert len(lines) == 1
        assert lines[0].children[0].word == "aaaaaaaaaa"

    def test_words_are_spaced_by_one_space(self, font_factory):
        document = layout("aaa bbb", 800, font_factory)
        aaa, bbb = boxes(document, TextLayout)
        assert bbb.x == aaa.x + 48 + 16

    def test_line_geometry(self, font_factory):
        document = layout("aaa bbb ccc", 162, font_factory)
        first, second = boxes(document, LineLayout)
        assert first.y == 26
        assert first.children[0].y == 26 + 1.25 * 12 - 12
        assert first.height == 1.25 * (12 + 4)
        assert second.y == first.y + first.height

    def test_mixed_sizes_share_baseline(self, font_factory):
        document = layout('a <span style="font-size: 32px">b</span>', 800, font_factory)
        line, = boxes(document, LineLayout)
        a, b = line.children
        baseline = 26 + 1.25 * 24
        assert a.y == baseline - 12
        assert b.y == baseline - 24
        assert line.height == 1.25 * (24 + 8)
        assert b.x == a.x + 16 + 16

    def test_br_forces_break_and_empty_line_has_no_height(self, font_factory):
        document = layout("<br>b", 800, font_factory)
        first, second = boxes(document, LineLayout)
        assert first.children == [] and first.height == 0
        assert second.children[0].word == "b"
        assert second.y == 26


class TestInputLayout:
    def test_input_geometry_and_paint(self, font_factory):
        document = layout('<input value="hi">', 800, font_factory)
        box, = boxes(document, InputLayout)
        assert (box.x, box.width, box.height) == (21, 200, 16)
        cmds = box.paint()
        assert [cmd.kind for cmd in cmds] == ["rect", "border", "text"]
        text = cmds[2]
        assert text.text == "hi"
        assert text.rect.left == 21 + 4
        assert cmds[1].thickness == 2

    def test_placeholder_when_no_value(self, font_factory):
        document = layout('<input placeholder="type here">', 800, font_factory)
        box, = boxes(document, InputLayout)
        assert box.paint()[-1].text == "type here"

    def test_focused_input_draws_cursor(self, font_factory):
        root = styled('<input value="hi">')
        input, = [n for n in tree_to_list(root, [])
                  if isinstance(n, Element) and n.tag == "input"]
        input.is_focus = True
        cmds = compute_layout(root, 800, font_factory)
        cursor = cmds[-1]
        assert cursor.kind == "cursor"
        assert cursor.rect.left == 21 + 4 + 32

    def test_button_label_is_centered(self, font_factory):
        document = layout("<button>Go</button>", 800, font_factory)
        box, = boxes(document, InputLayout)
        text = box.paint()[-1]
        assert text.rect.left == 21 + (200 - 32) / 2

    def test_input_breaks_line_like_a_word(self, font_factory):
        document = layout("aaa <input>", 42 + 100, font_factory)
        lines = boxes(document, LineLayout)
        assert len(lines) == 2
        assert isinstance(lines[1].children[0], InputLayout)


class TestPaint:
    def test_commands_in_tree_order(self, font_factory):
        cmds = compute_layout(styled("<p>Hello world</p>"), 800, font_factory)
        assert [cmd.kind for cmd in cmds] == ["rect", "text", "text"]
        assert [cmd.text for cmd in cmds[1:]] == ["Hello", "world"]
        assert cmds[1].node.text == "Hello world"

    def test_text_color_and_font(self, font_factory):
        cmds = compute_layout(styled("<b>x</b>", "b { color: red }"), 800, font_factory)
        text = cmds[-1].to_dict()
        assert text["color"] == "red"
        assert text["font"] == "roman bold 16px"
        assert (text["x"], text["width"], text["height"]) == (21, 16, 16)

    def test_background_and_border(self, font_factory):
        cmds = compute_layout(
            styled('<div style="background-color: blue; border: 1px solid black">x</div>'),
            800, font_factory)
        kinds = [cmd.kind for cmd in cmds]
        assert kinds == ["rect", "rect", "border", "text"]
        assert cmds[1].color == "blue"

    def test_transparent_background_is_not_painted(self, font_factory):
        cmds = compute_layout(
            styled("<p>x</p>", "body { background-color: transparent }"),
            800, font_factory)
        assert [cmd.kind for cmd in cmds] == ["text"]


class TestLayoutErrors:
    @staticmethod
    def broken_font(size, weight, style):
        raise ValueError("no font available")

    def test_layout_document_raises_layout_error(self):
        with pytest.raises(LayoutError):
            layout_document(styled("<p>x</p>"), 800, self.broken_font)

    def test_compute_layout_returns_empty(self):
        assert compute_layout(styled("<p>x</p>"), 800, self.broken_font) == []
