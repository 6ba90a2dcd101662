from ..dom.text import Text
from ..dom.element import Element
from ..rendering import DrawRect, DrawOutline, Rect, is_transparent
from ..common.constants import INPUT_WIDTH_PX
from .box_model import box_edges, border_of
from .line_layout import LineLayout
from .text_layout import TextLayout
from .input_layout import InputLayout
from .layout_utils import font_for, is_hidden


class BlockLayout:
    BLOCK_ELEMENTS = [
        "html", "body", "article", "section", "nav", "aside",
        "h1", "h2", "h3", "h4", "h5", "h6", "hgroup", "header",
        "footer", "address", "p", "hr", "pre", "blockquote",
        "ol", "ul", "menu", "li", "dl", "dt", "dd", "figure",
        "figcaption", "main", "div", "table", "form", "fieldset",
        "legend", "details", "summary"
    ]

    def __init__(self, node, parent, previous):
        self.node = node
        self.parent = parent
        self.previous = previous
        self.children = []
        self.font_factory = parent.font_factory

        self.margin = box_edges(node.style, "margin")
        self.padding = box_edges(node.style, "padding")
        self.border_width, self.border_color = border_of(
            node.style, node.style.get("color", "black"))

        self.x = None
        self.y = None
        self.width = None
        self.height = None

    def layout_mode(self):
        if isinstance(self.node, Text):
            return "inline"
        elif any(isinstance(child, Element) and
                 child.tag in self.BLOCK_ELEMENTS
                 for child in self.node.children):
            return "block"
        elif self.node.children or self.node.tag in ["input", "button"]:
            return "inline"
        else:
            return "block"

    def layout(self):
        self.x = self.parent.content_x + self.margin.left
        self.width = self.parent.content_width \
            - self.margin.left - self.margin.right

        if self.previous:
            self.y = self.previous.y + self.previous.height \
                + self.previous.margin.bottom + self.margin.top
        else:
            self.y = self.parent.content_y + self.margin.top

        inset = self.border_width
        self.content_x = self.x + inset + self.padding.left
        self.content_y = self.y + inset + self.padding.top
        self.content_width = max(0, self.width - 2 * inset
                                 - self.padding.left - self.padding.right)

        if self.layout_mode() == "block":
            previous = None
            for child in self.node.children:
                if is_hidden(child):
                    continue
                next = BlockLayout(child, self, previous)
                self.children.append(next)
                previous = next

            for child in self.children:
                child.layout()

            # 높이 계산은 하위 child 다 계산하고 나서
            content_height = sum(
                child.height + child.margin.top + child.margin.bottom
                for child in self.children)
        else:
            self.new_line()
            self.recurse(self.node)

            for child in self.children:
                child.layout()
            content_height = sum(child.height for child in self.children)

        self.height = content_height \
            + self.padding.top + self.padding.bottom + 2 * inset

    def recurse(self, node):
        if isinstance(node, Text):
            for word in node.text.split():
                self.word(node, word)
        elif is_hidden(node):
            return
        elif node.tag == "br":
            self.new_line()
        elif node.tag in ["input", "button"]:
            self.input(node)
        else:
            for child in node.children:
                self.recurse(child)

    def place(self, width, font):
        """현재 줄에 width만큼 들어갈 수 없으면 새 줄을 연다"""
        line = self.children[-1]
        if line.children and self.cursor_x + width > self.content_width:
            self.new_line()
        self.cursor_x += width + font.measure(" ")
        return self.children[-1]

    def word(self, node, word):
        font = font_for(node, self.font_factory)
        line = self.place(font.measure(word), font)
        previous_word = line.children[-1] if line.children else None
        line.children.append(TextLayout(node, word, line, previous_word))

    def input(self, node):
        font = font_for(node, self.font_factory)
        line = self.place(INPUT_WIDTH_PX, font)
        previous_word = line.children[-1] if line.children else None
        line.children.append(InputLayout(node, line, previous_word))

    def new_line(self):
        self.cursor_x = 0
        last_line = self.children[-1] if self.children else None
        new_line = LineLayout(self.node, self, last_line)
        self.children.append(new_line)

    def self_rect(self):
        return Rect(self.x, self.y, self.x + self.width, self.y + self.height)

    def paint(self):
        cmds = []

        # 배경은 텍스트보다 먼저 그려야 덮지 않음
        bgcolor = self.node.style.get("background-color", "transparent")
        if not is_transparent(bgcolor):
            cmds.append(DrawRect(self.x, self.y, self.x + self.width,
                                 self.y + self.height, bgcolor))

        if self.border_width > 0:
            cmds.append(DrawOutline(self.self_rect(), self.border_color,
                                    self.border_width))
        return cmds

    def should_paint(self):
        return isinstance(self.node, Text) or \
            self.node.tag not in ["input", "button"]
