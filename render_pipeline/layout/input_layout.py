from ..common.constants import INPUT_WIDTH_PX, INPUT_PADDING_PX
from ..dom.tree_utils import text_content
from ..rendering import DrawRect, DrawText, DrawOutline, DrawCursor, Rect, \
    is_transparent
from .box_model import border_of
from .layout_utils import font_for


class InputLayout:
    """<input>, <button> 을 고정 너비의 원자 박스로 배치"""

    def __init__(self, node, parent, previous):
        self.node = node
        self.children = []
        self.parent = parent
        self.previous = previous
        self.font_factory = parent.parent.font_factory
        self.width = INPUT_WIDTH_PX

        self.x = None
        self.y = None

    def layout(self):
        self.font = font_for(self.node, self.font_factory)
        self.width = INPUT_WIDTH_PX

        if self.previous:
            space = self.previous.font.measure(" ")
            self.x = self.previous.x + self.previous.width + space
        else:
            self.x = self.parent.x

        self.height = self.font.metrics("linespace")

    def label(self):
        if self.node.tag == "button":
            return text_content(self.node).strip()
        value = self.node.attributes.get("value", "")
        return value or self.node.attributes.get("placeholder", "")

    def self_rect(self):
        return Rect(self.x, self.y, self.x + self.width, self.y + self.height)

    def paint(self):
        cmds = []
        color = self.node.style.get("color", "black")

        bgcolor = self.node.style.get("background-color", "transparent")
        if not is_transparent(bgcolor):
            cmds.append(DrawRect(self.x, self.y, self.x + self.width,
                                 self.y + self.height, bgcolor))

        border_width, border_color = border_of(self.node.style, color)
        cmds.append(DrawOutline(self.self_rect(), border_color,
                                max(1, border_width)))

        text = self.label()
        text_width = self.font.measure(text)
        if self.node.tag == "button":
            text_x = self.x + (self.width - text_width) / 2
        else:
            text_x = self.x + INPUT_PADDING_PX
        text_y = self.y + (self.height - self.font.metrics("linespace")) / 2
        if text:
            cmds.append(DrawText(text_x, text_y, text, self.font, color,
                                 self.node))

        if self.node.is_focus and self.node.tag == "input":
            value = self.node.attributes.get("value", "")
            cx = text_x + self.font.measure(value)
            cmds.append(DrawCursor(cx, self.y + 2, 1,
                                   max(0, self.height - 4), color))

        return cmds

    def should_paint(self):
        return True
