from ..rendering import DrawText
from .layout_utils import font_for


class TextLayout:
    def __init__(self, node, word, parent, previous):
        self.node = node
        self.word = word
        self.children = []
        self.parent = parent
        self.previous = previous
        self.font_factory = parent.parent.font_factory

        self.x = None
        self.y = None

    def layout(self):
        self.font = font_for(self.node, self.font_factory)
        self.width = self.font.measure(self.word)

        # 줄바꿈 계산과 같은 간격을 쓰도록 이전 단어 폰트의 공백 너비 사용
        if self.previous:
            space = self.previous.font.measure(" ")
            self.x = self.previous.x + self.previous.width + space
        else:
            self.x = self.parent.x

        self.height = self.font.metrics("linespace")

    def paint(self):
        color = self.node.style.get("color", "black")
        return [DrawText(self.x, self.y, self.word, self.font, color, self.node)]

    def should_paint(self):
        return True
