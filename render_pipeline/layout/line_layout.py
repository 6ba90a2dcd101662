from ..common.constants import LINE_HEIGHT_FACTOR


class LineLayout:
    def __init__(self, node, parent, previous):
        self.node = node
        self.parent = parent
        self.previous = previous
        self.children = []

        self.x = None
        self.y = None
        self.width = None
        self.height = None

    def layout(self):
        self.width = self.parent.content_width
        self.x = self.parent.content_x

        if self.previous:
            self.y = self.previous.y + self.previous.height
        else:
            self.y = self.parent.content_y

        for word in self.children:
            word.layout()

        if not self.children:
            self.height = 0
            return

        max_ascent = max(word.font.metrics("ascent") for word in self.children)
        baseline = self.y + LINE_HEIGHT_FACTOR * max_ascent

        for word in self.children:
            word.y = baseline - word.font.metrics("ascent")

        max_descent = max(word.font.metrics("descent") for word in self.children)
        self.height = LINE_HEIGHT_FACTOR * (max_ascent + max_descent)

    def paint(self):
        return []

    def should_paint(self):
        return False
