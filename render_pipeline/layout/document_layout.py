from ..common.constants import HSTEP, VSTEP
from .box_model import NO_EDGES


class DocumentLayout:
    """레이아웃 트리의 루트. 뷰포트 전체를 감싸는 박스"""

    def __init__(self, node, width, font_factory):
        self.node = node
        self.parent = None
        self.previous = None
        self.container_width = width
        self.font_factory = font_factory
        self.children = []
        self.margin = NO_EDGES

        self.x = None
        self.y = None
        self.width = None
        self.height = None

    def layout(self):
        from .block_layout import BlockLayout
        child = BlockLayout(self.node, self, None)
        self.children.append(child)

        self.x = HSTEP
        self.y = VSTEP
        self.width = max(0, self.container_width - 2 * HSTEP)
        self.content_x = self.x
        self.content_y = self.y
        self.content_width = self.width

        child.layout()
        self.height = child.height + child.margin.top + child.margin.bottom

    def paint(self):
        return []

    def should_paint(self):
        return False
