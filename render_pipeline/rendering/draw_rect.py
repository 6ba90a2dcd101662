import skia
from .geometry import Rect
from .color_utils import parse_color


class DrawRect:
    """채워진 사각형 (배경)"""
    kind = "rect"

    def __init__(self, x1, y1, x2, y2, color):
        self.rect = Rect(x1, y1, x2, y2)
        self.color = color

    def to_dict(self):
        return {
            "kind": self.kind,
            "x": self.rect.left,
            "y": self.rect.top,
            "width": self.rect.width,
            "height": self.rect.height,
            "color": self.color,
        }

    def execute(self, scroll, canvas):
        """Skia Canvas에 채워진 사각형 렌더링"""
        if self.color == "transparent":
            return

        paint = skia.Paint()
        paint.setColor(parse_color(self.color))
        paint.setStyle(skia.Paint.kFill_Style)

        rect = skia.Rect(
            self.rect.left,
            self.rect.top - scroll,
            self.rect.right,
            self.rect.bottom - scroll,
        )
        canvas.drawRect(rect, paint)

    def __repr__(self) -> str:
        return f"DrawRect({self.rect!r}, color={self.color!r})"
