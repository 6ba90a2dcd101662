import skia
from .geometry import Rect
from .color_utils import parse_color


class DrawCursor:
    """포커스된 input의 텍스트 커서"""
    kind = "cursor"

    def __init__(self, x, y, width, height, color="black"):
        self.rect = Rect(x, y, x + width, y + height)
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
        paint = skia.Paint()
        paint.setColor(parse_color(self.color))
        paint.setStyle(skia.Paint.kFill_Style)
        canvas.drawRect(skia.Rect(
            self.rect.left,
            self.rect.top - scroll,
            self.rect.right,
            self.rect.bottom - scroll,
        ), paint)

    def __repr__(self) -> str:
        return f"DrawCursor({self.rect!r})"
