import skia
from .geometry import Rect
from .color_utils import parse_color


class DrawText:
    """단어 하나를 그리는 명령. node는 히트 테스트용 원본 DOM 노드"""
    kind = "text"

    def __init__(self, x1, y1, text, font, color, node=None):
        self.rect = Rect(x1, y1, x1 + font.measure(text), y1 + font.metrics("linespace"))
        self.text = text
        self.font = font
        self.color = color
        self.node = node

    def to_dict(self):
        return {
            "kind": self.kind,
            "x": self.rect.left,
            "y": self.rect.top,
            "width": self.rect.width,
            "height": self.rect.height,
            "text": self.text,
            "font": str(self.font),
            "color": self.color,
        }

    def execute(self, scroll, canvas):
        """Skia Canvas에 텍스트 렌더링"""
        paint = skia.Paint()
        paint.setColor(parse_color(self.color))
        paint.setAntiAlias(True)

        # Skia drawString은 baseline 기준이므로 ascent 더함
        baseline_y = self.rect.top - scroll + self.font.metrics("ascent")

        canvas.drawString(
            self.text,
            self.rect.left,
            baseline_y,
            self.font.skia_font,
            paint,
        )

    def __repr__(self) -> str:
        return f"DrawText(text={self.text!r}, x={self.rect.left}, y={self.rect.top})"
