"""사각형 좌표"""


class Rect:
    def __init__(self, left, top, right, bottom):
        self.left = left
        self.top = top
        self.right = right
        self.bottom = bottom

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.bottom - self.top

    def contains_point(self, x, y):
        return self.left <= x < self.right and self.top <= y < self.bottom

    def __eq__(self, other):
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.left, self.top, self.right, self.bottom) == \
            (other.left, other.top, other.right, other.bottom)

    def __repr__(self) -> str:
        return f"Rect({self.left}, {self.top}, {self.right}, {self.bottom})"
