# Rendering components
from .draw_text import DrawText
from .draw_rect import DrawRect
from .draw_outline import DrawOutline
from .draw_cursor import DrawCursor
from .geometry import Rect
from .font import get_font
from .color_utils import parse_color, is_transparent

__all__ = [
    'DrawText',
    'DrawRect',
    'DrawOutline',
    'DrawCursor',
    'Rect',
    'get_font',
    'parse_color',
    'is_transparent',
]
