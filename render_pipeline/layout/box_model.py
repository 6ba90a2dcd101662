"""margin / padding / border 계산

길이는 px, 단위 없는 숫자, em, rem, % 를 지원하며
em 과 % 는 BASE_FONT_SIZE_PX(16px) 기준으로 환산합니다.
"""
from collections import namedtuple

from ..common.constants import BASE_FONT_SIZE_PX

Edges = namedtuple("Edges", ["top", "right", "bottom", "left"])

NO_EDGES = Edges(0.0, 0.0, 0.0, 0.0)

BORDER_STYLES = [
    "none", "hidden", "solid", "dashed", "dotted", "double",
    "groove", "ridge", "inset", "outset",
]

# border 에 너비가 없을 때 (CSS medium)
DEFAULT_BORDER_WIDTH = 3.0


def resolve_length(value: str) -> float:
    """CSS 길이를 px float로 변환 (해석할 수 없으면 0)"""
    value = value.strip().lower()
    try:
        if value.endswith("px"):
            return float(value[:-2])
        if value.endswith("rem"):
            return float(value[:-3]) * BASE_FONT_SIZE_PX
        if value.endswith("em"):
            return float(value[:-2]) * BASE_FONT_SIZE_PX
        if value.endswith("%"):
            return float(value[:-1]) / 100 * BASE_FONT_SIZE_PX
        return float(value)
    except ValueError:
        return 0.0


def is_length(token: str) -> bool:
    return any(c.isdigit() for c in token) and not token.startswith("#") \
        and "(" not in token


def expand_shorthand(value: str) -> Edges:
    """1~4개 값 shorthand를 (top, right, bottom, left)로 펼침"""
    lengths = [resolve_length(part) for part in value.split()][:4]
    if len(lengths) == 1:
        return Edges(*lengths * 4)
    elif len(lengths) == 2:
        vertical, horizontal = lengths
        return Edges(vertical, horizontal, vertical, horizontal)
    elif len(lengths) == 3:
        top, horizontal, bottom = lengths
        return Edges(top, horizontal, bottom, horizontal)
    elif len(lengths) == 4:
        return Edges(*lengths)
    return NO_EDGES


def box_edges(style, name: str) -> Edges:
    """name 은 'margin' 또는 'padding'. margin-top 같은 longhand가 우선"""
    edges = expand_shorthand(style.get(name, "0px"))
    overrides = {}
    for side in Edges._fields:
        longhand = f"{name}-{side}"
        if longhand in style:
            overrides[side] = resolve_length(style[longhand])
    return edges._replace(**overrides)


def border_of(style, default_color: str = "black"):
    """border shorthand에서 (너비, 색상) 추출. none 이면 너비 0"""
    width = 0.0
    color = default_color
    has_style = False
    for token in style.get("border", "none").split():
        lowered = token.lower()
        if lowered in ("none", "hidden"):
            return 0.0, color
        if lowered in BORDER_STYLES:
            has_style = True
        elif is_length(lowered):
            width = resolve_length(lowered)
        else:
            color = token
    if width == 0.0 and has_style:
        width = DEFAULT_BORDER_WIDTH

    if "border-width" in style:
        width = resolve_length(style["border-width"])
    if "border-color" in style:
        color = style["border-color"]
    return width, color
