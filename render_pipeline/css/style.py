"""CSS Style Application"""
from collections.abc import MutableMapping
from enum import Enum
from typing import Dict, Iterator, Optional

from ..common.constants import BASE_FONT_SIZE_PX
from ..dom.element import Element
from .css_parser import CSSParser


class Property(Enum):
    """cascade가 직접 다루는 고정 속성 집합"""
    FONT_SIZE = "font-size"
    FONT_STYLE = "font-style"
    FONT_WEIGHT = "font-weight"
    COLOR = "color"
    BACKGROUND_COLOR = "background-color"
    MARGIN = "margin"
    PADDING = "padding"
    BORDER = "border"
    DISPLAY = "display"
    TEXT_DECORATION = "text-decoration"


PROPERTY_BY_NAME = {prop.value: prop for prop in Property}

INHERITED_PROPERTIES = {
    "font-size": f"{BASE_FONT_SIZE_PX}px",
    "font-style": "normal",
    "font-weight": "normal",
    "color": "black",
}

NON_INHERITED_PROPERTIES = {
    "background-color": "transparent",
    "margin": "0px",
    "padding": "0px",
    "border": "none",
    "display": "inline",
    "text-decoration": "none",
}


class StyleMap(MutableMapping):
    """속성 이름 -> 값 매핑

    고정 속성은 Property 키로, 그 밖의 속성(margin-top, font-family 등)은
    문자열 키 그대로 extra에 저장해 통과시킨다.
    """

    def __init__(self, values: Optional[Dict[str, str]] = None):
        self.known: Dict[Property, str] = {}
        self.extra: Dict[str, str] = {}
        if values:
            self.update(values)

    def __getitem__(self, name: str) -> str:
        prop = PROPERTY_BY_NAME.get(name)
        if prop is not None:
            return self.known[prop]
        return self.extra[name]

    def __setitem__(self, name: str, value: str) -> None:
        prop = PROPERTY_BY_NAME.get(name)
        if prop is not None:
            self.known[prop] = value
        else:
            self.extra[name] = value

    def __delitem__(self, name: str) -> None:
        prop = PROPERTY_BY_NAME.get(name)
        if prop is not None:
            del self.known[prop]
        else:
            del self.extra[name]

    def __iter__(self) -> Iterator[str]:
        for prop in Property:
            if prop in self.known:
                yield prop.value
        yield from self.extra

    def __len__(self) -> int:
        return len(self.known) + len(self.extra)

    def __repr__(self) -> str:
        return f"StyleMap({dict(self.items())!r})"


def parse_px(value: str, default: float = BASE_FONT_SIZE_PX) -> float:
    """'12px' 같은 값을 float로 변환 (실패하면 default)"""
    if value.endswith("px"):
        value = value[:-2]
    try:
        return float(value)
    except ValueError:
        return default


def format_px(value: float) -> str:
    return f"{value:g}px"


def resolve_font_size(font_size: str, parent_font_size: str) -> str:
    """%, em 단위 font-size를 부모의 px 값 기준으로 px로 변환"""
    if font_size.endswith("%"):
        node_pct = parse_px(font_size[:-1], 100) / 100
        return format_px(node_pct * parse_px(parent_font_size))
    elif font_size.endswith("em"):
        node_em = parse_px(font_size[:-2], 1)
        return format_px(node_em * parse_px(parent_font_size))
    return font_size


def style(root, rules):
    """root 이하 모든 노드에 CSS 규칙을 적용

    rules는 cascade_priority로 정렬된 (selector, body) 목록.
    명시적 스택으로 pre-order 순회하므로 부모가 항상 먼저 계산됨
    """
    stack = [root]
    while stack:
        node = stack.pop()
        style_node(node, rules)
        stack.extend(reversed(node.children))


def style_node(node, rules):
    """노드 하나의 style 계산. 부모 style은 이미 계산되어 있어야 함"""
    parent_style = node.parent.style if node.parent else None
    node.style = StyleMap()

    for property, default_value in INHERITED_PROPERTIES.items():
        if parent_style and property in parent_style:
            node.style[property] = parent_style[property]
        else:
            node.style[property] = default_value

    if isinstance(node, Element):
        for property, default_value in NON_INHERITED_PROPERTIES.items():
            node.style[property] = default_value

        for selector, body in rules:
            if not selector.matches(node):
                continue
            for property, value in body.items():
                node.style[property] = value

        if "style" in node.attributes:
            pairs = CSSParser(node.attributes["style"]).body()
            for property, value in pairs.items():
                node.style[property] = value

        for property, value in list(node.style.items()):
            if value == "inherit":
                if parent_style and property in parent_style:
                    node.style[property] = parent_style[property]
                else:
                    node.style[property] = INHERITED_PROPERTIES.get(
                        property, NON_INHERITED_PROPERTIES.get(property, ""))

    if parent_style and "font-size" in parent_style:
        parent_font_size = parent_style["font-size"]
    else:
        parent_font_size = INHERITED_PROPERTIES["font-size"]
    node.style["font-size"] = resolve_font_size(
        node.style["font-size"], parent_font_size)
