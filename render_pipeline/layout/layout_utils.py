"""레이아웃 진입점과 공용 도우미"""
import logging

from ..common.constants import BASE_FONT_SIZE_PX
from ..css.style import parse_px
from ..dom.element import Element
from ..profiling import MeasureTime

logger = logging.getLogger(__name__)


class LayoutError(Exception):
    """박스 트리 구성이나 페인트 도중 발생한 내부 오류"""


def is_hidden(node):
    return isinstance(node, Element) and node.style.get("display") == "none"


def font_for(node, font_factory):
    """노드의 계산된 스타일로 폰트 선택"""
    style = node.style
    size = parse_px(style.get("font-size", f"{BASE_FONT_SIZE_PX}px"))

    weight = style.get("font-weight", "normal")
    if weight in ["bold", "bolder"] or (weight.isdigit() and int(weight) >= 600):
        weight = "bold"
    else:
        weight = "normal"

    font_style = style.get("font-style", "normal")
    font_style = "italic" if font_style in ["italic", "oblique"] else "roman"
    return font_factory(size, weight, font_style)


def paint_tree(layout_object, display_list):
    if layout_object.should_paint():
        display_list.extend(layout_object.paint())

    for child in layout_object.children:
        paint_tree(child, display_list)


def layout_document(root, width, font_factory=None):
    """스타일이 계산된 트리로 박스 트리를 만든다"""
    from ..rendering.font import get_font
    from .document_layout import DocumentLayout

    document = DocumentLayout(root, width, font_factory or get_font)
    try:
        with MeasureTime("layout", "layout"):
            document.layout()
    except (AttributeError, KeyError, TypeError, ValueError,
            ZeroDivisionError, RecursionError) as e:
        raise LayoutError(f"layout failed: {e}") from e
    return document


def paint_document(document):
    """박스 트리를 페인트 명령 목록으로 변환"""
    display_list = []
    try:
        with MeasureTime("paint", "paint"):
            paint_tree(document, display_list)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise LayoutError(f"paint failed: {e}") from e
    return display_list


def compute_layout(root, width, font_factory=None):
    """박스 트리를 만들고 페인트 명령 목록을 반환. 실패하면 빈 목록"""
    try:
        display_list = paint_document(
            layout_document(root, width, font_factory))
    except LayoutError:
        logger.exception("Layout failed, returning an empty display list")
        return []
    logger.debug("Painted %d commands", len(display_list))
    return display_list
