"""CSS Cascade - 스타일시트 결합, 우선순위 정렬, 스타일 적용"""
import logging
from pathlib import Path
from typing import List

from ..common.diagnostics import Diagnostic
from ..dom.element import Element
from ..dom.text import Text
from ..dom.tree_utils import tree_to_list
from .css_parser import CSSParser
from .style import style

logger = logging.getLogger(__name__)

DEFAULT_STYLE_SHEET = Path(__file__).with_name("browser.css").read_text()


def cascade_priority(rule):
    """CSS 규칙의 우선순위를 반환"""
    selector, body = rule
    return selector.priority


def embedded_style_text(root) -> str:
    """문서 안 <style> 요소의 텍스트를 문서 순서대로 모음"""
    chunks = []
    for node in tree_to_list(root, []):
        if isinstance(node, Element) and node.tag == "style":
            chunks.extend(child.text for child in node.children
                          if isinstance(child, Text))
    return "\n".join(chunks)


def apply_styles(root, author_css: str = "", user_css: str = "") -> List[Diagnostic]:
    """기본 시트 < <style> < author < user 순으로 결합해 트리 전체에 적용

    노드의 style을 제자리에서 갱신하고 CSS 파싱 진단 목록을 반환
    """
    sheet = "\n".join([
        DEFAULT_STYLE_SHEET,
        embedded_style_text(root),
        author_css,
        user_css,
    ])
    parser = CSSParser(sheet)
    rules = parser.parse()
    if parser.diagnostics:
        logger.info("Recovered from %d CSS error(s)", len(parser.diagnostics))
    style(root, sorted(rules, key=cascade_priority))
    return parser.diagnostics
