"""DOM Tree utilities"""
from typing import Dict, List

from .element import Element
from .text import Text


def print_tree(node, indent=0):
    """DOM 트리를 콘솔에 출력"""
    print(" " * indent, node)
    for child in node.children:
        print_tree(child, indent + 2)


def tree_to_list(tree, result_list):
    """트리를 pre-order flat list로 변환 (DOM, 레이아웃 트리 모두 사용)

    깊게 중첩된 문서도 처리하도록 재귀 대신 스택을 사용
    """
    stack = [tree]
    while stack:
        node = stack.pop()
        result_list.append(node)
        stack.extend(reversed(node.children))
    return result_list


def text_content(node) -> str:
    """하위 텍스트 노드를 문서 순서대로 이어 붙임"""
    return "".join(n.text for n in tree_to_list(node, [])
                   if isinstance(n, Text))


def inner_html(node) -> str:
    """자식 노드를 마크업 문자열로 직렬화"""
    parts = []
    for child in node.children:
        if isinstance(child, Text):
            parts.append(child.text)
            continue
        attrs = "".join(
            f' {name}="{value}"' if value else f" {name}"
            for name, value in child.attributes.items()
        )
        parts.append(f"<{child.tag}{attrs}>{inner_html(child)}</{child.tag}>")
    return "".join(parts)


def build_id_map(root) -> Dict[str, Element]:
    """id 속성 -> Element 매핑 (중복 id는 문서 순서상 첫 요소)"""
    id_map: Dict[str, Element] = {}
    for node in tree_to_list(root, []):
        if isinstance(node, Element) and "id" in node.attributes:
            id_map.setdefault(node.attributes["id"], node)
    return id_map


def replace_children(elt: Element, nodes: List) -> None:
    """elt의 자식을 nodes로 교체하고 parent 참조를 다시 연결"""
    elt.children = list(nodes)
    for child in elt.children:
        child.parent = elt
