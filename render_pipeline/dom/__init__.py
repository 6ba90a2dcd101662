# DOM (Document Object Model) components
from .element import Element
from .text import Text
from .html_parser import HTMLParser, ParseResult, parse_html
from .tree_utils import (
    print_tree, tree_to_list, text_content, inner_html,
    build_id_map, replace_children,
)

__all__ = [
    'Element',
    'Text',
    'HTMLParser',
    'ParseResult',
    'parse_html',
    'print_tree',
    'tree_to_list',
    'text_content',
    'inner_html',
    'build_id_map',
    'replace_children',
]
