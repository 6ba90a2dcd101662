# CSS (Cascading Style Sheets) components
from .css_parser import CSSParser, CSSParseError
from .tag_selector import TagSelector
from .descendant_selector import DescendantSelector
from .cascade import cascade_priority, apply_styles, DEFAULT_STYLE_SHEET
from .style import (
    style, StyleMap, Property, INHERITED_PROPERTIES, NON_INHERITED_PROPERTIES,
)

__all__ = [
    'CSSParser',
    'CSSParseError',
    'TagSelector',
    'DescendantSelector',
    'cascade_priority',
    'apply_styles',
    'DEFAULT_STYLE_SHEET',
    'style',
    'StyleMap',
    'Property',
    'INHERITED_PROPERTIES',
    'NON_INHERITED_PROPERTIES',
]
