# Layout engine components
from .document_layout import DocumentLayout
from .block_layout import BlockLayout
from .line_layout import LineLayout
from .text_layout import TextLayout
from .input_layout import InputLayout
from .layout_utils import (
    LayoutError, compute_layout, font_for, layout_document, paint_document,
    paint_tree,
)
from .box_model import Edges, box_edges, border_of, resolve_length

__all__ = [
    'DocumentLayout',
    'BlockLayout',
    'LineLayout',
    'TextLayout',
    'InputLayout',
    'LayoutError',
    'compute_layout',
    'layout_document',
    'paint_tree',
    'paint_document',
    'font_for',
    'Edges',
    'box_edges',
    'border_of',
    'resolve_length',
]
