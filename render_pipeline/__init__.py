# Render Pipeline Package
# Markup -> cascade -> layout -> paint, with a small embedded script engine

__version__ = "1.0.0"

# Re-export the pipeline stages for convenience
from .dom import parse_html
from .css import apply_styles
from .layout import compute_layout
from .scripting import run
from .content import Frame, NavigationRequest

__all__ = [
    'parse_html',
    'apply_styles',
    'compute_layout',
    'run',
    'Frame',
    'NavigationRequest',
]
