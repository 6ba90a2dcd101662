# Common utilities and constants shared across packages
from .constants import *
from .diagnostics import Diagnostic

__all__ = [
    'HSTEP', 'VSTEP',
    'WIDTH', 'HEIGHT',
    'INPUT_WIDTH_PX', 'INPUT_PADDING_PX',
    'BASE_FONT_SIZE_PX', 'LINE_HEIGHT_FACTOR',
    'Diagnostic',
]
