"""UI components module."""
from .fonts import FontManager
from .components import ButtonStyle, BUTTON_STYLES, draw_button_simple

__all__ = [
    'FontManager',
    'ButtonStyle',
    'BUTTON_STYLES',
    'draw_button_simple',
]
