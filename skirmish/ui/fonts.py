"""
Font management with caching.
Fonts are created once at startup and reused throughout the application.
"""
import os
import pygame
from typing import Dict, Optional, Tuple
from dataclasses import dataclass


@dataclass
class FontSpec:
    """Specification for a font."""
    name: str  # Font name (for SysFont) or path (for custom font)
    base_size: int  # Size at 1.0 scale
    is_custom: bool = False  # True if using custom font file


class FontManager:
    """
    Manages font creation and caching.

    Usage:
        FontManager.init(scale=1.5)  # Call once at startup
        font = FontManager.get('popup')  # Get cached font
        font = FontManager.get('title', 48)  # Get font at specific size
    """

    _fonts: Dict[Tuple[str, int], pygame.font.Font] = {}
    _scale: float = 1.0

    # Default font specifications
    FONT_SPECS = {
        'large': FontSpec('arial', 24),
        'small': FontSpec('arial', 14),
        'popup': FontSpec('arial', 16),
        'card': FontSpec('dejavusans', 18),  # Has suit glyphs
    }

    @classmethod
    def init(cls, scale: float = 1.0, custom_font_dir: Optional[str] = None):
        """
        Initialize the font manager.

        Args:
            scale: UI scale factor
            custom_font_dir: Optional path to directory containing main.ttf
        """
        if not pygame.font.get_init():
            pygame.font.init()
        cls._scale = scale
        cls._fonts.clear()

        font_dirs = []
        if custom_font_dir:
            font_dirs.append(custom_font_dir)
        font_dirs.extend([
            'data/fonts',
            os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), 'data', 'fonts'),
        ])

        for font_dir in font_dirs:
            main_font = os.path.join(font_dir, 'main.ttf')
            if os.path.exists(main_font):
                for name in ['large', 'small', 'popup']:
                    cls.FONT_SPECS[name] = FontSpec(main_font, cls.FONT_SPECS[name].base_size, is_custom=True)
                break

    @classmethod
    def get(cls, name: str, size: Optional[int] = None) -> pygame.font.Font:
        """
        Get a font by name, optionally with a custom size.

        Args:
            name: Font name from FONT_SPECS or a system font name
            size: Optional size override (will be scaled)

        Returns:
            Cached pygame.font.Font instance
        """
        spec = cls.FONT_SPECS.get(name, FontSpec(name, 14))
        base_size = size if size is not None else spec.base_size
        scaled_size = int(base_size * cls._scale)
        cache_key = (spec.name, scaled_size)

        if cache_key not in cls._fonts:
            if spec.is_custom:
                cls._fonts[cache_key] = pygame.font.Font(spec.name, scaled_size)
            else:
                cls._fonts[cache_key] = pygame.font.SysFont(spec.name, scaled_size)

        return cls._fonts[cache_key]

    @classmethod
    def clear_cache(cls):
        """Clear the font cache."""
        cls._fonts.clear()
