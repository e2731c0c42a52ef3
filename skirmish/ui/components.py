"""Reusable button drawing."""
import pygame
from dataclasses import dataclass
from typing import Tuple


@dataclass
class ButtonStyle:
    """Style configuration for buttons."""
    bg: Tuple[int, int, int] = (60, 60, 70)
    bg_hover: Tuple[int, int, int] = (80, 80, 90)
    bg_disabled: Tuple[int, int, int] = (40, 40, 45)
    border: Tuple[int, int, int] = (100, 100, 110)
    border_hover: Tuple[int, int, int] = (120, 120, 130)
    border_disabled: Tuple[int, int, int] = (70, 70, 80)
    text: Tuple[int, int, int] = (240, 240, 240)
    text_disabled: Tuple[int, int, int] = (100, 100, 110)
    border_width: int = 2
    border_radius: int = 4


BUTTON_STYLES = {
    'default': ButtonStyle(),
    'danger': ButtonStyle(
        bg=(100, 50, 50),
        bg_hover=(120, 60, 60),
        border=(150, 80, 80),
    ),
    'success': ButtonStyle(
        bg=(50, 100, 50),
        bg_hover=(60, 120, 60),
        border=(80, 150, 80),
    ),
    'sacrifice': ButtonStyle(
        bg=(90, 40, 90),
        bg_hover=(110, 55, 110),
        border=(150, 90, 150),
    ),
}


def draw_button_simple(
    surface: pygame.Surface,
    rect: pygame.Rect,
    text: str,
    font: pygame.font.Font,
    style: str = 'default',
    hovered: bool = False,
    enabled: bool = True,
) -> pygame.Rect:
    """
    Draw a button without tracking state (stateless utility).

    Returns:
        The button rect (for click detection)
    """
    btn_style = BUTTON_STYLES.get(style, BUTTON_STYLES['default'])

    if not enabled:
        bg, border, text_color = btn_style.bg_disabled, btn_style.border_disabled, btn_style.text_disabled
    elif hovered:
        bg, border, text_color = btn_style.bg_hover, btn_style.border_hover, btn_style.text
    else:
        bg, border, text_color = btn_style.bg, btn_style.border, btn_style.text

    pygame.draw.rect(surface, bg, rect, border_radius=btn_style.border_radius)
    if btn_style.border_width > 0:
        pygame.draw.rect(surface, border, rect, btn_style.border_width,
                         border_radius=btn_style.border_radius)

    text_surface = font.render(text, True, text_color)
    text_rect = text_surface.get_rect(center=rect.center)
    surface.blit(text_surface, text_rect)

    return rect
