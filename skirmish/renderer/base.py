"""Base renderer with core functionality, scaling, and coordinate conversion."""
import pygame
from dataclasses import dataclass
from typing import Optional, Tuple

from ..constants import WINDOW_WIDTH, WINDOW_HEIGHT, COLOR_BG, UI_SCALE
from ..ui import FontManager


@dataclass
class PopupConfig:
    """Configuration for a popup window."""
    popup_id: str
    width: int
    height: int
    bg_color: Tuple[int, int, int, int]  # RGBA
    border_color: Tuple[int, int, int]   # RGB
    title: str = ""
    title_color: Tuple[int, int, int] = (255, 255, 255)
    default_x: Optional[int] = None  # None = center horizontally
    default_y: int = 60


class RendererBase:
    """Base renderer class with core functionality."""

    # Base resolution (game renders at this size, then scales)
    BASE_WIDTH = WINDOW_WIDTH
    BASE_HEIGHT = WINDOW_HEIGHT

    def __init__(self, window: pygame.Surface):
        self.window = window  # Actual window surface
        # Render surface at fixed resolution - all drawing goes here
        self.screen = pygame.Surface((self.BASE_WIDTH, self.BASE_HEIGHT))
        self.scale = 1.0
        self.offset_x = 0
        self.offset_y = 0
        self._update_scale()

        FontManager.init(scale=UI_SCALE)
        self.font_large = FontManager.get('large')
        self.font_small = FontManager.get('small')
        self.font_popup = FontManager.get('popup')
        self.font_card = FontManager.get('card')

    def _update_scale(self):
        """Update scale factor based on current window size."""
        win_w, win_h = self.window.get_size()
        scale_x = win_w / self.BASE_WIDTH
        scale_y = win_h / self.BASE_HEIGHT
        self.scale = min(scale_x, scale_y)  # Maintain aspect ratio

        # Calculate offset for centering
        scaled_w = int(self.BASE_WIDTH * self.scale)
        scaled_h = int(self.BASE_HEIGHT * self.scale)
        self.offset_x = (win_w - scaled_w) // 2
        self.offset_y = (win_h - scaled_h) // 2

    def handle_resize(self, new_window: pygame.Surface):
        """Handle window resize event."""
        self.window = new_window
        self._update_scale()

    def screen_to_game_coords(self, screen_x: int, screen_y: int) -> Tuple[int, int]:
        """Convert screen coordinates to game coordinates."""
        game_x = int((screen_x - self.offset_x) / self.scale)
        game_y = int((screen_y - self.offset_y) / self.scale)
        return game_x, game_y

    def clear(self):
        self.screen.fill(COLOR_BG)

    def finalize_frame(self):
        """Scale the render surface onto the window and flip."""
        self.window.fill((0, 0, 0))
        scaled_w = int(self.BASE_WIDTH * self.scale)
        scaled_h = int(self.BASE_HEIGHT * self.scale)
        if (scaled_w, scaled_h) == (self.BASE_WIDTH, self.BASE_HEIGHT):
            self.window.blit(self.screen, (self.offset_x, self.offset_y))
        else:
            frame = pygame.transform.smoothscale(self.screen, (scaled_w, scaled_h))
            self.window.blit(frame, (self.offset_x, self.offset_y))
        pygame.display.flip()
