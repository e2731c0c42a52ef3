"""Popup windows - attack choice, attack result, sacrifice button."""
import pygame
from typing import Optional, Tuple, List, Dict, Union

from ..constants import (
    WINDOW_WIDTH, WINDOW_HEIGHT, AttackMode,
    COLOR_OVERLAY, COLOR_POPUP_BG, COLOR_POPUP_BORDER,
    COLOR_SELECTED, COLOR_OPTION, COLOR_OPTION_SELECTED,
    COLOR_TEXT, COLOR_TEXT_DIM, COLOR_TIMER_LOW, COLOR_BLOCKED, COLOR_SUCCESS,
    scaled, UILayout,
)
from ..ui import draw_button_simple
from ..views import AttackPopupView, ResultView, SacrificeButtonView
from .base import PopupConfig


# Click results: 'health', 'unit', 'confirm', 'cancel', 'sacrifice',
# 'result', or ('target', index)
ClickTarget = Union[str, Tuple[str, int]]


class PopupsMixin:
    """Mixin for popup windows and dialogs."""

    def _init_popups(self):
        self.attack_rects: Dict[str, pygame.Rect] = {}
        self.target_rects: List[pygame.Rect] = []
        self.result_rect: Optional[pygame.Rect] = None
        self.sacrifice_rect: Optional[pygame.Rect] = None

    def draw_overlay(self):
        overlay = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.SRCALPHA)
        overlay.fill(COLOR_OVERLAY)
        self.screen.blit(overlay, (0, 0))

    def draw_popup_base(self, config: PopupConfig) -> Tuple[int, int, int]:
        """Draw popup background, border and title.

        Returns (x, y, content_y) where content_y is where content should start.
        """
        x = config.default_x if config.default_x is not None else (WINDOW_WIDTH - config.width) // 2
        y = config.default_y

        bg_surface = pygame.Surface((config.width, config.height), pygame.SRCALPHA)
        bg_surface.fill(config.bg_color)
        self.screen.blit(bg_surface, (x, y))
        pygame.draw.rect(self.screen, config.border_color, (x, y, config.width, config.height), 3)

        content_y = y + 12
        if config.title:
            title_surface = self.font_large.render(config.title, True, config.title_color)
            title_x = x + (config.width - title_surface.get_width()) // 2
            self.screen.blit(title_surface, (title_x, content_y))
            content_y += title_surface.get_height() + 5

        return x, y, content_y

    def draw_popup_text(self, x: int, width: int, y: int, text: str,
                        color: Tuple[int, int, int], font: pygame.font.Font = None,
                        center: bool = True) -> int:
        """Draw text in popup. Returns new y position."""
        if font is None:
            font = self.font_popup
        surface = font.render(text, True, color)
        if center:
            text_x = x + (width - surface.get_width()) // 2
        else:
            text_x = x + 10
        self.screen.blit(surface, (text_x, y))
        return y + surface.get_height() + 3

    # =========================================================================
    # ATTACK POPUP
    # =========================================================================

    def draw_attack_popup(self, view: AttackPopupView):
        """Draw the attack mode/target chooser and remember clickable rects."""
        self.attack_rects = {}
        self.target_rects = []

        self.draw_overlay()
        width = scaled(UILayout.ATTACK_POPUP_WIDTH)
        height = scaled(UILayout.ATTACK_POPUP_HEIGHT)
        config = PopupConfig(
            popup_id='attack',
            width=width,
            height=height,
            bg_color=COLOR_POPUP_BG,
            border_color=COLOR_POPUP_BORDER,
            title=view.title,
            default_y=scaled(UILayout.ATTACK_POPUP_Y),
        )
        x, y, content_y = self.draw_popup_base(config)

        timer_color = COLOR_TIMER_LOW if view.timer_warning else COLOR_TEXT
        content_y = self.draw_popup_text(x, width, content_y, view.timer_text, timer_color) + 8

        # Mode options side by side
        opt_w = scaled(UILayout.OPTION_WIDTH)
        opt_h = scaled(UILayout.OPTION_HEIGHT)
        gap = scaled(UILayout.OPTION_GAP)
        opt_x = x + (width - 2 * opt_w - gap) // 2
        options = [
            ('health', AttackMode.HEALTH, "♥ " + view.health_label, view.damage_text),
            ('unit', AttackMode.UNIT, "⚔ " + view.unit_label, view.select_target_label),
        ]
        for i, (key, mode, label, detail) in enumerate(options):
            rect = pygame.Rect(opt_x + i * (opt_w + gap), content_y, opt_w, opt_h)
            selected = view.mode == mode
            pygame.draw.rect(self.screen, COLOR_OPTION_SELECTED if selected else COLOR_OPTION, rect)
            pygame.draw.rect(self.screen, COLOR_SELECTED if selected else COLOR_POPUP_BORDER, rect, 2)
            self.draw_popup_text(rect.x, rect.width, rect.y + 12, label, COLOR_TEXT, self.font_card)
            self.draw_popup_text(rect.x, rect.width, rect.y + opt_h // 2 + 6, detail, COLOR_TEXT_DIM)
            self.attack_rects[key] = rect
        content_y += opt_h + 12

        if view.mode == AttackMode.UNIT:
            content_y = self.draw_popup_text(x, width, content_y, view.select_target_label, COLOR_TEXT)
            if view.no_targets_text:
                self.draw_popup_text(x, width, content_y + 8, view.no_targets_text, COLOR_TEXT_DIM)
            else:
                self._draw_targets(view, x, width, content_y + 4)

        # Footer buttons
        btn_w = scaled(UILayout.BUTTON_WIDTH)
        btn_h = scaled(UILayout.BUTTON_HEIGHT)
        btn_y = y + height - btn_h - 14
        cancel_rect = pygame.Rect(x + width // 2 - btn_w - 10, btn_y, btn_w, btn_h)
        confirm_rect = pygame.Rect(x + width // 2 + 10, btn_y, btn_w, btn_h)
        draw_button_simple(self.screen, cancel_rect, view.cancel_label, self.font_popup, 'danger')
        draw_button_simple(self.screen, confirm_rect, view.confirm_label, self.font_popup,
                           'success', enabled=view.confirm_enabled)
        self.attack_rects['cancel'] = cancel_rect
        self.attack_rects['confirm'] = confirm_rect

    def _draw_targets(self, view: AttackPopupView, x: int, width: int, y: int):
        tw = scaled(UILayout.TARGET_WIDTH)
        th = scaled(UILayout.TARGET_HEIGHT)
        gap = scaled(UILayout.TARGET_GAP)
        per_row = max(1, (width - 20) // (tw + gap))

        for i, label in enumerate(view.target_labels):
            row, col = divmod(i, per_row)
            rect = pygame.Rect(x + 10 + col * (tw + gap), y + row * (th + gap), tw, th)
            selected = view.selected_index == i
            pygame.draw.rect(self.screen, COLOR_OPTION_SELECTED if selected else COLOR_OPTION, rect)
            pygame.draw.rect(self.screen, COLOR_SELECTED if selected else COLOR_POPUP_BORDER, rect, 2)
            self.draw_popup_text(rect.x, rect.width, rect.y + 8, label, COLOR_TEXT, self.font_card)
            self.target_rects.append(rect)

    def get_clicked_attack_element(self, mx: int, my: int) -> Optional[ClickTarget]:
        """Map a click on the attack popup to the element under it."""
        for i, rect in enumerate(self.target_rects):
            if rect.collidepoint(mx, my):
                return ('target', i)
        for key, rect in self.attack_rects.items():
            if rect.collidepoint(mx, my):
                return key
        return None

    # =========================================================================
    # RESULT POPUP
    # =========================================================================

    def draw_result_popup(self, view: ResultView):
        self.draw_overlay()
        width = scaled(UILayout.RESULT_POPUP_WIDTH)
        height = scaled(UILayout.RESULT_POPUP_HEIGHT)
        config = PopupConfig(
            popup_id='result',
            width=width,
            height=height,
            bg_color=COLOR_POPUP_BG,
            border_color=COLOR_BLOCKED if view.blocked else COLOR_SUCCESS,
            title=view.title,
            default_y=scaled(UILayout.RESULT_POPUP_Y),
        )
        x, y, content_y = self.draw_popup_base(config)
        self.result_rect = pygame.Rect(x, y, width, height)

        line = f"{view.card_text}  ➜  {view.target_text}"
        content_y = self.draw_popup_text(x, width, content_y + 16, line, COLOR_TEXT, self.font_card)
        if view.message:
            self.draw_popup_text(x, width, content_y + 12, view.message, COLOR_BLOCKED)

    # =========================================================================
    # SACRIFICE BUTTON
    # =========================================================================

    def draw_sacrifice_button(self, view: Optional[SacrificeButtonView]):
        """Draw the sacrifice button; nothing when it is not offered."""
        if view is None:
            self.sacrifice_rect = None
            return
        rect = pygame.Rect(
            scaled(UILayout.SACRIFICE_BUTTON_X), scaled(UILayout.SACRIFICE_BUTTON_Y),
            scaled(UILayout.SACRIFICE_BUTTON_WIDTH), scaled(UILayout.SACRIFICE_BUTTON_HEIGHT),
        )
        mx, my = self.screen_to_game_coords(*pygame.mouse.get_pos())
        self.sacrifice_rect = draw_button_simple(
            self.screen, rect, view.label, self.font_popup, 'sacrifice',
            hovered=rect.collidepoint(mx, my), enabled=view.enabled,
        )
        if view.enabled and rect.collidepoint(mx, my):
            tip = self.font_small.render(view.tooltip, True, COLOR_TEXT_DIM)
            self.screen.blit(tip, (rect.x, rect.y - tip.get_height() - 4))
