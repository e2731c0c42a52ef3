"""
Renderer package - Pygame rendering for the attack popups.

The renderer is split into mixins:
- base.py: Core initialization, scaling, coordinate conversion
- popups.py: Attack choice popup, result popup, sacrifice button

The Renderer class draws only from view objects; it holds no game state.
"""
import pygame
from typing import Optional, TYPE_CHECKING

from ..constants import COLOR_TEXT, COLOR_TEXT_DIM, scaled
from .base import RendererBase, PopupConfig
from .popups import PopupsMixin, ClickTarget

if TYPE_CHECKING:
    from ..controller import AttackController
    from ..store import GameSnapshot


__all__ = ['Renderer', 'PopupConfig', 'ClickTarget']


class Renderer(RendererBase, PopupsMixin):
    """Main renderer class - combines all rendering functionality via mixins."""

    def __init__(self, window: pygame.Surface):
        super().__init__(window)
        self._init_popups()

    def draw_table(self, snapshot: 'GameSnapshot'):
        """Minimal table: opponent health and board, attacking card, phase."""
        y = scaled(40)
        text = f"♥ {snapshot.opponent_health}"
        self.screen.blit(self.font_large.render(text, True, COLOR_TEXT), (scaled(40), y))

        labels = "  ".join(card.label for card in snapshot.opponent_cards) or "-"
        self.screen.blit(self.font_card.render(labels, True, COLOR_TEXT), (scaled(40), y + scaled(40)))

        if snapshot.attacking_card:
            attacker = f"⚔ {snapshot.attacking_card.label}"
            self.screen.blit(self.font_card.render(attacker, True, COLOR_TEXT), (scaled(40), scaled(600)))

        phase = f"{snapshot.phase.name}  {snapshot.turn_time_remaining}s"
        self.screen.blit(self.font_small.render(phase, True, COLOR_TEXT_DIM), (scaled(40), scaled(660)))

    def draw(self, controller: 'AttackController', snapshot: 'GameSnapshot'):
        """Draw a full frame."""
        self.clear()
        self.draw_table(snapshot)
        self.draw_sacrifice_button(controller.sacrifice_view())

        attack_view = controller.view()
        if attack_view is not None:
            self.draw_attack_popup(attack_view)

        result_view = controller.result_view()
        if result_view is not None:
            self.draw_result_popup(result_view)
        else:
            self.result_rect = None

        self.finalize_frame()
