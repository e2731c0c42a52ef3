"""Sacrifice action gate.

A face card (J, Q, K) may be sacrificed during the PLAY phase before the
player has acted this turn. For any other rank the action is not offered.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from .card import Card, parse_rank
from .constants import GamePhase, SACRIFICE_RANKS
from .store import GameSnapshot, GameStore, SacrificeIntent

logger = logging.getLogger(__name__)


def is_sacrifice_card(card: Optional[Card]) -> bool:
    """Whether the sacrifice action is offered at all for this card."""
    return card is not None and parse_rank(card.rank) in SACRIFICE_RANKS


def can_sacrifice(card: Optional[Card], phase: GamePhase, has_acted: bool) -> bool:
    return phase == GamePhase.PLAY and not has_acted and is_sacrifice_card(card)


@dataclass(frozen=True)
class SacrificeOption:
    offered: bool   # Button shown
    enabled: bool   # Button clickable


class SacrificeGate:
    """Evaluates and requests the sacrifice action from store snapshots."""

    def evaluate(self, snapshot: GameSnapshot) -> SacrificeOption:
        card = snapshot.selected_card
        return SacrificeOption(
            offered=is_sacrifice_card(card),
            enabled=can_sacrifice(card, snapshot.phase, snapshot.has_acted_this_turn),
        )

    def request(self, snapshot: GameSnapshot, store: GameStore) -> bool:
        """Ask the store to enter sacrifice mode. No-op when not allowed."""
        if not self.evaluate(snapshot).enabled:
            logger.debug("Sacrifice request ignored")
            return False
        store.set_sacrifice_mode(SacrificeIntent(True))
        logger.info(f"Sacrifice mode requested for {snapshot.selected_card.label}")
        return True
