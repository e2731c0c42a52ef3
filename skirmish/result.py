"""Attack result display session.

Shows who attacked what and whether it was blocked, then closes itself
after a fixed duration. Not interactive beyond an immediate dismiss.
"""
import logging
from dataclasses import dataclass
from typing import Optional, Callable

from .card import Card
from .constants import RESULT_DISPLAY_TIME
from .targets import AttackTarget, HealthTarget

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttackSummary:
    """Display-ready outcome. Text fields are translation keys or card labels."""
    attack_card: Card
    target: AttackTarget
    blocked: bool

    @property
    def title_key(self) -> str:
        return "attack.blocked" if self.blocked else "attack.success"

    @property
    def message_key(self) -> Optional[str]:
        return "attack.blockedMessage" if self.blocked else None

    @property
    def is_health_attack(self) -> bool:
        return isinstance(self.target, HealthTarget)

    @property
    def card_text(self) -> str:
        return self.attack_card.label

    @property
    def target_text(self) -> str:
        """Target card label; empty for health attacks (rendered as 'health')."""
        if self.is_health_attack:
            return ""
        return self.target.label


class ResultPresenter:
    """One-shot timed display of an AttackSummary.

    update(dt) is called every frame; the session ends after `duration`
    seconds or on dismiss(), whichever comes first.
    """

    def __init__(self, duration: float = RESULT_DISPLAY_TIME,
                 on_dismiss: Optional[Callable[[AttackSummary], None]] = None):
        self.duration = duration
        self.on_dismiss = on_dismiss
        self.summary: Optional[AttackSummary] = None
        self.elapsed = 0.0

    @property
    def visible(self) -> bool:
        return self.summary is not None

    @property
    def time_left(self) -> float:
        if not self.visible:
            return 0.0
        return max(0.0, self.duration - self.elapsed)

    def show(self, attack_card: Card, target: AttackTarget, blocked: bool) -> AttackSummary:
        """Open a display session, replacing any current one."""
        self.summary = AttackSummary(attack_card, target, blocked)
        self.elapsed = 0.0
        logger.debug(f"Showing attack result: {self.summary.card_text} blocked={blocked}")
        return self.summary

    def update(self, dt: float):
        if not self.visible:
            return
        self.elapsed += dt
        if self.elapsed >= self.duration:
            self.dismiss()

    def dismiss(self):
        """Close the session now. Does nothing when already closed."""
        summary, self.summary = self.summary, None
        self.elapsed = 0.0
        if summary is not None and self.on_dismiss:
            self.on_dismiss(summary)
