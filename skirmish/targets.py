"""Attack targets and the legal target set.

All functions here are pure. The target set is rebuilt from the opponent
board snapshot and the current attack mode; selection is reconciled against
the rebuilt set (stale selection cleared, first target auto-selected).
"""
from dataclasses import dataclass
from typing import Optional, Tuple, Iterable, Union, Dict, Any

from .card import Card
from .constants import AttackMode


@dataclass(frozen=True)
class CardTarget:
    """Strike an opposing unit card. Only valid under AttackMode.UNIT."""
    card: Card

    @property
    def label(self) -> str:
        return self.card.label

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'card', 'card': self.card.to_dict()}


@dataclass(frozen=True)
class HealthTarget:
    """Strike the opponent's health pool. Describes health attack outcomes."""

    @property
    def label(self) -> str:
        return "♥"

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'health'}


AttackTarget = Union[CardTarget, HealthTarget]
TargetSet = Tuple[CardTarget, ...]


def target_from_dict(data: Dict[str, Any]) -> AttackTarget:
    """Deserialize an AttackTarget."""
    if data.get('type') == 'card':
        return CardTarget(Card.from_dict(data['card']))
    return HealthTarget()


def build_targets(mode: AttackMode, opponent_cards: Iterable[Card]) -> TargetSet:
    """One CardTarget per opposing card in board order; empty for HEALTH."""
    if mode != AttackMode.UNIT:
        return ()

    targets = []
    seen = set()
    for card in opponent_cards:
        if card in seen:
            continue
        seen.add(card)
        targets.append(CardTarget(card))
    return tuple(targets)


def reconcile_selection(targets: TargetSet,
                        selected: Optional[CardTarget]) -> Optional[CardTarget]:
    """Clear a selection missing from targets, then auto-select the first."""
    if selected is not None and selected not in targets:
        selected = None
    if selected is None and targets:
        selected = targets[0]
    return selected


def rebuild(mode: AttackMode, opponent_cards: Iterable[Card],
            selected: Optional[CardTarget] = None) -> Tuple[TargetSet, Optional[CardTarget]]:
    """Rebuild the target set for mode and reconcile the selection.

    HEALTH always yields ((), None).
    """
    targets = build_targets(mode, opponent_cards)
    if mode != AttackMode.UNIT:
        return (), None
    return targets, reconcile_selection(targets, selected)


def is_selectable(targets: TargetSet, target: Optional[AttackTarget]) -> bool:
    """A target may only be selected if it belongs to the current set."""
    return target is not None and target in targets


def can_confirm(mode: AttackMode, target: Optional[AttackTarget]) -> bool:
    """HEALTH confirms freely; UNIT needs a selected target."""
    if mode == AttackMode.HEALTH:
        return True
    return mode == AttackMode.UNIT and target is not None
