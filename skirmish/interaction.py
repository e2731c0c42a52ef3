"""Attack interaction state and its transitions.

AttackState is a pure data object: every transition returns a new state and
nothing is recomputed implicitly. The cascade "derive targets from mode,
auto-select first, clear on mismatch" runs only inside the transition that
needs it:

    event           UNIT                              HEALTH
    open            default mode, rebuild + select    default mode, clear
    set_mode        rebuild + select                  clear
    select_target   accept if member of targets       ignored
    board_changed   rebuild + reconcile selection     ignored (stays empty)
"""
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional, Tuple, Dict, Any, Callable

from .card import Card
from .constants import AttackMode
from .rules import default_attack_mode, damage_for_card, parse_attack_mode
from .targets import CardTarget, TargetSet, rebuild, is_selectable, can_confirm


class InteractionStep(Enum):
    """Events that move the attack interaction."""
    OPEN = auto()
    SET_MODE = auto()
    SELECT_TARGET = auto()
    BOARD_CHANGED = auto()


@dataclass(frozen=True)
class AttackState:
    """Interaction session data while the attack popup is open."""
    attacker: Optional[Card]
    mode: AttackMode
    target: Optional[CardTarget] = None
    targets: TargetSet = ()
    opponent_cards: Tuple[Card, ...] = ()

    @property
    def damage(self) -> int:
        return damage_for_card(self.attacker)

    @property
    def can_confirm(self) -> bool:
        return can_confirm(self.mode, self.target)

    @property
    def has_targets(self) -> bool:
        return bool(self.targets)

    def target_index(self) -> Optional[int]:
        """Position of the selected target in the set, None if nothing is selected."""
        if self.target is None:
            return None
        return self.targets.index(self.target)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for network/storage."""
        return {
            'attacker': self.attacker.to_dict() if self.attacker else None,
            'mode': self.mode.value,
            'target': self.target.to_dict() if self.target else None,
            'targets': [t.to_dict() for t in self.targets],
            'opponent_cards': [c.to_dict() for c in self.opponent_cards],
        }


def open_state(attacker: Optional[Card], opponent_cards=()) -> AttackState:
    """Fresh state for a newly opened popup."""
    opponent_cards = tuple(opponent_cards)
    mode = default_attack_mode(attacker)
    targets, target = rebuild(mode, opponent_cards)
    return AttackState(
        attacker=attacker,
        mode=mode,
        target=target,
        targets=targets,
        opponent_cards=opponent_cards,
    )


def set_mode(state: AttackState, mode: Any) -> AttackState:
    """Switch attack mode and rebuild targets. Invalid modes change nothing."""
    new_mode = parse_attack_mode(mode)
    if new_mode is None:
        return state
    targets, target = rebuild(new_mode, state.opponent_cards, state.target)
    return replace(state, mode=new_mode, targets=targets, target=target)


def select_target(state: AttackState, target: Optional[CardTarget]) -> AttackState:
    """Select a target; anything outside the current set is ignored."""
    if state.mode != AttackMode.UNIT or not is_selectable(state.targets, target):
        return state
    return replace(state, target=target)


def board_changed(state: AttackState, opponent_cards) -> AttackState:
    """Opponent board snapshot changed; targets follow it."""
    opponent_cards = tuple(opponent_cards)
    targets, target = rebuild(state.mode, opponent_cards, state.target)
    return replace(state, opponent_cards=opponent_cards, targets=targets, target=target)


def _open(state: Optional[AttackState], value: Any) -> AttackState:
    attacker, opponent_cards = value
    return open_state(attacker, opponent_cards)


TRANSITIONS: Dict[InteractionStep, Callable[[Any, Any], AttackState]] = {
    InteractionStep.OPEN: _open,
    InteractionStep.SET_MODE: set_mode,
    InteractionStep.SELECT_TARGET: select_target,
    InteractionStep.BOARD_CHANGED: board_changed,
}


def transition(state: Optional[AttackState], step: InteractionStep, value: Any) -> AttackState:
    """Apply one step from the transition table.

    OPEN takes (attacker, opponent_cards) and ignores the previous state.
    """
    return TRANSITIONS[step](state, value)
