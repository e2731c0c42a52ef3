"""Game store boundary: read-only snapshots in, intents out.

The attack core never mutates game state. It reads a GameSnapshot and hands
intents back to the store, which owns persistence and synchronization.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple, Dict, Any

from .card import Card
from .constants import AttackMode, GamePhase, DEFAULT_TURN_TIME
from .targets import CardTarget


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the store at one moment."""
    attacking_card: Optional[Card] = None
    opponent_cards: Tuple[Card, ...] = ()
    opponent_health: int = 0
    turn_time_remaining: int = DEFAULT_TURN_TIME
    phase: GamePhase = GamePhase.PLAY
    selected_cards: Tuple[Card, ...] = ()
    has_acted_this_turn: bool = False

    @property
    def selected_card(self) -> Optional[Card]:
        """First selected card, the one secondary actions look at."""
        return self.selected_cards[0] if self.selected_cards else None

    def with_changes(self, **changes) -> 'GameSnapshot':
        return replace(self, **changes)


@dataclass(frozen=True)
class AttackIntent:
    """Resolved attack handed to the store.

    HEALTH attacks carry neither target nor card.
    """
    mode: AttackMode
    target: Optional[CardTarget] = None
    card: Optional[Card] = None

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {'mode': self.mode.value}
        if self.target is not None:
            result['target'] = self.target.to_dict()
        if self.card is not None:
            result['card'] = self.card.to_dict()
        return result


@dataclass(frozen=True)
class SacrificeIntent:
    enabled: bool = True


class GameStore(ABC):
    """Authoritative game state owned outside the attack core."""

    @abstractmethod
    def snapshot(self) -> GameSnapshot:
        """Current read-only state."""

    @abstractmethod
    def dispatch_attack(self, intent: AttackIntent):
        """Receive a resolved attack."""

    @abstractmethod
    def set_sacrifice_mode(self, intent: SacrificeIntent):
        """Enter or leave sacrifice mode."""


@dataclass
class LocalGameStore(GameStore):
    """In-memory store for hot-seat play and tests.

    Records every intent it receives.
    """
    state: GameSnapshot = field(default_factory=GameSnapshot)
    attacks: List[AttackIntent] = field(default_factory=list)
    sacrifice_mode: bool = False

    def snapshot(self) -> GameSnapshot:
        return self.state

    def update(self, **changes) -> GameSnapshot:
        """Apply changes to the stored state and return the new snapshot."""
        self.state = self.state.with_changes(**changes)
        return self.state

    def dispatch_attack(self, intent: AttackIntent):
        self.attacks.append(intent)
        self.state = self.state.with_changes(has_acted_this_turn=True)

    def set_sacrifice_mode(self, intent: SacrificeIntent):
        self.sacrifice_mode = intent.enabled
