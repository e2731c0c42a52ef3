"""
Commands and Events for the attack interaction.

Commands represent player intents (inputs to the attack controller).
Events represent state changes (outputs from the attack controller).

This separation is essential for:
- Network play (commands sent to the authority, events broadcast to clients)
- Replays (store commands, replay to recreate the interaction)
- Testing (apply commands, verify events)
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, List, Dict, Any


# =============================================================================
# COMMANDS - Player Intents
# =============================================================================

class CommandType(Enum):
    """Types of commands players can issue while attacking."""
    SET_ATTACK_MODE = auto()
    CHOOSE_TARGET = auto()

    # Interaction responses
    CONFIRM = auto()
    CANCEL = auto()

    # Secondary actions
    REQUEST_SACRIFICE = auto()
    DISMISS_RESULT = auto()


@dataclass(frozen=True)
class Command:
    """
    A player command - immutable and serializable.

    All commands can be serialized to JSON for network transmission.
    """
    type: CommandType
    player: int  # Which player issued this command

    # Optional parameters (depending on command type)
    mode: Optional[str] = None       # "unit" / "health"
    card_id: Optional[int] = None    # Target card id
    index: Optional[int] = None      # Target index in the current target set

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for network/storage."""
        return {
            'type': self.type.name,
            'player': self.player,
            'mode': self.mode,
            'card_id': self.card_id,
            'index': self.index,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Command':
        """Deserialize from dictionary."""
        return cls(
            type=CommandType[data['type']],
            player=data['player'],
            mode=data.get('mode'),
            card_id=data.get('card_id'),
            index=data.get('index'),
        )


# Command factory functions for cleaner API
def cmd_set_attack_mode(player: int, mode: str) -> Command:
    return Command(CommandType.SET_ATTACK_MODE, player, mode=mode)

def cmd_choose_target(player: int, card_id: Optional[int] = None,
                      index: Optional[int] = None) -> Command:
    """Choose a target by card id (network) or by list index (UI clicks)."""
    return Command(CommandType.CHOOSE_TARGET, player, card_id=card_id, index=index)

def cmd_confirm(player: int) -> Command:
    return Command(CommandType.CONFIRM, player)

def cmd_cancel(player: int) -> Command:
    return Command(CommandType.CANCEL, player)

def cmd_request_sacrifice(player: int) -> Command:
    return Command(CommandType.REQUEST_SACRIFICE, player)

def cmd_dismiss_result(player: int) -> Command:
    return Command(CommandType.DISMISS_RESULT, player)


# =============================================================================
# EVENTS - State Changes
# =============================================================================

class EventType(Enum):
    """Types of events the attack controller can emit."""
    # Interaction lifecycle
    INTERACTION_STARTED = auto()
    INTERACTION_ENDED = auto()

    # Selection
    ATTACK_MODE_CHANGED = auto()
    TARGETS_CHANGED = auto()
    TARGET_SELECTED = auto()

    # Timer
    COUNTDOWN_TICK = auto()
    COUNTDOWN_EXPIRED = auto()

    # Outcomes
    ATTACK_RESOLVED = auto()
    SACRIFICE_REQUESTED = auto()
    RESULT_SHOWN = auto()
    RESULT_DISMISSED = auto()


@dataclass
class Event:
    """
    An attack interaction event - represents a state change.

    Events can be used for:
    - Updating remote clients
    - Triggering animations/sounds
    - Building replay logs
    """
    type: EventType

    mode: Optional[str] = None
    card_id: Optional[int] = None
    remaining: Optional[int] = None
    reason: Optional[str] = None
    valid_card_ids: Optional[List[Optional[int]]] = None

    # Generic context for complex events
    context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for network/storage."""
        result = {'type': self.type.name}
        for key, value in self.__dict__.items():
            if key != 'type' and value is not None:
                if isinstance(value, Enum):
                    result[key] = value.name
                else:
                    result[key] = value
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Event':
        """Deserialize from dictionary."""
        data = data.copy()
        data['type'] = EventType[data['type']]
        return cls(**data)


# Event factory functions for cleaner API
def evt_interaction_started(mode: str, remaining: int) -> Event:
    return Event(EventType.INTERACTION_STARTED, mode=mode, remaining=remaining)

def evt_interaction_ended(reason: str) -> Event:
    return Event(EventType.INTERACTION_ENDED, reason=reason)

def evt_attack_mode_changed(mode: str) -> Event:
    return Event(EventType.ATTACK_MODE_CHANGED, mode=mode)

def evt_targets_changed(card_ids: List[Optional[int]]) -> Event:
    return Event(EventType.TARGETS_CHANGED, valid_card_ids=card_ids)

def evt_target_selected(card_id: Optional[int]) -> Event:
    return Event(EventType.TARGET_SELECTED, card_id=card_id)

def evt_countdown_tick(remaining: int) -> Event:
    return Event(EventType.COUNTDOWN_TICK, remaining=remaining)

def evt_countdown_expired() -> Event:
    return Event(EventType.COUNTDOWN_EXPIRED, remaining=0)

def evt_attack_resolved(intent: Dict[str, Any]) -> Event:
    return Event(EventType.ATTACK_RESOLVED, mode=intent.get('mode'), context=intent)

def evt_sacrifice_requested() -> Event:
    return Event(EventType.SACRIFICE_REQUESTED)

def evt_result_shown(blocked: bool) -> Event:
    return Event(EventType.RESULT_SHOWN, context={'blocked': blocked})

def evt_result_dismissed() -> Event:
    return Event(EventType.RESULT_DISMISSED)
