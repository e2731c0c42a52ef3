"""Attack controller - owns one attack interaction session at a time.

Responsibilities:
- Opens the popup from a store snapshot (default mode, targets, countdown)
- Applies player commands and store changes as explicit transitions
- Closes on confirm, cancel, countdown expiry or teardown, exactly once
- Hands resolved intents back to the store, emits events for the UI

The countdown's tick source is acquired in open() and released on every exit
path; the controller is also a context manager whose exit tears the session
down.

Usage:
    store = LocalGameStore(GameSnapshot(attacking_card=card, ...))
    controller = AttackController(store, player=1)
    controller.open()
    result = controller.process_command(cmd_confirm(1))
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from .audio import SoundPlayer, SilentAudio
from .card import Card
from .commands import (
    Command, CommandType, Event,
    evt_interaction_started, evt_interaction_ended,
    evt_attack_mode_changed, evt_targets_changed, evt_target_selected,
    evt_countdown_tick, evt_countdown_expired,
    evt_attack_resolved, evt_sacrifice_requested,
    evt_result_shown, evt_result_dismissed,
)
from .constants import AttackMode, RESULT_DISPLAY_TIME
from .countdown import TurnCountdown, TickerFactory
from .i18n import Translator
from .interaction import (
    AttackState, InteractionStep, transition,
)
from .result import ResultPresenter, AttackSummary
from .rules import damage_for_card
from .sacrifice import SacrificeGate, SacrificeOption
from .store import GameStore, GameSnapshot, AttackIntent
from .targets import CardTarget, AttackTarget
from .views import (
    AttackPopupView, ResultView, SacrificeButtonView,
    build_attack_view, build_result_view, build_sacrifice_view,
)

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Result of processing a command."""
    accepted: bool
    events: List[Event] = field(default_factory=list)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize for network transport."""
        return {
            'accepted': self.accepted,
            'events': [e.to_dict() for e in self.events],
            'error': self.error,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CommandResult':
        """Deserialize from network."""
        return cls(
            accepted=data['accepted'],
            events=[Event.from_dict(e) for e in data.get('events', [])],
            error=data.get('error'),
        )


class AttackController:
    """Attack popup session owner for one player."""

    def __init__(
        self,
        store: GameStore,
        player: int = 1,
        audio: Optional[SoundPlayer] = None,
        translator: Optional[Translator] = None,
        ticker_factory: Optional[TickerFactory] = None,
        result_duration: float = RESULT_DISPLAY_TIME,
    ):
        self.store = store
        self.player = player
        self.audio = audio or SilentAudio()
        self.translator = translator or Translator()
        self.countdown = TurnCountdown(
            on_expire=self._on_countdown_expired,
            on_tick=self._on_countdown_tick,
            ticker_factory=ticker_factory,
        )
        self.presenter = ResultPresenter(result_duration, on_dismiss=self._on_result_dismissed)
        self.sacrifice_gate = SacrificeGate()

        self.state: Optional[AttackState] = None
        self._snapshot: Optional[GameSnapshot] = None
        self._events: List[Event] = []

    # =========================================================================
    # SESSION LIFECYCLE
    # =========================================================================

    @property
    def is_open(self) -> bool:
        return self.state is not None

    @property
    def time_remaining(self) -> int:
        return self.countdown.remaining

    @property
    def damage_points(self) -> int:
        attacker = self.state.attacker if self.state else None
        return damage_for_card(attacker)

    def open(self, snapshot: Optional[GameSnapshot] = None) -> AttackState:
        """Open the popup. Re-opening discards the old session first."""
        if self.is_open:
            self._close("reopened")

        snapshot = snapshot or self.store.snapshot()
        self._snapshot = snapshot
        self.state = transition(None, InteractionStep.OPEN,
                                (snapshot.attacking_card, snapshot.opponent_cards))
        self.countdown.start(snapshot.turn_time_remaining)

        attacker = snapshot.attacking_card.label if snapshot.attacking_card else "none"
        logger.info(f"Attack popup opened: attacker={attacker} mode={self.state.mode.value} "
                    f"time={snapshot.turn_time_remaining}s")
        self._emit(evt_interaction_started(self.state.mode.value, self.countdown.remaining))
        self._emit_targets()
        return self.state

    def sync(self, snapshot: Optional[GameSnapshot] = None):
        """Apply store changes to the open session.

        A new attacking card re-derives the default mode, a new opponent board
        rebuilds targets, a new shared turn time resyncs the countdown.
        """
        snapshot = snapshot or self.store.snapshot()
        previous, self._snapshot = self._snapshot, snapshot
        if not self.is_open or previous is None:
            return

        if snapshot.attacking_card != previous.attacking_card:
            self.state = transition(None, InteractionStep.OPEN,
                                    (snapshot.attacking_card, snapshot.opponent_cards))
            self._emit(evt_attack_mode_changed(self.state.mode.value))
            self._emit_targets()
        elif snapshot.opponent_cards != previous.opponent_cards:
            self.state = transition(self.state, InteractionStep.BOARD_CHANGED,
                                    snapshot.opponent_cards)
            self._emit_targets()

        if snapshot.turn_time_remaining != previous.turn_time_remaining:
            self.countdown.resync(snapshot.turn_time_remaining)

    def update(self, dt: float):
        """Advance frame-driven timers (countdown ticker, result popup)."""
        self.countdown.advance(dt)
        self.presenter.update(dt)

    def teardown(self):
        """Release everything without side effects (screen left, app exit)."""
        if self.is_open:
            self._close("teardown")
        self.countdown.stop()
        self.presenter.dismiss()

    def __enter__(self) -> 'AttackController':
        return self

    def __exit__(self, exc_type, exc, tb):
        self.teardown()
        return False

    # =========================================================================
    # PLAYER ACTIONS
    # =========================================================================

    def set_mode(self, mode: Any) -> bool:
        if not self.is_open:
            return False
        new_state = transition(self.state, InteractionStep.SET_MODE, mode)
        if new_state is self.state:
            return False
        changed_mode = new_state.mode != self.state.mode
        self.state = new_state
        if changed_mode:
            self._emit(evt_attack_mode_changed(new_state.mode.value))
        self._emit_targets()
        return True

    def select_target(self, target: Optional[CardTarget]) -> bool:
        if not self.is_open:
            return False
        new_state = transition(self.state, InteractionStep.SELECT_TARGET, target)
        if new_state is self.state:
            return False
        self.state = new_state
        self._emit(evt_target_selected(target.card.card_id))
        return True

    def find_target(self, card_id: Optional[int] = None,
                    index: Optional[int] = None) -> Optional[CardTarget]:
        """Look up a target of the current set by card id or list index."""
        if not self.is_open:
            return None
        targets = self.state.targets
        if index is not None:
            return targets[index] if 0 <= index < len(targets) else None
        if card_id is not None:
            for target in targets:
                if target.card.card_id == card_id:
                    return target
        return None

    def confirm(self) -> Optional[AttackIntent]:
        """Resolve the attack. Inert while UNIT mode has no target."""
        if not self.is_open or not self.state.can_confirm:
            return None

        self._play_sound()
        self.countdown.stop()

        state = self.state
        if state.mode == AttackMode.HEALTH:
            intent = AttackIntent(AttackMode.HEALTH)
        else:
            intent = AttackIntent(AttackMode.UNIT, target=state.target, card=state.attacker)

        # A store error propagates, but the session is closed either way
        reason = "dispatch_failed"
        try:
            self.store.dispatch_attack(intent)
            logger.info(f"Attack confirmed: {intent.to_dict()}")
            self._emit(evt_attack_resolved(intent.to_dict()))
            reason = "confirmed"
        finally:
            self._close(reason)
        return intent

    def cancel(self) -> bool:
        """Decline to attack. Also the countdown expiry path."""
        if not self.is_open:
            return False
        try:
            self._play_sound()
        finally:
            self._close("cancelled")
        return True

    def _play_sound(self):
        """Sound is cosmetic; a failing player never blocks closing."""
        try:
            self.audio.play_interaction_sound()
        except Exception as e:
            logger.warning(f"Interaction sound failed: {e}")

    def _close(self, reason: str):
        self.countdown.stop()
        self.state = None
        logger.info(f"Attack popup closed: {reason}")
        self._emit(evt_interaction_ended(reason))

    # =========================================================================
    # RESULT POPUP & SACRIFICE
    # =========================================================================

    def show_result(self, attack_card: Card, target: AttackTarget, blocked: bool) -> AttackSummary:
        summary = self.presenter.show(attack_card, target, blocked)
        self._emit(evt_result_shown(blocked))
        return summary

    def dismiss_result(self) -> bool:
        if not self.presenter.visible:
            return False
        self.presenter.dismiss()
        return True

    def sacrifice_option(self, snapshot: Optional[GameSnapshot] = None) -> SacrificeOption:
        return self.sacrifice_gate.evaluate(snapshot or self.store.snapshot())

    def request_sacrifice(self) -> bool:
        if not self.sacrifice_gate.request(self.store.snapshot(), self.store):
            return False
        self._emit(evt_sacrifice_requested())
        return True

    # =========================================================================
    # COMMANDS
    # =========================================================================

    def process_command(self, cmd: Command) -> CommandResult:
        """Apply a player command. Rejections are reported, never raised."""
        if cmd.player != self.player:
            return self._reject(cmd, f"Player {cmd.player} does not own this popup")

        if cmd.type == CommandType.SET_ATTACK_MODE:
            accepted = self.set_mode(cmd.mode)
            error = None if accepted else "Invalid attack mode"
        elif cmd.type == CommandType.CHOOSE_TARGET:
            target = self.find_target(card_id=cmd.card_id, index=cmd.index)
            accepted = target is not None and self.select_target(target)
            error = None if accepted else "Target not available"
        elif cmd.type == CommandType.CONFIRM:
            accepted = self.confirm() is not None
            error = None if accepted else "Nothing to confirm"
        elif cmd.type == CommandType.CANCEL:
            accepted = self.cancel()
            error = None if accepted else "Popup is not open"
        elif cmd.type == CommandType.REQUEST_SACRIFICE:
            accepted = self.request_sacrifice()
            error = None if accepted else "Sacrifice not allowed"
        elif cmd.type == CommandType.DISMISS_RESULT:
            accepted = self.dismiss_result()
            error = None if accepted else "No result shown"
        else:
            accepted, error = False, f"Unknown command {cmd.type}"

        if not accepted:
            return self._reject(cmd, error)
        return CommandResult(accepted=True, events=self.pop_events())

    def _reject(self, cmd: Command, error: str) -> CommandResult:
        logger.debug(f"Rejected {cmd.type.name}: {error}")
        return CommandResult(accepted=False, events=self.pop_events(), error=error)

    # =========================================================================
    # VIEWS
    # =========================================================================

    def view(self) -> Optional[AttackPopupView]:
        if not self.is_open:
            return None
        return build_attack_view(self.state, self.countdown.remaining, self.translator)

    def result_view(self) -> Optional[ResultView]:
        if not self.presenter.visible:
            return None
        return build_result_view(self.presenter.summary, self.translator)

    def sacrifice_view(self) -> Optional[SacrificeButtonView]:
        return build_sacrifice_view(self.sacrifice_option(), self.translator)

    # =========================================================================
    # EVENTS
    # =========================================================================

    def pop_events(self) -> List[Event]:
        """Drain buffered events."""
        events, self._events = self._events, []
        return events

    def _emit(self, event: Event):
        self._events.append(event)

    def _emit_targets(self):
        self._emit(evt_targets_changed([t.card.card_id for t in self.state.targets]))

    def _on_countdown_tick(self, remaining: int):
        logger.debug(f"Countdown: {remaining}s")
        self._emit(evt_countdown_tick(remaining))

    def _on_countdown_expired(self):
        self._emit(evt_countdown_expired())
        self.cancel()

    def _on_result_dismissed(self, summary: AttackSummary):
        self._emit(evt_result_dismissed())
