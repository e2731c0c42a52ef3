"""Pytest fixtures for attack popup testing."""
import pytest
from typing import Optional

from skirmish.audio import SilentAudio
from skirmish.card import Card, create_card
from skirmish.constants import GamePhase
from skirmish.controller import AttackController
from skirmish.countdown import FrameTicker
from skirmish.i18n import Translator
from skirmish.store import LocalGameStore, GameSnapshot


@pytest.fixture
def make_card():
    """Factory fixture to create cards with unique ids.

    Usage:
        king = make_card("K", "spades")
        joker = make_card("JOKER")
    """
    next_id = [1]

    def _make(rank, suit="hearts", card_id: Optional[int] = None) -> Card:
        if card_id is None:
            card_id = next_id[0]
            next_id[0] += 1
        return create_card(rank, suit, card_id)

    return _make


@pytest.fixture
def opponent_cards(make_card):
    """Three opposing cards in board order."""
    return (
        make_card("9", "clubs"),
        make_card("Q", "diamonds"),
        make_card("3", "spades"),
    )


@pytest.fixture
def store() -> LocalGameStore:
    """Empty store in PLAY phase with 30 seconds of turn time."""
    return LocalGameStore(GameSnapshot(
        opponent_health=30,
        turn_time_remaining=30,
        phase=GamePhase.PLAY,
    ))


@pytest.fixture
def audio() -> SilentAudio:
    return SilentAudio()


@pytest.fixture
def controller(store, audio) -> AttackController:
    """Controller driven by frame time (see advance)."""
    ctrl = AttackController(
        store,
        player=1,
        audio=audio,
        translator=Translator("en"),
        ticker_factory=FrameTicker,
        result_duration=3.0,
    )
    yield ctrl
    ctrl.teardown()


@pytest.fixture
def open_attack(store, controller):
    """Factory fixture to open the popup for an attacker and board.

    Usage:
        state = open_attack(joker, opponent_cards, remaining=10)
    """
    def _open(attacker, opponents=(), remaining: int = 30):
        snapshot = store.update(
            attacking_card=attacker,
            opponent_cards=tuple(opponents),
            turn_time_remaining=remaining,
        )
        return controller.open(snapshot)
    return _open


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def advance(controller: AttackController, seconds: int):
    """Let whole seconds of frame time pass, one second per frame."""
    for _ in range(seconds):
        controller.update(1.0)


def event_types(events):
    return [e.type for e in events]
