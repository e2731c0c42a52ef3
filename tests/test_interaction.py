"""Tests for attack state transitions."""
from skirmish.constants import AttackMode
from skirmish.interaction import (
    InteractionStep, open_state, set_mode, select_target, board_changed, transition,
)
from skirmish.targets import CardTarget


class TestOpen:

    def test_low_value_opens_on_health(self, make_card, opponent_cards):
        state = open_state(make_card("5"), opponent_cards)
        assert state.mode == AttackMode.HEALTH
        assert state.targets == ()
        assert state.target is None
        assert state.damage == 5

    def test_joker_opens_on_unit_with_first_target(self, make_card, opponent_cards):
        state = open_state(make_card("JOKER"), opponent_cards)
        assert state.mode == AttackMode.UNIT
        assert len(state.targets) == 3
        assert state.target == state.targets[0]
        assert state.damage == 0

    def test_unit_with_empty_board_cannot_confirm(self, make_card):
        state = open_state(make_card("K"), ())
        assert state.mode == AttackMode.UNIT
        assert state.target is None
        assert not state.can_confirm

    def test_no_attacker_uses_defaults(self, opponent_cards):
        state = open_state(None, opponent_cards)
        assert state.mode == AttackMode.UNIT
        assert state.damage == 1


class TestModeSwitch:

    def test_switch_to_health_clears_everything(self, make_card, opponent_cards):
        state = open_state(make_card("K"), opponent_cards)
        state = select_target(state, state.targets[2])
        state = set_mode(state, AttackMode.HEALTH)
        assert state.targets == ()
        assert state.target is None
        assert state.can_confirm

    def test_switch_to_unit_auto_selects_first(self, make_card, opponent_cards):
        state = open_state(make_card("4"), opponent_cards)
        state = set_mode(state, "unit")
        assert [t.card for t in state.targets] == list(opponent_cards)
        assert state.target == state.targets[0]

    def test_invalid_mode_leaves_state_untouched(self, make_card, opponent_cards):
        state = open_state(make_card("K"), opponent_cards)
        assert set_mode(state, "fireball") is state


class TestTargetSelection:

    def test_select_member(self, make_card, opponent_cards):
        state = open_state(make_card("K"), opponent_cards)
        state = select_target(state, state.targets[1])
        assert state.target_index() == 1

    def test_stale_target_ignored(self, make_card, opponent_cards):
        state = open_state(make_card("K"), opponent_cards)
        stranger = CardTarget(make_card("8", "hearts"))
        assert select_target(state, stranger) is state

    def test_selection_ignored_under_health(self, make_card, opponent_cards):
        state = open_state(make_card("2"), opponent_cards)
        assert select_target(state, CardTarget(opponent_cards[0])) is state


class TestBoardChanges:

    def test_removed_selection_falls_back_to_first(self, make_card, opponent_cards):
        state = open_state(make_card("K"), opponent_cards)
        state = select_target(state, state.targets[1])
        state = board_changed(state, (opponent_cards[0], opponent_cards[2]))
        assert len(state.targets) == 2
        assert state.target == CardTarget(opponent_cards[0])

    def test_selection_survives_reorder(self, make_card, opponent_cards):
        state = open_state(make_card("K"), opponent_cards)
        state = select_target(state, state.targets[2])
        state = board_changed(state, tuple(reversed(opponent_cards)))
        assert state.target == CardTarget(opponent_cards[2])
        assert state.target_index() == 0

    def test_health_mode_stays_empty(self, make_card, opponent_cards):
        state = open_state(make_card("3"), ())
        state = board_changed(state, opponent_cards)
        assert state.targets == ()
        assert state.opponent_cards == opponent_cards


class TestTransitionTable:

    def test_dispatches_every_step(self, make_card, opponent_cards):
        state = transition(None, InteractionStep.OPEN, (make_card("Q"), opponent_cards))
        assert state.mode == AttackMode.UNIT
        state = transition(state, InteractionStep.SELECT_TARGET, state.targets[1])
        assert state.target_index() == 1
        state = transition(state, InteractionStep.SET_MODE, AttackMode.HEALTH)
        assert state.target is None
        state = transition(state, InteractionStep.BOARD_CHANGED, ())
        assert state.opponent_cards == ()

    def test_state_serializes(self, make_card, opponent_cards):
        state = open_state(make_card("JOKER"), opponent_cards)
        data = state.to_dict()
        assert data['mode'] == 'unit'
        assert len(data['targets']) == 3
        assert data['target'] == data['targets'][0]
