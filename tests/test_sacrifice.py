"""Tests for the sacrifice action gate."""
import pytest
from skirmish.constants import GamePhase
from skirmish.sacrifice import SacrificeGate, can_sacrifice, is_sacrifice_card
from skirmish.store import GameSnapshot


class TestCanSacrifice:

    @pytest.mark.parametrize("rank", ["J", "Q", "K"])
    def test_face_cards_in_play_before_acting(self, make_card, rank):
        assert can_sacrifice(make_card(rank), GamePhase.PLAY, has_acted=False)

    @pytest.mark.parametrize("rank", ["A", "5", "10", "JOKER"])
    def test_other_ranks_never(self, make_card, rank):
        card = make_card(rank)
        assert not is_sacrifice_card(card)
        assert not can_sacrifice(card, GamePhase.PLAY, has_acted=False)

    @pytest.mark.parametrize("phase", [p for p in GamePhase if p != GamePhase.PLAY])
    def test_only_in_play_phase(self, make_card, phase):
        assert not can_sacrifice(make_card("K"), phase, has_acted=False)

    def test_not_after_acting(self, make_card):
        assert not can_sacrifice(make_card("Q"), GamePhase.PLAY, has_acted=True)

    def test_no_card(self):
        assert not is_sacrifice_card(None)
        assert not can_sacrifice(None, GamePhase.PLAY, has_acted=False)


class TestSacrificeGate:

    def test_hidden_for_non_face_card(self, make_card):
        snapshot = GameSnapshot(selected_cards=(make_card("7"),))
        option = SacrificeGate().evaluate(snapshot)
        assert not option.offered
        assert not option.enabled

    def test_offered_but_disabled_after_acting(self, make_card):
        snapshot = GameSnapshot(selected_cards=(make_card("J"),), has_acted_this_turn=True)
        option = SacrificeGate().evaluate(snapshot)
        assert option.offered
        assert not option.enabled

    def test_looks_at_first_selected_card(self, make_card):
        snapshot = GameSnapshot(selected_cards=(make_card("K"), make_card("2")))
        assert SacrificeGate().evaluate(snapshot).enabled

    def test_request_sets_store_mode(self, store, make_card):
        snapshot = store.update(selected_cards=(make_card("K"),))
        assert SacrificeGate().request(snapshot, store)
        assert store.sacrifice_mode

    def test_disallowed_request_is_noop(self, store, make_card):
        snapshot = store.update(selected_cards=(make_card("K"),), phase=GamePhase.ATTACK)
        assert not SacrificeGate().request(snapshot, store)
        assert not store.sacrifice_mode
