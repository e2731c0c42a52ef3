"""Tests for rank rules: damage values and default attack mode."""
import pytest
from skirmish.card import create_card
from skirmish.constants import Rank, AttackMode
from skirmish.rules import damage_for, damage_for_card, default_attack_mode, parse_attack_mode


class TestDamage:
    """Damage per rank."""

    @pytest.mark.parametrize("rank,expected", [
        ("A", 1), ("2", 2), ("3", 3), ("4", 4), ("5", 5), ("6", 6), ("7", 7),
        ("8", 8), ("9", 9), ("10", 10), ("J", 10), ("Q", 10), ("K", 10),
    ])
    def test_table_values(self, rank, expected):
        assert damage_for(rank) == expected

    def test_joker_deals_nothing(self):
        assert damage_for(Rank.JOKER) == 0
        assert damage_for("JOKER") == 0

    @pytest.mark.parametrize("rank", ["11", "X", "", "1", None, 42])
    def test_unknown_rank_falls_back_to_one(self, rank):
        assert damage_for(rank) == 1

    def test_accepts_enum_and_lowercase(self):
        assert damage_for(Rank.KING) == 10
        assert damage_for("k") == 10

    def test_card_and_missing_card(self):
        assert damage_for_card(create_card("7", "clubs")) == 7
        assert damage_for_card(None) == 1


class TestDefaultMode:
    """Attack mode preselected when the popup opens."""

    def test_joker_defaults_to_unit(self):
        assert default_attack_mode(Rank.JOKER) == AttackMode.UNIT

    @pytest.mark.parametrize("rank", ["A", "2", "3", "4", "5", "6", "7"])
    def test_low_value_defaults_to_health(self, rank):
        assert default_attack_mode(rank) == AttackMode.HEALTH

    @pytest.mark.parametrize("rank", ["8", "9", "10", "J", "Q", "K"])
    def test_high_value_defaults_to_unit(self, rank):
        assert default_attack_mode(rank) == AttackMode.UNIT

    def test_unknown_or_missing_defaults_to_unit(self):
        assert default_attack_mode("ZZ") == AttackMode.UNIT
        assert default_attack_mode(None) == AttackMode.UNIT

    def test_accepts_cards(self):
        assert default_attack_mode(create_card("5", "hearts")) == AttackMode.HEALTH
        assert default_attack_mode(create_card("JOKER")) == AttackMode.UNIT


class TestParseMode:

    def test_parses_values_and_members(self):
        assert parse_attack_mode("unit") == AttackMode.UNIT
        assert parse_attack_mode("HEALTH") == AttackMode.HEALTH
        assert parse_attack_mode(AttackMode.UNIT) == AttackMode.UNIT

    def test_invalid_mode_is_none(self):
        assert parse_attack_mode("magic") is None
        assert parse_attack_mode(None) is None
