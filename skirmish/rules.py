"""Rank-based attack rules: damage values and default attack mode.

Both lookups are total. An unknown rank never blocks the popup; it falls
back to FALLBACK_DAMAGE and AttackMode.UNIT.
"""
from typing import Optional, Union, Any

from .card import Card, parse_rank
from .constants import (
    Rank, AttackMode,
    DAMAGE_TABLE, FALLBACK_DAMAGE, LOW_VALUE_RANKS,
)


def damage_for(rank: Any) -> int:
    """Damage dealt by a card of the given rank."""
    if rank is None:
        return FALLBACK_DAMAGE
    return DAMAGE_TABLE.get(parse_rank(rank), FALLBACK_DAMAGE)


def damage_for_card(card: Optional[Card]) -> int:
    """Damage dealt by a card; no card deals the fallback."""
    if card is None:
        return FALLBACK_DAMAGE
    return damage_for(card.rank)


def default_attack_mode(card_or_rank: Union[Card, Any, None]) -> AttackMode:
    """Pick the attack mode preselected when the popup opens.

    JOKER -> UNIT, A..7 -> HEALTH (weak in unit combat), everything else -> UNIT.
    """
    if card_or_rank is None:
        return AttackMode.UNIT
    rank = card_or_rank.rank if isinstance(card_or_rank, Card) else card_or_rank
    rank = parse_rank(rank)

    if rank == Rank.JOKER:
        return AttackMode.UNIT
    if rank in LOW_VALUE_RANKS:
        return AttackMode.HEALTH
    return AttackMode.UNIT


def parse_attack_mode(value: Any) -> Optional[AttackMode]:
    """AttackMode from an enum member or its string value, None if invalid."""
    if isinstance(value, AttackMode):
        return value
    try:
        return AttackMode(str(value).lower())
    except ValueError:
        return None
