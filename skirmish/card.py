"""Card value object."""
from dataclasses import dataclass
from typing import Optional, Union, Dict, Any

from .constants import Rank, Suit, SUIT_SYMBOLS


# Ranks arriving from the store may be outside the known set; they are kept
# as raw strings so rule lookups can fall back instead of failing.
RankLike = Union[Rank, str]


def parse_rank(value: Any) -> RankLike:
    """Convert a store value ("A", "10", "JOKER", Rank.KING) to a Rank.

    Unknown values are returned unchanged as strings.
    """
    if isinstance(value, Rank):
        return value
    try:
        return Rank(str(value).upper())
    except ValueError:
        return str(value)


def parse_suit(value: Any) -> Suit:
    """Convert a store value to a Suit, NONE when unrecognised."""
    if isinstance(value, Suit):
        return value
    try:
        return Suit(str(value).lower())
    except ValueError:
        return Suit.NONE


@dataclass(frozen=True)
class Card:
    """A dealt card. Immutable; owned by the store's board and hand collections.

    card_id tells apart two cards with the same face (double decks). Stores
    must supply it for boards that can hold two equal faces: cards compare by
    value, so same-face cards without ids collapse into one attack target.
    """
    rank: RankLike
    suit: Suit = Suit.NONE
    card_id: Optional[int] = None

    @property
    def rank_text(self) -> str:
        return self.rank.value if isinstance(self.rank, Rank) else str(self.rank)

    @property
    def is_joker(self) -> bool:
        return self.rank == Rank.JOKER

    @property
    def label(self) -> str:
        """Short display label, e.g. '10♠' or 'JOKER'."""
        return f"{self.rank_text}{SUIT_SYMBOLS.get(self.suit, '')}"

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for network/storage."""
        return {
            'rank': self.rank_text,
            'suit': self.suit.value,
            'card_id': self.card_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Card':
        """Deserialize from dictionary."""
        return cls(
            rank=parse_rank(data['rank']),
            suit=parse_suit(data.get('suit', Suit.NONE.value)),
            card_id=data.get('card_id'),
        )


def create_card(rank: Any, suit: Any = Suit.NONE, card_id: Optional[int] = None) -> Card:
    """Create a card from loose values ("K", "spades")."""
    return Card(rank=parse_rank(rank), suit=parse_suit(suit), card_id=card_id)
