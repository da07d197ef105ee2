"""Card model and the 52-card universe."""

from dataclasses import dataclass

from spades.models.enums import RANK_VALUES, RANKS, SUITS, Rank, Suit

HIGH_CARD_RANKS = (Rank.ACE, Rank.KING, Rank.QUEEN)


@dataclass(frozen=True)
class Card:
    """Represents a playing card.

    Attributes:
        suit: Card suit
        rank: Card rank

    """

    suit: Suit
    rank: Rank

    @property
    def id(self) -> str:
        """Unique identifier in the form ``suit-rank`` (e.g. ``spades-A``)."""
        return f"{self.suit.value}-{self.rank.value}"

    @property
    def value(self) -> int:
        """Numeric rank value (2-14)."""
        return RANK_VALUES[self.rank]

    def is_spade(self) -> bool:
        """Check if card is a spade (trump)."""
        return self.suit == Suit.SPADES

    def is_ace(self) -> bool:
        """Check if card is an Ace."""
        return self.rank == Rank.ACE

    def is_high_card(self) -> bool:
        """Check if card is an Ace, King or Queen."""
        return self.rank in HIGH_CARD_RANKS

    def __str__(self) -> str:
        """Return string representation of card."""
        return self.id


# All cards in the deck, keyed by id
_CARDS: dict[str, Card] = {}

for _suit in SUITS:
    for _rank in RANKS:
        _card = Card(_suit, _rank)
        _CARDS[_card.id] = _card


def get_card(card_id: str) -> Card:
    """Get card by ID.

    Raises:
        KeyError: If the id does not name one of the 52 cards

    """
    return _CARDS[card_id]


def get_all_cards() -> dict[str, Card]:
    """Get all cards in the deck."""
    return _CARDS.copy()
