"""Deck model for shuffling, dealing and hand analysis."""

import random
from collections.abc import Sequence
from typing import TypeVar

from spades.models.card import Card, get_all_cards
from spades.models.enums import SEAT_ORDER, SUITS, Rank, Seat, Suit

T = TypeVar("T")

# Display/sort order; spades first as they are trump
SUIT_ORDER: dict[Suit, int] = {suit: index for index, suit in enumerate(SUITS)}


def create_deck() -> list[Card]:
    """Create the 52 cards, suits in display order and ranks low to high."""
    return list(get_all_cards().values())


def shuffle(items: Sequence[T], rng: random.Random | None = None) -> list[T]:
    """Return a shuffled copy of ``items`` (Fisher-Yates).

    The input is not modified.

    Args:
        items: Items to shuffle
        rng: Random source; a fresh unseeded generator when omitted

    """
    rng = rng or random.Random()  # noqa: S311
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randint(0, i)
        result[i], result[j] = result[j], result[i]
    return result


def sort_hand(cards: Sequence[Card]) -> list[Card]:
    """Sort by suit (spades, hearts, diamonds, clubs), then rank high to low."""
    return sorted(cards, key=lambda card: (SUIT_ORDER[card.suit], -card.value))


def deal_cards(rng: random.Random | None = None) -> dict[Seat, list[Card]]:
    """Shuffle a fresh deck and deal it round-robin to the four seats.

    Each hand is sorted with ``sort_hand``.
    """
    deck = Deck(rng)
    deck.shuffle()
    return deck.deal()


def count_suits(cards: Sequence[Card]) -> dict[Suit, int]:
    """Count cards of each suit, including suits with zero cards."""
    counts = dict.fromkeys(SUITS, 0)
    for card in cards:
        counts[card.suit] += 1
    return counts


def get_cards_of_suit(cards: Sequence[Card], suit: Suit) -> list[Card]:
    """Filter cards to a single suit."""
    return [card for card in cards if card.suit == suit]


def count_spades(cards: Sequence[Card]) -> int:
    """Count spades in a hand."""
    return sum(1 for card in cards if card.suit == Suit.SPADES)


def count_high_cards(cards: Sequence[Card]) -> int:
    """Count Aces, Kings and Queens in a hand."""
    return sum(1 for card in cards if card.is_high_card())


def count_rank(cards: Sequence[Card], rank: Rank) -> int:
    """Count cards of a given rank."""
    return sum(1 for card in cards if card.rank == rank)


class Deck:
    """A 52-card deck bound to a random source.

    Used by the game engine so that a seeded ``random.Random`` makes a whole
    game reproducible.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize an empty deck."""
        self.rng = rng or random.Random()  # noqa: S311
        self.cards: list[Card] = []

    def fill(self) -> None:
        """Fill the deck with all 52 cards."""
        self.cards = create_deck()

    def shuffle(self) -> None:
        """Fill and shuffle the deck."""
        self.fill()
        self.cards = shuffle(self.cards, self.rng)

    def deal(self) -> dict[Seat, list[Card]]:
        """Deal the whole deck one card per seat in turn, each hand sorted.

        Shuffles first if the deck is empty.
        """
        if not self.cards:
            self.shuffle()

        hands: dict[Seat, list[Card]] = {seat: [] for seat in SEAT_ORDER}
        for index, card in enumerate(self.cards):
            hands[SEAT_ORDER[index % len(SEAT_ORDER)]].append(card)

        self.cards = []
        return {seat: sort_hand(hand) for seat, hand in hands.items()}

    def reset(self) -> None:
        """Reset the deck."""
        self.cards = []
