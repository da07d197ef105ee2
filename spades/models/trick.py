"""Trick model and trick winner resolution."""

from dataclasses import dataclass, field

from spades.constants import CARDS_PER_TRICK
from spades.models.card import Card
from spades.models.enums import Seat, Suit


@dataclass(frozen=True)
class PlayedCard:
    """A card played by a seat in a trick."""

    card: Card
    player: Seat


@dataclass
class Trick:
    """Represents a single trick within a round.

    Each seat plays one card in turn order. The lead suit is fixed by the
    first play; once four cards are down the trick is complete and only the
    winner may still be assigned.

    Attributes:
        plays: Cards played so far, in order
        lead_suit: Suit of the first card played
        winner: Seat that won the trick, once resolved

    """

    plays: list[PlayedCard] = field(default_factory=list)
    lead_suit: Suit | None = None
    winner: Seat | None = None

    def has_player_played(self, player: Seat) -> bool:
        """Check if a seat has already played in this trick."""
        return any(play.player == player for play in self.plays)

    def get_all_cards(self) -> list[Card]:
        """Get all cards played in this trick."""
        return [play.card for play in self.plays]

    def add_card(self, player: Seat, card: Card) -> bool:
        """Add a played card to this trick.

        Returns:
            True if card was added, False if the seat already played or the
            trick is complete.

        """
        if self.is_complete() or self.has_player_played(player):
            return False
        if not self.plays:
            self.lead_suit = card.suit
        self.plays.append(PlayedCard(card, player))
        return True

    def is_empty(self) -> bool:
        """Check if nobody has played yet."""
        return not self.plays

    def is_complete(self) -> bool:
        """Check if all four seats have played."""
        return len(self.plays) == CARDS_PER_TRICK

    def contains_spade(self) -> bool:
        """Check if any spade was played."""
        return any(play.card.is_spade() for play in self.plays)

    def determine_winner(self) -> Seat:
        """Resolve and record the winner of this complete trick.

        The winner is assigned once; later calls return the recorded seat.
        """
        if self.winner is None:
            self.winner = determine_trick_winner(self)
        return self.winner

    def __str__(self) -> str:
        """Return string representation of the trick."""
        cards = ", ".join(f"{play.player.value}:{play.card}" for play in self.plays)
        if self.winner:
            return f"Trick [{cards}] won by {self.winner.value}"
        return f"Trick [{cards}]"


def beats(challenger: Card, current: Card, lead_suit: Suit | None) -> bool:
    """Check if ``challenger`` takes over from the current winning card.

    Rules:
        1. A spade beats any non-spade
        2. Between two spades the higher rank wins
        3. Between two non-spades only a lead-suit card can take over, either
           because the current card is off-suit or because it outranks it

    """
    if challenger.is_spade():
        return not current.is_spade() or challenger.value > current.value
    if current.is_spade():
        return False
    if challenger.suit != lead_suit:
        return False
    return current.suit != lead_suit or challenger.value > current.value


def get_highest_in_trick(trick: Trick) -> PlayedCard:
    """Get the play currently winning a (possibly partial) trick.

    Raises:
        ValueError: If the trick is empty

    """
    if not trick.plays:
        msg = "Cannot find highest play in an empty trick"
        raise ValueError(msg)

    winning = trick.plays[0]
    for play in trick.plays[1:]:
        if beats(play.card, winning.card, trick.lead_suit):
            winning = play
    return winning


def determine_trick_winner(trick: Trick) -> Seat:
    """Determine which seat wins a completed trick.

    The highest spade wins if any spade was played, otherwise the highest
    card of the lead suit. Off-suit non-spades can never win.

    Raises:
        ValueError: If the trick does not have exactly four plays

    """
    if len(trick.plays) != CARDS_PER_TRICK:
        msg = f"Trick must have exactly {CARDS_PER_TRICK} cards, got {len(trick.plays)}"
        raise ValueError(msg)
    return get_highest_in_trick(trick).player
