"""Player model."""

from dataclasses import dataclass, field

from spades.models.bid import Bid
from spades.models.card import Card
from spades.models.enums import Seat, Team


@dataclass
class Player:
    """Represents a player in the game.

    Attributes:
        position: Seat at the table
        name: Display name
        is_human: Whether this seat is controlled by the user
        hand: Current cards in hand
        bid: Current round bid
        tricks_won: Number of tricks won this round

    """

    position: Seat
    name: str
    is_human: bool = False
    hand: list[Card] = field(default_factory=list)
    bid: Bid = field(default_factory=Bid.not_bid)
    tricks_won: int = 0

    @property
    def team(self) -> Team:
        """Team this player belongs to."""
        return self.position.team

    def reset_round(self, hand: list[Card] | None = None) -> None:
        """Reset player state for a new round."""
        self.hand = list(hand) if hand else []
        self.bid = Bid.not_bid()
        self.tricks_won = 0

    def has_card(self, card: Card) -> bool:
        """Check if player has a card in their hand."""
        return card in self.hand

    def remove_card(self, card: Card) -> None:
        """Remove a card from player's hand."""
        if card in self.hand:
            self.hand.remove(card)

    def made_bid(self) -> bool:
        """Check if player has made their bid."""
        return self.bid.is_placed

    def tricks_needed(self) -> int:
        """Tricks still needed to reach the bid (negative when over)."""
        return self.bid.contract - self.tricks_won

    def __str__(self) -> str:
        """Return string representation."""
        kind = "" if self.is_human else " (AI)"
        return f"{self.name}{kind} - Bid: {self.bid} Tricks: {self.tricks_won}"


def create_initial_players() -> dict[Seat, Player]:
    """Human at south, AI partner at north, AI opponents west and east."""
    return {
        Seat.SOUTH: Player(Seat.SOUTH, "You", is_human=True),
        Seat.WEST: Player(Seat.WEST, "West"),
        Seat.NORTH: Player(Seat.NORTH, "Partner"),
        Seat.EAST: Player(Seat.EAST, "East"),
    }
