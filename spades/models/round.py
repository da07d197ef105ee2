"""Round model representing one hand of 13 tricks."""

from dataclasses import dataclass, field

from spades.constants import TRICKS_PER_ROUND
from spades.models.card import Card
from spades.models.enums import DEALER, Seat
from spades.models.trick import Trick


@dataclass
class RoundState:
    """State of the round being played.

    Attributes:
        round_number: Current round (1-indexed)
        tricks: Completed tricks this round
        current_trick: Trick in progress, or None between tricks
        current_player: Whose turn it is
        spades_broken: True once a spade has been played off-lead; never
            reset within a round
        bids_complete: True once all four seats have bid
        scored: True once the finished round has been added to the team scores

    """

    round_number: int = 1
    tricks: list[Trick] = field(default_factory=list)
    current_trick: Trick | None = None
    current_player: Seat = field(default_factory=DEALER.next_seat)
    spades_broken: bool = False
    bids_complete: bool = False
    scored: bool = False

    def get_cards_played(self) -> list[Card]:
        """All cards played in completed tricks this round."""
        return [card for trick in self.tricks for card in trick.get_all_cards()]

    def get_tricks_won(self, seat: Seat) -> int:
        """Count how many completed tricks a seat has won."""
        return sum(1 for trick in self.tricks if trick.winner == seat)

    def is_complete(self) -> bool:
        """Check if all 13 tricks have been played."""
        return len(self.tricks) == TRICKS_PER_ROUND

    def __str__(self) -> str:
        """Return string representation."""
        return f"Round {self.round_number}: {len(self.tricks)} tricks"
