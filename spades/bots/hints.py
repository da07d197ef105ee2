"""Suggestions for the human player.

Bids use the medium bot's team balancing; cards use the hard bot's play.

Hints never use randomness: the same state always gives the same hint.
"""

from collections.abc import Sequence

from spades.bots.hard_bot import choose_follow, choose_lead
from spades.bots.medium_bot import steady_bid
from spades.models.bid import Bid
from spades.models.card import Card
from spades.models.enums import Seat
from spades.models.rules import get_valid_plays, is_leading_trick
from spades.models.trick import Trick


def get_hint_bid(hand: Sequence[Card], partner_bid: "Bid | int | None") -> int:
    """Suggested bid (1-13): the hand estimate, one lower if the team would bid over 11."""
    return steady_bid(hand, partner_bid)


def get_hint_card(  # noqa: PLR0913
    hand: Sequence[Card],
    current_trick: Trick | None,
    spades_broken: bool,
    bid: "Bid | int | None",
    tricks_won: int,
    seat: Seat = Seat.SOUTH,
) -> Card | None:
    """Suggested card to play, or None if the hand is empty.

    Args:
        hand: Player's current hand
        current_trick: Trick in progress, or None when leading
        spades_broken: Whether spades have been broken
        bid: Player's bid for the round
        tricks_won: Tricks already won this round
        seat: Player's seat, used to spot a winning partner

    """
    valid_plays = get_valid_plays(
        hand, current_trick, spades_broken, is_leading_trick(current_trick)
    )
    if not valid_plays:
        return None

    tricks_needed = Bid.from_value(bid).contract - tricks_won
    if is_leading_trick(current_trick):
        return choose_lead(valid_plays, tricks_needed)
    return choose_follow(valid_plays, current_trick, tricks_needed, seat.partner())
