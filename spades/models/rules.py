"""Rule enforcement: legal plays, spade breaking and bid checks."""

import math
from collections.abc import Sequence

from spades.constants import (
    BLIND_NIL_BID,
    HIGH_SPADE_MULTIPLIER,
    HIGH_SPADE_RANK_THRESHOLD,
    MAX_BID,
    NIL_BID,
    PROTECTED_KING_MULTIPLIER,
    TRICKS_PER_ROUND,
)
from spades.exceptions import InvariantViolationError
from spades.models.bid import Bid
from spades.models.card import Card
from spades.models.deck import count_rank, count_suits, get_cards_of_suit
from spades.models.enums import Rank
from spades.models.trick import Trick


def is_leading_trick(current_trick: Trick | None) -> bool:
    """Check if the next card played would lead the trick."""
    return current_trick is None or current_trick.is_empty()


def get_valid_plays(
    hand: Sequence[Card],
    current_trick: Trick | None,
    spades_broken: bool,
    is_leading: bool,
) -> list[Card]:
    """Get the cards that can legally be played from a hand.

    Leading:
        - Spades broken: any card
        - Spades not broken: any non-spade; the whole hand if it holds only spades

    Following:
        - Must follow the lead suit if able, otherwise any card (a spade played
          this way breaks spades)

    Raises:
        InvariantViolationError: If a non-empty hand produced no legal play

    """
    if not hand:
        return []

    if is_leading or is_leading_trick(current_trick):
        if spades_broken:
            valid = list(hand)
        else:
            non_spades = [card for card in hand if not card.is_spade()]
            valid = non_spades or list(hand)
    else:
        # current_trick is non-empty here, so lead_suit is set
        of_lead_suit = get_cards_of_suit(hand, current_trick.lead_suit)
        valid = of_lead_suit or list(hand)

    if not valid:
        msg = "Non-empty hand produced no legal plays"
        raise InvariantViolationError(msg)
    return valid


def is_valid_play(
    card: Card,
    hand: Sequence[Card],
    current_trick: Trick | None,
    spades_broken: bool,
    is_leading: bool,
) -> bool:
    """Check if a specific card is a legal play."""
    return card in get_valid_plays(hand, current_trick, spades_broken, is_leading)


def would_break_spades(card: Card, current_trick: Trick | None, spades_broken: bool) -> bool:
    """Check if playing this card would break spades.

    Only a spade played onto a trick that has already been led breaks them.
    """
    if spades_broken or not card.is_spade():
        return False
    return not is_leading_trick(current_trick)


def is_valid_bid(bid: int, is_blind_nil: bool = False) -> bool:
    """Validate a bid value.

    Normal bids are 0-13 (0 = nil); blind nil (-1) is valid only when declared
    as blind nil. Whether blind nil may be declared at all (before the hand is
    seen) is the caller's decision.
    """
    if isinstance(bid, bool) or not isinstance(bid, int):
        return False
    if is_blind_nil:
        return bid == BLIND_NIL_BID
    return NIL_BID <= bid <= MAX_BID


def get_team_bid(bid1: "Bid | int | None", bid2: "Bid | int | None") -> int:
    """Combined contract of two partners; nil kinds and missing bids count 0."""
    return Bid.from_value(bid1).contract + Bid.from_value(bid2).contract


def get_team_tricks(tricks1: int, tricks2: int) -> int:
    """Combined tricks won by two partners."""
    return tricks1 + tricks2


def is_team_bid_reasonable(bid1: int, bid2: int) -> bool:
    """Check if the combined bids fit in one round (informational only)."""
    return max(0, bid1) + max(0, bid2) <= TRICKS_PER_ROUND


def estimate_min_tricks(hand: Sequence[Card]) -> int:
    """Estimate the tricks a hand should take on its own.

    floor(aces + 0.7 * protected kings + 0.3 * spades of Queen or higher),
    where a protected king has at least one other card of its suit.
    """
    suit_counts = count_suits(hand)

    aces = count_rank(hand, Rank.ACE)
    protected_kings = sum(
        1 for card in hand if card.rank == Rank.KING and suit_counts[card.suit] >= 2
    )
    high_spades = sum(
        1 for card in hand if card.is_spade() and card.value >= HIGH_SPADE_RANK_THRESHOLD
    )

    tricks = aces + protected_kings * PROTECTED_KING_MULTIPLIER + high_spades * HIGH_SPADE_MULTIPLIER
    return math.floor(tricks)
