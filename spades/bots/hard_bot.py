"""Hard bot: team-balanced bids, occasional nil, bid-aware play."""

from collections.abc import Sequence

from spades.bots.base_bot import (
    BaseBot,
    BotContext,
    adjusted_bid_estimate,
    clamp_bid,
    find_highest_card,
    find_lowest_card,
    get_winning_cards,
    partner_contract,
    round_half_up,
)
from spades.constants import (
    HARD_MAX_BID_ADJUSTMENT,
    HARD_NIL_CHANCE,
    HARD_TEAM_TOTAL_HIGH,
    HARD_TEAM_TOTAL_LOW,
    MIN_BID,
    NIL_MAX_SPADE_COUNT,
)
from spades.models.bid import Bid
from spades.models.card import Card
from spades.models.deck import count_high_cards, count_spades, count_suits
from spades.models.enums import Difficulty, Seat
from spades.models.rules import is_leading_trick
from spades.models.trick import Trick, get_highest_in_trick


def balanced_bid(hand: Sequence[Card], partner_bid: "Bid | int | None") -> int:
    """Rounded hand estimate adjusted so the team total lands in 6-12."""
    bid = round_half_up(adjusted_bid_estimate(hand))

    partner = partner_contract(partner_bid)
    if partner is not None:
        team_total = bid + partner
        if team_total > HARD_TEAM_TOTAL_HIGH:
            bid = max(MIN_BID, bid - 2)
        elif team_total < HARD_TEAM_TOTAL_LOW:
            bid = min(HARD_MAX_BID_ADJUSTMENT, bid + 1)

    return clamp_bid(bid)


def is_nil_candidate(hand: Sequence[Card]) -> bool:
    """Weak hand: estimate at most 1, two spades or fewer and no A/K/Q."""
    return (
        adjusted_bid_estimate(hand) <= 1
        and count_spades(hand) <= NIL_MAX_SPADE_COUNT
        and count_high_cards(hand) == 0
    )


def choose_lead(valid_plays: Sequence[Card], tricks_needed: int) -> Card:
    """Lead for a bid-aware player.

    With the bid already made, dump the lowest card. Otherwise cash a
    non-spade Ace, or lead the highest card of the longest suit.
    """
    if len(valid_plays) == 1:
        return valid_plays[0]

    if tricks_needed <= 0:
        return find_lowest_card(valid_plays)

    for card in valid_plays:
        if card.is_ace() and not card.is_spade():
            return card

    suit_counts = count_suits(valid_plays)
    longest_suit = max(suit_counts, key=lambda suit: suit_counts[suit])
    longest_suit_cards = [card for card in valid_plays if card.suit == longest_suit]
    return find_highest_card(longest_suit_cards)


def choose_follow(
    valid_plays: Sequence[Card], trick: Trick, tricks_needed: int, partner: Seat
) -> Card:
    """Follow for a bid-aware player.

    Conserve when the partner is already winning; otherwise take the trick
    as cheaply as possible while tricks are still needed, and play the
    lowest card when they are not.
    """
    if len(valid_plays) == 1:
        return valid_plays[0]

    highest = get_highest_in_trick(trick)
    if highest.player == partner:
        return find_lowest_card(valid_plays)

    winning = get_winning_cards(valid_plays, highest)
    if winning and tricks_needed > 0:
        return find_lowest_card(winning)
    return find_lowest_card(valid_plays)


class HardBot(BaseBot):
    """Bot with partnership-aware strategy.

    Bidding:
    - Team total above 12: bid two lower; below 6: one higher (at most 8)
    - Very weak hands sometimes bid nil

    Playing:
    - Leading: Aces and long suits while tricks are needed, low cards after
    - Following: let a winning partner have the trick, otherwise win cheaply
      until the bid is made
    """

    difficulty = Difficulty.HARD

    def _choose_bid(self, hand: Sequence[Card], partner_bid: "Bid | int | None") -> Bid:
        """Make a team-balanced bid, occasionally nil."""
        if is_nil_candidate(hand) and self.rng.random() < HARD_NIL_CHANCE:
            return Bid.nil()
        return Bid.standard(balanced_bid(hand, partner_bid))

    def _choose_card(self, valid_plays: list[Card], context: BotContext) -> Card:
        """Pick a lead or a follow card."""
        tricks_needed = context.player.tricks_needed()
        if is_leading_trick(context.current_trick):
            return choose_lead(valid_plays, tricks_needed)
        return choose_follow(
            valid_plays, context.current_trick, tricks_needed, self.seat.partner()
        )
