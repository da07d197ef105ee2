"""Medium bot: steady bids and greedy trick taking."""

from collections.abc import Sequence

from spades.bots.base_bot import (
    BaseBot,
    BotContext,
    adjusted_bid_estimate,
    clamp_bid,
    find_lowest_card,
    get_winning_cards,
    partner_contract,
    round_half_up,
)
from spades.constants import MEDIUM_HIGH_LEAD_CHANCE, MEDIUM_TEAM_TOTAL_THRESHOLD, MIN_BID
from spades.models.bid import Bid
from spades.models.card import Card
from spades.models.enums import Difficulty
from spades.models.rules import is_leading_trick


def steady_bid(hand: Sequence[Card], partner_bid: "Bid | int | None") -> int:
    """Rounded hand estimate, one lower when the team total would exceed 11."""
    bid = round_half_up(adjusted_bid_estimate(hand))

    partner = partner_contract(partner_bid)
    if partner is not None and bid + partner > MEDIUM_TEAM_TOTAL_THRESHOLD:
        bid = max(MIN_BID, bid - 1)

    return clamp_bid(bid)


class MediumBot(BaseBot):
    """Bot with basic strategy.

    Bidding: rounded hand estimate, one lower when the team would go over 11.

    Playing:
    - Leading: usually the highest non-spade, otherwise a random non-spade
    - Following: the lowest card that wins, or the lowest card if none does
    """

    difficulty = Difficulty.MEDIUM

    def _choose_bid(self, hand: Sequence[Card], partner_bid: "Bid | int | None") -> Bid:
        """Make a bid balanced against the partner's."""
        return Bid.standard(steady_bid(hand, partner_bid))

    def _choose_card(self, valid_plays: list[Card], context: BotContext) -> Card:
        """Pick a lead or a follow card."""
        if is_leading_trick(context.current_trick):
            return self._choose_lead(valid_plays)

        winning = get_winning_cards(valid_plays, self._highest_in_trick(context))
        if winning:
            return find_lowest_card(winning)
        return find_lowest_card(valid_plays)

    def _choose_lead(self, valid_plays: list[Card]) -> Card:
        """Lead high non-spades; spades only when nothing else is legal."""
        non_spades = sorted(
            (card for card in valid_plays if not card.is_spade()),
            key=lambda card: card.value,
            reverse=True,
        )
        if not non_spades:
            return valid_plays[0]

        if self.rng.random() < MEDIUM_HIGH_LEAD_CHANCE:
            return non_spades[0]
        return self.rng.choice(non_spades)
