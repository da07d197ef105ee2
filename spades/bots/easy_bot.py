"""Easy bot: noisy bids and mostly random play."""

from collections.abc import Sequence

from spades.bots.base_bot import (
    BaseBot,
    BotContext,
    adjusted_bid_estimate,
    clamp_bid,
    find_lowest_card,
)
from spades.constants import EASY_RANDOM_PLAY_CHANCE
from spades.models.bid import Bid
from spades.models.card import Card
from spades.models.enums import Difficulty


class EasyBot(BaseBot):
    """Bot that simulates an inexperienced player.

    Bidding: the shared hand estimate shifted by -1, 0 or +1 at random.
    Playing: a random legal card most of the time, otherwise the lowest.
    """

    difficulty = Difficulty.EASY

    def _choose_bid(self, hand: Sequence[Card], _partner_bid: "Bid | int | None") -> Bid:
        """Make a noisy bid that ignores the partner."""
        offset = self.rng.randint(-1, 1)
        return Bid.standard(clamp_bid(adjusted_bid_estimate(hand) + offset))

    def _choose_card(self, valid_plays: list[Card], _context: BotContext) -> Card:
        """Random legal card (70%) or the lowest legal card."""
        if self.rng.random() < EASY_RANDOM_PLAY_CHANCE:
            return self.rng.choice(valid_plays)
        return find_lowest_card(valid_plays)
