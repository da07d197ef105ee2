"""Base class and shared heuristics for all bot strategies."""

import math
import random
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import ClassVar

from spades.config import settings
from spades.constants import (
    MAX_BID,
    MIN_BID,
    SINGLETON_SUIT_MULTIPLIER,
    SPADE_COUNT_THRESHOLD_1,
    SPADE_COUNT_THRESHOLD_2,
    VOID_SUIT_MULTIPLIER,
)
from spades.models.bid import Bid
from spades.models.card import Card
from spades.models.deck import count_spades, count_suits
from spades.models.enums import Difficulty, Seat
from spades.models.player import Player
from spades.models.rules import estimate_min_tricks, get_valid_plays, is_leading_trick
from spades.models.trick import PlayedCard, Trick, get_highest_in_trick


@dataclass
class BotContext:
    """Everything a bot may legitimately see when choosing a card.

    Attributes:
        player: The bot's own player (hand, bid, tricks won)
        partner: The bot's partner
        current_trick: Trick in progress, or None when leading
        spades_broken: Whether spades have been broken
        cards_played: Cards played in completed tricks this round
        round_tricks: Number of tricks completed this round

    """

    player: Player
    partner: Player
    current_trick: Trick | None
    spades_broken: bool
    cards_played: list[Card] = field(default_factory=list)
    round_tricks: int = 0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def clamp_bid(value: float) -> int:
    """Round a bid estimate and clamp it to 1-13."""
    return max(MIN_BID, min(MAX_BID, round_half_up(value)))


def adjusted_bid_estimate(hand: Sequence[Card]) -> float:
    """Hand strength estimate used by every bot for bidding.

    Starts from ``estimate_min_tricks`` and adds one for 4+ spades, one more
    for 6+, plus 0.5 per void suit and 0.3 per singleton.
    """
    spade_count = count_spades(hand)
    suit_counts = count_suits(hand).values()

    estimate: float = estimate_min_tricks(hand)
    if spade_count >= SPADE_COUNT_THRESHOLD_1:
        estimate += 1
    if spade_count >= SPADE_COUNT_THRESHOLD_2:
        estimate += 1

    voids = sum(1 for count in suit_counts if count == 0)
    singletons = sum(1 for count in suit_counts if count == 1)
    estimate += voids * VOID_SUIT_MULTIPLIER + singletons * SINGLETON_SUIT_MULTIPLIER
    return estimate


def partner_contract(partner_bid: "Bid | int | None") -> int | None:
    """Partner's bid as a trick count for team balancing.

    Nil counts as 0; not yet bid and blind nil give None (no balancing).
    """
    bid = Bid.from_value(partner_bid)
    if not bid.is_placed or bid.is_blind_nil:
        return None
    return bid.contract


def find_lowest_card(cards: Sequence[Card]) -> Card:
    """Lowest-ranked card; the first one on ties.

    Raises:
        ValueError: If cards is empty

    """
    if not cards:
        msg = "Cannot find lowest card in empty list"
        raise ValueError(msg)
    return min(cards, key=lambda card: card.value)


def find_highest_card(cards: Sequence[Card]) -> Card:
    """Highest-ranked card; the first one on ties.

    Raises:
        ValueError: If cards is empty

    """
    if not cards:
        msg = "Cannot find highest card in empty list"
        raise ValueError(msg)
    return max(cards, key=lambda card: card.value)


def get_winning_cards(cards: Sequence[Card], highest: PlayedCard) -> list[Card]:
    """Cards that would beat the play currently winning the trick."""
    best = highest.card

    def wins(card: Card) -> bool:
        if card.is_spade() and not best.is_spade():
            return True
        return card.suit == best.suit and card.value > best.value

    return [card for card in cards if wins(card)]


class BaseBot(ABC):
    """Abstract base class for bot AI strategies.

    All bot implementations must inherit from this class and implement
    _choose_bid() and _choose_card(). make_bid() and pick_card() handle the
    common checks (empty hand, legal plays, forced single play) before
    delegating.
    """

    difficulty: ClassVar[Difficulty]

    def __init__(self, seat: Seat, rng: random.Random | None = None) -> None:
        """Initialize the bot.

        Args:
            seat: Seat this bot controls
            rng: Random source for randomized decisions

        """
        self.seat = seat
        self.rng = rng or random.Random()  # noqa: S311

    def make_bid(self, hand: Sequence[Card], partner_bid: "Bid | int | None") -> Bid:
        """Make a bid for the round.

        Args:
            hand: Bot's 13 cards
            partner_bid: Partner's bid if already placed

        Returns:
            Bid to place (nil or 1-13)

        Raises:
            ValueError: If the bot's hand is empty

        """
        if not hand:
            msg = f"Bot at {self.seat.value} cannot bid on an empty hand"
            raise ValueError(msg)
        return self._choose_bid(hand, partner_bid)

    @abstractmethod
    def _choose_bid(self, hand: Sequence[Card], partner_bid: "Bid | int | None") -> Bid:
        """Choose a bid for a non-empty hand."""

    def pick_card(self, context: BotContext) -> Card:
        """Pick a legal card to play.

        Raises:
            ValueError: If the bot's hand is empty

        """
        hand = context.player.hand
        if not hand:
            msg = f"Bot at {self.seat.value} cannot select a card from an empty hand"
            raise ValueError(msg)

        valid_plays = get_valid_plays(
            hand,
            context.current_trick,
            context.spades_broken,
            is_leading_trick(context.current_trick),
        )
        if len(valid_plays) == 1:
            return valid_plays[0]

        return self._choose_card(valid_plays, context)

    @abstractmethod
    def _choose_card(self, valid_plays: list[Card], context: BotContext) -> Card:
        """Choose among two or more legal plays."""

    def think_time(self, rng: random.Random | None = None) -> float:
        """Suggested delay in seconds before acting.

        Drawn from its own random source so that pacing never shifts the
        bot's decision sequence.
        """
        return get_think_time(self.difficulty, rng)

    def _highest_in_trick(self, context: BotContext) -> PlayedCard:
        """Play currently winning the trick the bot is following."""
        # Only called when following, so the trick is non-empty
        return get_highest_in_trick(context.current_trick)

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.__class__.__name__} ({self.difficulty.value})"


def get_think_time(difficulty: Difficulty, rng: random.Random | None = None) -> float:
    """Thinking delay for a difficulty: base + uniform(0, variance) seconds."""
    rng = rng or random.Random()  # noqa: S311
    base, variance = settings.think_time_range(difficulty)
    return base + rng.random() * variance
