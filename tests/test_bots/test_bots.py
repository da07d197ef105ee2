"""Tests for the bot strategies and hints."""

import random

import pytest

from spades.bots import (
    BOT_CLASSES,
    BotContext,
    EasyBot,
    HardBot,
    MediumBot,
    create_bot,
    get_hint_bid,
    get_hint_card,
    get_think_time,
)
from spades.bots.base_bot import (
    adjusted_bid_estimate,
    clamp_bid,
    find_highest_card,
    find_lowest_card,
    get_winning_cards,
    partner_contract,
    round_half_up,
)
from spades.bots.hard_bot import balanced_bid, choose_follow, choose_lead, is_nil_candidate
from spades.config import settings
from spades.models.bid import Bid
from spades.models.card import get_card
from spades.models.enums import Difficulty, Seat
from spades.models.player import Player
from spades.models.rules import get_valid_plays
from spades.models.trick import PlayedCard, Trick


def cards(*ids):
    return [get_card(card_id) for card_id in ids]


def make_trick(*plays):
    trick = Trick()
    for seat, card_id in plays:
        trick.add_card(seat, get_card(card_id))
    return trick


def make_context(seat, hand, trick=None, bid=3, tricks_won=0, spades_broken=False):  # noqa: PLR0913
    player = Player(seat, seat.value, hand=list(hand), bid=Bid.from_value(bid), tricks_won=tricks_won)
    partner = Player(seat.partner(), seat.partner().value)
    return BotContext(
        player=player, partner=partner, current_trick=trick, spades_broken=spades_broken
    )


# Estimate 5 (3 aces, 2 protected kings, 3 high spades) + 1 for five spades = 6
STRONG_HAND = cards(
    "spades-A",
    "spades-K",
    "spades-Q",
    "spades-J",
    "spades-10",
    "hearts-A",
    "hearts-K",
    "hearts-3",
    "diamonds-A",
    "diamonds-4",
    "diamonds-2",
    "clubs-5",
    "clubs-3",
)

# Estimate 3 (3 aces, one high spade)
MODEST_HAND = cards(
    "spades-A",
    "spades-2",
    "hearts-A",
    "hearts-3",
    "hearts-4",
    "diamonds-A",
    "diamonds-3",
    "diamonds-4",
    "clubs-2",
    "clubs-3",
    "clubs-4",
    "clubs-5",
    "clubs-6",
)

# No honours, one spade (singleton): 0.3
WEAK_HAND = cards(
    "spades-2",
    "hearts-2",
    "hearts-3",
    "hearts-4",
    "hearts-5",
    "diamonds-2",
    "diamonds-3",
    "diamonds-4",
    "diamonds-5",
    "clubs-2",
    "clubs-3",
    "clubs-4",
    "clubs-5",
)


# =============================================================================
# SHARED HEURISTICS
# =============================================================================


class TestHeuristics:
    """Test helpers shared by all bots."""

    def test_round_half_up(self):
        """Halves round up."""
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(1.49) == 1

    def test_clamp_bid(self):
        """Bids are clamped to 1-13."""
        assert clamp_bid(0.3) == 1
        assert clamp_bid(6.0) == 6
        assert clamp_bid(15) == 13

    def test_adjusted_estimate(self):
        """Spade length, voids and singletons add to the estimate."""
        assert adjusted_bid_estimate(STRONG_HAND) == pytest.approx(6.0)
        assert adjusted_bid_estimate(MODEST_HAND) == pytest.approx(3.0)
        assert adjusted_bid_estimate(WEAK_HAND) == pytest.approx(0.3)

    def test_void_bonus(self):
        """Each void suit adds half a trick."""
        hand = cards("spades-2", "spades-3", "hearts-2", "hearts-3")
        assert adjusted_bid_estimate(hand) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        ("partner_bid", "expected"),
        [(None, None), (-1, None), (0, 0), (4, 4), (Bid.standard(7), 7)],
    )
    def test_partner_contract(self, partner_bid, expected):
        """Unplaced and blind nil bids are ignored for balancing."""
        assert partner_contract(partner_bid) == expected

    def test_find_lowest_and_highest(self):
        """Lowest and highest by rank, first on ties."""
        hand = cards("hearts-5", "clubs-2", "diamonds-A", "spades-2")
        assert find_lowest_card(hand) == get_card("clubs-2")
        assert find_highest_card(hand) == get_card("diamonds-A")

    def test_find_on_empty_raises(self):
        """Empty lists are rejected."""
        with pytest.raises(ValueError):
            find_lowest_card([])
        with pytest.raises(ValueError):
            find_highest_card([])

    def test_get_winning_cards(self):
        """Higher cards of the winning suit, or any spade over a non-spade."""
        highest = PlayedCard(get_card("hearts-10"), Seat.WEST)
        hand = cards("hearts-9", "hearts-J", "spades-2", "clubs-A")
        assert get_winning_cards(hand, highest) == cards("hearts-J", "spades-2")

        spade_high = PlayedCard(get_card("spades-5"), Seat.WEST)
        assert get_winning_cards(hand, spade_high) == []


# =============================================================================
# BIDDING
# =============================================================================


class TestEasyBot:
    """Test the easy bot."""

    def test_bid_near_estimate(self):
        """Easy bids the estimate give or take one."""
        for seed in range(20):
            bot = EasyBot(Seat.WEST, random.Random(seed))
            bid = bot.make_bid(STRONG_HAND, None)
            assert bid.value in (5, 6, 7)

    def test_weak_hand_bids_at_least_one(self):
        """Bids never drop below 1."""
        bot = EasyBot(Seat.WEST, random.Random(3))
        assert bot.make_bid(WEAK_HAND, None).value >= 1

    def test_plays_lowest_when_not_random(self, always_high):
        """Without the random branch the lowest legal card is played."""
        bot = EasyBot(Seat.WEST, always_high)
        context = make_context(Seat.WEST, cards("hearts-K", "clubs-4", "diamonds-9"))
        assert bot.pick_card(context) == get_card("clubs-4")

    def test_random_play_is_legal(self, always_low):
        """The random branch still picks a legal card."""
        bot = EasyBot(Seat.EAST, always_low)
        hand = cards("hearts-K", "hearts-2", "clubs-4", "spades-9")
        trick = make_trick((Seat.WEST, "hearts-5"))
        context = make_context(Seat.EAST, hand, trick)
        assert bot.pick_card(context) in cards("hearts-K", "hearts-2")


class TestMediumBot:
    """Test the medium bot."""

    @pytest.mark.parametrize(
        ("partner_bid", "expected"),
        [(None, 6), (Bid.not_bid(), 6), (5, 6), (6, 5), (0, 6)],
    )
    def test_bid_balances_against_partner(self, partner_bid, expected):
        """One lower when the team would bid more than 11."""
        bot = MediumBot(Seat.NORTH, random.Random(1))
        assert bot.make_bid(STRONG_HAND, partner_bid) == Bid.standard(expected)

    def test_weak_hand_bids_one(self):
        """Medium never bids nil."""
        bot = MediumBot(Seat.NORTH, random.Random(1))
        assert bot.make_bid(WEAK_HAND, None) == Bid.standard(1)

    def test_follow_with_cheapest_winner(self):
        """Win with the lowest card that beats the trick."""
        bot = MediumBot(Seat.WEST, random.Random(1))
        hand = cards("spades-3", "hearts-A", "hearts-Q", "hearts-2")
        trick = make_trick((Seat.SOUTH, "hearts-10"))
        assert bot.pick_card(make_context(Seat.WEST, hand, trick)) == get_card("hearts-Q")

    def test_follow_low_when_cannot_win(self):
        """Dump the lowest card when nothing wins."""
        bot = MediumBot(Seat.EAST, random.Random(1))
        hand = cards("hearts-A", "hearts-2")
        trick = make_trick((Seat.WEST, "hearts-10"), (Seat.NORTH, "spades-5"))
        assert bot.pick_card(make_context(Seat.EAST, hand, trick)) == get_card("hearts-2")

    def test_lead_highest_non_spade(self, always_low):
        """Usually leads the highest non-spade."""
        bot = MediumBot(Seat.WEST, always_low)
        hand = cards("spades-A", "hearts-K", "diamonds-3")
        assert bot.pick_card(make_context(Seat.WEST, hand)) == get_card("hearts-K")

    def test_lead_random_non_spade(self, always_high):
        """Otherwise a random non-spade."""
        bot = MediumBot(Seat.WEST, always_high)
        hand = cards("spades-A", "hearts-K", "diamonds-3")
        assert bot.pick_card(make_context(Seat.WEST, hand, spades_broken=True)) in cards(
            "hearts-K", "diamonds-3"
        )

    def test_lead_only_spades(self):
        """With only spades, the first legal card is led."""
        bot = MediumBot(Seat.WEST, random.Random(1))
        hand = cards("spades-A", "spades-3")
        assert bot.pick_card(make_context(Seat.WEST, hand)) == get_card("spades-A")


class TestHardBot:
    """Test the hard bot."""

    @pytest.mark.parametrize(
        ("hand", "partner_bid", "expected"),
        [
            (STRONG_HAND, None, 6),
            (STRONG_HAND, 6, 6),
            (STRONG_HAND, 7, 4),
            (MODEST_HAND, 2, 4),
            (MODEST_HAND, 3, 3),
            (WEAK_HAND, 3, 1),
        ],
    )
    def test_balanced_bid(self, hand, partner_bid, expected):
        """Team totals above 12 drop two; below 6 add one."""
        assert balanced_bid(hand, partner_bid) == expected

    def test_nil_candidate(self):
        """Only weak hands without honours and with few spades go nil."""
        assert is_nil_candidate(WEAK_HAND)
        assert not is_nil_candidate(MODEST_HAND)

    def test_bids_nil_sometimes(self, always_low, always_high):
        """Weak hands bid nil when the 30% branch fires."""
        assert HardBot(Seat.EAST, always_low).make_bid(WEAK_HAND, None) == Bid.nil()
        assert HardBot(Seat.EAST, always_high).make_bid(WEAK_HAND, None) == Bid.standard(1)

    def test_strong_hand_never_nil(self, always_low):
        """Strong hands never bid nil."""
        assert HardBot(Seat.EAST, always_low).make_bid(STRONG_HAND, None) == Bid.standard(6)

    def test_lead_cashes_ace(self):
        """A non-spade Ace is led while tricks are needed."""
        valid = cards("diamonds-K", "hearts-A", "diamonds-Q", "diamonds-2", "clubs-3")
        assert choose_lead(valid, tricks_needed=2) == get_card("hearts-A")

    def test_lead_longest_suit(self):
        """Without an Ace, lead the top of the longest suit."""
        valid = cards("diamonds-K", "diamonds-Q", "diamonds-2", "clubs-3")
        assert choose_lead(valid, tricks_needed=2) == get_card("diamonds-K")

    def test_lead_low_once_bid_made(self):
        """Once the bid is made, lead the lowest card."""
        valid = cards("hearts-A", "diamonds-K", "diamonds-2", "clubs-3")
        assert choose_lead(valid, tricks_needed=0) == get_card("diamonds-2")

    def test_follow_lets_partner_win(self):
        """When the partner is winning, play low."""
        trick = make_trick((Seat.NORTH, "hearts-K"), (Seat.EAST, "hearts-3"))
        valid = cards("hearts-A", "hearts-2")
        assert choose_follow(valid, trick, 2, Seat.NORTH) == get_card("hearts-2")

    def test_follow_wins_cheaply_when_needed(self):
        """Take the trick from an opponent with the cheapest winner."""
        trick = make_trick((Seat.EAST, "hearts-K"))
        valid = cards("hearts-A", "hearts-2")
        assert choose_follow(valid, trick, 1, Seat.NORTH) == get_card("hearts-A")
        assert choose_follow(valid, trick, 0, Seat.NORTH) == get_card("hearts-2")

    def test_pick_card_uses_context(self):
        """pick_card reads the bid and tricks won from the context."""
        bot = HardBot(Seat.SOUTH, random.Random(1))
        hand = cards("hearts-A", "hearts-2")
        trick = make_trick((Seat.EAST, "hearts-K"))
        needing = make_context(Seat.SOUTH, hand, trick, bid=3, tricks_won=1)
        made = make_context(Seat.SOUTH, hand, trick, bid=3, tricks_won=3)
        assert bot.pick_card(needing) == get_card("hearts-A")
        assert bot.pick_card(made) == get_card("hearts-2")


# =============================================================================
# COMMON BOT BEHAVIOUR
# =============================================================================


class TestBaseBot:
    """Test behaviour shared by all bots."""

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_create_bot(self, difficulty):
        """The factory maps difficulties to bot classes."""
        bot = create_bot(difficulty, Seat.WEST, random.Random(1))
        assert isinstance(bot, BOT_CLASSES[difficulty])
        assert bot.seat == Seat.WEST
        assert bot.difficulty == difficulty

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_empty_hand_raises(self, difficulty):
        """Bidding or picking from an empty hand is a programming error."""
        bot = create_bot(difficulty, Seat.WEST, random.Random(1))
        with pytest.raises(ValueError, match="empty hand"):
            bot.pick_card(make_context(Seat.WEST, []))
        with pytest.raises(ValueError, match="empty hand"):
            bot.make_bid([], None)
        with pytest.raises(ValueError, match="empty hand"):
            bot.make_bid([], 4)

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_single_legal_play_forced(self, difficulty):
        """With one legal card every bot plays it."""
        bot = create_bot(difficulty, Seat.EAST, random.Random(1))
        hand = cards("hearts-2", "clubs-A", "spades-A")
        trick = make_trick((Seat.WEST, "hearts-K"))
        assert bot.pick_card(make_context(Seat.EAST, hand, trick)) == get_card("hearts-2")

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_always_legal(self, difficulty):
        """Bots only ever pick legal cards."""
        rng = random.Random(11)
        bot = create_bot(difficulty, Seat.EAST, rng)
        hand = cards("hearts-2", "clubs-2", "clubs-A", "spades-A", "diamonds-5")
        trick = make_trick((Seat.WEST, "clubs-K"), (Seat.NORTH, "clubs-3"))
        valid = get_valid_plays(hand, trick, False, False)
        for _ in range(20):
            assert bot.pick_card(make_context(Seat.EAST, hand, trick)) in valid

    @pytest.mark.parametrize("difficulty", list(Difficulty))
    def test_think_time_range(self, difficulty):
        """Think time is base plus up to the variance."""
        base, variance = settings.think_time_range(difficulty)
        rng = random.Random(5)
        for _ in range(20):
            delay = get_think_time(difficulty, rng)
            assert base <= delay <= base + variance

    def test_think_time_does_not_touch_decision_rng(self):
        """Pacing draws from its own random source."""
        decision_rng = random.Random(8)
        bot = EasyBot(Seat.WEST, decision_rng)
        state_before = decision_rng.getstate()
        bot.think_time(random.Random(1))
        assert decision_rng.getstate() == state_before


# =============================================================================
# HINTS
# =============================================================================


class TestHints:
    """Test suggestions for the human seat."""

    def test_hint_bid(self):
        """Hint bids balance against the partner like the medium bot."""
        assert get_hint_bid(STRONG_HAND, None) == 6
        assert get_hint_bid(STRONG_HAND, 6) == 5
        assert get_hint_bid(MODEST_HAND, 9) == 2
        assert get_hint_bid(WEAK_HAND, None) == 1

    def test_hint_card_lead(self):
        """Leading: cash a non-spade Ace while tricks are needed."""
        hand = cards("spades-K", "hearts-A", "hearts-4", "clubs-7")
        assert get_hint_card(hand, None, False, 3, 0) == get_card("hearts-A")

    def test_hint_card_follow_partner_winning(self):
        """Following: play low under a winning partner."""
        hand = cards("hearts-A", "hearts-2")
        trick = make_trick((Seat.NORTH, "hearts-K"), (Seat.EAST, "hearts-3"))
        assert get_hint_card(hand, trick, False, 3, 0, Seat.SOUTH) == get_card("hearts-2")

    def test_hint_card_empty_hand(self):
        """No cards, no hint."""
        assert get_hint_card([], None, False, 3, 0) is None

    def test_hint_is_deterministic(self):
        """The same state always gives the same hint."""
        hand = cards("hearts-9", "hearts-4", "clubs-7", "diamonds-J")
        hints = {get_hint_card(hand, None, False, 4, 1) for _ in range(10)}
        assert len(hints) == 1
