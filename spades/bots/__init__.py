"""Bot AI players for Spades.

Available bots:
- EasyBot: Noisy bids, mostly random play
- MediumBot: Steady bids, wins tricks with the cheapest winning card
- HardBot: Team-balanced bids, occasional nil, partner- and bid-aware play

Hints for the human player reuse MediumBot bidding and HardBot play (see hints.py).
"""

import random

from spades.bots.base_bot import BaseBot, BotContext, get_think_time
from spades.bots.easy_bot import EasyBot
from spades.bots.hard_bot import HardBot
from spades.bots.hints import get_hint_bid, get_hint_card
from spades.bots.medium_bot import MediumBot
from spades.models.enums import Difficulty, Seat

BOT_CLASSES: dict[Difficulty, type[BaseBot]] = {
    Difficulty.EASY: EasyBot,
    Difficulty.MEDIUM: MediumBot,
    Difficulty.HARD: HardBot,
}


def create_bot(difficulty: Difficulty, seat: Seat, rng: random.Random | None = None) -> BaseBot:
    """Create the bot for a difficulty level."""
    return BOT_CLASSES[Difficulty(difficulty)](seat, rng)


__all__ = [
    "BOT_CLASSES",
    "BaseBot",
    "BotContext",
    "EasyBot",
    "HardBot",
    "MediumBot",
    "create_bot",
    "get_hint_bid",
    "get_hint_card",
    "get_think_time",
]
