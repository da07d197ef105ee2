"""Game orchestration: pure state transitions and the table controller."""

from spades.engine.game_controller import GameController
from spades.engine.game_engine import (
    create_game,
    deal_hands,
    finish_round,
    finish_trick,
    get_valid_plays_for_player,
    next_round,
    place_bid,
    play_card,
)

__all__ = [
    "GameController",
    "create_game",
    "deal_hands",
    "finish_round",
    "finish_trick",
    "get_valid_plays_for_player",
    "next_round",
    "place_bid",
    "play_card",
]
