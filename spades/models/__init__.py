"""Game domain models."""

from spades.models.bid import Bid, BidKind
from spades.models.card import Card, get_card
from spades.models.deck import Deck
from spades.models.enums import Difficulty, GamePhase, Rank, Seat, Suit, Team
from spades.models.game import GameState
from spades.models.game_event import GameEvent, GameEventType, GameHistory, RoundRecord
from spades.models.player import Player
from spades.models.round import RoundState
from spades.models.scoring import RoundScoreResult, TeamScore
from spades.models.trick import PlayedCard, Trick

__all__ = [
    "Bid",
    "BidKind",
    "Card",
    "Deck",
    "Difficulty",
    "GamePhase",
    "GameEvent",
    "GameEventType",
    "GameHistory",
    "GameState",
    "PlayedCard",
    "Player",
    "Rank",
    "RoundRecord",
    "RoundScoreResult",
    "RoundState",
    "Seat",
    "Suit",
    "Team",
    "TeamScore",
    "Trick",
    "get_card",
]
