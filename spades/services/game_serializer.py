"""Game serialization for saving and restoring games.

Converts GameState objects to JSON-compatible dictionaries and back. Cards
are stored by id (``"spades-A"``), seats and enums by value and bids in
their integer encoding.
"""

from typing import Any

from spades.models.bid import Bid
from spades.models.card import get_card
from spades.models.enums import Difficulty, GamePhase, Seat, Suit, Team
from spades.models.game import GameState
from spades.models.player import Player
from spades.models.round import RoundState
from spades.models.scoring import TeamScore
from spades.models.trick import PlayedCard, Trick


def serialize_player(player: Player) -> dict[str, Any]:
    """Serialize a Player to a dictionary."""
    return {
        "position": player.position.value,
        "name": player.name,
        "is_human": player.is_human,
        "hand": [card.id for card in player.hand],
        "bid": player.bid.value,
        "tricks_won": player.tricks_won,
    }


def deserialize_player(data: dict[str, Any]) -> Player:
    """Deserialize a Player from a dictionary."""
    return Player(
        position=Seat(data["position"]),
        name=data["name"],
        is_human=data.get("is_human", False),
        hand=[get_card(card_id) for card_id in data.get("hand", [])],
        bid=Bid.from_value(data.get("bid")),
        tricks_won=data.get("tricks_won", 0),
    )


def serialize_trick(trick: Trick) -> dict[str, Any]:
    """Serialize a Trick to a dictionary."""
    return {
        "cards": [
            {"player": played.player.value, "card": played.card.id} for played in trick.plays
        ],
        "lead_suit": trick.lead_suit.value if trick.lead_suit else None,
        "winner": trick.winner.value if trick.winner else None,
    }


def deserialize_trick(data: dict[str, Any]) -> Trick:
    """Deserialize a Trick from a dictionary."""
    return Trick(
        plays=[
            PlayedCard(card=get_card(pc["card"]), player=Seat(pc["player"]))
            for pc in data.get("cards", [])
        ],
        lead_suit=Suit(data["lead_suit"]) if data.get("lead_suit") else None,
        winner=Seat(data["winner"]) if data.get("winner") else None,
    )


def serialize_round(round_state: RoundState) -> dict[str, Any]:
    """Serialize a RoundState to a dictionary."""
    return {
        "round_number": round_state.round_number,
        "tricks": [serialize_trick(t) for t in round_state.tricks],
        "current_trick": (
            serialize_trick(round_state.current_trick) if round_state.current_trick else None
        ),
        "current_player": round_state.current_player.value,
        "spades_broken": round_state.spades_broken,
        "bids_complete": round_state.bids_complete,
        "scored": round_state.scored,
    }


def deserialize_round(data: dict[str, Any]) -> RoundState:
    """Deserialize a RoundState from a dictionary."""
    current_trick = data.get("current_trick")
    return RoundState(
        round_number=data["round_number"],
        tricks=[deserialize_trick(t) for t in data.get("tricks", [])],
        current_trick=deserialize_trick(current_trick) if current_trick else None,
        current_player=Seat(data["current_player"]),
        spades_broken=data.get("spades_broken", False),
        bids_complete=data.get("bids_complete", False),
        scored=data.get("scored", False),
    )


def serialize_team_score(score: TeamScore) -> dict[str, Any]:
    """Serialize a TeamScore to a dictionary."""
    return {
        "score": score.score,
        "bags": score.bags,
        "round_score": score.round_score,
        "round_bags": score.round_bags,
    }


def deserialize_team_score(data: dict[str, Any]) -> TeamScore:
    """Deserialize a TeamScore from a dictionary."""
    return TeamScore(
        score=data.get("score", 0),
        bags=data.get("bags", 0),
        round_score=data.get("round_score", 0),
        round_bags=data.get("round_bags", 0),
    )


def serialize_game(state: GameState) -> dict[str, Any]:
    """Serialize a complete GameState.

    Args:
        state: Game to serialize

    Returns:
        Dictionary that survives a JSON round trip
    """
    return {
        "id": state.id,
        "phase": state.phase.value,
        "difficulty": state.difficulty.value,
        "players": {seat.value: serialize_player(p) for seat, p in state.players.items()},
        "round": serialize_round(state.round),
        "player_team_score": serialize_team_score(state.player_team_score),
        "opponent_team_score": serialize_team_score(state.opponent_team_score),
        "winner": state.winner.value if state.winner else None,
    }


def deserialize_game(data: dict[str, Any]) -> GameState:
    """Deserialize a GameState.

    Args:
        data: Dictionary produced by serialize_game

    Returns:
        GameState with full state restored
    """
    return GameState(
        id=data.get("id"),
        phase=GamePhase(data["phase"]),
        difficulty=Difficulty(data.get("difficulty", Difficulty.MEDIUM.value)),
        players={
            Seat(seat): deserialize_player(p) for seat, p in data.get("players", {}).items()
        },
        round=deserialize_round(data["round"]),
        player_team_score=deserialize_team_score(data.get("player_team_score", {})),
        opponent_team_score=deserialize_team_score(data.get("opponent_team_score", {})),
        winner=Team(data["winner"]) if data.get("winner") else None,
    )
