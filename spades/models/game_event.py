"""Game event model for history and replay.

Captures every bid, card and trick of a game plus one record per scored
round.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from spades.models.enums import Seat


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class GameEventType(str, Enum):
    """Types of game events that can be recorded."""

    # Game lifecycle
    GAME_STARTED = "GAME_STARTED"
    GAME_ENDED = "GAME_ENDED"

    # Round events
    ROUND_STARTED = "ROUND_STARTED"
    ROUND_ENDED = "ROUND_ENDED"

    # Bidding
    BID_PLACED = "BID_PLACED"
    BIDDING_COMPLETE = "BIDDING_COMPLETE"

    # Card play
    CARD_PLAYED = "CARD_PLAYED"
    SPADES_BROKEN = "SPADES_BROKEN"
    TRICK_WON = "TRICK_WON"


@dataclass
class GameEvent:
    """Represents a single game event."""

    game_id: str
    event_type: GameEventType
    timestamp: datetime = field(default_factory=_utc_now)
    round_number: int = 0
    trick_number: int | None = None
    player: Seat | None = None
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage/transmission."""
        return {
            "game_id": self.game_id,
            "event_type": self.event_type.value,
            "timestamp": self.timestamp.isoformat(),
            "round_number": self.round_number,
            "trick_number": self.trick_number,
            "player": self.player.value if self.player else None,
            "data": self.data,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameEvent":
        """Create from dictionary."""
        return cls(
            game_id=data["game_id"],
            event_type=GameEventType(data["event_type"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            round_number=data.get("round_number", 0),
            trick_number=data.get("trick_number"),
            player=Seat(data["player"]) if data.get("player") else None,
            data=data.get("data", {}),
        )


@dataclass
class RoundRecord:
    """Outcome of one scored round.

    Bids use the integer encoding (-1 blind nil, 0 nil, 1-13). Team scores
    and bags are the running totals after this round.
    """

    round_number: int
    bids: dict[Seat, int]
    tricks: dict[Seat, int]
    player_team_score: int
    opponent_team_score: int
    player_team_bags: int
    opponent_team_bags: int

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "round_number": self.round_number,
            "bids": {seat.value: bid for seat, bid in self.bids.items()},
            "tricks": {seat.value: tricks for seat, tricks in self.tricks.items()},
            "player_team_score": self.player_team_score,
            "opponent_team_score": self.opponent_team_score,
            "player_team_bags": self.player_team_bags,
            "opponent_team_bags": self.opponent_team_bags,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RoundRecord":
        """Create from dictionary."""
        return cls(
            round_number=data["round_number"],
            bids={Seat(seat): bid for seat, bid in data["bids"].items()},
            tricks={Seat(seat): tricks for seat, tricks in data["tricks"].items()},
            player_team_score=data["player_team_score"],
            opponent_team_score=data["opponent_team_score"],
            player_team_bags=data["player_team_bags"],
            opponent_team_bags=data["opponent_team_bags"],
        )


@dataclass
class GameHistory:
    """Complete record of a finished game."""

    game_id: str
    difficulty: str
    created_at: datetime
    ended_at: datetime
    duration_seconds: int
    winner: str | None
    player_team_score: int
    opponent_team_score: int
    rounds: list[RoundRecord] = field(default_factory=list)
    events: list[GameEvent] = field(default_factory=list)

    @property
    def total_rounds(self) -> int:
        """Number of scored rounds."""
        return len(self.rounds)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return {
            "game_id": self.game_id,
            "difficulty": self.difficulty,
            "created_at": self.created_at.isoformat(),
            "ended_at": self.ended_at.isoformat(),
            "duration_seconds": self.duration_seconds,
            "winner": self.winner,
            "player_team_score": self.player_team_score,
            "opponent_team_score": self.opponent_team_score,
            "rounds": [r.to_dict() for r in self.rounds],
            "events": [e.to_dict() for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameHistory":
        """Create from dictionary."""
        return cls(
            game_id=data["game_id"],
            difficulty=data["difficulty"],
            created_at=datetime.fromisoformat(data["created_at"]),
            ended_at=datetime.fromisoformat(data["ended_at"]),
            duration_seconds=data["duration_seconds"],
            winner=data.get("winner"),
            player_team_score=data["player_team_score"],
            opponent_team_score=data["opponent_team_score"],
            rounds=[RoundRecord.from_dict(r) for r in data.get("rounds", [])],
            events=[GameEvent.from_dict(e) for e in data.get("events", [])],
        )

    def get_summary(self) -> dict[str, Any]:
        """Get summary without rounds and events (for listing)."""
        return {
            "game_id": self.game_id,
            "difficulty": self.difficulty,
            "created_at": self.created_at.isoformat(),
            "duration_seconds": self.duration_seconds,
            "winner": self.winner,
            "player_team_score": self.player_team_score,
            "opponent_team_score": self.opponent_team_score,
            "total_rounds": self.total_rounds,
            "event_count": len(self.events),
        }
