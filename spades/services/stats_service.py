"""Lifetime player statistics."""

import logging
from dataclasses import asdict, dataclass, replace
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlayerStats:
    """Lifetime statistics for the human player.

    Attributes:
        games_played: Games finished
        games_won: Games won by the player's team
        games_lost: Games lost
        total_rounds: Rounds played across all games
        high_score: Best final team score
        win_streak: Current consecutive wins
        best_streak: Longest run of consecutive wins

    """

    games_played: int = 0
    games_won: int = 0
    games_lost: int = 0
    total_rounds: int = 0
    high_score: int = 0
    win_streak: int = 0
    best_streak: int = 0

    @property
    def win_rate(self) -> float:
        """Fraction of finished games won (0.0 before any game)."""
        if self.games_played == 0:
            return 0.0
        return self.games_won / self.games_played

    def record_game(
        self,
        won: bool | None = None,
        rounds_played: int = 0,
        high_score: int = 0,
    ) -> "PlayerStats":
        """Return updated stats after a game.

        Args:
            won: Game result; None records only rounds and score
            rounds_played: Rounds to add to the total
            high_score: Final team score, kept if it beats the best so far

        Raises:
            ValueError: If rounds_played or high_score is negative

        """
        if isinstance(rounds_played, bool) or not isinstance(rounds_played, int) or rounds_played < 0:
            msg = f"Invalid rounds_played value: {rounds_played!r}"
            raise ValueError(msg)
        if isinstance(high_score, bool) or not isinstance(high_score, int) or high_score < 0:
            msg = f"Invalid high_score value: {high_score!r}"
            raise ValueError(msg)

        updated = replace(
            self,
            total_rounds=self.total_rounds + rounds_played,
            high_score=max(self.high_score, high_score),
        )
        if won is None:
            return updated

        if won:
            updated = replace(
                updated,
                games_played=self.games_played + 1,
                games_won=self.games_won + 1,
                win_streak=self.win_streak + 1,
                best_streak=max(self.best_streak, self.win_streak + 1),
            )
        else:
            updated = replace(
                updated,
                games_played=self.games_played + 1,
                games_lost=self.games_lost + 1,
                win_streak=0,
            )
        logger.debug("Recorded %s: %s", "win" if won else "loss", updated)
        return updated

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for storage."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlayerStats":
        """Create from dictionary, ignoring unknown keys."""
        fields = cls.__dataclass_fields__
        return cls(**{key: value for key, value in data.items() if key in fields})
