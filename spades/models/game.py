"""Game model holding the complete state of one game."""

from dataclasses import dataclass, field

from spades.models.enums import SEAT_ORDER, TEAM_SEATS, Difficulty, GamePhase, Seat, Team
from spades.models.player import Player, create_initial_players
from spades.models.round import RoundState
from spades.models.scoring import TeamScore


@dataclass
class GameState:
    """Represents a complete Spades game.

    Attributes:
        id: Unique game identifier (None before a game is started)
        phase: Current phase of the game
        difficulty: AI difficulty level
        players: The four players keyed by seat
        round: Current round state
        player_team_score: Human team score (south/north)
        opponent_team_score: AI opponents' score (west/east)
        winner: Winning team, or None while the game continues

    """

    id: str | None = None
    phase: GamePhase = GamePhase.WAITING
    difficulty: Difficulty = Difficulty.MEDIUM
    players: dict[Seat, Player] = field(default_factory=create_initial_players)
    round: RoundState = field(default_factory=RoundState)
    player_team_score: TeamScore = field(default_factory=TeamScore)
    opponent_team_score: TeamScore = field(default_factory=TeamScore)
    winner: Team | None = None

    def get_player(self, seat: Seat) -> Player:
        """Get the player at a seat."""
        return self.players[seat]

    def get_current_player(self) -> Player:
        """Get the player whose turn it is."""
        return self.players[self.round.current_player]

    def get_partner(self, seat: Seat) -> Player:
        """Get the partner of the player at a seat."""
        return self.players[seat.partner()]

    def get_team_players(self, team: Team) -> tuple[Player, Player]:
        """Get both players of a team."""
        first, second = TEAM_SEATS[team]
        return self.players[first], self.players[second]

    def get_team_score(self, team: Team) -> TeamScore:
        """Get a team's score."""
        if team == Team.PLAYER:
            return self.player_team_score
        return self.opponent_team_score

    def all_bids_placed(self) -> bool:
        """Check if every seat has bid."""
        return all(self.players[seat].made_bid() for seat in SEAT_ORDER)

    def is_over(self) -> bool:
        """Check if the game has finished."""
        return self.phase == GamePhase.GAME_OVER

    def __str__(self) -> str:
        """Return string representation."""
        return (
            f"Game {self.id}: Round {self.round.round_number}, Phase: {self.phase.value}, "
            f"Score {self.player_team_score.score}-{self.opponent_team_score.score}"
        )
