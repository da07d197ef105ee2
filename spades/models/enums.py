"""Enums and constants for the game."""

from enum import Enum


class GamePhase(str, Enum):
    """Game phases during the lifecycle.

    waiting -> dealing -> bidding -> playing -> round_end -> (dealing | game_over)
    """

    WAITING = "waiting"
    DEALING = "dealing"
    BIDDING = "bidding"
    PLAYING = "playing"
    ROUND_END = "round_end"
    GAME_OVER = "game_over"


class Difficulty(str, Enum):
    """AI difficulty levels."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Suit(str, Enum):
    """Card suits. Spades are always trump."""

    SPADES = "spades"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"


class Rank(str, Enum):
    """Card ranks from lowest to highest."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def value_rank(self) -> int:
        """Numeric rank used for comparisons (2=2 ... A=14)."""
        return RANK_VALUES[self]


class Team(str, Enum):
    """Partnerships. Partners sit across from each other."""

    PLAYER = "player"
    OPPONENT = "opponent"


class Seat(str, Enum):
    """Table positions in clockwise order, starting from the human seat."""

    SOUTH = "south"
    WEST = "west"
    NORTH = "north"
    EAST = "east"

    def next_seat(self) -> "Seat":
        """Return the next seat clockwise."""
        index = SEAT_ORDER.index(self)
        return SEAT_ORDER[(index + 1) % len(SEAT_ORDER)]

    def partner(self) -> "Seat":
        """Return the seat across the table."""
        index = SEAT_ORDER.index(self)
        return SEAT_ORDER[(index + 2) % len(SEAT_ORDER)]

    @property
    def team(self) -> Team:
        """Team this seat belongs to."""
        if self in (Seat.SOUTH, Seat.NORTH):
            return Team.PLAYER
        return Team.OPPONENT


RANK_VALUES: dict[Rank, int] = {rank: index + 2 for index, rank in enumerate(Rank)}

SUITS: list[Suit] = [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]
RANKS: list[Rank] = list(Rank)

SEAT_ORDER: list[Seat] = [Seat.SOUTH, Seat.WEST, Seat.NORTH, Seat.EAST]

# Fixed dealer; the seat on its left opens bidding and the first trick
DEALER = Seat.SOUTH
HUMAN_SEAT = Seat.SOUTH

TEAM_SEATS: dict[Team, tuple[Seat, Seat]] = {
    Team.PLAYER: (Seat.SOUTH, Seat.NORTH),
    Team.OPPONENT: (Seat.WEST, Seat.EAST),
}
