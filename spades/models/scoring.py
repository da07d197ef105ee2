"""Score calculation for Spades.

Handles standard bid scoring (10 points per bid trick), nil and blind nil
bonuses/penalties, bag accumulation with the 10-bag penalty, and winner
detection at 500 points.
"""

from dataclasses import dataclass, field

from spades.constants import (
    BAG_PENALTY,
    BAG_PENALTY_THRESHOLD,
    BLIND_NIL_BONUS,
    BLIND_NIL_PENALTY,
    NIL_BONUS,
    NIL_PENALTY,
    POINTS_PER_BAG,
    POINTS_PER_BID,
    WINNING_SCORE,
)
from spades.models.bid import Bid
from spades.models.enums import Team


@dataclass
class TeamScore:
    """A team's score across rounds.

    Attributes:
        score: Cumulative score
        bags: Bags carried into the next round (0-9)
        round_score: Points earned or lost in the last round
        round_bags: Change in the bag count in the last round

    """

    score: int = 0
    bags: int = 0
    round_score: int = 0
    round_bags: int = 0


@dataclass(frozen=True)
class RoundScoreResult:
    """Outcome of scoring one team for one round."""

    points: int
    bags: int
    bag_penalty: bool
    nil_bonuses: int = 0
    nil_penalties: int = 0
    details: tuple[str, ...] = field(default_factory=tuple)


def _score_nil(bid: Bid, tricks: int, label: str, details: list[str]) -> int:
    """Bonus or penalty for a nil/blind nil bidder (0 for other bids)."""
    if not bid.is_nil:
        return 0

    name = "Blind Nil" if bid.is_blind_nil else "Nil"
    if tricks == 0:
        bonus = BLIND_NIL_BONUS if bid.is_blind_nil else NIL_BONUS
        details.append(f"{label}{name} made: +{bonus}")
        return bonus

    penalty = BLIND_NIL_PENALTY if bid.is_blind_nil else NIL_PENALTY
    details.append(f"{label}{name} failed ({tricks} tricks): {penalty}")
    return penalty


def calculate_round_score(
    bid1: "Bid | int | None",
    tricks1: int,
    bid2: "Bid | int | None",
    tricks2: int,
    current_bags: int,
) -> RoundScoreResult:
    """Calculate one team's score for a round.

    Scoring rules:
    - Each nil bidder: +100 with no tricks, otherwise -100 (blind nil +/-200)
    - Team contract is the sum of the non-nil bids, met by non-nil tricks only
    - Made: +10 per bid trick and +1 per overtrick, overtricks become bags
    - Set: -10 per bid trick, no bags
    - Reaching 10 bags: -100 and the bag count drops by 10 (once per round)

    Args:
        bid1: First partner's bid (``Bid`` or -1/0/1-13; None counts as nil)
        tricks1: Tricks won by the first partner
        bid2: Second partner's bid
        tricks2: Tricks won by the second partner
        current_bags: Team bags before this round

    Returns:
        Points for the round and the new bag count

    """
    first = Bid.from_value(0 if bid1 is None else bid1)
    second = Bid.from_value(0 if bid2 is None else bid2)

    details: list[str] = []
    points = 0
    new_bags = current_bags
    bag_penalty = False

    nil_points = [
        _score_nil(first, tricks1, "", details),
        _score_nil(second, tricks2, "Partner ", details),
    ]
    points += sum(nil_points)
    nil_bonuses = sum(p for p in nil_points if p > 0)
    nil_penalties = sum(-p for p in nil_points if p < 0)

    team_bid = first.contract + second.contract
    non_nil_tricks = (0 if first.is_nil else tricks1) + (0 if second.is_nil else tricks2)

    if team_bid > 0:
        if non_nil_tricks >= team_bid:
            points += team_bid * POINTS_PER_BID
            details.append(f"Bid {team_bid}, made {non_nil_tricks}: +{team_bid * POINTS_PER_BID}")

            overtricks = non_nil_tricks - team_bid
            if overtricks > 0:
                points += overtricks * POINTS_PER_BAG
                new_bags += overtricks
                details.append(f"Overtricks (bags): +{overtricks}")
        else:
            points -= team_bid * POINTS_PER_BID
            details.append(
                f"Bid {team_bid}, only made {non_nil_tricks}: -{team_bid * POINTS_PER_BID}"
            )

    if new_bags >= BAG_PENALTY_THRESHOLD:
        points += BAG_PENALTY
        new_bags -= BAG_PENALTY_THRESHOLD
        bag_penalty = True
        details.append(f"{BAG_PENALTY_THRESHOLD} bags penalty: {BAG_PENALTY}")

    return RoundScoreResult(
        points=points,
        bags=new_bags,
        bag_penalty=bag_penalty,
        nil_bonuses=nil_bonuses,
        nil_penalties=nil_penalties,
        details=tuple(details),
    )


def update_team_score(current: TeamScore, result: RoundScoreResult) -> TeamScore:
    """Apply a round result to a team score, returning a new score."""
    return TeamScore(
        score=current.score + result.points,
        bags=result.bags,
        round_score=result.points,
        round_bags=result.bags - current.bags,
    )


def check_winner(
    player_team_score: int, opponent_team_score: int, winning_score: int = WINNING_SCORE
) -> Team | None:
    """Check if a team has reached the winning score.

    If both teams pass it in the same round, the higher score wins. An exact
    tie at or above the winning score is not a win and play continues.
    """
    player_won = player_team_score >= winning_score
    opponent_won = opponent_team_score >= winning_score

    if player_won and opponent_won:
        if player_team_score > opponent_team_score:
            return Team.PLAYER
        if opponent_team_score > player_team_score:
            return Team.OPPONENT
        return None

    if player_won:
        return Team.PLAYER
    if opponent_won:
        return Team.OPPONENT
    return None


def get_score_summary(
    player_team: TeamScore, opponent_team: TeamScore, winning_score: int = WINNING_SCORE
) -> dict[str, int]:
    """Get score summary for display."""
    return {
        "player_score": player_team.score,
        "opponent_score": opponent_team.score,
        "player_bags": player_team.bags,
        "opponent_bags": opponent_team.bags,
        "player_to_win": max(0, winning_score - player_team.score),
        "opponent_to_win": max(0, winning_score - opponent_team.score),
    }


def format_score(score: int) -> str:
    """Format a score with an explicit sign."""
    return f"+{score}" if score >= 0 else str(score)


def format_bid(bid: "Bid | int | None") -> str:
    """Format a bid for display."""
    return str(Bid.from_value(bid))
