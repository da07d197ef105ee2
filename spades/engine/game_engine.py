"""Game state transitions.

Every function takes a ``GameState`` and returns a new one; the input is never
modified. Phases move

    waiting -> dealing -> bidding -> playing -> round_end -> bidding ...
                                                          -> game_over

Bad input (an illegal card, an out-of-range bid) raises ``InvalidMoveError``;
acting in the wrong phase or out of turn raises ``GameStateError``.
"""

import copy
import logging
import random
import uuid
from collections.abc import Iterable

from spades.config import settings
from spades.exceptions import GameStateError, InvalidMoveError
from spades.models.bid import Bid
from spades.models.card import Card
from spades.models.deck import deal_cards
from spades.models.enums import DEALER, SEAT_ORDER, Difficulty, GamePhase, Seat, Team
from spades.models.game import GameState
from spades.models.round import RoundState
from spades.models.rules import (
    get_valid_plays,
    is_leading_trick,
    is_valid_bid,
    would_break_spades,
)
from spades.models.scoring import calculate_round_score, check_winner, update_team_score
from spades.models.trick import Trick

logger = logging.getLogger(__name__)


def _require_phase(state: GameState, *phases: GamePhase) -> None:
    if state.phase not in phases:
        expected = " or ".join(phase.value for phase in phases)
        msg = f"Expected phase {expected}, game is in {state.phase.value}"
        raise GameStateError(msg)


def _require_turn(state: GameState, seat: Seat) -> None:
    if state.round.current_player != seat:
        msg = f"Not {seat.value}'s turn (waiting on {state.round.current_player.value})"
        raise GameStateError(msg)


def _next_seat_to_bid(state: GameState, start: Seat) -> Seat | None:
    """First seat from ``start`` clockwise that has not bid yet."""
    seat = start
    for _ in SEAT_ORDER:
        if not state.players[seat].made_bid():
            return seat
        seat = seat.next_seat()
    return None


def create_game(difficulty: Difficulty | None = None, game_id: str | None = None) -> GameState:
    """Allocate a fresh game ready to be dealt.

    A new id is assigned on every call; AI actions scheduled for an older id
    must be discarded by the caller.
    """
    state = GameState(
        id=game_id or str(uuid.uuid4()),
        phase=GamePhase.DEALING,
        difficulty=Difficulty(difficulty or settings.default_difficulty),
    )
    logger.info("Created game %s (%s)", state.id, state.difficulty.value)
    return state


def deal_hands(
    state: GameState,
    rng: random.Random | None = None,
    blind_nil_seats: Iterable[Seat] = (),
) -> GameState:
    """Deal 13 cards to every seat and open bidding.

    Seats in ``blind_nil_seats`` have declared blind nil before seeing their
    cards; their bid is placed as part of the deal and bidding skips them.
    The seat left of the dealer bids and leads first.
    """
    _require_phase(state, GamePhase.DEALING)
    blind = set(blind_nil_seats)
    new_state = copy.deepcopy(state)
    hands = deal_cards(rng)

    for seat, player in new_state.players.items():
        player.reset_round(hands[seat])
        if seat in blind:
            player.bid = Bid.blind_nil()
            logger.info("Seat %s declared blind nil in game %s", seat.value, state.id)

    lead_seat = DEALER.next_seat()
    new_state.round = RoundState(round_number=state.round.round_number, current_player=lead_seat)

    next_bidder = _next_seat_to_bid(new_state, lead_seat)
    if next_bidder is None:
        new_state.round.bids_complete = True
        new_state.phase = GamePhase.PLAYING
    else:
        new_state.round.current_player = next_bidder
        new_state.phase = GamePhase.BIDDING

    logger.debug("Dealt round %d in game %s", new_state.round.round_number, state.id)
    return new_state


def place_bid(state: GameState, seat: Seat, bid: "Bid | int") -> GameState:
    """Record a seat's bid and pass the turn.

    Once all four seats have bid, play starts with the seat left of the dealer.

    Raises:
        InvalidMoveError: If the bid is outside 0-13 (blind nil is only
            accepted with the deal)
        GameStateError: If not bidding or not this seat's turn

    """
    _require_phase(state, GamePhase.BIDDING)
    _require_turn(state, seat)

    value = bid.value if isinstance(bid, Bid) else bid
    if not is_valid_bid(value):
        msg = f"Invalid bid {value!r}: must be 0-13, blind nil is declared before the deal"
        raise InvalidMoveError(msg)

    new_state = copy.deepcopy(state)
    new_state.players[seat].bid = Bid.from_value(value)
    logger.info("Seat %s bid %s in game %s", seat.value, new_state.players[seat].bid, state.id)

    next_bidder = _next_seat_to_bid(new_state, seat.next_seat())
    if next_bidder is None:
        new_state.round.bids_complete = True
        new_state.round.current_player = DEALER.next_seat()
        new_state.phase = GamePhase.PLAYING
        logger.info("Bidding complete for round %d in game %s", state.round.round_number, state.id)
    else:
        new_state.round.current_player = next_bidder
    return new_state


def get_valid_plays_for_player(state: GameState, seat: Seat) -> list[Card]:
    """Legal cards for a seat given the current trick."""
    trick = state.round.current_trick
    return get_valid_plays(
        state.players[seat].hand, trick, state.round.spades_broken, is_leading_trick(trick)
    )


def play_card(state: GameState, seat: Seat, card: Card) -> GameState:
    """Play a card from a seat's hand into the current trick.

    When the card completes the trick the turn stays with this seat until
    ``finish_trick`` resolves it.

    Raises:
        InvalidMoveError: If the card is not in hand or not a legal play
        GameStateError: If not playing, out of turn, or the trick awaits resolution

    """
    _require_phase(state, GamePhase.PLAYING)
    _require_turn(state, seat)

    current_trick = state.round.current_trick
    if current_trick is not None and current_trick.is_complete():
        msg = "Trick is complete and must be finished before the next play"
        raise GameStateError(msg)

    if not state.players[seat].has_card(card):
        msg = f"Card {card} is not in {seat.value}'s hand"
        raise InvalidMoveError(msg)
    if card not in get_valid_plays_for_player(state, seat):
        msg = f"Card {card} is not a legal play"
        raise InvalidMoveError(msg)

    new_state = copy.deepcopy(state)
    round_state = new_state.round

    if would_break_spades(card, round_state.current_trick, round_state.spades_broken):
        round_state.spades_broken = True
        logger.debug("Spades broken by %s in game %s", seat.value, state.id)

    if round_state.current_trick is None:
        round_state.current_trick = Trick()
    round_state.current_trick.add_card(seat, card)
    new_state.players[seat].remove_card(card)

    if not round_state.current_trick.is_complete():
        round_state.current_player = seat.next_seat()
    return new_state


def finish_trick(state: GameState) -> GameState:
    """Award the completed trick; its winner leads the next one.

    After the 13th trick the game moves to ``round_end``.

    Raises:
        GameStateError: If there is no complete trick to finish

    """
    _require_phase(state, GamePhase.PLAYING)
    trick = state.round.current_trick
    if trick is None or not trick.is_complete():
        msg = "No complete trick to finish"
        raise GameStateError(msg)

    new_state = copy.deepcopy(state)
    round_state = new_state.round
    completed = round_state.current_trick
    winner = completed.determine_winner()

    new_state.players[winner].tricks_won += 1
    round_state.tricks.append(completed)
    round_state.current_trick = None
    round_state.current_player = winner
    logger.debug(
        "Trick %d of round %d won by %s in game %s",
        len(round_state.tricks),
        round_state.round_number,
        winner.value,
        state.id,
    )

    if round_state.is_complete():
        new_state.phase = GamePhase.ROUND_END
    return new_state


def finish_round(state: GameState, winning_score: int | None = None) -> GameState:
    """Score both teams for the finished round and check for a winner.

    The phase stays ``round_end`` unless a team has won, in which case it
    becomes ``game_over``.

    Raises:
        GameStateError: If the round is unfinished or already scored

    """
    _require_phase(state, GamePhase.ROUND_END)
    if state.round.scored:
        msg = f"Round {state.round.round_number} has already been scored"
        raise GameStateError(msg)

    new_state = copy.deepcopy(state)
    for team in Team:
        first, second = new_state.get_team_players(team)
        current = new_state.get_team_score(team)
        result = calculate_round_score(
            first.bid, first.tricks_won, second.bid, second.tricks_won, current.bags
        )
        updated = update_team_score(current, result)
        if team == Team.PLAYER:
            new_state.player_team_score = updated
        else:
            new_state.opponent_team_score = updated
        logger.info(
            "Round %d %s team: %+d (total %d, bags %d)%s",
            state.round.round_number,
            team.value,
            result.points,
            updated.score,
            updated.bags,
            ", bag penalty" if result.bag_penalty else "",
        )

    new_state.round.scored = True
    new_state.winner = check_winner(
        new_state.player_team_score.score,
        new_state.opponent_team_score.score,
        winning_score or settings.winning_score,
    )
    if new_state.winner is not None:
        new_state.phase = GamePhase.GAME_OVER
        logger.info("Game %s over, %s team wins", state.id, new_state.winner.value)
    return new_state


def next_round(
    state: GameState,
    rng: random.Random | None = None,
    blind_nil_seats: Iterable[Seat] = (),
) -> GameState:
    """Start the next round: bump the round number and redeal.

    Raises:
        GameStateError: If the current round has not been scored

    """
    _require_phase(state, GamePhase.ROUND_END)
    if not state.round.scored:
        msg = "Round must be scored before the next one starts"
        raise GameStateError(msg)

    new_state = copy.deepcopy(state)
    new_state.round = RoundState(round_number=state.round.round_number + 1)
    new_state.phase = GamePhase.DEALING
    logger.info("Starting round %d in game %s", new_state.round.round_number, state.id)
    return deal_hands(new_state, rng, blind_nil_seats)
