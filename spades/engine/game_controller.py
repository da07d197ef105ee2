"""Driver for one table: the human seat plus three bots.

The controller owns the single mutable game. Each accepted action replaces
``self.state`` with the next state from ``game_engine``; finished tricks and
rounds are resolved right away, so callers only ever see states that wait
on a bid, a card, or ``next_round``.
"""

import logging
import random
from typing import Any

from spades.bots import BaseBot, BotContext, create_bot, get_hint_bid, get_hint_card
from spades.bots.base_bot import get_think_time
from spades.config import settings
from spades.engine import game_engine
from spades.exceptions import GameStateError, InvalidMoveError
from spades.models.bid import Bid
from spades.models.card import Card, get_card
from spades.models.enums import HUMAN_SEAT, SEAT_ORDER, Difficulty, GamePhase, Seat, Team
from spades.models.game import GameState
from spades.models.game_event import GameHistory
from spades.services.event_recorder import EventRecorder
from spades.services.game_serializer import deserialize_game, serialize_game
from spades.services.stats_service import PlayerStats

logger = logging.getLogger(__name__)


class GameController:
    """Runs games between the human seat (south) and three bots."""

    def __init__(
        self,
        rng: random.Random | None = None,
        recorder: EventRecorder | None = None,
        stats: PlayerStats | None = None,
        winning_score: int | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            rng: Random source for deals and bot decisions (seeded from
                ``settings.rng_seed`` when omitted)
            recorder: Event recorder for round history
            stats: Lifetime stats to update as games finish
            winning_score: Score that ends the game

        """
        self.rng = rng or random.Random(settings.rng_seed)  # noqa: S311
        # Pacing draws never touch the decision rng
        self._pacing_rng = random.Random()  # noqa: S311
        self.recorder = recorder or EventRecorder()
        self.stats = stats or PlayerStats()
        self.winning_score = winning_score or settings.winning_score
        self.state = GameState()
        self.bots: dict[Seat, BaseBot] = {}
        self.last_history: GameHistory | None = None

    # ------------------------------------------------------------------
    # Game lifecycle
    # ------------------------------------------------------------------

    def start_new_game(
        self, difficulty: Difficulty | None = None, blind_nil: bool = False
    ) -> GameState:
        """Abandon any current game and deal a new one.

        Args:
            difficulty: Bot difficulty (``settings.default_difficulty`` if None)
            blind_nil: Whether the human declares blind nil for the first deal

        Returns:
            The new game, waiting for the first bid

        """
        if self.state.id is not None and not self.state.is_over():
            logger.info("Abandoning game %s", self.state.id)
            self.recorder.discard_game(self.state.id)

        state = game_engine.create_game(difficulty)
        self.bots = {
            seat: create_bot(state.difficulty, seat, self.rng)
            for seat in SEAT_ORDER
            if not state.players[seat].is_human
        }
        self.recorder.start_game(state)

        self.state = game_engine.deal_hands(state, self.rng, self._blind_nil_seats(blind_nil))
        self.recorder.record_round_start(self.state)
        logger.info(
            "Game %s started against %s bots",
            self.state.id,
            self.state.difficulty.value,
        )
        return self.state

    def next_round(self, blind_nil: bool = False) -> GameState:
        """Deal the next round after a round has been scored.

        Raises:
            GameStateError: If the game is not at round_end

        """
        self.state = game_engine.next_round(self.state, self.rng, self._blind_nil_seats(blind_nil))
        self.recorder.record_round_start(self.state)
        return self.state

    def restore(self, data: dict[str, Any]) -> GameState:
        """Resume a game from a ``snapshot``.

        Recording restarts from the restored position; events from before the
        snapshot are not replayed.
        """
        if self.state.id is not None and not self.state.is_over():
            self.recorder.discard_game(self.state.id)

        self.state = deserialize_game(data)
        self.bots = {
            seat: create_bot(self.state.difficulty, seat, self.rng)
            for seat in SEAT_ORDER
            if not self.state.players[seat].is_human
        }
        if not self.state.is_over():
            self.recorder.start_game(self.state)
        logger.info("Restored game %s in phase %s", self.state.id, self.state.phase.value)
        return self.state

    def snapshot(self) -> dict[str, Any]:
        """JSON-compatible copy of the current game."""
        return serialize_game(self.state)

    @staticmethod
    def _blind_nil_seats(blind_nil: bool) -> tuple[Seat, ...]:
        return (HUMAN_SEAT,) if blind_nil else ()

    # ------------------------------------------------------------------
    # Human actions
    # ------------------------------------------------------------------

    def submit_bid(self, bid: "Bid | int") -> GameState:
        """Place the human's bid.

        Raises:
            InvalidMoveError: If the bid is out of range
            GameStateError: If it is not the human's turn to bid

        """
        return self._apply_bid(HUMAN_SEAT, bid)

    def submit_card(self, card: "Card | str") -> GameState:
        """Play a card from the human's hand, given as a Card or a card id.

        Raises:
            InvalidMoveError: If the card is unknown, not held, or not legal
            GameStateError: If it is not the human's turn to play

        """
        if isinstance(card, str):
            try:
                card = get_card(card)
            except KeyError as e:
                msg = f"Unknown card {card!r}"
                raise InvalidMoveError(msg) from e
        return self._apply_card(HUMAN_SEAT, card)

    def valid_plays(self) -> list[Card]:
        """Legal cards for the human right now (empty when not their turn)."""
        if self.state.phase != GamePhase.PLAYING or self.state.round.current_player != HUMAN_SEAT:
            return []
        return game_engine.get_valid_plays_for_player(self.state, HUMAN_SEAT)

    def hint(self) -> "int | Card | None":
        """Suggested bid or card for the human, or None when not their turn."""
        state = self.state
        if state.round.current_player != HUMAN_SEAT:
            return None

        human = state.players[HUMAN_SEAT]
        if state.phase == GamePhase.BIDDING:
            return get_hint_bid(human.hand, state.get_partner(HUMAN_SEAT).bid)
        if state.phase == GamePhase.PLAYING:
            return get_hint_card(
                human.hand,
                state.round.current_trick,
                state.round.spades_broken,
                human.bid,
                human.tricks_won,
                HUMAN_SEAT,
            )
        return None

    # ------------------------------------------------------------------
    # Bot turns
    # ------------------------------------------------------------------

    def is_ai_turn(self) -> bool:
        """Whether a bot is due to bid or play."""
        if self.state.phase not in (GamePhase.BIDDING, GamePhase.PLAYING):
            return False
        return self.state.round.current_player in self.bots

    def think_time(self) -> float:
        """Delay (seconds) a caller may wait before the next bot action."""
        return get_think_time(self.state.difficulty, self._pacing_rng)

    def process_ai_turn(self, expected_game_id: str | None) -> bool:
        """Let the bot whose turn it is bid or play once.

        Args:
            expected_game_id: Id of the game the action was scheduled for;
                actions for a replaced game are dropped

        Returns:
            True if a bot acted, False if the action was stale or no bot is due

        Raises:
            ValueError: If the bot due to act holds no cards

        """
        if expected_game_id != self.state.id:
            logger.debug(
                "Dropping bot action for stale game %s (current %s)",
                expected_game_id,
                self.state.id,
            )
            return False
        if not self.is_ai_turn():
            return False

        seat = self.state.round.current_player
        bot = self.bots[seat]
        player = self.state.players[seat]
        if self.state.phase == GamePhase.BIDDING:
            bid = bot.make_bid(player.hand, self.state.get_partner(seat).bid)
            self._apply_bid(seat, bid)
        else:
            card = bot.pick_card(self._bot_context(seat))
            self._apply_card(seat, card)
        return True

    def run_until_human(self) -> GameState:
        """Run bot turns until the human must act or the round is over."""
        while self.is_ai_turn():
            self.process_ai_turn(self.state.id)
        return self.state

    def _bot_context(self, seat: Seat) -> BotContext:
        round_state = self.state.round
        return BotContext(
            player=self.state.players[seat],
            partner=self.state.get_partner(seat),
            current_trick=round_state.current_trick,
            spades_broken=round_state.spades_broken,
            cards_played=round_state.get_cards_played(),
            round_tricks=len(round_state.tricks),
        )

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _apply_bid(self, seat: Seat, bid: "Bid | int") -> GameState:
        self.state = game_engine.place_bid(self.state, seat, bid)
        self.recorder.record_bid(self.state, seat)
        return self.state

    def _apply_card(self, seat: Seat, card: Card) -> GameState:
        was_broken = self.state.round.spades_broken
        self.state = game_engine.play_card(self.state, seat, card)
        self.recorder.record_card_played(
            self.state, seat, card, broke_spades=self.state.round.spades_broken and not was_broken
        )
        logger.debug("%s plays %s", seat.value, card)

        trick = self.state.round.current_trick
        if trick is not None and trick.is_complete():
            self._complete_trick()
        return self.state

    def _complete_trick(self) -> None:
        self.state = game_engine.finish_trick(self.state)
        self.recorder.record_trick_won(self.state)

        if self.state.phase == GamePhase.ROUND_END:
            self.state = game_engine.finish_round(self.state, self.winning_score)
            self.recorder.record_round_end(self.state)
            if self.state.is_over():
                self._end_game()

    def _end_game(self) -> None:
        state = self.state
        if state.winner is None:
            msg = "Game over without a winner"
            raise GameStateError(msg)

        self.last_history = self.recorder.end_game(state)
        self.stats = self.stats.record_game(
            won=state.winner == Team.PLAYER,
            rounds_played=state.round.round_number,
            high_score=max(0, state.player_team_score.score),
        )
        logger.info(
            "Game %s finished %d-%d after %d rounds",
            state.id,
            state.player_team_score.score,
            state.opponent_team_score.score,
            state.round.round_number,
        )
