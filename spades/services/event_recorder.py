"""Event recorder service for capturing game events during gameplay.

Used for round history, replay and the end-of-game summary.
"""

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from spades.models.enums import SEAT_ORDER, Seat
from spades.models.game_event import GameEvent, GameEventType, GameHistory, RoundRecord

if TYPE_CHECKING:
    from spades.models.card import Card
    from spades.models.game import GameState

logger = logging.getLogger(__name__)


def build_round_record(state: "GameState") -> RoundRecord:
    """Snapshot bids, tricks and team totals of the current round."""
    return RoundRecord(
        round_number=state.round.round_number,
        bids={seat: state.players[seat].bid.value for seat in SEAT_ORDER},
        tricks={seat: state.players[seat].tricks_won for seat in SEAT_ORDER},
        player_team_score=state.player_team_score.score,
        opponent_team_score=state.opponent_team_score.score,
        player_team_bags=state.player_team_score.bags,
        opponent_team_bags=state.opponent_team_score.bags,
    )


class EventRecorder:
    """Records game events for later replay."""

    def __init__(self) -> None:
        """Initialize the event recorder.

        Events and round records are kept in memory per game id until the
        game ends and is turned into a GameHistory.
        """
        self._events: dict[str, list[GameEvent]] = {}
        self._rounds: dict[str, list[RoundRecord]] = {}
        self._game_start_times: dict[str, datetime] = {}
        # Completed game histories
        self._histories: dict[str, GameHistory] = {}

    def start_game(self, state: "GameState") -> None:
        """Initialize event recording for a new game."""
        game_id = str(state.id)
        self._events[game_id] = []
        self._rounds[game_id] = []
        self._game_start_times[game_id] = datetime.now(UTC)

        self.record_event(
            game_id=game_id,
            event_type=GameEventType.GAME_STARTED,
            data={
                "difficulty": state.difficulty.value,
                "players": [
                    {
                        "seat": seat.value,
                        "name": state.players[seat].name,
                        "is_human": state.players[seat].is_human,
                    }
                    for seat in SEAT_ORDER
                ],
            },
        )

    def record_event(  # noqa: PLR0913
        self,
        game_id: str,
        event_type: GameEventType,
        round_number: int = 0,
        trick_number: int | None = None,
        player: Seat | None = None,
        data: dict | None = None,
    ) -> None:
        """Record a single game event."""
        if game_id not in self._events:
            self._events[game_id] = []

        event = GameEvent(
            game_id=game_id,
            event_type=event_type,
            round_number=round_number,
            trick_number=trick_number,
            player=player,
            data=data or {},
        )
        self._events[game_id].append(event)

    def record_round_start(self, state: "GameState") -> None:
        """Record round start with dealt hands."""
        self.record_event(
            game_id=str(state.id),
            event_type=GameEventType.ROUND_STARTED,
            round_number=state.round.round_number,
            data={
                # Dealt hands are stored for replay only
                "dealt_cards": {
                    seat.value: [card.id for card in state.players[seat].hand]
                    for seat in SEAT_ORDER
                },
            },
        )

    def record_bid(self, state: "GameState", seat: Seat) -> None:
        """Record the bid a seat has just placed."""
        self.record_event(
            game_id=str(state.id),
            event_type=GameEventType.BID_PLACED,
            round_number=state.round.round_number,
            player=seat,
            data={"bid": state.players[seat].bid.value},
        )
        if state.round.bids_complete:
            self.record_event(
                game_id=str(state.id),
                event_type=GameEventType.BIDDING_COMPLETE,
                round_number=state.round.round_number,
                data={"bids": {s.value: state.players[s].bid.value for s in SEAT_ORDER}},
            )

    def record_card_played(
        self, state: "GameState", seat: Seat, card: "Card", broke_spades: bool = False
    ) -> None:
        """Record a card being played."""
        trick_number = len(state.round.tricks) + 1
        self.record_event(
            game_id=str(state.id),
            event_type=GameEventType.CARD_PLAYED,
            round_number=state.round.round_number,
            trick_number=trick_number,
            player=seat,
            data={"card": card.id},
        )
        if broke_spades:
            self.record_event(
                game_id=str(state.id),
                event_type=GameEventType.SPADES_BROKEN,
                round_number=state.round.round_number,
                trick_number=trick_number,
                player=seat,
            )

    def record_trick_won(self, state: "GameState") -> None:
        """Record the winner of the trick that was just finished."""
        if not state.round.tricks:
            return

        trick = state.round.tricks[-1]
        self.record_event(
            game_id=str(state.id),
            event_type=GameEventType.TRICK_WON,
            round_number=state.round.round_number,
            trick_number=len(state.round.tricks),
            player=trick.winner,
            data={"cards": [played.card.id for played in trick.plays]},
        )

    def record_round_end(self, state: "GameState") -> RoundRecord:
        """Record a scored round and keep its RoundRecord."""
        game_id = str(state.id)
        record = build_round_record(state)
        self._rounds.setdefault(game_id, []).append(record)

        self.record_event(
            game_id=game_id,
            event_type=GameEventType.ROUND_ENDED,
            round_number=record.round_number,
            data=record.to_dict(),
        )
        return record

    def get_events(self, game_id: str) -> list[GameEvent]:
        """Events recorded so far for a game in progress."""
        return list(self._events.get(game_id, []))

    def get_rounds(self, game_id: str) -> list[RoundRecord]:
        """Round records so far for a game in progress."""
        return list(self._rounds.get(game_id, []))

    def end_game(self, state: "GameState") -> GameHistory | None:
        """Finalize game recording and create history."""
        game_id = str(state.id)

        if game_id not in self._events:
            return None

        winner = state.winner.value if state.winner else None
        self.record_event(
            game_id=game_id,
            event_type=GameEventType.GAME_ENDED,
            round_number=state.round.round_number,
            data={
                "winner": winner,
                "player_team_score": state.player_team_score.score,
                "opponent_team_score": state.opponent_team_score.score,
            },
        )

        start_time = self._game_start_times.get(game_id, datetime.now(UTC))
        end_time = datetime.now(UTC)
        duration = int((end_time - start_time).total_seconds())

        history = GameHistory(
            game_id=game_id,
            difficulty=state.difficulty.value,
            created_at=start_time,
            ended_at=end_time,
            duration_seconds=duration,
            winner=winner,
            player_team_score=state.player_team_score.score,
            opponent_team_score=state.opponent_team_score.score,
            rounds=self._rounds.pop(game_id, []),
            events=self._events.pop(game_id),
        )

        self._histories[game_id] = history
        self._game_start_times.pop(game_id, None)
        logger.debug("Recorded history for game %s (%d events)", game_id, len(history.events))
        return history

    def discard_game(self, game_id: str) -> None:
        """Drop the in-progress recording of an abandoned game."""
        self._events.pop(game_id, None)
        self._rounds.pop(game_id, None)
        self._game_start_times.pop(game_id, None)

    def get_history(self, game_id: str) -> GameHistory | None:
        """Get completed game history."""
        return self._histories.get(game_id)

    def get_all_histories(self) -> list[GameHistory]:
        """Get all completed game histories."""
        return list(self._histories.values())

    def get_recent_histories(self, limit: int = 10) -> list[dict]:
        """Get recent game summaries."""
        histories = sorted(self._histories.values(), key=lambda h: h.ended_at, reverse=True)[:limit]
        return [h.get_summary() for h in histories]
