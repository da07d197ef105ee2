"""Tests for game serialization."""

import json
import random

from spades.engine.game_engine import (
    create_game,
    deal_hands,
    finish_trick,
    get_valid_plays_for_player,
    place_bid,
    play_card,
)
from spades.models.bid import Bid
from spades.models.enums import GamePhase, Seat, Team
from spades.models.scoring import TeamScore
from spades.services.game_serializer import (
    deserialize_game,
    deserialize_player,
    deserialize_trick,
    serialize_game,
    serialize_player,
    serialize_trick,
)


def game_in_progress():
    """A game a few plays into its second trick, with one blind nil."""
    state = deal_hands(create_game(game_id="saved"), random.Random(17), [Seat.SOUTH])
    while state.phase == GamePhase.BIDDING:
        state = place_bid(state, state.round.current_player, 3)
    for _ in range(6):
        trick = state.round.current_trick
        if trick is not None and trick.is_complete():
            state = finish_trick(state)
        seat = state.round.current_player
        state = play_card(state, seat, get_valid_plays_for_player(state, seat)[0])
    return state


class TestGameSerializer:
    """Test saving and restoring games."""

    def test_survives_json(self):
        """Serialized games survive a JSON round trip unchanged."""
        state = game_in_progress()
        data = serialize_game(state)
        assert json.loads(json.dumps(data)) == data

    def test_restores_game(self):
        """Restoring gives back an equal game."""
        state = game_in_progress()
        state.player_team_score = TeamScore(score=140, bags=3, round_score=62, round_bags=2)
        restored = deserialize_game(json.loads(json.dumps(serialize_game(state))))
        assert restored == state
        assert restored.players[Seat.SOUTH].bid == Bid.blind_nil()
        assert len(restored.round.tricks) == 1
        assert restored.round.current_trick is not None

    def test_cards_and_bids_encoding(self):
        """Cards are stored by id and bids by their integer value."""
        data = serialize_game(game_in_progress())
        south = data["players"]["south"]
        assert south["bid"] == -1
        assert all(isinstance(card_id, str) and "-" in card_id for card_id in south["hand"])
        assert data["round"]["tricks"][0]["winner"] in {seat.value for seat in Seat}

    def test_winner_and_phase(self):
        """Finished games keep their winner."""
        state = create_game(game_id="done")
        state.phase = GamePhase.GAME_OVER
        state.winner = Team.OPPONENT
        restored = deserialize_game(serialize_game(state))
        assert restored.phase == GamePhase.GAME_OVER
        assert restored.winner == Team.OPPONENT

    def test_player_defaults(self):
        """Missing optional fields fall back to defaults."""
        player = deserialize_player({"position": "east", "name": "East"})
        assert player.position == Seat.EAST
        assert player.hand == []
        assert not player.bid.is_placed
        assert player.tricks_won == 0
        assert deserialize_player(serialize_player(player)) == player

    def test_empty_trick(self):
        """A trick with no plays has no lead suit or winner."""
        trick = deserialize_trick({"cards": []})
        assert trick.is_empty()
        assert trick.lead_suit is None
        assert serialize_trick(trick) == {"cards": [], "lead_suit": None, "winner": None}
