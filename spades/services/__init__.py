"""Services: serialization, event history and player statistics."""

from spades.services.event_recorder import EventRecorder, build_round_record
from spades.services.game_serializer import deserialize_game, serialize_game
from spades.services.stats_service import PlayerStats

__all__ = [
    "EventRecorder",
    "PlayerStats",
    "build_round_record",
    "deserialize_game",
    "serialize_game",
]
