"""Bid model.

A bid is one of four shapes: not yet bid, blind nil, nil or a standard
1-13 trick contract. The integer encoding used by API payloads and stored
records (``None``, ``-1``, ``0``, ``1..13``) is available through
``Bid.from_value`` and ``Bid.value``.
"""

from dataclasses import dataclass
from enum import Enum

from spades.constants import BLIND_NIL_BID, MAX_BID, MIN_BID, NIL_BID


class BidKind(str, Enum):
    """Kinds of bid."""

    NOT_BID = "not_bid"
    BLIND_NIL = "blind_nil"
    NIL = "nil"
    STANDARD = "standard"


@dataclass(frozen=True)
class Bid:
    """A player's bid for the round.

    Attributes:
        kind: Which kind of bid this is
        tricks: Contracted tricks (only meaningful for standard bids)

    """

    kind: BidKind = BidKind.NOT_BID
    tricks: int = 0

    def __post_init__(self) -> None:
        """Reject standard bids outside 1-13."""
        if self.kind == BidKind.STANDARD and not (MIN_BID <= self.tricks <= MAX_BID):
            msg = f"Standard bid must be {MIN_BID}-{MAX_BID}, got {self.tricks}"
            raise ValueError(msg)
        if self.kind != BidKind.STANDARD and self.tricks != 0:
            msg = f"{self.kind.value} bid cannot carry a trick count"
            raise ValueError(msg)

    @classmethod
    def not_bid(cls) -> "Bid":
        """Placeholder before the player has bid."""
        return cls(BidKind.NOT_BID)

    @classmethod
    def nil(cls) -> "Bid":
        """Nil bid."""
        return cls(BidKind.NIL)

    @classmethod
    def blind_nil(cls) -> "Bid":
        """Blind nil bid."""
        return cls(BidKind.BLIND_NIL)

    @classmethod
    def standard(cls, tricks: int) -> "Bid":
        """Standard 1-13 bid."""
        return cls(BidKind.STANDARD, tricks)

    @classmethod
    def from_value(cls, value: "int | Bid | None") -> "Bid":
        """Build a bid from its integer encoding.

        Raises:
            ValueError: If the value is outside {-1} and 0-13

        """
        if isinstance(value, Bid):
            return value
        if value is None:
            return cls.not_bid()
        if isinstance(value, bool) or not isinstance(value, int):
            msg = f"Bid must be an integer, got {value!r}"
            raise ValueError(msg)
        if value == BLIND_NIL_BID:
            return cls.blind_nil()
        if value == NIL_BID:
            return cls.nil()
        return cls.standard(value)

    @property
    def value(self) -> int | None:
        """Integer encoding: None, -1 (blind nil), 0 (nil) or 1-13."""
        if self.kind == BidKind.NOT_BID:
            return None
        if self.kind == BidKind.BLIND_NIL:
            return BLIND_NIL_BID
        if self.kind == BidKind.NIL:
            return NIL_BID
        return self.tricks

    @property
    def is_placed(self) -> bool:
        """True once the player has bid."""
        return self.kind != BidKind.NOT_BID

    @property
    def is_nil(self) -> bool:
        """True for nil and blind nil."""
        return self.kind in (BidKind.NIL, BidKind.BLIND_NIL)

    @property
    def is_blind_nil(self) -> bool:
        """True for blind nil."""
        return self.kind == BidKind.BLIND_NIL

    @property
    def contract(self) -> int:
        """Tricks this bid adds to the team contract (0 for nil kinds)."""
        return self.tricks if self.kind == BidKind.STANDARD else 0

    def __str__(self) -> str:
        """Return display form of the bid."""
        if self.kind == BidKind.NOT_BID:
            return "-"
        if self.kind == BidKind.BLIND_NIL:
            return "Blind Nil"
        if self.kind == BidKind.NIL:
            return "Nil"
        return str(self.tricks)
