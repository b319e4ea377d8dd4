"""Fixed-vocabulary fields and their wire tags.

Tags and numbers mirror the Vega protobuf schema. Members are declared in
protobuf number order, so a member's position is its number.
"""

from enum import Enum
from typing import Any

from .errors import DecodeError


class WireEnum(str, Enum):
    """Enum whose value is the exact tag used on the wire."""

    @property
    def number(self) -> int:
        return list(type(self)).index(self)

    def to_wire(self) -> str:
        return self.value

    @classmethod
    def from_wire(cls, tag: Any) -> "WireEnum":
        """Decode a wire tag; unknown tags are an error, never Unspecified."""
        try:
            return cls(tag)
        except ValueError as exc:
            raise DecodeError(
                f"Unknown {cls.__name__} tag: {tag!r}", payload=tag
            ) from exc

    @classmethod
    def from_number(cls, number: Any) -> "WireEnum":
        members = list(cls)
        if isinstance(number, bool) or not isinstance(number, int):
            raise DecodeError(
                f"{cls.__name__} number must be an integer, got {number!r}",
                payload=number,
            )
        if not 0 <= number < len(members):
            raise DecodeError(
                f"Unknown {cls.__name__} number: {number}", payload=number
            )
        return members[number]


class Side(WireEnum):
    """Direction of an order. Unspecified is always invalid."""

    UNSPECIFIED = "SIDE_UNSPECIFIED"
    BUY = "SIDE_BUY"
    SELL = "SIDE_SELL"


class OrderType(WireEnum):
    UNSPECIFIED = "TYPE_UNSPECIFIED"
    LIMIT = "TYPE_LIMIT"
    MARKET = "TYPE_MARKET"
    # Initiated by the network against distressed parties
    NETWORK = "TYPE_NETWORK"


class TimeInForce(WireEnum):
    """How long an order stays active.

    Unspecified is invalid on a submission but means "leave unchanged" on an
    amendment.
    """

    UNSPECIFIED = "TIME_IN_FORCE_UNSPECIFIED"
    GTC = "TIME_IN_FORCE_GTC"
    GTT = "TIME_IN_FORCE_GTT"
    IOC = "TIME_IN_FORCE_IOC"
    FOK = "TIME_IN_FORCE_FOK"
    GFA = "TIME_IN_FORCE_GFA"
    GFN = "TIME_IN_FORCE_GFN"


class PeggedReference(WireEnum):
    """Price point a pegged order tracks."""

    UNSPECIFIED = "PEGGED_REFERENCE_UNSPECIFIED"
    MID = "PEGGED_REFERENCE_MID"
    BEST_BID = "PEGGED_REFERENCE_BEST_BID"
    BEST_ASK = "PEGGED_REFERENCE_BEST_ASK"


class VoteValue(WireEnum):
    UNSPECIFIED = "VALUE_UNSPECIFIED"
    NO = "VALUE_NO"
    YES = "VALUE_YES"
