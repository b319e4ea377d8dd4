"""Transaction commands accepted by the wallet's send_transaction method."""

import json
from typing import Annotated, Any, ClassVar, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError as PydanticValidationError,
    field_validator,
    model_serializer,
    model_validator,
)

from .enums import OrderType, PeggedReference, Side, TimeInForce, VoteValue
from .errors import DecodeError, SchemaError
from .models import WIRE_CONTEXT, WireModel


UINT64_MAX = 2**64 - 1
INT64_MIN, INT64_MAX = -(2**63), 2**63 - 1
INT32_MIN, INT32_MAX = -(2**31), 2**31 - 1

Uint64 = Annotated[int, Field(strict=True, ge=0, le=UINT64_MAX)]
Int64 = Annotated[int, Field(strict=True, ge=INT64_MIN, le=INT64_MAX)]
Int32 = Annotated[int, Field(strict=True, ge=INT32_MIN, le=INT32_MAX)]
# Fixed-point integers travel as decimal strings, e.g. "123456" is 1.23456
# on a market with 5 decimal places. The format is checked by the network.
DecimalString = str


class PeggedOrder(WireModel):
    """Limit order priced as REFERENCE +/- OFFSET."""

    reference: PeggedReference
    offset: DecimalString


class OrderSubmission(WireModel):
    """Request to create a new order.

    ``price`` is required for limit orders but may be empty for market
    orders; that rule is enforced by the network, not here.
    ``expires_at`` is in nanoseconds since the epoch and only read for GTT.
    """

    wire_optional: ClassVar[frozenset[str]] = frozenset({"pegged_order"})

    market_id: str
    price: DecimalString
    size: Uint64
    side: Side
    time_in_force: TimeInForce
    expires_at: Int64 = 0
    type: OrderType
    reference: str = ""
    pegged_order: Optional[PeggedOrder] = None


class OrderCancellation(WireModel):
    """Request to cancel a whole order; both ids are lookup keys."""

    order_id: str
    market_id: str


class OrderAmendment(WireModel):
    """Request to amend an existing order.

    ``order_id`` and ``market_id`` only locate the order. ``price`` and
    ``expires_at`` are left unchanged when None; ``time_in_force`` is left
    unchanged when UNSPECIFIED; ``size_delta`` of zero keeps the size.
    ``pegged_offset`` and ``pegged_reference`` are not optional on the wire,
    unlike ``price`` and ``expires_at``.
    """

    wire_optional: ClassVar[frozenset[str]] = frozenset({"price", "expires_at"})

    order_id: str
    market_id: str
    price: Optional[DecimalString] = None
    size_delta: Int64 = 0
    expires_at: Optional[Int64] = None
    time_in_force: TimeInForce = TimeInForce.UNSPECIFIED
    pegged_offset: DecimalString = ""
    pegged_reference: Int32 = 0

    @field_validator("pegged_reference", mode="before")
    @classmethod
    def pegged_reference_number(cls, value: Any) -> Any:
        if isinstance(value, PeggedReference):
            return value.number
        return value

    @property
    def pegged_reference_tag(self) -> PeggedReference:
        return PeggedReference.from_number(self.pegged_reference)


class BatchMarketInstructions(WireModel):
    """Cancellations, then amendments, then submissions, each in order.

    The network caps the total number of instructions
    (``spam.protection.max.batchSize``); the client does not.
    """

    cancellations: tuple[OrderCancellation, ...] = ()
    amendments: tuple[OrderAmendment, ...] = ()
    submissions: tuple[OrderSubmission, ...] = ()

    @property
    def total_instructions(self) -> int:
        return len(self.cancellations) + len(self.amendments) + len(self.submissions)


class VoteSubmission(WireModel):
    """Vote on a governance proposal."""

    proposal_id: str
    value: VoteValue


CommandPayload = Union[
    BatchMarketInstructions,
    OrderSubmission,
    OrderCancellation,
    OrderAmendment,
    VoteSubmission,
]

VARIANTS: dict[str, type[WireModel]] = {
    "batchMarketInstructions": BatchMarketInstructions,
    "orderSubmission": OrderSubmission,
    "orderCancellation": OrderCancellation,
    "orderAmendment": OrderAmendment,
    "voteSubmission": VoteSubmission,
}
_VARIANT_KEYS = {variant: key for key, variant in VARIANTS.items()}


def _split_variant(data: Any) -> tuple[str, Any]:
    if not isinstance(data, dict):
        raise DecodeError(
            f"Command must be a JSON object, got {type(data).__name__}",
            payload=data,
        )
    keys = list(data)
    if len(keys) != 1:
        raise SchemaError(
            f"Command must hold exactly one variant, found {len(keys)}",
            keys=keys,
        )
    key = keys[0]
    if key not in VARIANTS:
        raise DecodeError(f"Unknown command variant: {key!r}", payload=key)
    return key, data[key]


class Command(BaseModel):
    """Exactly one transaction command.

    On the wire this is a single-key object naming the variant, e.g.
    ``{"orderCancellation": {"orderId": "...", "marketId": "..."}}``.
    """

    model_config = ConfigDict(frozen=True)

    payload: CommandPayload

    @model_validator(mode="before")
    @classmethod
    def unwrap_variant(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if set(data) == {"payload"} and isinstance(data["payload"], WireModel):
            return data
        key, value = _split_variant(data)
        return {"payload": VARIANTS[key].model_validate(value, context=WIRE_CONTEXT)}

    @model_serializer(mode="plain")
    def serialize_variant(self) -> dict[str, Any]:
        return {self.variant: self.payload.to_wire()}

    @classmethod
    def of(cls, payload: CommandPayload) -> "Command":
        return cls(payload=payload)

    @property
    def variant(self) -> str:
        return _VARIANT_KEYS[type(self.payload)]

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self) -> str:
        return self.model_dump_json()

    @classmethod
    def from_wire(cls, data: Any) -> "Command":
        """
        Decode a wire object into a command.

        Raises:
            SchemaError: The object holds zero or several variant keys
            DecodeError: The key is unknown or the payload does not match it
        """
        key, value = _split_variant(data)
        try:
            payload = VARIANTS[key].model_validate(value, context=WIRE_CONTEXT)
        except PydanticValidationError as exc:
            raise DecodeError(f"Invalid {key} payload: {exc}", payload=value) from exc
        return cls(payload=payload)

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "Command":
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise DecodeError(f"Command is not valid JSON: {exc}") from exc
        return cls.from_wire(data)
