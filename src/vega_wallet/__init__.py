"""Client for the Vega wallet's local JSON-RPC service."""

from .client import WalletClient
from .commands import (
    BatchMarketInstructions,
    Command,
    OrderAmendment,
    OrderCancellation,
    OrderSubmission,
    PeggedOrder,
    VoteSubmission,
)
from .config import WalletConfig
from .enums import OrderType, PeggedReference, Side, TimeInForce, VoteValue
from .errors import (
    ConfigError,
    DecodeError,
    HealthCheckError,
    SchemaError,
    SigningNotImplementedError,
    TransportError,
    WalletClientError,
    WalletServiceError,
)
from .request import Request, new_list_keys, new_send_transaction
from .response import Key, KeysResponse, Response, SendTransactionResponse

__all__ = [
    "WalletClient",
    "WalletConfig",
    "BatchMarketInstructions",
    "Command",
    "OrderAmendment",
    "OrderCancellation",
    "OrderSubmission",
    "PeggedOrder",
    "VoteSubmission",
    "OrderType",
    "PeggedReference",
    "Side",
    "TimeInForce",
    "VoteValue",
    "ConfigError",
    "DecodeError",
    "HealthCheckError",
    "SchemaError",
    "SigningNotImplementedError",
    "TransportError",
    "WalletClientError",
    "WalletServiceError",
    "Request",
    "new_list_keys",
    "new_send_transaction",
    "Key",
    "KeysResponse",
    "Response",
    "SendTransactionResponse",
]
