"""JSON-RPC request envelopes sent to the wallet service."""

import secrets
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .commands import Command
from .models import WireModel


JSONRPC_VERSION = "2.0"
SENDING_MODE_SYNC = "TYPE_SYNC"

METHOD_SEND_TRANSACTION = "client.send_transaction"
METHOD_LIST_KEYS = "client.list_keys"

REQUEST_ID_BITS = 64


def generate_request_id() -> str:
    """Return a fresh correlation id: 64 random bits as a decimal string.

    Collisions are not detected.
    """
    return str(secrets.randbits(REQUEST_ID_BITS))


class Params(WireModel):
    """Parameters of a send_transaction call."""

    sending_mode: str = SENDING_MODE_SYNC
    transaction: Command

    @classmethod
    def for_command(cls, command: Command) -> "Params":
        return cls(sending_mode=SENDING_MODE_SYNC, transaction=command)


class Request(BaseModel):
    """JSON-RPC request envelope."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    version: Literal["2.0"] = Field(default=JSONRPC_VERSION, alias="jsonrpc")
    method: str
    params: Optional[Params] = None
    id: str = Field(default_factory=generate_request_id, min_length=1)

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


def new_send_transaction(command: Command) -> Request:
    return Request(
        method=METHOD_SEND_TRANSACTION,
        params=Params.for_command(command),
    )


def new_list_keys() -> Request:
    return Request(method=METHOD_LIST_KEYS)
