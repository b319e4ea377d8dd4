"""JSON-RPC response envelopes returned by the wallet service."""

import json
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from .errors import DecodeError, WalletServiceError
from .models import WireModel


ResultT = TypeVar("ResultT")


class Response(BaseModel, Generic[ResultT]):
    """JSON-RPC response envelope carrying a typed ``result``."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    version: str = Field(alias="jsonrpc")
    result: ResultT
    id: str


class RpcError(BaseModel):
    """JSON-RPC error object sent instead of ``result``."""

    code: int
    message: str
    data: Any = None


class Key(WireModel):
    name: str
    public_key: str


class KeysResponse(WireModel):
    """Result of ``client.list_keys``."""

    keys: tuple[Key, ...] = ()


class SendTransactionResponse(WireModel):
    """Result of ``client.send_transaction``."""

    transaction_hash: str
    received_at: Optional[str] = None
    sent_at: Optional[str] = None
    transaction: Optional[dict[str, Any]] = None


def decode_response(
    raw: Union[str, bytes, dict[str, Any]],
    result_type: type[ResultT],
    expected_id: Optional[str] = None,
) -> Response[ResultT]:
    """
    Decode a response envelope and type its result.

    Args:
        raw: Response body, as text or an already parsed object
        result_type: Model the ``result`` member must match
        expected_id: If given, the envelope id must equal it. The wallet
            protocol does not require this check.

    Returns:
        The decoded envelope

    Raises:
        WalletServiceError: The envelope carries a JSON-RPC error object
        DecodeError: The body does not match the expected shape
    """
    if isinstance(raw, (str, bytes)):
        try:
            data = json.loads(raw)
        except ValueError as exc:
            # JSONDecodeError, or UnicodeDecodeError on non-UTF-8 bytes
            raise DecodeError(f"Response is not valid JSON: {exc}") from exc
    else:
        data = raw

    if not isinstance(data, dict):
        raise DecodeError(
            f"Response must be a JSON object, got {type(data).__name__}",
            payload=data,
        )

    if data.get("error") is not None:
        try:
            error = RpcError.model_validate(data["error"])
        except PydanticValidationError as exc:
            raise DecodeError(f"Malformed error object: {exc}", payload=data["error"]) from exc
        raise WalletServiceError(error.code, error.message, error.data)

    try:
        response = Response[result_type].model_validate(data)
    except PydanticValidationError as exc:
        raise DecodeError(
            f"Response does not match {result_type.__name__}: {exc}"
        ) from exc

    if expected_id is not None and response.id != expected_id:
        raise DecodeError(
            f"Response id {response.id!r} does not match request id {expected_id!r}",
            payload=response.id,
        )
    return response
