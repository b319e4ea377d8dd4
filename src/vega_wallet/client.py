"""Async client for the wallet's local JSON-RPC service."""

import logging
from typing import Any, Optional, TypeVar, Union

import httpx

from .commands import Command, CommandPayload
from .config import DEFAULT_TIMEOUT, WalletConfig
from .errors import HealthCheckError, SigningNotImplementedError, TransportError
from .request import Request, new_list_keys, new_send_transaction
from .response import KeysResponse, SendTransactionResponse, decode_response

logger = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")


class WalletClient:
    """Talks to a running wallet service.

    Use :meth:`connect` or :meth:`from_config`; both check the service's
    health before handing back a client. The underlying
    ``httpx.AsyncClient`` may be shared by concurrent calls.
    """

    def __init__(
        self,
        config: WalletConfig,
        http_client: Optional[httpx.AsyncClient] = None,
        verify_response_id: bool = False,
    ) -> None:
        self.config = config
        self.public_key = config.public_key
        self.verify_response_id = verify_response_id
        self._owns_http_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=config.timeout)

    @classmethod
    async def connect(
        cls,
        base_url: str,
        token: str,
        public_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: Optional[httpx.AsyncClient] = None,
        verify_response_id: bool = False,
    ) -> "WalletClient":
        config = WalletConfig(
            base_url=base_url, token=token, public_key=public_key, timeout=timeout
        )
        return await cls.from_config(
            config, http_client=http_client, verify_response_id=verify_response_id
        )

    @classmethod
    async def from_config(
        cls,
        config: WalletConfig,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        verify_response_id: bool = False,
    ) -> "WalletClient":
        """
        Create a client and fail fast if the wallet is unreachable.

        Raises:
            ConfigError: The configuration is invalid
            HealthCheckError: The health endpoint failed or did not answer 2xx
        """
        config.validate()
        client = cls(
            config, http_client=http_client, verify_response_id=verify_response_id
        )
        try:
            await client.check_health()
        except TransportError:
            await client.aclose()
            raise
        logger.info("Connected to wallet service at %s", config.base_url)
        return client

    async def __aenter__(self) -> "WalletClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http_client:
            await self._http.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "Origin": self.config.base_url,
            "Authorization": self.config.token_header,
        }

    async def check_health(self, *, timeout: Optional[float] = None) -> None:
        url = self.config.health_url
        try:
            response = await self._http.get(url, **_timeout_kwargs(timeout))
        except httpx.HTTPError as exc:
            logger.warning("Wallet health check at %s failed: %s", url, exc)
            raise HealthCheckError(url, reason=str(exc) or type(exc).__name__) from exc
        if not response.is_success:
            logger.warning(
                "Wallet health check at %s returned HTTP %s", url, response.status_code
            )
            raise HealthCheckError(
                url, status_code=response.status_code, reason=response.reason_phrase
            )

    async def submit(
        self,
        request: Request,
        result_type: type[ResultT],
        *,
        timeout: Optional[float] = None,
    ) -> ResultT:
        """
        POST a request envelope and return its typed result.

        Raises:
            TransportError: Network failure, or non-2xx without a JSON-RPC error body
            WalletServiceError: The wallet answered with a JSON-RPC error
            DecodeError: The wallet answered with a malformed body
        """
        url = self.config.requests_url
        logger.debug("Sending %s request id=%s", request.method, request.id)
        try:
            response = await self._http.post(
                url,
                json=request.to_wire(),
                headers=self._headers(),
                **_timeout_kwargs(timeout),
            )
        except httpx.HTTPError as exc:
            raise TransportError(
                f"Failed to send {request.method} to {url}: {exc}", url=url
            ) from exc

        if not response.is_success:
            _raise_for_status(response, url, result_type)

        expected_id = request.id if self.verify_response_id else None
        envelope = decode_response(response.content, result_type, expected_id=expected_id)
        return envelope.result

    async def list_keys(self, *, timeout: Optional[float] = None) -> KeysResponse:
        return await self.submit(new_list_keys(), KeysResponse, timeout=timeout)

    async def send_transaction(
        self,
        command: Union[Command, CommandPayload],
        *,
        timeout: Optional[float] = None,
    ) -> SendTransactionResponse:
        """Send a command synchronously and return the wallet's receipt."""
        if not isinstance(command, Command):
            command = Command.of(command)
        return await self.submit(
            new_send_transaction(command), SendTransactionResponse, timeout=timeout
        )

    async def send(
        self,
        command: Union[Command, CommandPayload],
        *,
        timeout: Optional[float] = None,
    ) -> SendTransactionResponse:
        return await self.send_transaction(command, timeout=timeout)

    def sign(self, command: Union[Command, CommandPayload]) -> None:
        raise SigningNotImplementedError("sign")


def _timeout_kwargs(timeout: Optional[float]) -> dict[str, Any]:
    return {} if timeout is None else {"timeout": timeout}


def _raise_for_status(response: httpx.Response, url: str, result_type: type) -> None:
    # The wallet reports most failures as a JSON-RPC error with a 4xx/5xx status.
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("error") is not None:
        decode_response(body, result_type)
    raise TransportError(
        f"Wallet service returned HTTP {response.status_code} for {url}",
        url=url,
        status_code=response.status_code,
    )
