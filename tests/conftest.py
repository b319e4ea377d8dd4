"""Pytest configuration and shared fixtures for testing."""

import json
from typing import Any, Callable, Optional

import httpx
import pytest

from vega_wallet.commands import (
    BatchMarketInstructions,
    OrderAmendment,
    OrderCancellation,
    OrderSubmission,
    PeggedOrder,
    VoteSubmission,
)
from vega_wallet.config import WalletConfig
from vega_wallet.enums import OrderType, PeggedReference, Side, TimeInForce, VoteValue


# Configure pytest-asyncio
pytest_plugins = ("pytest_asyncio",)

BASE_URL = "http://localhost:1789"
MARKET_ID = "5d69ff4a485a9f963272c8614c1d0d84bb8ea57886f5b11aad53f0ccc77731ba"
ORDER_ID = "e5d5039ec7acb756a409c4b50fabf1f7923716ce65ddf618e460366a4c3912e4"


@pytest.fixture
def test_token() -> str:
    """Provide a test API token."""
    return "yf7loKt70Tgq4GXyoAcm68HUav5cwewbh9MYvvVDk4ARgyJD4CSl4cGtc6xmiJTA"


@pytest.fixture
def test_public_key() -> str:
    """Provide a test signing public key."""
    return "6545621b8a3f398db322a4acc68c1b59fd284ab010e157e5aa887a6f55d94eba"


@pytest.fixture
def test_config(test_token: str, test_public_key: str) -> WalletConfig:
    """Provide a test configuration."""
    return WalletConfig(base_url=BASE_URL, token=test_token, public_key=test_public_key)


class FakeWallet:
    """In-memory wallet service answering through httpx.MockTransport."""

    def __init__(self) -> None:
        self.health_status = 200
        self.requests: list[httpx.Request] = []
        self.results: dict[str, Any] = {
            "client.list_keys": {
                "keys": [
                    {
                        "name": "trading",
                        "publicKey": "6545621b8a3f398db322a4acc68c1b59fd284ab010e157e5aa887a6f55d94eba",
                    }
                ]
            },
            "client.send_transaction": {
                "receivedAt": "2023-01-01T00:00:00Z",
                "sentAt": "2023-01-01T00:00:01Z",
                "transactionHash": "B3D8F1A0C2",
                "transaction": {"signature": {"value": "abc"}},
            },
        }
        # Overrides the default JSON-RPC reply when set
        self.responder: Optional[Callable[[dict[str, Any]], httpx.Response]] = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/v2/health":
            return httpx.Response(self.health_status, json={})

        body = json.loads(request.content)
        if self.responder is not None:
            return self.responder(body)
        return httpx.Response(
            200,
            json={
                "jsonrpc": "2.0",
                "result": self.results[body["method"]],
                "id": body["id"],
            },
        )

    @property
    def rpc_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/api/v2/requests"]

    def last_body(self) -> dict[str, Any]:
        return json.loads(self.rpc_requests[-1].content)


@pytest.fixture
def fake_wallet() -> FakeWallet:
    """Create a fake wallet service."""
    return FakeWallet()


@pytest.fixture
def http_client(fake_wallet: FakeWallet) -> httpx.AsyncClient:
    """Create an httpx client routed to the fake wallet."""
    return httpx.AsyncClient(transport=httpx.MockTransport(fake_wallet.handler))


@pytest.fixture
def order_submission() -> OrderSubmission:
    return OrderSubmission(
        market_id=MARKET_ID,
        price="123456",
        size=10,
        side=Side.BUY,
        time_in_force=TimeInForce.GTT,
        expires_at=1_700_000_000_000_000_000,
        type=OrderType.LIMIT,
        reference="my-order",
        pegged_order=PeggedOrder(reference=PeggedReference.MID, offset="5"),
    )


@pytest.fixture
def order_cancellation() -> OrderCancellation:
    return OrderCancellation(order_id=ORDER_ID, market_id=MARKET_ID)


@pytest.fixture
def order_amendment() -> OrderAmendment:
    return OrderAmendment(
        order_id=ORDER_ID,
        market_id=MARKET_ID,
        price="123500",
        size_delta=-3,
        expires_at=None,
        time_in_force=TimeInForce.UNSPECIFIED,
        pegged_offset="",
        pegged_reference=0,
    )


@pytest.fixture
def vote_submission() -> VoteSubmission:
    return VoteSubmission(
        proposal_id="90e71c52b2f40db78efc24abe4217382993868cd24e45b3dd17147be4afaf884",
        value=VoteValue.YES,
    )


@pytest.fixture
def batch_instructions(
    order_cancellation: OrderCancellation,
    order_amendment: OrderAmendment,
    order_submission: OrderSubmission,
) -> BatchMarketInstructions:
    return BatchMarketInstructions(
        cancellations=[order_cancellation],
        amendments=[order_amendment],
        submissions=[order_submission, order_submission],
    )
