"""Configuration helpers for the wallet client."""

import os
from dataclasses import dataclass

from .errors import ConfigError


DEFAULT_WALLET_URL = "http://localhost:1789"
DEFAULT_TIMEOUT = 10.0

HEALTH_PATH = "/api/v2/health"
REQUESTS_PATH = "/api/v2/requests"
TOKEN_SCHEME = "VWT"


def _require_env(key: str, message: str) -> str:
    value = os.getenv(key)
    if not value:
        raise ConfigError(message, field=key)
    return value


@dataclass(slots=True)
class WalletConfig:
    base_url: str
    token: str
    public_key: str
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        self.base_url = self.base_url.strip().rstrip("/")
        self.public_key = self.public_key.strip()

    @property
    def health_url(self) -> str:
        return f"{self.base_url}{HEALTH_PATH}"

    @property
    def requests_url(self) -> str:
        return f"{self.base_url}{REQUESTS_PATH}"

    @property
    def token_header(self) -> str:
        return f"{TOKEN_SCHEME} {self.token}"

    @classmethod
    def from_env(cls) -> "WalletConfig":
        """Build a config for the command-line entry point."""
        base_url = os.getenv("VEGA_WALLET_URL") or DEFAULT_WALLET_URL
        token = _require_env(
            "VEGA_WALLET_TOKEN",
            "VEGA_WALLET_TOKEN environment variable is required. Please set it to a wallet API token.",
        )
        public_key = _require_env(
            "VEGA_WALLET_PUBKEY",
            "VEGA_WALLET_PUBKEY environment variable is required. Please set it to the signing public key.",
        )
        raw_timeout = os.getenv("VEGA_WALLET_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ConfigError(
                f"Invalid VEGA_WALLET_TIMEOUT value: {raw_timeout!r}",
                field="VEGA_WALLET_TIMEOUT",
            ) from exc
        return cls(
            base_url=base_url, token=token, public_key=public_key, timeout=timeout
        )

    def validate(self) -> None:
        if not self.base_url:
            raise ConfigError("Wallet URL cannot be empty", field="base_url")
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigError(
                f"Invalid wallet URL: {self.base_url}. URL must start with http:// or https://",
                field="base_url",
            )
        if not self.token:
            raise ConfigError("API token cannot be empty", field="token")
        if not self.public_key:
            raise ConfigError("Public key cannot be empty", field="public_key")
        if len(self.public_key) != 64:
            raise ConfigError(
                f"Invalid public key length: expected 64 characters, got {len(self.public_key)}",
                field="public_key",
            )
        try:
            int(self.public_key, 16)
        except ValueError as exc:
            raise ConfigError(
                f"Invalid public key format: must be a valid hexadecimal string. Error: {exc}",
                field="public_key",
            ) from exc
        if self.timeout <= 0:
            raise ConfigError(
                f"Timeout must be positive, got {self.timeout}", field="timeout"
            )


def load_config() -> WalletConfig:
    config = WalletConfig.from_env()
    config.validate()
    return config
