"""Entry point: connect to the local wallet and list its keys."""

import asyncio
import json
import logging
import os
import sys

from .client import WalletClient
from .config import load_config
from .errors import ConfigError, WalletClientError, format_error_response


def main():
    """Main entry point for the wallet client CLI."""
    logging.basicConfig(
        level=os.getenv("VEGA_WALLET_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        keys = asyncio.run(async_main())
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except WalletClientError as e:
        print(json.dumps(format_error_response(e), indent=2, default=str), file=sys.stderr)
        sys.exit(1)
    print(json.dumps(keys, indent=2))


async def async_main():
    """Async main function."""
    config = load_config()

    async with await WalletClient.from_config(config) as client:
        keys = await client.list_keys()

    return keys.to_wire()


if __name__ == "__main__":
    main()
