"""
Server info CLI: print server information and, when signed in, the user's accounts.

Usage examples:
  python -m scripts.server_info
  python -m scripts.server_info --accounts --log-requests
"""

import argparse
import asyncio
import json
import logging
import sys

from exchange_api.client import ExchangeClient
from exchange_api.config import load_settings
from exchange_api.errors import ExchangeClientError


def _print_json(title: str, payload) -> None:
    print(f"{title}:")
    print(json.dumps(payload, indent=2, sort_keys=True, default=str))


async def run(args: argparse.Namespace) -> int:
    settings = load_settings(args.env_file)
    server_url = args.server or settings.server_url
    if not server_url:
        print("Missing EXCHANGE_SERVER_URL in environment.", file=sys.stderr)
        return 1

    options = settings.options
    options.log_requests = options.log_requests or args.log_requests
    options.log_responses = options.log_responses or args.log_responses

    client = ExchangeClient(server_url, options)
    try:
        _print_json("Server", await client.server.get_server_info())

        if args.accounts:
            if not settings.has_credentials:
                print("Missing EXCHANGE_EMAIL / EXCHANGE_PASSWORD in environment.", file=sys.stderr)
                return 1
            user = await client.authenticate(settings.email, settings.password)
            if user is None:
                print("Sign-in failed.", file=sys.stderr)
                return 1
            print(f"Signed in as {user.user_name} ({user.user_id})")
            _print_json("Accounts", await client.accounts.list())
    except ExchangeClientError as exc:
        print(f"Request failed: {exc}", file=sys.stderr)
        return 1
    finally:
        client.close()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Query an exchange server.")
    parser.add_argument("--server", help="Server base URL (default: EXCHANGE_SERVER_URL)")
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    parser.add_argument("--accounts", action="store_true", help="Sign in and list the user's accounts.")
    parser.add_argument("--log-requests", action="store_true", help="Log outgoing commands.")
    parser.add_argument("--log-responses", action="store_true", help="Log decoded responses.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
