"""Command-line front end for the GiftHarmony API client."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from .api import GiftHarmonyClient, create_client
from .config import load_env_file
from .errors import RequestFailed


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="giftharmony", description="GiftHarmony shop client")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--env-file", type=Path, help="Read settings from this .env file (default: nearest .env)")
    commands = parser.add_subparsers(dest="command", required=True)

    products = commands.add_parser("products", help="List products")
    products.add_argument("--category")
    products.add_argument("--search")
    products.add_argument("--page", type=int)
    products.add_argument("--limit", type=int)

    product = commands.add_parser("product", help="Show one product")
    product.add_argument("product_id", type=int)

    login = commands.add_parser("login", help="Log in and remember the session token")
    login.add_argument("--email", required=True)
    login.add_argument("--password", required=True)

    commands.add_parser("logout", help="Forget the session token")
    commands.add_parser("me", help="Show the current user")
    commands.add_parser("cart", help="Show the cart")
    commands.add_parser("wishlist", help="Show the wishlist")
    commands.add_parser("orders", help="List orders")
    commands.add_parser("check-db", help="Check the configured database is reachable")
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def run_command(client: GiftHarmonyClient, args: argparse.Namespace) -> Any:
    if args.command == "products":
        return client.get_products(
            category=args.category,
            search=args.search,
            page=args.page,
            limit=args.limit,
        )
    if args.command == "product":
        return client.get_product(args.product_id)
    if args.command == "login":
        return client.login_and_store({"email": args.email, "password": args.password})
    if args.command == "logout":
        client.logout()
        return {"message": "Logged out"}
    if args.command == "me":
        return client.get_current_user()
    if args.command == "cart":
        return client.get_cart()
    if args.command == "wishlist":
        return client.get_wishlist()
    if args.command == "orders":
        return client.get_orders()
    raise ValueError(f"Unknown command: {args.command}")


def check_database() -> int:
    from ..backend import load_database_settings, start_database

    pool, ok = start_database(load_database_settings())
    pool.close()
    return 0 if ok else 1


def main(argv: Sequence[str] | None = None, client: GiftHarmonyClient | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    load_env_file(args.env_file)

    if args.command == "check-db":
        return check_database()

    active_client = client if client is not None else create_client()
    try:
        result = run_command(active_client, args)
    except RequestFailed as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        if client is None:
            active_client.close()

    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
