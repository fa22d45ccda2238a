"""Command line access to the public Bybit endpoints."""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence

from .client import DEFAULT_BASE_URL, BybitClient
from .errors import BybitError
from .params import AnnouncementParams, KlineParams, SystemStatusParams


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bybitclient", description="Query public Bybit endpoints.")
    parser.add_argument("--base-url", default=DEFAULT_BASE_URL)
    commands = parser.add_subparsers(dest="command", required=True)

    ann = commands.add_parser("announcements", help="list announcements")
    ann.add_argument("--locale", default="en-US")
    ann.add_argument("--type", dest="type_key")
    ann.add_argument("--tag")
    ann.add_argument("--page", type=int)
    ann.add_argument("--limit", type=int)

    kline = commands.add_parser("kline", help="show candlesticks")
    kline.add_argument("symbol", nargs="?", default="BTCUSDT")
    kline.add_argument("interval", nargs="?", default="60")
    kline.add_argument("--category", default="spot")
    kline.add_argument("--start", type=int, default=1700000000000)
    kline.add_argument("--end", type=int)
    kline.add_argument("--limit", type=int, default=10)

    commands.add_parser("market-time", help="show the server time")

    status = commands.add_parser("system-status", help="show maintenance notices")
    status.add_argument("--id")
    status.add_argument("--state")
    return parser


def _row(values: Sequence[str]) -> str:
    return "[" + ", ".join(json.dumps(value) for value in values) + "]"


def _run(client: BybitClient, args: argparse.Namespace) -> None:
    if args.command == "announcements":
        params = AnnouncementParams(args.locale, args.type_key, args.tag, args.page, args.limit)
        result = client.get_announcements(params)
        print(f"total: {result.total}")
        for item in result.list:
            print(f"{item.title} | {item.url}")
    elif args.command == "kline":
        params = KlineParams(args.symbol, args.interval, args.category, args.start, args.end, args.limit)
        kline = client.get_kline(params)
        print(f"{kline.category or 'unknown'} {kline.symbol or 'unknown'}")
        for candle in kline.list:
            print(_row(candle))
    elif args.command == "market-time":
        now = client.get_market_time()
        print(f"timeSecond: {now.time_second}")
        print(f"timeNano: {now.time_nano}")
    else:
        statuses = client.get_system_status(SystemStatusParams(args.id, args.state))
        print(f"system status entries: {len(statuses.list)}")
        for status in statuses.list:
            print(
                f"{status.id} | {status.title} | {status.begin} -> {status.end} "
                f"| env={status.env} | maintainType={status.maintain_type}"
            )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    args = _build_parser().parse_args(argv)
    with BybitClient(args.base_url) as client:
        try:
            _run(client, args)
        except BybitError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())