"""Command-line entry point: match orders read from standard input."""

from __future__ import annotations

import argparse
import sys
from typing import IO, Optional, Sequence

from orderbook.engine import CommandError, match
from orderbook.orders import Trade, TradeReporter


class PrintingReporter(TradeReporter):
    """Writes each trade as a ``TRADE`` line."""

    def __init__(self, out: Optional[IO[str]] = None) -> None:
        self._out = out

    def on_trade(self, trade: Trade) -> None:
        resting, incoming = trade.resting, trade.incoming
        print(
            f"TRADE {resting.order_id} {resting.price} {trade.quantity} "
            f"{incoming.order_id} {incoming.price} {trade.quantity}",
            file=self._out,
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read commands from standard input and print trades and book snapshots."""
    parser = argparse.ArgumentParser(
        prog="orderbook", description="Match orders read from standard input."
    )
    parser.parse_args(argv)
    try:
        match(sys.stdin, PrintingReporter())
    except CommandError as exc:
        print(f"orderbook: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())