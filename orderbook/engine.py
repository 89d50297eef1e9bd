"""Reads text commands and drives an order book."""

from __future__ import annotations

import re
from typing import IO, Iterable, List, Optional

from orderbook.book import OrderBook
from orderbook.orders import OrderType, Side, TradeReporter

_INTEGER = re.compile(r"[+-]?\d+")


class CommandError(ValueError):
    """Raised for an unknown command, side or order type."""


def parse_side(text: str) -> Side:
    """Turn ``BUY`` or ``SELL`` into a :class:`Side`."""
    try:
        return Side(text)
    except ValueError:
        raise CommandError(f"Bad side '{text}'") from None


def parse_type(text: str) -> OrderType:
    """Turn ``GFD`` or ``IOC`` into an :class:`OrderType`."""
    try:
        return OrderType(text)
    except ValueError:
        raise CommandError(f"Bad type '{text}'") from None


def _integer(token: str) -> Optional[int]:
    return int(token) if _INTEGER.fullmatch(token) else None


def _padded(tokens: List[str], count: int) -> List[str]:
    return (tokens + [""] * count)[:count]


def _valid(price: Optional[int], quantity: Optional[int], order_id: str) -> bool:
    return price is not None and price > 0 and quantity is not None and quantity > 0 and bool(order_id)


def match(lines: Iterable[str], reporter: TradeReporter, out: Optional[IO[str]] = None) -> None:
    """Run every command in ``lines`` against a fresh book.

    Blank lines and lines starting with ``#`` are skipped, as are orders
    with a missing id or a non-positive price or quantity.
    """
    book = OrderBook(reporter)
    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        command, *rest = line.split()

        if command in ("BUY", "SELL"):
            type_text, price_text, quantity_text, order_id = _padded(rest, 4)
            price, quantity = _integer(price_text), _integer(quantity_text)
            if not _valid(price, quantity, order_id):
                continue
            book.add_order(parse_side(command), parse_type(type_text), price, quantity, order_id)
        elif command == "CANCEL":
            (order_id,) = _padded(rest, 1)
            if order_id:
                book.cancel_order(order_id)
        elif command == "MODIFY":
            order_id, side_text, price_text, quantity_text = _padded(rest, 4)
            price, quantity = _integer(price_text), _integer(quantity_text)
            if not _valid(price, quantity, order_id):
                continue
            book.modify_order(order_id, parse_side(side_text), price, quantity)
        elif command == "PRINT":
            book.print_book(out)
        else:
            raise CommandError(f"Bad command {command} in '{line}'")